from typing import TYPE_CHECKING, Any, TypeVar

from typing_extensions import Annotated

# Note that all Annotated[T, None] values are just for static checkers. The real marker
# singletons are instantiated dynamically below.

T = TypeVar("T")

Suppress = Annotated[T, None]
"""A field annotated as `Suppress[T]` is left out of
`TypeResolver.get_declared_fields()` and `TypeResolver.resolve_fields()`. It can still
be resolved explicitly, via `TypeResolver.get_field()`."""


# Dynamically generate marker singletons.
# These can be used one of two ways:
# - Marker[T]
# - Annotated[T, Marker]


class _Marker:
    _instances: "dict[str, _Marker]" = {}

    def __new__(cls, description: str) -> "_Marker":
        it = cls._instances.get(description)
        if it is None:
            it = object.__new__(cls)
            it._description = description
            cls._instances[description] = it
        return it

    def __getitem__(self, key):
        return Annotated[key, self]  # type: ignore

    def __repr__(self) -> str:
        return f"typebind.conf.{self._description}"


Marker = Any


if not TYPE_CHECKING:
    _dynamic_marker_types = {}
    for k, v in dict(globals()).items():
        if v == Annotated[T, None]:
            _dynamic_marker_types[k] = _Marker(k)
    globals().update(_dynamic_marker_types)
    del _dynamic_marker_types
