"""Resolution of field types for a class under a binding of its type parameters."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence, Tuple

from typing_extensions import get_args, get_origin

from . import _fields, _substitution
from ._binding import Binding
from ._descriptors import ConcreteType, ParameterizedType, TypeDescriptor
from ._errors import ForeignFieldError, UnsupportedTypeError
from ._typing import TypeForm

log = logging.getLogger(__name__)


class TypeResolver:
    """Computes resolved types for the fields declared on a class, given actual types
    for the class's type parameters.

    ```python
    T = TypeVar("T")

    @dataclasses.dataclass
    class Node(Generic[T]):
        data: T
        children: Tuple["Node[T]", ...]

    resolver = TypeResolver(Node, [str])
    resolver.resolve_type(resolver.get_field("data"))
    # => ConcreteType(typ=str)
    resolver.resolve_type(resolver.get_field("children"))
    # => ArrayType(component_type=ParameterizedType(Node, (ConcreteType(str),)))
    ```

    Resolvers are immutable and hold no caches, so a single instance can be shared
    freely between threads.

    Args:
        declaring_class: Class whose fields we want to resolve.
        actual_type_arguments: One actual type per type parameter declared by
            `declaring_class`, in order. Must be empty (or `None`) for non-generic
            classes.

    Raises:
        ArityMismatchError: if the number of actual type arguments doesn't match.
    """

    def __init__(
        self,
        declaring_class: type,
        actual_type_arguments: Optional[Sequence[Any]] = (),
    ) -> None:
        self._binding = Binding(declaring_class, actual_type_arguments)  # type: ignore
        log.debug("Created resolver for %s", self.get_type())

    @classmethod
    def from_alias(cls, typ: TypeForm[Any]) -> TypeResolver:
        """Create a resolver from a subscripted generic alias, like `Node[str]`. Plain
        classes are also accepted.

        Builtin generics like `list[int]` are rejected with `ArityMismatchError`:
        `list` accepts type arguments but has no type parameters to bind them to.
        `ParameterizedType(list, (int,))` describes such a type directly."""
        typ = _substitution.normalize(typ)
        origin = get_origin(typ)
        if origin is None:
            return cls(typ)
        return cls(origin, get_args(typ))

    @property
    def binding(self) -> Binding:
        return self._binding

    @property
    def declaring_class(self) -> type:
        return self._binding.declaring_class

    def get_type(self) -> TypeDescriptor:
        """Descriptor for the declaring class itself, under this resolver's
        binding."""
        if len(self._binding.type_parameters) == 0:
            return ConcreteType(self.declaring_class)
        return ParameterizedType(
            ConcreteType(self.declaring_class), self._binding.actual_type_arguments
        )

    def get_declared_fields(self) -> Tuple[_fields.FieldDefinition, ...]:
        """Fields declared directly on the declaring class, in declaration order.
        Fields marked with `typebind.conf.Suppress` are left out."""
        return tuple(
            field
            for field in _fields.declared_fields(self.declaring_class)
            if not _fields.field_is_suppressed(field)
        )

    def get_field(self, name: str) -> _fields.FieldDefinition:
        """Look up a declared field by name. Suppressed fields can be retrieved this
        way."""
        for field in _fields.declared_fields(self.declaring_class):
            if field.name == name:
                return field
        raise ForeignFieldError(
            f"{self.declaring_class.__qualname__} declares no field named {name!r}"
        )

    def resolve_type(self, field: _fields.FieldDefinition) -> TypeDescriptor:
        """Resolve the declared type of `field`, which must be declared on this
        resolver's class.

        Raises:
            ForeignFieldError: if `field` belongs to a different class.
            UnsupportedTypeError: if the field's type contains a wildcard or another
                unsupported annotation.
        """
        if field.declaring_class is not self.declaring_class:
            raise ForeignFieldError(
                "cannot resolve fields from other classes: field"
                f" {field.name!r} is declared on"
                f" {field.declaring_class.__qualname__}, not"
                f" {self.declaring_class.__qualname__}"
            )

        try:
            out = _substitution.substitute(field.type, self._binding)
        except UnsupportedTypeError as e:
            raise UnsupportedTypeError(
                f"{e.args[0]} (in field {self.declaring_class.__qualname__}.{field.name})"
            ) from e

        log.debug(
            "Resolved %s.%s to %s", self.declaring_class.__qualname__, field.name, out
        )
        return out

    def resolve_fields(self) -> Dict[str, TypeDescriptor]:
        """Resolve every field returned by :meth:`get_declared_fields()`."""
        return {
            field.name: self.resolve_type(field) for field in self.get_declared_fields()
        }

    def __repr__(self) -> str:
        return f"TypeResolver({self.get_type()})"
