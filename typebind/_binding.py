from __future__ import annotations

import dataclasses
from typing import Any, Optional, Sequence, Tuple, TypeVar

from . import _substitution
from ._descriptors import TypeDescriptor, declared_parameter_count
from ._errors import ArityMismatchError


def type_parameters(cls: type) -> Tuple[TypeVar, ...]:
    """Type parameters declared by a class, in declaration order. Empty for
    non-generic classes."""
    params = getattr(cls, "__parameters__", ())
    # The __len__ check guards against classes that expose `__parameters__` as a
    # descriptor rather than a tuple.
    if not hasattr(params, "__len__"):
        return ()
    return tuple(params)


@dataclasses.dataclass(frozen=True)
class Binding:
    """Ordered association between the type parameters declared by a class and the
    actual types supplied for them.

    Actual types can be classes, type annotations without free type variables (eg
    `List[int]`), or type descriptors. They're normalized to descriptors on
    construction."""

    declaring_class: type
    actual_type_arguments: Tuple[TypeDescriptor, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.declaring_class, type):
            raise TypeError(
                f"Expected a class, but got {self.declaring_class!r}. Use"
                " TypeResolver.from_alias() for subscripted generic aliases."
            )

        actual: Sequence[Any] = (
            ()
            if self.actual_type_arguments is None
            else tuple(self.actual_type_arguments)
        )
        params = self.type_parameters
        if len(params) == 0 and len(actual) > 0 and declared_parameter_count(
            self.declaring_class
        ) != 0:
            # Eg `list`, which takes type arguments but has no `__parameters__`.
            raise ArityMismatchError(
                f"{self.declaring_class.__qualname__} accepts type arguments, but"
                " declares no type parameters that they can be bound to. Only"
                " generic classes with `__parameters__` can be bound; use"
                f" ParameterizedType({self.declaring_class.__qualname__}, ...) to"
                " describe the type itself."
            )
        if len(actual) != len(params):
            raise ArityMismatchError(
                "actual_type_arguments must be same length as class' type parameters:"
                f" {self.declaring_class.__qualname__} declares {len(params)}"
                f" ({', '.join(map(str, params))}), but got {len(actual)}"
            )

        object.__setattr__(
            self,
            "actual_type_arguments",
            tuple(_substitution.substitute(arg, None) for arg in actual),
        )

    @property
    def type_parameters(self) -> Tuple[TypeVar, ...]:
        return type_parameters(self.declaring_class)

    def lookup(self, typevar: TypeVar) -> Optional[TypeDescriptor]:
        """Actual type bound to `typevar`, or `None` if the declaring class doesn't
        declare it."""
        for param, actual in zip(self.type_parameters, self.actual_type_arguments):
            if param == typevar:
                return actual
        return None
