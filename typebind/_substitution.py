"""Substitution of type variables in type annotations.

Everything here is a pure function of its inputs. The binding that supplies actual
types for type variables is passed explicitly through every recursive call."""

from __future__ import annotations

import collections.abc
import dataclasses
import types
import typing
import typing_extensions
from typing import TYPE_CHECKING, Any, Optional, Tuple, TypeVar, Union, cast

from typing_extensions import (
    Annotated,
    ForwardRef,
    TypeAliasType,
    get_args,
    get_origin,
)

from ._descriptors import (
    DESCRIPTOR_TYPES,
    ArrayType,
    ConcreteType,
    ParameterizedType,
    TypeDescriptor,
)
from ._errors import ArityMismatchError, UnsupportedTypeError
from ._typing import TypeForm

if TYPE_CHECKING:
    from ._binding import Binding

# typing_extensions.TypeAliasType and typing.TypeAliasType are not the same
# object in some typing_extensions releases. This can break an isinstance() check we
# use below.
TypeAliasTypeAlternate = getattr(typing, "TypeAliasType", TypeAliasType)

UnionType = getattr(types, "UnionType", Union)
"""Same as types.UnionType, but points to typing.Union for older versions of Python.
types.UnionType is created when the `X | Y` syntax is used for unions."""

# Variadic type parameters can't be bound to a single actual type.
_VARIADIC_TYPE_PARAMETERS: Tuple[type, ...] = tuple(
    t
    for t in (getattr(typing, "ParamSpec", None), getattr(typing, "TypeVarTuple", None))
    if t is not None
)

MetadataType = TypeVar("MetadataType")


def unwrap_annotated(
    typ: Any, search_type: Optional[TypeForm[MetadataType]] = None
) -> Tuple[Any, Tuple[MetadataType, ...]]:
    """Helper for parsing typing.Annotated types.

    Examples:
    - int, int => (int, ())
    - Annotated[int, 1], int => (int, (1,))
    - Annotated[int, "1"], int => (int, ())
    """
    if get_origin(typ) is not Annotated:
        return typ, ()

    args = get_args(typ)
    assert len(args) >= 2

    # Look through metadata for desired metadata type.
    targets = tuple(
        x for x in args[1:] if search_type is not None and isinstance(x, search_type)
    )
    return args[0], targets


def resolve_newtype_and_aliases(typ: Any) -> Any:
    """Replace `NewType` types with their supertypes, and type aliases declared via
    the `type` statement with their values."""
    while True:
        if isinstance(typ, (TypeAliasType, TypeAliasTypeAlternate)):
            typ = cast(TypeAliasType, typ).__value__
            continue

        # `isinstance(x, NewType)` doesn't work on older versions of Python, so we
        # instead do a duck typing-style check.
        if hasattr(typ, "__name__") and hasattr(typ, "__supertype__"):
            typ = getattr(typ, "__supertype__")
            continue

        return typ


def normalize(typ: Any) -> Any:
    """Strip wrappers that don't change the structure of a type: `Annotated[]`
    metadata, `InitVar[]`, `NewType`, and non-generic type aliases."""
    while True:
        prev = typ
        typ = resolve_newtype_and_aliases(typ)
        typ, _ = unwrap_annotated(typ)
        if isinstance(typ, dataclasses.InitVar):
            typ = typ.type
        if typ is prev:
            return typ


def _is_wildcard(typ: Any) -> bool:
    return (
        typ is Any
        or typ is typing_extensions.Any
        or get_origin(typ) in (Union, UnionType)
    )


def substitute(typ: Any, binding: Optional[Binding]) -> TypeDescriptor:
    """Resolve a type annotation into a :data:`TypeDescriptor`.

    Type variables are replaced with the actual types from `binding`. When `binding`
    is `None`, no type variables are allowed; this is how actual type arguments are
    normalized when a binding is constructed.

    Raises:
        UnsupportedTypeError: if `typ` contains a wildcard (`Any`, a union, a type
            variable that `binding` doesn't bind), or any other annotation without a
            structural description. This includes generic classes applied to the
            wrong number of type arguments, like `collections.abc.Mapping[str]`.
    """
    # Descriptors supplied by the caller are already resolved.
    if isinstance(typ, DESCRIPTOR_TYPES):
        return typ

    typ = normalize(typ)

    if typ is None:
        return ConcreteType(type(None))

    if isinstance(typ, TypeVar):
        actual = binding.lookup(typ) if binding is not None else None
        if actual is None:
            raise UnsupportedTypeError(
                f"Wildcard types are not supported: type variable {typ} is not bound"
                + (
                    f" by {binding.declaring_class.__qualname__}"
                    if binding is not None
                    else ""
                )
            )
        return actual

    # Check for wildcards before classes: `typing.Any` is itself a class in newer
    # versions of Python, and so is `typing.Union`.
    if _is_wildcard(typ):
        raise UnsupportedTypeError(f"Wildcard types are not supported: {typ}")

    if isinstance(typ, (str, ForwardRef)):
        raise UnsupportedTypeError(f"Forward reference {typ!r} could not be resolved")

    if _VARIADIC_TYPE_PARAMETERS and isinstance(typ, _VARIADIC_TYPE_PARAMETERS):
        raise UnsupportedTypeError(f"Variadic type parameter {typ} is not supported")

    origin = get_origin(typ)
    if origin is None:
        if isinstance(typ, type):
            return ConcreteType(typ)
        raise UnsupportedTypeError(f"Unsupported type annotation: {typ!r}")

    # Special forms like Literal[], ClassVar[], and parameterized type aliases don't
    # have a class as their origin.
    if not isinstance(origin, type) or origin is collections.abc.Callable:
        raise UnsupportedTypeError(f"Unsupported type annotation: {typ!r}")

    args = get_args(typ)

    # Tuple[T, ...] is our array type.
    if origin is tuple and len(args) == 2 and args[1] is Ellipsis:
        return ArrayType(substitute(args[0], binding))

    # Generic aliases without arguments, like `typing.List`, are raw classes.
    if len(args) == 0:
        return ConcreteType(origin)

    type_arguments = tuple(substitute(arg, binding) for arg in args)
    try:
        return ParameterizedType(ConcreteType(origin), type_arguments)
    except ArityMismatchError as e:
        raise UnsupportedTypeError(f"Malformed type annotation {typ!r}: {e}") from e
