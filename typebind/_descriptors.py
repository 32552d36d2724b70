"""Immutable, structurally comparable descriptions of fully resolved types.

A descriptor is one of:
- :class:`ConcreteType`: a runtime class, like `int` or a non-generic dataclass.
- :class:`ParameterizedType`: a generic class applied to resolved type arguments.
- :class:`ArrayType`: a homogeneous, variable-length sequence of a resolved element
  type. In annotations, this is spelled `Tuple[T, ...]`.

Descriptors are frozen dataclasses, so equality and hashing are structural. This is
what makes them usable as cache keys for encoders and decoders."""

from __future__ import annotations

import collections
import collections.abc
import dataclasses
import typing
from typing import Any, Dict, Optional, Tuple, Union

from typing_extensions import get_origin

from ._errors import ArityMismatchError

# Classes that don't expose `__parameters__`, but still take type arguments. `None`
# means that any number of arguments is accepted.
_BUILTIN_PARAMETER_COUNTS: Dict[Any, Optional[int]] = {
    tuple: None,
    type: 1,
    list: 1,
    set: 1,
    frozenset: 1,
    dict: 2,
    collections.deque: 1,
    collections.defaultdict: 2,
    collections.OrderedDict: 2,
    collections.Counter: 1,
    collections.ChainMap: 2,
    collections.abc.Iterable: 1,
    collections.abc.Iterator: 1,
    collections.abc.Reversible: 1,
    collections.abc.Container: 1,
    collections.abc.Collection: 1,
    collections.abc.Sequence: 1,
    collections.abc.MutableSequence: 1,
    collections.abc.Set: 1,
    collections.abc.MutableSet: 1,
    collections.abc.Mapping: 2,
    collections.abc.MutableMapping: 2,
    collections.abc.KeysView: 1,
    collections.abc.ValuesView: 1,
    collections.abc.ItemsView: 2,
}


def _typing_alias_parameter_counts() -> Dict[Any, Optional[int]]:
    """Parameter counts read from the deprecated aliases in `typing`, keyed by the
    class they alias. For example, `typing.Awaitable` gives `Awaitable => 1`."""
    out: Dict[Any, Optional[int]] = {}
    for name in typing.__all__:
        alias = getattr(typing, name, None)
        origin = get_origin(alias)
        nparams = getattr(alias, "_nparams", None)
        if not isinstance(origin, type) or not isinstance(nparams, int):
            continue
        if nparams < 0 or len(getattr(alias, "_defaults", ())) > 0:
            # Variadic (`Tuple`, `Callable`), or some parameters have defaults.
            out.setdefault(origin, None)
        else:
            out.setdefault(origin, nparams)
    return out


_TYPING_ALIAS_PARAMETER_COUNTS = _typing_alias_parameter_counts()


def declared_parameter_count(typ: Any) -> Optional[int]:
    """Number of type parameters declared by a class. Returns `None` for variadic
    classes like `tuple`, and for classes that accept type arguments without saying
    how many (`queue.Queue`, `os.PathLike`).

    Examples:
    - int => 0
    - list => 1
    - collections.abc.Awaitable => 1
    - class Pair(Generic[A, B]) => 2
    """
    if isinstance(typ, ConcreteType):
        typ = typ.typ
    if typ in _BUILTIN_PARAMETER_COUNTS:
        return _BUILTIN_PARAMETER_COUNTS[typ]
    if typ in _TYPING_ALIAS_PARAMETER_COUNTS:
        return _TYPING_ALIAS_PARAMETER_COUNTS[typ]

    params = getattr(typ, "__parameters__", None)
    # Some classes expose `__parameters__` as a descriptor instead of a tuple.
    if hasattr(params, "__len__"):
        return len(params)  # type: ignore

    # Classes like `queue.Queue` implement `__class_getitem__` directly.
    if hasattr(typ, "__class_getitem__"):
        return None
    return 0


def _type_name(typ: type) -> str:
    if typ is type(None):
        return "None"
    return typ.__qualname__


@dataclasses.dataclass(frozen=True)
class ConcreteType:
    """A runtime class that needs no further substitution."""

    typ: type

    def __post_init__(self) -> None:
        if not isinstance(self.typ, type):
            raise TypeError(f"ConcreteType expects a class, but got {self.typ!r}")

    def to_annotation(self) -> Any:
        return self.typ

    def __str__(self) -> str:
        return _type_name(self.typ)


@dataclasses.dataclass(frozen=True)
class ParameterizedType:
    """A generic class applied to a sequence of resolved type arguments.

    Plain classes are accepted anywhere a descriptor is expected, and are wrapped in
    :class:`ConcreteType`:

    ```python
    ParameterizedType(dict, (str, int)) == ParameterizedType(
        ConcreteType(dict), [ConcreteType(str), ConcreteType(int)]
    )
    ```
    """

    raw_type: ConcreteType
    type_arguments: Tuple[TypeDescriptor, ...]

    def __post_init__(self) -> None:
        raw_type = self.raw_type
        if not isinstance(raw_type, ConcreteType):
            raw_type = ConcreteType(raw_type)
        type_arguments = tuple(_coerce(arg) for arg in self.type_arguments)

        expected = declared_parameter_count(raw_type)
        if expected is not None and expected != len(type_arguments):
            raise ArityMismatchError(
                f"{raw_type} declares {expected} type parameter(s), but got"
                f" {len(type_arguments)} type argument(s):"
                f" {', '.join(map(str, type_arguments))}"
            )

        object.__setattr__(self, "raw_type", raw_type)
        object.__setattr__(self, "type_arguments", type_arguments)

    def to_annotation(self) -> Any:
        """Convert back to a subscripted alias, eg `list[int]` or `Node[str]`."""
        args = tuple(arg.to_annotation() for arg in self.type_arguments)
        return self.raw_type.typ[args]  # type: ignore

    def __str__(self) -> str:
        if len(self.type_arguments) == 0:
            return f"{self.raw_type}[()]"
        return f"{self.raw_type}[{', '.join(map(str, self.type_arguments))}]"


@dataclasses.dataclass(frozen=True)
class ArrayType:
    """A variable-length, homogeneous sequence of `component_type`."""

    component_type: TypeDescriptor

    def __post_init__(self) -> None:
        object.__setattr__(self, "component_type", _coerce(self.component_type))

    def to_annotation(self) -> Any:
        return Tuple[self.component_type.to_annotation(), ...]  # type: ignore

    def __str__(self) -> str:
        return f"Tuple[{self.component_type}, ...]"


TypeDescriptor = Union[ConcreteType, ParameterizedType, ArrayType]

DESCRIPTOR_TYPES = (ConcreteType, ParameterizedType, ArrayType)


def _coerce(typ: Any) -> TypeDescriptor:
    if isinstance(typ, DESCRIPTOR_TYPES):
        return typ
    if isinstance(typ, type):
        return ConcreteType(typ)
    raise TypeError(
        f"Expected a class or a type descriptor, but got {typ!r}. Generic type"
        " annotations should be resolved with a TypeResolver first."
    )
