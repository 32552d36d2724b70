import collections.abc
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar, Union

import pytest
from typing_extensions import Literal

from typebind import (
    ArityMismatchError,
    ConcreteType,
    ParameterizedType,
    TypeResolutionError,
    TypeResolver,
    UnsupportedTypeError,
)

T = TypeVar("T")
Foreign = TypeVar("Foreign")


class Unsupported(Generic[T]):
    any_value: Any
    optional_value: Optional[T]
    union_value: Union[int, T]
    pipe_union_value: T | None
    nested_any: Dict[str, List[Any]]
    foreign_type_variable: List[Foreign]
    literal_value: Literal["a", "b"]
    callback: Callable[[T], None]
    short_mapping: collections.abc.Mapping[T]  # type: ignore


class Supported(Generic[T]):
    raw_list: List
    none_value: None
    type_value: type[T]
    fixed_tuple: tuple[int, T]


@pytest.mark.parametrize(
    "name",
    [
        "any_value",
        "optional_value",
        "union_value",
        "pipe_union_value",
        "nested_any",
        "foreign_type_variable",
    ],
)
def test_wildcards_rejected(name: str) -> None:
    resolver = TypeResolver(Unsupported, [str])
    with pytest.raises(UnsupportedTypeError, match="Wildcard types are not supported"):
        resolver.resolve_type(resolver.get_field(name))


@pytest.mark.parametrize("name", ["literal_value", "callback"])
def test_unsupported_forms_rejected(name: str) -> None:
    resolver = TypeResolver(Unsupported, [str])
    with pytest.raises(UnsupportedTypeError, match=name):
        resolver.resolve_type(resolver.get_field(name))


def test_errors_share_base_class() -> None:
    assert issubclass(UnsupportedTypeError, TypeResolutionError)
    assert issubclass(ArityMismatchError, TypeResolutionError)

    resolver = TypeResolver(Unsupported, [str])
    with pytest.raises(TypeResolutionError):
        resolver.resolve_fields()


def test_other_forms_resolved() -> None:
    resolver = TypeResolver(Supported, [bytes])
    assert resolver.resolve_fields() == {
        "raw_list": ConcreteType(list),
        "none_value": ConcreteType(type(None)),
        "type_value": ParameterizedType(type, (bytes,)),
        "fixed_tuple": ParameterizedType(tuple, (int, bytes)),
    }


def test_wrong_argument_count_in_annotation_rejected() -> None:
    # `collections.abc` classes accept any arguments at runtime.
    resolver = TypeResolver(Unsupported, [str])
    with pytest.raises(UnsupportedTypeError, match="Malformed type annotation"):
        resolver.resolve_type(resolver.get_field("short_mapping"))
    with pytest.raises(UnsupportedTypeError, match="declares 2 type parameter"):
        resolver.resolve_type(resolver.get_field("short_mapping"))
