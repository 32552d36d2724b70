from typing import Dict, Generic, Tuple, TypeVar

import attrs

from typebind import ArrayType, ConcreteType, ParameterizedType, TypeResolver

K = TypeVar("K")
V = TypeVar("V")


@attrs.define(slots=False)
class Index(Generic[K, V]):
    entries: Dict[K, Tuple[V, ...]]
    default: V
    label: str = "index"


def test_attrs_class() -> None:
    resolver = TypeResolver(Index, [str, float])
    assert resolver.resolve_fields() == {
        "entries": ParameterizedType(dict, (str, ArrayType(float))),
        "default": ConcreteType(float),
        "label": ConcreteType(str),
    }


def test_attrs_alias() -> None:
    resolver = TypeResolver.from_alias(Index[int, bytes])
    assert resolver.get_type() == ParameterizedType(Index, (int, bytes))
