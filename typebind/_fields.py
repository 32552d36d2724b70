"""Abstractions for pulling out the fields declared directly on a class."""

from __future__ import annotations

import dataclasses
import inspect
import logging
import sys
from typing import Any, ClassVar, Dict, Tuple

from typing_extensions import get_origin, get_type_hints

from . import _binding, _substitution, _unsafe_cache
from ._typing import TypeForm
from .conf import _markers

log = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class FieldDefinition:
    name: str
    declaring_class: type
    type: TypeForm[Any]
    """Declared type of this field, with forward references resolved. `Annotated[]`
    metadata is kept; `InitVar[]` is stripped."""

    @property
    def markers(self) -> Tuple[Any, ...]:
        _, markers = _substitution.unwrap_annotated(self.type, _markers._Marker)
        return markers


def _is_classvar(typ: Any) -> bool:
    typ, _ = _substitution.unwrap_annotated(typ)
    return typ is ClassVar or get_origin(typ) is ClassVar


def _own_annotations(cls: type) -> Dict[str, Any]:
    if sys.version_info >= (3, 14):
        import annotationlib

        # Undefined names become `ForwardRef` objects instead of raising.
        return inspect.get_annotations(cls, format=annotationlib.Format.FORWARDREF)
    return inspect.get_annotations(cls)


def _local_namespace(cls: type) -> Dict[str, Any]:
    """Names visible to annotations in the body of `cls`, beyond the globals of its
    module. This lets classes defined inside functions refer to themselves."""
    localns: Dict[str, Any] = dict(vars(cls))
    for param in _binding.type_parameters(cls) + tuple(
        getattr(cls, "__type_params__", ())
    ):
        localns[param.__name__] = param
    localns[cls.__name__] = cls
    return localns


def _resolve_annotation(
    cls: type, name: str, annotation: Any, localns: Dict[str, Any]
) -> Any:
    """Evaluate forward references in a single annotation. If they can't be
    evaluated, the annotation is returned as-is; the error is reported when the
    field's type is resolved."""
    holder = type(
        cls.__name__,
        (),
        {"__module__": cls.__module__, "__annotations__": {name: annotation}},
    )
    try:
        return get_type_hints(holder, localns=localns, include_extras=True)[name]
    except (NameError, AttributeError, SyntaxError) as e:
        log.debug(
            "Could not evaluate annotation of %s.%s: %s", cls.__qualname__, name, e
        )
        return annotation


@_unsafe_cache.unsafe_cache(maxsize=1024)
def declared_fields(cls: type) -> Tuple[FieldDefinition, ...]:
    """Fields declared in the body of `cls`, in declaration order.

    Unlike `dataclasses.fields()`, inherited fields are not included: a field belongs
    to exactly one class. `ClassVar` annotations are skipped. Forward references are
    evaluated one field at a time, against the module that defines `cls`, the class
    body, and the class itself; a reference that can't be evaluated only breaks the
    field it appears in."""
    if not isinstance(cls, type):
        raise TypeError(f"Expected a class, but got {cls!r}")

    # Own annotations only; these may still be strings.
    own_annotations = _own_annotations(cls)
    if len(own_annotations) == 0:
        return ()

    localns = _local_namespace(cls)
    fields = []
    for name, annotation in own_annotations.items():
        typ = _resolve_annotation(cls, name, annotation, localns)
        if _is_classvar(typ):
            continue
        if isinstance(typ, dataclasses.InitVar):
            typ = typ.type
        fields.append(FieldDefinition(name=name, declaring_class=cls, type=typ))
    return tuple(fields)


def field_is_suppressed(field: FieldDefinition) -> bool:
    return _markers.Suppress in field.markers
