"""Serialization of metadata records to JSON-compatible dicts."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from .metadata import (
    EnumErrorMetadata,
    EnumMetadata,
    FieldMetadata,
    Metadata,
    VariantMetadata,
)

if TYPE_CHECKING:
    from .collector import InterfaceCollector


def _field_to_dict(f: FieldMetadata) -> dict[str, object]:
    return {
        "name": f.name,
        "ty": f.ty,
        "default": f.default,
        "docstring": f.docstring,
    }


def _variant_to_dict(v: VariantMetadata) -> dict[str, object]:
    return {
        "name": v.name,
        "discr": v.discr,
        "fields": [_field_to_dict(f) for f in v.fields],
        "docstring": v.docstring,
    }


def enum_to_dict(e: EnumMetadata) -> dict[str, object]:
    return {
        "module_path": e.module_path,
        "name": e.name,
        "variants": [_variant_to_dict(v) for v in e.variants],
        "non_exhaustive": e.non_exhaustive,
        "docstring": e.docstring,
    }


def metadata_to_dict(item: Metadata) -> dict[str, object]:
    """Wrap a record in its tag: {"enum": {...}} or {"error": {"enum": {...}, "is_flat": ...}}."""
    if isinstance(item, EnumMetadata):
        return {"enum": enum_to_dict(item)}
    if isinstance(item, EnumErrorMetadata):
        return {"error": {item.kind: enum_to_dict(item.enum_), "is_flat": item.is_flat}}
    raise TypeError("cannot serialize " + type(item).__name__)


def items_to_dict(ci: InterfaceCollector) -> dict[str, object]:
    """Everything registered in a collector, in registration order."""
    return {
        "namespace": ci.namespace,
        "module_path": ci.module_path(),
        "items": [metadata_to_dict(item) for item in ci.items],
    }


def to_json(obj: object) -> str:
    """Serialize to pretty-printed JSON."""
    return json.dumps(obj, indent=2)
