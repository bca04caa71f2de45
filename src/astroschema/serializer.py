"""Render classified fields as the JSON-shaped schema the editor consumes."""

from __future__ import annotations

from typing import Any

from astroschema.config import SCHEMA_TYPE
from astroschema.models import SCALAR_KINDS, FieldKind, FieldType, SchemaField


def _array_type(element: FieldType | None) -> str:
    if element is not None and element.kind in SCALAR_KINDS:
        return element.name
    return FieldKind.UNKNOWN.value


def _union_member(member: FieldType) -> str | dict[str, Any]:
    if member.kind in SCALAR_KINDS:
        return member.name
    if member.kind is FieldKind.LITERAL:
        return {"type": FieldKind.LITERAL.value, "value": member.value}
    return FieldKind.UNKNOWN.value


def serialize_field(f: SchemaField) -> dict[str, Any]:
    data: dict[str, Any] = {
        "name": f.name,
        "type": f.type.name,
        "optional": f.optional,
        "default": f.default,
        "constraints": f.constraints.to_dict(),
    }

    kind = f.type.kind
    if kind is FieldKind.ENUM:
        data["options"] = list(f.type.options)
    elif kind is FieldKind.ARRAY:
        data["arrayType"] = _array_type(f.type.element)
    elif kind is FieldKind.UNION:
        data["unionTypes"] = [_union_member(m) for m in f.type.members]
    elif kind is FieldKind.LITERAL:
        data["literalValue"] = f.type.value

    return data


def serialize_schema(fields: list[SchemaField]) -> dict[str, Any] | None:
    """Build ``{"type": "zod", "fields": [...]}`` in field order.

    Returns None for an empty field list so callers treat it like a
    collection without a recognizable schema.
    """
    if not fields:
        return None
    return {
        "type": SCHEMA_TYPE,
        "fields": [serialize_field(f) for f in fields],
    }
