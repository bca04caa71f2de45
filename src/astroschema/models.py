"""Data model for extracted content collection schemas."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


class FieldKind(str, Enum):
    """Closed taxonomy of recognized zod value kinds."""

    STRING = "String"
    NUMBER = "Number"
    BOOLEAN = "Boolean"
    DATE = "Date"
    ARRAY = "Array"
    ENUM = "Enum"
    UNION = "Union"
    LITERAL = "Literal"
    OBJECT = "Object"
    UNKNOWN = "Unknown"


SCALAR_KINDS = frozenset(
    {FieldKind.STRING, FieldKind.NUMBER, FieldKind.BOOLEAN, FieldKind.DATE}
)


@dataclass(frozen=True)
class FieldType:
    """A field's type. Payload attributes are only set for their kind.

    ``element`` and ``members`` hold one nested level; nested objects are
    recognized but their fields are never parsed, so ``fields`` stays empty.
    """

    kind: FieldKind
    element: FieldType | None = None  # Array
    options: tuple[str, ...] = ()  # Enum
    members: tuple[FieldType, ...] = ()  # Union
    value: str | None = None  # Literal
    fields: tuple[SchemaField, ...] = ()  # Object

    @classmethod
    def array(cls, element: FieldType) -> FieldType:
        return cls(FieldKind.ARRAY, element=element)

    @classmethod
    def enum(cls, options: list[str] | tuple[str, ...]) -> FieldType:
        return cls(FieldKind.ENUM, options=tuple(options))

    @classmethod
    def union(
        cls, members: list[FieldType] | tuple[FieldType, ...]
    ) -> FieldType:
        return cls(FieldKind.UNION, members=tuple(members))

    @classmethod
    def literal(cls, value: str) -> FieldType:
        return cls(FieldKind.LITERAL, value=value)

    @classmethod
    def object(cls) -> FieldType:
        return cls(FieldKind.OBJECT)

    @property
    def name(self) -> str:
        return self.kind.value


STRING = FieldType(FieldKind.STRING)
NUMBER = FieldType(FieldKind.NUMBER)
BOOLEAN = FieldType(FieldKind.BOOLEAN)
DATE = FieldType(FieldKind.DATE)
UNKNOWN = FieldType(FieldKind.UNKNOWN)


# attribute name -> serialized key, in serialization order
_CONSTRAINT_KEYS: tuple[tuple[str, str], ...] = (
    ("min", "min"),
    ("max", "max"),
    ("length", "length"),
    ("min_length", "minLength"),
    ("max_length", "maxLength"),
    ("regex", "regex"),
    ("includes", "includes"),
    ("starts_with", "startsWith"),
    ("ends_with", "endsWith"),
    ("url", "url"),
    ("email", "email"),
    ("uuid", "uuid"),
    ("cuid", "cuid"),
    ("cuid2", "cuid2"),
    ("ulid", "ulid"),
    ("emoji", "emoji"),
    ("ip", "ip"),
    ("trim", "trim"),
    ("to_lower_case", "toLowerCase"),
    ("to_upper_case", "toUpperCase"),
    ("transform", "transform"),
    ("refine", "refine"),
    ("literal", "literal"),
)


@dataclass
class Constraints:
    """Modifiers found on a field's builder chain.

    Every attribute defaults to absent (None) or False; a set attribute
    means the matching modifier appeared in the field's source.
    """

    min: int | None = None
    max: int | None = None
    min_length: int | None = None
    max_length: int | None = None
    length: int | None = None
    regex: str | None = None  # "/pattern/flags" verbatim
    url: bool = False
    email: bool = False
    uuid: bool = False
    cuid: bool = False
    cuid2: bool = False
    ulid: bool = False
    emoji: bool = False
    ip: bool = False
    trim: bool = False
    to_lower_case: bool = False
    to_upper_case: bool = False
    includes: str | None = None
    starts_with: str | None = None
    ends_with: str | None = None
    transform: str | None = None  # "integer", "astro-image"
    refine: str | None = None
    literal: str | None = None

    def is_empty(self) -> bool:
        return not self.to_dict()

    def to_dict(self) -> dict[str, Any]:
        """Present attributes only, camelCase keys, fixed key order."""
        out: dict[str, Any] = {}
        for attr, key in _CONSTRAINT_KEYS:
            value = getattr(self, attr)
            if value is None or value is False:
                continue
            out[key] = value
        return out


@dataclass
class SchemaField:
    """One field declared in a collection's ``z.object({...})``."""

    name: str
    type: FieldType
    optional: bool = False
    default: str | None = None  # raw source text, quotes trimmed
    constraints: Constraints = field(default_factory=Constraints)


@dataclass
class Collection:
    """A content collection backed by a directory under the content dir."""

    name: str
    path: Path
    schema: dict[str, Any] | None = None

    @property
    def schema_json(self) -> str | None:
        """Compact JSON for the schema, byte-stable for identical input."""
        if self.schema is None:
            return None
        return json.dumps(
            self.schema, separators=(",", ":"), ensure_ascii=False
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "path": str(self.path),
            "schema": self.schema,
        }
