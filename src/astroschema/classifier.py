"""Classify zod builder chains into field types and constraints.

Each rule table is an ordered list of ``(pattern, handler)`` pairs; the
first pattern that matches wins. Order matters: ``z.optional(z.string())``
contains ``z.string()``, so wrappers are tried before base builders.
"""

from __future__ import annotations

import re
from collections.abc import Callable

import structlog

from astroschema.config import DEFAULT_MAX_DEPTH
from astroschema.fields import field_name
from astroschema.models import (
    BOOLEAN,
    DATE,
    NUMBER,
    STRING,
    UNKNOWN,
    Constraints,
    FieldType,
    SchemaField,
)
from astroschema.regions import find_balanced_end

logger = structlog.get_logger(__name__)

Classified = tuple[FieldType, Constraints]
Handler = Callable[[str, re.Match[str], int], Classified]

_WS_RE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Collapse newlines and runs of whitespace to single spaces."""
    return _WS_RE.sub(" ", text).strip()


def _unquote(value: str) -> str:
    return value.strip().strip('"').strip("'")


_ESCAPE_RE = re.compile(r"\\(.)")


def _unescape(value: str) -> str:
    return _ESCAPE_RE.sub(r"\1", value)


def _call_argument(text: str, match: re.Match[str]) -> str | None:
    """Inner text of the call whose opening paren ends ``match``.

    Parens inside quoted strings are skipped. A quote that never closes
    (``.regex(/it's/)``) falls back to counting every paren.
    """
    start = match.end() - 1
    end = find_balanced_end(text, start, quotes=True)
    if end is None:
        end = find_balanced_end(text, start)
    if end is None:
        return None
    return text[start + 1 : end - 1].strip()


def _bracket_items(text: str) -> list[str] | None:
    """Split the leading ``[...]`` of ``text`` on top-level commas."""
    start = text.find("[")
    if start == -1:
        return None
    end = find_balanced_end(text, start, quotes=True)
    if end is None:
        return None
    inner = text[start + 1 : end - 1]

    items: list[str] = []
    depth = 0
    quote: str | None = None
    current: list[str] = []
    escaped = False
    for ch in inner:
        if quote is not None:
            current.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                quote = None
            continue
        if ch in ("'", '"', "`"):
            quote = ch
        elif ch in "([{":
            depth += 1
        elif ch in ")]}":
            depth -= 1
        elif ch == "," and depth == 0:
            items.append("".join(current).strip())
            current = []
            continue
        current.append(ch)
    items.append("".join(current).strip())
    return [item for item in items if item]


# ---------------------------------------------------------------------------
# Constraint Extraction
# ---------------------------------------------------------------------------

# .min(1) and .min(1, { message: "..." })
_ARG_TAIL = r"\s*(?:,[^)]*)?\)"

STRING_LENGTH_PATTERNS = [
    ("min_length", re.compile(rf"\.min\s*\(\s*(\d+){_ARG_TAIL}")),
    ("max_length", re.compile(rf"\.max\s*\(\s*(\d+){_ARG_TAIL}")),
    ("length", re.compile(rf"\.length\s*\(\s*(\d+){_ARG_TAIL}")),
]

STRING_TEXT_PATTERNS = [
    ("includes", re.compile(r"""\.includes\s*\(\s*["']([^"']+)["']""")),
    ("starts_with", re.compile(r"""\.startsWith\s*\(\s*["']([^"']+)["']""")),
    ("ends_with", re.compile(r"""\.endsWith\s*\(\s*["']([^"']+)["']""")),
]

STRING_FLAG_PATTERNS = [
    (attr, re.compile(rf"\.{method}\s*\("))
    for attr, method in (
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
    )
]

# .regex(/^[a-z0-9-]+$/i) -> "/^[a-z0-9-]+$/i"
REGEX_PATTERN = re.compile(r"\.regex\s*\(\s*/((?:\\.|[^/\\\n])+)/([dgimsuvy]*)")

NUMBER_BOUND_PATTERNS = [
    ("min", re.compile(rf"\.(?:min|gte)\s*\(\s*(-?\d+){_ARG_TAIL}")),
    ("max", re.compile(rf"\.(?:max|lte)\s*\(\s*(-?\d+){_ARG_TAIL}")),
]

# applied after the literal bounds, in this order
NUMBER_SIGN_PATTERNS = [
    (re.compile(r"\.positive\s*\("), "min", 1),
    (re.compile(r"\.negative\s*\("), "max", -1),
    (re.compile(r"\.nonnegative\s*\("), "min", 0),
    (re.compile(r"\.nonpositive\s*\("), "max", 0),
]

INT_PATTERN = re.compile(r"\.int\s*\(")


def string_constraints(chain: str) -> Constraints:
    """Length bounds, pattern, format flags and affixes of a string chain."""
    c = Constraints()
    for attr, pattern in STRING_LENGTH_PATTERNS:
        match = pattern.search(chain)
        if match:
            setattr(c, attr, int(match.group(1)))

    match = REGEX_PATTERN.search(chain)
    if match:
        c.regex = f"/{match.group(1)}/{match.group(2)}"

    for attr, pattern in STRING_FLAG_PATTERNS:
        if pattern.search(chain):
            setattr(c, attr, True)

    for attr, pattern in STRING_TEXT_PATTERNS:
        match = pattern.search(chain)
        if match:
            setattr(c, attr, match.group(1))
    return c


def number_constraints(chain: str) -> Constraints:
    """Value bounds of a number chain; ``.int()`` becomes a transform."""
    c = Constraints()
    for attr, pattern in NUMBER_BOUND_PATTERNS:
        match = pattern.search(chain)
        if match:
            setattr(c, attr, int(match.group(1)))

    if INT_PATTERN.search(chain):
        c.transform = "integer"

    for pattern, attr, value in NUMBER_SIGN_PATTERNS:
        if pattern.search(chain):
            setattr(c, attr, value)
    return c


# ---------------------------------------------------------------------------
# Rule Tables
# ---------------------------------------------------------------------------


def _compile(
    rules: list[tuple[str, Handler]],
) -> list[tuple[re.Pattern, Handler]]:
    return [(re.compile(p), fn) for p, fn in rules]


def _apply(
    rules: list[tuple[re.Pattern, Handler]],
    expr: str,
    depth: int,
    fallback: FieldType = UNKNOWN,
) -> Classified:
    if depth <= 0:
        return UNKNOWN, Constraints()
    for pattern, handler in rules:
        match = pattern.search(expr)
        if match:
            return handler(expr, match, depth)
    return fallback, Constraints()


def _fixed(field_type: FieldType) -> Handler:
    """Handler that always yields ``field_type`` with no constraints."""
    return lambda expr, match, depth: (field_type, Constraints())


def _string(expr: str, match: re.Match[str], depth: int) -> Classified:
    return STRING, string_constraints(expr[match.start() :])


def _number(expr: str, match: re.Match[str], depth: int) -> Classified:
    return NUMBER, number_constraints(expr[match.start() :])


def _literal_value(expr: str, match: re.Match[str]) -> str:
    arg = _call_argument(expr, match)
    if arg is None:
        return "unknown"
    quoted = re.match(r"""^["']([^"']+)["']$""", arg)
    if quoted:
        return quoted.group(1)
    return arg or "unknown"


def _literal(expr: str, match: re.Match[str], depth: int) -> Classified:
    return FieldType.literal(_literal_value(expr, match)), Constraints()


# Builders recognized inside z.optional(...) and z.array(...). Anchored so
# z.object({ a: z.string() }) is not read as its first nested builder.
WRAPPED_RULES = _compile(
    [
        (r"^z\.(?:coerce\.)?string\s*\(", _string),
        (r"^z\.(?:coerce\.)?number\s*\(", _number),
        (r"^z\.(?:coerce\.)?boolean\s*\(", _fixed(BOOLEAN)),
        (r"^z\.(?:coerce\.)?date\s*\(", _fixed(DATE)),
    ]
)

# Members of z.union([...])
UNION_MEMBER_RULES = WRAPPED_RULES + _compile(
    [
        (r"z\.literal\s*\(", _literal),
        (r"null", _fixed(FieldType.literal("null"))),
        (r"undefined", _fixed(FieldType.literal("undefined"))),
    ]
)


def _optional(expr: str, match: re.Match[str], depth: int) -> Classified:
    inner = _call_argument(expr, match)
    if inner is None:
        return UNKNOWN, Constraints()
    return _apply(WRAPPED_RULES, inner, depth - 1)


def _array(expr: str, match: re.Match[str], depth: int) -> Classified:
    inner = _call_argument(expr, match) or ""
    element, _ = _apply(WRAPPED_RULES, inner, depth - 1, fallback=STRING)
    return FieldType.array(element), Constraints()


def _enum(expr: str, match: re.Match[str], depth: int) -> Classified:
    arg = _call_argument(expr, match) or ""
    items = _bracket_items(arg) or []
    options = [_unescape(_unquote(item)) for item in items]
    return FieldType.enum([o for o in options if o]), Constraints()


def _union(expr: str, match: re.Match[str], depth: int) -> Classified:
    arg = _call_argument(expr, match) or ""
    members = [
        _apply(UNION_MEMBER_RULES, item, depth - 1)[0]
        for item in _bracket_items(arg) or []
    ]
    return FieldType.union(members), Constraints()


def _image(expr: str, match: re.Match[str], depth: int) -> Classified:
    return STRING, Constraints(transform="astro-image")


# Top-level field rules, in priority order
FIELD_TYPE_RULES: list[tuple[str, Handler]] = [
    # z.optional(z.string().min(1))
    (r"z\.optional\s*\(", _optional),
    # z.array(z.string())
    (r"z\.array\s*\(", _array),
    # z.enum(['a', 'b'])
    (r"z\.enum\s*\(", _enum),
    # z.union([z.string(), z.null()])
    (r"z\.union\s*\(", _union),
    # z.literal('blog')
    (r"z\.literal\s*\(", _literal),
    # z.object({...}) - recognized, fields not parsed
    (r"z\.object\s*\(", _fixed(FieldType.object())),
    # z.coerce.date() / z.date()
    (r"z\.(?:coerce\.)?date\s*\(\s*\)", _fixed(DATE)),
    # z.string().min(1).max(100)
    (r"z\.(?:coerce\.)?string\s*\(\s*\)", _string),
    # z.number().int().positive()
    (r"z\.(?:coerce\.)?number\s*\(\s*\)", _number),
    # z.boolean()
    (r"z\.(?:coerce\.)?boolean\s*\(\s*\)", _fixed(BOOLEAN)),
    # image() from the schema function's helpers
    (r"(?<![\w$.])image\s*\(\s*\)", _image),
]


# ---------------------------------------------------------------------------
# Field Classifier
# ---------------------------------------------------------------------------

OPTIONAL_RE = re.compile(r"\.optional\s*\(|z\.optional\s*\(|\.nullish\s*\(")
DEFAULT_RE = re.compile(r"\.default\s*\(")


class FieldClassifier:
    """Turns one field chunk (``name: <builder chain>``) into a SchemaField."""

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH, log=None):
        self.max_depth = max_depth
        self.log = log if log is not None else logger
        self.rules = _compile(FIELD_TYPE_RULES)

    def classify_type(
        self, expr: str, max_depth: int | None = None
    ) -> Classified:
        """Classify a builder chain; Unknown once ``max_depth`` runs out."""
        depth = self.max_depth if max_depth is None else max_depth
        return _apply(self.rules, normalize(expr), depth)

    def classify(self, chunk: str, schema_text: str = "") -> SchemaField | None:
        """Classify a field chunk.

        Args:
            chunk: Raw text from the field splitter.
            schema_text: Whole ``z.object`` body, searched for the default
                value when the chunk alone does not hold a complete
                ``.default(...)`` call.

        Returns:
            The field, or None if the chunk has no ``name:`` prefix.
        """
        definition = normalize(chunk).rstrip(",").strip()
        name = field_name(definition)
        if name is None:
            return None

        expr = definition.split(":", 1)[1].strip()
        field_type, constraints = self.classify_type(expr)

        has_default = DEFAULT_RE.search(expr) is not None
        optional = has_default or OPTIONAL_RE.search(expr) is not None
        default = None
        if has_default:
            default = extract_default_value(expr, schema_text, name)

        self.log.debug(
            "field classified",
            field=name,
            type=field_type.name,
            optional=optional,
        )
        return SchemaField(
            name=name,
            type=field_type,
            optional=optional,
            default=default,
            constraints=constraints,
        )


def extract_default_value(expr: str, schema_text: str, name: str) -> str | None:
    """Raw default value of a field, surrounding quotes trimmed.

    Looks at the field's own chain first, then for ``name: ... .default(x)``
    on one line of the full schema text.
    """
    match = DEFAULT_RE.search(expr)
    if match:
        value = _call_argument(expr, match)
        if value:
            return _unquote(value)

    fallback = re.search(
        rf"(?<![\w$]){re.escape(name)}\s*:[^\n]*?"
        r"\.default\s*\(\s*([^)\n]+?)\s*\)",
        schema_text,
    )
    if fallback:
        return _unquote(fallback.group(1))
    return None


def classify_type(expr: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Classified:
    """Module-level shortcut for :meth:`FieldClassifier.classify_type`."""
    return FieldClassifier(max_depth=max_depth).classify_type(expr)


def classify_field(
    chunk: str,
    schema_text: str = "",
    max_depth: int = DEFAULT_MAX_DEPTH,
    log=None,
) -> SchemaField | None:
    """Module-level shortcut for :meth:`FieldClassifier.classify`."""
    return FieldClassifier(max_depth=max_depth, log=log).classify(
        chunk, schema_text
    )
