"""Split a ``z.object({...})`` body into one text chunk per field.

The split is line oriented: a field starts on a ``name:`` line and keeps
absorbing lines while its parenthesis depth is positive. Chained calls on
following lines (``.min(5)``) attach to the field they continue. Several
fields sharing one line (``{ title: z.string(), draft: z.boolean() }``) are
separated at top-level commas first. This is not full bracket matching; a
multi-line string default holding unbalanced parentheses will throw the
depth off.
"""

from __future__ import annotations

import re

FIELD_START_RE = re.compile(r"""^["']?([A-Za-z_$][\w$-]*)["']?\??\s*:""")


def _paren_delta(line: str) -> int:
    return line.count("(") - line.count(")")


def _split_line_fields(line: str) -> list[str]:
    """Split a line holding several ``name: expr`` fields at top-level commas.

    Each piece keeps its comma. The line is returned whole unless every
    piece starts with a field name.
    """
    pieces: list[str] = []
    depth = 0
    quote: str | None = None
    escaped = False
    last = 0
    for i, ch in enumerate(line):
        if quote is not None:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                quote = None
        elif ch in ("'", '"', "`"):
            quote = ch
        elif ch in "([{":
            depth += 1
        elif ch in ")]}":
            depth -= 1
        elif ch == "," and depth == 0:
            pieces.append(line[last : i + 1].strip())
            last = i + 1
    tail = line[last:].strip()
    if tail:
        pieces.append(tail)

    if len(pieces) > 1 and all(FIELD_START_RE.match(p) for p in pieces):
        return pieces
    return [line]


def field_name(chunk: str) -> str | None:
    """Return the declared name at the start of a field chunk."""
    match = FIELD_START_RE.match(chunk.strip())
    return match.group(1) if match else None


def split_schema_fields(body: str) -> list[str]:
    """Return raw per-field chunks, lines joined by single spaces."""
    chunks: list[str] = []
    current: list[str] = []
    depth = 0
    open_field = False

    def flush() -> None:
        if current:
            chunks.append(" ".join(current))
            current.clear()

    for raw in body.splitlines():
        line = raw.strip()
        if not line or line in ("{", "}"):
            continue

        if open_field:
            current.append(line)
            depth += _paren_delta(line)
            if depth <= 0:
                open_field = False
                depth = 0
            continue

        if FIELD_START_RE.match(line):
            for piece in _split_line_fields(line):
                flush()
                current.append(piece)
                depth = _paren_delta(piece)
                open_field = depth > 0
            continue

        if current and not current[-1].endswith(","):
            # chained modifier or value on the line after an unterminated field
            current.append(line)
            depth = _paren_delta(line)
            open_field = depth > 0

    flush()
    return chunks
