"""Balanced delimiter matching over comment-stripped source."""

from __future__ import annotations

_PAIRS = {"{": "}", "(": ")", "[": "]"}
_QUOTES = ("'", '"', "`")


def find_balanced_end(
    text: str, start: int, quotes: bool = False
) -> int | None:
    """Return the index one past the delimiter closing ``text[start]``.

    Only the delimiter kind found at ``start`` is counted, so
    ``find_balanced_end("({)", 0)`` is 3. With ``quotes`` set, delimiters
    inside ``'``, ``"`` or backtick strings are skipped and backslash escapes
    are honored. Without it strings are not tracked, which block-level
    callers accept.

    Returns None if ``text[start]`` is not an opening delimiter or the input
    ends before depth returns to zero.
    """
    if start < 0 or start >= len(text):
        return None
    open_ch = text[start]
    close_ch = _PAIRS.get(open_ch)
    if close_ch is None:
        return None

    depth = 0
    quote: str | None = None
    i = start
    n = len(text)
    while i < n:
        ch = text[i]
        if quote is not None:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                quote = None
        elif quotes and ch in _QUOTES:
            quote = ch
        elif ch == open_ch:
            depth += 1
        elif ch == close_ch:
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1
    return None


def balanced_region(text: str, start: int) -> str | None:
    """Return ``text[start:end]`` for the balanced region at ``start``."""
    end = find_balanced_end(text, start)
    if end is None:
        return None
    return text[start:end]
