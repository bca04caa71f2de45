"""Comment removal for content config sources.

Only quoted string literals are protected. Comment-like sequences inside
regex literals (``/\\/\\* x \\*\\//``) are not recognized as part of the
regex and may be stripped; config files in practice do not hit this.
"""

from __future__ import annotations


def strip_comments(source: str) -> str:
    """Remove ``//`` and ``/* */`` comments, keeping string contents intact.

    Line comments keep their terminating newline so line structure survives
    for the field splitter. Unterminated block comments run to end of input.
    """
    out: list[str] = []
    i = 0
    n = len(source)
    quote: str | None = None

    while i < n:
        ch = source[i]

        if quote is not None:
            out.append(ch)
            if ch == "\\" and i + 1 < n:
                out.append(source[i + 1])
                i += 2
                continue
            if ch == quote:
                quote = None
            i += 1
            continue

        if ch in ('"', "'"):
            quote = ch
            out.append(ch)
            i += 1
            continue

        if ch == "/" and i + 1 < n:
            nxt = source[i + 1]
            if nxt == "/":
                newline = source.find("\n", i + 2)
                if newline == -1:
                    break
                out.append("\n")
                i = newline + 1
                continue
            if nxt == "*":
                close = source.find("*/", i + 2)
                if close == -1:
                    break
                i = close + 2
                continue

        out.append(ch)
        i += 1

    return "".join(out)
