"""Locate the block that enumerates content collections.

Two dialects are recognized, and exactly one is reported per file:

    // list style (Astro 5): definitions live at top level
    const blog = defineCollection({...});
    export const collections = { blog, docs };

    // inline style: definitions live inside the block
    export default defineConfig({
      collections: { blog: defineCollection({...}) },
    });

``export const collections = { blog: defineCollection(...) }`` is also
inline style: the dialect follows the block's body, not the anchor.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from astroschema.regions import find_balanced_end

EXPORT_COLLECTIONS_RE = re.compile(r"export\s+const\s+collections\s*=\s*\{")
INLINE_COLLECTIONS_RE = re.compile(r"collections\s*:\s*\{")

_IDENT = r"[A-Za-z_$][\w$]*"
IDENTIFIER_LIST_RE = re.compile(
    rf"^\s*(?:{_IDENT}\s*(?:,\s*{_IDENT}\s*)*,?\s*)?$"
)
IDENTIFIER_RE = re.compile(_IDENT)


@dataclass(frozen=True)
class CollectionsBlock:
    """The balanced ``{...}`` block, delimiters included."""

    text: str

    @property
    def body(self) -> str:
        return self.text[1:-1]


@dataclass(frozen=True)
class ListBlock(CollectionsBlock):
    """``{ blog, docs }``: names only, definitions elsewhere in the file."""

    @property
    def names(self) -> list[str]:
        return IDENTIFIER_RE.findall(self.body)


@dataclass(frozen=True)
class InlineBlock(CollectionsBlock):
    """``{ blog: defineCollection(...) }``: definitions inside the block."""


def _balanced_block(source: str, pattern: re.Pattern[str]) -> str | None:
    match = pattern.search(source)
    if match is None:
        return None
    start = match.end() - 1
    end = find_balanced_end(source, start)
    if end is None:
        return None
    return source[start:end]


def locate_collections_block(source: str) -> CollectionsBlock | None:
    """Find the collections block in comment-stripped ``source``.

    The exported constant is tried first, then the inline
    ``collections: {...}`` object. Unbalanced candidates are skipped.
    """
    text = _balanced_block(source, EXPORT_COLLECTIONS_RE)
    if text is not None:
        if IDENTIFIER_LIST_RE.match(text[1:-1]):
            return ListBlock(text)
        return InlineBlock(text)

    text = _balanced_block(source, INLINE_COLLECTIONS_RE)
    if text is not None:
        return InlineBlock(text)

    return None
