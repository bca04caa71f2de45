"""Split a collections block into per-collection definition blocks."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from astroschema.config import SCHEMA_BUILDER
from astroschema.locator import CollectionsBlock, InlineBlock, ListBlock
from astroschema.regions import find_balanced_end

SCHEMA_OBJECT_RE = re.compile(r"z\.object\s*\(\s*\{")


@dataclass(frozen=True)
class CollectionDefinition:
    """A collection name and the source of its ``defineCollection(...)``.

    ``block`` is None when the definition could not be isolated, e.g. a
    listed name with no matching top-level declaration.
    """

    name: str
    block: str | None


def _inline_entry_re(builder: str) -> re.Pattern[str]:
    return re.compile(
        rf"""["']?([A-Za-z_$][\w$-]*)["']?\s*:\s*{re.escape(builder)}\s*\("""
    )


def _span_from(text: str, match: re.Match[str]) -> str | None:
    # match ends on the builder call's opening paren
    end = find_balanced_end(text, match.end() - 1)
    if end is None:
        return None
    return text[match.start() : end]


def find_definition(
    source: str, name: str, builder: str = SCHEMA_BUILDER
) -> str | None:
    """Locate ``const <name> = defineCollection(...)`` in ``source``.

    Falls back to a ``<name>: defineCollection(...)`` entry. Returns the
    span from the declaration through the balanced closing paren.
    """
    escaped = re.escape(name)
    call = rf"{re.escape(builder)}\s*\("
    for pattern in (
        rf"const\s+{escaped}\s*=\s*{call}",
        rf"(?<![\w$]){escaped}\s*:\s*{call}",
    ):
        match = re.search(pattern, source)
        if match is not None:
            return _span_from(source, match)
    return None


def split_collection_definitions(
    block: CollectionsBlock,
    full_source: str,
    builder: str = SCHEMA_BUILDER,
) -> list[CollectionDefinition]:
    """Produce (name, definition block) pairs in order of appearance.

    List blocks resolve each name against ``full_source``; inline blocks
    carry their definitions. Repeated names keep the first occurrence.
    """
    definitions: list[CollectionDefinition] = []
    seen: set[str] = set()

    if isinstance(block, ListBlock):
        for name in block.names:
            if name in seen:
                continue
            seen.add(name)
            definitions.append(
                CollectionDefinition(
                    name, find_definition(full_source, name, builder)
                )
            )
    elif isinstance(block, InlineBlock):
        for match in _inline_entry_re(builder).finditer(block.text):
            name = match.group(1)
            if name in seen:
                continue
            seen.add(name)
            definitions.append(
                CollectionDefinition(name, _span_from(block.text, match))
            )

    return definitions


def filter_existing(
    definitions: list[CollectionDefinition], content_dir: Path
) -> list[CollectionDefinition]:
    """Keep definitions whose ``content_dir/<name>`` directory exists."""
    return [d for d in definitions if (content_dir / d.name).is_dir()]


def schema_body(collection_block: str) -> str | None:
    """Return the text inside the first ``z.object({ ... })`` braces.

    Handles both ``schema: z.object({...})`` and the function form
    ``schema: ({ image }) => z.object({...})``.
    """
    match = SCHEMA_OBJECT_RE.search(collection_block)
    if match is None:
        return None
    start = match.end() - 1
    end = find_balanced_end(collection_block, start)
    if end is None:
        return None
    return collection_block[start + 1 : end - 1].strip()
