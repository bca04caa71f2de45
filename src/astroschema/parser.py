"""Content config parsing - collections and their zod schemas.

Reads ``src/content.config.ts`` (or the legacy ``src/content/config.ts``)
and recovers each collection's schema without a TypeScript parser:

    strip comments -> locate collections block -> split definitions
    -> keep collections with a directory -> split z.object body
    -> classify fields -> serialize

Everything past the file read is best effort. A collection whose schema
cannot be understood is still returned, with ``schema=None``.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import structlog

from astroschema.classifier import FieldClassifier
from astroschema.comments import strip_comments
from astroschema.config import (
    CONFIG_PATHS,
    DEFAULT_CONTENT_DIR,
    DEFAULT_MAX_DEPTH,
)
from astroschema.errors import ConfigReadError
from astroschema.fields import field_name, split_schema_fields
from astroschema.locator import ListBlock, locate_collections_block
from astroschema.models import Collection, SchemaField
from astroschema.serializer import serialize_schema
from astroschema.splitter import (
    filter_existing,
    schema_body,
    split_collection_definitions,
)

logger = structlog.get_logger(__name__)


def find_config_file(project_root: Path) -> Path | None:
    """Return the first existing content config file, if any."""
    for rel in CONFIG_PATHS:
        candidate = project_root / rel
        if candidate.is_file():
            return candidate
    return None


def extract_fields(
    body: str, classifier: FieldClassifier
) -> list[SchemaField]:
    """Classify every field chunk of a ``z.object`` body.

    Duplicate names keep their first declaration.
    """
    fields: list[SchemaField] = []
    seen: set[str] = set()
    for chunk in split_schema_fields(body):
        name = field_name(chunk)
        if name is None or name in seen:
            continue
        seen.add(name)
        parsed = classifier.classify(chunk, body)
        if parsed is not None:
            fields.append(parsed)
    return fields


def extract_schema(
    collection_block: str,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    log=None,
) -> dict[str, Any] | None:
    """Serialized schema for one ``defineCollection(...)`` block."""
    body = schema_body(collection_block)
    if body is None:
        return None
    classifier = FieldClassifier(max_depth=max_depth, log=log)
    return serialize_schema(extract_fields(body, classifier))


def parse_collections_from_content(
    content: str,
    project_root: Path,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    log=None,
) -> list[Collection]:
    """Parse config source text into collections that exist on disk.

    Args:
        content: Raw text of the content config file.
        project_root: Project directory; collections are kept only when
            ``<project_root>/src/content/<name>`` is a directory.
        max_depth: Wrapper depth limit for the field classifier.
        log: structlog-style logger; defaults to this module's logger.

    Returns:
        Collections in declaration order, each with its schema or None.
    """
    log = log if log is not None else logger
    content_dir = project_root / DEFAULT_CONTENT_DIR
    clean = strip_comments(content)

    block = locate_collections_block(clean)
    if block is None:
        log.debug("no collections block found")
        return []

    dialect = "list" if isinstance(block, ListBlock) else "inline"
    definitions = split_collection_definitions(block, clean)
    log.debug(
        "collections block located",
        dialect=dialect,
        declared=[d.name for d in definitions],
    )

    collections: list[Collection] = []
    for definition in filter_existing(definitions, content_dir):
        collection = Collection(
            name=definition.name, path=content_dir / definition.name
        )
        if definition.block is not None:
            try:
                collection.schema = extract_schema(
                    definition.block, max_depth=max_depth, log=log
                )
            except (ValueError, IndexError, re.error) as e:
                log.warning(
                    "collection schema extraction failed",
                    collection=definition.name,
                    error=str(e),
                )
        log.debug(
            "collection parsed",
            collection=collection.name,
            fields=len(collection.schema["fields"]) if collection.schema else 0,
        )
        collections.append(collection)

    return collections


def parse_astro_config(
    project_root: Path,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    log=None,
) -> list[Collection]:
    """Read the project's content config and parse its collections.

    Returns an empty list when neither config location exists.

    Raises:
        ConfigReadError: The config file exists but cannot be read.
    """
    log = log if log is not None else logger
    config_path = find_config_file(project_root)
    if config_path is None:
        log.debug("no content config found", project=str(project_root))
        return []

    try:
        content = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(config_path, str(e)) from e

    log.debug("parsing content config", path=str(config_path))
    return parse_collections_from_content(
        content, project_root, max_depth=max_depth, log=log
    )
