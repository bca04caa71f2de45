"""Configuration constants for content collection schema extraction.

Environment variables:
    ASTROSCHEMA_DEBUG: If set to a truthy value ("1", "true", "yes"),
        logging is configured at DEBUG level instead of INFO.

    ASTROSCHEMA_MAX_DEPTH: How many wrapper levels (optional/array/union)
        the field classifier descends before giving up with Unknown.
        Defaults to 2, which covers one wrapper around a base builder.
"""

from __future__ import annotations

import os

# Environment variable names
ENV_DEBUG = "ASTROSCHEMA_DEBUG"
ENV_MAX_DEPTH = "ASTROSCHEMA_MAX_DEPTH"

# Config file locations relative to the project root, tried in order.
# The first is the Astro 5 location, the second the legacy one.
CONFIG_PATHS: tuple[str, ...] = (
    "src/content.config.ts",
    "src/content/config.ts",
)

# Where collection directories live, relative to the project root
DEFAULT_CONTENT_DIR = "src/content"

# Builder call that defines a collection
SCHEMA_BUILDER = "defineCollection"

# Files the editor treats as collection entries
COLLECTION_FILE_EXTENSIONS: frozenset[str] = frozenset({".md", ".mdx"})

# Schema tag emitted by the serializer
SCHEMA_TYPE = "zod"


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def is_debug_enabled() -> bool:
    """Check whether debug logging was requested via environment."""
    return os.environ.get(ENV_DEBUG, "").lower() in ("1", "true", "yes")


DEFAULT_MAX_DEPTH = _int_env(ENV_MAX_DEPTH, 2)
