"""Shared helpers for CLI commands."""

from __future__ import annotations

from pathlib import Path

from astroschema.config import DEFAULT_CONTENT_DIR


def resolve_project(directory: Path | None) -> Path:
    """Absolute project root, defaulting to the working directory."""
    return directory.resolve() if directory else Path.cwd()


def looks_like_project(root: Path) -> bool:
    """True when ``root`` has a ``src/content`` directory."""
    return (root / DEFAULT_CONTENT_DIR).is_dir()
