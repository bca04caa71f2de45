"""Project scanning - collections from the content config, else directories."""

from __future__ import annotations

from pathlib import Path

import structlog

from astroschema.config import COLLECTION_FILE_EXTENSIONS, DEFAULT_CONTENT_DIR
from astroschema.errors import ConfigReadError, ProjectScanError
from astroschema.models import Collection
from astroschema.parser import parse_astro_config

logger = structlog.get_logger(__name__)


def scan_project(
    project_root: Path,
    content_directory: str | None = None,
    *,
    log=None,
) -> list[Collection]:
    """Collections for a project.

    Uses the content config when it yields at least one collection.
    Otherwise (no config, nothing recognized, or an unreadable config)
    every directory under the content dir becomes a schema-less collection.
    """
    log = log if log is not None else logger
    log.info("scanning project", project=str(project_root))

    try:
        collections = parse_astro_config(project_root, log=log)
    except ConfigReadError as e:
        log.debug("content config unreadable, using directories", error=str(e))
    else:
        if collections:
            log.info("collections from content config", count=len(collections))
            return collections
        log.debug("content config gave no collections, using directories")

    return scan_content_directories(project_root, content_directory, log=log)


def scan_content_directories(
    project_root: Path,
    content_directory: str | None = None,
    *,
    log=None,
) -> list[Collection]:
    """One schema-less collection per directory in the content dir.

    Args:
        project_root: Project directory.
        content_directory: Override for ``src/content``, relative to the
            project root.

    Raises:
        ProjectScanError: The content directory cannot be listed.
    """
    log = log if log is not None else logger
    content_dir = project_root / (content_directory or DEFAULT_CONTENT_DIR)

    if not content_dir.is_dir():
        log.error("content directory does not exist", path=str(content_dir))
        return []

    try:
        entries = sorted(content_dir.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise ProjectScanError(content_dir, str(e)) from e

    collections = [
        Collection(name=entry.name, path=entry)
        for entry in entries
        if entry.is_dir()
    ]
    log.info("collections from directories", count=len(collections))
    return collections


def scan_collection_files(collection_path: Path) -> list[Path]:
    """Markdown/MDX entries directly inside a collection directory.

    Raises:
        ProjectScanError: The directory cannot be listed.
    """
    try:
        entries = sorted(collection_path.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise ProjectScanError(collection_path, str(e)) from e
    return [
        p
        for p in entries
        if p.is_file() and p.suffix.lower() in COLLECTION_FILE_EXTENSIONS
    ]
