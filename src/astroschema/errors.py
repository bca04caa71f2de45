"""Exceptions raised at the outer edge of schema extraction.

Parsing itself never raises: unmatched patterns and unbalanced delimiters
are reported as ``None`` or empty results. Only reading from disk can fail
hard.
"""

from __future__ import annotations

from pathlib import Path


class AstroSchemaError(Exception):
    """Base class for astroschema errors."""


class ConfigReadError(AstroSchemaError):
    """The content config file exists but could not be read."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read config file {path}: {reason}")


class ProjectScanError(AstroSchemaError):
    """The content directory exists but could not be enumerated."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read content directory {path}: {reason}")
