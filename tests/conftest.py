"""Shared fixtures for astroschema tests."""

import sys
from pathlib import Path

import pytest
import structlog

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _structlog_to_stderr():
    """Send structlog output to stderr, as the CLI entry point does."""
    structlog.configure(
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr)
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def enhanced_config() -> str:
    return (FIXTURES / "enhanced_config.ts").read_text(encoding="utf-8")


@pytest.fixture
def make_project(tmp_path):
    """Build an Astro project skeleton under tmp_path.

    ``make_project(config, ["blog"])`` writes ``src/content.config.ts``
    (or the legacy path when ``legacy=True``) and creates one directory per
    collection name under ``src/content``.
    """

    def _make(
        config: str | None = None,
        collections: list[str] = (),
        legacy: bool = False,
    ) -> Path:
        content = tmp_path / "src" / "content"
        content.mkdir(parents=True, exist_ok=True)
        for name in collections:
            (content / name).mkdir(exist_ok=True)
        if config is not None:
            target = (
                content / "config.ts"
                if legacy
                else tmp_path / "src" / "content.config.ts"
            )
            target.write_text(config, encoding="utf-8")
        return tmp_path

    return _make
