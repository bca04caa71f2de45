"""Scan command - list a project's content collections."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from rich.table import Table

from astroschema import console
from astroschema.cli._common import looks_like_project, resolve_project
from astroschema.project import scan_project


@dataclass
class Scan:
    """List content collections and how many schema fields each has."""

    directory: Path | None = field(
        default=None,
        metadata={"help": "Astro project root (default: cwd)"},
    )
    content_dir: str | None = field(
        default=None,
        metadata={"help": "Content directory relative to the project"},
    )
    json: bool = field(
        default=False,
        metadata={"help": "Print collections as JSON"},
    )

    def run(self) -> int:
        """Execute the scan command."""
        root = resolve_project(self.directory)
        if not root.is_dir():
            console.error(f"not a directory: {root}")
            return 1
        if self.content_dir is None and not looks_like_project(root):
            console.warning(f"no src/content directory in {root}")

        collections = scan_project(root, self.content_dir)

        if self.json:
            console.print_json([c.to_dict() for c in collections])
            return 0

        if not collections:
            console.info("no collections found")
            return 0

        table = Table(title=f"Collections ({len(collections)})")
        table.add_column("Name", style="cyan")
        table.add_column("Fields", justify="right", style="green")
        table.add_column("Path", style="blue", overflow="fold")
        for c in collections:
            count = str(len(c.schema["fields"])) if c.schema else "-"
            table.add_row(c.name, count, str(c.path))
        console.print_renderable(table)
        return 0
