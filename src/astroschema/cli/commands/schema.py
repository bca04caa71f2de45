"""Schema command - print one collection's extracted schema."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from rich.table import Table

from astroschema import console
from astroschema.cli._common import resolve_project
from astroschema.parser import parse_astro_config


def _describe(f: dict) -> str:
    if "options" in f:
        return ", ".join(f["options"])
    if "arrayType" in f:
        return f"of {f['arrayType']}"
    if "unionTypes" in f:
        parts = []
        for member in f["unionTypes"]:
            if isinstance(member, dict):
                parts.append(repr(member["value"]))
            else:
                parts.append(member)
        return " | ".join(parts)
    if "literalValue" in f:
        return repr(f["literalValue"])
    return ""


@dataclass
class Schema:
    """Show the schema extracted for a collection."""

    collection: str = field(
        metadata={"help": "Collection name"},
    )
    directory: Path | None = field(
        default=None,
        metadata={"help": "Astro project root (default: cwd)"},
    )
    json: bool = field(
        default=False,
        metadata={"help": "Print the raw schema JSON"},
    )

    def run(self) -> int:
        """Execute the schema command."""
        root = resolve_project(self.directory)
        collections = {c.name: c for c in parse_astro_config(root)}

        collection = collections.get(self.collection)
        if collection is None:
            console.error(f"collection not found: {self.collection}")
            return 1
        if collection.schema is None:
            console.info(f"{self.collection}: no schema recognized")
            return 0

        if self.json:
            console.print_json(collection.schema)
            return 0

        console.header(collection.name)
        console.key_value("path", collection.path)
        console.key_value("fields", len(collection.schema["fields"]))

        table = Table()
        table.add_column("Field", style="cyan")
        table.add_column("Type", style="magenta")
        table.add_column("Req", justify="center")
        table.add_column("Default")
        table.add_column("Details", overflow="fold")
        table.add_column("Constraints", overflow="fold")
        for f in collection.schema["fields"]:
            required = "[dim]-[/]" if f["optional"] else "[green]✓[/]"
            constraints = ", ".join(
                k if v is True else f"{k}={v}"
                for k, v in f["constraints"].items()
            )
            table.add_row(
                f["name"],
                f["type"],
                required,
                f["default"] or "",
                _describe(f),
                constraints,
            )
        console.print_renderable(table)
        return 0
