"""Strip command - print a config file with comments removed."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from astroschema import console
from astroschema.comments import strip_comments


@dataclass
class Strip:
    """Print a TypeScript file with // and /* */ comments removed."""

    file: Path = field(
        metadata={"help": "File to strip"},
    )

    def run(self) -> int:
        """Execute the strip command."""
        try:
            text = self.file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            console.error(f"cannot read {self.file}: {e}")
            return 1
        console.print_text(strip_comments(text))
        return 0
