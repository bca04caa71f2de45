"""astroschema CLI - inspect content collection schemas of an Astro project.

Uses tyro for type-driven CLI generation from dataclasses.
"""

from __future__ import annotations

from typing import Annotated

import tyro

from astroschema.cli.commands.scan import Scan
from astroschema.cli.commands.schema import Schema
from astroschema.cli.commands.strip import Strip

# Type aliases for subcommand annotations
_Scan = Annotated[Scan, tyro.conf.subcommand("scan")]
_Schema = Annotated[Schema, tyro.conf.subcommand("schema")]
_Strip = Annotated[Strip, tyro.conf.subcommand("strip")]

Command = _Scan | _Schema | _Strip


def main() -> int:
    """Entry point for the CLI."""
    # configure structlog (respects ASTROSCHEMA_DEBUG env var)
    from astroschema.logging_config import configure_logging

    configure_logging()

    try:
        cmd = tyro.cli(
            Command,
            prog="astroschema",
            description="Extract content collection schemas from Astro.",
        )
        return cmd.run()
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        from astroschema import console

        console.error(str(e))
        return 1
