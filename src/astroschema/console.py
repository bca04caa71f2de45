"""Terminal output helpers for CLI commands."""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console

_out = Console()
_err = Console(stderr=True)


def error(message: str) -> None:
    _err.print(f"[bold red]error:[/] {message}")


def warning(message: str) -> None:
    _err.print(f"[yellow]warning:[/] {message}")


def info(message: str) -> None:
    _out.print(f"[dim]{message}[/]")


def header(title: str) -> None:
    _out.print(f"\n[bold]{title}[/]")
    _out.print("[dim]" + "─" * len(title) + "[/]")


def key_value(key: str, value: Any) -> None:
    _out.print(f"  [cyan]{key}:[/] {value}")


def print_json(data: Any) -> None:
    """Pretty JSON on stdout, no markup interpretation."""
    _out.print_json(json.dumps(data, ensure_ascii=False))


def print_renderable(renderable: Any) -> None:
    _out.print(renderable)


def print_text(text: str) -> None:
    """Raw text on stdout, no markup or highlighting."""
    _out.print(text, markup=False, highlight=False, soft_wrap=True)
