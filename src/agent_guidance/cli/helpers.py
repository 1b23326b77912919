"""Shared console and logging setup for the agent-guidance CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

console = Console()


def configure_logging(verbose: bool = False) -> None:
    """Route library logging to stderr through Rich."""
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        show_time=False,
    )
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


def report_fallback(query: str, requested: str, found: str) -> None:
    """Tell the user when a lookup fell back to another language collection."""
    if found != requested:
        console.print(
            f"[yellow]No matches found for '{escape(query)}' in '{escape(requested)}'. "
            f"Trying '{escape(found)}'...[/yellow]"
        )


__all__ = ["configure_logging", "console", "report_fallback"]
