"""List command: show the guides bundled for a language."""

from __future__ import annotations

import typer
from rich.markup import escape
from rich.table import Table

from agent_guidance.cli.helpers import console
from agent_guidance.core.constants import DEFAULT_LANGUAGE
from agent_guidance.manifest import display_name
from agent_guidance.runtime.home import get_bundle_root
from agent_guidance.runtime.resolver import GuideResolver


def list_guides(
    lang: str = typer.Option(
        DEFAULT_LANGUAGE,
        "--lang",
        "-l",
        help="Language code (default: en)",
    ),
) -> None:
    """List the guides bundled for a language."""
    language = lang or DEFAULT_LANGUAGE

    try:
        guides = GuideResolver(get_bundle_root()).list_guides(language)
    except OSError as exc:
        console.print(f"[red]Error listing guides:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(1)

    if not guides:
        console.print(f"[yellow]No guides found for language '{escape(language)}'.[/yellow]")
        return

    table = Table(title=f"Available Guides ({escape(language)})")
    table.add_column("Name", style="cyan")
    table.add_column("File")
    for guide in guides:
        table.add_row(escape(display_name(guide, language)), escape(guide))

    console.print(table)
