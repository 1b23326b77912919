"""Add command implementation."""

from __future__ import annotations

import typer
from rich.markup import escape

from agent_guidance.cli.helpers import console, report_fallback
from agent_guidance.core.config import GuidanceConfig
from agent_guidance.core.constants import DEFAULT_LANGUAGE, OUTPUT_DIR_NAME
from agent_guidance.errors import AmbiguousGuideError, GuideNotFoundError
from agent_guidance.installer import AddStatus, add_guide


def add(
    query: str = typer.Argument(..., help="Filename prefix of the guide to add (e.g. vercel)"),
    lang: str = typer.Option(
        DEFAULT_LANGUAGE,
        "--lang",
        "-l",
        help="Language code (default: en)",
    ),
) -> None:
    """Add a guidance file to your project."""
    if not query:
        raise typer.BadParameter("Query cannot be empty.", param_hint="QUERY")

    language = lang or DEFAULT_LANGUAGE
    console.print(f"Searching for '{escape(query)}' (lang: {escape(language)})...")

    try:
        result = add_guide(query, language, GuidanceConfig.default())
    except GuideNotFoundError as exc:
        if exc.match is not None:
            report_fallback(query, language, exc.match.language)
        console.print(f"[red]No guides found matching '{escape(query)}'.[/red]")
        raise typer.Exit(1)
    except AmbiguousGuideError as exc:
        if exc.match is not None:
            report_fallback(query, language, exc.match.language)
        console.print("[yellow]Multiple matches found:[/yellow]")
        for name in exc.matches:
            console.print(f"- {escape(name)}")
        console.print("Please be more specific.")
        raise typer.Exit(1)
    except OSError as exc:
        console.print(f"[red]Error adding guide:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(1)

    filename = escape(result.filename)
    report_fallback(query, language, result.language)

    if result.status is AddStatus.ALREADY_EXISTS:
        console.print(f"Guide '{filename}' already exists in {OUTPUT_DIR_NAME}.")
        return

    console.print(
        f"[green]Successfully added '{filename}' to {OUTPUT_DIR_NAME}/[/green] "
        f"(lang: {escape(result.language)})"
    )
