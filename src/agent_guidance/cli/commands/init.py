"""Init command implementation."""

from __future__ import annotations

import typer
from rich.markup import escape

from agent_guidance.cli.helpers import console
from agent_guidance.core.config import GuidanceConfig
from agent_guidance.core.constants import OUTPUT_DIR_NAME
from agent_guidance.installer import init_guidance


def init() -> None:
    """Initialize the .agent_guidance directory."""
    console.print(f"Initializing {OUTPUT_DIR_NAME} directory...")

    try:
        result = init_guidance(GuidanceConfig.default())
    except OSError as exc:
        console.print(f"[red]Error initializing:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(1)

    console.print("[green]Successfully initialized![/green]")
    console.print(f"Created: {escape(str(result.manifest_path))}", soft_wrap=True)
