"""
agent-guidance CLI - copy bundled agent guidance documents into a project.

Usage:
    agent-guidance init
    agent-guidance add vercel
    agent-guidance add vercel --lang zh
    agent-guidance list
"""

from __future__ import annotations

import typer

from agent_guidance.cli.commands import add, init, list_guides
from agent_guidance.cli.helpers import configure_logging, console

__version__ = "1.0.0"

app = typer.Typer(
    name="agent-guidance",
    help="CLI to manage agent guidance documentation",
    add_completion=False,
    invoke_without_command=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"agent-guidance {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Manage agent guidance documentation for your project."""
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        console.print("[bold]agent-guidance[/bold] - manage agent guidance documentation")
        console.print("[dim]Run 'agent-guidance --help' for usage information[/dim]")


app.command(name="init")(init)
app.command(name="add")(add)
app.command(name="list")(list_guides)


def main():
    app()


if __name__ == "__main__":
    main()
