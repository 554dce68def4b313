"""
CLI Output Utilities

Shared output helpers: JSON for scripts, rich for people.
"""

import json
from contextlib import contextmanager
from typing import Any, Iterator

import typer
from rich.console import Console
from rich.pretty import Pretty

from keybase_local.exceptions import KeybaseError
from keybase_local.logging_config import logger

console = Console()


def get_console() -> Console:
    """Get the shared rich console."""
    return console


def emit(data: Any, json_output: bool) -> None:
    """
    Print a command result.

    Args:
        data: JSON-serializable result
        json_output: Print raw JSON instead of a pretty rendering
    """
    if json_output:
        typer.echo(json.dumps(data, indent=2, default=str))
        return
    console.print(Pretty(data))


def emit_success(ok: bool, action: str, json_output: bool) -> None:
    """Report the outcome of a command that only succeeds or fails."""
    if json_output:
        typer.echo(json.dumps({"action": action, "success": ok}))
    elif ok:
        console.print(f"[green]✓[/green] {action}")
    else:
        console.print(f"[red]✗[/red] {action} failed")

    if not ok:
        raise typer.Exit(1)


@contextmanager
def reporting_errors(json_output: bool) -> Iterator[None]:
    """
    Turn library errors into a message and exit code 1.

    Usage:
        with reporting_errors(json_output):
            result = chat.list_inbox()
    """
    try:
        yield
    except KeybaseError as e:
        logger.debug(f"Command failed: {e!r}")
        if json_output:
            typer.echo(json.dumps({"error": str(e), "type": type(e).__name__}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
