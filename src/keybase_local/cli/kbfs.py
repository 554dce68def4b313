"""
KBFS CLI commands.
"""

import typer

from .. import kbfs
from .output import emit, reporting_errors

app = typer.Typer()


@app.command("status")
def status_cmd(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show the KBFS status file."""
    with reporting_errors(json_output):
        emit(kbfs.status(), json_output)
