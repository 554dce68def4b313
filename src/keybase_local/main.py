import typer
from rich.table import Table

from keybase_local import __version__, kbfs, status as presence
from keybase_local.cli import chat, team, kbfs as kbfs_cli
from keybase_local.cli.output import emit, get_console, reporting_errors
from keybase_local.logging_config import setup_logging
from keybase_local.paths import get_paths

app = typer.Typer()
console = get_console()


@app.callback()
def global_options(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every keybase invocation to stderr",
    ),
):
    """
    keybase-local: drive a locally running Keybase from the command line.
    """
    setup_logging(level="DEBUG" if verbose else None, force=True)


app.add_typer(chat.app, name="chat", help="Chat commands (inbox, read, send, ...)")
app.add_typer(team.app, name="team", help="Team commands (memberships, members, create, ...)")
app.add_typer(kbfs_cli.app, name="kbfs", help="KBFS commands")


@app.command()
def status(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Check whether keybase and KBFS are running and who is logged in.
    """
    with reporting_errors(json_output):
        running = presence.is_running()
        result = {
            "running": running,
            "logged_in": False,
            "user": None,
            "version": None,
            "kbfs_running": presence.is_kbfs_running(),
            "kbfs_mounted": kbfs.is_mounted(),
        }
        if running:
            result["logged_in"] = presence.is_logged_in()
            result["user"] = presence.current_user()
            result["version"] = presence.running_version()

    if json_output:
        emit(result, json_output=True)
        return

    if not result["running"]:
        console.print("[yellow]Keybase: Not Running[/yellow]")
        return

    table = Table(title="Keybase Status")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Status", "Running")
    table.add_row("Version", result["version"])
    table.add_row("Logged In", "Yes" if result["logged_in"] else "No")
    table.add_row("User", result["user"] or "N/A")
    table.add_row("KBFS Running", "Yes" if result["kbfs_running"] else "No")
    table.add_row("KBFS Mounted", "Yes" if result["kbfs_mounted"] else "No")

    console.print(table)


@app.command()
def paths(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Show where keybase's configuration and KBFS live.
    """
    p = get_paths()
    result = {
        "config_dir": str(p.config_dir),
        "config_file": str(p.config_file),
        "config_file_exists": p.config_file.exists(),
        "kbfs_mount": str(p.kbfs_mount),
        "kbfs_status_file": str(p.kbfs_status_file),
    }
    emit(result, json_output)


@app.command()
def version():
    """
    Prints the current version of keybase-local.
    """
    typer.echo(f"keybase-local v{__version__}")


if __name__ == "__main__":
    app()
