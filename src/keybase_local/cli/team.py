"""
Team management CLI commands.
"""

import typer

from .. import team
from .output import emit, emit_success, reporting_errors

app = typer.Typer()

JSON_OPTION = typer.Option(False, "--json", help="Output as JSON")
FORCE_POLL_OPTION = typer.Option(False, "--force-poll", help="Force a poll of the server for all idents")
ROLE_OPTION = typer.Option("reader", "--role", "-r", help=f"One of: {', '.join(team.ROLES)}")


@app.command("memberships")
def memberships_cmd(
    force_poll: bool = FORCE_POLL_OPTION,
    json_output: bool = JSON_OPTION,
):
    """List the teams you belong to."""
    with reporting_errors(json_output):
        emit(team.list_memberships(force_poll=force_poll), json_output)


@app.command("members")
def members_cmd(
    name: str = typer.Argument(..., help="Team name"),
    force_poll: bool = FORCE_POLL_OPTION,
    json_output: bool = JSON_OPTION,
):
    """List the members of a team."""
    with reporting_errors(json_output):
        emit(team.list_members(name, force_poll=force_poll), json_output)


@app.command("requests")
def requests_cmd(json_output: bool = JSON_OPTION):
    """List pending requests to join your teams."""
    with reporting_errors(json_output):
        emit(team.list_requests(), json_output)


@app.command("create")
def create_cmd(
    name: str = typer.Argument(..., help="Team name"),
    json_output: bool = JSON_OPTION,
):
    """Create a team."""
    with reporting_errors(json_output):
        emit_success(team.create(name), f"create {name}", json_output)


@app.command("add-member")
def add_member_cmd(
    name: str = typer.Argument(..., help="Team name"),
    user: str = typer.Argument(..., help="Username (or email with --email)"),
    role: str = ROLE_OPTION,
    email: bool = typer.Option(False, "--email", help="Invite by email address"),
    json_output: bool = JSON_OPTION,
):
    """Add a user to a team."""
    with reporting_errors(json_output):
        emit_success(team.add_member(name, user, role=role, email=email), f"add {user} to {name}", json_output)


@app.command("remove-member")
def remove_member_cmd(
    name: str = typer.Argument(..., help="Team name"),
    user: str = typer.Argument(..., help="Username"),
    json_output: bool = JSON_OPTION,
):
    """Remove a user from a team."""
    with reporting_errors(json_output):
        emit_success(team.remove_member(name, user), f"remove {user} from {name}", json_output)


@app.command("edit-member")
def edit_member_cmd(
    name: str = typer.Argument(..., help="Team name"),
    user: str = typer.Argument(..., help="Username"),
    role: str = ROLE_OPTION,
    json_output: bool = JSON_OPTION,
):
    """Change a member's role."""
    with reporting_errors(json_output):
        emit_success(team.edit_member(name, user, role=role), f"make {user} {role} of {name}", json_output)


@app.command("rename")
def rename_cmd(
    old: str = typer.Argument(..., help="Current team name"),
    new: str = typer.Argument(..., help="New team name"),
    json_output: bool = JSON_OPTION,
):
    """Rename a subteam."""
    with reporting_errors(json_output):
        emit_success(team.rename(old, new), f"rename {old} to {new}", json_output)


@app.command("leave")
def leave_cmd(
    name: str = typer.Argument(..., help="Team name"),
    permanent: bool = typer.Option(False, "--permanent", help="Don't allow being re-added"),
    json_output: bool = JSON_OPTION,
):
    """Leave a team."""
    with reporting_errors(json_output):
        emit_success(team.leave(name, permanent=permanent), f"leave {name}", json_output)


@app.command("delete")
def delete_cmd(
    name: str = typer.Argument(..., help="Team name"),
    json_output: bool = JSON_OPTION,
):
    """Delete a team."""
    with reporting_errors(json_output):
        emit_success(team.delete(name), f"delete {name}", json_output)
