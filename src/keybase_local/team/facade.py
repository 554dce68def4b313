"""
Team facade: administration of Keybase teams through `keybase team`.

Listing commands are run with --json and return parsed output; commands
that change membership return whether keybase reported success.
"""

import re
from typing import Any, List, Optional

from loguru import logger

from ..exceptions import TeamError
from ..process import invoke, keybase_args, parse_json, run
from ..status import ensure_ready

# The initial arguments to pass when executing keybase for team management
TEAM_SUBCOMMAND = ("team",)

# Partial validation of team names: each dot-separated (sub)team segment starts
# with an alphanumeric and never contains two underscores in a row.
# See keybase/client go/protocol/keybase1/extras.go
TEAM_SEGMENT = r"[a-zA-Z0-9](?:_?[a-zA-Z0-9])*_?"
TEAM_PATTERN = re.compile(rf"{TEAM_SEGMENT}(?:\.{TEAM_SEGMENT})*")

ROLES = ("reader", "writer", "admin", "owner")


def team_exec_args(*args: str) -> List[str]:
    """Argument vector for a team subcommand, e.g. ["keybase", "team", "create", "x"]."""
    return keybase_args(*TEAM_SUBCOMMAND, *args)


def valid_team_name(team: str) -> bool:
    """Check a team name against TEAM_PATTERN."""
    return bool(team) and TEAM_PATTERN.fullmatch(team) is not None


def _check_team(team: str) -> None:
    if not valid_team_name(team):
        raise TeamError(f"invalid team name: {team!r}")


def _check_role(role: str) -> None:
    if role not in ROLES:
        raise TeamError(f"invalid role {role!r}, expected one of {', '.join(ROLES)}")


def team_call(*args: str, payload: Optional[str] = None, json: bool = False) -> Any:
    """
    Run `keybase team` with the given arguments.

    Args:
        *args: Arguments after `keybase team`
        payload: Data fed to the command's stdin (JSON mode only)
        json: Parse stdout as JSON instead of returning a success flag

    Returns:
        Parsed JSON ({} for empty output) in JSON mode, otherwise True if
        the command succeeded

    Raises:
        TeamError: If a payload is given without json, or a JSON-mode
            command fails without producing output
    """
    if payload is not None and not json:
        raise TeamError("a payload can only be sent to a JSON-mode team command")

    ensure_ready()
    argv = team_exec_args(*args)

    if not json:
        return run(argv)

    result = invoke(argv, payload=payload)
    if result.returncode != 0 and not result.stdout.strip():
        message = result.stderr.strip() or f"keybase team {args[0] if args else ''} exited {result.returncode}"
        logger.warning(f"Team command failed: {message}")
        raise TeamError(message)

    return parse_json(argv, result.stdout)


def create(team: str) -> bool:
    """Create a new team."""
    _check_team(team)
    return team_call("create", team)


def add_member(team: str, user: str, role: str = "reader", email: bool = False) -> bool:
    """
    Add a user to a team.

    Args:
        team: The team
        user: A keybase username, or an email address when email is True
        role: One of ROLES
        email: Invite by email instead of by username
    """
    _check_team(team)
    _check_role(role)
    who = f"--email={user}" if email else f"--user={user}"
    return team_call("add-member", team, who, f"--role={role}")


def remove_member(team: str, user: str) -> bool:
    """Remove a user from a team."""
    _check_team(team)
    return team_call("remove-member", team, f"--user={user}")


def edit_member(team: str, user: str, role: str = "reader") -> bool:
    """Change a team member's role."""
    _check_team(team)
    _check_role(role)
    return team_call("edit-member", team, f"--user={user}", f"--role={role}")


def list_memberships(force_poll: bool = False) -> Any:
    """
    List all teams the current user belongs to.

    Args:
        force_poll: Force a poll of the server for all idents
    """
    args = ["list-memberships", "--json"]
    if force_poll:
        args.append("--force-poll")

    return team_call(*args, json=True)


def list_members(team: str, force_poll: bool = False) -> Any:
    """
    List all members of a team.

    Args:
        team: The team
        force_poll: Force a poll of the server for all idents
    """
    _check_team(team)
    args = ["list-members", team, "--json"]
    if force_poll:
        args.append("--force-poll")

    return team_call(*args, json=True)


def rename(old_team: str, new_team: str) -> bool:
    """Rename a (sub)team."""
    _check_team(old_team)
    _check_team(new_team)
    return team_call("rename", old_team, new_team)


def request_access(team: str) -> bool:
    """Request access to a team."""
    _check_team(team)
    return team_call("request-access", team)


def list_requests() -> Any:
    """List pending requests to join the current user's teams."""
    return team_call("list-requests", "--json", json=True)


def ignore_request(team: str, user: str) -> bool:
    """Ignore a user's request to join a team."""
    _check_team(team)
    return team_call("ignore-request", team, f"--user={user}")


def accept_invite(token: str) -> bool:
    """Accept an email invitation to join a team."""
    if not token:
        raise TeamError("an invite token is required")
    return team_call("accept-invite", f"--token={token}")


def leave(team: str, permanent: bool = False) -> bool:
    """
    Leave a team.

    Args:
        team: The team
        permanent: Prevent being re-added to the team
    """
    _check_team(team)
    args = ["leave", team]
    if permanent:
        args.append("--permanent")
    return team_call(*args)


def delete(team: str) -> bool:
    """Delete a team."""
    _check_team(team)
    return team_call("delete", team)
