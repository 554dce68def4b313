"""
Team module: team administration through `keybase team`.
"""

from .facade import (
    TEAM_PATTERN,
    ROLES,
    team_call,
    team_exec_args,
    valid_team_name,
    create,
    add_member,
    remove_member,
    edit_member,
    list_memberships,
    list_members,
    rename,
    request_access,
    list_requests,
    ignore_request,
    accept_invite,
    leave,
    delete,
)

__all__ = [
    "TEAM_PATTERN",
    "ROLES",
    "team_call",
    "team_exec_args",
    "valid_team_name",
    "create",
    "add_member",
    "remove_member",
    "edit_member",
    "list_memberships",
    "list_members",
    "rename",
    "request_access",
    "list_requests",
    "ignore_request",
    "accept_invite",
    "leave",
    "delete",
]
