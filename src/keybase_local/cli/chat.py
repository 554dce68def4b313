"""
Chat CLI commands.
"""

from pathlib import Path
from typing import List, Optional

import typer

from .. import chat
from .output import emit, reporting_errors

app = typer.Typer()

JSON_OPTION = typer.Option(False, "--json", help="Output as JSON")
USERS_ARGUMENT = typer.Argument(..., help="Users in the conversation, e.g. 'alice,bob'")


def _users(users: str) -> List[str]:
    return [u.strip() for u in users.split(",") if u.strip()]


@app.command("inbox")
def inbox_cmd(
    topic_type: Optional[str] = typer.Option(None, "--topic-type", help="Topic type to list (chat, dev, ...)"),
    json_output: bool = JSON_OPTION,
):
    """List the current user's inbox."""
    with reporting_errors(json_output):
        emit(chat.list_inbox(topic_type=topic_type), json_output)


@app.command("read")
def read_cmd(
    users: str = USERS_ARGUMENT,
    peek: bool = typer.Option(False, "--peek", help="Don't mark the conversation as read"),
    unread_only: bool = typer.Option(False, "--unread-only", help="Only fetch unread messages"),
    json_output: bool = JSON_OPTION,
):
    """Read a conversation."""
    with reporting_errors(json_output):
        emit(chat.conversation(_users(users), peek=peek, unread_only=unread_only), json_output)


@app.command("send")
def send_cmd(
    users: str = USERS_ARGUMENT,
    message: str = typer.Argument(..., help="Message body"),
    public: bool = typer.Option(False, "--public", help="Send to the public channel"),
    exploding_lifetime: Optional[str] = typer.Option(None, "--exploding-lifetime", "-e", help="e.g. 30s, 1h"),
    json_output: bool = JSON_OPTION,
):
    """Send a message to a conversation."""
    with reporting_errors(json_output):
        result = chat.send_message(
            _users(users), message, public=public, exploding_lifetime=exploding_lifetime
        )
        emit(result, json_output)


@app.command("send-team")
def send_team_cmd(
    team: str = typer.Argument(..., help="Team name"),
    topic: str = typer.Argument(..., help="Channel, e.g. general"),
    message: str = typer.Argument(..., help="Message body"),
    exploding_lifetime: Optional[str] = typer.Option(None, "--exploding-lifetime", "-e", help="e.g. 30s, 1h"),
    json_output: bool = JSON_OPTION,
):
    """Send a message to a team channel."""
    with reporting_errors(json_output):
        emit(chat.send_team_message(team, topic, message, exploding_lifetime=exploding_lifetime), json_output)


@app.command("delete")
def delete_cmd(
    users: str = USERS_ARGUMENT,
    message_id: int = typer.Argument(..., help="Message ID"),
    json_output: bool = JSON_OPTION,
):
    """Delete a message."""
    with reporting_errors(json_output):
        emit(chat.delete_message(_users(users), message_id), json_output)


@app.command("edit")
def edit_cmd(
    users: str = USERS_ARGUMENT,
    message_id: int = typer.Argument(..., help="Message ID"),
    message: str = typer.Argument(..., help="New message body"),
    json_output: bool = JSON_OPTION,
):
    """Edit a message."""
    with reporting_errors(json_output):
        emit(chat.edit_message(_users(users), message_id, message), json_output)


@app.command("upload")
def upload_cmd(
    users: str = USERS_ARGUMENT,
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="File to upload"),
    title: str = typer.Option("", "--title", "-t", help="Attachment title"),
    json_output: bool = JSON_OPTION,
):
    """Upload a file to a conversation."""
    with reporting_errors(json_output):
        emit(chat.upload_attachment(_users(users), str(path), title or path.name), json_output)


@app.command("download")
def download_cmd(
    users: str = USERS_ARGUMENT,
    message_id: int = typer.Argument(..., help="Message carrying the attachment"),
    output: Path = typer.Argument(..., help="Where to write the file"),
    json_output: bool = JSON_OPTION,
):
    """Download an attachment from a conversation."""
    with reporting_errors(json_output):
        emit(chat.download_attachment(_users(users), message_id, str(output)), json_output)


@app.command("mark")
def mark_cmd(
    users: str = USERS_ARGUMENT,
    message_id: int = typer.Argument(..., help="Mark read up to this message"),
    json_output: bool = JSON_OPTION,
):
    """Mark a conversation as read."""
    with reporting_errors(json_output):
        emit(chat.mark_conversation(_users(users), message_id), json_output)


@app.command("mute")
def mute_cmd(
    users: str = USERS_ARGUMENT,
    json_output: bool = JSON_OPTION,
):
    """Mute a conversation."""
    with reporting_errors(json_output):
        emit(chat.mute_conversation(_users(users)), json_output)
