"""
Chat facade: one function per chat API method.

Each function builds the options for its method and hands them to
chat_call(), which spawns `keybase chat api`, writes the envelope to its
stdin and unwraps the response.
"""

from typing import Any, Dict, Iterable, Optional, Union

from loguru import logger

from ..exceptions import ChatError
from ..process import invoke, keybase_args, parse_json
from ..status import ensure_ready
from .envelope import envelope, unwrap, users_channel

Users = Union[str, Iterable[str]]

# The initial arguments to pass when executing keybase for chatting
CHAT_SUBCOMMAND = ("chat", "api")


def chat_exec_args() -> list:
    """Argument vector for the chat API, e.g. ["keybase", "chat", "api"]."""
    return keybase_args(*CHAT_SUBCOMMAND)


def chat_call(method: str, options: Optional[Dict[str, Any]] = None) -> Any:
    """
    Make a chat API call.

    Args:
        method: The chat API method
        options: The method's options

    Returns:
        The response's result

    Raises:
        KeybaseNotRunningError: If keybase is not running
        KeybaseNotLoggedInError: If nobody is logged in
        ChatError: If the chat call fails or keybase gives no response
        KeybaseCommandError: If the response is not JSON
    """
    ensure_ready()
    logger.debug(f"chat api: {method}")
    argv = chat_exec_args()
    result = invoke(argv, payload=envelope(method, options))

    if not result.stdout.strip():
        message = result.stderr.strip() or f"keybase chat api exited {result.returncode} without a response"
        logger.warning(f"Chat API call {method} failed: {message}")
        raise ChatError(message)

    return unwrap(parse_json(argv, result.stdout))


def list_inbox(topic_type: Optional[str] = None) -> Any:
    """
    List the current user's inbox.

    Args:
        topic_type: The topic type to list by (e.g. "chat", "dev")
    """
    return chat_call("list", {
        "topic_type": topic_type,
    })


def conversation(users: Users, peek: bool = False, unread_only: bool = False) -> Any:
    """
    Read a conversation.

    Args:
        users: The users in the conversation
        peek: If True, don't mark the conversation read
        unread_only: Only fetch unread messages
    """
    return chat_call("read", {
        "channel": {
            "name": users_channel(users),
        },
        "peek": peek,
        "unread_only": unread_only,
    })


def send_message(
    users: Users,
    message: str,
    public: bool = False,
    exploding_lifetime: Optional[str] = None,
) -> Any:
    """
    Send a message to a conversation. For team conversations see send_team_message().

    Args:
        users: The users in the conversation
        message: The message body
        public: Send to the public channel
        exploding_lifetime: How long before the message explodes (e.g. "30s"),
            or None to keep it
    """
    return chat_call("send", {
        "channel": {
            "name": users_channel(users),
            "public": public,
        },
        "exploding_lifetime": exploding_lifetime,
        "message": {
            "body": message,
        },
    })


def send_team_message(
    team: str,
    topic: str,
    message: str,
    exploding_lifetime: Optional[str] = None,
) -> Any:
    """
    Send a message to a team conversation.

    Args:
        team: The team the conversation belongs to
        topic: The conversation's topic (channel), e.g. "general"
        message: The message body
        exploding_lifetime: How long before the message explodes, or None
    """
    return chat_call("send", {
        "channel": {
            "name": team,
            "members_type": "team",
            "topic_name": topic,
        },
        "exploding_lifetime": exploding_lifetime,
        "message": {
            "body": message,
        },
    })


def delete_message(users: Users, message_id: int) -> Any:
    """Delete a message from a conversation."""
    return chat_call("delete", {
        "channel": {
            "name": users_channel(users),
        },
        "message_id": message_id,
    })


def edit_message(users: Users, message_id: int, message: str) -> Any:
    """Replace the body of a message in a conversation."""
    return chat_call("edit", {
        "channel": {
            "name": users_channel(users),
        },
        "message_id": message_id,
        "message": {
            "body": message,
        },
    })


def upload_attachment(users: Users, path: str, title: str) -> Any:
    """
    Upload a file to a conversation.

    Args:
        users: The users in the conversation
        path: Local path of the file to upload
        title: The attachment's title
    """
    return chat_call("attach", {
        "channel": {
            "name": users_channel(users),
        },
        "filename": str(path),
        "title": title,
    })


def download_attachment(users: Users, message_id: int, path: str) -> Any:
    """
    Download an attachment from a conversation.

    Args:
        users: The users in the conversation
        message_id: The message carrying the attachment
        path: Local path to write to
    """
    return chat_call("download", {
        "channel": {
            "name": users_channel(users),
        },
        "message_id": message_id,
        "output": str(path),
    })


def mark_conversation(users: Users, message_id: int) -> Any:
    """Mark a conversation as read up to a message."""
    return chat_call("mark", {
        "channel": {
            "name": users_channel(users),
        },
        "message_id": message_id,
    })


def mute_conversation(users: Users) -> Any:
    """Mute a conversation."""
    return chat_call("setstatus", {
        "channel": {
            "name": users_channel(users),
        },
        "status": "muted",
    })
