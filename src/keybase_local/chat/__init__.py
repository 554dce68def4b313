"""
Chat module: Keybase's JSON chat API (`keybase chat api`).
"""

from .envelope import envelope, unwrap, users_channel
from .facade import (
    chat_call,
    chat_exec_args,
    list_inbox,
    conversation,
    send_message,
    send_team_message,
    delete_message,
    edit_message,
    upload_attachment,
    download_attachment,
    mark_conversation,
    mute_conversation,
)

__all__ = [
    "envelope",
    "unwrap",
    "users_channel",
    "chat_call",
    "chat_exec_args",
    "list_inbox",
    "conversation",
    "send_message",
    "send_team_message",
    "delete_message",
    "edit_message",
    "upload_attachment",
    "download_attachment",
    "mark_conversation",
    "mute_conversation",
]
