"""
keybase-local - Python bindings for a locally running Keybase

Wraps the keybase CLI's JSON chat API, team administration and the KBFS
mount. Nothing is checked at import time: API calls verify that keybase is
running and logged in right before they spawn it.
"""

__version__ = "0.5.0"

from keybase_local import chat, kbfs, team
from keybase_local.exceptions import (
    KeybaseError,
    KeybaseNotInstalledError,
    KeybaseNotRunningError,
    KeybaseNotLoggedInError,
    KBFSNotRunningError,
    KeybaseCommandError,
    ChatError,
    TeamError,
)
from keybase_local.paths import KeybasePaths, get_paths
from keybase_local.status import (
    is_running,
    is_kbfs_running,
    is_logged_in,
    current_user,
    running_version,
    private_dir,
    public_dir,
    get_status,
    ensure_ready,
)

__all__ = [
    "__version__",
    "chat",
    "kbfs",
    "team",
    "KeybaseError",
    "KeybaseNotInstalledError",
    "KeybaseNotRunningError",
    "KeybaseNotLoggedInError",
    "KBFSNotRunningError",
    "KeybaseCommandError",
    "ChatError",
    "TeamError",
    "KeybasePaths",
    "get_paths",
    "is_running",
    "is_kbfs_running",
    "is_logged_in",
    "current_user",
    "running_version",
    "private_dir",
    "public_dir",
    "get_status",
    "ensure_ready",
]
