"""
Presence checks for the local Keybase installation.

Answers "is keybase running", "is KBFS running", "who is logged in" and
"which version is running". The daemon's status document is read once per
process and reused; call reset_status() (or pass refresh=True) to re-read it.
"""

from pathlib import Path
from typing import Iterable, Optional

import psutil
from loguru import logger
from pydantic import ValidationError

from .exceptions import KeybaseCommandError, KeybaseNotLoggedInError, KeybaseNotRunningError
from .paths import get_paths
from .process import keybase_args, run_json, run_text
from .schemas import KeybaseStatus
from .user_config import get_user_config

_status: Optional[KeybaseStatus] = None


def _process_running(names: Iterable[str]) -> bool:
    """
    Check the process list for any process with one of the given names.

    psutil skips processes that exit mid-scan and reports None for names
    it isn't allowed to read.
    """
    wanted = {name.lower() for name in names}
    for proc in psutil.process_iter(["name"]):
        name = proc.info.get("name")
        if name and name.lower() in wanted:
            return True
    return False


def is_running() -> bool:
    """
    Check whether the keybase daemon is running.

    Returns:
        True if a keybase process is in the process list
    """
    running = _process_running(get_user_config().get("keybase.process_names", []))
    logger.debug(f"keybase running: {running}")
    return running


def is_kbfs_running() -> bool:
    """
    Check whether the KBFS companion process is running.

    Returns:
        True if a KBFS process is in the process list
    """
    running = _process_running(get_user_config().get("kbfs.process_names", []))
    logger.debug(f"kbfs running: {running}")
    return running


def get_status(refresh: bool = False) -> KeybaseStatus:
    """
    Get the daemon's status, as reported by `keybase status -j`.

    Args:
        refresh: Re-read the status instead of using the memoised copy

    Returns:
        Parsed status

    Raises:
        KeybaseCommandError: If keybase reports something that isn't a status
    """
    global _status
    if _status is None or refresh:
        args = keybase_args("status", "-j")
        raw = run_json(args)
        try:
            _status = KeybaseStatus.model_validate(raw)
        except ValidationError as e:
            raise KeybaseCommandError(args, f"unexpected status output ({e.error_count()} problems): {repr(raw)[:200]}")
    return _status


def reset_status() -> None:
    """Forget the memoised status (useful for testing)."""
    global _status
    _status = None


def is_logged_in() -> bool:
    """Check whether a user is logged in to the daemon."""
    return bool(get_status().logged_in)


def current_user() -> Optional[str]:
    """Get the currently logged-in user."""
    return get_status().username


def private_dir() -> Path:
    """Get the current user's private KBFS directory."""
    return get_paths().private_dir(_require_user())


def public_dir() -> Path:
    """Get the current user's public KBFS directory."""
    return get_paths().public_dir(_require_user())


def _require_user() -> str:
    user = current_user()
    if not user:
        raise KeybaseNotLoggedInError()
    return user


def running_version() -> str:
    """
    Get the running keybase's version string.

    Returns:
        Version, e.g. "6.2.4-20240101011938+ae7e4a1c15"

    Raises:
        KeybaseNotRunningError: If keybase is not running
    """
    if not is_running():
        raise KeybaseNotRunningError()

    args = keybase_args("--version")
    # "keybase version 6.2.4-..."
    parts = run_text(args).split()
    if len(parts) < 3:
        raise KeybaseCommandError(args, f"unexpected version output: {' '.join(parts)!r}")
    return parts[2]


def ensure_ready() -> None:
    """
    Verify keybase can serve API calls.

    Raises:
        KeybaseNotRunningError: If keybase is not running
        KeybaseNotLoggedInError: If nobody is logged in
    """
    config = get_user_config()

    if config.get("checks.require_running", True) and not is_running():
        raise KeybaseNotRunningError()

    if config.get("checks.require_logged_in", True) and not is_logged_in():
        raise KeybaseNotLoggedInError()
