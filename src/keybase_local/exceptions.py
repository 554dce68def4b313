# Custom exceptions for keybase-local

from typing import Optional


class KeybaseError(Exception):
    """Base exception for all library-specific errors."""
    pass


class KeybaseNotInstalledError(KeybaseError):
    """Raised if a Keybase installation can't be found."""
    def __init__(self, binary: str = "keybase"):
        self.binary = binary
        super().__init__(f"keybase needs to be installed ({binary!r} not found)")


class KeybaseNotRunningError(KeybaseError):
    """Raised whenever Keybase is not running locally."""
    def __init__(self):
        super().__init__("keybase needs to be running")


class KeybaseNotLoggedInError(KeybaseError):
    """Raised whenever Keybase is running without a logged-in user."""
    def __init__(self):
        super().__init__("keybase needs a logged-in user")


class KBFSNotRunningError(KeybaseError):
    """Raised whenever KBFS is not running locally."""
    def __init__(self):
        super().__init__("KBFS needs to be enabled and running")


class KeybaseCommandError(KeybaseError):
    """Raised when a keybase invocation times out or produces unusable output."""

    def __init__(self, args: list, message: str):
        self.command = list(args)
        self.message = message
        super().__init__(f"{' '.join(self.command)}: {message}")


class ChatError(KeybaseError):
    """Raised whenever a chat API call returns an error envelope."""

    def __init__(self, message: str, code: Optional[int] = None):
        self.message = message
        self.code = code
        super().__init__(message)


class TeamError(KeybaseError):
    """Raised when a team command is rejected locally or by keybase."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
