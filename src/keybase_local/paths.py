"""
keybase-local Path Configuration

Centralized path management for everything the library touches on disk.

Keybase's own files (owned by the daemon, read-only for us):
    <config dir>/config.json      # %LOCALAPPDATA%/Keybase, ~/Library/Application Support/Keybase
                                  # or ~/.config/keybase depending on platform
KBFS mount (default /keybase):
    /keybase/.kbfs_status         # only present on a live KBFS mount
    /keybase/private/<user>/
    /keybase/public/<user>/
    /keybase/team/<team>/
Library state:
    ~/.keybase-local/
    ├── config.json               # library settings (see user_config)
    └── logs/                     # log files (opt-in)
"""

import json
import os
import platform
from pathlib import Path
from typing import Any, Dict, Optional

from keybase_local.logging_config import logger
from keybase_local.user_config import get_user_config


class KeybasePaths:
    """
    Centralized path configuration for keybase-local.

    Paths are resolved lazily so that settings and environment changes
    are picked up by a fresh instance.
    """

    STATE_DIR_NAME = ".keybase-local"
    LOGS_DIR = "logs"

    CONFIG_FILE_NAME = "config.json"
    KBFS_STATUS_NAME = ".kbfs_status"

    def __init__(self, system: Optional[str] = None, kbfs_mount: Optional[Path] = None):
        """
        Initialize paths configuration.

        Args:
            system: Platform name as returned by platform.system(). Defaults to the host.
            kbfs_mount: KBFS mountpoint override. Defaults to the kbfs.mount setting.
        """
        self._system = system or platform.system()
        self._kbfs_mount = kbfs_mount

    @property
    def config_dir(self) -> Path:
        """Get the Keybase configuration directory."""
        if self._system == "Windows":
            return Path(os.environ.get("LOCALAPPDATA", "~")).expanduser() / "Keybase"
        if self._system == "Darwin":
            return Path.home() / "Library" / "Application Support" / "Keybase"
        return Path.home() / ".config" / "keybase"

    @property
    def config_file(self) -> Path:
        """Get the Keybase configuration file (not guaranteed to exist)."""
        return self.config_dir / self.CONFIG_FILE_NAME

    @property
    def kbfs_mount(self) -> Path:
        """Get the KBFS mountpoint with symlinks resolved."""
        mount = self._kbfs_mount or Path(get_user_config().get("kbfs.mount", "/keybase"))
        return Path(mount).resolve()

    @property
    def kbfs_status_file(self) -> Path:
        """Get the hidden status file KBFS exposes at the mount root."""
        return self.kbfs_mount / self.KBFS_STATUS_NAME

    def private_dir(self, user: str) -> Path:
        """Get a user's private KBFS directory."""
        return self.kbfs_mount / "private" / user

    def public_dir(self, user: str) -> Path:
        """Get a user's public KBFS directory."""
        return self.kbfs_mount / "public" / user

    def team_dir(self, team: str) -> Path:
        """Get a team's KBFS directory."""
        return self.kbfs_mount / "team" / team

    @property
    def state_dir(self) -> Path:
        """Get the library's own state directory."""
        return Path.home() / self.STATE_DIR_NAME

    @property
    def logs_dir(self) -> Path:
        """Get the logs directory path."""
        return self.state_dir / self.LOGS_DIR

    def ensure_dirs(self) -> None:
        """Create the library's state directories if they don't exist."""
        self.state_dir.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(exist_ok=True)

    def read_daemon_config(self) -> Dict[str, Any]:
        """
        Read Keybase's config.json.

        Returns:
            Parsed configuration, or an empty dict if the file doesn't exist
        """
        if not self.config_file.exists():
            logger.debug(f"No keybase config at {self.config_file}")
            return {}

        with open(self.config_file, 'r') as f:
            return json.load(f)


# Global instance for convenience
_default_paths: Optional[KeybasePaths] = None


def get_paths() -> KeybasePaths:
    """Get the shared paths configuration."""
    global _default_paths
    if _default_paths is None:
        _default_paths = KeybasePaths()
    return _default_paths


def reset_paths() -> None:
    """Reset the global paths instance (useful for testing)."""
    global _default_paths
    _default_paths = None
