"""
KBFS facade.

Whether KBFS is mounted is decided by the hidden status file at the mount
root: a stray directory at the mountpoint won't have it.
"""

import json
from pathlib import Path
from typing import Any, Dict

from loguru import logger

from ..exceptions import KBFSNotRunningError
from ..paths import get_paths


def status_file() -> Path:
    """Path of KBFS's hidden status file."""
    return get_paths().kbfs_status_file


def is_mounted() -> bool:
    """
    Check whether KBFS is mounted.

    Returns:
        True if the KBFS status file exists
    """
    return status_file().exists()


def status() -> Dict[str, Any]:
    """
    Read KBFS's status file.

    Returns:
        Parsed contents of the status file

    Raises:
        KBFSNotRunningError: If KBFS is not mounted
    """
    path = status_file()
    if not path.exists():
        raise KBFSNotRunningError()

    logger.debug(f"Reading {path}")
    with open(path, 'r') as f:
        return json.load(f)
