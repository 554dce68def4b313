"""
KBFS module: the Keybase filesystem mount.
"""

from .facade import status_file, is_mounted, status

__all__ = [
    "status_file",
    "is_mounted",
    "status",
]
