"""
Tests for KBFS mount detection and the status file.
"""

import json

import pytest

pytestmark = pytest.mark.fast

from keybase_local import kbfs
from keybase_local.exceptions import KBFSNotRunningError


@pytest.fixture
def mount(tmp_path, monkeypatch):
    """An empty directory standing in for the KBFS mountpoint."""
    path = tmp_path / "keybase"
    path.mkdir()
    monkeypatch.setenv("KEYBASE_LOCAL_KBFS_MOUNT", str(path))
    return path


def test_plain_directory_is_not_mounted(mount):
    assert kbfs.is_mounted() is False


def test_status_file_means_mounted(mount):
    (mount / ".kbfs_status").write_text("{}")
    assert kbfs.is_mounted() is True
    assert kbfs.status_file() == mount.resolve() / ".kbfs_status"


def test_status_contents(mount):
    (mount / ".kbfs_status").write_text(json.dumps({
        "CurrentUser": "alice",
        "IsConnected": True,
        "UsageBytes": 1024,
    }))

    result = kbfs.status()
    assert result["CurrentUser"] == "alice"
    assert result["IsConnected"] is True


def test_status_requires_mount(mount):
    with pytest.raises(KBFSNotRunningError, match="KBFS needs to be enabled and running"):
        kbfs.status()


def test_symlinked_mount_is_resolved(mount, tmp_path, monkeypatch):
    link = tmp_path / "kb-link"
    link.symlink_to(mount)
    monkeypatch.setenv("KEYBASE_LOCAL_KBFS_MOUNT", str(link))
    (mount / ".kbfs_status").write_text("{}")

    assert kbfs.status_file() == mount.resolve() / ".kbfs_status"
    assert kbfs.is_mounted() is True
