"""
Pytest configuration for the keybase-local test suite.

This conftest.py provides:
- Machine-mode logging (suppresses console output)
- An isolated HOME and settings singletons reset around every test
- Fixtures that stand in for the keybase binary and the process list
"""

import os
import subprocess
from unittest.mock import MagicMock, patch

import pytest

from keybase_local import status
from keybase_local.logging_config import setup_logging
from keybase_local.paths import reset_paths
from keybase_local.schemas import KeybaseStatus
from keybase_local.user_config import ENV_OVERRIDES, reset_user_config


# ============================================================================
# GLOBAL CONFIGURATION
# ============================================================================

def pytest_configure(config):
    os.environ.setdefault("KEYBASE_LOCAL_MACHINE_MODE", "1")


@pytest.fixture(autouse=True)
def setup_test_logging():
    """Machine mode by default - suppress console logs for clean test output."""
    setup_logging(level="DEBUG", suppress_console=True, enable_file_logging=False, force=True)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point HOME at a temp dir and drop env overrides so settings are defaults."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)

    reset_user_config()
    reset_paths()
    status.reset_status()
    yield
    reset_user_config()
    reset_paths()
    status.reset_status()


# ============================================================================
# KEYBASE STAND-INS
# ============================================================================

def _completed(stdout: str = "", returncode: int = 0, stderr: str = "") -> subprocess.CompletedProcess:
    """Build the result of a finished keybase invocation."""
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


@pytest.fixture
def mock_run():
    """
    Replace subprocess.run for keybase invocations.

    Usage:
        def test_something(mock_run):
            mock_run.return_value = completed('{"result": {}}')
            ...
            assert mock_run.call_args.kwargs["input"] == ...
    """
    with patch("keybase_local.process.subprocess.run") as run:
        run.return_value = _completed('{"result": {}}')
        yield run


@pytest.fixture
def completed():
    """Factory for finished keybase invocations: completed(stdout, returncode, stderr)."""
    return _completed


@pytest.fixture
def process_names():
    """
    Replace the process list. Append names to the yielded list to "start" processes.
    """
    names = []

    def fake_process_iter(attrs=None):
        for name in names:
            proc = MagicMock()
            proc.info = {"name": name}
            yield proc

    with patch("keybase_local.status.psutil.process_iter", side_effect=fake_process_iter):
        yield names


@pytest.fixture
def ready(monkeypatch):
    """Keybase running with alice logged in."""
    monkeypatch.setattr(status, "is_running", lambda: True)
    monkeypatch.setattr(status, "_status", KeybaseStatus(Username="alice", LoggedIn=True))
