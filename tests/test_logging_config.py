"""
Tests for logging setup: console level, machine mode and the file sink.
"""

import pytest
from loguru import logger

pytestmark = pytest.mark.fast

from keybase_local.logging_config import setup_logging
from keybase_local.paths import get_paths


def test_default_console_level_hides_spawn_traces(capsys, monkeypatch):
    monkeypatch.delenv("KEYBASE_LOCAL_LOG_LEVEL", raising=False)
    setup_logging(suppress_console=False, enable_file_logging=False, force=True)

    logger.debug("spawning keybase chat api")
    logger.warning("Chat API call list failed")

    err = capsys.readouterr().err
    assert "spawning keybase chat api" not in err
    assert "Chat API call list failed" in err


def test_level_from_environment(capsys, monkeypatch):
    monkeypatch.setenv("KEYBASE_LOCAL_LOG_LEVEL", "debug")
    setup_logging(suppress_console=False, enable_file_logging=False, force=True)

    logger.debug("spawning keybase chat api")

    assert "spawning keybase chat api" in capsys.readouterr().err


def test_machine_mode_silences_console(capsys, monkeypatch):
    monkeypatch.setenv("KEYBASE_LOCAL_MACHINE_MODE", "1")
    setup_logging(level="DEBUG", enable_file_logging=False, force=True)

    logger.warning("Team command failed")

    assert capsys.readouterr().err == ""


def test_file_sink_keeps_debug_traces():
    setup_logging(level="WARNING", suppress_console=True, enable_file_logging=True, force=True)

    logger.debug("spawning keybase team list-memberships")
    logger.remove()

    log_file = get_paths().logs_dir / "keybase-local.log"
    contents = log_file.read_text()
    assert "DEBUG" in contents
    assert "pid " in contents
    assert "spawning keybase team list-memberships" in contents


def test_configured_once_without_force(capsys):
    setup_logging(level="DEBUG", suppress_console=False, enable_file_logging=False, force=True)
    setup_logging(level="ERROR", suppress_console=True)

    logger.info("still configured at DEBUG")

    assert "still configured at DEBUG" in capsys.readouterr().err
