"""
Subprocess plumbing for talking to the keybase binary.

Every call is one process spawn: the request (if any) is written to stdin,
stdin is closed so keybase knows the request is complete, and stdout is
read back whole.
"""

import json
import subprocess
from typing import Any, List, Optional, Sequence

from loguru import logger

from .exceptions import KeybaseCommandError, KeybaseNotInstalledError
from .user_config import get_user_config


def keybase_args(*parts: str) -> List[str]:
    """
    Build an argv that starts with the configured keybase binary.

    Args:
        *parts: Subcommand and arguments

    Returns:
        Full argument vector
    """
    return [get_user_config().get("keybase.binary", "keybase"), *parts]


def _timeout(timeout: Optional[float]) -> Optional[float]:
    if timeout is not None:
        return timeout
    return get_user_config().get("keybase.timeout")


def invoke(
    args: Sequence[str],
    payload: Optional[str] = None,
    timeout: Optional[float] = None,
) -> subprocess.CompletedProcess:
    """
    Run a keybase command, feeding it payload on stdin and capturing its output.

    Args:
        args: Argument vector
        payload: Data written to stdin (stdin is empty when None)
        timeout: Seconds to wait (default: keybase.timeout setting)

    Returns:
        The completed process with text stdout/stderr

    Raises:
        KeybaseNotInstalledError: If the binary can't be found
        KeybaseCommandError: If the command times out
    """
    args = list(args)
    logger.debug(f"Spawning {args}")

    try:
        result = subprocess.run(
            args,
            input=payload or "",
            capture_output=True,
            text=True,
            timeout=_timeout(timeout),
        )
    except FileNotFoundError:
        raise KeybaseNotInstalledError(args[0])
    except subprocess.TimeoutExpired as e:
        raise KeybaseCommandError(args, f"timed out after {e.timeout}s")

    if result.returncode != 0:
        logger.debug(f"{args[0]} exited {result.returncode}: {result.stderr.strip()}")

    return result


def parse_json(args: Sequence[str], output: str) -> Any:
    """
    Parse a command's stdout as JSON.

    Args:
        args: Argument vector (for error reporting)
        output: Raw stdout

    Returns:
        Parsed JSON, or {} when the command printed nothing

    Raises:
        KeybaseCommandError: If the output is not valid JSON
    """
    if not output.strip():
        return {}

    try:
        return json.loads(output)
    except json.JSONDecodeError as e:
        snippet = output.strip()[:200]
        raise KeybaseCommandError(args, f"invalid JSON output ({e.msg}): {snippet!r}")


def run_json(
    args: Sequence[str],
    payload: Optional[str] = None,
    timeout: Optional[float] = None,
) -> Any:
    """
    Run a command and parse its stdout as JSON.

    Args:
        args: Argument vector
        payload: Data written to stdin
        timeout: Seconds to wait

    Returns:
        Parsed JSON ({} for empty output)
    """
    result = invoke(args, payload=payload, timeout=timeout)
    return parse_json(args, result.stdout)


def run_text(args: Sequence[str], timeout: Optional[float] = None) -> str:
    """Run a command and return its stdout."""
    return invoke(args, timeout=timeout).stdout


def run(args: Sequence[str], timeout: Optional[float] = None) -> bool:
    """
    Run a command without capturing output.

    Args:
        args: Argument vector
        timeout: Seconds to wait

    Returns:
        True if the command exited successfully
    """
    args = list(args)
    logger.debug(f"Running {args}")

    try:
        completed = subprocess.run(args, timeout=_timeout(timeout))
    except FileNotFoundError:
        raise KeybaseNotInstalledError(args[0])
    except subprocess.TimeoutExpired as e:
        raise KeybaseCommandError(args, f"timed out after {e.timeout}s")

    return completed.returncode == 0
