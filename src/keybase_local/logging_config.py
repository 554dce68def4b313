"""
Logging for keybase-local.

Every keybase spawn is logged at DEBUG and every error response at WARNING,
so the default console level (WARNING) only shows failed calls. stderr is
used so that logs never mix with JSON the CLI writes to stdout.

Environment:
    KEYBASE_LOCAL_LOG_LEVEL      console level (default WARNING)
    KEYBASE_LOCAL_MACHINE_MODE   no console output at all
    KEYBASE_LOCAL_FILE_LOGGING   also write DEBUG traces to ~/.keybase-local/logs
"""

import os
import sys
from loguru import logger

CONSOLE_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | pid {process} | {name}:{function}:{line} - {message}"

_logging_configured = False


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes")


def setup_logging(level=None, suppress_console=None, enable_file_logging=None, force=False):
    """
    Configure loguru's sinks for the library and CLI.

    Args:
        level: Console level; KEYBASE_LOCAL_LOG_LEVEL or WARNING when None
        suppress_console: Drop the console sink; KEYBASE_LOCAL_MACHINE_MODE when None
        enable_file_logging: Add the file sink; KEYBASE_LOCAL_FILE_LOGGING when None
        force: Reconfigure even if logging was already set up
    """
    global _logging_configured

    if _logging_configured and not force:
        return
    _logging_configured = True

    logger.remove()

    if level is None:
        level = os.getenv("KEYBASE_LOCAL_LOG_LEVEL", "WARNING").upper()
    if suppress_console is None:
        suppress_console = _env_flag("KEYBASE_LOCAL_MACHINE_MODE")
    if enable_file_logging is None:
        enable_file_logging = _env_flag("KEYBASE_LOCAL_FILE_LOGGING")

    if not suppress_console:
        logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)

    if enable_file_logging:
        from keybase_local.paths import get_paths
        paths = get_paths()
        paths.ensure_dirs()

        logger.add(
            paths.logs_dir / "keybase-local.log",
            level="DEBUG",
            format=FILE_FORMAT,
            rotation="5 MB",
            retention="7 days",
            compression="gz",
            catch=True,
        )


setup_logging()
