"""Logging configuration for CHECK-SPELLING.

Environment Variables:
    CHECK_SPELLING_LOG: Set to "true" to enable logging (default: "false")
    CHECK_SPELLING_LOG_FILE: Path to log file (default: ~/.check-spelling.log)
"""

import logging
import os
from pathlib import Path

LOG_ENABLED = os.environ.get("CHECK_SPELLING_LOG", "false").lower() == "true"
LOG_FILE = Path(
    os.environ.get("CHECK_SPELLING_LOG_FILE", str(Path.home() / ".check-spelling.log"))
)

_logger: logging.Logger | None = None


def setup_logging() -> logging.Logger:
    """Attach a file handler to the "check_spelling" logger if logging is enabled.

    The handler is configured once per process; later calls return the
    same logger. When CHECK_SPELLING_LOG is not "true" a NullHandler keeps
    the wrapper silent.
    """
    global _logger

    if _logger is None:
        logger = logging.getLogger("check_spelling")
        logger.handlers.clear()
        if LOG_ENABLED:
            LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
            handler: logging.Handler = logging.FileHandler(LOG_FILE)
            handler.setFormatter(
                logging.Formatter("[%(asctime)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
            )
            logger.setLevel(logging.INFO)
        else:
            handler = logging.NullHandler()
        logger.addHandler(handler)
        _logger = logger
    return _logger


def log_message(message: str) -> None:
    """Write a message to the log file (no-op unless CHECK_SPELLING_LOG=true)."""
    setup_logging().info(message)


def log_command(command: str, exit_code: int = 0) -> None:
    """Record a cargo or typos invocation and its exit status."""
    setup_logging().info(f"COMMAND: {command} | EXIT_CODE: {int(exit_code)}")


__all__ = [
    "LOG_ENABLED",
    "LOG_FILE",
    "setup_logging",
    "log_message",
    "log_command",
]
