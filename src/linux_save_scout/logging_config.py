"""Logging configuration for Linux Save Scout.

Library code logs through child loggers of ``linux_save_scout``. Nothing is
printed unless the CLI (or an embedding application) calls setup_logging().
"""

import logging
import sys

# Below DEBUG: per-record chatter during library scans
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure package-wide logging.

    Args:
        debug: If True, log TRACE and above to stderr, otherwise WARNING

    Returns:
        The root logger for the package
    """
    logger = logging.getLogger("linux_save_scout")
    logger.setLevel(TRACE if debug else logging.WARNING)

    # Clear any existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(TRACE if debug else logging.WARNING)
    handler.setFormatter(logging.Formatter(
        "%(levelname)s - %(name)s - %(message)s"
    ))
    logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger for a specific module.

    Args:
        name: Module name (e.g., 'heroic.library', 'wrap.heroic')

    Returns:
        A logger instance for the module
    """
    return logging.getLogger(f"linux_save_scout.{name}")


def log_trace(logger: logging.Logger, message: str, *args) -> None:
    """Log a message at TRACE level."""
    logger.log(TRACE, message, *args)
