"""
Logging setup for the command-line boundary.

Library modules only create `logging.getLogger(__name__)` loggers; the
handler is installed here, once, by the entry point.
"""

import logging
import sys

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_FORMAT = "[%(levelname)s] (%(module)s) Function %(funcName)s at line %(lineno)d: %(message)s"


class ANSIColors:
    """Options for colors."""

    DEBUG = "\033[36m"    # Cyan
    INFO = "\033[32m"     # Green
    WARNING = "\033[33m"  # Yellow
    ERROR = "\033[31m"    # Red
    CRITICAL = "\033[1;31m"  # Bold Red
    RESET = "\033[0m"


class ColorFormatter(logging.Formatter):
    """Formatter that colours the whole record by level."""

    COLORS = {
        logging.DEBUG: ANSIColors.DEBUG,
        logging.INFO: ANSIColors.INFO,
        logging.WARNING: ANSIColors.WARNING,
        logging.ERROR: ANSIColors.ERROR,
        logging.CRITICAL: ANSIColors.CRITICAL,
    }

    def format(self, record):
        log_message = super().format(record)
        color = self.COLORS.get(record.levelno, ANSIColors.RESET)
        return f"{color}{log_message}{ANSIColors.RESET}"


def configure_logging(level: str = "WARNING", stream=None) -> logging.Logger:
    """
    Install a single stderr handler on the package logger.

    Args:
        level: Level name; unknown names fall back to WARNING
        stream: Output stream (default: sys.stderr)

    Returns:
        The configured package logger
    """
    level = level.upper()
    if level not in VALID_LOG_LEVELS:
        level = "WARNING"

    stream = stream if stream is not None else sys.stderr
    handler = logging.StreamHandler(stream)

    if hasattr(stream, "isatty") and stream.isatty():
        handler.setFormatter(ColorFormatter(LOG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

    package_logger = logging.getLogger("sha256_digest")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return package_logger
