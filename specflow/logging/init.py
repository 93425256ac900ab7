from __future__ import annotations

import logging
import sys

"""Logging initialization with labeled prefixes.

Every line the compiler prints goes through the application logger and is
prefixed with a label: DEBUG|INFO|WARN|ERROR|SUMMARY.

Records below WARNING go to stdout; WARN and ERROR go to stderr, so a
non-fatal warning and a fatal error are both visible on the error stream
and distinguishable by their label.
"""

__all__ = [
    "setup_logging",
    "get_logger",
    "log_summary",
    "reset_logging",
    "enable_debug",
    "LOGGER_NAME",
]

LOGGER_NAME = "specflow"

# Custom SUMMARY level (between INFO=20 and WARNING=30)
SUMMARY_LEVEL = 25

_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """Formatter producing `LABEL message` lines."""

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
        SUMMARY_LEVEL: "SUMMARY",
    }

    def format(self, record: logging.LogRecord) -> str:
        level_label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        return f"{level_label} {record.getMessage()}"


class _BelowWarningFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def setup_logging() -> logging.Logger:
    """Configure the application logger (idempotent).

    Returns:
        The `specflow` logger with a stdout handler (< WARNING) and a
        stderr handler (>= WARNING), both using LabeledFormatter
    """
    global _logger

    if _logger is not None:
        return _logger

    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = LabeledFormatter()

    out_handler = logging.StreamHandler(sys.stdout)
    out_handler.setLevel(logging.INFO)
    out_handler.addFilter(_BelowWarningFilter())
    out_handler.setFormatter(formatter)

    err_handler = logging.StreamHandler(sys.stderr)
    err_handler.setLevel(logging.WARNING)
    err_handler.setFormatter(formatter)

    logger.addHandler(out_handler)
    logger.addHandler(err_handler)

    # Prevent propagation to root logger to avoid duplicate output
    logger.propagate = False

    _logger = logger
    return logger


def enable_debug(logger: logging.Logger) -> None:
    """Lower the logger and its stdout handler to DEBUG."""
    logger.setLevel(logging.DEBUG)
    for h in logger.handlers:
        if h.level < logging.WARNING:
            h.setLevel(logging.DEBUG)


def get_logger() -> logging.Logger:
    """Get the configured application logger, configuring it if needed."""
    if _logger is None:
        return setup_logging()
    return _logger


def log_summary(message: str) -> None:
    """Log a message at SUMMARY level."""
    get_logger().log(SUMMARY_LEVEL, message)


def reset_logging() -> None:
    """Reset the global logger state. Mainly for testing purposes."""
    global _logger
    _logger = None
