from __future__ import annotations

import logging
from io import StringIO

from specflow.logging.init import (
    LOGGER_NAME,
    SUMMARY_LEVEL,
    LabeledFormatter,
    enable_debug,
    get_logger,
    log_summary,
    setup_logging,
)


def test_setup_logging_creates_logger_with_two_handlers():
    logger = setup_logging()

    assert logger.name == LOGGER_NAME == "specflow"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2
    assert all(isinstance(h, logging.StreamHandler) for h in logger.handlers)
    assert all(isinstance(h.formatter, LabeledFormatter) for h in logger.handlers)
    assert logger.propagate is False


def test_logging_labeled_prefixes():
    """Output lines carry INFO|WARN|ERROR|SUMMARY labels."""
    captured_output = StringIO()

    logger = logging.getLogger("test_specflow_labels")
    logger.setLevel(logging.INFO)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")

    handler = logging.StreamHandler(captured_output)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    logger.info("Test info message")
    logger.warning("Test warning message")
    logger.error("Test error message")
    logger.log(SUMMARY_LEVEL, "Test summary message")

    lines = captured_output.getvalue().strip().split("\n")
    assert lines == [
        "INFO Test info message",
        "WARN Test warning message",
        "ERROR Test error message",
        "SUMMARY Test summary message",
    ]


def test_info_to_stdout_warnings_to_stderr(capsys):
    logger = setup_logging()
    logger.info("normal output")
    log_summary("journeys=1")
    logger.warning("inconsistent flag")
    logger.error("broken row")

    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["INFO normal output", "SUMMARY journeys=1"]
    assert captured.err.splitlines() == ["WARN inconsistent flag", "ERROR broken row"]


def test_child_module_loggers_use_app_handlers(capsys):
    setup_logging()
    logging.getLogger("specflow.services.grouping").warning("from child")
    assert "WARN from child" in capsys.readouterr().err


def test_enable_debug(capsys):
    logger = setup_logging()
    logger.debug("hidden")
    enable_debug(logger)
    logger.debug("shown")
    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "DEBUG shown" in out


def test_get_logger_returns_configured_logger():
    setup_logger = setup_logging()
    assert get_logger() is setup_logger


def test_setup_logging_idempotent():
    logger1 = setup_logging()
    logger2 = setup_logging()
    assert logger1 is logger2
    assert len(logger1.handlers) == 2
