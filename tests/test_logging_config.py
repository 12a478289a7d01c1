"""Tests for GitHub Actions log formatting."""

import io
import logging

import pytest
from setup_liquibase.logging_config import GitHubActionsFormatter
from setup_liquibase.logging_config import configure_logging


def _record(level: int, message: str) -> logging.LogRecord:
    return logging.LogRecord("setup_liquibase.test", level, __file__, 1, message, None, None)


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        (logging.DEBUG, "::debug::details"),
        (logging.INFO, "details"),
        (logging.WARNING, "::warning::details"),
        (logging.ERROR, "::error::details"),
    ],
)
def test_formatter_commands(level, expected):
    """Test levels map onto workflow commands."""
    assert GitHubActionsFormatter("%(message)s").format(_record(level, "details")) == expected


def test_formatter_escapes_multiline_commands():
    """Test command messages escape newlines and percent signs."""
    formatted = GitHubActionsFormatter("%(message)s").format(_record(logging.WARNING, "50%\nretry"))

    assert formatted == "::warning::50%25%0Aretry"


@pytest.fixture
def package_logger():
    logger = logging.getLogger("setup_liquibase")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    logger.handlers = []
    yield logger
    logger.handlers, level, logger.propagate = saved[0], saved[1], saved[2]
    logger.setLevel(level)


def test_configure_logging_is_idempotent(package_logger, monkeypatch):
    """Test repeated configuration installs a single handler."""
    monkeypatch.delenv("RUNNER_DEBUG", raising=False)
    stream = io.StringIO()

    configure_logging(stream=stream)
    configure_logging(stream=stream)
    logging.getLogger("setup_liquibase.installer").info("Setting up Liquibase")

    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.INFO
    assert stream.getvalue() == "Setting up Liquibase\n"


def test_runner_debug_enables_debug(package_logger, monkeypatch):
    """Test RUNNER_DEBUG=1 turns on debug commands."""
    monkeypatch.setenv("RUNNER_DEBUG", "1")
    stream = io.StringIO()

    configure_logging(stream=stream)
    logging.getLogger("setup_liquibase.extraction").debug("tar xzf")

    assert stream.getvalue() == "::debug::tar xzf\n"
