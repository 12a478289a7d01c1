"""Logging configuration for the GitHub Actions runner.

Records from the setup_liquibase loggers are rendered as workflow commands so
that the runner annotates warnings and errors and hides debug output unless
step debugging is enabled (RUNNER_DEBUG=1).
"""

import logging
import os
import sys
from typing import TextIO

_HANDLER_TAG = "_setup_liquibase_handler"

_COMMANDS = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


def escape_command_data(value: str) -> str:
    """Escape a workflow command message."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class GitHubActionsFormatter(logging.Formatter):
    """Format log records as GitHub Actions workflow commands.

    INFO records are printed as plain lines; DEBUG, WARNING and ERROR records
    become ::debug::, ::warning:: and ::error:: commands.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = _COMMANDS.get(record.levelno)
        if command is None:
            return message
        return f"::{command}::{escape_command_data(message)}"


def configure_logging(stream: TextIO | None = None, level: int | None = None) -> logging.Logger:
    """Attach the workflow command handler to the package logger.

    Safe to call repeatedly; the handler is only installed once.

    Args:
        stream: Output stream (defaults to stdout, where the runner reads commands)
        level: Log level (defaults to DEBUG when RUNNER_DEBUG=1, INFO otherwise)

    Returns:
        The configured package logger
    """
    package_logger = logging.getLogger("setup_liquibase")

    if level is None:
        level = logging.DEBUG if os.environ.get("RUNNER_DEBUG") == "1" else logging.INFO
    package_logger.setLevel(level)

    for handler in package_logger.handlers:
        if getattr(handler, _HANDLER_TAG, False):
            return package_logger

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(GitHubActionsFormatter("%(message)s"))
    setattr(handler, _HANDLER_TAG, True)
    package_logger.addHandler(handler)
    package_logger.propagate = False
    return package_logger
