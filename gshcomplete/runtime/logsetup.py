"""structlog setup shared by the CLI and the shell."""

import logging
import sys

import structlog


def _stderr_logger(*args) -> structlog.PrintLogger:
    # the shell prompt and the ``complete`` output own stdout
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(level: str = "WARNING") -> None:
    """Filter structlog output below ``level`` and write it to stderr."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        logger_factory=_stderr_logger,
    )
