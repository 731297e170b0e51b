"""Logging setup.

Standard-library `logging` routed through Rich's handler so log lines and
CLI tables share the same console. Domain code only ever logs at DEBUG;
the CLI decides the level from settings or `--log-level`.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def setup_logging(level: str = "WARNING", *, console: Console | None = None) -> None:
    """Configure the root logger.

    Args:
        level: One of DEBUG, INFO, WARNING, ERROR (case-insensitive).
        console: Rich console to log to (stderr when omitted).
    """

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Get the logger for a module (typically `__name__`)."""

    return logging.getLogger(name)
