"""Logging configuration for the command line."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "rule_tictactoe"


def configure_logging(
    level: str = "INFO", console: Optional[Console] = None
) -> logging.Logger:
    """
    Route package log records to a rich handler on stderr.

    Calling this again replaces the previously installed handler.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        console: Console for the handler (stderr console if not given)

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False
    return logger
