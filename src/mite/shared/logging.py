"""Logging setup for the mite package."""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from mite.shared.config.settings import Settings, get_settings

LOGGER_NAME = "mite"


def setup_logging(settings: Settings | None = None, level: str | None = None) -> logging.Logger:
    """Configure the package logger from settings.

    Args:
        settings: Settings to read from, defaults to the cached instance
        level: Explicit level overriding the configured one

    Returns:
        The configured ``mite`` logger
    """
    config = (settings or get_settings()).get_logging_config()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or config["level"]).upper())

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if config["console_colored"]:
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(config["format"]))

    logger.addHandler(handler)
    logger.propagate = False
    return logger
