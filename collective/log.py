"""Logging setup."""

import logging

from rich.logging import RichHandler

from collective.config import settings


def configure_logging(level: str | None = None) -> None:
    """Route package logging through a rich handler."""
    logging.basicConfig(
        level=level or settings.log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )
