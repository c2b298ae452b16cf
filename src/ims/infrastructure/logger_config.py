"""Application-wide logging configuration."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from ims.infrastructure.config.settings import settings


def setup_logging(level: str | None = None) -> None:
    """Route all log records through a single Rich console handler."""
    log_level_str = (level or settings.LOG_LEVEL).upper()
    log_level = getattr(logging, log_level_str, logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    rich_handler = RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_suppress=[logging],
    )
    root_logger.handlers = [rich_handler]
