"""Logging configuration for the workspace."""

from __future__ import annotations

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def _parse_level(value: Optional[str], default: int) -> int:
    if not value:
        return default
    return _LEVELS.get(value.upper(), default)


def configure_logging(level: Optional[str] = None, console: Optional[Console] = None) -> int:
    """
    Route all `agent_workspace` loggers through a Rich handler.

    AGENT_WORKSPACE_LOG_LEVEL overrides the configured level.
    Returns the effective level.
    """
    level_value = _parse_level(
        os.getenv("AGENT_WORKSPACE_LOG_LEVEL") or level,
        logging.WARNING,
    )

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("[%(name)s] %(message)s"))

    logging.basicConfig(
        level=level_value,
        handlers=[handler],
        force=True,
    )
    logging.captureWarnings(True)

    logging.getLogger(__name__).debug("Logging initialized at %s", logging.getLevelName(level_value))
    return level_value
