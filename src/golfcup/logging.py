"""Logging helpers for the tournament tools."""

from __future__ import annotations

import logging
from typing import Iterable


def configure_logging(level: int | str = logging.INFO, handlers: Iterable[logging.Handler] | None = None) -> None:
    """Configure root logging for command line runs.

    Library modules only create loggers; applications embedding the scoring
    engine call this (or their own setup) once at start-up.
    """

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=list(handlers) if handlers else None,
    )
