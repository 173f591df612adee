"""Logging configuration.

Log records go to stderr so stdout carries nothing but the card.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, TextIO

LOG_LEVEL_ENV = "POSVA_CARD_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] %(message)s"
DEFAULT_LEVEL = logging.WARNING


def resolve_level(level_name: Optional[str]) -> int:
    """Map a level name to a logging level, falling back to WARNING."""
    if not level_name:
        return DEFAULT_LEVEL
    level = logging.getLevelName(level_name.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LEVEL


def configure_logging(level_name: Optional[str] = None, stream: Optional[TextIO] = None) -> logging.Logger:
    """Set up the package logger with a single stderr handler.

    Args:
        level_name: Level to use; defaults to $POSVA_CARD_LOG_LEVEL.
        stream: Destination stream; defaults to sys.stderr.

    Returns:
        The configured package logger.
    """
    if level_name is None:
        level_name = os.environ.get(LOG_LEVEL_ENV)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger("posva_card")
    # Clear any existing handlers.
    root.handlers = []
    root.addHandler(handler)
    root.setLevel(resolve_level(level_name))
    root.propagate = False
    return root
