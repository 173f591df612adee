"""Main application package."""

from __future__ import annotations

from .application import Application, main
from .logging_setup import configure_logging

__all__ = [
    "Application",
    "main",
    "configure_logging",
]
