"""Terminal image capability types."""

from __future__ import annotations

from enum import Enum


class ImageProtocol(Enum):
    """Inline image protocols a terminal can speak."""

    KITTY = "kitty"
    ITERM = "iterm"
    NONE = "none"

    @property
    def is_graphical(self) -> bool:
        """Whether this protocol can display raster images."""
        return self is not ImageProtocol.NONE
