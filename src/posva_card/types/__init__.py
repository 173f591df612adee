"""Type definitions for posva-card."""

from .capability import ImageProtocol
from .config import AvatarLines, CardConfig

__all__ = [
    "ImageProtocol",
    "AvatarLines",
    "CardConfig",
]
