"""Renderer package for posva-card."""

from __future__ import annotations

from .ascii_avatar import load_ascii_avatar_lines, normalize_ascii_avatar
from .card import GRADIENT, build_box, render_card
from .display import (
    KITTY_CHUNK_SIZE,
    detect_image_protocol,
    encode_image,
    iterm_image,
    kitty_image,
)

__all__ = [
    "load_ascii_avatar_lines",
    "normalize_ascii_avatar",
    "GRADIENT",
    "build_box",
    "render_card",
    "KITTY_CHUNK_SIZE",
    "detect_image_protocol",
    "encode_image",
    "iterm_image",
    "kitty_image",
]
