"""Bundled avatar assets."""

from __future__ import annotations

from pathlib import Path

from .ascii_generator import generate_avatar_text, render_half_blocks

ASSETS_DIR = Path(__file__).parent

# The photo is not checked in; drop a PNG here to enable the image overlay.
AVATAR_IMAGE_PATH = ASSETS_DIR / "avatar-transparent@2x.png"
AVATAR_TEXT_PATH = ASSETS_DIR / "avatar.txt"

__all__ = [
    "ASSETS_DIR",
    "AVATAR_IMAGE_PATH",
    "AVATAR_TEXT_PATH",
    "generate_avatar_text",
    "render_half_blocks",
]
