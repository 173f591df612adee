"""Pytest configuration and fixtures."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from unittest.mock import patch

import numpy as np
import pytest
from PIL import Image

from posva_card.types import CardConfig


@pytest.fixture
def clean_env():
    """Run with an empty environment so the host terminal can't leak in."""
    with patch.dict(os.environ, {}, clear=True):
        yield


@pytest.fixture
def avatar_image() -> Image.Image:
    """A small RGBA avatar: opaque square on a transparent background."""
    pixels = np.zeros((16, 16, 4), dtype=np.uint8)
    pixels[4:12, 4:12] = (255, 0, 0, 255)
    return Image.fromarray(pixels)


@pytest.fixture
def png_file(tmp_path, avatar_image) -> Path:
    """A real PNG avatar on disk."""
    path = tmp_path / "avatar.png"
    avatar_image.save(path, format="PNG")
    return path


@pytest.fixture
def noisy_png_file(tmp_path) -> Path:
    """A PNG large enough to need several Kitty chunks."""
    rng = np.random.default_rng(42)
    pixels = rng.integers(0, 256, size=(64, 64, 4), dtype=np.uint8)
    path = tmp_path / "noisy.png"
    Image.fromarray(pixels).save(path, format="PNG")
    return path


@pytest.fixture
def ascii_file(tmp_path) -> Path:
    """A four-line ASCII avatar with cursor toggles and padded lines."""
    path = tmp_path / "avatar.txt"
    path.write_text(
        "\x1b[?25l\x1b[31m####\x1b[0m\n"
        "\x1b[32m#  #   \x1b[0m\n"
        "\n"
        "\x1b[33m#  #\n"
        "\x1b[34m####  \x1b[0m\x1b[?25h\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def missing_config(tmp_path) -> CardConfig:
    """Configuration whose avatar files do not exist."""
    return CardConfig(
        image_path=tmp_path / "missing.png",
        ascii_path=tmp_path / "missing.txt",
    )


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by configure_logging between tests."""
    yield
    logger = logging.getLogger("posva_card")
    logger.handlers = []
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
