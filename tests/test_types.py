"""Tests for type definitions."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from posva_card.assets import AVATAR_IMAGE_PATH, AVATAR_TEXT_PATH
from posva_card.types import CardConfig, ImageProtocol


class TestImageProtocol:
    """Tests for the capability enum."""

    def test_values(self):
        assert {p.value for p in ImageProtocol} == {"kitty", "iterm", "none"}

    def test_lookup_by_value(self):
        assert ImageProtocol("iterm") is ImageProtocol.ITERM


class TestCardConfig:
    """Tests for card configuration."""

    def test_defaults_point_at_bundled_assets(self):
        config = CardConfig.default()
        assert config.image_path == AVATAR_IMAGE_PATH
        assert config.ascii_path == AVATAR_TEXT_PATH

    def test_default_geometry(self):
        config = CardConfig()
        assert (config.image_columns, config.image_rows) == (8, 4)
        assert (config.overlay_rows_up, config.overlay_column) == (6, 49)
        assert config.ascii_line_count == 4

    def test_string_paths_become_paths(self):
        config = CardConfig(image_path="a.png", ascii_path="a.txt")
        assert config.image_path == Path("a.png")
        assert config.ascii_path == Path("a.txt")

    def test_is_frozen(self):
        config = CardConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.overlay_column = 1
