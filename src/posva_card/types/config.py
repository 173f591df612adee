"""Card configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from posva_card.assets import AVATAR_IMAGE_PATH, AVATAR_TEXT_PATH

# Display lines of ASCII art, each possibly carrying colour escapes.
AvatarLines = list[str]


@dataclass(frozen=True)
class CardConfig:
    """Where the avatar comes from and where it lands on the card."""

    image_path: Path = field(default_factory=lambda: AVATAR_IMAGE_PATH)
    ascii_path: Path = field(default_factory=lambda: AVATAR_TEXT_PATH)
    image_columns: int = 8
    image_rows: int = 4
    # Offsets are relative to the cursor after the card has been printed.
    overlay_rows_up: int = 6
    overlay_column: int = 49
    ascii_line_count: int = 4

    def __post_init__(self):
        # Frozen, so go through object.__setattr__ to coerce str paths.
        if isinstance(self.image_path, str):
            object.__setattr__(self, "image_path", Path(self.image_path))
        if isinstance(self.ascii_path, str):
            object.__setattr__(self, "ascii_path", Path(self.ascii_path))

    @classmethod
    def default(cls) -> "CardConfig":
        """Configuration pointing at the bundled avatar assets."""
        return cls()
