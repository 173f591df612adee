"""ASCII avatar loading."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Union

from posva_card.types import AvatarLines

logger = logging.getLogger(__name__)

# Hide/show cursor toggles left behind by image-to-text converters.
_CURSOR_VISIBILITY = re.compile(r"\x1b\[\?25[lh]")

# Trailing whitespace, keeping a reset code that follows it.
_TRAILING_SPACE = re.compile(r"\s+(\x1b\[0m)?$")


def normalize_ascii_avatar(text: str) -> AvatarLines:
    """Split raw ASCII art into display lines.

    Cursor visibility toggles are removed, empty lines dropped, and
    trailing whitespace trimmed so overlaid lines don't paint over the
    card border.
    """
    text = _CURSOR_VISIBILITY.sub("", text)
    return [_TRAILING_SPACE.sub(r"\1", line) for line in text.split("\n") if line]


def load_ascii_avatar_lines(path: Union[str, Path]) -> AvatarLines:
    """Load the ASCII avatar from a text file.

    Returns:
        The display lines, or an empty list if the file is missing or
        unreadable.
    """
    path = Path(path)
    if not path.exists():
        logger.debug("No ASCII avatar at %s", path)
        return []

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read ASCII avatar %s: %s", path, e)
        return []

    return normalize_ascii_avatar(text)
