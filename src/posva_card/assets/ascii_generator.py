"""Render a raster avatar as true-colour half-block text."""

from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

UPPER_HALF_BLOCK = "▀"
LOWER_HALF_BLOCK = "▄"

# Pixels below this alpha are treated as transparent.
ALPHA_THRESHOLD = 128

RESET = "\033[0m"
DEFAULT_BACKGROUND = "\033[49m"


def _fg(pixel: np.ndarray) -> str:
    r, g, b = (int(c) for c in pixel[:3])
    return f"\033[38;2;{r};{g};{b}m"


def _bg(pixel: np.ndarray) -> str:
    r, g, b = (int(c) for c in pixel[:3])
    return f"\033[48;2;{r};{g};{b}m"


def render_half_blocks(image: Image.Image, columns: int = 8, rows: int = 4) -> list[str]:
    """Render an image as ``rows`` lines of ``columns`` half-block cells.

    Each cell covers two vertically stacked pixels: the top one drawn as
    the foreground of an upper half block, the bottom one as its
    background. Transparent trailing cells are dropped and every line
    ends with a reset.

    Args:
        image: Source image, any mode.
        columns: Width in terminal cells.
        rows: Height in terminal cells.

    Returns:
        One string per terminal row.
    """
    frame = image.convert("RGBA").resize((columns, rows * 2), Image.Resampling.LANCZOS)
    pixels = np.asarray(frame, dtype=np.uint8)
    visible = pixels[..., 3] >= ALPHA_THRESHOLD

    lines = []
    for row in range(rows):
        top, bottom = pixels[row * 2], pixels[row * 2 + 1]
        top_visible, bottom_visible = visible[row * 2], visible[row * 2 + 1]

        occupied = np.flatnonzero(top_visible | bottom_visible)
        width = int(occupied[-1]) + 1 if occupied.size else 0

        cells = []
        for col in range(width):
            if top_visible[col] and bottom_visible[col]:
                cells.append(f"{_fg(top[col])}{_bg(bottom[col])}{UPPER_HALF_BLOCK}")
            elif top_visible[col]:
                cells.append(f"{_fg(top[col])}{DEFAULT_BACKGROUND}{UPPER_HALF_BLOCK}")
            elif bottom_visible[col]:
                cells.append(f"{_fg(bottom[col])}{DEFAULT_BACKGROUND}{LOWER_HALF_BLOCK}")
            else:
                cells.append(f"{DEFAULT_BACKGROUND} ")
        lines.append("".join(cells) + RESET)

    return lines


def generate_avatar_text(
    image_path: Union[str, Path],
    output_path: Union[str, Path],
    columns: int = 8,
    rows: int = 4,
) -> Path:
    """Write the half-block rendering of an image to a text file.

    Returns:
        The path written.
    """
    output_path = Path(output_path)
    with Image.open(image_path) as img:
        lines = render_half_blocks(img, columns, rows)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return output_path
