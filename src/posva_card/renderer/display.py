"""Image escape sequences for the Kitty and iTerm2 graphics protocols."""

from __future__ import annotations

import base64
import io
import logging
import os
from pathlib import Path
from typing import Mapping, Optional, Union

from PIL import Image, UnidentifiedImageError

from posva_card.types import ImageProtocol

logger = logging.getLogger(__name__)

# Base64 characters per Kitty escape sequence; larger payloads overflow
# terminal input buffers.
KITTY_CHUNK_SIZE = 4096

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

PathLike = Union[str, Path]


def is_inside_tmux(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Check if we're running inside tmux."""
    env = os.environ if environ is None else environ
    return "TMUX" in env


def tmux_wrap(sequence: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Wrap an escape sequence for tmux passthrough."""
    if not sequence or not is_inside_tmux(environ):
        return sequence
    escaped = sequence.replace("\033", "\033\033")
    return f"\033Ptmux;{escaped}\033\\"


def detect_image_protocol(environ: Optional[Mapping[str, str]] = None) -> ImageProtocol:
    """Detect which inline image protocol the terminal supports.

    Kitty is checked first, so a Kitty window launched from iTerm2 still
    gets the Kitty protocol.
    """
    env = os.environ if environ is None else environ
    term = env.get("TERM", "")
    term_program = env.get("TERM_PROGRAM", "")

    if env.get("KITTY_WINDOW_ID") or "kitty" in term.lower():
        return ImageProtocol.KITTY
    elif env.get("ITERM_SESSION_ID") or term_program == "iTerm.app":
        return ImageProtocol.ITERM
    else:
        return ImageProtocol.NONE


def read_png_bytes(path: PathLike) -> Optional[bytes]:
    """Read an image file as PNG bytes.

    PNG files are returned untouched. Anything else Pillow can open is
    re-encoded as PNG, since both protocols are fed PNG data.

    Returns:
        The PNG bytes, or None if the file is missing or unreadable.
    """
    path = Path(path)
    if not path.exists():
        logger.debug("No avatar image at %s", path)
        return None

    try:
        raw_data = path.read_bytes()
    except OSError as e:
        logger.warning("Could not read avatar image %s: %s", path, e)
        return None

    if raw_data.startswith(PNG_SIGNATURE):
        return raw_data

    buf = io.BytesIO()
    try:
        with Image.open(io.BytesIO(raw_data)) as img:
            if img.mode not in ("1", "L", "LA", "P", "RGB", "RGBA"):
                img = img.convert("RGBA")
            img.save(buf, format="PNG")
        logger.debug("Transcoded %s to PNG", path)
        return buf.getvalue()
    except (UnidentifiedImageError, OSError) as e:
        logger.warning("Could not decode avatar image %s: %s", path, e)
        return None
    finally:
        buf.close()


def kitty_image(png_path: PathLike, cols: int = 8, rows: int = 4) -> str:
    """Encode an image for the Kitty graphics protocol.

    The base64 payload is split into KITTY_CHUNK_SIZE slices. The first
    slice carries the transmit-and-display control data, later slices only
    the continuation flag. ``m=0`` marks the final slice.

    Returns:
        The escape sequences, or an empty string if there is no image.
    """
    raw_data = read_png_bytes(png_path)
    if raw_data is None:
        return ""

    data = base64.b64encode(raw_data).decode("ascii")
    del raw_data

    chunks = []
    for i in range(0, len(data), KITTY_CHUNK_SIZE):
        chunk = data[i:i + KITTY_CHUNK_SIZE]
        m = 1 if i + KITTY_CHUNK_SIZE < len(data) else 0
        if i == 0:
            # a=T: transmit and display, f=100: PNG, c/r: size in cells
            chunks.append(f"\033_Ga=T,f=100,c={cols},r={rows},m={m};{chunk}\033\\")
        else:
            chunks.append(f"\033_Gm={m};{chunk}\033\\")

    return "".join(chunks)


def iterm_image(png_path: PathLike, cols: int = 8, rows: int = 4) -> str:
    """Encode an image as an iTerm2 inline image (OSC 1337).

    Returns:
        The escape sequence, or an empty string if there is no image.
    """
    raw_data = read_png_bytes(png_path)
    if raw_data is None:
        return ""

    data = base64.b64encode(raw_data).decode("ascii")
    # width/height are in cells when given without a unit
    return f"\033]1337;File=inline=1;width={cols};height={rows}:{data}\007"


def encode_image(
    protocol: ImageProtocol,
    png_path: PathLike,
    cols: int = 8,
    rows: int = 4,
) -> Optional[str]:
    """Encode an image for the given protocol.

    Returns:
        The payload (possibly empty), or None when the terminal has no
        image protocol.
    """
    if protocol is ImageProtocol.KITTY:
        return kitty_image(png_path, cols, rows)
    elif protocol is ImageProtocol.ITERM:
        return iterm_image(png_path, cols, rows)
    return None
