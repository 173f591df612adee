#!/usr/bin/env python3
"""Generate the ASCII avatar fallback from a raster image.

Usage:
    python scripts/generate_avatar_ascii.py avatar.png [--columns 8] [--rows 4]
"""

import sys
from pathlib import Path

# Add src to path for running directly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from posva_card.assets import AVATAR_TEXT_PATH, generate_avatar_text


def main():
    """Render the image and write the avatar text file."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Render an avatar image as half-block text for posva-card"
    )
    parser.add_argument("image", type=Path, help="Source image (PNG, JPEG, ...)")
    parser.add_argument(
        "--output",
        type=Path,
        default=AVATAR_TEXT_PATH,
        help=f"Output text file (default: {AVATAR_TEXT_PATH})",
    )
    parser.add_argument(
        "--columns",
        type=int,
        default=8,
        help="Width in terminal cells (default: 8)",
    )
    parser.add_argument(
        "--rows",
        type=int,
        default=4,
        help="Height in terminal cells (default: 4)",
    )

    args = parser.parse_args()

    if not args.image.exists():
        print(f"Error: {args.image} not found")
        sys.exit(1)

    path = generate_avatar_text(args.image, args.output, args.columns, args.rows)
    print(f"Wrote {args.rows} lines to {path}")


if __name__ == "__main__":
    main()
