"""Main application entry point."""

from __future__ import annotations

import logging
import sys
from typing import Mapping, Optional, TextIO

from posva_card.renderer.ascii_avatar import load_ascii_avatar_lines
from posva_card.renderer.card import render_card
from posva_card.renderer.display import detect_image_protocol, encode_image
from posva_card.types import CardConfig

from .logging_setup import configure_logging

logger = logging.getLogger(__name__)


class Application:
    """Prints the card with the best avatar the terminal can show."""

    def __init__(
        self,
        config: Optional[CardConfig] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """Initialize the application.

        Args:
            config: Asset paths and overlay geometry.
            environ: Environment to inspect; defaults to os.environ.
        """
        self.config = config or CardConfig.default()
        self.environ = environ

    def render(self) -> str:
        """Build the complete card output."""
        protocol = detect_image_protocol(self.environ)
        logger.debug("Image protocol: %s", protocol.value)

        image_payload = encode_image(
            protocol,
            self.config.image_path,
            self.config.image_columns,
            self.config.image_rows,
        )

        # The text avatar is only needed when no image could be produced
        if image_payload:
            avatar_lines = []
        else:
            avatar_lines = load_ascii_avatar_lines(self.config.ascii_path)
            if len(avatar_lines) < self.config.ascii_line_count:
                logger.info(
                    "ASCII avatar has %d lines, need %d; printing card without avatar",
                    len(avatar_lines),
                    self.config.ascii_line_count,
                )

        return render_card(image_payload, avatar_lines, self.config, self.environ)

    def run(self, stream: Optional[TextIO] = None) -> None:
        """Write the card to the stream in one go."""
        out = stream or sys.stdout
        out.write(self.render())
        out.flush()


def main() -> None:
    """Main entry point."""
    configure_logging()
    Application().run()


if __name__ == "__main__":
    main()
