"""Card layout: the gradient box and the avatar overlay."""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

from posva_card.types import CardConfig

from .display import tmux_wrap


def rgb(r: int, g: int, b: int) -> str:
    """24-bit foreground colour escape."""
    return f"\033[38;2;{r};{g};{b}m"


def link(url: str, text: str) -> str:
    """OSC 8 hyperlink. Terminals without support show the text only."""
    return f"\033]8;;{url}\033\\{text}\033]8;;\033\\"


BOLD = "\033[1m"
RESET = "\033[0m"
YELLOW = "\033[33m"

# Smooth rainbow, clockwise from the top-left corner
GRADIENT = [
    rgb(0, 255, 255),    # cyan
    rgb(0, 200, 255),    # sky blue
    rgb(0, 150, 255),    # light blue
    rgb(50, 100, 255),   # blue
    rgb(100, 50, 255),   # indigo
    rgb(150, 0, 255),    # purple
    rgb(200, 0, 255),    # violet
    rgb(255, 0, 220),    # magenta
    rgb(255, 0, 150),    # pink
    rgb(255, 0, 100),    # rose
    rgb(255, 50, 50),    # red
    rgb(255, 100, 0),    # orange
    rgb(255, 150, 0),    # amber
    rgb(255, 200, 0),    # gold
    rgb(255, 255, 0),    # yellow
    rgb(200, 255, 0),    # lime
    rgb(100, 255, 50),   # light green
    rgb(0, 255, 100),    # green
    rgb(0, 255, 150),    # mint
    rgb(0, 255, 200),    # aqua
]


def up(n: int) -> str:
    return f"\033[{n}A"


def down(n: int) -> str:
    return f"\033[{n}B"


def right(n: int) -> str:
    return f"\033[{n}C"


COL1 = "\033[1G"


def build_box() -> str:
    """Build the static card, framed by a leading and trailing newline."""
    g = GRADIENT
    lines = [
        f"{g[0]}┏━━━━━━━{g[1]}━━━━━━━{g[2]}━━━━━━━{g[3]}━━━━━━{g[4]}━━━━━━{g[5]}━━━━━━{g[6]}━━━━━━{g[7]}━━━━━━{g[8]}━━━━━┓",
        f"{g[0]}┃{RESET}                                                        {g[9]}┃",
        f"{g[0]}┃{RESET}   👋                                                   {g[10]}┃",
        f"{g[0]}┃{RESET}                                                        {g[10]}┃",
        f"{g[0]}┃{RESET}   I'm {BOLD}Eduardo{RESET} San Martin Morote                        {g[10]}┃",
        f"{g[19]}┃{RESET}   Author of {link('https://router.vuejs.org', 'Vue Router')} and {link('https://pinia.vuejs.org', 'Pinia')}, Vue.js Core team     {g[11]}┃",
        f"{g[19]}┃{RESET}                                                        {g[11]}┃",
        f"{g[19]}┃{RESET}   🐙 {YELLOW}GitHub{RESET}   {link('https://github.com/posva', 'https://github.com/posva')}                 {g[12]}┃",
        f"{g[19]}┃{RESET}   🐦 {YELLOW}X{RESET}        {link('https://x.com/posva', '@posva')}                                   {g[12]}┃",
        f"{g[19]}┃{RESET}   🦋 {YELLOW}Bluesky{RESET}  {link('https://bsky.app/profile/esm.dev', '@esm.dev')}                                 {g[13]}┃",
        f"{g[19]}┃{RESET}   🌐 {YELLOW}Web{RESET}      {link('https://esm.dev', 'https://esm.dev')}                          {g[13]}┃",
        f"{g[19]}┃{RESET}                                                        {g[14]}┃",
        f"{g[19]}┗━━━━━━━━{g[18]}━━━━━━━━{g[17]}━━━━━━━━{g[16]}━━━━━━━━{g[15]}━━━━━━━━{g[14]}━━━━━━━━{g[14]}━━━━━━━━┛{RESET}",
    ]
    return "\n" + "\n".join(lines) + "\n"


def graphical_overlay(
    payload: str,
    config: Optional[CardConfig] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """Position an image payload inside the printed card."""
    config = config or CardConfig.default()
    return (
        f"{up(config.overlay_rows_up)}{right(config.overlay_column)}"
        f"{tmux_wrap(payload, environ)}"
        f"{down(config.overlay_rows_up)}{COL1}"
    )


def ascii_overlay(lines: Sequence[str], config: Optional[CardConfig] = None) -> str:
    """Position ASCII avatar lines inside the printed card, one row at a time."""
    config = config or CardConfig.default()
    output = up(config.overlay_rows_up)
    for line in lines[:config.ascii_line_count]:
        output += f"{right(config.overlay_column)}{line}{COL1}{down(1)}"
    output += down(config.overlay_rows_up - config.ascii_line_count) + COL1
    return output


def render_card(
    image_payload: Optional[str],
    avatar_lines: Sequence[str],
    config: Optional[CardConfig] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """Render the full card output.

    A non-empty image payload takes precedence over the ASCII avatar. With
    neither available the card is printed bare.
    """
    config = config or CardConfig.default()
    output = build_box() + "\n"

    if image_payload:
        output += graphical_overlay(image_payload, config, environ)
    elif len(avatar_lines) >= config.ascii_line_count:
        output += ascii_overlay(avatar_lines, config)

    return output
