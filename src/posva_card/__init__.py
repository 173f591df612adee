"""posva-card: a terminal business card with an inline avatar."""

__version__ = "0.1.0"
