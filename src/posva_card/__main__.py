"""Allow running the card with ``python -m posva_card``."""

from posva_card.app.application import main

if __name__ == "__main__":
    main()
