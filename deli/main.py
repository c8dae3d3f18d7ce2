"""Entry point for the DELI-cious Textual app."""

from __future__ import annotations

from deli.deli_app import DeliApp
from deli.logging_config import configure_logging


def main() -> None:
    configure_logging()
    DeliApp().run()


if __name__ == "__main__":
    main()
