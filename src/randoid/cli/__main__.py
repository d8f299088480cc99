"""CLI entry point.

Usage:
    python -m randoid.cli generate
    python -m randoid.cli generate --size 8 --alphabet hex --count 5
    randoid alphabets
"""

from randoid.cli.app import app
from randoid.logging import setup_logging
from randoid.settings import get_settings


def main() -> None:
    """CLI entry point with logging configuration."""
    setup_logging(get_settings().log_level, compact=True)
    app()


if __name__ == "__main__":
    main()
