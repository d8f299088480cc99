"""CLI module for randoid.

Provides command-line access to id generation.
"""

from randoid.cli.app import app

__all__ = ["app"]
