"""Command line interface package."""

from id3craft.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
