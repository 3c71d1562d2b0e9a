"""Display management for CLI interface."""

from id3craft.ui.cli.display.result import ResultDisplay

__all__ = ["ResultDisplay"]
