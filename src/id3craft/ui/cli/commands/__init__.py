"""Command execution package for CLI."""

from id3craft.ui.cli.commands.executor import CommandExecutor
from id3craft.ui.cli.commands.create import CreateCommand
from id3craft.ui.cli.commands.show import ShowCommand
from id3craft.ui.cli.commands.strip import StripCommand
from id3craft.ui.cli.commands.tag import TagCommand

__all__ = [
    "CommandExecutor",
    "CreateCommand",
    "ShowCommand",
    "StripCommand",
    "TagCommand",
]
