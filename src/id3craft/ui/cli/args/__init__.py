"""Command line argument handling package."""

from id3craft.ui.cli.args.parser import ArgumentParser, SAMPLE_METADATA
from id3craft.ui.cli.args.options import CLIArgs, CreateArgs, ShowArgs, StripArgs, TagArgs

__all__ = [
    "ArgumentParser",
    "CLIArgs",
    "CreateArgs",
    "SAMPLE_METADATA",
    "ShowArgs",
    "StripArgs",
    "TagArgs",
]
