"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

from id3craft.features.tagging import TagWriterOptions
from id3craft.shared.tag_metadata import TagMetadata


@final
@dataclass(slots=True)
class CreateArgs:
    """Command line arguments for the ``create`` subcommand."""

    command: Literal["create"]
    output_path: Path
    metadata: TagMetadata
    options: TagWriterOptions
    duration_seconds: float
    overwrite: bool
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class TagArgs:
    """Command line arguments for the ``tag`` subcommand."""

    command: Literal["tag"]
    file_path: Path
    metadata: TagMetadata
    options: TagWriterOptions
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class StripArgs:
    """Command line arguments for the ``strip`` subcommand."""

    command: Literal["strip"]
    file_path: Path
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ShowArgs:
    """Command line arguments for the ``show`` subcommand."""

    command: Literal["show"]
    file_path: Path
    verbose: bool
    quiet: bool


CLIArgs = CreateArgs | TagArgs | StripArgs | ShowArgs

__all__ = ["CLIArgs", "CreateArgs", "ShowArgs", "StripArgs", "TagArgs"]
