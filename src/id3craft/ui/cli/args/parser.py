"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path
from typing import Final, final

from id3craft.config.config import Config
from id3craft.features.tagging import TagWriterOptions
from id3craft.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from id3craft.shared.tag_metadata import TagMetadata
from id3craft.ui.cli.args.options import CLIArgs, CreateArgs, ShowArgs, StripArgs, TagArgs

# Metadata written by ``create --sample``.
SAMPLE_METADATA: Final[TagMetadata] = TagMetadata(
    title="Test song.",
    artist="Bert Berrevoets",
    album="The Best!",
    year="2020",
    comment="This is the best album ever.",
    track_number=8,
    total_tracks=12,
    genre_id=12,
    genre_text="Other",
)

_METADATA_FLAGS: Final[dict[str, str]] = {
    "title": "title",
    "artist": "artist",
    "album": "album",
    "year": "year",
    "comment": "comment",
    "track": "track_number",
    "total_tracks": "total_tracks",
    "genre_id": "genre_id",
    "genre": "genre_text",
}


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="id3craft",
            description="id3craft - Write, strip and inspect ID3v1 and ID3v2.4 tags in MP3 files.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        create_parser = subparsers.add_parser(
            "create",
            help="Generate a silent MP3 and tag it",
        )
        _ = create_parser.add_argument(
            "output_path",
            type=str,
            help="Path of the MP3 file to create",
            metavar="OUTPUT",
        )
        _ = create_parser.add_argument(
            "--duration",
            type=float,
            help="Length of the silent audio in seconds (defaults to the configured value)",
            metavar="SECONDS",
        )
        _ = create_parser.add_argument(
            "--sample",
            action="store_true",
            help="Start from the built-in sample metadata; explicit options still override it",
        )
        _ = create_parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite OUTPUT if it already exists",
        )
        ArgumentParser._add_metadata_arguments(create_parser)
        ArgumentParser._add_writer_arguments(create_parser)
        ArgumentParser._add_verbosity_arguments(create_parser)

        tag_parser = subparsers.add_parser(
            "tag",
            help="Write ID3v2 and ID3v1 tags to an existing file",
        )
        _ = tag_parser.add_argument(
            "file_path",
            type=str,
            help="Path to the MP3 file to tag",
            metavar="FILE",
        )
        ArgumentParser._add_metadata_arguments(tag_parser)
        ArgumentParser._add_writer_arguments(tag_parser)
        ArgumentParser._add_verbosity_arguments(tag_parser)

        strip_parser = subparsers.add_parser(
            "strip",
            help="Remove both tag formats from a file",
        )
        _ = strip_parser.add_argument(
            "file_path",
            type=str,
            help="Path to the MP3 file to strip",
            metavar="FILE",
        )
        ArgumentParser._add_verbosity_arguments(strip_parser)

        show_parser = subparsers.add_parser(
            "show",
            help="Print the tags found in a file",
        )
        _ = show_parser.add_argument(
            "file_path",
            type=str,
            help="Path to the MP3 file to inspect",
            metavar="FILE",
        )
        ArgumentParser._add_verbosity_arguments(show_parser)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If the target file is missing or other validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Set log level based on verbosity flags
        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "create":
            return ArgumentParser._process_create(parsed_args, configuration)

        if command == "tag":
            return ArgumentParser._process_tag(parsed_args, configuration)

        if command == "strip":
            return StripArgs(
                command="strip",
                file_path=ArgumentParser._existing_file(parsed_args.file_path),
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        if command == "show":
            return ShowArgs(
                command="show",
                file_path=ArgumentParser._existing_file(parsed_args.file_path),
                verbose=parsed_args.verbose,
                quiet=parsed_args.quiet,
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _add_metadata_arguments(parser: argparse.ArgumentParser) -> None:
        """Register the tag field options shared by ``create`` and ``tag``."""

        group = parser.add_argument_group("metadata")
        _ = group.add_argument("--title", type=str, help="Track title")
        _ = group.add_argument("--artist", type=str, help="Lead artist")
        _ = group.add_argument("--album", type=str, help="Album title")
        _ = group.add_argument("--year", type=str, help="Recording year or timestamp")
        _ = group.add_argument("--comment", type=str, help="Free-form comment")
        _ = group.add_argument("--track", type=int, help="Track number (0-255)", metavar="N")
        _ = group.add_argument(
            "--total-tracks",
            type=int,
            help="Number of tracks on the album (0-255)",
            metavar="N",
        )
        _ = group.add_argument(
            "--genre-id",
            type=int,
            help="ID3v1 genre code (0-255)",
            metavar="CODE",
        )
        _ = group.add_argument("--genre", type=str, help="Free-text genre for the ID3v2 tag")

    @staticmethod
    def _add_writer_arguments(parser: argparse.ArgumentParser) -> None:
        """Register the options that override the configured writer defaults."""

        _ = parser.add_argument(
            "--no-id3v1",
            action="store_true",
            help="Do not write the ID3v1 trailer",
        )
        _ = parser.add_argument(
            "--no-id3v2",
            action="store_true",
            help="Do not write the ID3v2 tag",
        )
        _ = parser.add_argument(
            "--padding",
            type=int,
            help="Bytes of ID3v2 padding (defaults to the configured value)",
            metavar="BYTES",
        )

    @staticmethod
    def _add_verbosity_arguments(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _build_metadata(parsed_args: argparse.Namespace, base: TagMetadata) -> TagMetadata:
        overrides = {
            field_name: getattr(parsed_args, flag)
            for flag, field_name in _METADATA_FLAGS.items()
            if getattr(parsed_args, flag) is not None
        }
        return replace(base, **overrides)

    @staticmethod
    def _build_options(parsed_args: argparse.Namespace, configuration: Config) -> TagWriterOptions:
        defaults = TagWriterOptions.from_config(configuration)
        padding = parsed_args.padding if parsed_args.padding is not None else defaults.id3v2_padding_size
        return TagWriterOptions(
            write_id3v1=defaults.write_id3v1 and not parsed_args.no_id3v1,
            write_id3v2=defaults.write_id3v2 and not parsed_args.no_id3v2,
            id3v2_padding_size=padding,
        )

    @staticmethod
    def _existing_file(raw_path: str) -> Path:
        file_path = Path(raw_path)
        if not file_path.is_file():
            logger.error("File does not exist: %s", file_path)
            sys.exit(1)
        return file_path

    @staticmethod
    def _process_create(parsed_args: argparse.Namespace, configuration: Config) -> CreateArgs:
        output_path = Path(parsed_args.output_path)
        if output_path.exists() and not parsed_args.force:
            logger.error("Output already exists (use --force to overwrite): %s", output_path)
            sys.exit(1)

        base = SAMPLE_METADATA if parsed_args.sample else TagMetadata()
        duration = parsed_args.duration
        if duration is None:
            duration = configuration.silence_duration_seconds

        return CreateArgs(
            command="create",
            output_path=output_path,
            metadata=ArgumentParser._build_metadata(parsed_args, base),
            options=ArgumentParser._build_options(parsed_args, configuration),
            duration_seconds=duration,
            overwrite=parsed_args.force,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_tag(parsed_args: argparse.Namespace, configuration: Config) -> TagArgs:
        return TagArgs(
            command="tag",
            file_path=ArgumentParser._existing_file(parsed_args.file_path),
            metadata=ArgumentParser._build_metadata(parsed_args, TagMetadata()),
            options=ArgumentParser._build_options(parsed_args, configuration),
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )


__all__ = ["ArgumentParser", "SAMPLE_METADATA"]
