"""Command line interface for id3craft."""

import sys
from typing import final

from id3craft.platform.logging import logger
from id3craft.ui.cli.args import ArgumentParser
from id3craft.ui.cli.args.options import CLIArgs, CreateArgs, ShowArgs, StripArgs, TagArgs
from id3craft.ui.cli.commands import CreateCommand, ShowCommand, StripCommand, TagCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            match args:
                case CreateArgs():
                    _ = CreateCommand(args).execute()
                case TagArgs():
                    _ = TagCommand(args).execute()
                case StripArgs():
                    _ = StripCommand(args).execute()
                case ShowArgs():
                    _ = ShowCommand(args).execute()

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Command processing calls
        ``sys.exit(...)`` on errors, so this return is only reached when
        processing completes successfully.
    """
    CommandProcessor.process_command()
    return 0
