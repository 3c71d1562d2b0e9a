"""src/id3craft/ui/cli/commands/create.py
What: Generate a silent MP3 and write both tags to it.
Why: Produce ready-made tagged files for players and tests from one command.
"""

from typing_extensions import override

from id3craft.features.audio import write_silent_mp3
from id3craft.features.tagging import TagEvent, TagWriteReport
from id3craft.platform.logging import logger
from id3craft.ui.cli.args.options import CreateArgs
from id3craft.ui.cli.commands.executor import CommandExecutor


class CreateCommand(CommandExecutor[CreateArgs, TagWriteReport]):
    """Command for creating a tagged silent MP3."""

    @override
    def execute(self) -> TagWriteReport:
        """Write the audio payload, then tag it.

        Returns:
            Report of the tags written.
        """
        output = self.args.output_path
        payload_size = write_silent_mp3(
            output,
            self.args.duration_seconds,
            overwrite=self.args.overwrite,
        )
        logger.info(
            "Created %s (%d bytes of audio)",
            output,
            payload_size,
            extra={
                "tag_event": TagEvent.FILE_CREATE,
                "file_path": str(output),
                "tag_size": payload_size,
            },
        )

        try:
            report = self.tag_writer.write_tags(output, self.args.metadata, self.args.options)
        except Exception as exc:
            logger.error(
                "Tagging failed for %s: %s",
                output,
                exc,
                extra={
                    "tag_event": TagEvent.FILE_ERROR,
                    "file_path": str(output),
                    "error_message": str(exc),
                },
            )
            raise

        self.result_display.show_write_report(report, quiet=self.args.quiet)
        return report
