"""src/id3craft/ui/cli/commands/strip.py
What: Remove both tag formats from a file via the CLI.
"""

from typing_extensions import override

from id3craft.features.tagging import TagWriteReport
from id3craft.ui.cli.args.options import StripArgs
from id3craft.ui.cli.commands.executor import CommandExecutor


class StripCommand(CommandExecutor[StripArgs, TagWriteReport]):
    """Command for stripping tags from a single file."""

    @override
    def execute(self) -> TagWriteReport:
        report = self.tag_writer.remove_tags(self.args.file_path)
        self.result_display.show_strip_report(report, quiet=self.args.quiet)
        return report
