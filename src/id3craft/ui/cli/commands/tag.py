"""src/id3craft/ui/cli/commands/tag.py
What: Write ID3v2 and ID3v1 tags to an existing file via the CLI.
Why: Retag files in place without touching their audio payload.
"""

from typing_extensions import override

from id3craft.features.tagging import TagWriteReport
from id3craft.ui.cli.args.options import TagArgs
from id3craft.ui.cli.commands.executor import CommandExecutor


class TagCommand(CommandExecutor[TagArgs, TagWriteReport]):
    """Command for tagging a single file."""

    @override
    def execute(self) -> TagWriteReport:
        report = self.tag_writer.write_tags(self.args.file_path, self.args.metadata, self.args.options)
        self.result_display.show_write_report(report, quiet=self.args.quiet)
        return report
