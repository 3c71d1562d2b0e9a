"""src/id3craft/ui/cli/commands/show.py
What: Print the tags of a file as mutagen decodes them.
Why: Check written tags against an independent parser from the terminal.
"""

from typing_extensions import override

from id3craft.features.tagging.adapters import MutagenTagReader, TagSnapshot
from id3craft.ui.cli.args.options import ShowArgs
from id3craft.ui.cli.commands.executor import CommandExecutor


class ShowCommand(CommandExecutor[ShowArgs, TagSnapshot]):
    """Command for inspecting the tags of a single file."""

    @override
    def execute(self) -> TagSnapshot:
        snapshot = MutagenTagReader().read(self.args.file_path)
        self.result_display.show_snapshot(snapshot)
        return snapshot
