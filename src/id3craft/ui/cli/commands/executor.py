"""src/id3craft/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse the tag writer and presentation helpers across commands.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from id3craft.features.tagging import TagWriter
from id3craft.ui.cli.args.options import CLIArgs
from id3craft.ui.cli.display.result import ResultDisplay

ArgsT = TypeVar("ArgsT", bound=CLIArgs)
ResultT = TypeVar("ResultT")


class CommandExecutor(ABC, Generic[ArgsT, ResultT]):
    """Base class for command execution."""

    args: ArgsT
    tag_writer: TagWriter
    result_display: ResultDisplay

    def __init__(self, args: ArgsT, tag_writer: TagWriter | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            tag_writer: Writer to use. Defaults to one backed by the local filesystem.
        """
        self.args = args
        self.tag_writer = tag_writer or TagWriter()
        self.result_display = ResultDisplay()

    @abstractmethod
    def execute(self) -> ResultT:
        """Execute the command.

        Returns:
            The command's result object.
        """
        pass
