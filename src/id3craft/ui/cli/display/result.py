"""src/id3craft/ui/cli/display/result.py
What: Render user-facing summaries for tag, strip and show commands.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.table import Table

from id3craft.features.tagging import TagWriteReport
from id3craft.features.tagging.adapters import TagSnapshot


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize result display.

        Args:
            console: Console to print to. Defaults to a fresh stdout console.
        """
        self.console = console or Console()

    def show_write_report(self, report: TagWriteReport, quiet: bool = False) -> None:
        """Display the outcome of a tag write.

        Args:
            report: Sizes of the tags written.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        self.console.print(f"\n[bold]Tagged:[/bold] {report.path}")
        if report.wrote_id3v2:
            self.console.print(f"[green]ID3v2.4 tag: {report.id3v2_size} bytes[/green]")
        if report.wrote_id3v1:
            self.console.print(f"[green]ID3v1 tag: {report.id3v1_size} bytes[/green]")
        if not report.wrote_id3v2 and not report.wrote_id3v1:
            self.console.print("[yellow]No tags written[/yellow]")
        self.console.print(f"File size: {report.file_size} bytes")

    def show_strip_report(self, report: TagWriteReport, quiet: bool = False) -> None:
        """Display the outcome of a tag strip."""

        if quiet:
            return

        self.console.print(f"\n[bold]Stripped:[/bold] {report.path}")
        if not report.wrote_id3v2 and not report.wrote_id3v1:
            self.console.print("[yellow]No tags found[/yellow]")
        if report.wrote_id3v2:
            self.console.print(f"Removed ID3v2 tag: {report.id3v2_size} bytes")
        if report.wrote_id3v1:
            self.console.print(f"Removed ID3v1 tag: {report.id3v1_size} bytes")
        self.console.print(f"File size: {report.file_size} bytes")

    def show_snapshot(self, snapshot: TagSnapshot) -> None:
        """Print one table per tag format found in the file."""

        self.console.print(f"\n[bold]{snapshot.path}[/bold]")
        if snapshot.is_empty:
            self.console.print("[yellow]No ID3 tags found[/yellow]")
            return

        if snapshot.id3v2_version is not None:
            major, revision = snapshot.id3v2_version
            self.console.print(
                self._frame_table(
                    f"ID3v2.{major}.{revision} ({snapshot.id3v2_size} bytes)",
                    snapshot.id3v2_frames,
                )
            )
        if snapshot.has_id3v1:
            self.console.print(self._frame_table("ID3v1", snapshot.id3v1_frames))

    @staticmethod
    def _frame_table(title: str, frames: list[tuple[str, str]]) -> Table:
        table = Table(title=title, title_justify="left")
        _ = table.add_column("Frame", style="cyan", no_wrap=True)
        _ = table.add_column("Value", style="green")
        for frame_id, value in frames:
            _ = table.add_row(frame_id, value)
        return table


__all__ = ["ResultDisplay"]
