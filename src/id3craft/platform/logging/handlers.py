"""Summary: Rich console handler that renders structured tag events.
Why: Keep tag write/remove logs compact and readable on the terminal.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class TagEventRichHandler(RichHandler):
    """Rich handler that styles records carrying a ``tag_event`` extra."""

    _TAG_EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "tag.file.create": ("🎵", "cyan"),
        "tag.id3v2.write": ("🏷️", "green"),
        "tag.id3v2.remove": ("🧹", "yellow"),
        "tag.id3v1.write": ("🏷️", "green"),
        "tag.id3v1.remove": ("🧹", "yellow"),
        "tag.file.error": ("⛔", "red"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "tag.file.create": "Created ",
        "tag.id3v2.write": "Wrote ID3v2 tag to ",
        "tag.id3v2.remove": "Removed ID3v2 tag from ",
        "tag.id3v1.write": "Wrote ID3v1 tag to ",
        "tag.id3v1.remove": "Removed ID3v1 tag from ",
        "tag.file.error": "Failed ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @classmethod
    def format_path(cls, raw_path: str) -> Text:
        """Render ``raw_path`` keeping only its trailing segments.

        Separators are magenta and everything else white, matching the
        console palette used for file names elsewhere in the CLI.
        """
        path: PurePath = (
            PureWindowsPath(raw_path) if "\\" in raw_path else PurePosixPath(raw_path)
        )
        separator = "\\" if isinstance(path, PureWindowsPath) else "/"
        parts = [part for part in path.parts if part and part != path.anchor]

        if len(parts) > cls._PATH_SEGMENT_LIMIT:
            display = "…" + separator + separator.join(parts[-cls._PATH_SEGMENT_LIMIT :])
        elif path.anchor:
            display = path.anchor.rstrip("\\/") + separator + separator.join(parts)
        else:
            display = separator.join(parts) or "."

        text = Text()
        for char in display:
            color = "magenta" if char in {separator, "…"} else "white"
            _ = text.append(char, style=Style(color=color))
        return text

    def _render_tag_event(self, record: logging.LogRecord) -> Text | None:
        """Render structured tag events with dedicated styling."""

        event = getattr(record, "tag_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._TAG_EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._EVENT_LABELS.get(event, f"{event} "))

        file_path = getattr(record, "file_path", None)
        if file_path:
            _ = body.append_text(self.format_path(str(file_path)))

        details: list[str] = []
        tag_size = getattr(record, "tag_size", None)
        if isinstance(tag_size, int):
            details.append(f"{tag_size} bytes")
        frame_count = getattr(record, "frame_count", None)
        if isinstance(frame_count, int):
            details.append(f"frames={frame_count}")
        padding_size = getattr(record, "padding_size", None)
        if isinstance(padding_size, int):
            details.append(f"padding={padding_size}")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for tag events."""

        tag_text = self._render_tag_event(record)
        if tag_text is not None:
            return tag_text
        return super().render_message(record, message)


__all__ = ["TagEventRichHandler"]
