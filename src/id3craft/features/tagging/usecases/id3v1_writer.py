"""Summary: Append, detect and strip the 128-byte ID3v1 trailer.
Why: Rewriting must replace the trailer in place instead of stacking a second one.
"""

from __future__ import annotations

from id3craft.features.tagging.adapters.filesystem import LocalTagFileGateway
from id3craft.features.tagging.domain.trailer import TAG_SIZE, build_trailer, has_marker
from id3craft.platform.filesystem import StrPath
from id3craft.platform.logging import logger
from id3craft.shared.tag_metadata import TagMetadata

from .ports import TagFileGateway
from .tag_events import TagEvent


class Id3v1TagWriter:
    """Detects, removes and writes the ID3v1 trailer of a file."""

    files: TagFileGateway

    def __init__(self, files: TagFileGateway | None = None) -> None:
        self.files = files or LocalTagFileGateway()

    def build_tag(self, metadata: TagMetadata) -> bytes:
        return build_trailer(metadata)

    def has_tag(self, path: StrPath) -> bool:
        """Return True if the last 128 bytes of ``path`` start with ``TAG``."""

        return has_marker(self.files.read_tail(path, TAG_SIZE))

    def remove_tag(self, path: StrPath) -> bool:
        """Truncate the trailer if present; returns whether one was removed."""

        if not self.has_tag(path):
            return False

        self.files.truncate_from_end(path, TAG_SIZE)
        logger.info(
            "Removed ID3v1 tag [file=%s]",
            path,
            extra={
                "tag_event": TagEvent.ID3V1_REMOVE,
                "file_path": str(path),
                "tag_size": TAG_SIZE,
            },
        )
        return True

    def write_tag(self, path: StrPath, metadata: TagMetadata) -> int:
        """Replace any existing trailer with a fresh one; returns its size."""

        tag = build_trailer(metadata)
        _ = self.remove_tag(path)
        self.files.append_at_end(path, tag)
        logger.info(
            "Wrote ID3v1 tag [file=%s]",
            path,
            extra={
                "tag_event": TagEvent.ID3V1_WRITE,
                "file_path": str(path),
                "tag_size": len(tag),
            },
        )
        return len(tag)


__all__ = ["Id3v1TagWriter"]
