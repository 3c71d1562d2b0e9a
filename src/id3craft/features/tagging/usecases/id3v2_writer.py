"""Summary: Write, measure and strip the ID3v2.4 tag at the start of a file.
Why: Give callers a single entry point that never leaves two headers stacked.
"""

from __future__ import annotations

from id3craft.features.tagging.adapters.filesystem import LocalTagFileGateway
from id3craft.features.tagging.domain import frames
from id3craft.features.tagging.domain.header import (
    DEFAULT_PADDING_SIZE,
    HEADER_SIZE,
    build_header,
    is_valid_header,
    read_tag_size,
    read_version,
)
from id3craft.platform.filesystem import StrPath
from id3craft.platform.logging import logger
from id3craft.shared.errors import ValidationError
from id3craft.shared.tag_metadata import TagMetadata

from .ports import TagFileGateway
from .tag_events import TagEvent


def build_frames(metadata: TagMetadata) -> list[bytes]:
    """Return the encoded frames for ``metadata`` in emission order.

    Order: title, artist, album, recording time, track, genre, comment.
    Empty text fields, a zero track number and a zero genre code without
    free text produce no frame.
    """
    blocks = [
        frames.build_title(metadata.title),
        frames.build_artist(metadata.artist),
        frames.build_album(metadata.album),
        frames.build_recording_time(metadata.year),
    ]
    if metadata.track_number > 0:
        blocks.append(frames.build_track(metadata.track_number, metadata.total_tracks))
    if metadata.genre_text or metadata.genre_id > 0:
        blocks.append(frames.build_genre(metadata.genre_string()))
    blocks.append(frames.build_comment(metadata.comment))
    return [block for block in blocks if block]


def build_tag(metadata: TagMetadata, padding_size: int = DEFAULT_PADDING_SIZE) -> bytes:
    """Assemble header, frames and ``padding_size`` zero bytes.

    Raises:
        ValidationError: If ``padding_size`` is negative or the tag would not
            fit in a syncsafe size field.
    """
    return _assemble(build_frames(metadata), padding_size)


def _assemble(blocks: list[bytes], padding_size: int) -> bytes:
    if padding_size < 0:
        raise ValidationError(f"Padding size must not be negative, got {padding_size}")

    body = b"".join(blocks)
    return build_header(len(body) + padding_size) + body + bytes(padding_size)


class Id3v2TagWriter:
    """Detects, removes and writes the ID3v2 tag of a file."""

    files: TagFileGateway

    def __init__(self, files: TagFileGateway | None = None) -> None:
        self.files = files or LocalTagFileGateway()

    def has_tag(self, path: StrPath) -> bool:
        """Return True if ``path`` starts with a valid ID3v2 header."""

        return is_valid_header(self.files.read_head(path, HEADER_SIZE))

    def existing_tag_size(self, path: StrPath) -> int:
        """Return the full size of the existing tag including its header, or 0."""

        head = self.files.read_head(path, HEADER_SIZE)
        if not is_valid_header(head):
            return 0
        return HEADER_SIZE + read_tag_size(head)

    def remove_existing_tag(self, path: StrPath) -> int:
        """Strip the existing tag, returning the number of bytes removed."""

        head = self.files.read_head(path, HEADER_SIZE)
        if not is_valid_header(head):
            return 0

        tag_size = HEADER_SIZE + read_tag_size(head)
        major, minor = read_version(head)
        self.files.remove_from_start(path, tag_size)
        logger.info(
            "Removed ID3v2.%d.%d tag [file=%s, size=%d]",
            major,
            minor,
            path,
            tag_size,
            extra={
                "tag_event": TagEvent.ID3V2_REMOVE,
                "file_path": str(path),
                "tag_size": tag_size,
                "tag_version": (major, minor),
            },
        )
        return tag_size

    def write_tag(
        self,
        path: StrPath,
        metadata: TagMetadata,
        padding_size: int = DEFAULT_PADDING_SIZE,
    ) -> int:
        """Replace any existing tag with a fresh one; returns the new tag size.

        The old tag is removed before the new one is inserted so the
        measured size never includes stale data.
        """
        blocks = build_frames(metadata)
        tag = _assemble(blocks, padding_size)
        _ = self.remove_existing_tag(path)
        self.files.insert_at_start(path, tag)

        logger.info(
            "Wrote ID3v2 tag [file=%s, size=%d]",
            path,
            len(tag),
            extra={
                "tag_event": TagEvent.ID3V2_WRITE,
                "file_path": str(path),
                "tag_size": len(tag),
                "frame_count": len(blocks),
                "padding_size": padding_size,
            },
        )
        return len(tag)


__all__ = ["Id3v2TagWriter", "build_frames", "build_tag"]
