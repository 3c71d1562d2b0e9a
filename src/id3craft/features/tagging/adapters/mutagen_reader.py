"""Read tags back through mutagen for display.

Where: src/id3craft/features/tagging/adapters/mutagen_reader.py
What: Decode the ID3v2 and ID3v1 tags of a file into a flat snapshot.
Why: Report what a third-party parser sees instead of trusting our own encoder.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from mutagen.id3 import ID3, ID3NoHeaderError, ParseID3v1

from id3craft.features.tagging.domain.trailer import TAG_SIZE, has_marker
from id3craft.platform.filesystem import StrPath, read_tail
from id3craft.platform.logging import logger

__all__ = ["MutagenTagReader", "TagSnapshot"]


@dataclass(frozen=True, slots=True)
class TagSnapshot:
    """Tags found in one file, as ``(frame id, text)`` pairs per format."""

    path: Path
    id3v2_version: tuple[int, int] | None = None
    id3v2_size: int = 0
    id3v2_frames: list[tuple[str, str]] = field(default_factory=list)
    id3v1_frames: list[tuple[str, str]] = field(default_factory=list)
    has_id3v1: bool = False

    @property
    def has_id3v2(self) -> bool:
        return self.id3v2_version is not None

    @property
    def is_empty(self) -> bool:
        return not self.has_id3v2 and not self.has_id3v1


class MutagenTagReader:
    """Loads ID3 tags with mutagen, keeping both formats separate."""

    def read(self, path: StrPath) -> TagSnapshot:
        """Return the tags of ``path``.

        Raises:
            mutagen.MutagenError: If an ID3v2 header is present but malformed.
        """
        target = Path(path)
        try:
            # load_v1=False keeps v1 fields out of the v2 view.
            tags = ID3(target, load_v1=False)
        except ID3NoHeaderError:
            logger.debug("No ID3v2 header in %s", target)
            id3v2_version = None
            id3v2_size = 0
            id3v2_frames: list[tuple[str, str]] = []
        else:
            id3v2_version = (tags.version[1], tags.version[2])
            id3v2_size = tags.size
            id3v2_frames = [(frame.FrameID, str(frame)) for frame in tags.values()]

        tail = read_tail(target, TAG_SIZE)
        id3v1_frames: list[tuple[str, str]] = []
        has_id3v1 = has_marker(tail)
        if has_id3v1:
            parsed = ParseID3v1(tail) or {}
            id3v1_frames = [(frame_id, str(frame)) for frame_id, frame in parsed.items()]

        return TagSnapshot(
            path=target,
            id3v2_version=id3v2_version,
            id3v2_size=id3v2_size,
            id3v2_frames=id3v2_frames,
            id3v1_frames=id3v1_frames,
            has_id3v1=has_id3v1,
        )
