"""src/id3craft/features/tagging/usecases/tag_writer.py
Where: Tagging feature usecases layer.
What: Write or strip both tag formats on one file according to explicit options.
Why: Keep the ID3v2 and ID3v1 paths independent while sharing one entry point.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from id3craft.features.tagging.adapters.filesystem import LocalTagFileGateway
from id3craft.features.tagging.domain.header import DEFAULT_PADDING_SIZE
from id3craft.features.tagging.domain.trailer import TAG_SIZE
from id3craft.platform.filesystem import StrPath
from id3craft.platform.logging import logger
from id3craft.shared.errors import TargetNotFoundError, ValidationError
from id3craft.shared.tag_metadata import TagMetadata

from .id3v1_writer import Id3v1TagWriter
from .id3v2_writer import Id3v2TagWriter
from .ports import TagFileGateway

if TYPE_CHECKING:
    from id3craft.config.config import Config


@dataclass(frozen=True, slots=True)
class TagWriterOptions:
    """Which tags to write and how much ID3v2 padding to reserve.

    Attributes:
        write_id3v1: Append the 128-byte trailer. Defaults to True.
        write_id3v2: Prepend the ID3v2.4 tag. Defaults to True.
        id3v2_padding_size: Zero bytes after the ID3v2 frames. Defaults to 1024.
    """

    write_id3v1: bool = True
    write_id3v2: bool = True
    id3v2_padding_size: int = DEFAULT_PADDING_SIZE

    def __post_init__(self) -> None:
        if self.id3v2_padding_size < 0:
            raise ValidationError(
                f"ID3v2 padding size must not be negative, got {self.id3v2_padding_size}"
            )

    @classmethod
    def from_config(cls, config: Config) -> TagWriterOptions:
        """Build options from a loaded configuration file."""

        return cls(
            write_id3v1=config.write_id3v1,
            write_id3v2=config.write_id3v2,
            id3v2_padding_size=config.id3v2_padding_size,
        )


@dataclass(frozen=True, slots=True)
class TagWriteReport:
    """Outcome of a write or remove call, used for console summaries."""

    path: Path
    id3v2_size: int = 0
    id3v1_size: int = 0
    file_size: int = 0

    @property
    def wrote_id3v2(self) -> bool:
        return self.id3v2_size > 0

    @property
    def wrote_id3v1(self) -> bool:
        return self.id3v1_size > 0


class TagWriter:
    """Coordinates the ID3v2 and ID3v1 writers for one file at a time."""

    files: TagFileGateway
    id3v2: Id3v2TagWriter
    id3v1: Id3v1TagWriter

    def __init__(self, files: TagFileGateway | None = None) -> None:
        self.files = files or LocalTagFileGateway()
        self.id3v2 = Id3v2TagWriter(self.files)
        self.id3v1 = Id3v1TagWriter(self.files)

    def _require_file(self, path: StrPath | None) -> Path:
        if path is None or not os.fspath(path):
            raise TargetNotFoundError("File path must be specified.")
        if not self.files.exists(path):
            raise TargetNotFoundError(f"Audio file not found: {path}")
        return Path(path)

    def write_tags(
        self,
        path: StrPath | None,
        metadata: TagMetadata,
        options: TagWriterOptions | None = None,
    ) -> TagWriteReport:
        """Write the tags selected by ``options`` to ``path``.

        The ID3v2 tag goes first since it only touches the start of the file;
        the ID3v1 trailer follows and only touches the end.

        Raises:
            TargetNotFoundError: If ``path`` is empty or does not exist. Nothing
                is modified in that case.
        """
        target = self._require_file(path)
        options = options or TagWriterOptions()

        id3v2_size = 0
        if options.write_id3v2:
            id3v2_size = self.id3v2.write_tag(target, metadata, options.id3v2_padding_size)

        id3v1_size = 0
        if options.write_id3v1:
            id3v1_size = self.id3v1.write_tag(target, metadata)

        report = TagWriteReport(
            path=target,
            id3v2_size=id3v2_size,
            id3v1_size=id3v1_size,
            file_size=self.files.size(target),
        )
        logger.debug("Tag write finished: %s", report)
        return report

    def write_id3v1_only(self, path: StrPath | None, metadata: TagMetadata) -> TagWriteReport:
        return self.write_tags(path, metadata, TagWriterOptions(write_id3v2=False))

    def write_id3v2_only(
        self,
        path: StrPath | None,
        metadata: TagMetadata,
        padding_size: int = DEFAULT_PADDING_SIZE,
    ) -> TagWriteReport:
        return self.write_tags(
            path,
            metadata,
            TagWriterOptions(write_id3v1=False, id3v2_padding_size=padding_size),
        )

    def remove_tags(self, path: StrPath | None) -> TagWriteReport:
        """Strip both tags; the report carries the sizes that were removed."""

        target = self._require_file(path)
        id3v2_size = self.id3v2.remove_existing_tag(target)
        id3v1_removed = self.id3v1.remove_tag(target)
        return TagWriteReport(
            path=target,
            id3v2_size=id3v2_size,
            id3v1_size=TAG_SIZE if id3v1_removed else 0,
            file_size=self.files.size(target),
        )


__all__ = ["TagWriteReport", "TagWriter", "TagWriterOptions"]
