"""Summary: Use cases that read and rewrite tag regions of audio files.
Why: Expose the writers through one import path for the CLI and callers.
"""

from .ports import TagFileGateway
from .tag_events import TagEvent
from .id3v1_writer import Id3v1TagWriter
from .id3v2_writer import Id3v2TagWriter, build_frames, build_tag
from .tag_writer import TagWriteReport, TagWriter, TagWriterOptions

__all__ = [
    "Id3v1TagWriter",
    "Id3v2TagWriter",
    "TagEvent",
    "TagFileGateway",
    "TagWriteReport",
    "TagWriter",
    "TagWriterOptions",
    "build_frames",
    "build_tag",
]
