"""Tagging feature: ID3v1 and ID3v2.4 encoding plus in-place file rewrites."""

from .usecases import (
    Id3v1TagWriter,
    Id3v2TagWriter,
    TagEvent,
    TagFileGateway,
    TagWriteReport,
    TagWriter,
    TagWriterOptions,
)

__all__ = [
    "Id3v1TagWriter",
    "Id3v2TagWriter",
    "TagEvent",
    "TagFileGateway",
    "TagWriteReport",
    "TagWriter",
    "TagWriterOptions",
]
