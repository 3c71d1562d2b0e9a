"""Structured event identifiers for tag write/remove logs."""

from __future__ import annotations

from enum import StrEnum


class TagEvent(StrEnum):
    """Values of the ``tag_event`` logging extra."""

    FILE_CREATE = "tag.file.create"
    FILE_ERROR = "tag.file.error"
    ID3V2_WRITE = "tag.id3v2.write"
    ID3V2_REMOVE = "tag.id3v2.remove"
    ID3V1_WRITE = "tag.id3v1.write"
    ID3V1_REMOVE = "tag.id3v1.remove"


__all__ = ["TagEvent"]
