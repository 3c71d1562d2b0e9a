"""Summary: Build and inspect the 10-byte ID3v2 tag header.
Why: Keep the marker, version and syncsafe size layout in one place.

Header layout::

    0-2   "ID3"
    3-4   version (0x04 0x00 for ID3v2.4)
    5     flags
    6-9   tag size excluding this header, syncsafe
"""

from __future__ import annotations

import struct
from enum import IntFlag
from typing import Final

from id3craft.shared.errors import ValidationError

from . import syncsafe

HEADER_SIZE: Final[int] = 10
MARKER: Final[bytes] = b"ID3"
VERSION_MAJOR: Final[int] = 0x04
VERSION_MINOR: Final[int] = 0x00
DEFAULT_PADDING_SIZE: Final[int] = 1024

_VERSION_SENTINEL: Final[int] = 0xFF
_RESERVED_FLAG_BITS: Final[int] = 0x0F
_HEADER_FORMAT: Final[str] = ">3sBBB4s"


class HeaderFlags(IntFlag):
    """Flag bits of the header's sixth byte."""

    NONE = 0
    UNSYNCHRONISATION = 0x80
    EXTENDED_HEADER = 0x40
    EXPERIMENTAL = 0x20
    FOOTER_PRESENT = 0x10


def build_header(tag_size: int, flags: HeaderFlags = HeaderFlags.NONE) -> bytes:
    """Return an ID3v2.4 header announcing ``tag_size`` bytes of frames and padding."""

    return struct.pack(
        _HEADER_FORMAT,
        MARKER,
        VERSION_MAJOR,
        VERSION_MINOR,
        int(flags),
        syncsafe.encode(tag_size),
    )


def is_valid_header(data: bytes) -> bool:
    """Return True if ``data`` starts with a well-formed ID3v2 header.

    Future versions are accepted; only the marker, the 0xFF version sentinel
    and the reserved low flag bits are checked.
    """
    if len(data) < HEADER_SIZE:
        return False
    marker, major, minor, flags, _ = struct.unpack_from(_HEADER_FORMAT, data)
    return (
        marker == MARKER
        and major < _VERSION_SENTINEL
        and minor < _VERSION_SENTINEL
        and flags & _RESERVED_FLAG_BITS == 0
    )


def read_tag_size(header: bytes) -> int:
    """Return the size announced by ``header``, excluding the header itself."""

    if len(header) < HEADER_SIZE:
        raise ValidationError(f"ID3v2 header must be {HEADER_SIZE} bytes, got {len(header)}")
    return syncsafe.decode(header[6:HEADER_SIZE])


def read_version(header: bytes) -> tuple[int, int]:
    """Return the ``(major, minor)`` version pair of ``header``."""

    if len(header) < HEADER_SIZE:
        raise ValidationError(f"ID3v2 header must be {HEADER_SIZE} bytes, got {len(header)}")
    return header[3], header[4]


__all__ = [
    "DEFAULT_PADDING_SIZE",
    "HEADER_SIZE",
    "HeaderFlags",
    "MARKER",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "build_header",
    "is_valid_header",
    "read_tag_size",
    "read_version",
]
