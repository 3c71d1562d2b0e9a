"""Summary: Lay out the 128-byte ID3v1.1 trailer tag.
Why: Legacy players read fixed offsets, so every field must land exactly.

Offsets::

    0-2     "TAG"
    3-32    title     (30)
    33-62   artist    (30)
    63-92   album     (30)
    93-96   year      (4)
    97-124  comment   (28)
    125     zero, selects ID3v1.1
    126     track number
    127     genre code
"""

from __future__ import annotations

from typing import Final, NamedTuple

from unidecode import unidecode

from id3craft.shared.tag_metadata import TagMetadata

TAG_SIZE: Final[int] = 128
MARKER: Final[bytes] = b"TAG"
ZERO_BYTE_OFFSET: Final[int] = 125
TRACK_OFFSET: Final[int] = 126
GENRE_OFFSET: Final[int] = 127


class TextField(NamedTuple):
    """Position of a fixed-width text field inside the trailer."""

    name: str
    offset: int
    width: int


TEXT_FIELDS: Final[tuple[TextField, ...]] = (
    TextField("title", 3, 30),
    TextField("artist", 33, 30),
    TextField("album", 63, 30),
    TextField("year", 93, 4),
    TextField("comment", 97, 28),
)


def to_field_bytes(value: str, width: int) -> bytes:
    """Fit ``value`` into a 7-bit field of ``width`` bytes.

    Non-ASCII characters are transliterated with unidecode; anything still
    unrepresentable becomes ``?``. The result is trimmed then hard-truncated.
    """
    if not value:
        return b""
    text = unidecode(value) if not value.isascii() else value
    return text.strip().encode("ascii", errors="replace")[:width]


def build_trailer(metadata: TagMetadata) -> bytes:
    """Return the 128-byte ID3v1.1 tag for ``metadata``.

    Unused bytes of every text field stay zero; nothing is space-padded.
    """
    tag = bytearray(TAG_SIZE)
    tag[: len(MARKER)] = MARKER

    for field in TEXT_FIELDS:
        encoded = to_field_bytes(getattr(metadata, field.name), field.width)
        tag[field.offset : field.offset + len(encoded)] = encoded

    tag[ZERO_BYTE_OFFSET] = 0
    tag[TRACK_OFFSET] = metadata.track_number
    tag[GENRE_OFFSET] = metadata.genre_id
    return bytes(tag)


def has_marker(tail: bytes) -> bool:
    """Return True if ``tail`` is a full trailer starting with ``TAG``."""

    return len(tail) >= TAG_SIZE and tail[-TAG_SIZE:].startswith(MARKER)


__all__ = [
    "GENRE_OFFSET",
    "MARKER",
    "TAG_SIZE",
    "TEXT_FIELDS",
    "TRACK_OFFSET",
    "TextField",
    "ZERO_BYTE_OFFSET",
    "build_trailer",
    "has_marker",
    "to_field_bytes",
]
