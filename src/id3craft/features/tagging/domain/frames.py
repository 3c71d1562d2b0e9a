"""Summary: Build ID3v2.4 frames from tagged frame descriptors.
Why: Validate each frame kind once and share the 10-byte frame header layout.

Frame layout::

    0-3   frame identifier (4 ASCII characters)
    4-7   payload size, syncsafe
    8-9   flags (always zero)
    10-   payload

Text payload: ``0x03`` (UTF-8) followed by the text.
Comment payload: ``0x03``, 3-byte language, description, ``0x00``, comment.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum
from typing import Final, Literal

from id3craft.shared.errors import ValidationError

from . import syncsafe

FRAME_HEADER_SIZE: Final[int] = 10
FRAME_ID_LENGTH: Final[int] = 4
LANGUAGE_LENGTH: Final[int] = 3
UTF8_ENCODING: Final[int] = 0x03
_NO_FLAGS: Final[bytes] = b"\x00\x00"

Timespec = Literal["date", "minutes", "seconds"]


class FrameId(StrEnum):
    """Frame identifiers emitted by the ID3v2 writer."""

    TITLE = "TIT2"
    ARTIST = "TPE1"
    ALBUM = "TALB"
    RECORDING_TIME = "TDRC"
    TRACK = "TRCK"
    GENRE = "TCON"
    COMMENT = "COMM"


@dataclass(frozen=True, slots=True)
class TextFrame:
    """A ``T***`` frame carrying a single UTF-8 string."""

    frame_id: str
    text: str

    def __post_init__(self) -> None:
        if len(self.frame_id) != FRAME_ID_LENGTH or not self.frame_id.isascii():
            raise ValidationError(
                f"Frame ID must be exactly {FRAME_ID_LENGTH} ASCII characters, "
                f"got {self.frame_id!r}"
            )


@dataclass(frozen=True, slots=True)
class CommentFrame:
    """A ``COMM`` frame; the language is normalised to three characters."""

    text: str
    language: str = "eng"
    description: str = ""

    def __post_init__(self) -> None:
        language = (self.language or "").ljust(LANGUAGE_LENGTH)[:LANGUAGE_LENGTH]
        object.__setattr__(self, "language", language)


Frame = TextFrame | CommentFrame


def _frame_header(frame_id: str, payload_size: int) -> bytes:
    return frame_id.encode("ascii") + syncsafe.encode(payload_size) + _NO_FLAGS


def encode_frame(frame: Frame) -> bytes:
    """Serialize ``frame``; frames with empty text encode to ``b""``."""

    if not frame.text:
        return b""

    match frame:
        case TextFrame(frame_id=frame_id, text=text):
            payload = bytes([UTF8_ENCODING]) + text.encode("utf-8")
        case CommentFrame(text=text, language=language, description=description):
            frame_id = FrameId.COMMENT
            payload = b"".join(
                (
                    bytes([UTF8_ENCODING]),
                    language.encode("ascii", errors="replace"),
                    description.encode("utf-8"),
                    b"\x00",
                    text.encode("utf-8"),
                )
            )
        case _:
            raise TypeError(f"Unsupported frame descriptor: {frame!r}")
    return _frame_header(frame_id, len(payload)) + payload


def build_text(frame_id: str, text: str) -> bytes:
    """Build a text frame, or ``b""`` when ``text`` is empty."""

    return encode_frame(TextFrame(frame_id, text))


def build_title(title: str) -> bytes:
    return build_text(FrameId.TITLE, title)


def build_artist(artist: str) -> bytes:
    return build_text(FrameId.ARTIST, artist)


def build_album(album: str) -> bytes:
    return build_text(FrameId.ALBUM, album)


def build_genre(genre: str) -> bytes:
    return build_text(FrameId.GENRE, genre)


def build_track(track_number: int, total_tracks: int | None = None) -> bytes:
    """Build a ``TRCK`` frame as ``"N"`` or ``"N/T"``."""

    text = f"{track_number}/{total_tracks}" if total_tracks else str(track_number)
    return build_text(FrameId.TRACK, text)


def build_comment(comment: str, language: str = "eng", description: str = "") -> bytes:
    """Build a ``COMM`` frame, or ``b""`` when ``comment`` is empty."""

    return encode_frame(CommentFrame(comment, language, description or ""))


def format_timestamp(value: str | int | date, timespec: Timespec = "date") -> str:
    """Render ``value`` in one of the ID3v2.4 timestamp forms.

    Strings are trusted and only trimmed; integers are years. ``datetime``
    values honour ``timespec`` (``YYYY-MM-DD``, ``YYYY-MM-DDTHH:MM`` or
    ``YYYY-MM-DDTHH:MM:SS``) and lose any timezone.
    """
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, bool):
        raise ValidationError(f"Unsupported timestamp value: {value!r}")
    if isinstance(value, int):
        return f"{value:04d}"
    if isinstance(value, datetime):
        if timespec == "date":
            return value.date().isoformat()
        return value.replace(tzinfo=None).isoformat(timespec=timespec)
    if isinstance(value, date):
        return value.isoformat()
    raise ValidationError(f"Unsupported timestamp value: {value!r}")


def build_recording_time(value: str | int | date, *, timespec: Timespec = "date") -> bytes:
    """Build a ``TDRC`` frame from a string, year, date or datetime."""

    return build_text(FrameId.RECORDING_TIME, format_timestamp(value, timespec))


__all__ = [
    "CommentFrame",
    "FRAME_HEADER_SIZE",
    "Frame",
    "FrameId",
    "TextFrame",
    "UTF8_ENCODING",
    "build_album",
    "build_artist",
    "build_comment",
    "build_genre",
    "build_recording_time",
    "build_text",
    "build_title",
    "build_track",
    "encode_frame",
    "format_timestamp",
]
