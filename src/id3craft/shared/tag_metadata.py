# Where: id3craft.shared.tag_metadata
# What: Canonical TagMetadata dataclass consumed by both tag codecs.
# Why: Centralize the metadata record so ID3v1 and ID3v2 read the same fields.

from dataclasses import dataclass

from .errors import ValidationError

BYTE_MAX = 0xFF


@dataclass(frozen=True, slots=True)
class TagMetadata:
    """Metadata for a single audio file.

    Every field is optional. Empty strings and zero numbers mean "absent":
    the ID3v2 writer omits the matching frame and the ID3v1 writer leaves the
    field zero-filled.
    """

    title: str = ""
    artist: str = ""
    album: str = ""
    year: str = ""
    comment: str = ""
    track_number: int = 0
    total_tracks: int | None = None
    genre_id: int = 0
    genre_text: str | None = None

    def __post_init__(self) -> None:
        _check_byte("track_number", self.track_number)
        _check_byte("genre_id", self.genre_id)
        if self.total_tracks is not None:
            _check_byte("total_tracks", self.total_tracks)

    def genre_string(self) -> str:
        """Return the free-text genre, falling back to the numeric code."""

        if self.genre_text:
            return self.genre_text
        return str(self.genre_id)


def _check_byte(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= BYTE_MAX:
        raise ValidationError(f"{name} must be between 0 and {BYTE_MAX}, got {value}")


__all__ = ["TagMetadata"]
