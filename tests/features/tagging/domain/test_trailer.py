"""Tests for the fixed 128-byte ID3v1 trailer layout."""

from id3craft.features.tagging.domain import trailer
from id3craft.shared.tag_metadata import TagMetadata


def _field(tag: bytes, name: str) -> bytes:
    spec = next(field for field in trailer.TEXT_FIELDS if field.name == name)
    return tag[spec.offset : spec.offset + spec.width]


def test_build_trailer_layout() -> None:
    metadata = TagMetadata(
        title="Test song.",
        artist="Bert Berrevoets",
        album="The Best!",
        year="2020",
        comment="This is the best album ever.",
        track_number=8,
        genre_id=12,
    )

    tag = trailer.build_trailer(metadata)

    assert len(tag) == trailer.TAG_SIZE
    assert tag[:3] == b"TAG"
    assert _field(tag, "title") == b"Test song." + bytes(20)
    assert _field(tag, "artist") == b"Bert Berrevoets" + bytes(15)
    assert _field(tag, "album") == b"The Best!" + bytes(21)
    assert _field(tag, "year") == b"2020"
    assert _field(tag, "comment") == b"This is the best album ever."
    assert tag[125] == 0
    assert tag[126] == 8
    assert tag[127] == 12


def test_empty_metadata_is_zero_filled() -> None:
    tag = trailer.build_trailer(TagMetadata())

    assert tag == b"TAG" + bytes(trailer.TAG_SIZE - 3)


def test_long_title_is_truncated_after_trimming() -> None:
    title = "  " + "A" * 35
    tag = trailer.build_trailer(TagMetadata(title=title))

    assert _field(tag, "title") == b"A" * 30
    assert tag[33] == 0


def test_short_year_is_left_aligned() -> None:
    tag = trailer.build_trailer(TagMetadata(year="20"))

    assert _field(tag, "year") == b"20\x00\x00"


def test_non_ascii_text_is_transliterated() -> None:
    assert trailer.to_field_bytes("Beyoncé", 30) == b"Beyonce"
    assert trailer.to_field_bytes("Motörhead", 30) == b"Motorhead"


def test_to_field_bytes_handles_empty_and_whitespace() -> None:
    assert trailer.to_field_bytes("", 30) == b""
    assert trailer.to_field_bytes("   ", 30) == b""
    assert trailer.to_field_bytes(" x ", 30) == b"x"


def test_has_marker() -> None:
    tag = trailer.build_trailer(TagMetadata(title="x"))

    assert trailer.has_marker(tag)
    assert trailer.has_marker(b"audio" + tag)
    assert not trailer.has_marker(tag[:-1])
    assert not trailer.has_marker(bytes(trailer.TAG_SIZE))
