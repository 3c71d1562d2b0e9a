"""Tests for the shared TagMetadata record."""

import pytest

from id3craft.shared import TagMetadata, ValidationError


def test_defaults_are_absent_values() -> None:
    metadata = TagMetadata()

    assert metadata.title == ""
    assert metadata.track_number == 0
    assert metadata.total_tracks is None
    assert metadata.genre_text is None


def test_genre_string_prefers_text() -> None:
    assert TagMetadata(genre_id=12, genre_text="Other").genre_string() == "Other"
    assert TagMetadata(genre_id=12).genre_string() == "12"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"track_number": 256},
        {"track_number": -1},
        {"genre_id": 300},
        {"total_tracks": 1000},
        {"track_number": True},
        {"genre_id": "12"},
    ],
)
def test_out_of_range_values_are_rejected(kwargs: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        _ = TagMetadata(**kwargs)  # pyright: ignore[reportArgumentType]


def test_metadata_is_immutable() -> None:
    metadata = TagMetadata(title="x")

    with pytest.raises(AttributeError):
        metadata.title = "y"  # pyright: ignore[reportAttributeAccessIssue]
