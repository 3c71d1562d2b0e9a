"""Tests for ID3v2.4 frame construction."""

from datetime import date, datetime, timedelta, timezone

import pytest

from id3craft.features.tagging.domain import frames
from id3craft.features.tagging.domain.frames import CommentFrame, FrameId, TextFrame
from id3craft.shared.errors import ValidationError


def test_build_title_layout() -> None:
    frame = frames.build_title("Test song.")

    assert frame[:4] == b"TIT2"
    assert frame[4:8] == b"\x00\x00\x00\x0b"
    assert frame[8:10] == b"\x00\x00"
    assert frame[10] == frames.UTF8_ENCODING
    assert frame[11:] == b"Test song."
    assert len(frame) == 21


def test_empty_text_produces_no_frame() -> None:
    assert frames.build_title("") == b""
    assert frames.build_comment("") == b""
    assert frames.build_recording_time("") == b""


def test_payload_size_counts_utf8_bytes() -> None:
    frame = frames.build_artist("Café")

    assert frame[:4] == b"TPE1"
    # one encoding byte plus five UTF-8 bytes
    assert frame[4:8] == b"\x00\x00\x00\x06"
    assert frame[11:].decode("utf-8") == "Café"


def test_build_text_rejects_bad_identifiers() -> None:
    with pytest.raises(ValidationError):
        _ = frames.build_text("TIT", "x")
    with pytest.raises(ValidationError):
        _ = frames.build_text("TIT22", "x")
    with pytest.raises(ValidationError):
        _ = TextFrame("TÏT2", "x")


def test_build_track_with_and_without_total() -> None:
    assert frames.build_track(8, 12)[11:] == b"8/12"
    assert frames.build_track(8)[11:] == b"8"
    assert frames.build_track(3, 0)[11:] == b"3"


def test_build_comment_layout() -> None:
    frame = frames.build_comment("hi")

    assert frame[:4] == b"COMM"
    assert frame[4:8] == b"\x00\x00\x00\x07"
    assert frame[10:] == b"\x03eng\x00hi"


def test_build_comment_with_description() -> None:
    frame = frames.build_comment("body", language="deu", description="note")

    assert frame[10:] == b"\x03deunote\x00body"


@pytest.mark.parametrize(
    ("language", "expected"),
    [("en", "en "), ("english", "eng"), ("", "   "), ("fra", "fra")],
)
def test_comment_language_is_normalised(language: str, expected: str) -> None:
    assert CommentFrame("x", language=language).language == expected


def test_encode_frame_dispatches_on_variant() -> None:
    text = frames.encode_frame(TextFrame(FrameId.ALBUM, "The Best!"))
    comment = frames.encode_frame(CommentFrame("The Best!"))

    assert text[:4] == b"TALB"
    assert comment[:4] == b"COMM"


def test_encode_frame_rejects_unknown_descriptor() -> None:
    class Bogus:
        text = "x"

    with pytest.raises(TypeError):
        _ = frames.encode_frame(Bogus())  # pyright: ignore[reportArgumentType]


@pytest.mark.parametrize(
    ("value", "timespec", "expected"),
    [
        ("2020", "date", "2020"),
        ("  2020-05-17 ", "date", "2020-05-17"),
        (2020, "date", "2020"),
        (999, "date", "0999"),
        (date(2020, 5, 17), "seconds", "2020-05-17"),
        (datetime(2020, 5, 17, 13, 45, 30), "date", "2020-05-17"),
        (datetime(2020, 5, 17, 13, 45, 30), "minutes", "2020-05-17T13:45"),
        (datetime(2020, 5, 17, 13, 45, 30), "seconds", "2020-05-17T13:45:30"),
        (
            datetime(2020, 5, 17, 13, 45, 30, tzinfo=timezone(timedelta(hours=2))),
            "seconds",
            "2020-05-17T13:45:30",
        ),
    ],
)
def test_format_timestamp(value: str | int | date, timespec: frames.Timespec, expected: str) -> None:
    assert frames.format_timestamp(value, timespec) == expected


def test_format_timestamp_rejects_other_types() -> None:
    with pytest.raises(ValidationError):
        _ = frames.format_timestamp(True)
    with pytest.raises(ValidationError):
        _ = frames.format_timestamp(20.5)  # pyright: ignore[reportArgumentType]


def test_build_recording_time() -> None:
    frame = frames.build_recording_time(datetime(2020, 1, 2, 3, 4), timespec="minutes")

    assert frame[:4] == b"TDRC"
    assert frame[11:] == b"2020-01-02T03:04"
