"""Tests for the 10-byte ID3v2 header."""

import pytest

from id3craft.features.tagging.domain import header
from id3craft.features.tagging.domain.header import HeaderFlags
from id3craft.shared.errors import SyncsafeRangeError, ValidationError


def test_build_header_layout() -> None:
    assert header.build_header(1024) == b"ID3\x04\x00\x00\x00\x00\x08\x00"


def test_build_header_with_flags() -> None:
    data = header.build_header(0, HeaderFlags.EXPERIMENTAL)

    assert data[5] == 0x20


def test_build_header_rejects_oversized_tag() -> None:
    with pytest.raises(SyncsafeRangeError):
        _ = header.build_header(0x10000000)


def test_read_back_size_and_version() -> None:
    data = header.build_header(5000)

    assert header.read_tag_size(data) == 5000
    assert header.read_version(data) == (4, 0)


def test_read_helpers_reject_short_input() -> None:
    with pytest.raises(ValidationError):
        _ = header.read_tag_size(b"ID3")
    with pytest.raises(ValidationError):
        _ = header.read_version(b"ID3\x04")


@pytest.mark.parametrize(
    "data",
    [
        header.build_header(0),
        b"ID3\x03\x00\x00\x00\x00\x00\x00",
        b"ID3\x05\x00\x80\x00\x00\x00\x00",
        header.build_header(10) + b"trailing audio",
    ],
)
def test_is_valid_header_accepts(data: bytes) -> None:
    assert header.is_valid_header(data)


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"ID3\x04\x00\x00",
        b"TAG\x04\x00\x00\x00\x00\x00\x00",
        b"ID3\xff\x00\x00\x00\x00\x00\x00",
        b"ID3\x04\xff\x00\x00\x00\x00\x00",
        b"ID3\x04\x00\x01\x00\x00\x00\x00",
    ],
)
def test_is_valid_header_rejects(data: bytes) -> None:
    assert not header.is_valid_header(data)
