"""Shared fixtures for tagging tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from id3craft.shared.tag_metadata import TagMetadata


@pytest.fixture
def make_audio_file(tmp_path: Path) -> Callable[[int], Path]:
    """Return a factory writing ``size`` bytes of recognisable payload."""

    def _make(size: int, name: str = "track.mp3") -> Path:
        path = tmp_path / name
        _ = path.write_bytes(bytes(index % 251 for index in range(size)))
        return path

    return _make


@pytest.fixture
def sample_metadata() -> TagMetadata:
    return TagMetadata(
        title="Test song.",
        artist="Bert Berrevoets",
        album="The Best!",
        year="2020",
        comment="This is the best album ever.",
        track_number=8,
        total_tracks=12,
        genre_id=12,
        genre_text="Other",
    )
