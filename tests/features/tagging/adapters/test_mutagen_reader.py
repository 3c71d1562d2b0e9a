"""Cross-check written tags with mutagen as an independent parser."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from mutagen.id3 import ID3, ID3NoHeaderError

from id3craft.features.tagging import TagWriter, TagWriterOptions
from id3craft.features.tagging.adapters import LocalTagFileGateway, MutagenTagReader
from id3craft.shared.tag_metadata import TagMetadata


def test_mutagen_reads_every_frame(
    make_audio_file: Callable[..., Path], sample_metadata: TagMetadata
) -> None:
    path = make_audio_file(2000)
    _ = TagWriter().write_tags(path, sample_metadata)

    tags = ID3(path, load_v1=False)

    assert tags.version == (2, 4, 0)
    assert str(tags["TIT2"]) == "Test song."
    assert str(tags["TPE1"]) == "Bert Berrevoets"
    assert str(tags["TALB"]) == "The Best!"
    assert str(tags["TDRC"]) == "2020"
    assert str(tags["TRCK"]) == "8/12"
    assert str(tags["TCON"]) == "Other"
    assert str(tags["COMM::eng"]) == "This is the best album ever."


def test_mutagen_reads_unicode_text(make_audio_file: Callable[..., Path]) -> None:
    path = make_audio_file(100)
    _ = TagWriter().write_id3v2_only(path, TagMetadata(title="Café del Mar", artist="坂本龍一"))

    tags = ID3(path, load_v1=False)

    assert str(tags["TIT2"]) == "Café del Mar"
    assert str(tags["TPE1"]) == "坂本龍一"


def test_mutagen_size_matches_existing_tag_size(
    make_audio_file: Callable[..., Path], sample_metadata: TagMetadata
) -> None:
    path = make_audio_file(100)
    report = TagWriter().write_tags(path, sample_metadata, TagWriterOptions(id3v2_padding_size=300))

    assert ID3(path, load_v1=False).size == report.id3v2_size


def test_reader_snapshot_for_tagged_file(
    make_audio_file: Callable[..., Path], sample_metadata: TagMetadata
) -> None:
    path = make_audio_file(1500)
    report = TagWriter().write_tags(path, sample_metadata)

    snapshot = MutagenTagReader().read(path)

    assert snapshot.has_id3v2 and snapshot.has_id3v1
    assert snapshot.id3v2_version == (4, 0)
    assert snapshot.id3v2_size == report.id3v2_size
    assert ("TIT2", "Test song.") in snapshot.id3v2_frames
    v1 = dict(snapshot.id3v1_frames)
    assert v1["TIT2"] == "Test song."
    assert v1["TPE1"] == "Bert Berrevoets"
    assert v1["TRCK"] == "8"


def test_reader_snapshot_for_untagged_file(make_audio_file: Callable[..., Path]) -> None:
    path = make_audio_file(400)

    snapshot = MutagenTagReader().read(path)

    assert snapshot.is_empty
    assert snapshot.id3v2_frames == []
    assert snapshot.id3v1_frames == []


def test_stripped_file_has_no_header_for_mutagen(
    make_audio_file: Callable[..., Path], sample_metadata: TagMetadata
) -> None:
    path = make_audio_file(400)
    writer = TagWriter()
    _ = writer.write_tags(path, sample_metadata)
    _ = writer.remove_tags(path)

    with pytest.raises(ID3NoHeaderError):
        _ = ID3(path, load_v1=False)


def test_local_gateway_exists(tmp_path: Path) -> None:
    gateway = LocalTagFileGateway()
    path = tmp_path / "a.mp3"

    assert not gateway.exists(path)
    _ = path.write_bytes(b"x")
    assert gateway.exists(path)
    assert not gateway.exists(tmp_path)
