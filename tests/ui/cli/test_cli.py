"""Tests for CLI functionality."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from mutagen.id3 import ID3
from pytest_mock import MockerFixture

from id3craft.features.tagging.domain.trailer import TAG_SIZE
from id3craft.ui.cli import CommandProcessor


@pytest.fixture
def mock_logger(mocker: MockerFixture) -> MagicMock:
    """Create a mock logger.

    Args:
        mocker: Pytest mocker fixture.

    Returns:
        MagicMock: Mock logger instance.
    """
    return mocker.patch("id3craft.ui.cli.cli.logger")


def test_create_writes_tagged_silence(tmp_path: Path) -> None:
    output = tmp_path / "created.mp3"

    CommandProcessor.process_command(["create", str(output), "--sample", "--duration", "0.5", "--quiet"])

    tags = ID3(output, load_v1=False)
    assert str(tags["TIT2"]) == "Test song."
    assert str(tags["TRCK"]) == "8/12"
    assert output.read_bytes()[-TAG_SIZE:].startswith(b"TAG")


def test_tag_then_strip_round_trip(mp3_file: Path) -> None:
    original = mp3_file.read_bytes()

    CommandProcessor.process_command(["tag", str(mp3_file), "--title", "Hello", "--artist", "World"])
    assert str(ID3(mp3_file, load_v1=False)["TPE1"]) == "World"

    CommandProcessor.process_command(["strip", str(mp3_file)])
    assert mp3_file.read_bytes() == original


def test_tag_without_id3v1(mp3_file: Path) -> None:
    CommandProcessor.process_command(["tag", str(mp3_file), "--title", "x", "--no-id3v1"])

    assert not mp3_file.read_bytes()[-TAG_SIZE:].startswith(b"TAG")


def test_show_prints_tags(mp3_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    CommandProcessor.process_command(["tag", str(mp3_file), "--title", "Visible", "--quiet"])
    _ = capsys.readouterr()

    CommandProcessor.process_command(["show", str(mp3_file)])

    out = capsys.readouterr().out
    assert "TIT2" in out
    assert "Visible" in out
    assert "ID3v1" in out


def test_error_handling(mp3_file: Path, mock_logger: MagicMock, mocker: MockerFixture) -> None:
    """Unexpected errors are logged and mapped to exit status 1."""

    _ = mocker.patch(
        "id3craft.ui.cli.commands.tag.TagCommand.execute",
        side_effect=Exception("Test error"),
    )

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["tag", str(mp3_file)])

    assert exc_info.value.code == 1
    mock_logger.error.assert_called_once_with("An unexpected error occurred: %s", "Test error")


def test_validation_error_exits_with_failure(mp3_file: Path, mock_logger: MagicMock) -> None:
    original = mp3_file.read_bytes()

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["tag", str(mp3_file), "--genre-id", "999"])

    assert exc_info.value.code == 1
    assert mock_logger.error.called
    assert mp3_file.read_bytes() == original


def test_keyboard_interrupt(mp3_file: Path, mock_logger: MagicMock, mocker: MockerFixture) -> None:
    """Ctrl-C maps to exit status 130."""

    _ = mocker.patch(
        "id3craft.ui.cli.commands.strip.StripCommand.execute",
        side_effect=KeyboardInterrupt,
    )

    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["strip", str(mp3_file)])

    assert exc_info.value.code == 130
    mock_logger.info.assert_called_once_with("\nOperation cancelled by user")


def test_missing_file_exits_before_processing(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        CommandProcessor.process_command(["strip", str(tmp_path / "missing.mp3")])

    assert exc_info.value.code == 1
