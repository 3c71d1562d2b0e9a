"""Fixtures isolating CLI tests from the user's config and log files."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture


@pytest.fixture(autouse=True)
def cli_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``Config.load`` at a throwaway file."""

    config_path = tmp_path / "config" / "config.toml"
    monkeypatch.setenv("ID3CRAFT_CONFIG", str(config_path))
    return config_path


@pytest.fixture(autouse=True)
def mock_setup_logger(mocker: MockerFixture) -> MagicMock:
    """Keep the CLI from attaching a file handler under the repository."""

    return mocker.patch("id3craft.ui.cli.args.parser.setup_logger")


@pytest.fixture
def mp3_file(tmp_path: Path) -> Path:
    path = tmp_path / "song.mp3"
    _ = path.write_bytes(bytes(range(256)) * 8)
    return path
