"""Tests for output directory preparation."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from hls_ladder.errors import DirectoryError
from hls_ladder.stages.layout_stage import ensure_output_dir


def test_creates_missing_directory_with_parents(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "out"

    assert ensure_output_dir(target) is True
    assert target.is_dir()


def test_idempotent(tmp_path: Path) -> None:
    target = tmp_path / "out"

    assert ensure_output_dir(target) is True
    assert ensure_output_dir(target) is False
    assert target.is_dir()


def test_keeps_existing_content(tmp_path: Path) -> None:
    target = tmp_path / "out"
    (target / "720p").mkdir(parents=True)
    playlist = target / "720p" / "variant_720p.m3u8"
    playlist.write_text("#EXTM3U\n")

    assert ensure_output_dir(target) is False
    assert playlist.read_text() == "#EXTM3U\n"


def test_existing_regular_file_is_not_an_error(tmp_path: Path) -> None:
    target = tmp_path / "out"
    target.write_text("not a directory")

    assert ensure_output_dir(target) is False
    assert target.is_file()


def test_stat_failure_raises_directory_error(tmp_path: Path) -> None:
    with patch.object(Path, "stat", side_effect=PermissionError("denied")):
        with pytest.raises(DirectoryError, match="error checking output directory"):
            ensure_output_dir(tmp_path / "out")


def test_mkdir_failure_raises_directory_error(tmp_path: Path) -> None:
    with patch.object(Path, "mkdir", side_effect=PermissionError("denied")):
        with pytest.raises(DirectoryError, match="error creating output directory"):
            ensure_output_dir(tmp_path / "out")
