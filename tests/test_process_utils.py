"""Tests for the external tool runner."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from types import SimpleNamespace
from typing import TYPE_CHECKING

import pytest

import hls_ladder.utils.process_utils as pu

if TYPE_CHECKING:
    MonkeyPatch = pytest.MonkeyPatch


def test_run_tool_normalizes_args_and_merges_stderr(monkeypatch: MonkeyPatch) -> None:
    """Paths are stringified and stderr is folded into stdout on request."""
    calls: list[tuple[list[str], dict[str, object]]] = []

    def fake_run(cmd: list[str], **kwargs: object) -> SimpleNamespace:
        calls.append((cmd, kwargs))
        return SimpleNamespace(returncode=0, stdout="1920x1080\n", stderr=None)

    monkeypatch.setattr(pu, "subprocess", SimpleNamespace(
        run=fake_run, PIPE=subprocess.PIPE, STDOUT=subprocess.STDOUT, DEVNULL=subprocess.DEVNULL,
    ))

    res = pu.run_tool(["ffprobe", Path("in.mp4")], merge_stderr=True)

    assert res.stdout == "1920x1080\n"
    cmd, kwargs = calls[0]
    assert cmd == ["ffprobe", "in.mp4"]
    assert kwargs["stderr"] == subprocess.STDOUT
    assert kwargs["check"] is False
    assert kwargs["errors"] == "replace"
    assert "timeout" not in kwargs


def test_tail_keeps_last_lines() -> None:
    text = "line1\n\nline2\nline3\n"
    assert pu.tail(text, lines=2) == "line2\nline3"
    assert pu.tail("") == ""
    assert pu.tail(None) == ""


@pytest.mark.skipif(shutil.which("sh") is None, reason="needs a POSIX shell")
def test_run_tool_tolerates_non_utf8_output(tmp_path: Path) -> None:
    """Latin-1 bytes echoed by FFmpeg (e.g. a file name) must not raise."""
    tool = tmp_path / "fake-ffmpeg"
    tool.write_bytes(b"#!/bin/sh\nprintf \"Input #0, mov, from '\\351t\\351.mp4'\\n\" >&2\nexit 0\n")
    tool.chmod(0o755)

    res = pu.run_tool([tool])

    assert res.returncode == 0
    assert "Input #0, mov, from '" in res.stderr
    assert "\ufffd" in res.stderr


@pytest.mark.skipif(shutil.which("sh") is None, reason="needs a POSIX shell")
def test_run_tool_non_utf8_merged_output(tmp_path: Path) -> None:
    tool = tmp_path / "fake-ffprobe"
    tool.write_bytes(b"#!/bin/sh\nprintf '1920x1080\\n'\nprintf '\\351\\n' >&2\n")
    tool.chmod(0o755)

    res = pu.run_tool([tool], merge_stderr=True)

    assert res.stdout.startswith("1920x1080")
