"""RU: Запуск внешних ffprobe/FFmpeg.

EN: Helpers for running the external ffprobe/FFmpeg executables.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from os import PathLike


def run_tool(
    cmd: Sequence[str | PathLike[str]], *, merge_stderr: bool = False,
) -> subprocess.CompletedProcess[str]:
    """Run an external command to completion and capture its output.

    With ``merge_stderr`` the tool's stderr is folded into ``stdout``.
    Output is decoded as UTF-8; undecodable bytes (e.g. Latin-1 file names
    echoed by FFmpeg) are replaced rather than raising.
    No timeout is applied; the call blocks until the tool exits.
    """

    normalized_cmd = [str(part) for part in cmd]
    return subprocess.run(
        normalized_cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT if merge_stderr else subprocess.PIPE,
        stdin=subprocess.DEVNULL,
        text=True,
        encoding="utf-8",
        errors="replace",
        check=False,
    )


def tail(text: str | None, lines: int = 5) -> str:
    """Return the last ``lines`` non-empty lines of tool output."""
    if not text:
        return ""
    kept = [ln for ln in text.strip().splitlines() if ln.strip()]
    return "\n".join(kept[-lines:])
