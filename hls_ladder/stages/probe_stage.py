"""RU: Определение разрешения источника и порог минимального разрешения.

EN: Source resolution probing and the minimum-resolution gate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from hls_ladder.errors import ParseError, ProbeError, ResolutionTooLow
from hls_ladder.utils.process_utils import run_tool, tail

LOG = logging.getLogger(__name__)

MIN_WIDTH: Final = 1920
MIN_HEIGHT: Final = 1080


@dataclass(frozen=True)
class Resolution:
    """Width and height of the first video stream."""

    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


def build_probe_cmd(input_path: Path, ffprobe: str = "ffprobe") -> list[str]:
    """Build the ffprobe call that prints ``WIDTHxHEIGHT`` for stream v:0."""

    return [
        ffprobe,
        "-v",
        "error",
        "-select_streams",
        "v:0",
        "-show_entries",
        "stream=width,height",
        "-of",
        "csv=s=x:p=0",
        str(input_path),
    ]


def probe_resolution(input_path: Path, *, ffprobe: str = "ffprobe") -> str:
    """Return ffprobe's trimmed ``WIDTHxHEIGHT`` text for ``input_path``."""

    cmd = build_probe_cmd(input_path, ffprobe)
    LOG.debug("probe: %s", " ".join(cmd))
    try:
        res = run_tool(cmd, merge_stderr=True)
    except OSError as exc:
        msg = f"error running ffprobe: {exc}"
        raise ProbeError(msg) from exc

    output = (res.stdout or "").strip()
    if res.returncode != 0:
        msg = f"error running ffprobe: exit status {res.returncode}"
        detail = tail(output)
        if detail:
            msg += f": {detail}"
        raise ProbeError(msg)
    if not output:
        msg = "unable to determine resolution from ffprobe output"
        raise ProbeError(msg)
    return output


def _to_dimension(token: str) -> int:
    # int() alone also takes whitespace, "_" separators and non-ASCII digits.
    if not (token.isascii() and token.isdigit()):
        msg = f"invalid literal for int() with base 10: {token!r}"
        raise ValueError(msg)
    return int(token)


def parse_resolution(text: str) -> Resolution:
    """Parse ``"1920x1080"`` into a :class:`Resolution`.

    The text must split on ``x`` into exactly two positive integers made of
    ASCII digits only.
    """
    parts = text.split("x")
    if len(parts) != 2:
        msg = f"malformed resolution {text!r}: expected WIDTHxHEIGHT"
        raise ParseError(msg)

    dims: list[int] = []
    for part in parts:
        try:
            value = _to_dimension(part)
        except ValueError as exc:
            msg = f"Error converting resolution to integers: {exc}"
            raise ParseError(msg) from exc
        if value <= 0:
            msg = f"malformed resolution {text!r}: dimensions must be positive"
            raise ParseError(msg)
        dims.append(value)

    return Resolution(width=dims[0], height=dims[1])


def is_resolution_valid(resolution: Resolution) -> bool:
    # Both dimensions must clear Full HD on their own; no upper bound.
    return resolution.width >= MIN_WIDTH and resolution.height >= MIN_HEIGHT


def check_source(input_path: Path, *, ffprobe: str = "ffprobe") -> Resolution:
    """Probe ``input_path`` and reject it when it is below 1920x1080."""

    resolution = parse_resolution(probe_resolution(input_path, ffprobe=ffprobe))
    LOG.info("source resolution: %s", resolution)
    if not is_resolution_valid(resolution):
        raise ResolutionTooLow(resolution)
    return resolution
