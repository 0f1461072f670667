"""RU: Кодирование HLS-вариантов через FFmpeg.

Варианты кодируются строго по очереди; первая ошибка останавливает весь
прогон, уже готовые варианты остаются на диске.

EN: HLS rendition encoding with FFmpeg.

Renditions are encoded strictly one after another; the first failure stops
the whole run and renditions already produced stay on disk.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Final

from tqdm import tqdm

from hls_ladder.errors import DirectoryError, EncodeError
from hls_ladder.utils.process_utils import run_tool, tail

if TYPE_CHECKING:
    from hls_ladder.config import LadderConfig

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rendition:
    """A named output variant and the size it is scaled to."""

    name: str
    scale: str


@dataclass(frozen=True)
class EncodeProfile:
    """FFmpeg settings shared by every rendition."""

    audio_codec: str = "aac"
    audio_bitrate: str = "192k"
    video_codec: str = "h264"
    video_bitrate: str = "2M"
    hls_time: int = 10
    hls_list_size: int = 6
    hls_flags: str = "delete_segments"


RENDITIONS: Final[tuple[Rendition, ...]] = (
    Rendition("1080p", "1920x1080"),
    Rendition("720p", "1280x720"),
    Rendition("480p", "854x480"),
)

DEFAULT_PROFILE: Final = EncodeProfile()


def variant_playlist_path(output_dir: Path, rendition: Rendition) -> Path:
    return output_dir / rendition.name / f"variant_{rendition.name}.m3u8"


def build_encode_cmd(
    input_path: Path,
    playlist_path: Path,
    rendition: Rendition,
    *,
    ffmpeg: str = "ffmpeg",
    profile: EncodeProfile = DEFAULT_PROFILE,
    overwrite: bool = True,
) -> list[str]:
    """Build the FFmpeg call for one rendition's sliding-window playlist."""

    cmd = [ffmpeg]
    if overwrite:
        cmd.append("-y")
    cmd += [
        "-i",
        str(input_path),
        "-vf",
        f"scale={rendition.scale}",
        "-c:a",
        profile.audio_codec,
        "-b:a",
        profile.audio_bitrate,
        "-c:v",
        profile.video_codec,
        "-b:v",
        profile.video_bitrate,
        "-hls_time",
        str(profile.hls_time),
        "-hls_list_size",
        str(profile.hls_list_size),
        "-hls_flags",
        profile.hls_flags,
        str(playlist_path),
    ]
    return cmd


def encode_rendition(config: LadderConfig, rendition: Rendition) -> Path:
    """Encode ``rendition`` and return the path of its playlist."""

    playlist = variant_playlist_path(config.output_dir, rendition)
    # The HLS muxer does not create missing directories.
    try:
        playlist.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        msg = f"error creating directory for variant {rendition.name}: {exc}"
        raise DirectoryError(msg) from exc

    cmd = build_encode_cmd(
        config.input_path,
        playlist,
        rendition,
        ffmpeg=config.ffmpeg,
        overwrite=config.overwrite,
    )
    LOG.debug("encode %s: %s", rendition.name, " ".join(cmd))
    try:
        res = run_tool(cmd)
    except OSError as exc:
        raise EncodeError(rendition.name, None, str(exc)) from exc

    if res.returncode != 0:
        raise EncodeError(rendition.name, res.returncode, tail(res.stderr, lines=1))
    return playlist


def encode_all(
    config: LadderConfig, renditions: Sequence[Rendition] = RENDITIONS,
) -> list[Path]:
    """Encode every rendition in order, stopping at the first failure."""

    it: Iterable[Rendition] = renditions
    if config.progress and not config.quiet:
        it = tqdm(renditions, total=len(renditions), desc="hls")

    playlists: list[Path] = []
    for rendition in it:
        LOG.info("[encode] %s (%s)", rendition.name, rendition.scale)
        try:
            playlists.append(encode_rendition(config, rendition))
        except (DirectoryError, EncodeError):
            LOG.error("[encode] %s failed; skipping remaining variants", rendition.name)
            raise
    return playlists
