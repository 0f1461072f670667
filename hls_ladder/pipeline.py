"""RU: Оркестрация прогона: проверка источника, каталог вывода, кодирование.

EN: Run orchestration: source gate, output layout, rendition encoding.
"""

from __future__ import annotations

import logging
from pathlib import Path

from hls_ladder.config import LadderConfig
from hls_ladder.stages.encode_stage import RENDITIONS, Rendition, encode_all
from hls_ladder.stages.layout_stage import ensure_output_dir
from hls_ladder.stages.probe_stage import check_source

LOG = logging.getLogger(__name__)


def run_pipeline(
    config: LadderConfig, renditions: tuple[Rendition, ...] = RENDITIONS,
) -> list[Path]:
    """Gate the source, prepare the output root and encode every rendition.

    Any :class:`~hls_ladder.errors.LadderError` propagates unchanged; output
    written before the failure is left in place.
    """
    resolution = check_source(config.input_path, ffprobe=config.ffprobe)

    if ensure_output_dir(config.output_dir):
        LOG.info("created output directory %s", config.output_dir)

    playlists = encode_all(config, renditions)
    LOG.info(
        "[done] %d variants from %s (%s) in %s",
        len(playlists),
        config.input_path,
        resolution,
        config.output_dir,
    )
    return playlists
