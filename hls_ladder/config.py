"""RU: Конфигурация прогона HLS-лестницы.

EN: Run configuration for the HLS ladder.

Command-line values (input file, output directory) are merged with an optional
YAML settings file and frozen into a single :class:`LadderConfig` that is
passed explicitly to every stage.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

import yaml

from hls_ladder.errors import ConfigError
from hls_ladder.utils.logging_utils import DEFAULT_LOG_FILE

ENV_CONFIG_PATH: Final = "HLS_LADDER_CONFIG"
DEFAULT_CONFIG_PATH: Final = "hls_ladder.yaml"


@dataclass(frozen=True)
class LadderConfig:
    """Everything a single run needs, fixed at startup."""

    input_path: Path
    output_dir: Path
    ffprobe: str = "ffprobe"
    ffmpeg: str = "ffmpeg"
    log_file: Path | None = Path(DEFAULT_LOG_FILE)
    overwrite: bool = True
    quiet: bool = False
    verbose: bool = False
    progress: bool = False


def default_config_path() -> Path:
    return Path(os.environ.get(ENV_CONFIG_PATH) or DEFAULT_CONFIG_PATH)


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """Read the YAML settings file, or return ``{}`` when it does not exist."""
    config_path = path if path is not None else default_config_path()
    if not config_path.exists():
        return {}

    try:
        with config_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        msg = f"Error loading settings file {config_path}: {exc}"
        raise ConfigError(msg) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Settings file {config_path} must contain a mapping"
        raise ConfigError(msg)
    return data


def _section(conf: dict[str, Any], key: str) -> dict[str, Any]:
    value = conf.get(key) or {}
    if not isinstance(value, dict):
        msg = f"Settings section '{key}' must be a mapping"
        raise ConfigError(msg)
    return value


def build_config(
    input_path: str | Path,
    output_dir: str | Path,
    settings: dict[str, Any] | None = None,
) -> LadderConfig:
    """Freeze CLI values and settings into a :class:`LadderConfig`."""
    conf = settings or {}
    tools = _section(conf, "tools")
    encoder = _section(conf, "encoder")
    cli_conf = _section(conf, "cli")

    log_file: Path | None = Path(DEFAULT_LOG_FILE)
    if "log_file" in conf:
        log_file = Path(conf["log_file"]) if conf["log_file"] else None

    return LadderConfig(
        input_path=Path(input_path),
        output_dir=Path(output_dir),
        ffprobe=str(tools.get("ffprobe") or "ffprobe"),
        ffmpeg=str(tools.get("ffmpeg") or "ffmpeg"),
        log_file=log_file,
        overwrite=bool(encoder.get("overwrite", True)),
        quiet=bool(cli_conf.get("quiet", False)),
        verbose=bool(cli_conf.get("verbose", False)),
        progress=bool(cli_conf.get("progress", False)),
    )
