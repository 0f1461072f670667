"""RU: CLI-точка входа: -input/-output, справка и коды выхода.

EN: CLI entrypoint: -input/-output, usage text and exit codes.
"""

from __future__ import annotations

import argparse
import sys

from hls_ladder.config import build_config, load_settings
from hls_ladder.errors import ConfigError, LadderError
from hls_ladder.pipeline import run_pipeline
from hls_ladder.utils.logging_utils import logging_session


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        usage="%(prog)s -input <input_file> -output <output_directory>",
        description="Encode a 1080p+ video into 1080p/720p/480p HLS variants.",
    )
    parser.add_argument(
        "-input", "--input", dest="input", default="", help="Path to video file",
    )
    parser.add_argument(
        "-output",
        "--output",
        dest="output",
        default="",
        help="Path to output directory",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint; returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Missing arguments are not an error: show usage and stop.
    if not args.input or not args.output:
        parser.print_help(sys.stdout)
        return 0

    try:
        settings = load_settings()
    except ConfigError as exc:
        with logging_session() as log:
            log.error("Error: %s", exc)
        return 1

    config = build_config(args.input, args.output, settings)
    with logging_session(config.log_file, verbose=config.verbose, quiet=config.quiet) as log:
        try:
            run_pipeline(config)
        except LadderError as exc:
            log.error("Error: %s", exc)
            log.debug("failure detail", exc_info=True)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
