"""RU: Утилиты настройки логирования.

EN: Logging setup utilities.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Final

import coloredlogs

DEFAULT_LOGGER_NAME: Final = "hls_ladder"
DEFAULT_LOG_FILE: Final = "logs.txt"
LOG_FILE_MODE: Final = 0o644
LOG_FORMAT: Final = "%(asctime)s %(levelname)s %(message)s"


def _resolve_level(*, verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.INFO


def open_log_file(path: str | Path) -> logging.FileHandler:
    """Open ``path`` for appending and wrap it in a handler.

    The file is created with mode 0644 when it does not exist yet;
    an existing file keeps its permissions and content.
    """
    path = Path(path)
    fd = os.open(path, os.O_CREAT | os.O_WRONLY | os.O_APPEND, LOG_FILE_MODE)
    os.close(fd)
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def setup_logging(*, verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """RU: Настраивает консольное логирование c учётом флагов.

    EN: Configure console logging according to verbosity flags.
    """
    level = _resolve_level(verbose=verbose, quiet=quiet)

    logger = logging.getLogger(DEFAULT_LOGGER_NAME)
    logger.setLevel(level)

    # RU: Избегаем двойных handlers при повторном вызове.
    # EN: Avoid double handlers if called multiple times.
    if logger.handlers:
        return logger

    coloredlogs.install(level=level, logger=logger, fmt=LOG_FORMAT, stream=sys.stdout)
    return logger


@contextmanager
def logging_session(
    log_file: str | Path | None = DEFAULT_LOG_FILE,
    *,
    verbose: bool = False,
    quiet: bool = False,
) -> Iterator[logging.Logger]:
    """Log to stdout and to an append-only file for the duration of a run.

    Handlers installed here are removed and closed on exit, so nothing leaks
    into the next run (or the next test).
    """
    logger = setup_logging(verbose=verbose, quiet=quiet)
    file_handler: logging.FileHandler | None = None

    if log_file is not None:
        try:
            file_handler = open_log_file(log_file)
        except OSError as exc:
            # Keep going with console output only.
            print(f"Error opening log file: {exc}")
        else:
            file_handler.setLevel(logger.level)
            logger.addHandler(file_handler)

    try:
        yield logger
    finally:
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()
