"""RU: Исключения подготовки и кодирования HLS-лестницы.

EN: Exceptions raised while preparing and encoding an HLS ladder.

Every error is terminal: the CLI logs it once and exits non-zero.
"""

from __future__ import annotations


class LadderError(RuntimeError):
    """Base error for the hls_ladder package."""


class ConfigError(LadderError):
    """Raised when the optional settings file cannot be loaded."""


class DirectoryError(LadderError):
    """Raised when an output directory cannot be checked or created."""


class ProbeError(LadderError):
    """Raised when ffprobe fails or reports nothing useful."""


class ParseError(LadderError):
    """Raised when probe output is not a ``WIDTHxHEIGHT`` token."""


class ResolutionTooLow(LadderError):
    """Raised when the source is below the minimum accepted resolution."""

    def __init__(self, resolution: object) -> None:
        super().__init__(f"Invalid resolution: {resolution}")
        self.resolution = resolution


class EncodeError(LadderError):
    """Raised when FFmpeg fails to produce a rendition."""

    def __init__(self, rendition: str, returncode: int | None, detail: str = "") -> None:
        msg = f"Error generating HLS variant {rendition}"
        if returncode is not None:
            msg += f": exit status {returncode}"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)
        self.rendition = rendition
        self.returncode = returncode
