"""RU: Подготовка каталога вывода.

EN: Output directory preparation.
"""

from __future__ import annotations

import logging
import stat
from pathlib import Path
from typing import Final

from hls_ladder.errors import DirectoryError

LOG = logging.getLogger(__name__)

OUTPUT_DIR_MODE: Final = 0o755


def ensure_output_dir(path: Path) -> bool:
    """Create ``path`` (and parents) unless something already exists there.

    Returns True when the directory was created. Existing content is never
    touched. An existing non-directory is left alone as well; FFmpeg will
    fail on it later.
    """
    try:
        st = path.stat()
    except FileNotFoundError:
        pass
    except OSError as exc:
        msg = f"error checking output directory: {exc}"
        raise DirectoryError(msg) from exc
    else:
        if not stat.S_ISDIR(st.st_mode):
            LOG.warning("output path exists but is not a directory: %s", path)
        return False

    try:
        path.mkdir(mode=OUTPUT_DIR_MODE, parents=True, exist_ok=True)
    except OSError as exc:
        msg = f"error creating output directory: {exc}"
        raise DirectoryError(msg) from exc
    LOG.debug("created output directory %s", path)
    return True
