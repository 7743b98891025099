from __future__ import annotations

import logging
from pathlib import Path

from .errors import TextLoadError

LOGGER = logging.getLogger(__name__)


def load_text(path: str | Path, encoding: str = "utf-8") -> str:
    """
    Return the full contents of a text file.

    Bytes that do not decode under ``encoding`` become U+FFFD rather than
    failing the read.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding=encoding, errors="replace")
    except (OSError, LookupError) as exc:
        raise TextLoadError(str(exc)) from exc
    LOGGER.debug("Loaded %d characters from %s", len(text), path)
    return text
