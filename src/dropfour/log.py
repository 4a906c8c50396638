from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from dropfour.config import LOG_DIR, LOG_LEVEL

# Sinks are installed once per process; later calls are no-ops.
_configured = False


def log_dir(base: str | None = LOG_DIR) -> Path | None:
    if not base:
        return None
    path = Path(base)
    path.mkdir(parents=True, exist_ok=True)
    return path


def ensure_logging(level: str = LOG_LEVEL, directory: str | None = LOG_DIR) -> None:
    """
    Replace loguru's default stderr sink with one at `level`, and add a
    rotating file sink when a log directory is configured.
    """
    global _configured
    if _configured:
        return
    logger.remove()
    logger.add(sys.stderr, level=level)
    d = log_dir(directory)
    if d is not None:
        logger.add(d / "dropfour.log", rotation="10 MB", level="DEBUG")
    _configured = True
