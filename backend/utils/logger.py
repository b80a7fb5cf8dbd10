"""Process-wide logging setup.

Log records go to stderr, or to ``settings.log_path`` when set, so that stdout
stays reserved for the console session's prompts and booking output.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from backend.utils.config import get_settings


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGER_INITIALIZED = False


def configure_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """Configure the root logger once per process."""

    global _LOGGER_INITIALIZED
    if _LOGGER_INITIALIZED:
        return

    settings = get_settings()
    resolved_level = (level or settings.log_level).upper()

    if settings.log_path is not None and stream is None:
        settings.log_path.parent.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(
            level=resolved_level,
            format=LOG_FORMAT,
            filename=str(settings.log_path),
            encoding="utf-8",
        )
    else:
        logging.basicConfig(
            level=resolved_level,
            format=LOG_FORMAT,
            stream=stream or sys.stderr,
        )
    _LOGGER_INITIALIZED = True


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name)
