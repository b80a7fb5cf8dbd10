"""Runtime settings resolved from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class Settings:
    app_name: str
    app_version: str
    log_level: str
    record_path: Path
    max_slots: int
    slot_prefix: str
    log_path: Optional[Path] = None
    anchor_regex: str = r"^[a-zA-Z ]+$"
    time_regex: str = r"^(0[1-9]|1[0-2]):[0-5][0-9] (AM|PM)$"
    date_regex: str = r"^(0[1-9]|[12][0-9]|3[01])/(0[1-9]|1[0-2])/(19|20)\d\d$"
    date_format: str = "%d/%m/%Y"


def _env_int(name: str, default: int) -> int:
    raw_value = os.getenv(name)
    if raw_value is None or not raw_value.strip():
        return default
    try:
        return int(raw_value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw_value!r}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build settings once per process; call ``cache_clear`` to reload."""
    return Settings(
        app_name=os.getenv("APP_NAME", "Conference Room Booking"),
        app_version=os.getenv("APP_VERSION", "1.0.0"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        record_path=Path(os.getenv("BOOKING_RECORD_PATH", "data/conferences.csv")),
        max_slots=_env_int("BOOKING_MAX_SLOTS", 15),
        slot_prefix=os.getenv("BOOKING_SLOT_PREFIX", "C"),
        log_path=Path(os.environ["LOG_PATH"]) if os.getenv("LOG_PATH") else None,
    )
