"""Append-only booking log backed by a flat comma-separated file.

Each booking is one line ``name,anchor,time,date,slot_id``. Fields are written
as-is without quoting, so a comma inside any field shifts the remaining fields
of that record when it is read back. The format is kept unescaped so existing
log files stay readable.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional

from backend.domain.models import BookingRecord, Conference, SlotId
from backend.utils.config import Settings, get_settings
from backend.utils.logger import get_logger


logger = get_logger(__name__)

FIELD_SEPARATOR = ","
RECORD_FIELD_COUNT = 5


class RecordStoreError(Exception):
    """Base failure of the booking log."""


class RecordStoreUnwritableError(RecordStoreError):
    """Raised when the booking log cannot be opened or written."""


def format_record(conference: Conference, slot_id: SlotId) -> str:
    fields = (
        conference.name,
        conference.anchor,
        conference.time,
        conference.date,
        str(slot_id),
    )
    return FIELD_SEPARATOR.join(fields) + "\n"


def parse_record(line: str) -> BookingRecord:
    """Split one log line, padding missing fields with empty strings."""
    fields = line.rstrip("\r\n").split(FIELD_SEPARATOR)[:RECORD_FIELD_COUNT]
    fields.extend([""] * (RECORD_FIELD_COUNT - len(fields)))
    name, anchor, time_value, date_value, slot_id = fields
    return BookingRecord(
        name=name,
        anchor=anchor,
        time=time_value,
        date=date_value,
        slot_id=slot_id,
    )


class RecordStore:
    """Sole writer of the booking log; every call opens and closes the file."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        self._record_path = Path(self._settings.record_path)

    @property
    def record_path(self) -> Path:
        return self._record_path

    def append(self, conference: Conference, slot_id: SlotId) -> None:
        line = format_record(conference, slot_id)
        try:
            self._record_path.parent.mkdir(parents=True, exist_ok=True)
            with self._record_path.open("a", encoding="utf-8", newline="") as handle:
                handle.write(line)
        except OSError as exc:
            raise RecordStoreUnwritableError(
                f"Unable to open {self._record_path} for writing: {exc}"
            ) from exc
        logger.debug("Booking appended | path=%s | slot_id=%s", self._record_path, slot_id)

    def replay_all(self) -> Iterator[BookingRecord]:
        """Yield every logged booking from the start of the file.

        A missing or unreadable log is treated as an empty history. Bytes that
        are not valid UTF-8 are replaced with U+FFFD instead of aborting.
        """
        try:
            handle = self._record_path.open(
                "r",
                encoding="utf-8",
                errors="replace",
                newline="",
            )
        except OSError as exc:
            logger.warning(
                "Booking history unavailable | path=%s | error=%s",
                self._record_path,
                exc,
            )
            return
        with handle:
            for line in handle:
                yield parse_record(line)
