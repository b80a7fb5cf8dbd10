"""Sequential room-slot allocation with best-effort persistence."""

from __future__ import annotations

from typing import Optional

from backend.domain.constraints import SlotPoolConfig, validate_slot_pool_config
from backend.domain.models import Booking, BookingSummary, Conference, SlotId
from backend.repository.record_store import RecordStore, RecordStoreError
from backend.utils.config import Settings, get_settings
from backend.utils.logger import get_logger


logger = get_logger(__name__)


class BookingError(Exception):
    """Base failure for booking requests."""


class CapacityExhaustedError(BookingError):
    """Raised when every slot in the pool has been assigned."""


class RoomAllocator:
    """Assigns slot ids in strictly increasing order and tracks bookings in memory.

    The in-memory list is authoritative for the session. A booking whose log
    append fails is kept, and its slot id is reported through
    ``unpersisted_slot_ids``.
    """

    def __init__(
        self,
        record_store: Optional[RecordStore] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._config = SlotPoolConfig(
            max_slots=self._settings.max_slots,
            slot_prefix=self._settings.slot_prefix,
        )
        validate_slot_pool_config(self._config)
        self._record_store = record_store or RecordStore(self._settings)
        self._bookings: list[Booking] = []
        self._last_slot_number = 0
        self._unpersisted: list[SlotId] = []

    @property
    def max_slots(self) -> int:
        return self._config.max_slots

    @property
    def slots_booked(self) -> int:
        return len(self._bookings)

    @property
    def slots_left(self) -> int:
        return self._config.max_slots - len(self._bookings)

    @property
    def last_slot_id(self) -> Optional[SlotId]:
        if not self._bookings:
            return None
        return self._bookings[-1].slot_id

    @property
    def unpersisted_slot_ids(self) -> tuple[SlotId, ...]:
        return tuple(self._unpersisted)

    def is_slot_booked(self, slot_id: SlotId) -> bool:
        return any(booking.slot_id == slot_id for booking in self._bookings)

    def book(self, conference: Conference) -> SlotId:
        next_number = self._last_slot_number + 1
        if next_number > self._config.max_slots:
            logger.warning(
                "Booking rejected, no slots left | conference=%s | max_slots=%s",
                conference.name,
                self._config.max_slots,
            )
            raise CapacityExhaustedError(
                f"All {self._config.max_slots} room slots are already booked"
            )

        slot_id = SlotId(number=next_number, prefix=self._config.slot_prefix)
        self._last_slot_number = next_number
        self._bookings.append(Booking(conference=conference, slot_id=slot_id))

        try:
            self._record_store.append(conference, slot_id)
        except RecordStoreError as exc:
            self._unpersisted.append(slot_id)
            logger.warning(
                "Booking kept in memory but not persisted | slot_id=%s | error=%s",
                slot_id,
                exc,
            )

        logger.info(
            "Conference booked | conference=%s | slot_id=%s | slots_left=%s",
            conference.name,
            slot_id,
            self.slots_left,
        )
        return slot_id

    def list_booked(self) -> BookingSummary:
        return BookingSummary(
            bookings=tuple(self._bookings),
            slots_left=self.slots_left,
            slots_booked=self.slots_booked,
        )
