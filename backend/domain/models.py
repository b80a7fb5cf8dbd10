"""Domain models for conference room booking."""

from __future__ import annotations

from dataclasses import dataclass, field


UNSCHEDULED = "N/A"


@dataclass(frozen=True)
class Conference:
    name: str
    anchor: str
    time: str
    date: str

    @classmethod
    def unscheduled(cls, name: str, anchor: str) -> Conference:
        """Conference whose time and date are not known yet."""
        return cls(name=name, anchor=anchor, time=UNSCHEDULED, date=UNSCHEDULED)


@dataclass(frozen=True, order=True)
class SlotId:
    """Room identifier such as ``C7``; ordering follows ``number`` only."""

    number: int
    prefix: str = field(default="C", compare=False)

    def __str__(self) -> str:
        return f"{self.prefix}{self.number}"


@dataclass(frozen=True)
class Booking:
    conference: Conference
    slot_id: SlotId


@dataclass(frozen=True)
class BookingRecord:
    """One line of the booking log, kept as raw strings."""

    name: str
    anchor: str
    time: str
    date: str
    slot_id: str


@dataclass(frozen=True)
class BookingSummary:
    bookings: tuple[Booking, ...]
    slots_left: int
    slots_booked: int
