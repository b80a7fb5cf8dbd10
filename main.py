"""
main.py — Interactive console entry point.

Run this file to book conferences from the terminal:

    python main.py

Bookings are appended to the record file named by BOOKING_RECORD_PATH
(default data/conferences.csv). For the HTTP API see app.py.
"""

from __future__ import annotations

from backend.controllers.console import ConsoleSession
from backend.repository.record_store import RecordStore
from backend.services.allocation_service import RoomAllocator
from backend.utils.config import get_settings


def main() -> None:
    """Start a console booking session."""
    settings = get_settings()
    record_store = RecordStore(settings)
    allocator = RoomAllocator(record_store=record_store, settings=settings)

    print("=" * 60)
    print(f"  {settings.app_name}")
    print("=" * 60)
    print(f"  Records : {record_store.record_path}")
    print(f"  Slots   : {allocator.max_slots}")
    print("=" * 60)

    ConsoleSession(allocator=allocator, record_store=record_store, settings=settings).run()


if __name__ == "__main__":
    main()
