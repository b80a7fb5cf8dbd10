"""
app.py — FastAPI application factory.

This is the ASGI application object imported by uvicorn. It wires the record
store and room allocator onto app.state and registers the booking router.

Usage:
    python app.py
    uvicorn app:app --reload
"""

from __future__ import annotations

from typing import Optional

import uvicorn
from fastapi import FastAPI

from backend.controllers.booking_controller import router as booking_router
from backend.repository.record_store import RecordStore
from backend.services.allocation_service import RoomAllocator
from backend.utils.config import Settings, get_settings
from backend.utils.logger import get_logger


logger = get_logger(__name__)

HOST = "127.0.0.1"
PORT = 8000

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build and wire the FastAPI application.

    The allocator keeps bookings in memory, so one allocator lives for the
    lifetime of the app object.
    """
    settings = settings or get_settings()

    record_store = RecordStore(settings)
    room_allocator = RoomAllocator(record_store=record_store, settings=settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
    )
    app.include_router(booking_router)

    app.state.settings = settings
    app.state.record_store = record_store
    app.state.room_allocator = room_allocator

    logger.info(
        "Booking API ready | record_path=%s | max_slots=%s",
        record_store.record_path,
        room_allocator.max_slots,
    )
    return app


# Module-level app object for uvicorn
app = create_app()


def serve() -> None:
    """Run the booking API with uvicorn."""
    uvicorn.run(
        "app:app",
        host=HOST,
        port=PORT,
        log_level="info",
    )


if __name__ == "__main__":
    serve()
