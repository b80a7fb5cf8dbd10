"""Shared FastAPI dependency providers for controller layer."""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from backend.repository.record_store import RecordStore
from backend.services.allocation_service import RoomAllocator
from backend.utils.config import Settings, get_settings


def get_record_store(request: Request) -> RecordStore:
    store = getattr(request.app.state, "record_store", None)
    if store is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Record store is not initialized",
        )
    return store


def get_room_allocator(request: Request) -> RoomAllocator:
    allocator = getattr(request.app.state, "room_allocator", None)
    if allocator is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Room allocator is not initialized",
        )
    return allocator


def get_app_settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        settings = get_settings()
        request.app.state.settings = settings
    return settings
