"""HTTP controller layer for conference booking."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from backend.controllers.dependencies import get_app_settings, get_record_store, get_room_allocator
from backend.domain.constraints import ConferenceValidationError, validate_conference
from backend.domain.models import Conference
from backend.repository.record_store import RecordStore
from backend.services.allocation_service import CapacityExhaustedError, RoomAllocator
from backend.utils.config import Settings
from backend.utils.logger import get_logger


logger = get_logger(__name__)

router = APIRouter(tags=["booking"])


class BookConferenceRequest(BaseModel):
    """Input DTO; field rules are checked against the app settings in the endpoint."""

    name: str = Field(min_length=1)
    anchor: str
    time: str
    date: str


class BookConferenceResponse(BaseModel):
    slot_id: str
    persisted: bool
    slots_left: int = Field(ge=0)
    slots_booked: int = Field(ge=0)


class BookingRow(BaseModel):
    name: str
    anchor: str
    time: str
    date: str
    slot_id: str


class BookedListResponse(BaseModel):
    bookings: list[BookingRow]
    slots_left: int = Field(ge=0)
    slots_booked: int = Field(ge=0)


class HistoryResponse(BaseModel):
    records: list[BookingRow]


@router.post(
    "/book",
    response_model=BookConferenceResponse,
    status_code=status.HTTP_201_CREATED,
)
async def book_conference(
    payload: BookConferenceRequest,
    allocator: RoomAllocator = Depends(get_room_allocator),
    settings: Settings = Depends(get_app_settings),
) -> BookConferenceResponse:
    """Assign the next room slot and append the booking to the log."""
    conference = Conference(
        name=payload.name,
        anchor=payload.anchor,
        time=payload.time,
        date=payload.date,
    )
    try:
        validate_conference(conference, settings=settings)
    except ConferenceValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    try:
        slot_id = allocator.book(conference)
    except CapacityExhaustedError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(exc),
        ) from exc
    return BookConferenceResponse(
        slot_id=str(slot_id),
        persisted=slot_id not in allocator.unpersisted_slot_ids,
        slots_left=allocator.slots_left,
        slots_booked=allocator.slots_booked,
    )


@router.get(
    "/bookings",
    response_model=BookedListResponse,
    status_code=status.HTTP_200_OK,
)
async def list_bookings(
    allocator: RoomAllocator = Depends(get_room_allocator),
) -> BookedListResponse:
    """Bookings made in this process, in booking order."""
    summary = allocator.list_booked()
    return BookedListResponse(
        bookings=[
            BookingRow(
                name=booking.conference.name,
                anchor=booking.conference.anchor,
                time=booking.conference.time,
                date=booking.conference.date,
                slot_id=str(booking.slot_id),
            )
            for booking in summary.bookings
        ],
        slots_left=summary.slots_left,
        slots_booked=summary.slots_booked,
    )


@router.get(
    "/history",
    response_model=HistoryResponse,
    status_code=status.HTTP_200_OK,
)
async def booking_history(
    record_store: RecordStore = Depends(get_record_store),
) -> HistoryResponse:
    """Replay every booking ever written to the log."""
    return HistoryResponse(
        records=[
            BookingRow(
                name=record.name,
                anchor=record.anchor,
                time=record.time,
                date=record.date,
                slot_id=record.slot_id,
            )
            for record in record_store.replay_all()
        ]
    )
