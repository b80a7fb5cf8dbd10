"""Interactive console front end for booking conferences."""

from __future__ import annotations

from datetime import date
from typing import Callable, Iterable, Optional

from backend.domain.constraints import (
    ConferenceValidationError,
    is_conference_today,
    validate_anchor_name,
    validate_date,
    validate_name,
    validate_time,
)
from backend.domain.models import BookingRecord, Conference, SlotId
from backend.repository.record_store import RecordStore
from backend.services.allocation_service import CapacityExhaustedError, RoomAllocator
from backend.utils.config import Settings, get_settings
from backend.utils.logger import get_logger


logger = get_logger(__name__)

SEPARATOR_LINE = "-" * 22

MENU_DISPLAY_HISTORY = "1"
MENU_BOOK_ANOTHER = "2"
MENU_EXIT = "3"


class ConsoleSession:
    """Prompt, book, render, repeat until the user chooses to exit."""

    def __init__(
        self,
        allocator: RoomAllocator,
        record_store: RecordStore,
        settings: Optional[Settings] = None,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
        today_provider: Callable[[], date] = date.today,
    ) -> None:
        self._allocator = allocator
        self._record_store = record_store
        self._settings = settings or get_settings()
        self._input = input_func
        self._output = output_func
        self._today = today_provider

    def run(self) -> None:
        try:
            while True:
                conference = self._prompt_conference()
                self._book(conference)
                choice = self._prompt_menu()
                if choice == MENU_DISPLAY_HISTORY:
                    self.display_history()
                elif choice == MENU_EXIT:
                    break
        except EOFError:
            self._output("")
            logger.info("Console input closed")

        self._output("Thank you for using our Conference Room Booking System!")

    def _prompt_until_valid(self, prompt: str, validator: Callable[[str], str]) -> str:
        while True:
            value = self._input(prompt)
            try:
                return validator(value)
            except ConferenceValidationError as exc:
                self._output(f"Invalid input: {exc}")

    def _prompt_conference(self) -> Conference:
        name = self._prompt_until_valid("Enter conference name: ", validate_name)
        anchor = self._prompt_until_valid(
            "Enter anchor name: ",
            lambda value: validate_anchor_name(value, self._settings),
        )
        date_value = self._prompt_until_valid(
            "Enter date (DD/MM/YYYY): ",
            lambda value: validate_date(value, today=self._today(), settings=self._settings),
        )
        time_value = self._prompt_until_valid(
            "Enter time (HH:MM AM/PM): ",
            lambda value: validate_time(value, self._settings),
        )
        return Conference(name=name, anchor=anchor, time=time_value, date=date_value)

    def _prompt_menu(self) -> str:
        self._output("Choose an option:")
        self._output(f"{MENU_DISPLAY_HISTORY}. Display all conferences")
        self._output(f"{MENU_BOOK_ANOTHER}. Book another conference")
        self._output(f"{MENU_EXIT}. Exit")
        return self._input("Enter your choice (1/2/3): ").strip()

    def _book(self, conference: Conference) -> None:
        try:
            slot_id = self._allocator.book(conference)
        except CapacityExhaustedError as exc:
            self._output(f"Sorry, the conference could not be booked: {exc}.")
            return

        self._output(f"Thank you for booking the conference in Room {slot_id}!")
        if slot_id in self._allocator.unpersisted_slot_ids:
            self._output(
                f"Warning: booking {slot_id} could not be saved to "
                f"{self._record_store.record_path}."
            )
        self.display_booked()
        self._display_details(conference, slot_id)
        if is_conference_today(conference, today=self._today(), settings=self._settings):
            self._output("Conference is happening today!")
        else:
            self._output("Conference is not happening today.")

    def display_booked(self) -> None:
        summary = self._allocator.list_booked()
        if not summary.bookings:
            self._output("No conferences booked in this room.")
        else:
            self._output("Conferences booked in this room:")
            for booking in summary.bookings:
                self._render_fields(
                    booking.conference.name,
                    booking.conference.anchor,
                    booking.conference.time,
                    booking.conference.date,
                    str(booking.slot_id),
                )
        self._output(f"Slots left: {summary.slots_left}")
        self._output(f"Slots booked: {summary.slots_booked}")

    def display_history(self) -> None:
        records: Iterable[BookingRecord] = self._record_store.replay_all()
        shown = 0
        for record in records:
            self._render_fields(
                record.name,
                record.anchor,
                record.time,
                record.date,
                record.slot_id,
            )
            shown += 1
        if shown == 0:
            self._output("No conferences recorded yet.")

    def _display_details(self, conference: Conference, slot_id: SlotId) -> None:
        self._output("Conference Details:")
        self._output(f"Name: {conference.name}")
        self._output(f"Anchor: {conference.anchor}")
        self._output(f"Time: {conference.time}")
        self._output(f"Date: {conference.date}")
        self._output(f"Room Number: {slot_id}")

    def _render_fields(
        self,
        name: str,
        anchor: str,
        time_value: str,
        date_value: str,
        slot_id: str,
    ) -> None:
        self._output(f"Conference Name: {name}")
        self._output(f"Anchor: {anchor}")
        self._output(f"Time: {time_value}")
        self._output(f"Date: {date_value}")
        self._output(f"Room Number: {slot_id}")
        self._output(SEPARATOR_LINE)
