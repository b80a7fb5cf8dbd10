"""Domain-level validation rules for slot pools and conference input."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from backend.domain.models import Conference
from backend.utils.config import Settings, get_settings


class ConferenceValidationError(ValueError):
    """Raised when conference input does not satisfy the booking rules."""


@dataclass(frozen=True)
class SlotPoolConfig:
    max_slots: int
    slot_prefix: str


def validate_slot_pool_config(config: SlotPoolConfig) -> None:
    if config.max_slots <= 0:
        raise ValueError("max_slots must be > 0")
    if len(config.slot_prefix) != 1 or not config.slot_prefix.isalpha():
        raise ValueError("slot_prefix must be a single letter")


def validate_name(name: str) -> str:
    if not name.strip():
        raise ConferenceValidationError("conference name must not be blank")
    # One booking per log line.
    if "\n" in name or "\r" in name:
        raise ConferenceValidationError("conference name must be a single line")
    return name


def validate_anchor_name(anchor: str, settings: Optional[Settings] = None) -> str:
    settings = settings or get_settings()
    if not re.fullmatch(settings.anchor_regex, anchor):
        raise ConferenceValidationError("anchor name may contain letters and spaces only")
    return anchor


def validate_time(time_value: str, settings: Optional[Settings] = None) -> str:
    settings = settings or get_settings()
    if not re.fullmatch(settings.time_regex, time_value):
        raise ConferenceValidationError("time must follow HH:MM AM/PM format")
    return time_value


def parse_date(date_value: str, settings: Optional[Settings] = None) -> date:
    settings = settings or get_settings()
    if not re.fullmatch(settings.date_regex, date_value):
        raise ConferenceValidationError("date must follow DD/MM/YYYY format")
    try:
        return datetime.strptime(date_value, settings.date_format).date()
    except ValueError as exc:
        raise ConferenceValidationError(f"date {date_value} does not exist") from exc


def is_past_date(
    date_value: str,
    today: Optional[date] = None,
    settings: Optional[Settings] = None,
) -> bool:
    return parse_date(date_value, settings) < (today or date.today())


def validate_date(
    date_value: str,
    today: Optional[date] = None,
    settings: Optional[Settings] = None,
) -> str:
    if is_past_date(date_value, today=today, settings=settings):
        raise ConferenceValidationError("date must not be in the past")
    return date_value


def validate_conference(
    conference: Conference,
    today: Optional[date] = None,
    settings: Optional[Settings] = None,
) -> None:
    validate_name(conference.name)
    validate_anchor_name(conference.anchor, settings)
    validate_date(conference.date, today=today, settings=settings)
    validate_time(conference.time, settings)


def is_conference_today(
    conference: Conference,
    today: Optional[date] = None,
    settings: Optional[Settings] = None,
) -> bool:
    try:
        conference_date = parse_date(conference.date, settings)
    except ConferenceValidationError:
        return False
    return conference_date == (today or date.today())
