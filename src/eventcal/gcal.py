# src/eventcal/gcal.py
from __future__ import annotations

from datetime import timedelta, tzinfo
from typing import Optional
from urllib.parse import urlencode

from .date_range import DEFAULT_DURATION, compute_event_date_range
from .models import AllDayRange, DateRange, NormalizedEvent
from .normalize import PLACEHOLDER_TITLE, clean_text

GOOGLE_CALENDAR_URL = "https://calendar.google.com/calendar/render"


def _basic_date(d) -> str:
    # strftime("%Y") does not pad years below 1000 on every platform
    return f"{d.year:04d}{d.month:02d}{d.day:02d}"


def _basic_utc(dt) -> str:
    return f"{_basic_date(dt)}T{dt.hour:02d}{dt.minute:02d}{dt.second:02d}Z"


def format_calendar_dates(rng: DateRange) -> str:
    """`dates` value: 20251216/20251217 or 20251216T050000Z/20251216T060000Z."""
    if isinstance(rng, AllDayRange):
        return f"{_basic_date(rng.start_date)}/{_basic_date(rng.end_date_exclusive)}"
    return f"{_basic_utc(rng.start_utc)}/{_basic_utc(rng.end_utc)}"


def build_calendar_url(
    event: NormalizedEvent,
    tz: Optional[tzinfo] = None,
    *,
    base_url: str = GOOGLE_CALENDAR_URL,
    default_duration: timedelta = DEFAULT_DURATION,
) -> Optional[str]:
    """Pre-filled "create event" link, or None when the dates do not resolve."""
    rng = compute_event_date_range(
        event.start, event.end, event.all_day, tz=tz, default_duration=default_duration
    )
    if rng is None:
        return None

    params = {
        "action": "TEMPLATE",
        "text": clean_text(event.title) or PLACEHOLDER_TITLE,
        "dates": format_calendar_dates(rng),
    }
    details = clean_text(event.description)
    if details:
        params["details"] = details
    location = clean_text(event.location)
    if location:
        params["location"] = location
    return f"{base_url}?{urlencode(params)}"
