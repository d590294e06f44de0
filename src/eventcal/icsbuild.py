# src/eventcal/icsbuild.py
from __future__ import annotations

import hashlib
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional

from icalendar import Calendar, Event as ICalEvent

from .date_range import DEFAULT_DURATION, compute_event_date_range
from .models import AllDayRange, DateRange, NormalizedEvent
from .normalize import PLACEHOLDER_TITLE, clean_text

PRODID = "-//eventcal//Calendar Artifacts//EN"


def make_uid(event: NormalizedEvent) -> str:
    base = f"{event.title}|{event.start}|{event.end or ''}"
    return hashlib.sha1(base.encode("utf-8")).hexdigest() + "@eventcal"


def _to_ical_event(event: NormalizedEvent, rng: DateRange) -> ICalEvent:
    ie = ICalEvent()
    ie.add("summary", clean_text(event.title) or PLACEHOLDER_TITLE)
    if isinstance(rng, AllDayRange):
        # date values render as DTSTART;VALUE=DATE:YYYYMMDD
        ie.add("dtstart", rng.start_date)
        ie.add("dtend", rng.end_date_exclusive)
    else:
        ie.add("dtstart", rng.start_utc)
        ie.add("dtend", rng.end_utc)
    location = clean_text(event.location)
    if location:
        ie.add("location", location)
    description = clean_text(event.description)
    if description:
        ie.add("description", description)
    return ie


def _resolve(event: NormalizedEvent, tz: Optional[tzinfo], default_duration: timedelta):
    return compute_event_date_range(
        event.start, event.end, event.all_day, tz=tz, default_duration=default_duration
    )


def build_ics(
    event: NormalizedEvent,
    tz: Optional[tzinfo] = None,
    *,
    default_duration: timedelta = DEFAULT_DURATION,
) -> Optional[str]:
    """Single VEVENT block (CRLF lines, folded and escaped), or None if the dates do not resolve.

    The fragment carries no UID/DTSTAMP; wrap it with build_ics_document
    before writing a standalone .ics file.
    """
    rng = _resolve(event, tz, default_duration)
    if rng is None:
        return None
    return _to_ical_event(event, rng).to_ical().decode("utf-8")


def build_ics_document(
    event: NormalizedEvent,
    tz: Optional[tzinfo] = None,
    *,
    now: Optional[datetime] = None,
    default_duration: timedelta = DEFAULT_DURATION,
) -> Optional[str]:
    """Full VCALENDAR with one event, ready to be saved as .ics."""
    rng = _resolve(event, tz, default_duration)
    if rng is None:
        return None

    cal = Calendar()
    cal.add("prodid", PRODID)
    cal.add("version", "2.0")

    ie = _to_ical_event(event, rng)
    ie.add("uid", make_uid(event))
    ie.add("dtstamp", (now or datetime.now(timezone.utc)).astimezone(timezone.utc))
    cal.add_component(ie)
    return cal.to_ical().decode("utf-8")
