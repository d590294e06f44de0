# src/eventcal/normalize.py
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .models import NormalizedEvent, RawEventRecord
from .splitter import split_event_range

log = logging.getLogger(__name__)

PLACEHOLDER_TITLE = "(untitled event)"

# extractor payloads use camelCase; the python side uses snake_case
_FIELD_ALIASES = {
    "title": "title",
    "start": "start",
    "end": "end",
    "allDay": "all_day",
    "all_day": "all_day",
    "location": "location",
    "description": "description",
}


def clean_text(s: Any) -> Optional[str]:
    """Trim a text field. Non-strings and blank strings become None."""
    if not isinstance(s, str):
        return None
    s = s.strip()
    return s or None


def normalize_record(data: Optional[Mapping[str, Any]]) -> RawEventRecord:
    """Build a RawEventRecord from a loosely typed mapping; unknown keys are dropped."""
    fields = {}
    for key, value in (data or {}).items():
        name = _FIELD_ALIASES.get(key)
        if name and name not in fields:
            fields[name] = value
    return RawEventRecord(**fields)


def normalize_event(
    record: RawEventRecord,
    *,
    placeholder_title: str = PLACEHOLDER_TITLE,
) -> NormalizedEvent:
    """Trim and default every field, then repair a range packed into start.

    Cannot fail: whatever the extractor sent, the result has a non-empty
    title and a (possibly empty) start string.
    """
    title = clean_text(record.title) or placeholder_title
    raw_start = clean_text(record.start) or ""
    raw_end = clean_text(record.end)
    # only a real boolean True counts; 1 and "true" do not
    raw_all_day = True if record.all_day is True else None

    start, end, all_day = split_event_range(raw_start, raw_end, raw_all_day)
    if (start, end) != (raw_start, raw_end):
        log.debug("split start %r into %r / %r", raw_start, start, end)

    return NormalizedEvent(
        title=title,
        start=start,
        end=end,
        all_day=all_day,
        location=clean_text(record.location),
        description=clean_text(record.description),
    )
