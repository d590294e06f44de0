# src/eventcal/__init__.py
"""
Turn a loosely structured extracted event into a pre-filled calendar link
and an .ics fragment.

    from eventcal import build_artifacts_from_record
    result = build_artifacts_from_record(
        {"title": "Review", "start": "2025-12-16 14:00〜15:00"},
        ["google", "ics"],
    )
"""

from __future__ import annotations

from .artifacts import (
    build_artifacts_from_record,
    build_calendar_artifacts,
    format_event_text,
)
from .config import ConfigError, Settings, load_settings
from .date_range import compute_event_date_range
from .dates import parse_when
from .gcal import build_calendar_url
from .icsbuild import build_ics, build_ics_document
from .models import (
    AllDayRange,
    CalendarArtifacts,
    CalendarTarget,
    NormalizedEvent,
    RawEventRecord,
    TimedRange,
)
from .normalize import normalize_event, normalize_record
from .splitter import SPLIT_RULES, SplitRule, split_event_range

__all__ = [
    "AllDayRange",
    "CalendarArtifacts",
    "CalendarTarget",
    "ConfigError",
    "NormalizedEvent",
    "RawEventRecord",
    "SPLIT_RULES",
    "Settings",
    "SplitRule",
    "TimedRange",
    "build_artifacts_from_record",
    "build_calendar_artifacts",
    "build_calendar_url",
    "build_ics",
    "build_ics_document",
    "compute_event_date_range",
    "format_event_text",
    "load_settings",
    "normalize_event",
    "normalize_record",
    "parse_when",
    "split_event_range",
]
