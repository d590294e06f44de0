# src/eventcal/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, List, Optional, Union


@dataclass
class RawEventRecord:
    """Event as handed over by the extractor. Nothing here is trusted."""
    title: Optional[Any] = None
    start: Optional[Any] = None
    end: Optional[Any] = None
    all_day: Optional[Any] = None
    location: Optional[Any] = None
    description: Optional[Any] = None


@dataclass(frozen=True)
class NormalizedEvent:
    title: str                      # never empty
    start: str                      # may be "" (fails to resolve later)
    end: Optional[str] = None
    all_day: Optional[bool] = None  # True or None; False only when set explicitly
    location: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class ParsedWhen:
    kind: str                       # "date" or "datetime"
    value: Union[date, datetime]

    @property
    def is_date_only(self) -> bool:
        return self.kind == "date"


@dataclass(frozen=True)
class AllDayRange:
    start_date: date
    end_date_exclusive: date
    kind: str = "allDay"


@dataclass(frozen=True)
class TimedRange:
    start_utc: datetime
    end_utc: datetime
    kind: str = "timed"


DateRange = Union[AllDayRange, TimedRange]


class CalendarTarget(str, Enum):
    LINK = "google"
    ICS = "ics"


@dataclass
class CalendarArtifacts:
    event_text: str
    calendar_url: Optional[str] = None
    ics: Optional[str] = None
    errors: List[str] = field(default_factory=list)
