# src/eventcal/date_range.py
from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Optional

from .dates import local_tz, localize, parse_time_only, parse_when
from .models import AllDayRange, DateRange, ParsedWhen, TimedRange

log = logging.getLogger(__name__)

DEFAULT_DURATION = timedelta(hours=1)
ONE_DAY = timedelta(days=1)


def _calendar_date(parsed: ParsedWhen) -> date:
    # date as written, in the offset it was written in
    if parsed.is_date_only:
        return parsed.value
    return parsed.value.date()


def _instant(parsed: ParsedWhen, zone: tzinfo) -> datetime:
    if parsed.is_date_only:
        return localize(datetime.combine(parsed.value, time(0, 0)), zone)
    return parsed.value


def _all_day_range(start: ParsedWhen, end: Optional[ParsedWhen]) -> AllDayRange:
    start_date = _calendar_date(start)
    if end is None:
        return AllDayRange(start_date, start_date + ONE_DAY)
    # a provided end date is the last day included
    end_exclusive = _calendar_date(end) + ONE_DAY
    if end_exclusive <= start_date:
        log.info("all-day end %s precedes start %s; using a single day", end_exclusive, start_date)
        end_exclusive = start_date + ONE_DAY
    return AllDayRange(start_date, end_exclusive)


def _timed_range(
    start: ParsedWhen,
    end: Optional[ParsedWhen],
    zone: tzinfo,
    default_duration: timedelta,
) -> TimedRange:
    start_dt = _instant(start, zone).astimezone(timezone.utc)
    end_dt = _instant(end, zone).astimezone(timezone.utc) if end else None
    if end_dt is None or end_dt <= start_dt:
        if end_dt is not None:
            log.info("end %s is not after start %s; applying default duration", end_dt, start_dt)
        end_dt = start_dt + default_duration
    return TimedRange(start_dt, end_dt)


def compute_event_date_range(
    start: Optional[str],
    end: Optional[str],
    all_day: Optional[bool] = None,
    tz: Optional[tzinfo] = None,
    default_duration: timedelta = DEFAULT_DURATION,
) -> Optional[DateRange]:
    """Resolve (start, end, all_day) text into an AllDayRange or TimedRange.

    Returns None when start cannot be parsed, or when the range would run
    past the first or last representable day. An end that cannot be parsed
    is dropped; a timed range then gets `default_duration`.
    """
    zone = tz or local_tz()

    parsed_start = parse_when(start, zone)
    if parsed_start is None:
        log.debug("unparseable start %r", start)
        return None

    parsed_end = parse_when(end, zone) if end else None
    if end and parsed_end is None:
        if parse_time_only(end):
            # a bare clock time that the splitter did not produce; do not guess its date
            log.warning("end %r has no date; ignoring it for start %r", end, start)
        else:
            log.warning("unparseable end %r; ignoring it", end)

    try:
        if all_day is True or (
            all_day is None
            and parsed_start.is_date_only
            and (parsed_end is None or parsed_end.is_date_only)
        ):
            return _all_day_range(parsed_start, parsed_end)
        return _timed_range(parsed_start, parsed_end, zone, default_duration)
    except OverflowError:
        log.warning("range for start %r end %r is out of the calendar range", start, end)
        return None
