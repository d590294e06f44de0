# src/eventcal/dates.py
"""
Lenient parsing of the date/time strings the extractor produces.

Accepted shapes, tried in order:
  "2025-12-16T14:00:00+09:00"   ISO-8601 (offset, Z, or none)
  "2025-12-16 14:00+09:00"      ISO-8601 with a space, only with Z or a "+" offset
  "2025-12-16 14:00"            date + time, local time, no offset
  "2025/12/16 9:30"             same, slash form
  "2025年12月16日 14:00"         same, Japanese date form
  "2025-12-16", "2025/12/16", "2025年12月16日"   date only

Anything else parses to None; malformed input is the normal case here.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Optional

from dateutil import parser as duparser
from dateutil import tz as dtz

from .models import ParsedWhen

log = logging.getLogger(__name__)

__all__ = [
    "local_tz",
    "localize",
    "parse_when",
    "parse_date_only",
    "parse_date_time",
    "parse_time_only",
    "date_prefix",
]

# -- Patterns -----------------------------------------------------------------

_DATE = (
    r"(?:(?P<y>\d{4})(?P<sep>[-/])(?P<m>\d{1,2})(?P=sep)(?P<d>\d{1,2})"
    r"|(?P<jy>\d{4})年\s*(?P<jm>\d{1,2})月\s*(?P<jd>\d{1,2})日)"
)
_TIME = r"(?P<hh>\d{1,2}):(?P<mm>\d{2})(?::(?P<ss>\d{2}))?"

_DATE_ONLY_RE = re.compile(rf"^{_DATE}$")
_DATE_TIME_RE = re.compile(rf"^{_DATE}(?:\s*T\s*|\s+|(?<=日)){_TIME}$")
_TIME_ONLY_RE = re.compile(rf"^{_TIME}$")
_DATE_PREFIX_RE = re.compile(rf"^(?P<prefix>{_DATE})(?:\s+|T|(?<=日)(?=\d))")

# Offsets are only honoured on strict ISO-8601 ("T" separator); in
# "2025-12-16 14:00-15:00" the "-15:00" is the end of a range, not an offset.
# Guarding also keeps isoparse from turning "2025" or "2025-12" into a datetime.
_ISO_HEAD_RE = re.compile(r"^\d{4}-?\d{2}-?\d{2}T\d{2}")
# a space works too when the value ends in Z or a "+" offset
_ISO_SPACE_RE = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|\+\d{2}:?\d{2})$")
_MAX_OFFSET = timedelta(hours=14)


# -- Helpers ------------------------------------------------------------------

def local_tz(name: Optional[str] = None) -> tzinfo:
    """Zone for offset-less input: the named zone, else the machine zone."""
    if name:
        zone = dtz.gettz(name)
        if zone is None:
            raise ValueError(f"Unknown time zone: {name!r}")
        return zone
    return dtz.tzlocal()


def _clean(text: object) -> str:
    if not isinstance(text, str):
        return ""
    return text.strip()


def _date_from_match(m: re.Match) -> Optional[date]:
    if m.group("y"):
        y, mo, d = m.group("y"), m.group("m"), m.group("d")
    else:
        y, mo, d = m.group("jy"), m.group("jm"), m.group("jd")
    try:
        return date(int(y), int(mo), int(d))
    except ValueError:
        return None


def _time_from_match(m: re.Match) -> Optional[time]:
    try:
        return time(int(m.group("hh")), int(m.group("mm")), int(m.group("ss") or 0))
    except ValueError:
        return None


def localize(dt: datetime, zone: tzinfo) -> datetime:
    """Attach `zone` to a naive wall-clock time.

    Times inside a DST gap are shifted forward. Raises OverflowError for
    wall-clock times that have no UTC equivalent (year 1 or 9999 edges).
    """
    if dt.tzinfo is not None:
        return dt
    return dtz.resolve_imaginary(dt.replace(tzinfo=zone))


def _parse_iso(text: str, zone: tzinfo) -> Optional[datetime]:
    if not (_ISO_HEAD_RE.match(text) or _ISO_SPACE_RE.match(text)):
        return None
    try:
        dt = duparser.isoparse(text)
        offset = dt.utcoffset()
        if offset is not None and abs(offset) > _MAX_OFFSET:
            return None
        return localize(dt, zone)
    except (ValueError, OverflowError):
        return None


# -- Public API ---------------------------------------------------------------

def parse_time_only(text: object) -> Optional[time]:
    """Parse a bare "H:MM[:SS]" clock time. Only meaningful to the splitter."""
    m = _TIME_ONLY_RE.match(_clean(text))
    if not m:
        return None
    return _time_from_match(m)


def date_prefix(text: object) -> Optional[str]:
    """Return the leading date of a date-time string, e.g. "2025-12-16"."""
    m = _DATE_PREFIX_RE.match(_clean(text))
    if not m:
        return None
    if _date_from_match(m) is None:
        return None
    return m.group("prefix")


def parse_when(text: object, tz: Optional[tzinfo] = None) -> Optional[ParsedWhen]:
    """Parse one extractor field into a date-only or date-time value, or None."""
    t = _clean(text)
    if not t:
        return None

    m = _DATE_ONLY_RE.match(t)
    if m:
        d = _date_from_match(m)
        return ParsedWhen("date", d) if d else None

    zone = tz or local_tz()

    dt = _parse_iso(t, zone)
    if dt is not None:
        return ParsedWhen("datetime", dt)

    m = _DATE_TIME_RE.match(t)
    if m:
        d = _date_from_match(m)
        hm = _time_from_match(m)
        if d is None or hm is None:
            return None
        try:
            return ParsedWhen("datetime", localize(datetime.combine(d, hm), zone))
        except OverflowError:
            log.debug("%r has no UTC equivalent", t)
            return None

    log.debug("no date shape matched %r", t)
    return None


def parse_date_only(text: object) -> Optional[date]:
    parsed = parse_when(text)
    if parsed is None or not parsed.is_date_only:
        return None
    return parsed.value


def parse_date_time(text: object, tz: Optional[tzinfo] = None) -> Optional[datetime]:
    parsed = parse_when(text, tz)
    if parsed is None or parsed.is_date_only:
        return None
    return parsed.value
