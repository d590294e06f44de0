# src/eventcal/artifacts.py
from __future__ import annotations

import logging
from datetime import tzinfo
from typing import Any, Iterable, List, Mapping, Optional, Union

from .config import Settings, parse_targets
from .gcal import build_calendar_url
from .icsbuild import build_ics
from .models import CalendarArtifacts, CalendarTarget, NormalizedEvent
from .normalize import normalize_event, normalize_record

log = logging.getLogger(__name__)

TargetLike = Union[CalendarTarget, str]


def format_event_text(event: NormalizedEvent) -> str:
    """Plain-text summary; uses the fields verbatim so it works even when dates don't parse."""
    lines: List[str] = []
    lines.append(f"Title: {event.title}")
    lines.append(f"When: {event.start}{f' ~ {event.end}' if event.end else ''}")
    if event.location:
        lines.append(f"Location: {event.location}")
    if event.description:
        lines.append("")
        lines.append("Description:")
        lines.append(event.description)
    return "\n".join(lines)


def _raw_values(event: NormalizedEvent) -> str:
    return f"start: {event.start}" + (f"\nend: {event.end}" if event.end else "")


def build_calendar_url_failure_message(event: NormalizedEvent) -> str:
    return f"Could not parse the date (calendar link not created)\n{_raw_values(event)}"


def build_ics_failure_message(event: NormalizedEvent) -> str:
    return f"Could not parse the date (.ics file not created)\n{_raw_values(event)}"


def build_calendar_artifacts(
    event: NormalizedEvent,
    targets: Iterable[TargetLike],
    tz: Optional[tzinfo] = None,
    settings: Optional[Settings] = None,
) -> CalendarArtifacts:
    """Render every requested artifact; one failing never stops the other."""
    settings = settings or Settings()
    zone = tz or settings.zone()
    wanted = parse_targets(list(targets))

    result = CalendarArtifacts(event_text=format_event_text(event))

    if CalendarTarget.LINK in wanted:
        url = build_calendar_url(
            event,
            zone,
            base_url=settings.calendar_base_url,
            default_duration=settings.default_duration,
        )
        if url:
            result.calendar_url = url
        else:
            log.info("calendar link skipped for %r: start %r did not resolve", event.title, event.start)
            result.errors.append(build_calendar_url_failure_message(event))

    if CalendarTarget.ICS in wanted:
        ics = build_ics(event, zone, default_duration=settings.default_duration)
        if ics:
            result.ics = ics
        else:
            log.info(".ics skipped for %r: start %r did not resolve", event.title, event.start)
            result.errors.append(build_ics_failure_message(event))

    return result


def build_artifacts_from_record(
    data: Optional[Mapping[str, Any]],
    targets: Iterable[TargetLike],
    tz: Optional[tzinfo] = None,
    settings: Optional[Settings] = None,
) -> CalendarArtifacts:
    """Normalize an extractor payload and render it in one go."""
    settings = settings or Settings()
    event = normalize_event(normalize_record(data), placeholder_title=settings.placeholder_title)
    return build_calendar_artifacts(event, targets, tz=tz, settings=settings)
