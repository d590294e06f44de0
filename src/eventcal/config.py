# src/eventcal/config.py
"""
Settings for the CLI and for callers that want one place to keep them.

Read from an optional YAML file, then overridden by EVENTCAL_* environment
variables:

    eventcal:
      timezone: Asia/Tokyo          # omit for the machine zone
      default_duration_minutes: 60
      placeholder_title: (untitled event)
      calendar_base_url: https://calendar.google.com/calendar/render
      targets: [google, ics]
      log_level: INFO
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from datetime import timedelta, tzinfo
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .dates import local_tz
from .gcal import GOOGLE_CALENDAR_URL
from .models import CalendarTarget
from .normalize import PLACEHOLDER_TITLE

ENV_PREFIX = "EVENTCAL_"


class ConfigError(ValueError):
    pass


@dataclass
class Settings:
    timezone: Optional[str] = None
    default_duration_minutes: int = 60
    placeholder_title: str = PLACEHOLDER_TITLE
    calendar_base_url: str = GOOGLE_CALENDAR_URL
    targets: List[str] = field(default_factory=lambda: [t.value for t in CalendarTarget])
    log_level: str = "INFO"

    @property
    def default_duration(self) -> timedelta:
        return timedelta(minutes=self.default_duration_minutes)

    def zone(self) -> tzinfo:
        try:
            return local_tz(self.timezone)
        except ValueError as e:
            raise ConfigError(str(e)) from e

    def calendar_targets(self) -> List[CalendarTarget]:
        return parse_targets(self.targets)


def parse_targets(values: Any) -> List[CalendarTarget]:
    if isinstance(values, str):
        values = values.split(",")
    out: List[CalendarTarget] = []
    for v in values or []:
        if isinstance(v, CalendarTarget):
            v = v.value
        v = str(v).strip().lower()
        if not v:
            continue
        try:
            target = CalendarTarget(v)
        except ValueError:
            raise ConfigError(f"unknown target {v!r} (expected one of: google, ics)") from None
        if target not in out:
            out.append(target)
    return out


def _env_overrides(environ: Dict[str, str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for f in fields(Settings):
        raw = environ.get(ENV_PREFIX + f.name.upper())
        if raw is None or not raw.strip():
            continue
        out[f.name] = raw.strip()
    return out


def _coerce(data: Dict[str, Any]) -> Settings:
    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"unknown settings: {', '.join(unknown)}")

    if "default_duration_minutes" in data:
        try:
            minutes = int(data["default_duration_minutes"])
        except (TypeError, ValueError):
            raise ConfigError("default_duration_minutes must be an integer") from None
        if minutes <= 0:
            raise ConfigError("default_duration_minutes must be positive")
        data["default_duration_minutes"] = minutes

    if "targets" in data:
        data["targets"] = [t.value for t in parse_targets(data["targets"])]

    settings = Settings(**data)
    settings.zone()  # fail early on a bad zone name
    return settings


def load_settings(path: Optional[Path] = None, environ: Optional[Dict[str, str]] = None) -> Settings:
    data: Dict[str, Any] = {}
    if path and path.exists():
        try:
            with path.open("r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"cannot read {path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"{path}: expected a mapping at the top level")
        section = loaded.get("eventcal", loaded)
        if not isinstance(section, dict):
            raise ConfigError(f"{path}: 'eventcal' must be a mapping")
        data.update(section)

    data.update(_env_overrides(os.environ if environ is None else environ))
    return _coerce(data)
