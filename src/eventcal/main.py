# src/eventcal/main.py
"""
Command line entrypoint: `eventcal event.yaml` or `eventcal < event.json`

Reads one extracted event record (YAML or JSON), prints the text summary
and the calendar link, and writes a standalone .ics when --out is given.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

import yaml

from .artifacts import build_calendar_artifacts
from .config import ConfigError, Settings, load_settings, parse_targets
from .icsbuild import build_ics_document
from .models import CalendarTarget
from .normalize import normalize_event, normalize_record

log = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _settings_from_args(args: argparse.Namespace) -> Settings:
    settings = load_settings(args.config)
    if args.tz:
        settings = replace(settings, timezone=args.tz)
        settings.zone()
    if args.targets:
        settings = replace(settings, targets=[t.value for t in parse_targets(args.targets)])
    if args.log_level:
        settings = replace(settings, log_level=args.log_level)
    return settings


def _read_payload(path: Optional[Path]) -> dict:
    text = path.read_text(encoding="utf-8") if path else sys.stdin.read()
    payload = yaml.safe_load(text) or {}
    if not isinstance(payload, dict):
        raise ValueError("event record must be a mapping")
    # YAML turns unquoted 2025-12-16 into a date; the pipeline wants text
    for k in ("start", "end"):
        v = payload.get(k)
        if hasattr(v, "isoformat"):
            payload[k] = v.isoformat()
    return payload


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="eventcal",
        description="Turn an extracted event record into a calendar link and an .ics file.",
    )
    ap.add_argument("input", nargs="?", type=Path, help="YAML/JSON event record (default: stdin).")
    ap.add_argument("--config", type=Path, default=Path("eventcal.yaml"), help="Optional YAML settings.")
    ap.add_argument("--targets", help="Comma-separated: google, ics.")
    ap.add_argument("--tz", help="Zone for times without an offset (default: machine zone).")
    ap.add_argument("--out", type=Path, help="Write a full .ics calendar here.")
    ap.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR.")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = _settings_from_args(args)
    except ConfigError as e:
        print(f"config error: {e}", file=sys.stderr)
        return 2
    setup_logging(settings.log_level)

    try:
        payload = _read_payload(args.input)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"cannot read event record: {e}", file=sys.stderr)
        return 2

    zone = settings.zone()
    targets = settings.calendar_targets()
    event = normalize_event(normalize_record(payload), placeholder_title=settings.placeholder_title)
    result = build_calendar_artifacts(event, targets, tz=zone, settings=settings)

    print(result.event_text)
    if result.calendar_url:
        print()
        print(result.calendar_url)

    if result.ics:
        if args.out:
            doc = build_ics_document(event, zone, default_duration=settings.default_duration)
            args.out.parent.mkdir(parents=True, exist_ok=True)
            args.out.write_text(doc, encoding="utf-8", newline="")
            print(f"\nWrote .ics -> {args.out}")
        else:
            print()
            print(result.ics, end="")
    elif args.out and CalendarTarget.ICS in targets:
        log.warning("nothing written to %s", args.out)

    for err in result.errors:
        print(err, file=sys.stderr)
    return 1 if result.errors else 0


if __name__ == "__main__":
    raise SystemExit(main())
