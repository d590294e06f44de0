# src/eventcal/splitter.py
"""
Repair for the extractor's habit of packing a whole range into `start`,
e.g. start="2025-12-16 14:00〜15:00" with no end.

The rules are data: SPLIT_RULES is tried in order and the first pattern
that matches decides where the text is cut. Add a SplitRule to teach the
splitter a new separator.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .dates import date_prefix, parse_date_only, parse_date_time, parse_time_only, parse_when

log = logging.getLogger(__name__)

RangeTriple = Tuple[str, Optional[str], Optional[bool]]


@dataclass(frozen=True)
class SplitRule:
    name: str
    pattern: re.Pattern     # must define groups "left" and "right"

    def split(self, text: str) -> Optional[Tuple[str, str]]:
        m = self.pattern.match(text)
        if not m:
            return None
        return m.group("left").strip(), m.group("right").strip()


_CLOCK = r"\d{1,2}:\d{2}(?::\d{2})?"

SPLIT_RULES: Tuple[SplitRule, ...] = (
    SplitRule("wave", re.compile(r"^(?P<left>.*?)\s*[〜~–—]\s*(?P<right>.*?)$")),
    SplitRule("spaced-hyphen", re.compile(r"^(?P<left>.*?)\s+-\s+(?P<right>.*?)$")),
    SplitRule("time-dash", re.compile(rf"^(?P<left>.+{_CLOCK})\s*-\s*(?P<right>{_CLOCK})$")),
)


def split_text_range(
    text: str, rules: Sequence[SplitRule] = SPLIT_RULES
) -> Optional[Tuple[str, str]]:
    """Cut `text` at the first separator any rule recognises; None if none do."""
    normalized = (text or "").strip()
    if not normalized:
        return None
    for rule in rules:
        parts = rule.split(normalized)
        if parts:
            log.debug("split rule %s matched %r", rule.name, normalized)
            return parts
    return None


def split_event_range(
    start: str,
    end: Optional[str],
    all_day: Optional[bool],
    rules: Sequence[SplitRule] = SPLIT_RULES,
) -> RangeTriple:
    """Return a possibly revised (start, end, all_day).

    A no-op when an end is already present or start is empty. When the
    right-hand side of a split cannot be used, the original start is kept
    whole and end stays None.
    """
    if end or not start:
        return start, end, all_day
    # "2025-12-16T14:00:00-05:00" already is one value; its offset is not a range
    if parse_when(start) is not None:
        return start, end, all_day

    parts = split_text_range(start, rules)
    if not parts:
        return start, end, all_day

    left, right = parts

    # "2025-12-16〜2025-12-17"
    if parse_date_only(left) and parse_date_only(right):
        return left, right, (True if all_day is None else all_day)

    # "2025-12-16 14:00〜15:00": the end borrows the start's date
    prefix = date_prefix(left)
    if prefix and parse_time_only(right):
        return left, f"{prefix} {right}", all_day

    if parse_date_time(right):
        return left, right, all_day

    log.debug("discarding split of %r: %r is not a usable end", start, right)
    return start, None, all_day
