"""Shared fixtures for the eventcal tests."""
import os
from datetime import timedelta, timezone

import pytest

from eventcal.models import NormalizedEvent

JST = timezone(timedelta(hours=9))


@pytest.fixture
def jst():
    """Fixed +09:00 zone so results never depend on the machine running the tests."""
    return JST


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("EVENTCAL_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def make_event():
    def _make(start, end=None, all_day=None, title="Design review",
              location=None, description=None):
        return NormalizedEvent(
            title=title,
            start=start,
            end=end,
            all_day=all_day,
            location=location,
            description=description,
        )
    return _make
