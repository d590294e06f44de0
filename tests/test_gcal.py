"""Unit tests for the calendar link generator."""
from datetime import date, datetime, timezone
from urllib.parse import parse_qs, urlsplit

from eventcal.gcal import GOOGLE_CALENDAR_URL, build_calendar_url, format_calendar_dates
from eventcal.models import AllDayRange, TimedRange


def _query(url):
    return parse_qs(urlsplit(url).query)


class TestFormatCalendarDates:
    """Test cases for the dates token."""

    def test_all_day_tokens(self):
        """Test all-day ranges use bare YYYYMMDD with the exclusive end."""
        rng = AllDayRange(date(2025, 12, 16), date(2025, 12, 18))

        assert format_calendar_dates(rng) == "20251216/20251218"

    def test_timed_tokens(self):
        """Test timed ranges use UTC with a Z suffix."""
        rng = TimedRange(
            datetime(2025, 12, 16, 5, 0, tzinfo=timezone.utc),
            datetime(2025, 12, 16, 6, 30, 15, tzinfo=timezone.utc),
        )

        assert format_calendar_dates(rng) == "20251216T050000Z/20251216T063015Z"

    def test_early_years_are_zero_padded(self):
        """Test years below 1000 still give eight-digit dates."""
        assert format_calendar_dates(AllDayRange(date(1, 1, 1), date(1, 1, 2))) == "00010101/00010102"
        rng = TimedRange(
            datetime(999, 3, 4, 5, 6, 7, tzinfo=timezone.utc),
            datetime(999, 3, 4, 6, 6, 7, tzinfo=timezone.utc),
        )
        assert format_calendar_dates(rng) == "09990304T050607Z/09990304T060607Z"


class TestBuildCalendarUrl:
    """Test cases for build_calendar_url."""

    def test_timed_event(self, jst, make_event):
        """Test the full query of a timed event."""
        url = build_calendar_url(
            make_event("2025-12-16 14:00", "2025-12-16 15:00", location="Room 4", description="Agenda"),
            jst,
        )

        assert url.startswith(GOOGLE_CALENDAR_URL + "?")
        assert _query(url) == {
            "action": ["TEMPLATE"],
            "text": ["Design review"],
            "dates": ["20251216T050000Z/20251216T060000Z"],
            "details": ["Agenda"],
            "location": ["Room 4"],
        }

    def test_all_day_event(self, jst, make_event):
        """Test an all-day event gets date tokens."""
        url = build_calendar_url(make_event("2025-12-16", "2025-12-17", all_day=True), jst)

        assert _query(url)["dates"] == ["20251216/20251218"]

    def test_optional_params_are_omitted(self, jst, make_event):
        """Test details and location only appear when present."""
        query = _query(build_calendar_url(make_event("2025-12-16"), jst))

        assert "details" not in query
        assert "location" not in query

    def test_title_encoding_round_trip(self, jst, make_event):
        """Test reserved and non-ASCII characters survive percent-encoding."""
        title = "Q&A = 質疑応答 + 懇親会 / 100%"
        url = build_calendar_url(make_event("2025-12-16 14:00", title=title), jst)

        assert "&A" not in url
        assert _query(url)["text"] == [title]

    def test_blank_title_gets_placeholder(self, jst, make_event):
        """Test a blank title never produces an empty text param."""
        url = build_calendar_url(make_event("2025-12-16", title="  "), jst)

        assert _query(url)["text"] == ["(untitled event)"]

    def test_unparseable_dates(self, jst, make_event):
        """Test no link is built when the dates do not resolve."""
        assert build_calendar_url(make_event("来週のいつか"), jst) is None

    def test_custom_base_url(self, jst, make_event):
        """Test another endpoint can be used."""
        url = build_calendar_url(make_event("2025-12-16"), jst, base_url="https://example.test/new")

        assert url.startswith("https://example.test/new?action=TEMPLATE")
