"""Unit tests for the range splitter."""
import re

import pytest

from eventcal.splitter import SPLIT_RULES, SplitRule, split_event_range, split_text_range


class TestSplitTextRange:
    """Test cases for split_text_range."""

    @pytest.mark.parametrize("text,expected", [
        ("2025-12-16 14:00〜15:00", ("2025-12-16 14:00", "15:00")),
        ("2025-12-16 14:00 ~ 16:00", ("2025-12-16 14:00", "16:00")),
        ("2025-12-16–2025-12-18", ("2025-12-16", "2025-12-18")),
        ("2025-12-16 — 2025-12-18", ("2025-12-16", "2025-12-18")),
        ("2025-12-16 14:00 - 15:30", ("2025-12-16 14:00", "15:30")),
        ("2025-12-16 14:00-15:00", ("2025-12-16 14:00", "15:00")),
        ("2025-12-16 14:00:00-15:30:00", ("2025-12-16 14:00:00", "15:30:00")),
    ])
    def test_separators(self, text, expected):
        """Test each built-in separator."""
        assert split_text_range(text) == expected

    @pytest.mark.parametrize("text", ["2025-12-16", "2025-12-16 14:00", "", "   ", "no range here"])
    def test_no_separator(self, text):
        """Test hyphens inside dates are never treated as separators."""
        assert split_text_range(text) is None

    def test_wave_rule_wins_over_spaced_hyphen(self):
        """Test rule priority: the wave dash is tried first."""
        assert split_text_range("a - b〜c") == ("a - b", "c")

    def test_rules_are_pluggable(self):
        """Test a caller-supplied rule extends the list."""
        rules = SPLIT_RULES + (
            SplitRule("to", re.compile(r"^(?P<left>.*?)\s+to\s+(?P<right>.*?)$")),
        )

        assert split_text_range("2025-12-16 14:00 to 15:00") is None
        assert split_text_range("2025-12-16 14:00 to 15:00", rules) == ("2025-12-16 14:00", "15:00")


class TestSplitEventRange:
    """Test cases for split_event_range."""

    def test_time_only_end_borrows_start_date(self):
        """Test '14:00〜15:00' on a dated line becomes a same-day range."""
        assert split_event_range("2025-12-16 14:00〜15:00", None, None) == (
            "2025-12-16 14:00", "2025-12-16 15:00", None,
        )

    def test_time_dash_without_spaces(self):
        """Test the trailing clock-dash-clock form."""
        assert split_event_range("2025-12-16 14:00-15:00", None, None) == (
            "2025-12-16 14:00", "2025-12-16 15:00", None,
        )

    def test_japanese_date_prefix(self):
        """Test the localized date form is carried to the end."""
        assert split_event_range("2025年12月16日 14:00〜15:00", None, None) == (
            "2025年12月16日 14:00", "2025年12月16日 15:00", None,
        )

    def test_full_date_time_end(self):
        """Test an end with its own date is used as is."""
        assert split_event_range("2025-12-16 22:00 - 2025-12-17 01:00", None, True) == (
            "2025-12-16 22:00", "2025-12-17 01:00", True,
        )

    def test_date_only_range_is_all_day(self):
        """Test two dates imply an all-day range."""
        assert split_event_range("2025-12-16〜2025-12-17", None, None) == (
            "2025-12-16", "2025-12-17", True,
        )

    def test_explicit_false_is_kept(self):
        """Test an explicit all_day=False overrides inference."""
        assert split_event_range("2025-12-16〜2025-12-17", None, False) == (
            "2025-12-16", "2025-12-17", False,
        )

    def test_unusable_right_side_keeps_original_start(self):
        """Test a split whose end does not parse is discarded."""
        assert split_event_range("2025-12-16 14:00〜そのあと", None, None) == (
            "2025-12-16 14:00〜そのあと", None, None,
        )

    def test_time_only_end_without_date_prefix_is_discarded(self):
        """Test a time-only end needs a dated start."""
        assert split_event_range("14:00〜15:00", None, None) == ("14:00〜15:00", None, None)

    @pytest.mark.parametrize("start,end,all_day", [
        ("2025-12-16 14:00〜15:00", "2025-12-16 16:00", None),
        ("2025-12-16〜2025-12-17", "2025-12-20", True),
        ("anything", "else", None),
    ])
    def test_existing_end_is_untouched(self, start, end, all_day):
        """Test the splitter is a no-op when end is already present."""
        assert split_event_range(start, end, all_day) == (start, end, all_day)

    def test_empty_start_is_untouched(self):
        """Test an empty start passes through."""
        assert split_event_range("", None, None) == ("", None, None)

    def test_no_separator_is_untouched(self):
        """Test a single value passes through."""
        assert split_event_range("2025-12-16 14:00", None, None) == ("2025-12-16 14:00", None, None)

    def test_iso_offset_is_not_a_range(self):
        """Test a negative UTC offset is not read as 'time - time'."""
        start = "2025-12-16T14:00:00-05:00"

        assert split_event_range(start, None, None) == (start, None, None)
