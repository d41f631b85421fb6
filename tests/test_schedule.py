"""Tests for the curriculum focus schedule."""

from datetime import date

import pytest

from soccer_curriculum_mcp.schedule import (
    get_current_focus,
    get_december_week,
    is_date_in_range,
)


class TestDecemberWeeks:

    @pytest.mark.parametrize("day,week", [(1, 1), (7, 1), (8, 2), (14, 2), (15, 3), (21, 3), (22, 4), (31, 4)])
    def test_week_boundaries(self, day, week):
        assert get_december_week(day) == week


class TestDateRange:

    def test_inclusive_bounds(self):
        assert is_date_in_range(date(2025, 2, 14), (1, 1), (2, 14))
        assert is_date_in_range(date(2025, 1, 1), (1, 1), (2, 14))
        assert not is_date_in_range(date(2025, 2, 15), (1, 1), (2, 14))

    def test_wrap_around_new_year(self):
        assert is_date_in_range(date(2025, 12, 28), (12, 20), (1, 10))
        assert is_date_in_range(date(2026, 1, 5), (12, 20), (1, 10))
        assert not is_date_in_range(date(2026, 1, 11), (12, 20), (1, 10))


class TestCurrentFocus:
    """Test the focus shown for a given date."""

    @pytest.mark.parametrize("when,focus,period", [
        (date(2025, 1, 10), "BUILD-OUT", "build-out"),
        (date(2025, 2, 15), "FINAL THIRD", "final-third"),
        (date(2025, 5, 15), "MIDDLE THIRD", "middle-third"),
        (date(2025, 6, 30), "WIDE PLAY", "wide-play"),
        (date(2025, 7, 4), "11V11 FORMATIONS", None),
        (date(2025, 9, 1), "SET PIECES", None),
        (date(2025, 10, 20), "FINAL THIRD", "final-third"),
        (date(2025, 11, 20), "WIDE PLAY", "wide-play"),
    ])
    def test_schedule(self, when, focus, period):
        result = get_current_focus(when)
        assert result.focus == focus
        assert result.period == period

    def test_december_is_week_based(self):
        assert get_current_focus(date(2025, 12, 3)).focus == "BUILD-OUT"
        assert get_current_focus(date(2025, 12, 10)).focus == "FINAL THIRD"
        assert get_current_focus(date(2025, 12, 18)).focus == "MIDDLE THIRD"
        assert get_current_focus(date(2025, 12, 31)).focus == "WIDE PLAY"

    def test_related_terms(self):
        result = get_current_focus(date(2025, 4, 2))
        assert result.related_terms == ["Middle Third", "Turning", "Passing", "Transition"]

    def test_related_terms_are_copies(self):
        get_current_focus(date(2025, 1, 2)).related_terms.append("Extra")
        assert "Extra" not in get_current_focus(date(2025, 1, 3)).related_terms

    def test_defaults_to_today(self):
        assert get_current_focus().focus
