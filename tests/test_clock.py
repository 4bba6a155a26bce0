"""Tests for the session clock and overdue policy."""

from datetime import date

import pytest

from taskmaster.core.clock import Clock


@pytest.fixture
def clock():
    return Clock(today=date(2025, 10, 15))


class TestIsOverdue:
    def test_past_date_is_overdue(self, clock):
        assert clock.is_overdue("14.10.2025") is True

    def test_today_is_not_overdue(self, clock):
        assert clock.is_overdue("15.10.2025") is False

    def test_future_is_not_overdue(self, clock):
        assert clock.is_overdue("16.10.2025") is False

    def test_previous_year(self, clock):
        assert clock.is_overdue("31.12.2024") is True

    def test_unparseable_is_not_overdue(self, clock):
        assert clock.is_overdue("not a date") is False
        assert clock.is_overdue("") is False


class TestClock:
    def test_from_text(self):
        assert Clock.from_text("15.10.2025").today == date(2025, 10, 15)

    def test_from_text_invalid(self):
        with pytest.raises(ValueError):
            Clock.from_text("15/10/2025")

    def test_start_uses_today(self):
        assert Clock.start().today == date.today()

    def test_format(self, clock):
        assert clock.format(date(2025, 1, 5)) == "05.01.2025"

    def test_is_frozen(self, clock):
        with pytest.raises(AttributeError):
            clock.today = date(2030, 1, 1)
