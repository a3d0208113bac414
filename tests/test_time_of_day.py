"""Tests for the scene clock helpers."""

import pytest

from scene.time_of_day import (
    day_progress,
    format_clock,
    get_time_string,
    is_daytime,
    night_progress,
    wrap_hour,
)


class TestWrapHour:
    @pytest.mark.parametrize(
        "hour, expected",
        [(0.0, 0.0), (12.5, 12.5), (24.0, 0.0), (25.5, 1.5), (-0.25, 23.75), (-48.0, 0.0)],
    )
    def test_wraps_into_day(self, hour, expected):
        assert wrap_hour(hour) == pytest.approx(expected)

    def test_never_returns_24(self):
        assert wrap_hour(-1e-18) < 24.0


class TestDaytime:
    def test_boundaries_are_daytime(self):
        assert is_daytime(6.0)
        assert is_daytime(18.0)

    def test_just_outside_is_night(self):
        assert not is_daytime(5.99)
        assert not is_daytime(18.01)
        assert not is_daytime(0.0)

    def test_day_progress(self):
        assert day_progress(6.0) == 0.0
        assert day_progress(12.0) == pytest.approx(0.5)
        assert day_progress(18.0) == pytest.approx(1.0)

    def test_night_progress_restarts_at_midnight(self):
        """The moon crosses the sky once after dusk and again before dawn."""
        assert night_progress(18.0) == 0.0
        assert night_progress(21.0) == pytest.approx(0.5)
        assert night_progress(23.99) == pytest.approx(0.998, abs=1e-3)
        assert night_progress(0.0) == 0.0
        assert night_progress(3.0) == pytest.approx(0.5)


class TestLabels:
    def test_format_clock(self):
        assert format_clock(6.5) == "6:30"
        assert format_clock(0.0) == "0:00"
        assert format_clock(23.75) == "23:45"

    @pytest.mark.parametrize(
        "hour, label", [(2.0, "Night"), (6.0, "Dawn"), (12.0, "Day"), (18.0, "Dusk"), (22.0, "Night")]
    )
    def test_period_names(self, hour, label):
        assert get_time_string(hour) == label
