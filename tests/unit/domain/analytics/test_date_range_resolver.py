"""Unit tests for date range preset resolution."""

from datetime import datetime, timedelta, timezone

import pytest

from fintrend.domain.analytics.services import (
    describe_date_range,
    previous_period,
    resolve_date_range,
)
from fintrend.domain.analytics.value_objects import DateRange, DateRangePreset
from fintrend.domain.shared.exceptions import (
    InvalidDateRangeError,
    UnknownPresetError,
)

NOW = datetime(2024, 3, 15, 10, 30)  # Friday


def _end(year, month, day):
    return datetime(year, month, day, 23, 59, 59, 999999)


class TestResolveDateRange:
    """Each preset resolves to an inclusive, day-aligned window."""

    @pytest.mark.parametrize(
        ("preset", "start", "end"),
        [
            (DateRangePreset.LAST_WEEK, datetime(2024, 3, 4), _end(2024, 3, 10)),
            (DateRangePreset.THIS_MONTH, datetime(2024, 3, 1), _end(2024, 3, 31)),
            (DateRangePreset.LAST_MONTH, datetime(2024, 2, 1), _end(2024, 2, 29)),
            (DateRangePreset.LAST_3_MONTHS, datetime(2023, 12, 1), _end(2024, 3, 31)),
            (DateRangePreset.LAST_6_MONTHS, datetime(2023, 9, 1), _end(2024, 3, 31)),
            (DateRangePreset.THIS_YEAR, datetime(2024, 1, 1), _end(2024, 12, 31)),
            (DateRangePreset.LAST_YEAR, datetime(2023, 1, 1), _end(2023, 12, 31)),
            (DateRangePreset.ALL, datetime(2014, 3, 15), _end(2024, 3, 15)),
        ],
    )
    def test_presets(self, preset, start, end):
        assert resolve_date_range(preset, NOW) == DateRange(start, end)

    def test_last_month_in_non_leap_year(self):
        result = resolve_date_range("last_month", datetime(2023, 3, 15))
        assert result.end == _end(2023, 2, 28)

    @pytest.mark.parametrize(("year", "last_day"), [(2024, 29), (2023, 28)])
    def test_this_month_in_february(self, year, last_day):
        result = resolve_date_range("this_month", datetime(year, 2, 15))
        assert result == DateRange(datetime(year, 2, 1), _end(year, 2, last_day))

    def test_last_month_crosses_year_boundary(self):
        result = resolve_date_range("last_month", datetime(2024, 1, 10))
        assert result == DateRange(datetime(2023, 12, 1), _end(2023, 12, 31))

    def test_all_time_from_leap_day_clamps(self):
        result = resolve_date_range("all", datetime(2024, 2, 29, 12))
        assert result.start == datetime(2014, 2, 28)

    def test_keeps_timezone(self):
        now = datetime(2024, 3, 15, 10, 30, tzinfo=timezone.utc)
        result = resolve_date_range("this_month", now)
        assert result.start.tzinfo is timezone.utc
        assert result.end.tzinfo is timezone.utc

    def test_deterministic_for_same_now(self):
        first = resolve_date_range("last_6_months", NOW)
        second = resolve_date_range("last_6_months", NOW)
        assert first == second

    def test_accepts_legacy_camel_case(self):
        assert resolve_date_range("allTime", NOW) == resolve_date_range("all", NOW)
        assert resolve_date_range("last3Months", NOW) == resolve_date_range(
            DateRangePreset.LAST_3_MONTHS,
            NOW,
        )

    def test_unknown_preset_raises(self):
        with pytest.raises(UnknownPresetError):
            resolve_date_range("fortnight", NOW)


class TestDescribeDateRange:
    def test_last_week_label(self):
        now = datetime(2024, 1, 15)
        assert describe_date_range("last_week", now) == "Last week (Jan 8 - Jan 14)"

    def test_this_month_label(self):
        assert describe_date_range("this_month", NOW) == "This month (Mar 1 - Mar 31)"


class TestPreviousPeriod:
    def test_same_length_ending_before_start(self):
        current = DateRange(datetime(2024, 3, 1), _end(2024, 3, 31))
        previous = previous_period(current)

        assert previous.end == _end(2024, 2, 29)
        assert previous.start == datetime(2024, 1, 30)
        assert previous.duration == current.duration

    def test_no_overlap(self):
        current = DateRange(datetime(2024, 3, 1), datetime(2024, 3, 8))
        previous = previous_period(current)
        assert previous.end < current.start
        assert current.start - previous.end == timedelta(microseconds=1)


class TestDateRange:
    def test_rejects_start_after_end(self):
        with pytest.raises(InvalidDateRangeError):
            DateRange(datetime(2024, 2, 1), datetime(2024, 1, 1))

    def test_single_instant_is_valid(self):
        moment = datetime(2024, 1, 1)
        assert DateRange(moment, moment).duration == timedelta(0)

    def test_contains_is_inclusive(self):
        window = DateRange(datetime(2024, 1, 1), datetime(2024, 1, 31))
        assert window.contains(datetime(2024, 1, 1))
        assert window.contains(datetime(2024, 1, 31))
        assert not window.contains(datetime(2024, 2, 1))
