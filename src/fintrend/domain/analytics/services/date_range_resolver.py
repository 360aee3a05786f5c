"""Date range resolution.

Converts a DateRangePreset plus an explicit reference instant into an
absolute, inclusive DateRange. ``now`` is always passed in; nothing here
reads the clock, so calendar-boundary behaviour is reproducible.
"""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta

from fintrend.domain.analytics.value_objects import DateRange, DateRangePreset
from fintrend.domain.shared.exceptions import UnknownPresetError

# "All time" is a fixed lookback rather than unbounded history
ALL_TIME_LOOKBACK_YEARS = 10


def _start_of_day(dt: datetime) -> datetime:
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def _end_of_day(dt: datetime) -> datetime:
    return dt.replace(hour=23, minute=59, second=59, microsecond=999999)


def _start_of_week(dt: datetime) -> datetime:
    """Monday 00:00 of the week containing ``dt``."""
    return _start_of_day(dt - timedelta(days=dt.weekday()))


def _end_of_week(dt: datetime) -> datetime:
    """Sunday 23:59:59.999999 of the week containing ``dt``."""
    return _end_of_day(dt + timedelta(days=6 - dt.weekday()))


def _shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def _start_of_month(dt: datetime, months_back: int = 0) -> datetime:
    year, month = _shift_month(dt.year, dt.month, -months_back)
    return _start_of_day(dt.replace(year=year, month=month, day=1))


def _end_of_month(dt: datetime, months_back: int = 0) -> datetime:
    year, month = _shift_month(dt.year, dt.month, -months_back)
    last_day = calendar.monthrange(year, month)[1]
    return _end_of_day(dt.replace(year=year, month=month, day=last_day))


def _start_of_year(dt: datetime, years_back: int = 0) -> datetime:
    return _start_of_day(dt.replace(year=dt.year - years_back, month=1, day=1))


def _end_of_year(dt: datetime, years_back: int = 0) -> datetime:
    return _end_of_day(dt.replace(year=dt.year - years_back, month=12, day=31))


def _sub_years(dt: datetime, years: int) -> datetime:
    """Subtract whole years, clamping Feb 29 to Feb 28."""
    year = dt.year - years
    day = min(dt.day, calendar.monthrange(year, dt.month)[1])
    return dt.replace(year=year, day=day)


def resolve_date_range(preset: DateRangePreset | str, now: datetime) -> DateRange:
    """Resolve a preset to an absolute date range.

    Parameters
    ----------
    preset
        The preset to resolve (enum member or its string value)
    now
        Reference instant; the result keeps its tzinfo

    Returns
    -------
    DateRange
        Inclusive range from 00:00:00 on the first day to 23:59:59.999999 on
        the last day.

    Raises
    ------
    UnknownPresetError
        If ``preset`` is not a DateRangePreset
    """
    preset = DateRangePreset.parse(preset)

    if preset is DateRangePreset.LAST_WEEK:
        last_week = now - timedelta(days=7)
        return DateRange(_start_of_week(last_week), _end_of_week(last_week))

    if preset is DateRangePreset.THIS_MONTH:
        return DateRange(_start_of_month(now), _end_of_month(now))

    if preset is DateRangePreset.LAST_MONTH:
        return DateRange(_start_of_month(now, 1), _end_of_month(now, 1))

    if preset is DateRangePreset.LAST_3_MONTHS:
        return DateRange(_start_of_month(now, 3), _end_of_month(now))

    if preset is DateRangePreset.LAST_6_MONTHS:
        return DateRange(_start_of_month(now, 6), _end_of_month(now))

    if preset is DateRangePreset.THIS_YEAR:
        return DateRange(_start_of_year(now), _end_of_year(now))

    if preset is DateRangePreset.LAST_YEAR:
        return DateRange(_start_of_year(now, 1), _end_of_year(now, 1))

    if preset is DateRangePreset.ALL:
        ten_years_ago = _sub_years(now, ALL_TIME_LOOKBACK_YEARS)
        return DateRange(_start_of_day(ten_years_ago), _end_of_day(now))

    # Only reachable when a member is added without a branch above
    raise UnknownPresetError(preset)


_PRESET_TITLES: dict[DateRangePreset, str] = {
    DateRangePreset.LAST_WEEK: "Last week",
    DateRangePreset.THIS_MONTH: "This month",
    DateRangePreset.LAST_MONTH: "Last month",
    DateRangePreset.LAST_3_MONTHS: "Last 3 months",
    DateRangePreset.LAST_6_MONTHS: "Last 6 months",
    DateRangePreset.THIS_YEAR: "This year",
    DateRangePreset.LAST_YEAR: "Last year",
    DateRangePreset.ALL: "All time",
}


def _short_date(dt: datetime) -> str:
    return f"{calendar.month_abbr[dt.month]} {dt.day}"


def describe_date_range(preset: DateRangePreset | str, now: datetime) -> str:
    """Human-readable description, e.g. ``"Last week (Jan 8 - Jan 14)"``."""
    preset = DateRangePreset.parse(preset)
    title = _PRESET_TITLES.get(preset)
    if title is None:
        raise UnknownPresetError(preset)

    date_range = resolve_date_range(preset, now)
    start_str = _short_date(date_range.start)
    end_str = _short_date(date_range.end)
    return f"{title} ({start_str} - {end_str})"


def previous_period(date_range: DateRange) -> DateRange:
    """Window of the same length ending just before ``date_range`` starts.

    Used as the comparison baseline for growth metrics.
    """
    previous_end = date_range.start - timedelta(microseconds=1)
    return DateRange(previous_end - date_range.duration, previous_end)
