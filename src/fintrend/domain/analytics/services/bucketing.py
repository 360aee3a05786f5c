"""Time bucketing.

Pure functions mapping instants to period buckets and enumerating the buckets
of a date range. Bucket keys sort lexicographically in chronological order:

- day:   ``2024-03-15``
- week:  ``2024-W11`` (ISO week; the year is the ISO week-numbering year)
- month: ``2024-03``
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from datetime import date, datetime, timedelta

from fintrend.domain.analytics.value_objects import DateRange, PeriodGranularity
from fintrend.domain.shared.exceptions import (
    InvalidBucketKeyError,
    UnknownGranularityError,
)

_DAY_KEY = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_WEEK_KEY = re.compile(r"^(\d{4})-W(\d{2})$")
_MONTH_KEY = re.compile(r"^(\d{4})-(\d{2})$")


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def _next_month(day: date) -> date:
    if day.month == 12:
        return date(day.year + 1, 1, 1)
    return date(day.year, day.month + 1, 1)


def bucket_key(value: date | datetime, granularity: PeriodGranularity | str) -> str:
    """Return the bucket key containing ``value``.

    >>> bucket_key(date(2024, 3, 15), "week")
    '2024-W11'
    """
    granularity = PeriodGranularity.parse(granularity)
    day = _as_date(value)

    if granularity is PeriodGranularity.DAY:
        return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"
    if granularity is PeriodGranularity.WEEK:
        iso_year, iso_week, _ = day.isocalendar()
        return f"{iso_year:04d}-W{iso_week:02d}"
    if granularity is PeriodGranularity.MONTH:
        return f"{day.year:04d}-{day.month:02d}"
    raise UnknownGranularityError(granularity)


def bucket_start(value: date | datetime, granularity: PeriodGranularity | str) -> date:
    """Return the first day of the bucket containing ``value``.

    Weeks start on Monday.
    """
    granularity = PeriodGranularity.parse(granularity)
    day = _as_date(value)

    if granularity is PeriodGranularity.DAY:
        return day
    if granularity is PeriodGranularity.WEEK:
        return day - timedelta(days=day.weekday())
    if granularity is PeriodGranularity.MONTH:
        return day.replace(day=1)
    raise UnknownGranularityError(granularity)


def parse_bucket_key(bucket: str, granularity: PeriodGranularity | str) -> date:
    """Parse a bucket key back to the first day of its bucket.

    Raises
    ------
    InvalidBucketKeyError
        If ``bucket`` is not a well-formed key of ``granularity``
    """
    granularity = PeriodGranularity.parse(granularity)

    if granularity is PeriodGranularity.DAY:
        match = _DAY_KEY.match(bucket)
    elif granularity is PeriodGranularity.WEEK:
        match = _WEEK_KEY.match(bucket)
    elif granularity is PeriodGranularity.MONTH:
        match = _MONTH_KEY.match(bucket)
    else:
        raise UnknownGranularityError(granularity)

    if not match:
        raise InvalidBucketKeyError(bucket, granularity.value)

    parts = [int(part) for part in match.groups()]
    try:
        if granularity is PeriodGranularity.DAY:
            return date(*parts)
        if granularity is PeriodGranularity.WEEK:
            return date.fromisocalendar(parts[0], parts[1], 1)
        return date(parts[0], parts[1], 1)
    except ValueError as e:
        raise InvalidBucketKeyError(bucket, granularity.value) from e


def iter_bucket_starts(
    date_range: DateRange,
    granularity: PeriodGranularity | str,
) -> Iterator[date]:
    """Yield the first day of every bucket overlapping ``date_range``.

    Each call returns a fresh iterator. Runs in time proportional to the
    number of buckets.
    """
    granularity = PeriodGranularity.parse(granularity)
    last_day = _as_date(date_range.end)
    current = bucket_start(date_range.start, granularity)

    if granularity is PeriodGranularity.DAY:
        step = timedelta(days=1)
        while current <= last_day:
            yield current
            current += step
    elif granularity is PeriodGranularity.WEEK:
        step = timedelta(weeks=1)
        while current <= last_day:
            yield current
            current += step
    elif granularity is PeriodGranularity.MONTH:
        while current <= last_day:
            yield current
            current = _next_month(current)
    else:
        raise UnknownGranularityError(granularity)


def generate_buckets(
    date_range: DateRange,
    granularity: PeriodGranularity | str,
) -> list[str]:
    """Return every bucket key overlapping ``date_range``, oldest first.

    >>> from datetime import datetime
    >>> r = DateRange(datetime(2024, 1, 1), datetime(2024, 3, 31))
    >>> generate_buckets(r, "month")
    ['2024-01', '2024-02', '2024-03']
    """
    granularity = PeriodGranularity.parse(granularity)
    return [
        bucket_key(start, granularity)
        for start in iter_bucket_starts(date_range, granularity)
    ]
