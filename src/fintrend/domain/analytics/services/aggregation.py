"""Aggregation of raw dated amounts into period buckets.

Used to turn individual transactions into the sparse per-bucket facts the gap
filler consumes. Items with an unreadable date are skipped and logged rather
than failing the whole aggregation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Protocol

from fintrend.domain.analytics.services.bucketing import bucket_key
from fintrend.domain.analytics.value_objects import PeriodGranularity, SeriesPoint
from fintrend.domain.shared.amounts import ZERO, AmountLike, to_decimal

logger = logging.getLogger(__name__)


class Aggregatable(Protocol):
    """Anything with a booking instant and an amount."""

    @property
    def occurred_at(self) -> datetime | date | str: ...

    @property
    def amount(self) -> AmountLike: ...


@dataclass(frozen=True)
class PeriodAggregate:
    """Total and item count of one bucket."""

    bucket: str
    total: Decimal
    count: int


@dataclass(frozen=True)
class GroupedAggregate:
    """Totals of one bucket split by group key (e.g. category id)."""

    bucket: str
    groups: dict[str, Decimal] = field(default_factory=dict)

    def to_series_point(self) -> SeriesPoint:
        return SeriesPoint(bucket=self.bucket, values=dict(self.groups))


def _parse_occurred_at(value: datetime | date | str) -> date | None:
    if isinstance(value, (datetime, date)):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


def _bucketed(
    items: Iterable[Aggregatable],
    granularity: PeriodGranularity,
) -> Iterable[tuple[str, Aggregatable]]:
    for item in items:
        occurred_at = _parse_occurred_at(item.occurred_at)
        if occurred_at is None:
            logger.warning("Skipping item with invalid date: %r", item.occurred_at)
            continue
        yield bucket_key(occurred_at, granularity), item


def aggregate_by_period(
    items: Iterable[Aggregatable],
    granularity: PeriodGranularity | str,
) -> list[PeriodAggregate]:
    """Sum amounts per bucket.

    >>> from types import SimpleNamespace as Item
    >>> aggregate_by_period([Item(occurred_at="2024-03-01", amount=100)], "day")
    [PeriodAggregate(bucket='2024-03-01', total=Decimal('100'), count=1)]
    """
    granularity = PeriodGranularity.parse(granularity)
    totals: dict[str, Decimal] = {}
    counts: dict[str, int] = {}

    for bucket, item in _bucketed(items, granularity):
        totals[bucket] = totals.get(bucket, ZERO) + to_decimal(item.amount)
        counts[bucket] = counts.get(bucket, 0) + 1

    return [
        PeriodAggregate(bucket=bucket, total=totals[bucket], count=counts[bucket])
        for bucket in sorted(totals)
    ]


def aggregate_by_period_and_group(
    items: Iterable[Aggregatable],
    granularity: PeriodGranularity | str,
    group_key: Callable[[Aggregatable], str],
) -> list[GroupedAggregate]:
    """Sum amounts per bucket and per ``group_key(item)``.

    Buckets are sorted; groups keep first-appearance order within a bucket.
    """
    granularity = PeriodGranularity.parse(granularity)
    buckets: dict[str, dict[str, Decimal]] = {}

    for bucket, item in _bucketed(items, granularity):
        groups = buckets.setdefault(bucket, {})
        key = group_key(item)
        groups[key] = groups.get(key, ZERO) + to_decimal(item.amount)

    return [
        GroupedAggregate(bucket=bucket, groups=buckets[bucket])
        for bucket in sorted(buckets)
    ]
