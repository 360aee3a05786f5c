"""Unit tests for aggregation of dated amounts into buckets."""

import logging
from datetime import datetime
from decimal import Decimal
from types import SimpleNamespace

from fintrend.domain.analytics.services import (
    PeriodAggregate,
    aggregate_by_period,
    aggregate_by_period_and_group,
    fill_series,
)
from fintrend.domain.analytics.value_objects import FillPolicy


def _item(occurred_at, amount, category="food"):
    return SimpleNamespace(occurred_at=occurred_at, amount=amount, category=category)


class TestAggregateByPeriod:
    def test_sums_and_counts_per_bucket(self):
        items = [
            _item(datetime(2024, 3, 2), Decimal("50")),
            _item("2024-03-01", 100),
            _item("2024-03-01T18:30:00", "0.5"),
        ]

        result = aggregate_by_period(items, "day")

        assert result == [
            PeriodAggregate(bucket="2024-03-01", total=Decimal("100.5"), count=2),
            PeriodAggregate(bucket="2024-03-02", total=Decimal("50"), count=1),
        ]

    def test_month_buckets_are_sorted(self):
        items = [_item("2024-02-10", 1), _item("2023-12-31", 1), _item("2024-01-15", 1)]
        result = aggregate_by_period(items, "month")
        assert [a.bucket for a in result] == ["2023-12", "2024-01", "2024-02"]

    def test_invalid_dates_are_skipped_with_warning(self, caplog):
        items = [_item("not-a-date", 10), _item("2024-03-01", 5)]

        with caplog.at_level(logging.WARNING):
            result = aggregate_by_period(items, "day")

        assert [a.total for a in result] == [Decimal("5")]
        assert "Skipping item with invalid date" in caplog.text


class TestAggregateByPeriodAndGroup:
    def test_groups_within_bucket(self):
        items = [
            _item("2024-03-01", 100, "food"),
            _item("2024-03-01", 50, "transport"),
            _item("2024-03-02", 200, "food"),
            _item("2024-03-01", 25, "food"),
        ]

        result = aggregate_by_period_and_group(
            items,
            "day",
            lambda item: item.category,
        )

        assert [(a.bucket, a.groups) for a in result] == [
            ("2024-03-01", {"food": Decimal("125"), "transport": Decimal("50")}),
            ("2024-03-02", {"food": Decimal("200")}),
        ]

    def test_feeds_gap_filler(self):
        items = [_item("2024-01-05", 10), _item("2024-03-05", 30)]
        grouped = aggregate_by_period_and_group(items, "month", lambda i: i.category)

        filled = fill_series(
            [a.to_series_point() for a in grouped],
            ["2024-01", "2024-02", "2024-03"],
            FillPolicy.ZERO_FILL,
        )

        assert [p.get("food") for p in filled] == [
            Decimal("10"),
            Decimal("0"),
            Decimal("30"),
        ]
