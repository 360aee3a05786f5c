"""Category trend query (spending or income by category over time)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fintrend.application.dtos.analytics import CategoryTrendResult, TrendKind
from fintrend.application.ports.analytics import FinanceReadPort
from fintrend.domain.analytics.services import (
    category_periods_to_series,
    extract_and_rank,
    fill_category_periods,
    limit_categories,
)
from fintrend.domain.analytics.value_objects import DateRange, PeriodGranularity
from fintrend.domain.shared.amounts import decimal_sum
from fintrend_config import Settings, get_settings

if TYPE_CHECKING:
    from fintrend.application.factories import QueryFactory

logger = logging.getLogger(__name__)


class CategoryTrendQuery:
    """Top categories per bucket, the rest grouped as "Other", zero-filled."""

    def __init__(
        self,
        finance_read_port: FinanceReadPort,
        settings: Settings | None = None,
    ):
        self._finance = finance_read_port
        self._settings = settings or get_settings()

    @classmethod
    def from_factory(cls, factory: QueryFactory) -> CategoryTrendQuery:
        return cls(finance_read_port=factory.finance_read_port())

    async def execute(
        self,
        kind: TrendKind | str,
        date_range: DateRange,
        granularity: PeriodGranularity | str,
        limit: int | None = None,
    ) -> CategoryTrendResult:
        kind = TrendKind(kind)
        granularity = PeriodGranularity.parse(granularity)
        if limit is None:
            limit = self._settings.trend_category_limit

        if kind is TrendKind.SPENDING:
            facts = await self._finance.spending_trend(
                date_range=date_range,
                granularity=granularity,
            )
        else:
            facts = await self._finance.income_trend(
                date_range=date_range,
                granularity=granularity,
            )

        limited = limit_categories(facts, limit)
        filled = fill_category_periods(limited, date_range, granularity)
        categories = extract_and_rank(limited)
        logger.debug(
            "%s trend: %d facts, %d buckets, %d categories (limit %d)",
            kind.value,
            len(facts),
            len(filled),
            len(categories),
            limit,
        )

        return CategoryTrendResult(
            data_points=category_periods_to_series(filled),
            categories=categories,
            total=decimal_sum(item.total for item in filled),
        )
