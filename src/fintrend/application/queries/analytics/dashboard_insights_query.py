"""Dashboard insights query.

Resolves the request window once, then runs the KPI, breakdown and trend
queries concurrently. With an insight tab selected only that tab's series is
fetched; the other series come back empty.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from datetime import datetime
from typing import TYPE_CHECKING, TypeVar

from fintrend.application.dtos.analytics import (
    BalanceTrendResult,
    CategoryTrendResult,
    DashboardInsights,
    DashboardQuery,
    InsightTab,
    TrendKind,
)
from fintrend.application.queries.analytics.balance_trend_query import (
    BalanceTrendQuery,
)
from fintrend.application.queries.analytics.category_breakdown_query import (
    CategoryBreakdownQuery,
)
from fintrend.application.queries.analytics.category_trend_query import (
    CategoryTrendQuery,
)
from fintrend.application.queries.analytics.kpi_summary_query import (
    KpiSummaryQuery,
)
from fintrend.domain.analytics.services import describe_date_range
from fintrend.domain.shared.time import utc_now
from fintrend_config import Settings, get_settings

if TYPE_CHECKING:
    from fintrend.application.factories import QueryFactory

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def _resolved(value: T) -> T:
    return value


class DashboardInsightsQuery:
    """Assemble KPI cards, breakdowns and trend series for one window."""

    def __init__(  # NOQA: PLR0913
        self,
        kpi_summary_query: KpiSummaryQuery,
        category_breakdown_query: CategoryBreakdownQuery,
        category_trend_query: CategoryTrendQuery,
        balance_trend_query: BalanceTrendQuery,
        settings: Settings | None = None,
    ):
        self._kpi_summary = kpi_summary_query
        self._category_breakdown = category_breakdown_query
        self._category_trend = category_trend_query
        self._balance_trend = balance_trend_query
        self._settings = settings or get_settings()

    @classmethod
    def from_factory(cls, factory: QueryFactory) -> DashboardInsightsQuery:
        return cls(
            kpi_summary_query=KpiSummaryQuery.from_factory(factory),
            category_breakdown_query=CategoryBreakdownQuery.from_factory(factory),
            category_trend_query=CategoryTrendQuery.from_factory(factory),
            balance_trend_query=BalanceTrendQuery.from_factory(factory),
        )

    async def execute(
        self,
        query: DashboardQuery | None = None,
        now: datetime | None = None,
    ) -> DashboardInsights:
        query = query or DashboardQuery()
        now = now or utc_now()

        date_range = query.resolve_range(now, self._settings)
        granularity = query.resolve_granularity(self._settings)
        range_label = (
            describe_date_range(query.preset, now) if query.preset else None
        )
        logger.debug(
            "Dashboard insights for %s - %s by %s (tab=%s)",
            date_range.start,
            date_range.end,
            granularity.value,
            query.insight_tab.value if query.insight_tab else "all",
        )

        def wanted(tab: InsightTab) -> bool:
            return query.insight_tab is None or query.insight_tab is tab

        net_worth: Awaitable[BalanceTrendResult] = (
            self._balance_trend.execute(date_range, granularity)
            if wanted(InsightTab.NET_WORTH)
            else _resolved(BalanceTrendResult.empty())
        )
        savings: Awaitable[BalanceTrendResult] = (
            self._balance_trend.execute(date_range, granularity, savings_only=True)
            if wanted(InsightTab.SAVINGS)
            else _resolved(BalanceTrendResult.empty())
        )
        spending: Awaitable[CategoryTrendResult] = (
            self._category_trend.execute(TrendKind.SPENDING, date_range, granularity)
            if wanted(InsightTab.SPENDING)
            else _resolved(CategoryTrendResult.empty())
        )
        income: Awaitable[CategoryTrendResult] = (
            self._category_trend.execute(TrendKind.INCOME, date_range, granularity)
            if wanted(InsightTab.INCOME)
            else _resolved(CategoryTrendResult.empty())
        )

        (
            kpis,
            category_breakdown,
            net_worth_result,
            spending_result,
            income_result,
            savings_result,
        ) = await asyncio.gather(
            self._kpi_summary.execute(date_range),
            self._category_breakdown.execute(date_range),
            net_worth,
            spending,
            income,
            savings,
        )

        return DashboardInsights(
            date_range=date_range,
            granularity=granularity,
            kpis=kpis,
            category_breakdown=category_breakdown,
            net_worth=net_worth_result,
            spending=spending_result,
            income=income_result,
            savings=savings_result,
            range_label=range_label,
        )
