"""Analytics queries for the dashboard."""

from fintrend.application.queries.analytics.balance_trend_query import (
    BalanceTrendQuery,
)
from fintrend.application.queries.analytics.category_breakdown_query import (
    CategoryBreakdownQuery,
)
from fintrend.application.queries.analytics.category_trend_query import (
    CategoryTrendQuery,
)
from fintrend.application.queries.analytics.dashboard_insights_query import (
    DashboardInsightsQuery,
)
from fintrend.application.queries.analytics.kpi_summary_query import (
    KpiSummaryQuery,
)

__all__ = [
    "BalanceTrendQuery",
    "CategoryBreakdownQuery",
    "CategoryTrendQuery",
    "DashboardInsightsQuery",
    "KpiSummaryQuery",
]
