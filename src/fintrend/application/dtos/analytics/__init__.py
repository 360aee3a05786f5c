"""Analytics DTOs - request and result objects for dashboard charts."""

from fintrend.application.dtos.analytics.analytics_dto import (
    BalanceTrendResult,
    CategoryBreakdownResult,
    CategoryTrendResult,
    DashboardInsights,
    InsightTab,
    TrendKind,
)
from fintrend.application.dtos.analytics.dashboard_query import DashboardQuery

__all__ = [
    "BalanceTrendResult",
    "CategoryBreakdownResult",
    "CategoryTrendResult",
    "DashboardInsights",
    "DashboardQuery",
    "InsightTab",
    "TrendKind",
]
