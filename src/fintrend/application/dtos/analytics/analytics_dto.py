"""Analytics result DTOs for dashboard charts and cards.

Series are keyed by category id or balance metric name; display names live
on the ranked categories.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from fintrend.domain.analytics.value_objects import (
    CategoryBreakdownItem,
    CategoryTotal,
    DateRange,
    KpiSummary,
    PeriodGranularity,
    SeriesPoint,
)


class TrendKind(str, Enum):
    """Which transaction type a category trend covers."""

    SPENDING = "spending"
    INCOME = "income"


class InsightTab(str, Enum):
    """Dashboard insight tabs; each one needs its own series."""

    NET_WORTH = "net_worth"
    SPENDING = "spending"
    INCOME = "income"
    SAVINGS = "savings"


@dataclass
class CategoryTrendResult:
    """Zero-filled category series (stacked bar chart).

    Used for:
    - Spending by category over time
    - Income by category over time
    """

    data_points: list[SeriesPoint]
    categories: list[CategoryTotal]  # Ranked, "Other" included when grouped
    total: Decimal  # Sum over every bucket and category

    @classmethod
    def empty(cls) -> CategoryTrendResult:
        return cls(data_points=[], categories=[], total=Decimal("0"))


@dataclass
class BalanceTrendResult:
    """Carry-forward balance series (line chart)."""

    data_points: list[SeriesPoint]
    latest: SeriesPoint | None = None

    @classmethod
    def empty(cls) -> BalanceTrendResult:
        return cls(data_points=[])


@dataclass
class CategoryBreakdownResult:
    """Expense and income breakdowns (doughnut charts)."""

    expenses: list[CategoryBreakdownItem] = field(default_factory=list)
    income: list[CategoryBreakdownItem] = field(default_factory=list)
    total_expenses: Decimal = Decimal("0")
    total_income: Decimal = Decimal("0")


@dataclass
class DashboardInsights:
    """Everything the dashboard page renders for one window."""

    date_range: DateRange
    granularity: PeriodGranularity
    kpis: KpiSummary
    category_breakdown: CategoryBreakdownResult
    net_worth: BalanceTrendResult
    spending: CategoryTrendResult
    income: CategoryTrendResult
    savings: BalanceTrendResult
    range_label: str | None = None  # Only set for preset windows
