"""Analytics value objects."""

from fintrend.domain.analytics.value_objects.balances import (
    BalanceSnapshot,
    BudgetData,
    SpendingData,
)
from fintrend.domain.analytics.value_objects.date_range import (
    DateRange,
    DateRangePreset,
)
from fintrend.domain.analytics.value_objects.kpi import (
    GrowthMetric,
    KpiCardData,
    KpiSummary,
)
from fintrend.domain.analytics.value_objects.period_granularity import (
    FillPolicy,
    PeriodGranularity,
)
from fintrend.domain.analytics.value_objects.series import (
    BalancePeriod,
    CategoryAmount,
    CategoryBreakdownItem,
    CategoryPeriod,
    CategoryTotal,
    SeriesPoint,
)

__all__ = [
    "BalancePeriod",
    "BalanceSnapshot",
    "BudgetData",
    "CategoryAmount",
    "CategoryBreakdownItem",
    "CategoryPeriod",
    "CategoryTotal",
    "DateRange",
    "DateRangePreset",
    "FillPolicy",
    "GrowthMetric",
    "KpiCardData",
    "KpiSummary",
    "PeriodGranularity",
    "SeriesPoint",
    "SpendingData",
]
