"""Analytics domain services.

Pure, synchronous functions: date range resolution, bucketing, gap filling,
category ranking, growth and KPI composition.
"""

from fintrend.domain.analytics.services.aggregation import (
    GroupedAggregate,
    PeriodAggregate,
    aggregate_by_period,
    aggregate_by_period_and_group,
)
from fintrend.domain.analytics.services.bucketing import (
    bucket_key,
    bucket_start,
    generate_buckets,
    iter_bucket_starts,
    parse_bucket_key,
)
from fintrend.domain.analytics.services.category_ranking import (
    MAX_CATEGORIES,
    OTHER_CATEGORY_ID,
    OTHER_CATEGORY_NAME,
    calculate_total_amount,
    category_names,
    category_total,
    extract_and_rank,
    filter_valid_categories,
    group_small_categories,
    limit_categories,
    prepare_category_breakdown,
    sort_category_breakdown,
)
from fintrend.domain.analytics.services.date_range_resolver import (
    ALL_TIME_LOOKBACK_YEARS,
    describe_date_range,
    previous_period,
    resolve_date_range,
)
from fintrend.domain.analytics.services.gap_filler import (
    NET_WORTH_METRICS,
    SAVINGS_BALANCE,
    TOTAL_NET_WORTH,
    WALLET_BALANCE,
    balance_periods_to_series,
    category_periods_to_series,
    fill_balance_periods,
    fill_category_periods,
    fill_savings_periods,
    fill_series,
)
from fintrend.domain.analytics.services.growth import (
    GrowthLabels,
    compute_growth_percentage,
    growth_metric,
)
from fintrend.domain.analytics.services.kpi_composer import (
    KpiSummaryInput,
    compose_kpi_summary,
    compute_money_left_to_spend,
    compute_net_worth,
    compute_total_savings,
    compute_total_spending,
)

__all__ = [
    # Date ranges
    "ALL_TIME_LOOKBACK_YEARS",
    "describe_date_range",
    "previous_period",
    "resolve_date_range",
    # Bucketing
    "bucket_key",
    "bucket_start",
    "generate_buckets",
    "iter_bucket_starts",
    "parse_bucket_key",
    # Aggregation
    "GroupedAggregate",
    "PeriodAggregate",
    "aggregate_by_period",
    "aggregate_by_period_and_group",
    # Gap filling
    "NET_WORTH_METRICS",
    "SAVINGS_BALANCE",
    "TOTAL_NET_WORTH",
    "WALLET_BALANCE",
    "balance_periods_to_series",
    "category_periods_to_series",
    "fill_balance_periods",
    "fill_category_periods",
    "fill_savings_periods",
    "fill_series",
    # Ranking
    "MAX_CATEGORIES",
    "OTHER_CATEGORY_ID",
    "OTHER_CATEGORY_NAME",
    "calculate_total_amount",
    "category_names",
    "category_total",
    "extract_and_rank",
    "filter_valid_categories",
    "group_small_categories",
    "limit_categories",
    "prepare_category_breakdown",
    "sort_category_breakdown",
    # Growth and KPIs
    "GrowthLabels",
    "KpiSummaryInput",
    "compose_kpi_summary",
    "compute_growth_percentage",
    "compute_money_left_to_spend",
    "compute_net_worth",
    "compute_total_savings",
    "compute_total_spending",
    "growth_metric",
]
