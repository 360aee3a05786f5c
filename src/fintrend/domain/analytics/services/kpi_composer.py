"""KPI computation for the dashboard header cards.

- Total Net Worth (wallets + savings)
- Money Left to Spend (budget - spending)
- Total Spending (current period)
- Total Savings (all savings buckets)

Net worth carries no percentage: its growth slot always holds
the neutral descriptive label "Total Wallets + Savings", whatever the
balances are. The other three cards compare against the previous period.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from fintrend.domain.analytics.services.growth import growth_metric
from fintrend.domain.analytics.value_objects import (
    BalanceSnapshot,
    BudgetData,
    GrowthMetric,
    KpiCardData,
    KpiSummary,
    SpendingData,
)
from fintrend.domain.shared.amounts import decimal_sum

NET_WORTH_LABEL = "Total Wallets + Savings"
ALL_TIME_PERIOD = "All time"
DEFAULT_SPENDING_PERIOD = "This month"


@dataclass(frozen=True)
class KpiSummaryInput:
    """Everything compose_kpi_summary needs, current and previous."""

    current_wallets: Sequence[BalanceSnapshot]
    current_savings: Sequence[BalanceSnapshot]
    previous_wallets: Sequence[BalanceSnapshot]
    previous_savings: Sequence[BalanceSnapshot]
    current_budget: BudgetData | None
    previous_budget: BudgetData | None
    current_spending: SpendingData
    previous_spending: SpendingData


def compute_net_worth(
    wallets: Sequence[BalanceSnapshot],
    savings_buckets: Sequence[BalanceSnapshot],
) -> Decimal:
    """Sum of every wallet and savings bucket balance."""
    return _sum_balances(wallets) + _sum_balances(savings_buckets)


def compute_money_left_to_spend(
    budget: BudgetData | None,
    spending: SpendingData,
) -> Decimal:
    """Budget minus spending.

    A missing budget, or one with a non-positive amount, counts as a zero
    budget: the result is ``-spending.total``.
    """
    if budget is None or budget.amount <= 0:
        return -spending.total
    return budget.amount - spending.total


def compute_total_spending(spending: SpendingData) -> Decimal:
    return spending.total


def compute_total_savings(savings_buckets: Sequence[BalanceSnapshot]) -> Decimal:
    return _sum_balances(savings_buckets)


def _sum_balances(snapshots: Sequence[BalanceSnapshot]) -> Decimal:
    return decimal_sum(snapshot.balance for snapshot in snapshots)


def compose_kpi_summary(summary_input: KpiSummaryInput) -> KpiSummary:
    """Build the four KPI cards from current and previous snapshots."""
    current_net_worth = compute_net_worth(
        summary_input.current_wallets,
        summary_input.current_savings,
    )

    current_money_left = compute_money_left_to_spend(
        summary_input.current_budget,
        summary_input.current_spending,
    )
    previous_money_left = compute_money_left_to_spend(
        summary_input.previous_budget,
        summary_input.previous_spending,
    )

    current_spending = compute_total_spending(summary_input.current_spending)
    previous_spending = compute_total_spending(summary_input.previous_spending)

    current_savings = compute_total_savings(summary_input.current_savings)
    previous_savings = compute_total_savings(summary_input.previous_savings)

    spending_period = summary_input.current_spending.period or DEFAULT_SPENDING_PERIOD

    return KpiSummary(
        net_worth=KpiCardData(
            title="Total Net Worth",
            value=current_net_worth,
            growth=GrowthMetric.descriptive(NET_WORTH_LABEL),
            period=ALL_TIME_PERIOD,
        ),
        money_left_to_spend=KpiCardData(
            title="Money Left to Spend",
            value=current_money_left,
            growth=growth_metric(current_money_left, previous_money_left),
            period=spending_period,
        ),
        total_spending=KpiCardData(
            title="Total Spending",
            value=current_spending,
            growth=growth_metric(current_spending, previous_spending),
            period=spending_period,
        ),
        total_savings=KpiCardData(
            title="Total Savings",
            value=current_savings,
            growth=growth_metric(current_savings, previous_savings),
            period=ALL_TIME_PERIOD,
        ),
    )
