"""Finance read port.

Read-side contract between the analytics queries and whatever stores wallets,
savings buckets, budgets and transactions. Every method returns raw facts;
ranking, gap filling and growth happen in the domain services.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Protocol

from fintrend.domain.analytics.value_objects import (
    BalancePeriod,
    BalanceSnapshot,
    BudgetData,
    CategoryAmount,
    CategoryPeriod,
    DateRange,
    PeriodGranularity,
)


class FinanceReadPort(Protocol):
    """Report-like finance read interface."""

    async def wallet_balances_at(self, *, as_of: datetime) -> list[BalanceSnapshot]:
        """Balance of every wallet at ``as_of``."""
        ...

    async def savings_balances_at(self, *, as_of: datetime) -> list[BalanceSnapshot]:
        """Balance of every savings bucket at ``as_of``."""
        ...

    async def budget_for_month(self, *, month: str) -> BudgetData | None:
        """Total budget of a ``YYYY-MM`` month, or None when none is set."""
        ...

    async def total_spending(self, *, date_range: DateRange) -> Decimal:
        """Sum of expense transactions inside ``date_range``."""
        ...

    async def expense_categories(
        self,
        *,
        date_range: DateRange,
    ) -> list[CategoryAmount]:
        """Expense totals per category inside ``date_range``."""
        ...

    async def income_categories(
        self,
        *,
        date_range: DateRange,
    ) -> list[CategoryAmount]:
        """Income totals per category inside ``date_range``."""
        ...

    async def net_worth_trend(
        self,
        *,
        date_range: DateRange,
        granularity: PeriodGranularity,
    ) -> list[BalancePeriod]:
        """End-of-bucket balances, only for buckets with a snapshot.

        May include one row before ``date_range`` holding the opening balance.
        """
        ...

    async def spending_trend(
        self,
        *,
        date_range: DateRange,
        granularity: PeriodGranularity,
    ) -> list[CategoryPeriod]:
        """Expense amounts per category, only for buckets with activity."""
        ...

    async def income_trend(
        self,
        *,
        date_range: DateRange,
        granularity: PeriodGranularity,
    ) -> list[CategoryPeriod]:
        """Income amounts per category, only for buckets with activity."""
        ...
