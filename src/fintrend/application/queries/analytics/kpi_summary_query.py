"""KPI summary query (dashboard header cards)."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from fintrend.application.ports.analytics import FinanceReadPort
from fintrend.domain.analytics.services import (
    KpiSummaryInput,
    bucket_key,
    compose_kpi_summary,
    previous_period,
)
from fintrend.domain.analytics.value_objects import (
    DateRange,
    KpiSummary,
    PeriodGranularity,
    SpendingData,
)

if TYPE_CHECKING:
    from fintrend.application.factories import QueryFactory

logger = logging.getLogger(__name__)

CURRENT_SPENDING_PERIOD = "this period"
PREVIOUS_SPENDING_PERIOD = "last period"


class KpiSummaryQuery:
    """Compare ``date_range`` against the equally long window before it."""

    def __init__(self, finance_read_port: FinanceReadPort):
        self._finance = finance_read_port

    @classmethod
    def from_factory(cls, factory: QueryFactory) -> KpiSummaryQuery:
        return cls(finance_read_port=factory.finance_read_port())

    async def execute(self, date_range: DateRange) -> KpiSummary:
        previous = previous_period(date_range)
        current_month = bucket_key(date_range.end, PeriodGranularity.MONTH)
        previous_month = bucket_key(previous.end, PeriodGranularity.MONTH)
        logger.debug(
            "KPI summary for %s - %s (previous %s - %s)",
            date_range.start,
            date_range.end,
            previous.start,
            previous.end,
        )

        (
            current_wallets,
            current_savings,
            previous_wallets,
            previous_savings,
            current_budget,
            previous_budget,
            current_spending,
            previous_spending,
        ) = await asyncio.gather(
            self._finance.wallet_balances_at(as_of=date_range.end),
            self._finance.savings_balances_at(as_of=date_range.end),
            self._finance.wallet_balances_at(as_of=previous.end),
            self._finance.savings_balances_at(as_of=previous.end),
            self._finance.budget_for_month(month=current_month),
            self._finance.budget_for_month(month=previous_month),
            self._finance.total_spending(date_range=date_range),
            self._finance.total_spending(date_range=previous),
        )

        return compose_kpi_summary(
            KpiSummaryInput(
                current_wallets=current_wallets,
                current_savings=current_savings,
                previous_wallets=previous_wallets,
                previous_savings=previous_savings,
                current_budget=current_budget,
                previous_budget=previous_budget,
                current_spending=SpendingData(
                    total=current_spending,
                    period=CURRENT_SPENDING_PERIOD,
                ),
                previous_spending=SpendingData(
                    total=previous_spending,
                    period=PREVIOUS_SPENDING_PERIOD,
                ),
            ),
        )
