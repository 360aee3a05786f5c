"""Balance trend query (net worth or savings over time)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fintrend.application.dtos.analytics import BalanceTrendResult
from fintrend.application.ports.analytics import FinanceReadPort
from fintrend.domain.analytics.services import (
    NET_WORTH_METRICS,
    SAVINGS_BALANCE,
    balance_periods_to_series,
    fill_balance_periods,
    fill_savings_periods,
)
from fintrend.domain.analytics.value_objects import DateRange, PeriodGranularity

if TYPE_CHECKING:
    from fintrend.application.factories import QueryFactory

logger = logging.getLogger(__name__)


class BalanceTrendQuery:
    """Return balances per bucket, carrying the last snapshot forward."""

    def __init__(self, finance_read_port: FinanceReadPort):
        self._finance = finance_read_port

    @classmethod
    def from_factory(cls, factory: QueryFactory) -> BalanceTrendQuery:
        return cls(finance_read_port=factory.finance_read_port())

    async def execute(
        self,
        date_range: DateRange,
        granularity: PeriodGranularity | str,
        savings_only: bool = False,
    ) -> BalanceTrendResult:
        granularity = PeriodGranularity.parse(granularity)
        facts = await self._finance.net_worth_trend(
            date_range=date_range,
            granularity=granularity,
        )

        if savings_only:
            filled = fill_savings_periods(facts, date_range, granularity)
            data_points = balance_periods_to_series(filled, (SAVINGS_BALANCE,))
        else:
            filled = fill_balance_periods(facts, date_range, granularity)
            data_points = balance_periods_to_series(filled, NET_WORTH_METRICS)

        logger.debug(
            "Balance trend: %d snapshots, %d buckets (savings_only=%s)",
            len(facts),
            len(data_points),
            savings_only,
        )
        return BalanceTrendResult(
            data_points=data_points,
            latest=data_points[-1] if data_points else None,
        )
