"""Category breakdown query (expense and income doughnut charts)."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from fintrend.application.dtos.analytics import CategoryBreakdownResult
from fintrend.application.ports.analytics import FinanceReadPort
from fintrend.domain.analytics.services import (
    calculate_total_amount,
    prepare_category_breakdown,
)
from fintrend.domain.analytics.value_objects import DateRange
from fintrend_config import Settings, get_settings

if TYPE_CHECKING:
    from fintrend.application.factories import QueryFactory


class CategoryBreakdownQuery:
    def __init__(
        self,
        finance_read_port: FinanceReadPort,
        settings: Settings | None = None,
    ):
        self._finance = finance_read_port
        self._settings = settings or get_settings()

    @classmethod
    def from_factory(cls, factory: QueryFactory) -> CategoryBreakdownQuery:
        return cls(finance_read_port=factory.finance_read_port())

    async def execute(
        self,
        date_range: DateRange,
        max_categories: int | None = None,
    ) -> CategoryBreakdownResult:
        if max_categories is None:
            max_categories = self._settings.breakdown_category_limit

        expense_amounts, income_amounts = await asyncio.gather(
            self._finance.expense_categories(date_range=date_range),
            self._finance.income_categories(date_range=date_range),
        )

        expenses = prepare_category_breakdown(expense_amounts, max_categories)
        income = prepare_category_breakdown(income_amounts, max_categories)
        return CategoryBreakdownResult(
            expenses=expenses,
            income=income,
            total_expenses=calculate_total_amount(expenses),
            total_income=calculate_total_amount(income),
        )
