"""Unit tests for CategoryTrendQuery."""

from decimal import Decimal
from unittest.mock import AsyncMock, Mock

import pytest

from fintrend.application.dtos.analytics import TrendKind
from fintrend.application.queries.analytics import CategoryTrendQuery
from fintrend.domain.analytics.services import OTHER_CATEGORY_ID
from fintrend.domain.analytics.value_objects import (
    CategoryAmount,
    CategoryPeriod,
    PeriodGranularity,
)


def _period(period, **amounts):
    return CategoryPeriod(
        period,
        tuple(
            CategoryAmount(name.lower(), name, Decimal(amount))
            for name, amount in amounts.items()
        ),
    )


class TestCategoryTrendQuery:
    @pytest.mark.asyncio
    async def test_spending_is_limited_and_zero_filled(
        self,
        mock_finance_port,
        test_settings,
        first_quarter_2024,
    ):
        mock_finance_port.spending_trend.return_value = [
            _period("2024-01", Rent=900, Food=300, Fun=50),
            _period("2024-03", Food=200, Travel=40),
        ]
        query = CategoryTrendQuery(mock_finance_port, test_settings)

        result = await query.execute(
            TrendKind.SPENDING,
            first_quarter_2024,
            "month",
            limit=2,
        )

        mock_finance_port.spending_trend.assert_awaited_once_with(
            date_range=first_quarter_2024,
            granularity=PeriodGranularity.MONTH,
        )
        mock_finance_port.income_trend.assert_not_awaited()
        assert [p.bucket for p in result.data_points] == [
            "2024-01",
            "2024-02",
            "2024-03",
        ]
        assert result.data_points[0].values == {
            "rent": Decimal("900"),
            "food": Decimal("300"),
            OTHER_CATEGORY_ID: Decimal("50"),
        }
        assert result.data_points[1].total == Decimal("0")
        assert result.data_points[2].get(OTHER_CATEGORY_ID) == Decimal("40")
        assert [c.name for c in result.categories] == ["Rent", "Food", "Other"]
        assert result.total == Decimal("1490")

    @pytest.mark.asyncio
    async def test_income_uses_configured_limit(
        self,
        mock_finance_port,
        test_settings,
        first_quarter_2024,
    ):
        mock_finance_port.income_trend.return_value = [
            _period("2024-02", A=6, B=5, C=4, D=3, E=2, F=1),
        ]
        query = CategoryTrendQuery(mock_finance_port, test_settings)

        result = await query.execute("income", first_quarter_2024, "month")

        mock_finance_port.income_trend.assert_awaited_once()
        assert [c.name for c in result.categories] == ["A", "B", "C", "D", "E", "Other"]
        assert result.total == Decimal("21")

    @pytest.mark.asyncio
    async def test_no_facts(self, mock_finance_port, test_settings, first_quarter_2024):
        query = CategoryTrendQuery(mock_finance_port, test_settings)

        result = await query.execute(TrendKind.SPENDING, first_quarter_2024, "month")

        assert len(result.data_points) == 3
        assert result.categories == []
        assert result.total == Decimal("0")


class TestCategoryTrendQueryDependencyInjection:
    def test_from_factory_creates_query(self):
        mock_factory = Mock()
        mock_factory.finance_read_port.return_value = AsyncMock()

        query = CategoryTrendQuery.from_factory(mock_factory)
        assert query is not None
        mock_factory.finance_read_port.assert_called_once()
