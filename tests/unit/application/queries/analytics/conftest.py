"""Shared fixtures for analytics query tests."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from fintrend.domain.analytics.value_objects import DateRange
from fintrend_config import Settings


@pytest.fixture
def mock_finance_port():
    """Create a mock finance read port with empty defaults."""
    port = AsyncMock()
    port.wallet_balances_at.return_value = []
    port.savings_balances_at.return_value = []
    port.budget_for_month.return_value = None
    port.total_spending.return_value = Decimal("0")
    port.expense_categories.return_value = []
    port.income_categories.return_value = []
    port.net_worth_trend.return_value = []
    port.spending_trend.return_value = []
    port.income_trend.return_value = []
    return port


@pytest.fixture
def test_settings():
    """Settings independent of the environment."""
    return Settings(
        _env_file=None,
        default_granularity="month",
        default_preset="last_3_months",
        breakdown_category_limit=8,
        trend_category_limit=5,
    )


@pytest.fixture
def march_2024():
    return DateRange(
        datetime(2024, 3, 1, tzinfo=timezone.utc),
        datetime(2024, 3, 31, 23, 59, 59, 999999, tzinfo=timezone.utc),
    )


@pytest.fixture
def first_quarter_2024():
    return DateRange(
        datetime(2024, 1, 1, tzinfo=timezone.utc),
        datetime(2024, 3, 31, 23, 59, 59, 999999, tzinfo=timezone.utc),
    )
