"""Shared fixtures for DTO tests."""

import pytest

from fintrend_config import Settings


@pytest.fixture
def test_settings():
    """Settings independent of the environment."""
    return Settings(
        _env_file=None,
        default_granularity="month",
        default_preset="last_3_months",
    )
