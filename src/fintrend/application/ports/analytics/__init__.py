"""Analytics ports."""

from fintrend.application.ports.analytics.finance_read_port import FinanceReadPort

__all__ = ["FinanceReadPort"]
