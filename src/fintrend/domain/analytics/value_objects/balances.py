"""Snapshot inputs for KPI computation."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from fintrend.domain.shared.amounts import to_decimal


@dataclass(frozen=True)
class BalanceSnapshot:
    """Balance of one wallet or savings bucket at a reference instant."""

    id: str
    name: str
    balance: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "balance", to_decimal(self.balance))


@dataclass(frozen=True)
class BudgetData:
    amount: Decimal
    period: str = "monthly"

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_decimal(self.amount))


@dataclass(frozen=True)
class SpendingData:
    total: Decimal
    period: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "total", to_decimal(self.total))
