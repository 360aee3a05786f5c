"""Series and category value objects.

Amounts are coerced to Decimal on construction so sums across buckets and
categories are exact.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from fintrend.domain.shared.amounts import decimal_sum, to_decimal


@dataclass(frozen=True)
class SeriesPoint:
    """One chart row: a bucket plus one value per named series.

    Series are keyed by an explicit identifier (category id or metric name),
    never by display name.
    """

    bucket: str
    values: dict[str, Decimal] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "values",
            {key: to_decimal(value) for key, value in self.values.items()},
        )

    def get(self, key: str, default: Decimal = Decimal("0")) -> Decimal:
        return self.values.get(key, default)

    @property
    def total(self) -> Decimal:
        return decimal_sum(self.values.values())


@dataclass(frozen=True)
class CategoryAmount:
    """Amount booked on one category within one period."""

    id: str
    name: str
    amount: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_decimal(self.amount))


@dataclass(frozen=True)
class CategoryPeriod:
    """Pre-aggregated category amounts for one bucket."""

    period: str
    categories: tuple[CategoryAmount, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "categories", tuple(self.categories))

    @property
    def total(self) -> Decimal:
        return decimal_sum(c.amount for c in self.categories)


@dataclass(frozen=True)
class CategoryTotal:
    """A category's amount summed over every bucket of a request."""

    id: str
    name: str
    total: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "total", to_decimal(self.total))


@dataclass(frozen=True)
class CategoryBreakdownItem:
    """Single slice of a breakdown (doughnut chart).

    ``percentage`` is on a 0-100 scale.
    """

    category_id: str
    category_name: str
    amount: Decimal
    percentage: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_decimal(self.amount))
        object.__setattr__(self, "percentage", to_decimal(self.percentage))


@dataclass(frozen=True)
class BalancePeriod:
    """Point-in-time wallet and savings balances at the end of one bucket."""

    period: str
    wallet_balance: Decimal
    savings_balance: Decimal
    total_net_worth: Decimal | None = None

    def __post_init__(self) -> None:
        wallet = to_decimal(self.wallet_balance)
        savings = to_decimal(self.savings_balance)
        object.__setattr__(self, "wallet_balance", wallet)
        object.__setattr__(self, "savings_balance", savings)
        if self.total_net_worth is None:
            object.__setattr__(self, "total_net_worth", wallet + savings)
        else:
            object.__setattr__(
                self, "total_net_worth", to_decimal(self.total_net_worth)
            )
