"""KPI card value objects."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from fintrend.domain.shared.amounts import to_decimal


@dataclass(frozen=True)
class GrowthMetric:
    """Percentage change with a tri-state sign.

    Exactly one of ``is_positive``, ``is_negative`` and ``is_neutral`` is true,
    and it always matches the sign of ``value``.
    """

    value: Decimal
    label: str
    is_positive: bool
    is_negative: bool
    is_neutral: bool

    def __post_init__(self) -> None:
        value = to_decimal(self.value)
        object.__setattr__(self, "value", value)
        if (self.is_positive, self.is_negative, self.is_neutral) != (
            value > 0,
            value < 0,
            value == 0,
        ):
            msg = f"Growth flags do not match value {value}"
            raise ValueError(msg)

    @classmethod
    def descriptive(cls, label: str) -> GrowthMetric:
        """Neutral metric that carries a label instead of a percentage."""
        return cls(
            value=Decimal("0"),
            label=label,
            is_positive=False,
            is_negative=False,
            is_neutral=True,
        )


@dataclass(frozen=True)
class KpiCardData:
    title: str
    value: Decimal
    growth: GrowthMetric
    period: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", to_decimal(self.value))


@dataclass(frozen=True)
class KpiSummary:
    """The four dashboard header cards."""

    net_worth: KpiCardData
    money_left_to_spend: KpiCardData
    total_spending: KpiCardData
    total_savings: KpiCardData
