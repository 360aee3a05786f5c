"""Period-over-period growth metrics.

Zero-baseline policy: a percentage change from 0 is undefined, so it is
reported by convention rather than computed:

=========  ==========  ======
previous   current     result
=========  ==========  ======
0          0           0%
0          > 0         +100%
0          < 0         -100%
=========  ==========  ======

This is a display convention, not a true growth rate. Division by zero never
raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_DOWN, ROUND_HALF_UP, Decimal

from fintrend.domain.analytics.value_objects import GrowthMetric
from fintrend.domain.shared.amounts import AmountLike, to_decimal

GROWTH_QUANTUM = Decimal("0.1")
ZERO_BASELINE_GROWTH = Decimal("100")


@dataclass(frozen=True)
class GrowthLabels:
    """Optional label overrides for growth_metric."""

    positive: str | None = None
    negative: str | None = None
    neutral: str | None = None


def compute_growth_percentage(current: AmountLike, previous: AmountLike) -> Decimal:
    """Percentage change from ``previous`` to ``current``, one decimal place.

    >>> compute_growth_percentage(120, 100)
    Decimal('20.0')
    >>> compute_growth_percentage(100, 0)
    Decimal('100.0')
    """
    current_value = to_decimal(current)
    previous_value = to_decimal(previous)

    if previous_value == 0:
        if current_value == 0:
            return Decimal("0").quantize(GROWTH_QUANTUM)
        sign = 1 if current_value > 0 else -1
        return (sign * ZERO_BASELINE_GROWTH).quantize(GROWTH_QUANTUM)

    growth = (current_value - previous_value) / abs(previous_value) * 100
    # Ties round toward +infinity: 2.25 -> 2.3, -2.25 -> -2.2
    rounding = ROUND_HALF_UP if growth >= 0 else ROUND_HALF_DOWN
    rounded = growth.quantize(GROWTH_QUANTUM, rounding=rounding)
    # -0.0 after rounding is no change
    return rounded.copy_abs() if rounded == 0 else rounded


def _format_percentage(value: Decimal) -> str:
    """``Decimal('20.0')`` -> ``'20'``, ``Decimal('7.1')`` -> ``'7.1'``."""
    magnitude = abs(value)
    if magnitude == magnitude.to_integral_value():
        return str(int(magnitude))
    return str(magnitude)


def growth_metric(
    current: AmountLike,
    previous: AmountLike,
    labels: GrowthLabels | None = None,
) -> GrowthMetric:
    """Growth percentage plus its sign flags and a display label.

    The flags follow the sign of the rounded percentage, so a change too small
    to survive rounding is neutral.
    """
    labels = labels or GrowthLabels()
    value = compute_growth_percentage(current, previous)

    is_positive = value > 0
    is_negative = value < 0
    is_neutral = value == 0

    if is_neutral:
        label = labels.neutral or "No change from last month"
    elif is_positive:
        label = labels.positive or f"+{_format_percentage(value)}% from last month"
    else:
        label = labels.negative or f"-{_format_percentage(value)}% from last month"

    return GrowthMetric(
        value=value,
        label=label,
        is_positive=is_positive,
        is_negative=is_negative,
        is_neutral=is_neutral,
    )
