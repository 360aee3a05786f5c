"""Decimal coercion for monetary amounts."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from fintrend.domain.shared.exceptions import InvalidAmountError

AmountLike = Decimal | int | float | str

ZERO = Decimal("0")


def to_decimal(value: AmountLike) -> Decimal:
    """Convert an amount to Decimal without binary float artefacts.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")`` rather
    than its 55-digit binary expansion.
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool):
        raise InvalidAmountError(value)
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError) as e:
            raise InvalidAmountError(value) from e

    if not result.is_finite():
        raise InvalidAmountError(value)
    return result


def decimal_sum(values) -> Decimal:
    """Sum decimals starting from an exact zero."""
    return sum(values, ZERO)
