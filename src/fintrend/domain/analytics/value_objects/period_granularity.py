"""Period granularity and gap fill policy enums."""

from __future__ import annotations

from enum import Enum

from fintrend.domain.shared.exceptions import (
    UnknownFillPolicyError,
    UnknownGranularityError,
)


class PeriodGranularity(str, Enum):
    """Bucket size of a time series.

    Bucket keys: ``YYYY-MM-DD`` (day), ``YYYY-Www`` (ISO week),
    ``YYYY-MM`` (month).
    """

    DAY = "day"
    WEEK = "week"
    MONTH = "month"

    @classmethod
    def parse(cls, value: PeriodGranularity | str) -> PeriodGranularity:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = _LEGACY_GRANULARITY_ALIASES.get(value, value)
            try:
                return cls(normalized)
            except ValueError as e:
                raise UnknownGranularityError(value) from e
        raise UnknownGranularityError(value)


_LEGACY_GRANULARITY_ALIASES: dict[str, str] = {
    "daily": "day",
    "weekly": "week",
    "monthly": "month",
}


class FillPolicy(str, Enum):
    """How a gap in a series is filled.

    ZERO_FILL is for flow metrics (spending, income): nothing happened in the
    bucket, so the value is 0. CARRY_FORWARD is for stock metrics (balances,
    net worth): the last known level still holds.
    """

    ZERO_FILL = "zero_fill"
    CARRY_FORWARD = "carry_forward"

    @classmethod
    def parse(cls, value: FillPolicy | str) -> FillPolicy:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise UnknownFillPolicyError(value) from e
