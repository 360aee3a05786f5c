"""Date range value objects.

A DateRange is inclusive on both ends: presets resolve to
``[first day 00:00:00.000000, last day 23:59:59.999999]``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from fintrend.domain.shared.exceptions import (
    InvalidDateRangeError,
    UnknownPresetError,
)


class DateRangePreset(str, Enum):
    """Symbolic date windows offered by dashboard filters."""

    LAST_WEEK = "last_week"
    THIS_MONTH = "this_month"
    LAST_MONTH = "last_month"
    LAST_3_MONTHS = "last_3_months"
    LAST_6_MONTHS = "last_6_months"
    THIS_YEAR = "this_year"
    LAST_YEAR = "last_year"
    ALL = "all"

    @classmethod
    def parse(cls, value: DateRangePreset | str) -> DateRangePreset:
        """Parse a preset, accepting the legacy camelCase spellings.

        Raises UnknownPresetError instead of falling back to a default.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = _LEGACY_PRESET_ALIASES.get(value, value)
            try:
                return cls(normalized)
            except ValueError as e:
                raise UnknownPresetError(value) from e
        raise UnknownPresetError(value)


_LEGACY_PRESET_ALIASES: dict[str, str] = {
    "lastWeek": "last_week",
    "thisMonth": "this_month",
    "lastMonth": "last_month",
    "last3Months": "last_3_months",
    "last6Months": "last_6_months",
    "thisYear": "this_year",
    "lastYear": "last_year",
    "allTime": "all",
}


@dataclass(frozen=True)
class DateRange:
    """Absolute, inclusive date window. ``start`` never lies after ``end``."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidDateRangeError(self.start, self.end)

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end
