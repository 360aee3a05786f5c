"""Validated dashboard request.

Explicit dates and a preset may both be given; the preset wins. Without
either, the configured default preset applies. Naive dates are read as UTC.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from fintrend.application.dtos.analytics.analytics_dto import InsightTab
from fintrend.domain.analytics.services import resolve_date_range
from fintrend.domain.analytics.value_objects import (
    DateRange,
    DateRangePreset,
    PeriodGranularity,
)
from fintrend.domain.shared.exceptions import DomainException
from fintrend.domain.shared.time import ensure_tz_aware
from fintrend_config import Settings

_LEGACY_TAB_ALIASES: dict[str, str] = {"netWorth": "net_worth"}


class DashboardQuery(BaseModel):
    """Dashboard filters as received from the caller."""

    from_date: datetime | None = None
    to_date: datetime | None = None
    granularity: PeriodGranularity | None = None
    preset: DateRangePreset | None = None
    insight_tab: InsightTab | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("from_date", "to_date")
    @classmethod
    def validate_timezone(cls, v: datetime | None) -> datetime | None:
        return ensure_tz_aware(v) if v is not None else None

    @field_validator("granularity", mode="before")
    @classmethod
    def validate_granularity(cls, v: Any) -> PeriodGranularity | None:
        if v is None:
            return None
        try:
            return PeriodGranularity.parse(v)
        except DomainException as e:
            raise ValueError(e.message) from e

    @field_validator("preset", mode="before")
    @classmethod
    def validate_preset(cls, v: Any) -> DateRangePreset | None:
        if v is None:
            return None
        try:
            return DateRangePreset.parse(v)
        except DomainException as e:
            raise ValueError(e.message) from e

    @field_validator("insight_tab", mode="before")
    @classmethod
    def validate_insight_tab(cls, v: Any) -> Any:
        if isinstance(v, str):
            return _LEGACY_TAB_ALIASES.get(v, v)
        return v

    @model_validator(mode="after")
    def validate_dates(self) -> DashboardQuery:
        if (
            self.from_date is not None
            and self.to_date is not None
            and self.from_date >= self.to_date
        ):
            msg = "from_date must be before to_date"
            raise ValueError(msg)
        return self

    def resolve_range(self, now: datetime, settings: Settings) -> DateRange:
        """Absolute window for this request."""
        if self.preset is not None:
            return resolve_date_range(self.preset, now)
        if self.from_date is not None and self.to_date is not None:
            return DateRange(self.from_date, self.to_date)
        return resolve_date_range(settings.default_preset, now)

    def resolve_granularity(self, settings: Settings) -> PeriodGranularity:
        if self.granularity is not None:
            return self.granularity
        return PeriodGranularity.parse(settings.default_granularity)
