"""Shared domain components.

This module exports shared exceptions and utilities used across the
analytics domain.
"""

from fintrend.domain.shared.amounts import ZERO, decimal_sum, to_decimal
from fintrend.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ExhaustivenessError,
    InvalidAmountError,
    InvalidBucketKeyError,
    InvalidDateRangeError,
    UnknownFillPolicyError,
    UnknownGranularityError,
    UnknownPresetError,
    ValidationError,
)
from fintrend.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "InvalidDateRangeError",
    "InvalidBucketKeyError",
    "InvalidAmountError",
    "ExhaustivenessError",
    "UnknownPresetError",
    "UnknownGranularityError",
    "UnknownFillPolicyError",
    # Utilities
    "ZERO",
    "decimal_sum",
    "ensure_tz_aware",
    "to_decimal",
    "utc_now",
]
