"""Shared domain exceptions and error codes.

This module defines the base exception hierarchy and error codes for the
analytics engine. All domain exceptions inherit from DomainException so the
calling layer can translate them in one place.

Two families matter here:

- rejected input (ValidationError and subclasses): the caller handed over
  data the engine refuses to compute with, e.g. an inverted date range.
- exhaustiveness failures (ExhaustivenessError and subclasses): an enum value
  the engine does not know. These are programming errors, never defaulted.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Stable error codes for callers.

    These codes are part of the public contract. Should not be changed.
    """

    # Validation Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    INVALID_BUCKET_KEY = "INVALID_BUCKET_KEY"
    INVALID_AMOUNT = "INVALID_AMOUNT"

    # Exhaustiveness Errors
    UNKNOWN_PRESET = "UNKNOWN_PRESET"
    UNKNOWN_GRANULARITY = "UNKNOWN_GRANULARITY"
    UNKNOWN_FILL_POLICY = "UNKNOWN_FILL_POLICY"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base exception for all domain-related errors.

    Attributes
    ----------
    message
        Human-readable error message
    code
        Stable error code for programmatic handling
    details
        Optional additional context
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code.value!r}, "
            f"details={self.details!r})"
        )


class ValidationError(DomainException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class InvalidDateRangeError(ValidationError):
    """Raised when a date range starts after it ends."""

    def __init__(self, start: Any, end: Any):
        super().__init__(
            f"Start date must be before or equal to end date: {start} > {end}",
            ErrorCode.INVALID_DATE_RANGE,
            {"start": str(start), "end": str(end)},
        )


class InvalidBucketKeyError(ValidationError):
    """Raised when a bucket key does not match its granularity's format."""

    def __init__(self, bucket: str, granularity: str):
        super().__init__(
            f"Invalid {granularity} bucket key: {bucket}",
            ErrorCode.INVALID_BUCKET_KEY,
            {"bucket": bucket, "granularity": granularity},
        )


class InvalidAmountError(ValidationError):
    """Raised when an amount cannot be read as a decimal number."""

    def __init__(self, value: Any):
        super().__init__(
            f"Invalid amount: {value!r}",
            ErrorCode.INVALID_AMOUNT,
            {"value": repr(value)},
        )


class ExhaustivenessError(DomainException):
    """Raised when an enumerated value is not handled by the engine."""


class UnknownPresetError(ExhaustivenessError):
    """Raised for a date range preset outside DateRangePreset."""

    def __init__(self, preset: Any):
        super().__init__(
            f"Unknown date range preset: {preset}",
            ErrorCode.UNKNOWN_PRESET,
            {"preset": str(preset)},
        )


class UnknownGranularityError(ExhaustivenessError):
    """Raised for a granularity outside PeriodGranularity."""

    def __init__(self, granularity: Any):
        super().__init__(
            f"Unknown period: {granularity}",
            ErrorCode.UNKNOWN_GRANULARITY,
            {"granularity": str(granularity)},
        )


class UnknownFillPolicyError(ExhaustivenessError):
    """Raised for a gap fill policy outside FillPolicy."""

    def __init__(self, policy: Any):
        super().__init__(
            f"Unknown fill policy: {policy}",
            ErrorCode.UNKNOWN_FILL_POLICY,
            {"policy": str(policy)},
        )
