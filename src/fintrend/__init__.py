"""fintrend - time-series aggregation and KPI engine for personal finance."""

__version__ = "0.1.0"
