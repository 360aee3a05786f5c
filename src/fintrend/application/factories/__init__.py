"""Application factories."""

from fintrend.application.factories.port_factory import QueryFactory

__all__ = ["QueryFactory"]
