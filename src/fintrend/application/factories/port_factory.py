"""Port factory protocol for the application layer."""

from __future__ import annotations

from typing import Protocol

from fintrend.application.ports.analytics import FinanceReadPort


class QueryFactory(Protocol):
    """Protocol for handing read ports to queries."""

    def finance_read_port(self) -> FinanceReadPort:
        """Get finance read port."""
        ...
