"""
Core type definitions and protocols.

This module defines the narrow capabilities the read-side calculators consume,
so they depend on "fund lookup by id" and "list holdings" rather than on the
concrete catalog and aggregator classes.
"""

from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from typing import Protocol

from fundfolio.core.models.fund import Fund
from fundfolio.core.models.holding import PortfolioHolding


class FundLookup(Protocol):
    """Protocol for resolving funds by id."""

    def get(self, fund_id: int) -> Fund | None:
        """Return the fund or None when unknown."""
        ...

    def list_all(self) -> list[Fund]:
        """Return every fund in insertion order."""
        ...


class HoldingSource(Protocol):
    """Protocol for reading current holdings."""

    def get(self, fund_id: int) -> PortfolioHolding | None:
        """Return a snapshot of the fund's holding or None."""
        ...

    def list_all(self) -> Sequence[PortfolioHolding]:
        """Return snapshots of every holding."""
        ...


# Type aliases for commonly used types
Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock: timezone-aware current time in UTC."""
    return datetime.now(UTC)
