"""
Read-side result models: portfolio summary and fund projections.
"""

from dataclasses import dataclass
from decimal import Decimal

from .fund import Fund
from .holding import PortfolioHolding


@dataclass(frozen=True)
class PortfolioSummary:
    """Aggregate portfolio totals at current NAVs.

    ``daily_change`` and ``daily_change_percent`` are simulated values; no
    price history backs them.
    """

    total_value: Decimal
    total_invested: Decimal
    total_gain_loss: Decimal
    total_gain_loss_percent: Decimal
    daily_change: Decimal
    daily_change_percent: Decimal
    holdings_count: int

    def is_empty(self) -> bool:
        """Check if the portfolio holds nothing."""
        return self.holdings_count == 0


@dataclass(frozen=True)
class FundWithHolding:
    """A catalog fund joined with its holding, if any."""

    fund: Fund
    holding: PortfolioHolding | None = None
    current_value: Decimal | None = None
    gain_loss: Decimal | None = None
    gain_loss_percent: Decimal | None = None

    @property
    def has_holding(self) -> bool:
        """Check if the fund has been bought."""
        return self.holding is not None
