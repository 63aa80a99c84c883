"""
Portfolio holding domain model.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal

from fundfolio.core.exceptions.portfolio import CalculationError, ValidationError
from fundfolio.core.types.financial import (
    ZERO,
    calculate_average_cost,
    calculate_gain_loss_percent,
    calculate_market_value,
    safe_decimal_comparison,
)


@dataclass
class PortfolioHolding:
    """Cumulative position in one fund.

    ``average_cost`` is derived from the totals and is never set independently;
    use ``apply_totals`` to change the position.
    """

    id: int
    fund_id: int
    total_shares: Decimal
    total_invested: Decimal
    average_cost: Decimal
    updated_at: datetime

    def __post_init__(self) -> None:
        """Validate holding data after initialization."""
        if self.total_shares <= ZERO:
            raise CalculationError(
                f"Holding for fund {self.fund_id} must have positive shares, "
                f"got {self.total_shares}"
            )
        if self.total_invested < ZERO:
            raise ValidationError(
                f"Total invested must be non-negative, got {self.total_invested}",
                field="total_invested",
            )

    @classmethod
    def open(
        cls,
        holding_id: int,
        fund_id: int,
        total_shares: Decimal,
        total_invested: Decimal,
        timestamp: datetime,
    ) -> "PortfolioHolding":
        """Factory method to create a holding with a derived average cost."""
        return cls(
            id=holding_id,
            fund_id=fund_id,
            total_shares=total_shares,
            total_invested=total_invested,
            average_cost=calculate_average_cost(total_invested, total_shares),
            updated_at=timestamp,
        )

    def apply_totals(
        self, total_shares: Decimal, total_invested: Decimal, timestamp: datetime
    ) -> None:
        """Replace the totals in place and recompute the average cost.

        Raises:
            CalculationError: If total_shares is not positive (state is unchanged)
        """
        average_cost = calculate_average_cost(total_invested, total_shares)
        self.total_shares = total_shares
        self.total_invested = total_invested
        self.average_cost = average_cost
        self.updated_at = timestamp

    def market_value(self, nav: Decimal) -> Decimal:
        """Calculate current value of the holding at a NAV."""
        return calculate_market_value(self.total_shares, nav)

    def unrealized_gain_loss(self, nav: Decimal) -> Decimal:
        """Calculate unrealized gain/loss against the cost basis."""
        return self.market_value(nav) - self.total_invested

    def unrealized_gain_loss_percent(self, nav: Decimal) -> Decimal:
        """Calculate unrealized gain/loss as a percentage of the cost basis."""
        return calculate_gain_loss_percent(self.unrealized_gain_loss(nav), self.total_invested)

    def is_consistent(self) -> bool:
        """Check the average cost still matches the totals."""
        return safe_decimal_comparison(
            self.average_cost, self.total_invested / self.total_shares
        )

    def snapshot(self) -> "PortfolioHolding":
        """Return a detached copy for readers."""
        return replace(self)
