"""Helper methods for portfolio accounting to reduce complexity."""

from decimal import Decimal

from fundfolio.core.exceptions.portfolio import CalculationError
from fundfolio.core.types.financial import ZERO

from .holding import PortfolioHolding
from .transaction import Transaction


class HoldingCalculator:
    """Weighted-average cost arithmetic for holdings.

    The average after the Nth purchase is cumulative cost divided by cumulative
    shares, not the mean of per-purchase prices.
    """

    @staticmethod
    def validate_absorbable(transaction: Transaction) -> None:
        """Reject transactions that would leave an undefined average cost.

        Raises:
            CalculationError: If the transaction has non-positive shares
        """
        if transaction.shares <= ZERO:
            raise CalculationError(
                f"Cannot absorb transaction {transaction.id} with non-positive shares: "
                f"{transaction.shares}"
            )
        if transaction.amount < ZERO:
            raise CalculationError(
                f"Cannot absorb transaction {transaction.id} with negative amount: "
                f"{transaction.amount}"
            )

    @staticmethod
    def opening_totals(transaction: Transaction) -> tuple[Decimal, Decimal]:
        """Totals for a fund's first purchase."""
        return transaction.shares, transaction.amount

    @staticmethod
    def blended_totals(
        holding: PortfolioHolding, transaction: Transaction
    ) -> tuple[Decimal, Decimal]:
        """Totals after adding a purchase to an existing holding."""
        return (
            holding.total_shares + transaction.shares,
            holding.total_invested + transaction.amount,
        )
