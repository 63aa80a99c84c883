"""
Portfolio storage interface.

The narrow contract a request-handling layer consumes. Identifiers are opaque
to callers.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from fundfolio.core.models.fund import Fund, FundData
from fundfolio.core.models.holding import PortfolioHolding
from fundfolio.core.models.purchase import PurchaseRequest
from fundfolio.core.models.summary import FundWithHolding, PortfolioSummary
from fundfolio.core.models.transaction import Transaction


class IPortfolioStorage(ABC):
    """Abstract interface for fund, transaction and holding storage."""

    # Fund operations
    @abstractmethod
    def get_all_funds(self) -> list[Fund]:
        """Get every catalog fund in insertion order."""
        pass

    @abstractmethod
    def get_fund(self, fund_id: int) -> Fund | None:
        """Get a fund by id, or None when it does not exist."""
        pass

    @abstractmethod
    def create_fund(self, fund_data: FundData) -> Fund:
        """Create a catalog fund."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(self, request: PurchaseRequest) -> Transaction:
        """Record a purchase and update the fund's holding."""
        pass

    @abstractmethod
    def get_transactions_by_fund(self, fund_id: int) -> list[Transaction]:
        """Get one fund's transactions."""
        pass

    @abstractmethod
    def get_all_transactions(self) -> list[Transaction]:
        """Get every transaction, newest first."""
        pass

    # Portfolio operations
    @abstractmethod
    def get_portfolio_holding(self, fund_id: int) -> PortfolioHolding | None:
        """Get a fund's holding."""
        pass

    @abstractmethod
    def update_portfolio_holding(
        self, fund_id: int, total_shares: Decimal, total_invested: Decimal
    ) -> PortfolioHolding:
        """Upsert a fund's holding totals."""
        pass

    @abstractmethod
    def get_all_holdings(self) -> list[PortfolioHolding]:
        """Get every holding."""
        pass

    @abstractmethod
    def get_portfolio_summary(self) -> PortfolioSummary:
        """Get aggregate portfolio totals."""
        pass

    @abstractmethod
    def get_funds_with_holdings(self) -> list[FundWithHolding]:
        """Get every fund joined with its holding."""
        pass
