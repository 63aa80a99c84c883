"""
Main Portfolio class - orchestrates all portfolio components.

This module provides the storage facade consumed by the request-handling
layer by composing the focused components: fund catalog, transaction ledger,
holdings aggregator, summary calculator, and fund projector.
"""

import threading
from decimal import Decimal

from loguru import logger

from fundfolio.core.exceptions.portfolio import ConfigurationError
from fundfolio.core.interfaces.query import FundAnalysisResult, IFundQueryTranslator
from fundfolio.core.interfaces.storage import IPortfolioStorage
from fundfolio.core.protocols import Clock, utc_now
from fundfolio.core.utils.decorators import log_operation, require_fund

from .fund import Fund, FundData
from .fund_catalog import FundCatalog
from .fund_projection import FundWithHoldingProjector
from .holding import PortfolioHolding
from .holdings_aggregator import HoldingsAggregator
from .portfolio_metrics import PortfolioSummaryCalculator
from .purchase import PurchaseRequest, RecordPurchase
from .summary import FundWithHolding, PortfolioSummary
from .transaction import Transaction
from .transaction_ledger import TransactionLedger


class Portfolio(IPortfolioStorage):
    """In-memory portfolio storage.

    Orchestrates portfolio operations by composing focused components:
    - FundCatalog: fund records
    - TransactionLedger: append-only purchase log
    - HoldingsAggregator: per-fund weighted-average positions
    - PortfolioSummaryCalculator: aggregate totals
    - FundWithHoldingProjector: per-fund display composites

    Thread Safety:
        Purchases run under a portfolio-wide RLock so the ledger and holdings
        are never observed out of sync; reads take the same lock to see a
        consistent snapshot.
    """

    def __init__(
        self,
        clock: Clock = utc_now,
        query_translator: IFundQueryTranslator | None = None,
    ) -> None:
        """Initialize an empty portfolio."""
        self.catalog = FundCatalog(clock=clock)
        self.ledger = TransactionLedger(clock=clock)
        self.holdings = HoldingsAggregator(clock=clock)
        self.query_translator = query_translator

        self._lock = threading.RLock()
        self._summary = PortfolioSummaryCalculator(self.catalog, self.holdings)
        self._projector = FundWithHoldingProjector(self.catalog, self.holdings)

    # Fund operations
    def get_all_funds(self) -> list[Fund]:
        """Get every catalog fund in insertion order."""
        return self.catalog.list_all()

    def get_fund(self, fund_id: int) -> Fund | None:
        """Get a fund by id; None signals not-found."""
        return self.catalog.get(fund_id)

    @log_operation
    def create_fund(self, fund_data: FundData) -> Fund:
        """Create a catalog fund (used during seeding)."""
        return self.catalog.create(fund_data)

    # Transaction operations
    @log_operation
    def create_transaction(self, request: PurchaseRequest) -> Transaction:
        """Record a purchase and update the fund's holding in one step.

        Raises:
            FundNotFoundError: If the fund does not exist; nothing is recorded
        """
        result = RecordPurchase(request).execute(
            self.catalog, self.ledger, self.holdings, self._lock
        )
        return result.transaction

    def get_transactions_by_fund(self, fund_id: int) -> list[Transaction]:
        """Get one fund's transactions in the order they were recorded."""
        return self.ledger.list_by_fund(fund_id)

    def get_all_transactions(self) -> list[Transaction]:
        """Get every transaction, newest first."""
        with self._lock:
            return self.ledger.list_all()

    # Portfolio operations
    def get_portfolio_holding(self, fund_id: int) -> PortfolioHolding | None:
        """Get a snapshot of a fund's holding."""
        return self.holdings.get(fund_id)

    @log_operation
    @require_fund("fund_id")
    def update_portfolio_holding(
        self, fund_id: int, total_shares: Decimal, total_invested: Decimal
    ) -> PortfolioHolding:
        """Upsert a fund's holding totals; the average cost is recomputed.

        Raises:
            FundNotFoundError: If the fund does not exist
        """
        with self._lock:
            return self.holdings.upsert(fund_id, total_shares, total_invested)

    def get_all_holdings(self) -> list[PortfolioHolding]:
        """Get snapshots of every holding."""
        with self._lock:
            return self.holdings.list_all()

    def get_portfolio_summary(self) -> PortfolioSummary:
        """Get aggregate portfolio totals at current NAVs."""
        with self._lock:
            return self._summary.summarize()

    def get_funds_with_holdings(self) -> list[FundWithHolding]:
        """Get every fund joined with its holding and unrealized gain/loss."""
        with self._lock:
            return self._projector.project_all()

    def get_fund_with_holding(self, fund_id: int) -> FundWithHolding | None:
        """Get one fund joined with its holding, or None if the fund is unknown."""
        with self._lock:
            return self._projector.project(fund_id)

    # Fund analysis
    def analyze_funds(self, query: str) -> FundAnalysisResult:
        """Select catalog funds matching a natural-language query.

        Raises:
            ConfigurationError: If no query translator is configured
        """
        if self.query_translator is None:
            raise ConfigurationError("No fund query translator configured")

        result = self.query_translator.analyze(query, self.catalog.list_all())
        logger.info(f"Fund query '{query}' matched {len(result.funds)} funds")
        return result
