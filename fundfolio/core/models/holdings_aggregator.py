"""
Holdings aggregator: one running position per fund.

Positions are updated incrementally from each transaction with weighted-average
cost. There is no decrement path.
"""

import threading
from dataclasses import dataclass, field
from decimal import Decimal

from loguru import logger

from fundfolio.core.protocols import Clock, utc_now
from fundfolio.core.utils.id_generator import IdGenerator
from fundfolio.core.utils.validation import (
    validate_fund_id,
    validate_non_negative,
    validate_positive,
)

from .holding import PortfolioHolding
from .portfolio_helpers import HoldingCalculator
from .transaction import Transaction


@dataclass
class HoldingsAggregator:
    """Maintains per-fund holdings.

    Thread Safety:
        Every mutation of a fund's holding runs under that fund's lock, so two
        absorptions for the same fund never interleave. Locks for different
        funds are independent. Readers receive snapshots.
    """

    clock: Clock = utc_now
    _holdings: dict[int, PortfolioHolding] = field(default_factory=dict, init=False, repr=False)
    _fund_locks: dict[int, threading.RLock] = field(default_factory=dict, init=False, repr=False)
    _registry_lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)
    _ids: IdGenerator = field(default_factory=IdGenerator, init=False, repr=False)

    def _lock_for(self, fund_id: int) -> threading.RLock:
        with self._registry_lock:
            lock = self._fund_locks.get(fund_id)
            if lock is None:
                lock = threading.RLock()
                self._fund_locks[fund_id] = lock
            return lock

    def absorb(self, transaction: Transaction) -> PortfolioHolding:
        """Fold a transaction into its fund's holding.

        Args:
            transaction: Newly appended transaction

        Returns:
            Snapshot of the updated (or newly created) holding

        Raises:
            CalculationError: If the transaction would produce an undefined
                average cost; the holding is left unchanged
        """
        HoldingCalculator.validate_absorbable(transaction)

        with self._lock_for(transaction.fund_id):
            existing = self._holdings.get(transaction.fund_id)
            if existing is None:
                total_shares, total_invested = HoldingCalculator.opening_totals(transaction)
                holding = self._open(transaction.fund_id, total_shares, total_invested)
                logger.info(
                    f"Holding opened for fund {transaction.fund_id}: "
                    f"shares={holding.total_shares} invested={holding.total_invested}"
                )
            else:
                total_shares, total_invested = HoldingCalculator.blended_totals(
                    existing, transaction
                )
                existing.apply_totals(total_shares, total_invested, self.clock())
                holding = existing
                logger.info(
                    f"Holding updated for fund {transaction.fund_id}: "
                    f"shares={holding.total_shares} invested={holding.total_invested} "
                    f"average_cost={holding.average_cost}"
                )
            return holding.snapshot()

    def upsert(
        self, fund_id: int, total_shares: Decimal, total_invested: Decimal
    ) -> PortfolioHolding:
        """Set a fund's totals directly, creating the holding if needed.

        Applying the same totals twice leaves the same state.

        Raises:
            ValidationError: If fund_id or totals are invalid
            CalculationError: If total_shares is not positive
        """
        fund_id = validate_fund_id(fund_id)
        total_shares = validate_positive(total_shares, "total_shares")
        total_invested = validate_non_negative(total_invested, "total_invested")

        with self._lock_for(fund_id):
            existing = self._holdings.get(fund_id)
            if existing is None:
                holding = self._open(fund_id, total_shares, total_invested)
            else:
                existing.apply_totals(total_shares, total_invested, self.clock())
                holding = existing
            logger.debug(f"Holding upserted for fund {fund_id}")
            return holding.snapshot()

    def _open(
        self, fund_id: int, total_shares: Decimal, total_invested: Decimal
    ) -> PortfolioHolding:
        holding = PortfolioHolding.open(
            holding_id=self._ids.next_id(),
            fund_id=fund_id,
            total_shares=total_shares,
            total_invested=total_invested,
            timestamp=self.clock(),
        )
        with self._registry_lock:
            self._holdings[fund_id] = holding
        return holding

    def get(self, fund_id: int) -> PortfolioHolding | None:
        """Return a snapshot of the fund's holding, or None."""
        if fund_id not in self._holdings:
            return None
        with self._lock_for(fund_id):
            holding = self._holdings.get(fund_id)
            return holding.snapshot() if holding is not None else None

    def list_all(self) -> list[PortfolioHolding]:
        """Return snapshots of every holding (one per fund with activity)."""
        with self._registry_lock:
            fund_ids = list(self._holdings)
        holdings = []
        for fund_id in fund_ids:
            holding = self.get(fund_id)
            if holding is not None:
                holdings.append(holding)
        return holdings

    def __len__(self) -> int:
        return len(self._holdings)
