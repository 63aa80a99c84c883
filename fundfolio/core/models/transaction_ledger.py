"""
Transaction ledger: append-only log of fund purchases.

The ledger is a leaf component. It does not know the fund catalog; callers
resolve fund ids before appending.
"""

import threading
from dataclasses import dataclass, field
from decimal import Decimal

from loguru import logger

from fundfolio.core.constants import MAX_TRANSACTION_AMOUNT
from fundfolio.core.enums import TransactionStatus
from fundfolio.core.protocols import Clock, utc_now
from fundfolio.core.utils.decorators import validate_inputs
from fundfolio.core.utils.id_generator import IdGenerator
from fundfolio.core.utils.validation import validate_max

from .transaction import Transaction


@dataclass
class TransactionLedger:
    """Append-only, time-ordered transaction log.

    Thread Safety:
        ``append`` holds an internal RLock so id assignment and insertion
        order always agree.
    """

    clock: Clock = utc_now
    _entries: list[Transaction] = field(default_factory=list, init=False, repr=False)
    _ids: IdGenerator = field(default_factory=IdGenerator, init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    @validate_inputs
    def append(
        self,
        fund_id: int,
        amount: Decimal,
        shares: Decimal,
        nav_at_purchase: Decimal,
    ) -> Transaction:
        """Record a completed purchase.

        Args:
            fund_id: Fund the purchase refers to
            amount: Amount invested (positive)
            shares: Shares bought (positive)
            nav_at_purchase: NAV snapshot at purchase time (positive)

        Returns:
            The appended transaction

        Raises:
            ValidationError: If any argument is missing, non-numeric or not positive
        """
        validate_max(amount, MAX_TRANSACTION_AMOUNT, "amount")

        with self._lock:
            transaction = Transaction(
                id=self._ids.next_id(),
                fund_id=fund_id,
                amount=amount,
                shares=shares,
                nav_at_purchase=nav_at_purchase,
                status=TransactionStatus.COMPLETED,
                created_at=self.clock(),
            )
            self._entries.append(transaction)

        logger.debug(
            f"Transaction {transaction.id} appended: fund={fund_id} amount={amount} shares={shares}"
        )
        return transaction

    def list_all(self) -> list[Transaction]:
        """Return transactions newest first.

        Equal timestamps are ordered by reverse insertion, so the later
        append is treated as newer.
        """
        with self._lock:
            entries = list(self._entries)
        indexed = sorted(
            enumerate(entries), key=lambda item: (item[1].created_at, item[0]), reverse=True
        )
        return [transaction for _, transaction in indexed]

    def list_by_fund(self, fund_id: int) -> list[Transaction]:
        """Return one fund's transactions in insertion order."""
        with self._lock:
            return [t for t in self._entries if t.fund_id == fund_id]

    def __len__(self) -> int:
        return len(self._entries)
