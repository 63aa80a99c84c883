"""
Purchase recording.

``RecordPurchase`` is the single transactional step that appends a
transaction to the ledger and folds it into the fund's holding. No caller can
observe one without the other.
"""

import threading
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from loguru import logger

from fundfolio.core.constants import MAX_TRANSACTION_AMOUNT
from fundfolio.core.types.financial import Numeric
from fundfolio.core.utils.validation import validate_fund_id, validate_max, validate_positive

from .fund_catalog import FundCatalog
from .holding import PortfolioHolding
from .holdings_aggregator import HoldingsAggregator
from .transaction import Transaction
from .transaction_ledger import TransactionLedger


@dataclass(frozen=True)
class PurchaseRequest:
    """Validated input for buying shares of a fund.

    Numeric fields accept Decimal, int, float or numeric strings and are
    normalized to Decimal.
    """

    fund_id: int
    amount: Decimal
    shares: Decimal
    nav_at_purchase: Decimal

    def __post_init__(self) -> None:
        """Validate request shape and positivity."""
        object.__setattr__(self, "fund_id", validate_fund_id(self.fund_id))
        amount = validate_positive(self.amount, "amount")
        object.__setattr__(self, "amount", validate_max(amount, MAX_TRANSACTION_AMOUNT, "amount"))
        object.__setattr__(self, "shares", validate_positive(self.shares, "shares"))
        object.__setattr__(
            self, "nav_at_purchase", validate_positive(self.nav_at_purchase, "nav_at_purchase")
        )

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "PurchaseRequest":
        """Build a request from a camelCase or snake_case mapping.

        Raises:
            ValidationError: If a required field is missing or invalid
        """

        def pick(snake: str, camel: str) -> Numeric:
            return data.get(snake, data.get(camel))  # type: ignore[return-value]

        return cls(
            fund_id=pick("fund_id", "fundId"),  # type: ignore[arg-type]
            amount=pick("amount", "amount"),  # type: ignore[arg-type]
            shares=pick("shares", "shares"),  # type: ignore[arg-type]
            nav_at_purchase=pick("nav_at_purchase", "navAtPurchase"),  # type: ignore[arg-type]
        )


@dataclass(frozen=True)
class PurchaseResult:
    """Outcome of a recorded purchase."""

    transaction: Transaction
    holding: PortfolioHolding


class RecordPurchase:
    """Command that records one purchase atomically."""

    def __init__(self, request: PurchaseRequest) -> None:
        self.request = request

    def execute(
        self,
        catalog: FundCatalog,
        ledger: TransactionLedger,
        aggregator: HoldingsAggregator,
        lock: threading.RLock,
    ) -> PurchaseResult:
        """Append the transaction and absorb it under ``lock``.

        Raises:
            FundNotFoundError: If the fund is not in the catalog; nothing is
                appended and no holding changes
        """
        request = self.request
        fund = catalog.require(request.fund_id)

        with lock:
            transaction = ledger.append(
                fund_id=fund.id,
                amount=request.amount,
                shares=request.shares,
                nav_at_purchase=request.nav_at_purchase,
            )
            holding = aggregator.absorb(transaction)

        logger.info(
            f"Purchase recorded: transaction {transaction.id} bought {transaction.shares} "
            f"shares of '{fund.name}' for {transaction.amount}"
        )
        return PurchaseResult(transaction=transaction, holding=holding)
