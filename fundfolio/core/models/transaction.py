"""
Transaction domain model.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from fundfolio.core.enums import TransactionStatus
from fundfolio.core.exceptions.portfolio import ValidationError
from fundfolio.core.types.financial import ZERO


@dataclass(frozen=True)
class Transaction:
    """Represents a recorded fund purchase. Immutable once appended."""

    id: int
    fund_id: int
    amount: Decimal
    shares: Decimal
    nav_at_purchase: Decimal
    status: TransactionStatus
    created_at: datetime

    def __post_init__(self) -> None:
        """Validate transaction data after initialization."""
        if self.amount <= ZERO:
            raise ValidationError(f"Amount must be positive, got {self.amount}", field="amount")
        if self.shares <= ZERO:
            raise ValidationError(f"Shares must be positive, got {self.shares}", field="shares")
        if self.nav_at_purchase <= ZERO:
            raise ValidationError(
                f"NAV at purchase must be positive, got {self.nav_at_purchase}",
                field="nav_at_purchase",
            )

    def cost_per_share(self) -> Decimal:
        """Effective price paid per share for this purchase."""
        return self.amount / self.shares
