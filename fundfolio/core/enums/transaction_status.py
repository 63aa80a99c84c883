"""
Transaction status enumerations.
"""

from enum import StrEnum


class TransactionStatus(StrEnum):
    """
    Transaction lifecycle states.

    Purchases settle immediately, so every recorded transaction is completed.
    """

    COMPLETED = "completed"

    @property
    def is_final(self) -> bool:
        """Check if status is terminal."""
        return self == self.COMPLETED
