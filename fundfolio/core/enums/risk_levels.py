"""
Fund risk level enumerations.

This module defines the allowed risk categories for catalog funds.
"""

from enum import StrEnum


class RiskLevel(StrEnum):
    """
    Allowed fund risk categories.

    Values match the display text used by the catalog.
    """

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def from_string(cls, value: str) -> "RiskLevel":
        """
        Convert string to RiskLevel enum, with case-insensitive matching.

        Args:
            value: String representation of the risk level

        Returns:
            Corresponding RiskLevel enum value

        Raises:
            ValueError: If risk level is not supported
        """
        normalized = value.strip().lower()
        for level in cls:
            if level.value.lower() == normalized:
                return level

        raise ValueError(
            f"Unsupported risk level: {value}. "
            f"Supported risk levels: {', '.join([level.value for level in cls])}"
        )
