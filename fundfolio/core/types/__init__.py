"""
Core type definitions and utilities.
"""

# Re-export financial utilities for easy access
from .financial import (
    HUNDRED,
    ONE,
    ZERO,
    Numeric,
    calculate_average_cost,
    calculate_gain_loss_percent,
    calculate_market_value,
    round_money,
    round_percentage,
    round_shares,
    safe_decimal_comparison,
    to_decimal,
)

__all__ = [
    # Utility functions
    "to_decimal",
    "round_money",
    "round_shares",
    "round_percentage",
    "calculate_average_cost",
    "calculate_market_value",
    "calculate_gain_loss_percent",
    "safe_decimal_comparison",
    # Constants
    "ZERO",
    "ONE",
    "HUNDRED",
    # Aliases
    "Numeric",
]
