"""
Core enumerations for the fund platform.

This module provides centralized enumerations for domain concepts
like fund risk levels, regions, and transaction states.
"""

from .regions import Region
from .risk_levels import RiskLevel
from .transaction_status import TransactionStatus

__all__ = ["RiskLevel", "Region", "TransactionStatus"]
