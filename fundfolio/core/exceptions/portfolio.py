"""
Custom exception hierarchy for the fund portfolio engine.

This module defines domain-specific exceptions for better error handling.
"""


class FundfolioException(Exception):
    """Base exception for all fundfolio errors."""

    pass


class ValidationError(FundfolioException):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class NotFoundError(FundfolioException):
    """Raised when a referenced entity does not exist."""

    pass


class FundNotFoundError(NotFoundError):
    """Raised when a fund id cannot be resolved in the catalog."""

    def __init__(self, fund_id: int):
        self.fund_id = fund_id
        super().__init__(f"Fund not found: {fund_id}")


class CalculationError(FundfolioException):
    """Raised when a calculation would produce an undefined result."""

    pass


class DataError(FundfolioException):
    """Raised when catalog data access or parsing fails."""

    pass


class ConfigurationError(FundfolioException):
    """Raised when configuration is invalid."""

    pass
