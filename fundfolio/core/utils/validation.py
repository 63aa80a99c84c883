"""
Validation utilities for core domain models.

Provides consistent validation across the application.
"""

from decimal import Decimal
from typing import Any

from fundfolio.core.exceptions.portfolio import ValidationError
from fundfolio.core.types.financial import ZERO, Numeric, to_decimal


def validate_fund_id(fund_id: Any, param_name: str = "fund_id") -> int:
    """Validate that a value is a usable fund identifier.

    Args:
        fund_id: Value to validate
        param_name: Parameter name for error messages

    Returns:
        The validated fund id

    Raises:
        ValidationError: If fund_id is not a positive integer
    """
    if fund_id is None:
        raise ValidationError(f"{param_name} is required", field=param_name)
    if isinstance(fund_id, bool) or not isinstance(fund_id, int):
        raise ValidationError(
            f"{param_name} must be an integer, got {type(fund_id).__name__}", field=param_name
        )
    if fund_id <= 0:
        raise ValidationError(f"{param_name} must be positive, got {fund_id}", field=param_name)
    return fund_id


def validate_positive(value: Numeric, param_name: str) -> Decimal:
    """Validate that a numeric value is positive.

    Args:
        value: Value to validate
        param_name: Parameter name for error messages

    Returns:
        The validated value as Decimal

    Raises:
        ValidationError: If value is not numeric or not positive
    """
    decimal_value = to_decimal(value, param_name)
    if decimal_value <= ZERO:
        raise ValidationError(f"{param_name} must be positive, got {value}", field=param_name)
    return decimal_value


def validate_non_negative(value: Numeric, param_name: str) -> Decimal:
    """Validate that a numeric value is zero or positive.

    Raises:
        ValidationError: If value is not numeric or negative
    """
    decimal_value = to_decimal(value, param_name)
    if decimal_value < ZERO:
        raise ValidationError(
            f"{param_name} must be non-negative, got {value}", field=param_name
        )
    return decimal_value


def validate_required_text(value: Any, param_name: str) -> str:
    """Validate that a text field is present and not blank.

    Returns:
        The stripped text

    Raises:
        ValidationError: If value is missing, not a string, or blank
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{param_name} cannot be empty", field=param_name)
    return value.strip()


def validate_max(value: Decimal, maximum: Decimal, param_name: str) -> Decimal:
    """Validate that a value does not exceed an upper limit."""
    if value > maximum:
        raise ValidationError(
            f"{param_name} too large: {value} > {maximum}", field=param_name
        )
    return value
