"""
Financial data types for portfolio accounting.

All money, share and NAV values are handled as ``decimal.Decimal`` inside the
engine. Totals are exact sums and the weighted average cost keeps the full
context precision; rounding happens only when values are presented.

Precision rules:
- Currency amounts and NAVs are presented with 2 decimal places
- Share counts are presented with 4 decimal places
- Percentages are presented with 4 decimal places
- Floats are converted through ``str`` so ``0.1`` stays ``Decimal("0.1")``
- NaN and Infinity are never accepted
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from fundfolio.core.constants import MONEY_DECIMALS, PERCENTAGE_DECIMALS, SHARE_DECIMALS
from fundfolio.core.exceptions.portfolio import CalculationError, ValidationError

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")

Numeric = Decimal | int | float | str


def to_decimal(value: Numeric, param_name: str = "value") -> Decimal:
    """Convert various numeric types to a finite Decimal.

    Args:
        value: Numeric value to convert
        param_name: Parameter name for error messages

    Returns:
        Decimal representation of the value

    Raises:
        ValidationError: If the value is missing, not numeric, or not finite

    Examples:
        >>> to_decimal("125.47")
        Decimal('125.47')
        >>> to_decimal(0.1)
        Decimal('0.1')
    """
    if value is None:
        raise ValidationError(f"{param_name} is required", field=param_name)
    if isinstance(value, bool):
        raise ValidationError(f"{param_name} must be numeric, got bool", field=param_name)

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int | float):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as e:
            raise ValidationError(
                f"{param_name} must be numeric, got '{value}'", field=param_name
            ) from e
    else:
        raise ValidationError(
            f"{param_name} must be numeric, got {type(value).__name__}", field=param_name
        )

    if not result.is_finite():
        raise ValidationError(f"{param_name} must be finite, got {value}", field=param_name)
    return result


def _quantize(value: Decimal, places: int) -> Decimal:
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def round_money(amount: Decimal) -> Decimal:
    """Round a currency amount or NAV for presentation."""
    return _quantize(amount, MONEY_DECIMALS)


def round_shares(shares: Decimal) -> Decimal:
    """Round a share count for presentation."""
    return _quantize(shares, SHARE_DECIMALS)


def round_percentage(percentage: Decimal) -> Decimal:
    """Round a percentage for presentation."""
    return _quantize(percentage, PERCENTAGE_DECIMALS)


def calculate_average_cost(total_invested: Decimal, total_shares: Decimal) -> Decimal:
    """Calculate weighted average cost per share.

    Args:
        total_invested: Cumulative principal
        total_shares: Cumulative shares

    Returns:
        Average cost per share at full precision

    Raises:
        CalculationError: If total_shares is not positive
    """
    if total_shares <= ZERO:
        raise CalculationError(
            f"Cannot compute average cost with non-positive shares: {total_shares}"
        )
    return total_invested / total_shares


def calculate_market_value(shares: Decimal, nav: Decimal) -> Decimal:
    """Calculate mark-to-market value of a share count at a NAV."""
    return shares * nav


def calculate_gain_loss_percent(gain_loss: Decimal, invested: Decimal) -> Decimal:
    """Express a gain/loss as a percentage of the amount invested.

    Returns zero when nothing was invested instead of dividing by zero.
    """
    if invested <= ZERO:
        return ZERO
    return gain_loss / invested * HUNDRED


def safe_decimal_comparison(a: Decimal, b: Decimal, tolerance: Decimal = Decimal("1e-9")) -> bool:
    """Compare decimals with tolerance.

    Examples:
        >>> safe_decimal_comparison(Decimal("1500") / Decimal("14") * 14, Decimal("1500"))
        True
    """
    return abs(a - b) < tolerance
