"""
Fund domain models.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any

from fundfolio.core.constants import DEFAULT_CURRENCY, DEFAULT_MIN_INVESTMENT
from fundfolio.core.enums import Region, RiskLevel
from fundfolio.core.exceptions.portfolio import ValidationError
from fundfolio.core.types.financial import ZERO, to_decimal
from fundfolio.core.utils.validation import (
    validate_non_negative,
    validate_positive,
    validate_required_text,
)

_RETURN_PATTERN = re.compile(r"[^0-9.\-]")


def _coerce_enum(value: Any, enum_cls: type, param_name: str) -> Any:
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls.from_string(value)
        except ValueError as e:
            raise ValidationError(str(e), field=param_name) from e
    raise ValidationError(
        f"{param_name} must be a {enum_cls.__name__}, got {type(value).__name__}",
        field=param_name,
    )


@dataclass(frozen=True)
class FundData:
    """Input for creating a catalog fund.

    Carries every Fund attribute except the catalog-assigned id and timestamp.
    Values are validated and normalized on construction.
    """

    name: str
    manager: str
    nav: Decimal
    year_return: str
    risk_level: RiskLevel
    expense_ratio: Decimal
    min_investment: int = DEFAULT_MIN_INVESTMENT
    objective: str | None = None
    region: Region = Region.US
    aum: str | None = None
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        """Validate and normalize fund data after initialization."""
        # frozen dataclass: normalized values are written through object.__setattr__
        object.__setattr__(self, "name", validate_required_text(self.name, "name"))
        object.__setattr__(self, "manager", validate_required_text(self.manager, "manager"))
        object.__setattr__(self, "nav", validate_positive(self.nav, "nav"))
        object.__setattr__(
            self, "expense_ratio", validate_non_negative(self.expense_ratio, "expense_ratio")
        )
        object.__setattr__(
            self, "year_return", validate_required_text(self.year_return, "year_return")
        )
        object.__setattr__(
            self, "risk_level", _coerce_enum(self.risk_level, RiskLevel, "risk_level")
        )
        object.__setattr__(self, "region", _coerce_enum(self.region, Region, "region"))
        object.__setattr__(
            self, "currency", validate_required_text(self.currency, "currency").upper()
        )

        if isinstance(self.min_investment, bool) or not isinstance(self.min_investment, int):
            raise ValidationError(
                f"min_investment must be an integer, got {self.min_investment!r}",
                field="min_investment",
            )
        if self.min_investment < 0:
            raise ValidationError(
                f"min_investment must be non-negative, got {self.min_investment}",
                field="min_investment",
            )


@dataclass(frozen=True)
class Fund:
    """A catalog fund. Read-only outside the catalog."""

    id: int
    name: str
    manager: str
    nav: Decimal
    year_return: str
    risk_level: RiskLevel
    min_investment: int
    expense_ratio: Decimal
    objective: str | None
    region: Region
    aum: str | None
    currency: str
    created_at: datetime = field(compare=False)

    @classmethod
    def from_data(cls, fund_id: int, data: FundData, created_at: datetime) -> "Fund":
        """Build a catalog fund from validated input data."""
        return cls(
            id=fund_id,
            name=data.name,
            manager=data.manager,
            nav=data.nav,
            year_return=data.year_return,
            risk_level=data.risk_level,
            min_investment=data.min_investment,
            expense_ratio=data.expense_ratio,
            objective=data.objective,
            region=data.region,
            aum=data.aum,
            currency=data.currency,
            created_at=created_at,
        )

    def year_return_value(self) -> Decimal:
        """Parse the signed trailing-year return text (e.g. "+12.3%") into a number."""
        cleaned = _RETURN_PATTERN.sub("", self.year_return)
        if not cleaned:
            return ZERO
        try:
            return to_decimal(cleaned, "year_return")
        except ValidationError:
            return ZERO

    def search_text(self) -> str:
        """Lower-cased name, manager and objective used by keyword queries."""
        return f"{self.name} {self.manager} {self.objective or ''}".lower()
