"""
Shared test fixtures.
"""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

from fundfolio.core.enums import Region, RiskLevel
from fundfolio.core.models.fund import FundData


class SteppingClock:
    """Deterministic clock advancing by a fixed step on every call."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)):
        self.current = start or datetime(2024, 1, 1, tzinfo=UTC)
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current += self.step
        return value


def make_fund_data(**overrides) -> FundData:
    """Build fund data with sensible defaults."""
    values = {
        "name": "Test Growth Fund",
        "manager": "Test Asset Management",
        "nav": Decimal("100.00"),
        "year_return": "+10.0%",
        "risk_level": RiskLevel.MEDIUM,
        "expense_ratio": Decimal("0.75"),
        "objective": "Long-term capital growth.",
        "region": Region.US,
    }
    values.update(overrides)
    return FundData(**values)


@pytest.fixture
def sample_fund_data() -> FundData:
    """Fund data with a NAV of 100."""
    return make_fund_data()


@pytest.fixture
def fund_data_factory() -> Callable[..., FundData]:
    """Factory building fund data with overrides."""
    return make_fund_data


@pytest.fixture
def stepping_clock() -> SteppingClock:
    """Clock advancing one second per call."""
    return SteppingClock()


@pytest.fixture
def frozen_clock() -> SteppingClock:
    """Clock returning the same instant on every call."""
    return SteppingClock(step=timedelta(0))
