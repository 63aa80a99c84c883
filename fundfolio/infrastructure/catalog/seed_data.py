"""
Default fund catalog.

Six European mutual funds used to seed a fresh portfolio.
"""

from collections.abc import Iterable
from decimal import Decimal

from loguru import logger

from fundfolio.core.enums import Region, RiskLevel
from fundfolio.core.interfaces.query import IFundQueryTranslator
from fundfolio.core.interfaces.storage import IPortfolioStorage
from fundfolio.core.models.fund import Fund, FundData
from fundfolio.core.models.portfolio import Portfolio
from fundfolio.core.protocols import Clock, utc_now

DEFAULT_FUNDS: tuple[FundData, ...] = (
    FundData(
        name="European Growth Fund",
        manager="Deutsche Asset Management",
        nav=Decimal("125.47"),
        year_return="+12.3%",
        risk_level=RiskLevel.MEDIUM,
        expense_ratio=Decimal("0.75"),
        objective=(
            "The fund seeks to achieve long-term capital growth by investing primarily in "
            "European equity securities. The fund focuses on companies with strong growth "
            "potential across various sectors within the European market."
        ),
        region=Region.OFFSHORE,
        currency="EUR",
    ),
    FundData(
        name="European Value Fund",
        manager="Allianz Global Investors",
        nav=Decimal("89.23"),
        year_return="+8.7%",
        risk_level=RiskLevel.LOW,
        expense_ratio=Decimal("0.65"),
        objective=(
            "Seeks to provide long-term capital appreciation by investing in undervalued "
            "European companies with strong fundamentals and potential for price appreciation."
        ),
        region=Region.OFFSHORE,
        currency="EUR",
    ),
    FundData(
        name="European Bond Fund",
        manager="BNP Paribas Asset Management",
        nav=Decimal("102.18"),
        year_return="+4.2%",
        risk_level=RiskLevel.LOW,
        expense_ratio=Decimal("0.45"),
        objective=(
            "Aims to provide regular income and capital preservation by investing in "
            "high-quality European government and corporate bonds."
        ),
        region=Region.OFFSHORE,
        currency="EUR",
    ),
    FundData(
        name="European Tech Fund",
        manager="Amundi Asset Management",
        nav=Decimal("178.92"),
        year_return="+18.5%",
        risk_level=RiskLevel.HIGH,
        expense_ratio=Decimal("0.95"),
        objective=(
            "Focuses on European technology companies with innovative products and services, "
            "seeking high growth potential in the digital economy."
        ),
        region=Region.OFFSHORE,
        currency="EUR",
    ),
    FundData(
        name="European ESG Fund",
        manager="Nordea Asset Management",
        nav=Decimal("94.75"),
        year_return="+9.8%",
        risk_level=RiskLevel.MEDIUM,
        expense_ratio=Decimal("0.80"),
        objective=(
            "Invests in European companies that meet strict environmental, social, and "
            "governance criteria while seeking competitive returns."
        ),
        region=Region.OFFSHORE,
        currency="EUR",
    ),
    FundData(
        name="European Dividend Fund",
        manager="Schroders Investment",
        nav=Decimal("67.34"),
        year_return="+6.4%",
        risk_level=RiskLevel.LOW,
        expense_ratio=Decimal("0.70"),
        objective=(
            "Provides regular dividend income by investing in European companies with strong "
            "dividend-paying histories and sustainable business models."
        ),
        region=Region.OFFSHORE,
        currency="EUR",
    ),
)


def seed_catalog(
    storage: IPortfolioStorage, funds: Iterable[FundData] = DEFAULT_FUNDS
) -> list[Fund]:
    """Create each fund in the storage's catalog.

    Returns:
        The created funds in seeding order
    """
    created = [storage.create_fund(fund_data) for fund_data in funds]
    logger.info(f"Seeded catalog with {len(created)} funds")
    return created


def build_default_portfolio(
    clock: Clock = utc_now,
    query_translator: IFundQueryTranslator | None = None,
    funds: Iterable[FundData] = DEFAULT_FUNDS,
) -> Portfolio:
    """Create a portfolio seeded with the given (default: European) funds."""
    portfolio = Portfolio(clock=clock, query_translator=query_translator)
    seed_catalog(portfolio, funds)
    return portfolio
