"""
Unit tests for catalog seeding.
"""

from decimal import Decimal

from fundfolio.core.enums import RiskLevel
from fundfolio.core.models.portfolio import Portfolio
from fundfolio.infrastructure.catalog import DEFAULT_FUNDS, build_default_portfolio, seed_catalog
from fundfolio.infrastructure.query import KeywordFundAnalyzer


class TestCatalogSeeding:
    """Test suite for default catalog seeding."""

    def test_should_define_six_default_funds(self) -> None:
        """Test the default catalog contents."""
        assert len(DEFAULT_FUNDS) == 6
        assert DEFAULT_FUNDS[0].name == "European Growth Fund"
        assert DEFAULT_FUNDS[0].nav == Decimal("125.47")
        assert DEFAULT_FUNDS[3].risk_level is RiskLevel.HIGH
        assert all(fund.min_investment == 1000 for fund in DEFAULT_FUNDS)

    def test_should_seed_funds_in_order(self) -> None:
        """Test seeding creates every fund with sequential ids."""
        portfolio = Portfolio()

        created = seed_catalog(portfolio)

        assert [fund.name for fund in portfolio.get_all_funds()] == [
            data.name for data in DEFAULT_FUNDS
        ]
        assert [fund.id for fund in created] == [1, 2, 3, 4, 5, 6]

    def test_should_build_seeded_portfolio_with_translator(self) -> None:
        """Test the default portfolio is ready for queries."""
        portfolio = build_default_portfolio(query_translator=KeywordFundAnalyzer())

        result = portfolio.analyze_funds("low risk")

        assert len(portfolio.get_all_funds()) == 6
        assert len(result.funds) == 3
        assert portfolio.get_portfolio_summary().holdings_count == 0
