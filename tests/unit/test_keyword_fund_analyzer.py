"""
Unit tests for the keyword fund analyzer.
"""

from datetime import UTC, datetime
from decimal import Decimal

import pytest

from fundfolio.core.enums import Region, RiskLevel
from fundfolio.core.exceptions.portfolio import ValidationError
from fundfolio.core.models.fund import Fund
from fundfolio.infrastructure.catalog import DEFAULT_FUNDS
from fundfolio.infrastructure.query import KeywordFundAnalyzer

NOW = datetime(2024, 1, 1, tzinfo=UTC)


@pytest.fixture
def default_funds() -> list[Fund]:
    """The six seeded European funds."""
    return [Fund.from_data(index + 1, data, NOW) for index, data in enumerate(DEFAULT_FUNDS)]


@pytest.fixture
def analyzer() -> KeywordFundAnalyzer:
    return KeywordFundAnalyzer()


class TestRiskQueries:
    """Test suite for risk-level heuristics."""

    def test_should_select_low_risk_funds(self, analyzer, default_funds) -> None:
        """Test conservative queries select low-risk funds."""
        result = analyzer.analyze("Show me safe, low risk funds", default_funds)

        assert {f.name for f in result.funds} == {
            "European Value Fund",
            "European Bond Fund",
            "European Dividend Fund",
        }
        assert result.criteria == ["Risk Level: Low"]

    def test_should_select_high_risk_funds(self, analyzer, default_funds) -> None:
        """Test aggressive queries select high-risk funds."""
        result = analyzer.analyze("aggressive funds", default_funds)

        assert [f.name for f in result.funds] == ["European Tech Fund"]
        assert all(f.risk_level is RiskLevel.HIGH for f in result.funds)

    def test_should_default_to_medium_risk(self, analyzer, default_funds) -> None:
        """Test a bare risk query selects medium-risk funds."""
        result = analyzer.analyze("what is the risk", default_funds)

        assert result.criteria == ["Risk Level: Medium"]
        assert all(f.risk_level is RiskLevel.MEDIUM for f in result.funds)


class TestReturnQueries:
    """Test suite for performance heuristics."""

    def test_should_select_top_performers(self, analyzer, default_funds) -> None:
        """Test 'best returns' keeps the top 30% by 1-year return."""
        result = analyzer.analyze("best returns", default_funds)

        assert [f.name for f in result.funds] == ["European Tech Fund", "European Growth Fund"]
        assert result.criteria == ["High Returns", "1-Year Performance"]

    def test_should_select_positive_returns(self, analyzer, default_funds) -> None:
        """Test plain performance queries keep positive returns, best first."""
        result = analyzer.analyze("funds with good performance", default_funds)

        assert len(result.funds) == 6
        assert result.funds[0].name == "European Tech Fund"


class TestAttributeQueries:
    """Test suite for region, fee, sector and minimum investment heuristics."""

    def test_should_select_offshore_funds(self, analyzer, default_funds) -> None:
        """Test international queries select offshore funds."""
        result = analyzer.analyze("international exposure", default_funds)

        assert len(result.funds) == 6
        assert result.criteria == [f"Region: {Region.OFFSHORE.value}"]

    def test_should_not_treat_us_inside_words_as_region(self, analyzer, default_funds) -> None:
        """Test 'us' only matches as a whole word."""
        result = analyzer.analyze("sustainable investing", default_funds)

        assert result.criteria == ["ESG", "Sustainable Investing"]

    def test_should_select_cheapest_half_by_expense_ratio(self, analyzer, default_funds) -> None:
        """Test fee queries keep the cheapest half."""
        result = analyzer.analyze("cheap funds", default_funds)

        assert [f.expense_ratio for f in result.funds] == [
            Decimal("0.45"),
            Decimal("0.65"),
            Decimal("0.70"),
        ]

    def test_should_select_technology_funds(self, analyzer, default_funds) -> None:
        """Test sector queries match fund names and objectives."""
        result = analyzer.analyze("technology", default_funds)

        assert "European Tech Fund" in {f.name for f in result.funds}
        assert result.criteria == ["Technology Sector", "Growth Focus"]

    def test_should_select_bond_funds(self, analyzer, default_funds) -> None:
        """Test bond queries match fixed-income funds."""
        result = analyzer.analyze("bonds", default_funds)

        names = {f.name for f in result.funds}
        assert "European Bond Fund" in names
        assert "European Tech Fund" not in names

    def test_should_filter_by_minimum_investment_amount(
        self, analyzer, default_funds
    ) -> None:
        """Test a dollar amount in the query caps the minimum investment."""
        result = analyzer.analyze("I only have $500", default_funds)

        assert result.funds == []
        assert result.criteria == ["Min Investment <= $500"]

    def test_should_default_minimum_investment_target(self, analyzer, default_funds) -> None:
        """Test 'affordable' uses the default target amount."""
        result = analyzer.analyze("affordable", default_funds)

        assert len(result.funds) == 6
        assert result.criteria == ["Min Investment <= $5,000"]


class TestKeywordSearch:
    """Test suite for the keyword fallback."""

    def test_should_match_manager_names(self, analyzer, default_funds) -> None:
        """Test plain keywords search name, manager and objective."""
        result = analyzer.analyze("Nordea", default_funds)

        assert [f.name for f in result.funds] == ["European ESG Fund"]
        assert result.criteria == ["Keyword Match"]

    def test_should_fall_back_to_popular_funds(self, analyzer, default_funds) -> None:
        """Test unmatched queries return the first six funds."""
        result = analyzer.analyze("zz qqqq", default_funds)

        assert result.funds == default_funds[:6]
        assert result.criteria == ["Popular Funds"]

    @pytest.mark.parametrize("query", ["", "   "])
    def test_should_reject_empty_query(self, analyzer, default_funds, query: str) -> None:
        """Test empty queries are invalid."""
        with pytest.raises(ValidationError):
            analyzer.analyze(query, default_funds)
