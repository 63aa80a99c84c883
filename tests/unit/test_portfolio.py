"""
Unit tests for the Portfolio storage facade.

Exercises the purchase flow end to end: fund lookup, ledger append, holding
absorption and the read-side summary and projections.
"""

from decimal import Decimal

import pytest

from fundfolio.core.exceptions.portfolio import (
    ConfigurationError,
    FundNotFoundError,
    ValidationError,
)
from fundfolio.core.interfaces.query import FundAnalysisResult, IFundQueryTranslator
from fundfolio.core.models.portfolio import Portfolio
from fundfolio.core.models.purchase import PurchaseRequest
from fundfolio.core.types.financial import round_money, safe_decimal_comparison


def buy(portfolio: Portfolio, fund_id: int, amount: str, shares: str, nav: str):
    return portfolio.create_transaction(
        PurchaseRequest(fund_id=fund_id, amount=amount, shares=shares, nav_at_purchase=nav)
    )


class TestPurchaseRequest:
    """Test suite for PurchaseRequest validation."""

    def test_should_normalize_numeric_fields(self) -> None:
        """Test that numeric strings become Decimal."""
        request = PurchaseRequest(fund_id=1, amount="1000", shares=8, nav_at_purchase=125.0)

        assert request.amount == Decimal("1000")
        assert request.shares == Decimal("8")
        assert request.nav_at_purchase == Decimal("125.0")

    def test_should_build_from_camel_case_mapping(self) -> None:
        """Test mapping input with camelCase keys."""
        request = PurchaseRequest.from_mapping(
            {"fundId": 2, "amount": "500", "shares": "6", "navAtPurchase": "83.33"}
        )

        assert request.fund_id == 2
        assert request.nav_at_purchase == Decimal("83.33")

    @pytest.mark.parametrize(
        ("data", "field"),
        [
            ({"amount": "1", "shares": "1", "navAtPurchase": "1"}, "fund_id"),
            ({"fundId": 1, "amount": "-5", "shares": "1", "navAtPurchase": "1"}, "amount"),
            ({"fundId": 1, "amount": "5", "shares": "0", "navAtPurchase": "1"}, "shares"),
            ({"fundId": 1, "amount": "5", "shares": "1"}, "nav_at_purchase"),
        ],
    )
    def test_should_name_invalid_field(self, data, field) -> None:
        """Test that validation errors name the offending field."""
        with pytest.raises(ValidationError) as exc_info:
            PurchaseRequest.from_mapping(data)

        assert exc_info.value.field == field


class TestPortfolioPurchases:
    """Test suite for recording purchases through the facade."""

    @pytest.fixture
    def portfolio(self, stepping_clock) -> Portfolio:
        return Portfolio(clock=stepping_clock)

    def test_should_blend_two_purchases_of_one_fund(self, portfolio, fund_data_factory) -> None:
        """Test two buys of the same fund produce a weighted average."""
        fund = portfolio.create_fund(fund_data_factory(nav=Decimal("125")))

        # Act
        buy(portfolio, fund.id, "1000", "8", "125")
        buy(portfolio, fund.id, "500", "6", "83.33")

        # Assert
        holding = portfolio.get_portfolio_holding(fund.id)
        assert holding.total_shares == Decimal("14")
        assert holding.total_invested == Decimal("1500")
        assert round_money(holding.average_cost) == Decimal("107.14")
        assert safe_decimal_comparison(holding.average_cost * Decimal("14"), Decimal("1500"))
        assert len(portfolio.get_transactions_by_fund(fund.id)) == 2

    def test_should_leave_state_untouched_for_unknown_fund(
        self, portfolio, sample_fund_data
    ) -> None:
        """Test buying an unknown fund records nothing."""
        portfolio.create_fund(sample_fund_data)

        with pytest.raises(FundNotFoundError):
            buy(portfolio, 999, "100", "1", "100")

        assert portfolio.get_all_transactions() == []
        assert portfolio.get_all_holdings() == []
        assert portfolio.get_portfolio_holding(999) is None

    def test_should_list_transactions_newest_first(self, portfolio, fund_data_factory) -> None:
        """Test the global transaction list ordering."""
        fund_a = portfolio.create_fund(fund_data_factory(name="A"))
        fund_b = portfolio.create_fund(fund_data_factory(name="B"))
        first = buy(portfolio, fund_a.id, "100", "1", "100")
        second = buy(portfolio, fund_b.id, "200", "2", "100")

        assert [t.id for t in portfolio.get_all_transactions()] == [second.id, first.id]

    def test_should_keep_nav_at_purchase_independent_of_live_nav(
        self, portfolio, fund_data_factory
    ) -> None:
        """Test the recorded NAV is the caller's snapshot."""
        fund = portfolio.create_fund(fund_data_factory(nav=Decimal("125")))

        transaction = buy(portfolio, fund.id, "1000", "10", "100")

        assert transaction.nav_at_purchase == Decimal("100")
        assert portfolio.get_fund(fund.id).nav == Decimal("125")

    def test_should_keep_holdings_conserved(self, portfolio, fund_data_factory) -> None:
        """Test every holding equals the sums over its transactions."""
        funds = [portfolio.create_fund(fund_data_factory(name=f"F{i}")) for i in range(3)]
        for index, fund in enumerate(funds):
            for step in range(index + 1):
                buy(portfolio, fund.id, f"{100 + step}.50", f"{step + 1}.25", "100")

        for holding in portfolio.get_all_holdings():
            transactions = portfolio.get_transactions_by_fund(holding.fund_id)
            assert holding.total_invested == sum(t.amount for t in transactions)
            assert holding.total_shares == sum(t.shares for t in transactions)
            assert holding.is_consistent()


class TestPortfolioReads:
    """Test suite for summary and projection reads."""

    @pytest.fixture
    def portfolio(self) -> Portfolio:
        return Portfolio()

    def test_should_summarize_gain_at_live_nav(self, portfolio, fund_data_factory) -> None:
        """Test one holding marked to a higher NAV."""
        fund = portfolio.create_fund(fund_data_factory(nav=Decimal("120")))
        buy(portfolio, fund.id, "1000", "10", "100")

        summary = portfolio.get_portfolio_summary()

        assert summary.total_value == Decimal("1200")
        assert summary.total_invested == Decimal("1000")
        assert summary.total_gain_loss == Decimal("200")
        assert summary.total_gain_loss_percent == Decimal("20")
        assert summary.holdings_count == 1

    def test_should_summarize_empty_portfolio(self, portfolio, sample_fund_data) -> None:
        """Test a catalog with no purchases."""
        portfolio.create_fund(sample_fund_data)

        summary = portfolio.get_portfolio_summary()

        assert summary.total_value == Decimal("0")
        assert summary.total_gain_loss_percent == Decimal("0")
        assert summary.holdings_count == 0
        assert len(portfolio.get_funds_with_holdings()) == 1

    def test_should_return_identical_results_for_repeated_reads(
        self, portfolio, fund_data_factory
    ) -> None:
        """Test reads do not change state."""
        fund = portfolio.create_fund(fund_data_factory(nav=Decimal("120")))
        buy(portfolio, fund.id, "1000", "10", "100")

        assert portfolio.get_portfolio_summary() == portfolio.get_portfolio_summary()
        assert portfolio.get_funds_with_holdings() == portfolio.get_funds_with_holdings()
        assert portfolio.get_all_transactions() == portfolio.get_all_transactions()

    def test_should_project_fund_with_holding(self, portfolio, fund_data_factory) -> None:
        """Test single-fund projection through the facade."""
        fund = portfolio.create_fund(fund_data_factory(nav=Decimal("120")))
        buy(portfolio, fund.id, "1000", "10", "100")

        projection = portfolio.get_fund_with_holding(fund.id)

        assert projection.current_value == Decimal("1200")
        assert portfolio.get_fund_with_holding(999) is None


class TestPortfolioHoldingUpdates:
    """Test suite for direct holding upserts."""

    def test_should_upsert_holding_for_known_fund(self, sample_fund_data) -> None:
        """Test upsert recomputes the average cost."""
        portfolio = Portfolio()
        fund = portfolio.create_fund(sample_fund_data)

        holding = portfolio.update_portfolio_holding(fund.id, Decimal("4"), Decimal("500"))

        assert holding.average_cost == Decimal("125")
        assert portfolio.get_portfolio_holding(fund.id) == holding

    def test_should_reject_upsert_for_unknown_fund(self) -> None:
        """Test the fund must exist before its holding can be set."""
        portfolio = Portfolio()

        with pytest.raises(FundNotFoundError):
            portfolio.update_portfolio_holding(5, Decimal("4"), Decimal("500"))


class TestPortfolioAnalysis:
    """Test suite for fund query delegation."""

    def test_should_require_a_query_translator(self) -> None:
        """Test analysis fails without a configured translator."""
        with pytest.raises(ConfigurationError):
            Portfolio().analyze_funds("low risk")

    def test_should_delegate_to_translator(self, sample_fund_data) -> None:
        """Test the translator receives the catalog funds."""

        class EchoTranslator(IFundQueryTranslator):
            def analyze(self, query, funds):
                return FundAnalysisResult(funds=list(funds), explanation=query)

        portfolio = Portfolio(query_translator=EchoTranslator())
        fund = portfolio.create_fund(sample_fund_data)

        result = portfolio.analyze_funds("everything")

        assert result.funds == [fund]
        assert result.explanation == "everything"
        assert result.criteria == []
