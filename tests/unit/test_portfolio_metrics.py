"""
Unit tests for the portfolio summary calculator and fund projector.
"""

from decimal import Decimal

import pytest

from fundfolio.core.models.fund_catalog import FundCatalog
from fundfolio.core.models.fund_projection import FundWithHoldingProjector
from fundfolio.core.models.holdings_aggregator import HoldingsAggregator
from fundfolio.core.models.portfolio_metrics import PortfolioSummaryCalculator
from fundfolio.core.types.financial import round_money


class TestPortfolioSummaryCalculator:
    """Test suite for PortfolioSummaryCalculator."""

    @pytest.fixture
    def catalog(self) -> FundCatalog:
        return FundCatalog()

    @pytest.fixture
    def holdings(self) -> HoldingsAggregator:
        return HoldingsAggregator()

    def test_should_report_zeros_for_empty_portfolio(self, catalog, holdings) -> None:
        """Test that an empty portfolio summarizes to zeros."""
        summary = PortfolioSummaryCalculator(catalog, holdings).summarize()

        assert summary.total_value == Decimal("0")
        assert summary.total_invested == Decimal("0")
        assert summary.total_gain_loss_percent == Decimal("0")
        assert summary.daily_change == Decimal("0")
        assert summary.is_empty()

    def test_should_value_holding_at_live_nav(self, catalog, holdings, fund_data_factory) -> None:
        """Test mark-to-market totals and gain percent."""
        fund = catalog.create(fund_data_factory(nav=Decimal("120")))
        holdings.upsert(fund.id, Decimal("10"), Decimal("1000"))

        # Act
        summary = PortfolioSummaryCalculator(catalog, holdings).summarize()

        # Assert
        assert summary.total_value == Decimal("1200")
        assert summary.total_invested == Decimal("1000")
        assert summary.total_gain_loss == Decimal("200")
        assert summary.total_gain_loss_percent == Decimal("20")
        assert summary.holdings_count == 1

    def test_should_sum_across_funds(self, catalog, holdings, fund_data_factory) -> None:
        """Test totals across two funds with one gain and one loss."""
        fund_a = catalog.create(fund_data_factory(name="A", nav=Decimal("50")))
        fund_b = catalog.create(fund_data_factory(name="B", nav=Decimal("25")))
        holdings.upsert(fund_a.id, Decimal("20"), Decimal("800"))
        holdings.upsert(fund_b.id, Decimal("40"), Decimal("1200"))

        # Act
        summary = PortfolioSummaryCalculator(catalog, holdings).summarize()

        # Assert
        assert summary.total_value == Decimal("2000")
        assert summary.total_invested == Decimal("2000")
        assert summary.total_gain_loss == Decimal("0")
        assert summary.total_gain_loss_percent == Decimal("0")
        assert summary.holdings_count == 2

    def test_should_simulate_daily_change(self, catalog, holdings, fund_data_factory) -> None:
        """Test daily change derived from the configured percentage."""
        fund = catalog.create(fund_data_factory(nav=Decimal("100")))
        holdings.upsert(fund.id, Decimal("10"), Decimal("1000"))

        summary = PortfolioSummaryCalculator(catalog, holdings).summarize()

        assert summary.daily_change_percent == Decimal("0.76")
        assert round_money(summary.daily_change) == Decimal("7.60")

    def test_should_skip_holdings_of_unknown_funds(self, catalog, holdings) -> None:
        """Test unresolvable holdings are left out of totals but still counted."""
        holdings.upsert(77, Decimal("10"), Decimal("1000"))

        summary = PortfolioSummaryCalculator(catalog, holdings).summarize()

        assert summary.total_value == Decimal("0")
        assert summary.total_invested == Decimal("0")
        assert summary.holdings_count == 1


class TestFundWithHoldingProjector:
    """Test suite for FundWithHoldingProjector."""

    def test_should_project_every_fund_in_catalog_order(self, fund_data_factory) -> None:
        """Test funds with and without holdings are both projected."""
        catalog = FundCatalog()
        holdings = HoldingsAggregator()
        held = catalog.create(fund_data_factory(name="Held", nav=Decimal("120")))
        catalog.create(fund_data_factory(name="Idle"))
        holdings.upsert(held.id, Decimal("10"), Decimal("1000"))

        # Act
        projections = FundWithHoldingProjector(catalog, holdings).project_all()

        # Assert
        assert [p.fund.name for p in projections] == ["Held", "Idle"]
        held_view, idle_view = projections
        assert held_view.has_holding
        assert held_view.current_value == Decimal("1200")
        assert held_view.gain_loss == Decimal("200")
        assert held_view.gain_loss_percent == Decimal("20")
        assert not idle_view.has_holding
        assert idle_view.current_value is None
        assert idle_view.gain_loss_percent is None

    def test_should_project_single_fund(self, sample_fund_data) -> None:
        """Test single-fund projection and unknown ids."""
        catalog = FundCatalog()
        fund = catalog.create(sample_fund_data)
        projector = FundWithHoldingProjector(catalog, HoldingsAggregator())

        assert projector.project(fund.id).fund == fund
        assert projector.project(999) is None
