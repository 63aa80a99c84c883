"""
Portfolio metrics and calculations.

This module derives the aggregate portfolio summary from current holdings and
live fund NAVs. It is a pure read over the state it is given.
"""

from loguru import logger

from fundfolio.core.constants import SIMULATED_DAILY_CHANGE_PERCENT
from fundfolio.core.protocols import FundLookup, HoldingSource
from fundfolio.core.types.financial import HUNDRED, ZERO, calculate_gain_loss_percent

from .summary import PortfolioSummary


class PortfolioSummaryCalculator:
    """Portfolio summary calculations.

    Values holdings at each fund's live NAV (not the NAV at purchase), so the
    summary is an unrealized mark-to-market view.
    """

    def __init__(self, funds: FundLookup, holdings: HoldingSource) -> None:
        """Initialize with the fund and holding sources.

        Args:
            funds: Fund lookup used to resolve live NAVs
            holdings: Source of current holdings
        """
        self.funds = funds
        self.holdings = holdings

    def summarize(self) -> PortfolioSummary:
        """Calculate totals, gain/loss and the simulated daily change.

        Holdings whose fund cannot be resolved are left out of the value and
        invested totals but still counted in ``holdings_count``.

        Returns:
            Portfolio summary
        """
        holdings = self.holdings.list_all()

        total_value = ZERO
        total_invested = ZERO
        for holding in holdings:
            fund = self.funds.get(holding.fund_id)
            if fund is None:
                logger.warning(f"Skipping holding {holding.id}: fund {holding.fund_id} not found")
                continue
            total_value += holding.market_value(fund.nav)
            total_invested += holding.total_invested

        total_gain_loss = total_value - total_invested
        daily_change_percent = SIMULATED_DAILY_CHANGE_PERCENT

        return PortfolioSummary(
            total_value=total_value,
            total_invested=total_invested,
            total_gain_loss=total_gain_loss,
            total_gain_loss_percent=calculate_gain_loss_percent(total_gain_loss, total_invested),
            daily_change=total_value * daily_change_percent / HUNDRED,
            daily_change_percent=daily_change_percent,
            holdings_count=len(holdings),
        )
