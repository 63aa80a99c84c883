"""
Fund-with-holding projection.

Joins catalog funds with their holdings and current NAV into display-ready
composites.
"""

from fundfolio.core.protocols import FundLookup, HoldingSource

from .fund import Fund
from .summary import FundWithHolding


class FundWithHoldingProjector:
    """Projects every catalog fund with its unrealized gain/loss."""

    def __init__(self, funds: FundLookup, holdings: HoldingSource) -> None:
        self.funds = funds
        self.holdings = holdings

    def project_all(self) -> list[FundWithHolding]:
        """Return one projection per catalog fund, in catalog order.

        Funds that were never bought carry no holding-derived fields.
        """
        return [self._project(fund) for fund in self.funds.list_all()]

    def project(self, fund_id: int) -> FundWithHolding | None:
        """Return the projection for one fund, or None if the fund is unknown."""
        fund = self.funds.get(fund_id)
        if fund is None:
            return None
        return self._project(fund)

    def _project(self, fund: Fund) -> FundWithHolding:
        holding = self.holdings.get(fund.id)
        if holding is None:
            return FundWithHolding(fund=fund)

        return FundWithHolding(
            fund=fund,
            holding=holding,
            current_value=holding.market_value(fund.nav),
            gain_loss=holding.unrealized_gain_loss(fund.nav),
            gain_loss_percent=holding.unrealized_gain_loss_percent(fund.nav),
        )
