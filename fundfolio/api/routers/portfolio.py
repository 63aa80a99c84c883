"""
Portfolio API endpoints.
"""

from fastapi import APIRouter, Depends

from fundfolio.api.dependencies import get_portfolio
from fundfolio.api.schemas.api_models import FundWithHoldingResponse, PortfolioSummaryResponse
from fundfolio.core.models.portfolio import Portfolio

router = APIRouter()


@router.get("/summary", response_model=PortfolioSummaryResponse)
async def get_summary(portfolio: Portfolio = Depends(get_portfolio)) -> PortfolioSummaryResponse:
    """Get aggregate portfolio totals."""
    return PortfolioSummaryResponse.from_summary(portfolio.get_portfolio_summary())


@router.get("/holdings", response_model=list[FundWithHoldingResponse])
async def get_holdings(
    portfolio: Portfolio = Depends(get_portfolio),
) -> list[FundWithHoldingResponse]:
    """Get funds that have a holding, with unrealized gain/loss."""
    return [
        FundWithHoldingResponse.from_projection(projection)
        for projection in portfolio.get_funds_with_holdings()
        if projection.has_holding
    ]
