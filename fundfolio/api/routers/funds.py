"""
Fund catalog API endpoints.
"""

from fastapi import APIRouter, Depends

from fundfolio.api.dependencies import get_portfolio
from fundfolio.api.schemas.api_models import (
    FundAnalysisRequest,
    FundAnalysisResponse,
    FundResponse,
)
from fundfolio.core.exceptions.portfolio import FundNotFoundError
from fundfolio.core.models.portfolio import Portfolio

router = APIRouter()


@router.get("", response_model=list[FundResponse])
async def list_funds(portfolio: Portfolio = Depends(get_portfolio)) -> list[FundResponse]:
    """Get every catalog fund."""
    return [FundResponse.from_fund(fund) for fund in portfolio.get_all_funds()]


@router.post("/analyze", response_model=FundAnalysisResponse)
async def analyze_funds(
    request: FundAnalysisRequest, portfolio: Portfolio = Depends(get_portfolio)
) -> FundAnalysisResponse:
    """Select funds matching a natural-language query."""
    return FundAnalysisResponse.from_result(portfolio.analyze_funds(request.query))


@router.get("/{fund_id}", response_model=FundResponse)
async def get_fund(fund_id: int, portfolio: Portfolio = Depends(get_portfolio)) -> FundResponse:
    """Get a fund by id."""
    fund = portfolio.get_fund(fund_id)
    if fund is None:
        raise FundNotFoundError(fund_id)
    return FundResponse.from_fund(fund)
