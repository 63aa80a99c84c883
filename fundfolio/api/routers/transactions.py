"""
Transaction API endpoints.
"""

from fastapi import APIRouter, Depends, status

from fundfolio.api.dependencies import get_portfolio
from fundfolio.api.schemas.api_models import TransactionCreate, TransactionResponse
from fundfolio.core.models.portfolio import Portfolio
from fundfolio.core.models.purchase import PurchaseRequest

router = APIRouter()


@router.post("", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    body: TransactionCreate, portfolio: Portfolio = Depends(get_portfolio)
) -> TransactionResponse:
    """Record a purchase and update the fund's holding."""
    request = PurchaseRequest(
        fund_id=body.fund_id,
        amount=body.amount,
        shares=body.shares,
        nav_at_purchase=body.nav_at_purchase,
    )
    return TransactionResponse.from_transaction(portfolio.create_transaction(request))


@router.get("", response_model=list[TransactionResponse])
async def list_transactions(
    portfolio: Portfolio = Depends(get_portfolio),
) -> list[TransactionResponse]:
    """Get every transaction, newest first."""
    return [TransactionResponse.from_transaction(t) for t in portfolio.get_all_transactions()]
