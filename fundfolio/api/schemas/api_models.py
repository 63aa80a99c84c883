"""
Pydantic schemas for API request/response models.

Response bodies use camelCase keys. Decimal values are rounded here and
nowhere else: 2 places for money and prices, 4 for shares and percentages.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from fundfolio.core.interfaces.query import FundAnalysisResult
from fundfolio.core.models.fund import Fund
from fundfolio.core.models.holding import PortfolioHolding
from fundfolio.core.models.summary import FundWithHolding, PortfolioSummary
from fundfolio.core.models.transaction import Transaction
from fundfolio.core.types.financial import round_money, round_percentage, round_shares


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TransactionCreate(CamelModel):
    """Request model for recording a purchase."""

    fund_id: int = Field(..., gt=0, description="Catalog id of the fund to buy")
    amount: Decimal = Field(..., gt=0, allow_inf_nan=False, description="Money invested")
    shares: Decimal = Field(..., gt=0, allow_inf_nan=False, description="Shares acquired")
    nav_at_purchase: Decimal = Field(
        ..., gt=0, allow_inf_nan=False, description="NAV per share at purchase time"
    )


class FundAnalysisRequest(BaseModel):
    """Request model for natural-language fund queries."""

    query: str = Field(..., min_length=1, description="Free-text fund query")


class FundResponse(CamelModel):
    """Response model for a catalog fund."""

    id: int
    name: str
    manager: str
    nav: Decimal
    year_return: str
    risk_level: str
    min_investment: int
    expense_ratio: Decimal
    objective: str | None = None
    region: str
    aum: str | None = None
    currency: str
    created_at: datetime

    @classmethod
    def from_fund(cls, fund: Fund) -> "FundResponse":
        return cls(
            id=fund.id,
            name=fund.name,
            manager=fund.manager,
            nav=round_money(fund.nav),
            year_return=fund.year_return,
            risk_level=fund.risk_level.value,
            min_investment=fund.min_investment,
            expense_ratio=round_percentage(fund.expense_ratio),
            objective=fund.objective,
            region=fund.region.value,
            aum=fund.aum,
            currency=fund.currency,
            created_at=fund.created_at,
        )


class TransactionResponse(CamelModel):
    """Response model for a recorded transaction."""

    id: int
    fund_id: int
    amount: Decimal
    shares: Decimal
    nav_at_purchase: Decimal
    status: str
    created_at: datetime

    @classmethod
    def from_transaction(cls, transaction: Transaction) -> "TransactionResponse":
        return cls(
            id=transaction.id,
            fund_id=transaction.fund_id,
            amount=round_money(transaction.amount),
            shares=round_shares(transaction.shares),
            nav_at_purchase=round_money(transaction.nav_at_purchase),
            status=transaction.status.value,
            created_at=transaction.created_at,
        )


class HoldingResponse(CamelModel):
    """Response model for a portfolio holding."""

    id: int
    fund_id: int
    total_shares: Decimal
    total_invested: Decimal
    average_cost: Decimal
    updated_at: datetime

    @classmethod
    def from_holding(cls, holding: PortfolioHolding) -> "HoldingResponse":
        return cls(
            id=holding.id,
            fund_id=holding.fund_id,
            total_shares=round_shares(holding.total_shares),
            total_invested=round_money(holding.total_invested),
            average_cost=round_money(holding.average_cost),
            updated_at=holding.updated_at,
        )


class FundWithHoldingResponse(FundResponse):
    """Response model for a fund joined with its holding."""

    holding: HoldingResponse | None = None
    current_value: Decimal | None = None
    gain_loss: Decimal | None = None
    gain_loss_percent: Decimal | None = None

    @classmethod
    def from_projection(cls, projection: FundWithHolding) -> "FundWithHoldingResponse":
        fund = FundResponse.from_fund(projection.fund)
        if projection.holding is None:
            return cls(**fund.model_dump())

        return cls(
            **fund.model_dump(),
            holding=HoldingResponse.from_holding(projection.holding),
            current_value=round_money(projection.current_value),
            gain_loss=round_money(projection.gain_loss),
            gain_loss_percent=round_percentage(projection.gain_loss_percent),
        )


class PortfolioSummaryResponse(CamelModel):
    """Response model for the portfolio summary."""

    total_value: Decimal
    total_invested: Decimal
    total_gain_loss: Decimal
    total_gain_loss_percent: Decimal
    daily_change: Decimal
    daily_change_percent: Decimal
    holdings_count: int

    @classmethod
    def from_summary(cls, summary: PortfolioSummary) -> "PortfolioSummaryResponse":
        return cls(
            total_value=round_money(summary.total_value),
            total_invested=round_money(summary.total_invested),
            total_gain_loss=round_money(summary.total_gain_loss),
            total_gain_loss_percent=round_percentage(summary.total_gain_loss_percent),
            daily_change=round_money(summary.daily_change),
            daily_change_percent=round_percentage(summary.daily_change_percent),
            holdings_count=summary.holdings_count,
        )


class FundAnalysisResponse(BaseModel):
    """Response model for fund query results."""

    funds: list[FundResponse]
    explanation: str
    criteria: list[str]

    @classmethod
    def from_result(cls, result: FundAnalysisResult) -> "FundAnalysisResponse":
        return cls(
            funds=[FundResponse.from_fund(fund) for fund in result.funds],
            explanation=result.explanation,
            criteria=list(result.criteria),
        )


class ErrorResponse(BaseModel):
    """Response model for errors."""

    message: str
    errors: list[dict] | None = None
