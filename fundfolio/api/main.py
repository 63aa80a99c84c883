"""
FastAPI main application for the fund portfolio service.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from fundfolio.core.constants import API_TITLE, API_VERSION, CORS_ALLOWED_ORIGINS
from fundfolio.core.exceptions.portfolio import (
    FundfolioException,
    FundNotFoundError,
    NotFoundError,
    ValidationError,
)
from fundfolio.core.utils.log_config import configure_logging

from .routers import funds, portfolio, transactions

configure_logging()

app = FastAPI(
    title=API_TITLE,
    version=API_VERSION,
    description="API for mutual fund paper trading and portfolio tracking",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
)

app.include_router(funds.router, prefix="/api/funds", tags=["funds"])
app.include_router(transactions.router, prefix="/api/transactions", tags=["transactions"])
app.include_router(portfolio.router, prefix="/api/portfolio", tags=["portfolio"])


def _invalid_request_message(request: Request) -> str:
    if request.url.path.startswith("/api/transactions"):
        return "Invalid transaction data"
    return "Invalid request data"


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400 with field errors."""
    errors = [
        {"field": ".".join(str(part) for part in error["loc"][1:]), "message": error["msg"]}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": _invalid_request_message(request), "errors": errors},
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Report domain validation failures as 400."""
    errors = [{"field": exc.field, "message": str(exc)}] if exc.field else []
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": _invalid_request_message(request), "errors": errors},
    )


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    message = "Fund not found" if isinstance(exc, FundNotFoundError) else str(exc)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": message})


@app.exception_handler(FundfolioException)
async def fundfolio_error_handler(request: Request, exc: FundfolioException) -> JSONResponse:
    logger.error(f"Unhandled {type(exc).__name__} on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"message": str(exc)}
    )


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint returning API information."""
    return {"message": API_TITLE, "version": API_VERSION, "status": "running"}


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
