"""
Decorators shared by the portfolio components.

Covers purchase argument validation, operation logging with correlation ids,
and fund existence checks.
"""

import functools
import inspect
import time
import uuid
from collections.abc import Callable
from decimal import Decimal
from enum import Enum
from typing import Any, TypeVar

from loguru import logger

from fundfolio.core.exceptions.portfolio import FundNotFoundError
from fundfolio.core.utils.validation import validate_fund_id, validate_positive

F = TypeVar("F", bound=Callable[..., Any])

_POSITIVE_NUMERIC_PARAMS = ("amount", "shares", "nav", "nav_at_purchase", "total_shares")
_LOGGED_PARAMS = (
    "fund_id",
    "amount",
    "shares",
    "nav_at_purchase",
    "total_shares",
    "total_invested",
)


def _bind_arguments(
    func: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]
) -> inspect.BoundArguments:
    sig = inspect.signature(func)
    bound_args = sig.bind(*args, **kwargs)
    bound_args.apply_defaults()
    return bound_args


def _normalize_purchase_argument(param_name: str, value: Any) -> Any:
    if param_name == "fund_id":
        return validate_fund_id(value)
    if param_name in _POSITIVE_NUMERIC_PARAMS:
        return validate_positive(value, param_name)
    return value


def validate_inputs(func: F) -> F:
    """Decorator to validate purchase inputs (fund_id, amount, shares, NAVs).

    Numeric arguments are converted to Decimal before the wrapped function runs.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        bound_args = _bind_arguments(func, args, kwargs)
        for name, value in list(bound_args.arguments.items()):
            if name != "self":
                bound_args.arguments[name] = _normalize_purchase_argument(name, value)
        return func(*bound_args.args, **bound_args.kwargs)

    return wrapper  # type: ignore


def _loggable(value: Any) -> Any:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, Decimal):
        return str(value)
    return value


def _extract_operation_context(bound_args: inspect.BoundArguments) -> dict[str, Any]:
    """Extract loggable context from function arguments."""
    context = {}
    for param_name, value in bound_args.arguments.items():
        if param_name in _LOGGED_PARAMS:
            context[param_name] = _loggable(value)
        elif param_name == "request":
            for attr in _LOGGED_PARAMS:
                if hasattr(value, attr):
                    context[attr] = _loggable(getattr(value, attr))
    return context


def log_operation(func: F) -> F:
    """Decorator to log portfolio operations with correlation IDs and timing."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        func_name = func.__name__
        context = {
            "correlation_id": str(uuid.uuid4())[:8],
            **_extract_operation_context(_bind_arguments(func, args, kwargs)),
        }

        logger.debug(f"Portfolio operation started: {func_name}", extra=context)
        start_time = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            execution_time_ms = round((time.perf_counter() - start_time) * 1000, 2)
            logger.error(
                f"Portfolio operation failed: {func_name} ({type(e).__name__})",
                extra={
                    **context,
                    "success": False,
                    "error": str(e),
                    "execution_time_ms": execution_time_ms,
                },
            )
            raise

        execution_time_ms = round((time.perf_counter() - start_time) * 1000, 2)
        logger.success(
            f"Portfolio operation completed: {func_name}",
            extra={
                **context,
                "success": True,
                "execution_time_ms": execution_time_ms,
                "result_type": type(result).__name__,
            },
        )
        return result

    return wrapper  # type: ignore


def require_fund(fund_param: str = "fund_id") -> Callable[[F], F]:
    """Decorator to ensure a fund exists in the owner's catalog before executing."""

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            bound_args = _bind_arguments(func, args, kwargs)
            self_obj = bound_args.arguments.get("self")
            fund_id = bound_args.arguments.get(fund_param)

            catalog = getattr(self_obj, "catalog", None)
            if catalog is not None and fund_id not in catalog:
                raise FundNotFoundError(fund_id)
            return func(*args, **kwargs)

        return wrapper  # type: ignore

    return decorator
