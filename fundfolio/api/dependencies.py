"""
FastAPI dependencies.
"""

from functools import lru_cache

from fundfolio.core.models.portfolio import Portfolio
from fundfolio.infrastructure.catalog import build_default_portfolio
from fundfolio.infrastructure.query import KeywordFundAnalyzer


@lru_cache(maxsize=1)
def get_portfolio() -> Portfolio:
    """Process-wide portfolio seeded with the default catalog."""
    return build_default_portfolio(query_translator=KeywordFundAnalyzer())
