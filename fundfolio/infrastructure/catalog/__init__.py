"""
Fund catalog seeding.

Default funds and CSV catalog loading.
"""

from .csv_fund_loader import FundCSVLoader
from .fund_csv_validator import FundCSVValidator
from .seed_data import DEFAULT_FUNDS, build_default_portfolio, seed_catalog

__all__ = [
    "DEFAULT_FUNDS",
    "FundCSVLoader",
    "FundCSVValidator",
    "build_default_portfolio",
    "seed_catalog",
]
