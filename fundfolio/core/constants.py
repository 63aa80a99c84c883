"""
Core constants and limits.

Defines system-wide constants for the portfolio accounting engine,
catalog seeding, and the HTTP layer.
"""

from decimal import Decimal

# Precision (decimal places used at the presentation boundary)
MONEY_DECIMALS = 2  # Currency amounts and NAVs
SHARE_DECIMALS = 4  # Fund shares
PERCENTAGE_DECIMALS = 4  # Percentages

# Fund defaults
DEFAULT_MIN_INVESTMENT = 1000
DEFAULT_CURRENCY = "USD"

# Catalog limits
MAX_FUNDS_IN_CATALOG = 10000

# Transaction limits
MAX_TRANSACTION_AMOUNT = Decimal("100000000")  # 100M per purchase

# Simulated daily change. There is no price history behind this figure.
SIMULATED_DAILY_CHANGE_PERCENT = Decimal("0.76")

# Fund query translator
POPULAR_FUNDS_FALLBACK_COUNT = 6
TOP_RETURN_FRACTION = Decimal("0.3")  # Top 30% by 1-year return
LOW_FEE_FRACTION = Decimal("0.5")  # Cheapest 50% by expense ratio
DEFAULT_MIN_INVESTMENT_QUERY = 5000

# Logging
DEFAULT_LOG_LEVEL = "INFO"

# API
API_TITLE = "Fundfolio API"
API_VERSION = "1.0.0"
CORS_ALLOWED_ORIGINS = [
    "http://localhost:3000",  # Development frontend
    "http://localhost:5000",
    "http://localhost:5173",  # Vite dev server
]
