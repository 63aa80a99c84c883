"""
Keyword-based fund query translator.

Turns a free-text query ("low risk funds", "cheap bond funds under 2000")
into a fund selection with an explanation, using simple keyword heuristics.
The first matching heuristic wins, in this order: risk, return, region, fees,
technology, bonds, minimum investment, ESG, then plain keyword search.
"""

import math
import re
from collections.abc import Callable

from loguru import logger

from fundfolio.core.constants import (
    DEFAULT_MIN_INVESTMENT_QUERY,
    LOW_FEE_FRACTION,
    POPULAR_FUNDS_FALLBACK_COUNT,
    TOP_RETURN_FRACTION,
)
from fundfolio.core.enums import Region, RiskLevel
from fundfolio.core.exceptions.portfolio import ValidationError
from fundfolio.core.interfaces.query import FundAnalysisResult, IFundQueryTranslator
from fundfolio.core.models.fund import Fund
from fundfolio.core.types.financial import ZERO

RISK_KEYWORDS = ["risk", "safe", "conservative", "stable", "volatile", "aggressive"]
RETURN_KEYWORDS = ["return", "returns", "performance", "gain", "gains", "growth", "profit"]
REGION_KEYWORDS = ["us", "usa", "american", "offshore", "international", "european", "global"]
FEE_KEYWORDS = ["fee", "fees", "cost", "expense", "cheap", "low cost"]
TECH_KEYWORDS = ["tech", "technology", "innovation", "growth", "emerging"]
TECH_FUND_TERMS = ["tech", "technology", "innovation", "growth", "emerging", "digital", "software"]
BOND_KEYWORDS = ["bond", "bonds", "fixed income", "treasury", "municipal"]
BOND_FUND_TERMS = ["bond", "treasury", "municipal", "fixed", "income"]
MIN_INVESTMENT_KEYWORDS = ["minimum", "min investment", "low minimum", "affordable"]
ESG_KEYWORDS = ["esg", "sustainable", "environmental", "social", "governance", "ethical"]

_AMOUNT_PATTERN = re.compile(r"\$?(\d+)")
_WORD_PATTERN = re.compile(r"[a-z0-9$]+")

_Handler = Callable[[str, list[Fund]], FundAnalysisResult]


def _mentions(query: str, keywords: list[str]) -> bool:
    """Check whether any keyword appears in the query.

    Single words must match a whole word ("us" does not match "focus");
    multi-word phrases match as substrings.
    """
    words = set(_WORD_PATTERN.findall(query))
    return any(keyword in query if " " in keyword else keyword in words for keyword in keywords)


def _fund_text(fund: Fund) -> str:
    return f"{fund.name} {fund.objective or ''}".lower()


class KeywordFundAnalyzer(IFundQueryTranslator):
    """Offline fund analyzer driven by keyword heuristics."""

    def analyze(self, query: str, funds: list[Fund]) -> FundAnalysisResult:
        """Select funds matching the query.

        Raises:
            ValidationError: If the query is empty
        """
        if not isinstance(query, str) or not query.strip():
            raise ValidationError("query cannot be empty", field="query")

        normalized = query.lower().strip()
        handlers: list[tuple[Callable[[str], bool], _Handler]] = [
            (lambda q: _mentions(q, RISK_KEYWORDS), self._filter_by_risk),
            (lambda q: _mentions(q, RETURN_KEYWORDS), self._filter_by_return),
            (lambda q: _mentions(q, REGION_KEYWORDS), self._filter_by_region),
            (lambda q: _mentions(q, FEE_KEYWORDS), self._filter_by_fees),
            (lambda q: _mentions(q, TECH_KEYWORDS), self._filter_by_tech),
            (lambda q: _mentions(q, BOND_KEYWORDS), self._filter_by_bonds),
            (self._matches_min_investment, self._filter_by_min_investment),
            (lambda q: _mentions(q, ESG_KEYWORDS), self._filter_by_esg),
        ]

        for matches, handler in handlers:
            if matches(normalized):
                return handler(normalized, funds)
        return self._keyword_search(normalized, funds)

    def _filter_by_risk(self, query: str, funds: list[Fund]) -> FundAnalysisResult:
        words = set(_WORD_PATTERN.findall(query))
        if words & {"low", "safe", "conservative", "stable"}:
            target = RiskLevel.LOW
            explanation = (
                "Selected low-risk funds for conservative investors seeking stability "
                "and capital preservation."
            )
        elif words & {"high", "aggressive", "volatile"}:
            target = RiskLevel.HIGH
            explanation = (
                "Selected high-risk funds for aggressive investors seeking maximum growth "
                "potential."
            )
        else:
            target = RiskLevel.MEDIUM
            explanation = "Selected medium-risk funds offering balanced growth and stability."

        return FundAnalysisResult(
            funds=[fund for fund in funds if fund.risk_level == target],
            explanation=explanation,
            criteria=[f"Risk Level: {target.value}"],
        )

    def _filter_by_return(self, query: str, funds: list[Fund]) -> FundAnalysisResult:
        ranked = sorted(funds, key=lambda fund: fund.year_return_value(), reverse=True)
        words = set(_WORD_PATTERN.findall(query))

        if words & {"high", "best", "top"}:
            top_count = max(1, math.ceil(len(ranked) * TOP_RETURN_FRACTION))
            selected = ranked[:top_count]
            explanation = (
                "Selected top-performing funds with the highest 1-year returns for "
                "growth-focused investors."
            )
        else:
            selected = [fund for fund in ranked if fund.year_return_value() > ZERO]
            explanation = "Selected funds with positive 1-year returns."

        return FundAnalysisResult(
            funds=selected,
            explanation=explanation,
            criteria=["High Returns", "1-Year Performance"],
        )

    def _filter_by_region(self, query: str, funds: list[Fund]) -> FundAnalysisResult:
        if _mentions(query, ["us", "usa", "american"]):
            target = Region.US
            explanation = "Selected US-based funds investing in American markets and companies."
        else:
            target = Region.OFFSHORE
            explanation = "Selected offshore/international funds for global diversification."

        return FundAnalysisResult(
            funds=[fund for fund in funds if fund.region == target],
            explanation=explanation,
            criteria=[f"Region: {target.value}"],
        )

    def _filter_by_fees(self, query: str, funds: list[Fund]) -> FundAnalysisResult:
        ranked = sorted(funds, key=lambda fund: fund.expense_ratio)
        low_cost_count = math.ceil(len(ranked) * LOW_FEE_FRACTION)
        return FundAnalysisResult(
            funds=ranked[:low_cost_count],
            explanation=(
                "Selected funds with the lowest expense ratios to minimize investment costs."
            ),
            criteria=["Low Fees", "Expense Ratio"],
        )

    def _filter_by_tech(self, query: str, funds: list[Fund]) -> FundAnalysisResult:
        return FundAnalysisResult(
            funds=[f for f in funds if any(term in _fund_text(f) for term in TECH_FUND_TERMS)],
            explanation=(
                "Selected technology and growth-focused funds investing in innovative companies."
            ),
            criteria=["Technology Sector", "Growth Focus"],
        )

    def _filter_by_bonds(self, query: str, funds: list[Fund]) -> FundAnalysisResult:
        return FundAnalysisResult(
            funds=[f for f in funds if any(term in _fund_text(f) for term in BOND_FUND_TERMS)],
            explanation="Selected bond and fixed-income funds for stable income generation.",
            criteria=["Fixed Income", "Bonds"],
        )

    @staticmethod
    def _matches_min_investment(query: str) -> bool:
        return _mentions(query, MIN_INVESTMENT_KEYWORDS) or bool(_AMOUNT_PATTERN.search(query))

    def _filter_by_min_investment(self, query: str, funds: list[Fund]) -> FundAnalysisResult:
        match = _AMOUNT_PATTERN.search(query)
        target_amount = int(match.group(1)) if match else DEFAULT_MIN_INVESTMENT_QUERY

        return FundAnalysisResult(
            funds=[fund for fund in funds if fund.min_investment <= target_amount],
            explanation=(
                f"Selected funds with minimum investment of ${target_amount:,} or less."
            ),
            criteria=[f"Min Investment <= ${target_amount:,}"],
        )

    def _filter_by_esg(self, query: str, funds: list[Fund]) -> FundAnalysisResult:
        return FundAnalysisResult(
            funds=[f for f in funds if any(term in _fund_text(f) for term in ESG_KEYWORDS)],
            explanation=(
                "Selected ESG and sustainable funds focusing on environmental, social, and "
                "governance criteria."
            ),
            criteria=["ESG", "Sustainable Investing"],
        )

    def _keyword_search(self, query: str, funds: list[Fund]) -> FundAnalysisResult:
        keywords = [word for word in query.split() if len(word) > 2]
        matched = [fund for fund in funds if any(kw in fund.search_text() for kw in keywords)]

        if matched:
            return FundAnalysisResult(
                funds=matched,
                explanation="Found funds matching your search criteria.",
                criteria=["Keyword Match"],
            )

        logger.warning(f"No funds matched '{query}', falling back to popular funds")
        return FundAnalysisResult(
            funds=funds[:POPULAR_FUNDS_FALLBACK_COUNT],
            explanation="No exact matches found. Showing popular funds instead.",
            criteria=["Popular Funds"],
        )
