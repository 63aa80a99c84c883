"""
Fund query translators.
"""

from .keyword_fund_analyzer import KeywordFundAnalyzer

__all__ = ["KeywordFundAnalyzer"]
