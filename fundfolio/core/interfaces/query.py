"""
Fund query translator interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from fundfolio.core.models.fund import Fund


@dataclass(frozen=True)
class FundAnalysisResult:
    """Funds matching a natural-language query, with the reasoning used."""

    funds: list[Fund]
    explanation: str
    criteria: list[str] = field(default_factory=list)


class IFundQueryTranslator(ABC):
    """Abstract interface for turning a free-text query into a fund selection.

    Implementations are read-only over the funds they are given.
    """

    @abstractmethod
    def analyze(self, query: str, funds: list[Fund]) -> FundAnalysisResult:
        """Select the funds that match ``query``."""
        pass
