"""
Fund catalog: the immutable-after-seed collection of funds.
"""

import threading
from dataclasses import dataclass, field

from loguru import logger

from fundfolio.core.constants import MAX_FUNDS_IN_CATALOG
from fundfolio.core.exceptions.portfolio import FundNotFoundError, ValidationError
from fundfolio.core.protocols import Clock, utc_now
from fundfolio.core.utils.id_generator import IdGenerator

from .fund import Fund, FundData


@dataclass
class FundCatalog:
    """In-memory fund catalog keyed by fund id.

    Thread Safety:
        ``create`` holds an internal RLock; reads are safe to call concurrently.
    """

    clock: Clock = utc_now
    _funds: dict[int, Fund] = field(default_factory=dict, init=False, repr=False)
    _ids: IdGenerator = field(default_factory=IdGenerator, init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    def create(self, fund_data: FundData) -> Fund:
        """Store a new fund with a fresh id and creation timestamp.

        Args:
            fund_data: Validated fund attributes

        Returns:
            The stored fund

        Raises:
            ValidationError: If fund_data is not FundData or the catalog is full
        """
        if not isinstance(fund_data, FundData):
            raise ValidationError("fund_data must be a FundData instance", field="fund_data")

        with self._lock:
            if len(self._funds) >= MAX_FUNDS_IN_CATALOG:
                raise ValidationError(
                    f"Maximum catalog size reached ({MAX_FUNDS_IN_CATALOG})"
                )
            fund = Fund.from_data(self._ids.next_id(), fund_data, self.clock())
            self._funds[fund.id] = fund

        logger.debug(f"Fund added to catalog: {fund.id} ({fund.name})")
        return fund

    def get(self, fund_id: int) -> Fund | None:
        """Return the fund, or None when the id is unknown."""
        return self._funds.get(fund_id)

    def require(self, fund_id: int) -> Fund:
        """Return the fund or raise FundNotFoundError."""
        fund = self._funds.get(fund_id)
        if fund is None:
            raise FundNotFoundError(fund_id)
        return fund

    def list_all(self) -> list[Fund]:
        """Return every fund in insertion order."""
        return list(self._funds.values())

    def __contains__(self, fund_id: object) -> bool:
        return fund_id in self._funds

    def __len__(self) -> int:
        return len(self._funds)
