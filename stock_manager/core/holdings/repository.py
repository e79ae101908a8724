"""Holdings store backed by SQLAlchemy."""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from stock_manager.core.errors import ConcurrentModificationError
from stock_manager.db.models import Holding

logger = logging.getLogger(__name__)


class HoldingRepository:
    """Keyed store of holdings, one row per uppercase symbol.

    Symbols passed in are expected to be normalized already. Writes are
    flushed straight away so that conflicts surface inside the calling
    operation rather than at commit.
    """

    def __init__(self, db: Session):
        """Initialize repository with database session."""
        self.db = db

    def exists(self, symbol: str) -> bool:
        """Check whether a holding exists for a symbol."""
        return self.db.query(Holding.symbol).filter_by(symbol=symbol).first() is not None

    def get(self, symbol: str, for_update: bool = False) -> Optional[Holding]:
        """Get a holding by symbol.

        Args:
            symbol: Uppercase ticker symbol
            for_update: Lock the row until the transaction ends (read-modify-write)

        Returns:
            Holding or None
        """
        query = self.db.query(Holding).filter_by(symbol=symbol)
        if for_update:
            query = query.with_for_update()
        return query.first()

    def list_all(self) -> List[Holding]:
        """Get all holdings, oldest first."""
        return self.db.query(Holding).order_by(Holding.created_at, Holding.symbol).all()

    def put(self, holding: Holding) -> Holding:
        """Insert a new holding or persist changes to an existing one."""
        self.db.add(holding)
        self._flush(holding.symbol)
        return holding

    def delete(self, holding: Holding) -> None:
        """Remove a holding."""
        self.db.delete(holding)
        self._flush(holding.symbol)

    def _flush(self, symbol: str) -> None:
        try:
            self.db.flush()
        except (StaleDataError, IntegrityError) as e:
            logger.warning(f"Concurrent write on {symbol}: {e}")
            raise ConcurrentModificationError(symbol) from e
