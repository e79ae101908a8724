"""Holding lifecycle - the only code allowed to change the holdings store.

Per symbol a holding moves between two states::

    ABSENT --buy/create--> PRESENT --sell all/delete--> ABSENT

Buying an unseen symbol creates it and selling the last share deletes it.
Every operation runs inside the caller's transaction; read-modify-write paths
lock the row so concurrent trades on one symbol are serialized by the store.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from stock_manager.core.errors import (
    DuplicateStockError,
    InsufficientStockError,
    InvalidQuantityError,
    StockNotFoundError,
)
from stock_manager.core.holdings.repository import HoldingRepository
from stock_manager.core.portfolio.analytics import rank_by_value
from stock_manager.core.portfolio.models import StockValue
from stock_manager.data.market.provider import PriceProvider, normalize_symbol
from stock_manager.db.models import Holding

logger = logging.getLogger(__name__)


class HoldingService:
    """Create, trade and value individual holdings."""

    def __init__(self, db: Session, prices: PriceProvider):
        """Initialize the service.

        Args:
            db: Database session (one transaction per operation)
            prices: Price source used for logging and valuation
        """
        self.db = db
        self.repo = HoldingRepository(db)
        self.prices = prices

    # --- CRUD ---

    def create(self, symbol: str, quantity: int) -> Holding:
        """Create a holding for a symbol that has none yet.

        Raises:
            DuplicateStockError: If the symbol is already held
        """
        symbol = normalize_symbol(symbol)
        if self.repo.exists(symbol):
            raise DuplicateStockError(symbol)

        holding = self.repo.put(Holding(symbol=symbol, quantity=quantity))
        logger.info(f"Created new stock: {symbol}")
        return holding

    def get_all(self) -> List[Holding]:
        """Get every holding."""
        return self.repo.list_all()

    def get_by_symbol(self, symbol: str) -> Holding:
        """Get a holding by symbol.

        Raises:
            StockNotFoundError: If the symbol is not held
        """
        return self._require(normalize_symbol(symbol))

    def update(self, symbol: str, quantity: int) -> Holding:
        """Replace a holding's quantity.

        A quantity of 0 is stored as-is; unlike ``sell`` this does not
        delete the holding.

        Raises:
            StockNotFoundError: If the symbol is not held
            InvalidQuantityError: If quantity is negative
        """
        if quantity < 0:
            raise InvalidQuantityError(quantity)

        holding = self._require(normalize_symbol(symbol), for_update=True)
        holding.quantity = quantity
        self.repo.put(holding)
        logger.info(f"Updated quantity for stock: {holding.symbol}")
        return holding

    def delete(self, symbol: str) -> None:
        """Delete a holding.

        Raises:
            StockNotFoundError: If the symbol is not held
        """
        holding = self._require(normalize_symbol(symbol), for_update=True)
        self.repo.delete(holding)
        logger.info(f"Deleted stock: {holding.symbol}")

    # --- Transactions ---

    def buy(self, symbol: str, quantity: int) -> Holding:
        """Add shares, creating the holding on the first buy of a symbol.

        Raises:
            InvalidQuantityError: If quantity is not positive
        """
        if quantity <= 0:
            raise InvalidQuantityError(quantity)

        symbol = normalize_symbol(symbol)
        price = self.prices.get_price(symbol)

        holding = self.repo.get(symbol, for_update=True)
        if holding is None:
            holding = Holding(symbol=symbol, quantity=0)
        holding.quantity = holding.quantity + quantity
        self.repo.put(holding)

        logger.info(
            f"Bought {quantity} shares of {symbol} at price {price:.2f} "
            f"(total: {holding.quantity})"
        )
        return holding

    def sell(self, symbol: str, quantity: int) -> Optional[Holding]:
        """Remove shares from a holding.

        Returns:
            The reduced holding, or None when the sale liquidated it entirely
            (the holding is deleted rather than kept at zero)

        Raises:
            InvalidQuantityError: If quantity is not positive
            StockNotFoundError: If the symbol is not held
            InsufficientStockError: If fewer shares are held than requested
        """
        if quantity <= 0:
            raise InvalidQuantityError(quantity)

        holding = self._require(normalize_symbol(symbol), for_update=True)
        if holding.quantity < quantity:
            logger.warning(
                f"Rejected sell of {quantity} {holding.symbol}: only {holding.quantity} held"
            )
            raise InsufficientStockError(holding.symbol, holding.quantity, quantity)

        remaining = holding.quantity - quantity
        if remaining == 0:
            self.repo.delete(holding)
            logger.info(f"Sold all {quantity} shares of {holding.symbol} - stock removed")
            return None

        holding.quantity = remaining
        self.repo.put(holding)
        price = self.prices.get_price(holding.symbol)
        logger.info(
            f"Sold {quantity} shares of {holding.symbol} at price {price:.2f} "
            f"(remaining: {remaining})"
        )
        return holding

    # --- Valuation ---

    def calculate_investment(self, symbol: str) -> float:
        """Current market value of one holding (price x quantity).

        Raises:
            StockNotFoundError: If the symbol is not held
        """
        holding = self.get_by_symbol(symbol)
        return self.prices.get_price(holding.symbol) * holding.quantity

    def list_by_value_descending(self) -> List[StockValue]:
        """All holdings ranked by current value, highest first.

        Equal values keep the store's listing order.
        """
        return rank_by_value(self.repo.list_all(), self.prices.get_price)

    def _require(self, symbol: str, for_update: bool = False) -> Holding:
        holding = self.repo.get(symbol, for_update=for_update)
        if holding is None:
            raise StockNotFoundError(symbol)
        return holding
