"""Price providers resolving a symbol to its current unit price."""

from __future__ import annotations

import logging
import random
import threading
from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional

from stock_manager.config import Settings, get_settings
from stock_manager.core.errors import InvalidPriceError

logger = logging.getLogger(__name__)


def normalize_symbol(symbol: str) -> str:
    """Canonical form of a ticker symbol (uppercase, no surrounding spaces)."""
    return symbol.strip().upper()


class PriceProvider(ABC):
    """Abstract base class for price sources.

    Prices may change between calls, so callers must not assume two lookups
    of the same symbol agree.
    """

    @abstractmethod
    def get_price(self, symbol: str) -> float:
        """Get the current unit price for a symbol.

        Args:
            symbol: Stock ticker symbol (any case)

        Returns:
            Price, always positive
        """
        pass

    @abstractmethod
    def update_price(self, symbol: str, price: float) -> None:
        """Override the current price for a symbol.

        Raises:
            InvalidPriceError: If price is not positive
        """
        pass

    @abstractmethod
    def known_prices(self) -> Dict[str, float]:
        """Snapshot of every price the provider currently holds."""
        pass


class MockPriceProvider(PriceProvider):
    """In-memory price source for a single process.

    Starts from a table of seed prices. Unknown symbols get a random price in
    ``[min_price, min_price + price_span)`` which is then remembered, so the
    map only grows while the process runs.
    """

    def __init__(
        self,
        seed_prices: Optional[Mapping[str, float]] = None,
        min_price: float = 50.0,
        price_span: float = 500.0,
        rng: Optional[random.Random] = None,
    ):
        """Initialize provider.

        Args:
            seed_prices: Initial symbol -> price table
            min_price: Lower bound for synthesized prices
            price_span: Width of the synthesized price range
            rng: Random generator (inject a seeded one for repeatable prices)
        """
        self._prices: Dict[str, float] = {
            normalize_symbol(s): float(p) for s, p in (seed_prices or {}).items()
        }
        self.min_price = min_price
        self.price_span = price_span
        self._rng = rng or random.Random()
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "MockPriceProvider":
        """Build a provider from application settings."""
        settings = settings or get_settings()
        return cls(
            seed_prices=settings.seed_prices,
            min_price=settings.random_price_min,
            price_span=settings.random_price_span,
        )

    def get_price(self, symbol: str) -> float:
        symbol = normalize_symbol(symbol)
        with self._lock:
            price = self._prices.get(symbol)
            if price is None:
                price = self.min_price + self._rng.random() * self.price_span
                self._prices[symbol] = price
                logger.info(f"Generated random price for {symbol}: {price:.2f}")
        return price

    def update_price(self, symbol: str, price: float) -> None:
        if price <= 0:
            raise InvalidPriceError(price)
        symbol = normalize_symbol(symbol)
        with self._lock:
            self._prices[symbol] = float(price)
        logger.info(f"Updated price for {symbol} to {price}")

    def known_prices(self) -> Dict[str, float]:
        with self._lock:
            return dict(self._prices)
