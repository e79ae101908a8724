"""Market data feeds (prices)."""

from .provider import MockPriceProvider, PriceProvider, normalize_symbol
from .models import Price, PriceUpdate

__all__ = ["MockPriceProvider", "PriceProvider", "normalize_symbol", "Price", "PriceUpdate"]
