"""Portfolio valuation and ranking."""

from .models import PortfolioSummary, StockDetail, StockValue
from .service import PortfolioService

__all__ = [
    "PortfolioSummary",
    "StockDetail",
    "StockValue",
    "PortfolioService",
]
