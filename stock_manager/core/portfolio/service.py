"""Whole-portfolio figures read from the store."""

from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from stock_manager.core.holdings.repository import HoldingRepository
from stock_manager.data.market.provider import PriceProvider
from . import analytics
from .models import PortfolioSummary, StockValue


class PortfolioService:
    """Thin wrappers that snapshot all holdings and hand them to analytics."""

    def __init__(self, db: Session, prices: PriceProvider):
        self.repo = HoldingRepository(db)
        self.prices = prices

    def get_total_value(self) -> float:
        return analytics.total_value(self.repo.list_all(), self.prices.get_price)

    def get_average_price_per_share(self) -> float:
        return analytics.average_price_per_share(self.repo.list_all(), self.prices.get_price)

    def get_portfolio_summary(self) -> PortfolioSummary:
        return analytics.summary(self.repo.list_all(), self.prices.get_price)

    def find_highest_value_stock(self) -> Optional[StockValue]:
        return analytics.find_highest_value(self.repo.list_all(), self.prices.get_price)
