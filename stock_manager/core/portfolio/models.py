"""Pydantic schemas for derived portfolio figures."""

from typing import List

from pydantic import BaseModel


class StockValue(BaseModel):
    """A holding valued at the current price."""

    symbol: str
    quantity: int
    current_price: float
    total_value: float


class StockDetail(StockValue):
    """One line of a portfolio summary."""


class PortfolioSummary(BaseModel):
    """Portfolio totals computed from current prices."""

    total_value: float
    average_price_per_share: float
    total_stocks: int
    total_quantity: int
    stock_details: List[StockDetail]
