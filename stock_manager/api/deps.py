"""FastAPI dependencies."""

from __future__ import annotations

from typing import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from stock_manager.core.holdings.service import HoldingService
from stock_manager.core.portfolio.service import PortfolioService
from stock_manager.data.market.provider import PriceProvider
from stock_manager.db.database import get_db as db_context


def get_db() -> Generator[Session, None, None]:
    """Yield a database session (one transaction per request)."""
    with db_context() as db:
        yield db


def get_price_provider(request: Request) -> PriceProvider:
    """Return the price provider created at application start-up."""
    return request.app.state.price_provider


def get_holding_service(
    db: Session = Depends(get_db),
    prices: PriceProvider = Depends(get_price_provider),
) -> HoldingService:
    return HoldingService(db, prices)


def get_portfolio_service(
    db: Session = Depends(get_db),
    prices: PriceProvider = Depends(get_price_provider),
) -> PortfolioService:
    return PortfolioService(db, prices)
