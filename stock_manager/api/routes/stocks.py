"""Stock holdings API routes."""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from stock_manager.api.deps import get_holding_service, get_portfolio_service
from stock_manager.api.rate_limit import limiter
from stock_manager.config import get_settings
from stock_manager.core.holdings.models import (
    HoldingCreate,
    HoldingResponse,
    HoldingUpdate,
    TransactionRequest,
)
from stock_manager.core.holdings.service import HoldingService
from stock_manager.core.portfolio.models import PortfolioSummary, StockValue
from stock_manager.core.portfolio.service import PortfolioService

settings = get_settings()

router = APIRouter()


@router.post("", response_model=HoldingResponse, status_code=status.HTTP_201_CREATED)
def create_stock(
    payload: HoldingCreate,
    service: HoldingService = Depends(get_holding_service),
):
    """Add a new holding."""
    return service.create(payload.symbol, payload.quantity)


@router.get("", response_model=List[HoldingResponse])
def list_stocks(service: HoldingService = Depends(get_holding_service)):
    """List all holdings."""
    return service.get_all()


# --- Portfolio figures (declared before /{symbol} so they are matched first) ---


@router.get("/total-value", response_model=float)
def get_total_value(portfolio: PortfolioService = Depends(get_portfolio_service)):
    """Current value of the whole portfolio."""
    return portfolio.get_total_value()


@router.get("/average-price", response_model=float)
def get_average_price(portfolio: PortfolioService = Depends(get_portfolio_service)):
    """Portfolio value divided by the number of shares held."""
    return portfolio.get_average_price_per_share()


@router.get("/summary", response_model=PortfolioSummary)
def get_summary(portfolio: PortfolioService = Depends(get_portfolio_service)):
    """Totals plus a valued line per holding."""
    return portfolio.get_portfolio_summary()


@router.get(
    "/highest-value",
    response_model=StockValue,
    responses={404: {"description": "Portfolio is empty"}},
)
def get_highest_value(portfolio: PortfolioService = Depends(get_portfolio_service)):
    """The holding with the largest current value."""
    highest = portfolio.find_highest_value_stock()
    if highest is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return highest


@router.get("/sorted-by-value", response_model=List[StockValue])
def list_by_value(service: HoldingService = Depends(get_holding_service)):
    """All holdings ranked by current value, highest first."""
    return service.list_by_value_descending()


# --- Transactions ---


@router.post("/buy", response_model=HoldingResponse)
@limiter.limit(settings.trade_rate_limit)
def buy_stock(
    request: Request,
    payload: TransactionRequest,
    service: HoldingService = Depends(get_holding_service),
):
    """Buy shares, creating the holding if needed."""
    return service.buy(payload.symbol, payload.quantity)


@router.post(
    "/sell",
    response_model=HoldingResponse,
    responses={204: {"description": "All shares sold, holding removed"}},
)
@limiter.limit(settings.trade_rate_limit)
def sell_stock(
    request: Request,
    payload: TransactionRequest,
    service: HoldingService = Depends(get_holding_service),
):
    """Sell shares. Selling the whole position removes the holding."""
    holding = service.sell(payload.symbol, payload.quantity)
    if holding is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return holding


# --- Single holding ---


@router.get("/{symbol}", response_model=HoldingResponse)
def get_stock(symbol: str, service: HoldingService = Depends(get_holding_service)):
    """Get a specific holding by symbol."""
    return service.get_by_symbol(symbol)


@router.put("/{symbol}", response_model=HoldingResponse)
def update_stock(
    symbol: str,
    payload: HoldingUpdate,
    service: HoldingService = Depends(get_holding_service),
):
    """Replace a holding's quantity."""
    return service.update(symbol, payload.quantity)


@router.delete("/{symbol}", status_code=status.HTTP_204_NO_CONTENT)
def delete_stock(symbol: str, service: HoldingService = Depends(get_holding_service)):
    """Delete a holding by symbol."""
    service.delete(symbol)


@router.get("/{symbol}/investment", response_model=float)
def get_investment(symbol: str, service: HoldingService = Depends(get_holding_service)):
    """Current value of one holding."""
    return service.calculate_investment(symbol)
