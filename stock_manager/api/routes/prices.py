"""Price API routes."""

from typing import Dict

from fastapi import APIRouter, Depends

from stock_manager.api.deps import get_price_provider
from stock_manager.data.market.models import Price, PriceUpdate
from stock_manager.data.market.provider import PriceProvider, normalize_symbol

router = APIRouter()


@router.get("", response_model=Dict[str, float])
def list_prices(prices: PriceProvider = Depends(get_price_provider)):
    """Every price the provider currently knows."""
    return prices.known_prices()


@router.get("/{symbol}", response_model=Price)
def get_price(symbol: str, prices: PriceProvider = Depends(get_price_provider)):
    """Current price for a symbol (unknown symbols get a generated price)."""
    symbol = normalize_symbol(symbol)
    return Price(symbol=symbol, price=prices.get_price(symbol))


@router.put("/{symbol}", response_model=Price)
def set_price(
    symbol: str,
    payload: PriceUpdate,
    prices: PriceProvider = Depends(get_price_provider),
):
    """Override the current price for a symbol."""
    symbol = normalize_symbol(symbol)
    prices.update_price(symbol, payload.price)
    return Price(symbol=symbol, price=payload.price)
