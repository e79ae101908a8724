"""Portfolio aggregation over a snapshot of holdings.

Every function is pure: it takes the holdings to value and a ``price_of``
lookup, and never touches the store. Prices are looked up once per holding
within a call but may differ between calls. Nothing is rounded here.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Protocol

from .models import PortfolioSummary, StockDetail, StockValue

PriceLookup = Callable[[str], float]


class HoldingLike(Protocol):
    symbol: str
    quantity: int


def stock_values(
    holdings: Optional[Iterable[HoldingLike]], price_of: PriceLookup
) -> List[StockValue]:
    """Value each holding at its current price, preserving input order."""
    values = []
    for h in holdings or ():
        price = price_of(h.symbol)
        values.append(
            StockValue(
                symbol=h.symbol,
                quantity=h.quantity,
                current_price=price,
                total_value=price * h.quantity,
            )
        )
    return values


def total_value(holdings: Optional[Iterable[HoldingLike]], price_of: PriceLookup) -> float:
    """Sum of price x quantity; 0.0 for no holdings."""
    return sum((v.total_value for v in stock_values(holdings, price_of)), 0.0)


def average_price_per_share(
    holdings: Optional[Iterable[HoldingLike]], price_of: PriceLookup
) -> float:
    """Total value divided by total shares; 0.0 when there are no shares."""
    holdings = list(holdings or ())
    total_quantity = sum(h.quantity for h in holdings)
    if total_quantity == 0:
        return 0.0
    return total_value(holdings, price_of) / total_quantity


def summary(
    holdings: Optional[Iterable[HoldingLike]], price_of: PriceLookup
) -> PortfolioSummary:
    """Build the portfolio summary. Empty input gives an all-zero summary."""
    details = [StockDetail(**v.model_dump()) for v in stock_values(holdings, price_of)]

    total_quantity = sum(d.quantity for d in details)
    value = sum((d.total_value for d in details), 0.0)

    return PortfolioSummary(
        total_value=value,
        average_price_per_share=value / total_quantity if total_quantity > 0 else 0.0,
        total_stocks=len(details),
        total_quantity=total_quantity,
        stock_details=details,
    )


def find_highest_value(
    holdings: Optional[Iterable[HoldingLike]], price_of: PriceLookup
) -> Optional[StockValue]:
    """The most valuable holding, or None for no holdings.

    On an exact tie the first holding in input order wins.
    """
    values = stock_values(holdings, price_of)
    if not values:
        return None
    return max(values, key=lambda v: v.total_value)


def rank_by_value(
    holdings: Optional[Iterable[HoldingLike]], price_of: PriceLookup
) -> List[StockValue]:
    """Holdings sorted by value, highest first; ties keep input order."""
    # sorted() is stable, including with reverse=True
    return sorted(stock_values(holdings, price_of), key=lambda v: v.total_value, reverse=True)
