"""Domain errors raised by the holdings and pricing layers.

Each error carries the HTTP status the API answers with, so the boundary can
map any ``StockManagerError`` without knowing the concrete type.
"""

from __future__ import annotations


class StockManagerError(Exception):
    """Base class for all domain errors."""

    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StockNotFoundError(StockManagerError):
    """No holding exists for the symbol."""

    status_code = 404

    def __init__(self, symbol: str):
        super().__init__(f"Stock with symbol '{symbol}' not found")
        self.symbol = symbol


class DuplicateStockError(StockManagerError):
    """A holding already exists for the symbol."""

    status_code = 409

    def __init__(self, symbol: str):
        super().__init__(f"Stock with symbol '{symbol}' already exists")
        self.symbol = symbol


class InsufficientStockError(StockManagerError):
    """A sell asked for more shares than are held."""

    status_code = 400

    def __init__(self, symbol: str, available: int, requested: int):
        super().__init__(
            f"Insufficient stock for '{symbol}': available {available}, requested {requested}"
        )
        self.symbol = symbol
        self.available = available
        self.requested = requested


class InvalidQuantityError(StockManagerError):
    """Quantity was zero or negative."""

    status_code = 400

    def __init__(self, quantity: int):
        super().__init__("Quantity must be positive")
        self.quantity = quantity


class InvalidPriceError(StockManagerError):
    """Price override was zero or negative."""

    status_code = 400

    def __init__(self, price: float):
        super().__init__("Price must be positive")
        self.price = price


class ConcurrentModificationError(StockManagerError):
    """Another transaction changed the same holding first."""

    status_code = 409

    def __init__(self, symbol: str):
        super().__init__(f"Stock with symbol '{symbol}' was modified concurrently, try again")
        self.symbol = symbol
