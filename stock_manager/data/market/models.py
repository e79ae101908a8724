"""Market data Pydantic models."""

from pydantic import BaseModel, Field


class Price(BaseModel):
    """Current price for a symbol."""

    symbol: str
    price: float


class PriceUpdate(BaseModel):
    """Schema for overriding a symbol's price."""

    price: float = Field(..., gt=0)
