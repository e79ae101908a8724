"""Pydantic schemas for holding operations."""

from pydantic import BaseModel, Field, field_validator

SYMBOL_PATTERN = r"^[A-Za-z0-9]+$"


class HoldingCreate(BaseModel):
    """Schema for creating a new holding."""

    symbol: str = Field(..., min_length=1, max_length=10, pattern=SYMBOL_PATTERN)
    quantity: int = Field(..., ge=1)

    @field_validator("symbol")
    @classmethod
    def symbol_uppercase(cls, v: str) -> str:
        return v.upper()


class HoldingUpdate(BaseModel):
    """Schema for replacing a holding's quantity."""

    quantity: int = Field(..., ge=1)


class TransactionRequest(BaseModel):
    """Schema for a buy or sell order."""

    symbol: str = Field(..., min_length=1, max_length=10, pattern=SYMBOL_PATTERN)
    quantity: int = Field(..., ge=1)


class HoldingResponse(BaseModel):
    """Schema for holding response."""

    symbol: str
    quantity: int

    class Config:
        from_attributes = True
