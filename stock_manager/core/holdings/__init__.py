"""Holdings store and lifecycle."""

from .models import HoldingCreate, HoldingUpdate, HoldingResponse, TransactionRequest
from .repository import HoldingRepository
from .service import HoldingService

__all__ = [
    "HoldingCreate",
    "HoldingUpdate",
    "HoldingResponse",
    "TransactionRequest",
    "HoldingRepository",
    "HoldingService",
]
