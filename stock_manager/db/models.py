"""SQLAlchemy ORM models."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    """Get current UTC time as naive datetime for database compatibility."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Holding(Base):
    """A single symbol's position in the portfolio.

    A holding never exists with zero shares after a sell; selling the last
    share deletes the row instead.
    """

    __tablename__ = "holdings"

    symbol = Column(String(10), primary_key=True)  # Always uppercase
    quantity = Column(Integer, nullable=False)
    version = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    # Concurrent writers to the same row fail with StaleDataError on flush
    __mapper_args__ = {"version_id_col": version}

    def __repr__(self) -> str:
        return f"<Holding(symbol={self.symbol}, quantity={self.quantity})>"
