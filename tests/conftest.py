"""Shared test fixtures."""

import os

# Keep the module-level engine off the working directory
os.environ.setdefault("DATABASE_URL", "sqlite://")

import random

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from stock_manager.api.app import app
from stock_manager.api.deps import get_db, get_price_provider
from stock_manager.api.rate_limit import limiter
from stock_manager.data.market.provider import MockPriceProvider
from stock_manager.db.models import Base

SEED_PRICES = {"AAPL": 150.0, "GOOGL": 2800.0, "MSFT": 350.0}


@pytest.fixture
def engine():
    """Fresh in-memory database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def prices():
    """Price provider with fixed seed prices and repeatable random prices."""
    return MockPriceProvider(seed_prices=SEED_PRICES, rng=random.Random(42))


@pytest.fixture
def client(session_factory, prices):
    """API client wired to the test database and price provider."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_price_provider] = lambda: prices
    limiter.enabled = False
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        limiter.enabled = True
