"""FastAPI application setup."""

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from stock_manager.api.errors import register_exception_handlers
from stock_manager.api.rate_limit import limiter
from stock_manager.api.routes import prices, stocks
from stock_manager.config import PRODUCT_DESCRIPTION, PRODUCT_NAME, PRODUCT_TAGLINE, PRODUCT_VERSION
from stock_manager.data.market.provider import MockPriceProvider
from stock_manager.db.database import init_db

app = FastAPI(
    title=f"{PRODUCT_NAME} API",
    description=PRODUCT_DESCRIPTION,
    version=PRODUCT_VERSION,
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
register_exception_handlers(app)


@app.on_event("startup")
def startup():
    """Initialize database and the process-wide price provider."""
    init_db()
    # Lives until the process exits; generated prices are never cleared
    app.state.price_provider = MockPriceProvider.from_settings()


@app.get("/api/health")
def health():
    """Health check endpoint."""
    return {
        "name": PRODUCT_NAME,
        "version": PRODUCT_VERSION,
        "status": "ok",
        "tagline": PRODUCT_TAGLINE,
    }


# Mount API routers
app.include_router(stocks.router, prefix="/api/stocks", tags=["stocks"])
app.include_router(prices.router, prefix="/api/prices", tags=["prices"])
