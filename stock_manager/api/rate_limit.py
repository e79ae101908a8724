"""Shared rate limiter for the API."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from stock_manager.config import get_settings

settings = get_settings()

# Rate limiter - key by IP address
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)
