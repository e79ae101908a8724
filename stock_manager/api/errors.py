"""Map exceptions to JSON error responses.

Every error body has the same shape::

    {"timestamp": "...", "status": 404, "error": "Not Found", "message": "..."}
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from stock_manager.core.errors import StockManagerError

logger = logging.getLogger(__name__)


def error_response(
    status_code: int, message: str, extra: Optional[Dict[str, Any]] = None
) -> JSONResponse:
    """Build the standard error envelope."""
    body = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": status_code,
        "error": HTTPStatus(status_code).phrase,
        "message": message,
    }
    if extra:
        body.update(extra)
    return JSONResponse(status_code=status_code, content=body)


def handle_domain_error(request: Request, exc: StockManagerError) -> JSONResponse:
    """Domain errors carry their own status code."""
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return error_response(exc.status_code, exc.message)


def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Invalid request bodies answer 400 with a field -> message map."""
    errors = {}
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ())[1:]) or "body"
        errors[field] = err.get("msg", "Invalid value")
    return error_response(
        status.HTTP_400_BAD_REQUEST, "Validation failed", extra={"errors": errors}
    )


def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred"
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install all error handlers on the app."""
    app.add_exception_handler(StockManagerError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
