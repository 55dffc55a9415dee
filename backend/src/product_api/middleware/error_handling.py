"""Catch-all middleware turning unhandled exceptions into generic 500 responses."""

import logging
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from product_api.api.errors import GENERIC_ERROR_MESSAGE

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Log unhandled exceptions and answer without leaking internal detail."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception(
                f"Unhandled exception for {request.method} {request.url.path}"
            )
            return JSONResponse(
                status_code=500,
                content={"detail": GENERIC_ERROR_MESSAGE},
            )
