"""Exception handlers translating domain errors into HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from product_api.core.exceptions import (
    InvalidArgumentError,
    ProductNotFoundError,
    StoreUnavailableError,
)

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An error occurred while processing your request"


def _field_name(loc: tuple) -> str:
    # loc looks like ("body", "price") or ("path", "quantity")
    parts = [str(part) for part in loc[1:]]
    return ".".join(parts) if parts else str(loc[0])


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        {"field": _field_name(tuple(err.get("loc", ()))), "message": err.get("msg", "")}
        for err in exc.errors()
    ]
    logger.warning(f"Request validation failed for {request.method} {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed", "errors": errors},
    )


async def invalid_argument_handler(
    request: Request, exc: InvalidArgumentError
) -> JSONResponse:
    logger.warning(f"Invalid argument for {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


async def not_found_handler(request: Request, exc: ProductNotFoundError) -> JSONResponse:
    logger.info(f"Product {exc.product_id} not found for {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


async def store_unavailable_handler(
    request: Request, exc: StoreUnavailableError
) -> JSONResponse:
    logger.error(f"Data store unavailable for {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": GENERIC_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(InvalidArgumentError, invalid_argument_handler)
    app.add_exception_handler(ProductNotFoundError, not_found_handler)
    app.add_exception_handler(StoreUnavailableError, store_unavailable_handler)
