"""Data access layer."""

from product_api.repositories.product_repository import (
    DEFAULT_LOW_STOCK_THRESHOLD,
    ProductRepository,
)

__all__ = [
    "DEFAULT_LOW_STOCK_THRESHOLD",
    "ProductRepository",
]
