"""Pydantic schemas for request/response validation."""

from product_api.schemas.product import ProductCreate, ProductResponse, ProductUpdate

__all__ = [
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
]
