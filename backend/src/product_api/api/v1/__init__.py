"""API v1 routers."""

from product_api.api.v1 import products

__all__ = ["products"]
