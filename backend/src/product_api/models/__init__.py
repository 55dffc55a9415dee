"""SQLAlchemy ORM models."""

from product_api.models.base import TimestampMixin, utc_now
from product_api.models.product import Product, product_id_seq

__all__ = [
    "TimestampMixin",
    "utc_now",
    "Product",
    "product_id_seq",
]
