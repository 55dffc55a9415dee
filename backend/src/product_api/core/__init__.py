from product_api.core.config import settings
from product_api.core.database import Base, async_session_maker, engine, get_db
from product_api.core.exceptions import (
    InvalidArgumentError,
    ProductApiError,
    ProductNotFoundError,
    StoreUnavailableError,
)

__all__ = [
    "settings",
    "Base",
    "engine",
    "async_session_maker",
    "get_db",
    "ProductApiError",
    "InvalidArgumentError",
    "ProductNotFoundError",
    "StoreUnavailableError",
]
