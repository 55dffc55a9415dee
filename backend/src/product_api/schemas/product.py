"""Product schemas for request/response validation.

Field names are snake_case in Python and lowerCamelCase on the wire.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MAX_PRICE = Decimal("999999.99")
# Bounds of the 32-bit integer columns.
MAX_INT32 = 2**31 - 1
MIN_INT32 = -(2**31)


class CamelModel(BaseModel):
    """Base schema that reads and writes camelCase field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ProductCreate(CamelModel):
    """Schema for product creation request."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = Field(None, max_length=1000)
    price: Decimal = Field(..., gt=0, le=MAX_PRICE, decimal_places=2)
    stock_available: int = Field(..., ge=0, le=MAX_INT32)
    category: str = Field(..., min_length=1, max_length=100)


class ProductUpdate(ProductCreate):
    """Schema for product update request.

    Updates replace every mutable field, so all fields are required just as
    they are on creation.
    """

    pass


class ProductResponse(CamelModel):
    """Schema for product response."""

    product_id: int
    name: str
    description: str | None
    price: float
    stock_available: int
    category: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
