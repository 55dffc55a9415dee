"""API dependencies for database access and service wiring."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from product_api.core.database import get_db
from product_api.repositories.product_repository import ProductRepository
from product_api.services.id_generator import ProductIdGenerator
from product_api.services.product_service import ProductService

DbSession = Annotated[AsyncSession, Depends(get_db)]


async def get_product_repository(db: DbSession) -> ProductRepository:
    """Get a ProductRepository bound to the request's session."""
    return ProductRepository(db, ProductIdGenerator(db))


async def get_product_service(
    repository: Annotated[ProductRepository, Depends(get_product_repository)],
) -> ProductService:
    """Get ProductService instance with injected dependencies."""
    return ProductService(repository)


# Type alias for ProductService dependency
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
