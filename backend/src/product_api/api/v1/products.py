"""Product management API endpoints."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, Query, Request, Response, status

from product_api.api.deps import ProductServiceDep
from product_api.core.exceptions import ProductNotFoundError
from product_api.repositories.product_repository import DEFAULT_LOW_STOCK_THRESHOLD
from product_api.schemas.product import (
    MAX_INT32,
    MIN_INT32,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
)

router = APIRouter()

ProductId = Annotated[int, Path(ge=MIN_INT32, le=MAX_INT32)]
Quantity = Annotated[int, Path(ge=MIN_INT32, le=MAX_INT32)]


# Fixed-segment routes are declared before "/{product_id}" so they are not
# swallowed by the integer path parameter.


@router.get("", response_model=list[ProductResponse])
async def list_products(service: ProductServiceDep):
    """Get all products."""
    return await service.get_all_products()


@router.get("/with-stock", response_model=list[ProductResponse])
async def list_products_with_stock(service: ProductServiceDep):
    """Get products with stock greater than zero, ordered by name."""
    return await service.get_products_with_stock()


@router.get("/low-stock", response_model=list[ProductResponse])
async def list_products_with_low_stock(
    service: ProductServiceDep,
    threshold: Annotated[int, Query(ge=MIN_INT32, le=MAX_INT32)] = DEFAULT_LOW_STOCK_THRESHOLD,
):
    """Get products with stock between 1 and ``threshold``, lowest stock first."""
    return await service.get_products_with_low_stock(threshold)


@router.get("/category/{category}", response_model=list[ProductResponse])
async def list_products_by_category(category: str, service: ProductServiceDep):
    """Get products in a category (case-insensitive), ordered by name."""
    return await service.get_products_by_category(category)


@router.put("/decrement-stock/{product_id}/{quantity}", response_model=ProductResponse)
async def decrement_stock(product_id: ProductId, quantity: Quantity, service: ProductServiceDep):
    """Remove stock from a product and return the product with its new stock level."""
    if not await service.decrement_stock(product_id, quantity):
        if not await service.product_exists(product_id):
            raise ProductNotFoundError(product_id)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Insufficient stock for product {product_id}",
        )

    product = await service.get_product(product_id)
    if product is None:
        raise ProductNotFoundError(product_id)
    return product


@router.put("/add-to-stock/{product_id}/{quantity}", response_model=ProductResponse)
async def add_to_stock(product_id: ProductId, quantity: Quantity, service: ProductServiceDep):
    """Add stock to a product and return the product with its new stock level."""
    if not await service.add_to_stock(product_id, quantity):
        raise ProductNotFoundError(product_id)

    product = await service.get_product(product_id)
    if product is None:
        raise ProductNotFoundError(product_id)
    return product


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: ProductId, service: ProductServiceDep):
    """Get product by ID."""
    product = await service.get_product(product_id)
    if product is None:
        raise ProductNotFoundError(product_id)
    return product


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_data: ProductCreate,
    request: Request,
    response: Response,
    service: ProductServiceDep,
):
    """Create a new product. The product ID is generated by the server."""
    product = await service.create_product(product_data)
    response.headers["Location"] = str(
        request.url_for("get_product", product_id=product.product_id)
    )
    return product


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: ProductId,
    product_data: ProductUpdate,
    service: ProductServiceDep,
):
    """Replace all mutable fields of a product."""
    product = await service.update_product(product_id, product_data)
    if product is None:
        raise ProductNotFoundError(product_id)
    return product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: ProductId, service: ProductServiceDep):
    """Delete a product."""
    if not await service.delete_product(product_id):
        raise ProductNotFoundError(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
