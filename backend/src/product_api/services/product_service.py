"""Product service: business rules on top of the product repository."""

import logging
from decimal import Decimal

from product_api.core.exceptions import InvalidArgumentError
from product_api.models.product import Product
from product_api.repositories.product_repository import (
    DEFAULT_LOW_STOCK_THRESHOLD,
    ProductRepository,
)
from product_api.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)


def validate_product_values(
    name: str | None, price: Decimal, stock_available: int, category: str | None
) -> None:
    """Apply the business rules shared by create and update.

    Raises:
        InvalidArgumentError: Name or category is blank, price is not positive
            or stock is negative
    """
    if name is None or not name.strip():
        raise InvalidArgumentError("Product name is required")
    if price <= 0:
        raise InvalidArgumentError("Product price must be greater than zero")
    if stock_available < 0:
        raise InvalidArgumentError("Stock available cannot be negative")
    if category is None or not category.strip():
        raise InvalidArgumentError("Product category is required")


def validate_quantity(quantity: int) -> None:
    if quantity <= 0:
        raise InvalidArgumentError("Quantity must be greater than zero")


class ProductService:
    """Service class for product operations."""

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    async def get_product(self, product_id: int) -> Product | None:
        logger.info(f"Getting product with ID: {product_id}")
        return await self.repository.get_by_id(product_id)

    async def get_all_products(self) -> list[Product]:
        logger.info("Getting all products")
        return await self.repository.get_all()

    async def get_products_by_category(self, category: str) -> list[Product]:
        logger.info(f"Getting products by category: {category}")
        return await self.repository.get_by_category(category)

    async def get_products_with_stock(self) -> list[Product]:
        logger.info("Getting products with stock")
        return await self.repository.get_with_stock()

    async def get_products_with_low_stock(
        self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    ) -> list[Product]:
        logger.info(f"Getting products with low stock (threshold: {threshold})")
        return await self.repository.get_with_low_stock(threshold)

    async def product_exists(self, product_id: int) -> bool:
        return await self.repository.exists(product_id)

    async def create_product(self, product_data: ProductCreate) -> Product:
        """Create a new product.

        Args:
            product_data: Product creation data

        Returns:
            Created product with its generated ID

        Raises:
            InvalidArgumentError: A business rule rejected the values
        """
        logger.info(f"Creating new product: {product_data.name}")
        try:
            validate_product_values(
                product_data.name,
                product_data.price,
                product_data.stock_available,
                product_data.category,
            )
        except InvalidArgumentError as e:
            logger.warning(f"Rejected product '{product_data.name}': {e}")
            raise

        product = Product(
            name=product_data.name,
            description=product_data.description,
            price=product_data.price,
            stock_available=product_data.stock_available,
            category=product_data.category,
        )
        try:
            created = await self.repository.add(product)
        except Exception as e:
            logger.error(f"Error creating product '{product_data.name}': {e}")
            raise

        logger.info(f"Product created successfully with ID: {created.product_id}")
        return created

    async def update_product(
        self, product_id: int, product_data: ProductUpdate
    ) -> Product | None:
        """Replace every mutable field of an existing product.

        Args:
            product_id: ID of product to update
            product_data: New values for name, description, price, stock and category

        Returns:
            Updated product or None if not found

        Raises:
            InvalidArgumentError: A business rule rejected the values
        """
        logger.info(f"Updating product with ID: {product_id}")

        product = await self.repository.get_by_id(product_id)
        if product is None:
            logger.warning(f"Product with ID {product_id} not found for update")
            return None

        try:
            validate_product_values(
                product_data.name,
                product_data.price,
                product_data.stock_available,
                product_data.category,
            )
        except InvalidArgumentError as e:
            logger.warning(f"Rejected update for product {product_id}: {e}")
            raise

        product.name = product_data.name
        product.description = product_data.description
        product.price = product_data.price
        product.stock_available = product_data.stock_available
        product.category = product_data.category

        try:
            updated = await self.repository.update(product)
        except Exception as e:
            logger.error(f"Error updating product with ID {product_id}: {e}")
            raise

        logger.info(f"Product updated successfully with ID: {product_id}")
        return updated

    async def delete_product(self, product_id: int) -> bool:
        """Delete a product.

        Returns:
            True if deleted, False if not found
        """
        logger.info(f"Deleting product with ID: {product_id}")

        product = await self.repository.get_by_id(product_id)
        if product is None:
            logger.warning(f"Product with ID {product_id} not found for deletion")
            return False

        try:
            await self.repository.delete(product)
        except Exception as e:
            logger.error(f"Error deleting product with ID {product_id}: {e}")
            raise

        logger.info(f"Product deleted successfully with ID: {product_id}")
        return True

    async def decrement_stock(self, product_id: int, quantity: int) -> bool:
        """Take ``quantity`` units out of stock.

        The updated product is not returned; callers re-fetch it.

        Returns:
            False if the product does not exist or stock is insufficient

        Raises:
            InvalidArgumentError: quantity is not positive
        """
        logger.info(
            f"Decrementing stock for product ID: {product_id}, quantity: {quantity}"
        )
        validate_quantity(quantity)

        try:
            result = await self.repository.decrement_stock(product_id, quantity)
        except Exception as e:
            logger.error(f"Error decrementing stock for product ID {product_id}: {e}")
            raise

        if result:
            logger.info(f"Stock decremented successfully for product ID: {product_id}")
        else:
            logger.warning(
                f"Failed to decrement stock for product ID: {product_id} - "
                "insufficient stock or product not found"
            )
        return result

    async def add_to_stock(self, product_id: int, quantity: int) -> bool:
        """Put ``quantity`` units back into stock.

        Returns:
            False if the product does not exist

        Raises:
            InvalidArgumentError: quantity is not positive
        """
        logger.info(f"Adding to stock for product ID: {product_id}, quantity: {quantity}")
        validate_quantity(quantity)

        try:
            result = await self.repository.add_to_stock(product_id, quantity)
        except Exception as e:
            logger.error(f"Error adding stock for product ID {product_id}: {e}")
            raise

        if result:
            logger.info(f"Stock added successfully for product ID: {product_id}")
        else:
            logger.warning(
                f"Failed to add stock for product ID: {product_id} - product not found"
            )
        return result
