"""Product repository: all database access for the products table."""

from sqlalchemy import exists, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from product_api.models.base import utc_now
from product_api.models.product import Product
from product_api.services.id_generator import ProductIdGenerator

DEFAULT_LOW_STOCK_THRESHOLD = 10


class ProductRepository:
    """Repository class for product persistence.

    Stock mutations are single conditional UPDATE statements. PostgreSQL
    holds the row lock for the statement and re-checks the WHERE clause
    against the latest committed row, so concurrent adjustments of the same
    product serialize without lost updates.
    """

    def __init__(self, db: AsyncSession, id_generator: ProductIdGenerator | None = None):
        self.db = db
        self.id_generator = id_generator or ProductIdGenerator(db)

    async def get_by_id(self, product_id: int) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID

        Returns:
            Product or None if not found
        """
        result = await self.db.execute(
            select(Product)
            .where(Product.product_id == product_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_all(self) -> list[Product]:
        """Get all products ordered by ID."""
        result = await self.db.execute(select(Product).order_by(Product.product_id))
        return list(result.scalars().all())

    async def get_by_category(self, category: str) -> list[Product]:
        """Get products in a category (case-insensitive), ordered by name."""
        result = await self.db.execute(
            select(Product)
            .where(func.lower(Product.category) == category.lower())
            .order_by(Product.name.asc())
        )
        return list(result.scalars().all())

    async def get_with_stock(self) -> list[Product]:
        """Get products with stock available, ordered by name."""
        result = await self.db.execute(
            select(Product)
            .where(Product.stock_available > 0)
            .order_by(Product.name.asc())
        )
        return list(result.scalars().all())

    async def get_with_low_stock(
        self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    ) -> list[Product]:
        """Get products whose stock is above zero and at most ``threshold``.

        Args:
            threshold: Inclusive upper bound on stock

        Returns:
            Products ordered by stock ascending
        """
        result = await self.db.execute(
            select(Product)
            .where(Product.stock_available > 0)
            .where(Product.stock_available <= threshold)
            .order_by(Product.stock_available.asc())
        )
        return list(result.scalars().all())

    async def exists(self, product_id: int) -> bool:
        result = await self.db.scalar(
            select(exists().where(Product.product_id == product_id))
        )
        return bool(result)

    async def generate_next_product_id(self) -> int:
        return await self.id_generator.next_product_id()

    async def add(self, product: Product) -> Product:
        """Insert a new product.

        A product without an ID gets one from the sequence. Both timestamps
        are set to the same server-side "now"; values supplied by the caller
        are discarded.

        Args:
            product: Transient product instance

        Returns:
            The persisted product
        """
        if not product.product_id:
            product.product_id = await self.generate_next_product_id()

        now = utc_now()
        product.created_at = now
        product.updated_at = now

        self.db.add(product)
        await self.db.commit()
        await self.db.refresh(product)
        return product

    async def update(self, product: Product) -> Product:
        """Persist changes already applied to ``product`` and refresh updated_at."""
        product.updated_at = utc_now()
        await self.db.commit()
        await self.db.refresh(product)
        return product

    async def delete(self, product: Product) -> None:
        """Hard delete a product."""
        await self.db.delete(product)
        await self.db.commit()

    async def update_stock(self, product_id: int, new_stock: int) -> bool:
        """Overwrite the stock level of a product.

        Returns:
            False if the product does not exist
        """
        return await self._execute_stock_update(
            update(Product)
            .where(Product.product_id == product_id)
            .values(stock_available=new_stock, updated_at=utc_now())
        )

    async def decrement_stock(self, product_id: int, quantity: int) -> bool:
        """Remove ``quantity`` units from stock.

        The stock check and the subtraction happen in one statement, so the
        row is never seen partially decremented and never goes negative.

        Returns:
            False if the product does not exist or has fewer than
            ``quantity`` units; stock is left unchanged in that case
        """
        return await self._execute_stock_update(
            update(Product)
            .where(Product.product_id == product_id)
            .where(Product.stock_available >= quantity)
            .values(
                stock_available=Product.stock_available - quantity,
                updated_at=utc_now(),
            )
        )

    async def add_to_stock(self, product_id: int, quantity: int) -> bool:
        """Add ``quantity`` units to stock.

        Returns:
            False if the product does not exist
        """
        return await self._execute_stock_update(
            update(Product)
            .where(Product.product_id == product_id)
            .values(
                stock_available=Product.stock_available + quantity,
                updated_at=utc_now(),
            )
        )

    async def _execute_stock_update(self, stmt) -> bool:
        result = await self.db.execute(
            stmt.returning(Product.product_id).execution_options(
                synchronize_session=False
            )
        )
        if result.first() is None:
            await self.db.rollback()
            return False

        await self.db.commit()
        return True
