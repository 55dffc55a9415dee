"""Product id generation backed by a PostgreSQL sequence."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from product_api.core.exceptions import StoreUnavailableError
from product_api.models.product import product_id_seq

logger = logging.getLogger(__name__)


class ProductIdGenerator:
    """Mints product ids from the ``product_id_seq`` sequence.

    Holds no state of its own: every call asks the database for the next
    value, so ids stay unique across concurrent callers and across service
    instances sharing the same database.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def next_product_id(self) -> int:
        """Return the next value of the product id sequence.

        Raises:
            StoreUnavailableError: The database rejected the sequence request
        """
        try:
            next_id = await self.db.scalar(select(product_id_seq.next_value()))
        except SQLAlchemyError as e:
            logger.error(f"Error generating next product id: {e}")
            raise StoreUnavailableError("Unable to generate a product id") from e

        if next_id is None:
            logger.error("Sequence returned no value while generating product id")
            raise StoreUnavailableError("Unable to generate a product id")

        logger.info(f"Generated new product id: {next_id}")
        return int(next_id)
