"""Product model and the sequence that mints product identifiers."""

from decimal import Decimal

from sqlalchemy import CheckConstraint, Integer, Numeric, Sequence, String
from sqlalchemy.orm import Mapped, mapped_column

from product_api.core.database import Base
from product_api.models.base import TimestampMixin

PRODUCT_ID_SEQUENCE_NAME = "product_id_seq"
PRODUCT_ID_START = 100000

# Standalone sequence: not bound to the primary key column, so ids can be
# allocated before the insert. NO CYCLE keeps issued ids from ever repeating.
product_id_seq = Sequence(
    PRODUCT_ID_SEQUENCE_NAME,
    start=PRODUCT_ID_START,
    increment=1,
    minvalue=PRODUCT_ID_START,
    cycle=False,
    metadata=Base.metadata,
)


class Product(Base, TimestampMixin):
    """Product model representing a catalog item and its stock level."""

    __tablename__ = "products"

    product_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=False,
    )
    name: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        index=True,
    )
    description: Mapped[str | None] = mapped_column(
        String(1000),
        nullable=True,
    )
    price: Mapped[Decimal] = mapped_column(
        Numeric(18, 2),
        nullable=False,
    )
    stock_available: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
    )
    category: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
    )

    __table_args__ = (
        CheckConstraint("stock_available >= 0", name="chk_product_stock_non_negative"),
        CheckConstraint("price > 0", name="chk_product_price_positive"),
    )

    def __repr__(self) -> str:
        return (
            f"<Product(product_id={self.product_id}, name='{self.name}', "
            f"stock_available={self.stock_available})>"
        )
