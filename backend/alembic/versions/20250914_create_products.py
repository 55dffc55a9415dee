"""create_products

Revision ID: 001_create_products
Revises:
Create Date: 2025-09-14

Creates the products table and the product_id_seq sequence.

The sequence is independent of the table so ids can be allocated before the
insert. It starts at 100000, above the range used by any pre-existing data,
and is NO CYCLE: once exhausted, nextval() fails instead of handing out ids
that may still belong to live rows.

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_create_products'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute(sa.schema.CreateSequence(
        sa.Sequence(
            'product_id_seq',
            start=100000,
            increment=1,
            minvalue=100000,
            cycle=False,
        )
    ))

    op.create_table(
        'products',
        sa.Column('product_id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.String(length=1000), nullable=True),
        sa.Column('price', sa.Numeric(precision=18, scale=2), nullable=False),
        sa.Column('stock_available', sa.Integer(), nullable=False),
        sa.Column('category', sa.String(length=100), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True),
                  server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True),
                  server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('product_id'),
        sa.CheckConstraint('stock_available >= 0', name='chk_product_stock_non_negative'),
        sa.CheckConstraint('price > 0', name='chk_product_price_positive'),
    )

    op.create_index('ix_products_name', 'products', ['name'], unique=False)
    op.create_index('ix_products_category', 'products', ['category'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_products_category', table_name='products')
    op.drop_index('ix_products_name', table_name='products')
    op.drop_table('products')
    op.execute(sa.schema.DropSequence(sa.Sequence('product_id_seq')))
