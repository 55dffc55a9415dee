"""seed_products

Revision ID: 002_seed_products
Revises: 001_create_products
Create Date: 2025-09-14

Inserts the sample catalog. Ids are drawn from product_id_seq, so a fresh
database gets 100000-100009.

"""
from typing import Sequence, Union

from alembic import op


# revision identifiers, used by Alembic.
revision: str = '002_seed_products'
down_revision: Union[str, None] = '001_create_products'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


SAMPLE_NAMES = (
    'iPhone 15 Pro',
    'MacBook Pro 16"',
    'AirPods Pro',
    'Office Chair Pro',
    'Standing Desk',
    'Gaming Mouse',
    'Mechanical Keyboard',
    'Coffee Maker',
    'Blender Pro',
    'Yoga Mat',
)


def upgrade() -> None:
    op.execute("""
        INSERT INTO products
            (product_id, name, description, price, stock_available, category, created_at, updated_at)
        VALUES
            (nextval('product_id_seq'), 'iPhone 15 Pro', 'Latest Apple smartphone with A17 Pro chip', 999.99, 50, 'Electronics', now(), now()),
            (nextval('product_id_seq'), 'MacBook Pro 16"', 'Powerful laptop for professionals with M3 chip', 2499.99, 25, 'Electronics', now(), now()),
            (nextval('product_id_seq'), 'AirPods Pro', 'Wireless earbuds with active noise cancellation', 249.99, 100, 'Electronics', now(), now()),
            (nextval('product_id_seq'), 'Office Chair Pro', 'Ergonomic office chair with lumbar support', 299.99, 30, 'Furniture', now(), now()),
            (nextval('product_id_seq'), 'Standing Desk', 'Height adjustable standing desk', 599.99, 15, 'Furniture', now(), now()),
            (nextval('product_id_seq'), 'Gaming Mouse', 'High-precision gaming mouse with RGB lighting', 79.99, 75, 'Gaming', now(), now()),
            (nextval('product_id_seq'), 'Mechanical Keyboard', 'Cherry MX switches mechanical keyboard', 149.99, 40, 'Gaming', now(), now()),
            (nextval('product_id_seq'), 'Coffee Maker', 'Programmable drip coffee maker', 89.99, 60, 'Appliances', now(), now()),
            (nextval('product_id_seq'), 'Blender Pro', 'High-speed blender for smoothies and soups', 199.99, 35, 'Appliances', now(), now()),
            (nextval('product_id_seq'), 'Yoga Mat', 'Non-slip yoga mat with carrying strap', 29.99, 80, 'Fitness', now(), now())
    """)


def downgrade() -> None:
    names = ", ".join("'" + name.replace("'", "''") + "'" for name in SAMPLE_NAMES)
    op.execute(f"DELETE FROM products WHERE name IN ({names})")
