"""Seed data script for development and testing.

Creates the sample catalog (10 products across Electronics, Furniture,
Gaming, Appliances and Fitness) when the products table is empty. Ids are
minted through the same sequence the API uses.

Environment Variables:
    RESET_DATA: Set to "true" to delete all products before seeding (default: false)

Usage:
    uv run python -m scripts.seed_data

    # Start over with a fresh catalog
    RESET_DATA=true uv run python -m scripts.seed_data
"""

import asyncio
import os
from decimal import Decimal

RESET_DATA = os.getenv("RESET_DATA", "false").lower() == "true"

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from product_api.core.database import async_session_maker, engine
from product_api.models import Product
from product_api.repositories.product_repository import ProductRepository

SAMPLE_PRODUCTS = [
    ("iPhone 15 Pro", "Latest Apple smartphone with A17 Pro chip", "999.99", 50, "Electronics"),
    ('MacBook Pro 16"', "Powerful laptop for professionals with M3 chip", "2499.99", 25, "Electronics"),
    ("AirPods Pro", "Wireless earbuds with active noise cancellation", "249.99", 100, "Electronics"),
    ("Office Chair Pro", "Ergonomic office chair with lumbar support", "299.99", 30, "Furniture"),
    ("Standing Desk", "Height adjustable standing desk", "599.99", 15, "Furniture"),
    ("Gaming Mouse", "High-precision gaming mouse with RGB lighting", "79.99", 75, "Gaming"),
    ("Mechanical Keyboard", "Cherry MX switches mechanical keyboard", "149.99", 40, "Gaming"),
    ("Coffee Maker", "Programmable drip coffee maker", "89.99", 60, "Appliances"),
    ("Blender Pro", "High-speed blender for smoothies and soups", "199.99", 35, "Appliances"),
    ("Yoga Mat", "Non-slip yoga mat with carrying strap", "29.99", 80, "Fitness"),
]


async def reset_products(session: AsyncSession) -> None:
    """Delete every product."""
    print("Resetting products...")
    result = await session.execute(delete(Product))
    await session.commit()
    print(f"  Deleted {result.rowcount} products")


async def seed_products(session: AsyncSession) -> list[Product]:
    """Insert the sample catalog unless products already exist."""
    print("Seeding products...")

    count = await session.scalar(select(func.count(Product.product_id)))
    if count:
        print(f"  Products table has {count} existing products, skipping...")
        return []

    repository = ProductRepository(session)
    products = []
    for name, description, price, stock, category in SAMPLE_PRODUCTS:
        product = await repository.add(
            Product(
                name=name,
                description=description,
                price=Decimal(price),
                stock_available=stock,
                category=category,
            )
        )
        products.append(product)
        print(f"  Created product {product.product_id}: {product.name}")

    print(f"  Created {len(products)} products")
    return products


async def main():
    print("=" * 60)
    print("Seeding database...")
    print("=" * 60)

    async with async_session_maker() as session:
        if RESET_DATA:
            await reset_products(session)
        await seed_products(session)

    print("=" * 60)
    print("Seed complete!")
    print("=" * 60)

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
