"""Reset database to empty state.

Deletes every product and restarts product_id_seq at 100000.

Usage:
    uv run python -m scripts.reset_db
"""

import asyncio

from sqlalchemy import text

from product_api.core.database import async_session_maker, engine
from product_api.models.product import PRODUCT_ID_SEQUENCE_NAME, PRODUCT_ID_START


async def reset_database():
    """Clear all data from the database."""
    print("=" * 60)
    print("Resetting database to empty state...")
    print("=" * 60)

    async with async_session_maker() as session:
        result = await session.execute(text("DELETE FROM products"))
        print(f"  Deleted {result.rowcount} rows from products")

        await session.execute(
            text(f"ALTER SEQUENCE {PRODUCT_ID_SEQUENCE_NAME} RESTART WITH {PRODUCT_ID_START}")
        )
        print(f"  Restarted {PRODUCT_ID_SEQUENCE_NAME} at {PRODUCT_ID_START}")

        await session.commit()
        print("\nDatabase cleared successfully!")


async def main():
    await reset_database()

    print("\n" + "=" * 60)
    print("Reset complete!")
    print("=" * 60)
    print("\nTo re-seed the database, run:")
    print("  uv run python -m scripts.seed_data")
    print("=" * 60)

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
