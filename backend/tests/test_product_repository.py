"""Tests for the product repository.

Statements are captured from a mocked AsyncSession and compiled with the
PostgreSQL dialect, so the checks cover the SQL that would reach the store:
- single-statement conditional stock updates
- query filters and ordering
- id assignment and timestamp handling on insert
"""

import pytest
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from sqlalchemy.dialects import postgresql

from product_api.models.product import Product
from product_api.repositories.product_repository import ProductRepository


def compiled_sql(mock_call) -> str:
    stmt = mock_call.args[0]
    return str(stmt.compile(dialect=postgresql.dialect()))


def result_with_rows(rows: list) -> MagicMock:
    result = MagicMock()
    result.scalars.return_value.all.return_value = rows
    result.scalar_one_or_none.return_value = rows[0] if rows else None
    return result


def update_result(row) -> MagicMock:
    result = MagicMock()
    result.first.return_value = row
    return result


@pytest.fixture
def id_generator() -> AsyncMock:
    generator = AsyncMock()
    generator.next_product_id = AsyncMock(return_value=100005)
    return generator


@pytest.fixture
def repository(mock_db, id_generator) -> ProductRepository:
    return ProductRepository(mock_db, id_generator)


class TestAdd:
    """Test product insertion."""

    @pytest.mark.asyncio
    async def test_add_assigns_id_from_generator(self, repository, mock_db, id_generator):
        product = Product(
            name="Widget", price=Decimal("9.99"), stock_available=5, category="Tools"
        )

        created = await repository.add(product)

        assert created.product_id == 100005
        id_generator.next_product_id.assert_awaited_once()
        mock_db.add.assert_called_once_with(product)
        mock_db.commit.assert_awaited_once()
        mock_db.refresh.assert_awaited_once_with(product)

    @pytest.mark.asyncio
    async def test_add_zero_id_is_treated_as_unset(self, repository, id_generator):
        product = Product(
            product_id=0, name="Widget", price=Decimal("9.99"), stock_available=5, category="Tools"
        )

        created = await repository.add(product)

        assert created.product_id == 100005
        id_generator.next_product_id.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_add_keeps_preassigned_id(self, repository, id_generator):
        product = Product(
            product_id=200000, name="Widget", price=Decimal("9.99"), stock_available=5, category="Tools"
        )

        created = await repository.add(product)

        assert created.product_id == 200000
        id_generator.next_product_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_add_overrides_caller_timestamps(self, repository):
        stale = datetime(2000, 1, 1, tzinfo=timezone.utc)
        product = Product(
            name="Widget",
            price=Decimal("9.99"),
            stock_available=5,
            category="Tools",
            created_at=stale,
            updated_at=stale,
        )

        created = await repository.add(product)

        assert created.created_at != stale
        assert created.created_at == created.updated_at
        assert created.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_add_does_not_insert_when_id_generation_fails(
        self, repository, mock_db, id_generator
    ):
        id_generator.next_product_id = AsyncMock(side_effect=RuntimeError("store down"))
        product = Product(
            name="Widget", price=Decimal("9.99"), stock_available=5, category="Tools"
        )

        with pytest.raises(RuntimeError):
            await repository.add(product)

        mock_db.add.assert_not_called()
        mock_db.commit.assert_not_awaited()


class TestUpdateAndDelete:
    """Test whole-entity update and hard delete."""

    @pytest.mark.asyncio
    async def test_update_refreshes_updated_at_only(self, repository, mock_db, product):
        created_at = product.created_at

        await repository.update(product)

        assert product.created_at == created_at
        assert product.updated_at > created_at
        mock_db.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_removes_row(self, repository, mock_db, product):
        await repository.delete(product)

        mock_db.delete.assert_awaited_once_with(product)
        mock_db.commit.assert_awaited_once()


class TestStockUpdates:
    """Test atomic stock mutations."""

    @pytest.mark.asyncio
    async def test_decrement_stock_success(self, repository, mock_db):
        mock_db.execute = AsyncMock(return_value=update_result((100000,)))

        result = await repository.decrement_stock(100000, 3)

        assert result is True
        mock_db.commit.assert_awaited_once()
        mock_db.rollback.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_decrement_stock_is_single_conditional_update(self, repository, mock_db):
        mock_db.execute = AsyncMock(return_value=update_result((100000,)))

        await repository.decrement_stock(100000, 3)

        mock_db.execute.assert_awaited_once()
        sql = compiled_sql(mock_db.execute.call_args)
        assert sql.startswith("UPDATE products SET")
        assert "products.stock_available -" in sql
        assert "products.stock_available >=" in sql
        assert "updated_at=" in sql
        assert "RETURNING products.product_id" in sql

    @pytest.mark.asyncio
    async def test_decrement_stock_insufficient_or_missing(self, repository, mock_db):
        mock_db.execute = AsyncMock(return_value=update_result(None))

        result = await repository.decrement_stock(100000, 100)

        assert result is False
        mock_db.rollback.assert_awaited_once()
        mock_db.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_add_to_stock_success(self, repository, mock_db):
        mock_db.execute = AsyncMock(return_value=update_result((100000,)))

        result = await repository.add_to_stock(100000, 5)

        assert result is True
        sql = compiled_sql(mock_db.execute.call_args)
        assert "products.stock_available +" in sql
        assert "products.stock_available >=" not in sql

    @pytest.mark.asyncio
    async def test_add_to_stock_missing_product(self, repository, mock_db):
        mock_db.execute = AsyncMock(return_value=update_result(None))

        assert await repository.add_to_stock(999999, 5) is False

    @pytest.mark.asyncio
    async def test_update_stock_overwrites_value(self, repository, mock_db):
        mock_db.execute = AsyncMock(return_value=update_result((100000,)))

        result = await repository.update_stock(100000, 42)

        assert result is True
        stmt = mock_db.execute.call_args.args[0]
        sql = compiled_sql(mock_db.execute.call_args)
        assert stmt.compile().params["stock_available"] == 42
        assert "products.stock_available -" not in sql
        assert "products.stock_available >=" not in sql

    @pytest.mark.asyncio
    async def test_update_stock_missing_product(self, repository, mock_db):
        mock_db.execute = AsyncMock(return_value=update_result(None))

        assert await repository.update_stock(999999, 42) is False


class TestQueries:
    """Test read queries."""

    @pytest.mark.asyncio
    async def test_get_by_id_found(self, repository, mock_db, product):
        mock_db.execute = AsyncMock(return_value=result_with_rows([product]))

        assert await repository.get_by_id(100000) is product

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, repository, mock_db):
        mock_db.execute = AsyncMock(return_value=result_with_rows([]))

        assert await repository.get_by_id(999999) is None

    @pytest.mark.asyncio
    async def test_get_by_category_is_case_insensitive_and_sorted(self, repository, mock_db):
        mock_db.execute = AsyncMock(return_value=result_with_rows([]))

        await repository.get_by_category("TOOLS")

        stmt = mock_db.execute.call_args.args[0]
        sql = compiled_sql(mock_db.execute.call_args)
        assert "lower(products.category)" in sql
        assert "ORDER BY products.name ASC" in sql
        assert "tools" in stmt.compile().params.values()

    @pytest.mark.asyncio
    async def test_get_with_stock_filters_empty_products(self, repository, mock_db):
        mock_db.execute = AsyncMock(return_value=result_with_rows([]))

        await repository.get_with_stock()

        sql = compiled_sql(mock_db.execute.call_args)
        assert "products.stock_available >" in sql
        assert "ORDER BY products.name ASC" in sql

    @pytest.mark.asyncio
    async def test_get_with_low_stock_bounds_and_order(self, repository, mock_db):
        mock_db.execute = AsyncMock(return_value=result_with_rows([]))

        await repository.get_with_low_stock()

        stmt = mock_db.execute.call_args.args[0]
        sql = compiled_sql(mock_db.execute.call_args)
        assert "products.stock_available >" in sql
        assert "products.stock_available <=" in sql
        assert "ORDER BY products.stock_available ASC" in sql
        params = stmt.compile().params
        assert 0 in params.values()
        assert 10 in params.values()

    @pytest.mark.asyncio
    async def test_get_all_returns_list(self, repository, mock_db, make_product):
        products = [make_product(product_id=100000), make_product(product_id=100001)]
        mock_db.execute = AsyncMock(return_value=result_with_rows(products))

        assert await repository.get_all() == products

    @pytest.mark.asyncio
    async def test_exists(self, repository, mock_db):
        mock_db.scalar = AsyncMock(return_value=True)

        assert await repository.exists(100000) is True

    @pytest.mark.asyncio
    async def test_generate_next_product_id_delegates(self, repository, id_generator):
        assert await repository.generate_next_product_id() == 100005
        id_generator.next_product_id.assert_awaited_once()
