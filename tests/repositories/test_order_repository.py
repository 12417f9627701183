"""Tests for OrderRepository"""
import pytest
from unittest.mock import AsyncMock, MagicMock

from pymongo.errors import PyMongoError

from app.core.errors import ErrorResponse
from app.repositories.order import OrderRepository


@pytest.fixture
def orders_collection():
    collection = MagicMock()
    collection.aggregate.return_value.to_list = AsyncMock(return_value=[])
    return collection


@pytest.fixture
def repository(orders_collection):
    return OrderRepository(orders_collection, products_collection="products")


class TestOrderRepository:

    @pytest.mark.asyncio
    async def test_get_with_products_joins_lines(self, repository, orders_collection):
        orders_collection.aggregate.return_value.to_list.return_value = [{
            "_id": 1,
            "items": [{"product_id": 10, "quantity": 2}, {"product_id": 11, "quantity": 1}],
            "products": [
                {"_id": 11, "name": "Milk", "type": "EXPIRABLE", "available": 0, "lead_time": 90},
                {"_id": 10, "name": "USB Cable", "type": "NORMAL", "available": 30, "lead_time": 15},
            ],
        }]

        order = await repository.get_with_products(1)

        assert order.id == 1
        assert [(i.product.name, i.quantity) for i in order.items] == [("USB Cable", 2), ("Milk", 1)]

    @pytest.mark.asyncio
    async def test_single_aggregation_query(self, repository, orders_collection):
        await repository.get_with_products(5)

        orders_collection.aggregate.assert_called_once()
        pipeline = orders_collection.aggregate.call_args.args[0]
        assert pipeline[0] == {"$match": {"_id": 5}}
        assert pipeline[1]["$lookup"]["from"] == "products"

    @pytest.mark.asyncio
    async def test_missing_order(self, repository):
        assert await repository.get_with_products(5) is None

    @pytest.mark.asyncio
    async def test_line_with_missing_product_is_dropped(self, repository, orders_collection):
        orders_collection.aggregate.return_value.to_list.return_value = [{
            "_id": 2,
            "items": [{"product_id": 10}],
            "products": [],
        }]

        order = await repository.get_with_products(2)

        assert order.items == []

    @pytest.mark.asyncio
    async def test_database_error(self, repository, orders_collection):
        orders_collection.aggregate.side_effect = PyMongoError("down")

        with pytest.raises(ErrorResponse) as exc_info:
            await repository.get_with_products(1)

        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_create(self, repository, orders_collection):
        orders_collection.insert_one = AsyncMock()

        assert await repository.create(3, [{"product_id": 1, "quantity": 1}]) == 3
        orders_collection.insert_one.assert_awaited_once_with(
            {"_id": 3, "items": [{"product_id": 1, "quantity": 1}]}
        )
