"""Shared fixtures for order service tests."""

import pytest
import pytest_asyncio
from mongomock_motor import AsyncMongoMockClient

from order_service.database.allocator import OrderNumberAllocator
from order_service.database.mongodb import create_order_indexes
from order_service.database.order_store import OrderStore
from tests.factories import make_order


@pytest.fixture
def orders_collection():
    """Fresh in-memory orders collection."""
    client = AsyncMongoMockClient()
    return client["ecom_order_service_test"]["orders"]


@pytest_asyncio.fixture
async def indexed_collection(orders_collection):
    await create_order_indexes(orders_collection)
    return orders_collection


@pytest.fixture
def allocator(orders_collection):
    return OrderNumberAllocator(orders_collection, max_attempts=5, backoff_base=0)


@pytest_asyncio.fixture
async def store(indexed_collection):
    allocator = OrderNumberAllocator(indexed_collection, max_attempts=5, backoff_base=0)
    return OrderStore(indexed_collection, allocator)


@pytest_asyncio.fixture
async def seeded(store):
    """Orders A, B and C from the list/delete scenarios."""
    a = await store.insert(make_order(buyer_id=1, status="in-cart", product_user_id=10))
    b = await store.insert(make_order(buyer_id=1, status="done", product_user_id=10))
    c = await store.insert(make_order(buyer_id=2, status="in-cart", product_user_id=20))
    return a, b, c
