"""Database initialization script.

Connects to MongoDB, makes sure the orders collection indexes exist and
optionally loads sample orders.

Usage:
    python -m scripts.init_db
    python -m scripts.init_db --seed
    python -m scripts.init_db --clear --seed
"""

import argparse
import asyncio
import logging
from typing import Any

from order_service.config import Settings, get_settings
from order_service.database.mongodb import MongoDB
from order_service.database.order_store import OrderStore
from order_service.models.order import Order, OrderCreate
from order_service.services.validator import validate_order
from order_service.utils.logger import setup_logging

logger = logging.getLogger(__name__)

SAMPLE_ORDERS: list[dict[str, Any]] = [
    {
        "status": "in-cart",
        "qty": 2,
        "total_price": 2000001,
        "buyer_id": 1,
        "buyer_full_name": "George Marcus",
        "buyer_address": "Buyer Street",
        "product_id": 1,
        "product_sku": "testsku",
        "product_name": "product name",
        "product_price": 1000000.50,
        "product_weight": 1.5,
        "product_description": "product description",
        "product_stock": 100,
        "product_user_id": 10,
        "product_user_full_name": "Seller One",
        "product_images_path": ["product 1.1.jpg", "product 1.2.jpg"],
    },
    {
        "status": "done",
        "qty": 2,
        "total_price": 4000001,
        "buyer_id": 1,
        "buyer_full_name": "George Marcus",
        "buyer_address": "Buyer Street",
        "product_id": 2,
        "product_sku": "testsku2",
        "product_name": "product name 2",
        "product_price": 2000000.50,
        "product_weight": 2.5,
        "product_description": "product description 2",
        "product_stock": 200,
        "product_user_id": 10,
        "product_user_full_name": "Seller One",
        "product_images_path": ["product 2.1.jpg"],
    },
    {
        "status": "in-cart",
        "qty": 1,
        "total_price": 50000,
        "buyer_id": 2,
        "buyer_full_name": "Jane Smith",
        "buyer_address": "Another Street",
        "product_id": 3,
        "product_sku": "testsku3",
        "product_name": "product name 3",
        "product_price": 50000,
        "product_weight": 0.5,
        "product_description": "product description 3",
        "product_stock": 5,
        "product_user_id": 20,
        "product_user_full_name": "Seller Two",
        "product_images_path": [],
    },
]


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Initialize the orders collection")
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Delete all existing orders before seeding",
    )
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Insert sample orders",
    )
    return parser.parse_args()


async def seed_orders(store: OrderStore, orders: list[dict[str, Any]]) -> list[Order]:
    """Validate and insert sample orders, each with a new order number."""
    created = []
    for data in orders:
        order = OrderCreate(**data)
        validate_order(order)
        created.append(await store.insert(order))
        logger.info("Seeded order %s for buyer %s", created[-1].order_number, order.buyer_id)
    return created


async def init_databases(settings: Settings, *, clear: bool = False, seed: bool = False) -> None:
    """Initialize the orders collection."""
    mongodb = MongoDB(settings)
    try:
        logger.info("Initializing database...")

        # connect() also creates the indexes
        await mongodb.connect()

        if clear:
            result = await mongodb.orders.delete_many({})
            logger.info("Deleted %d existing orders", result.deleted_count)

        if seed:
            store = OrderStore(mongodb.orders)
            created = await seed_orders(store, SAMPLE_ORDERS)
            logger.info("Seeded %d orders", len(created))

        logger.info("Database initialization completed successfully")

    except Exception as e:
        logger.error("Error initializing database: %s", e)
        raise

    finally:
        await mongodb.disconnect()


def main() -> None:
    """Entry point for the script."""
    settings = get_settings()
    setup_logging(settings)
    args = _parse_args()
    asyncio.run(init_databases(settings, clear=args.clear, seed=args.seed))


if __name__ == "__main__":
    main()
