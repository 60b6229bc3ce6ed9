"""MongoDB database connection and index management."""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo import ASCENDING
from pymongo.errors import ConnectionFailure

from order_service.config import Settings

logger = logging.getLogger(__name__)


async def create_order_indexes(collection: AsyncIOMotorCollection) -> None:
    """Create the orders collection indexes.

    The unique index on ``order_number`` is what guarantees uniqueness; the
    allocator's existence check only avoids most duplicate-key retries.
    """
    await collection.create_index(
        [("order_number", ASCENDING)], unique=True, name="order_number_unique"
    )
    await collection.create_index([("buyer_id", ASCENDING)], name="buyer_id_index")
    await collection.create_index([("status", ASCENDING)], name="status_index")
    await collection.create_index(
        [("product_user_id", ASCENDING)], name="product_user_id_index"
    )
    logger.info("MongoDB indexes created on %s", collection.name)


class MongoDB:
    """MongoDB connection manager."""

    def __init__(self, settings: Settings) -> None:
        """Initialize MongoDB connection."""
        self.settings = settings
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None

    async def connect(self) -> None:
        """Connect to MongoDB."""
        try:
            self.client = AsyncIOMotorClient(
                self.settings.mongodb_url,
                maxPoolSize=self.settings.mongodb_max_pool_size,
                minPoolSize=self.settings.mongodb_min_pool_size,
                serverSelectionTimeoutMS=self.settings.mongodb_server_selection_timeout_ms,
            )
            self.db = self.client[self.settings.mongodb_database]

            # Test connection
            await self.client.admin.command("ping")
            logger.info("Connected to MongoDB: %s", self.settings.mongodb_database)

            await create_order_indexes(self.orders)

        except ConnectionFailure as e:
            logger.error("Failed to connect to MongoDB: %s", e)
            raise

    async def disconnect(self) -> None:
        """Disconnect from MongoDB."""
        if self.client:
            self.client.close()
            self.client = None
            self.db = None
            logger.info("Disconnected from MongoDB")

    @property
    def is_connected(self) -> bool:
        return self.db is not None

    @property
    def orders(self) -> AsyncIOMotorCollection:
        """The orders collection."""
        if self.db is None:
            raise ConnectionError("Database not connected")
        return self.db[self.settings.mongodb_orders_collection]
