"""Order persistence against the orders collection."""

import logging
from typing import Any, Optional

from pymongo.errors import DuplicateKeyError, PyMongoError

from order_service.database.allocator import OrderNumberAllocator
from order_service.exceptions import NoMatchError, NotFoundError, StoreError
from order_service.models.order import Order, OrderBase, OrderUpdate

logger = logging.getLogger(__name__)


class OrderStore:
    """Create, read, update, delete and list orders.

    ``collection`` is an async (motor) collection handle. The store treats
    ``status`` as opaque data.
    """

    def __init__(self, collection: Any, allocator: Optional[OrderNumberAllocator] = None) -> None:
        self.collection = collection
        self.allocator = allocator or OrderNumberAllocator(collection)

    async def insert(self, order: OrderBase) -> Order:
        """Insert a new order with a freshly allocated order number.

        Any ``_id`` or ``order_number`` carried by ``order`` is discarded.
        """
        fields = order.model_dump(include=set(OrderBase.model_fields))

        for attempt in range(self.allocator.max_attempts):
            new_order = Order(order_number=await self.allocator.allocate(), **fields)
            try:
                result = await self.collection.insert_one(new_order.to_document())
            except DuplicateKeyError as e:
                logger.warning(
                    "Duplicate order number %s on insert attempt %d: %s",
                    new_order.order_number,
                    attempt + 1,
                    e,
                )
                continue
            except (PyMongoError, OverflowError) as e:
                logger.error("Error inserting order: %s", e)
                raise StoreError(f"Failed to insert order: {e}") from e

            new_order.id = str(result.inserted_id)
            logger.info("Inserted order %s", new_order.order_number)
            return new_order

        raise StoreError(
            f"Failed to insert order: no unique order number after "
            f"{self.allocator.max_attempts} attempts"
        )

    async def get(self, filter: dict[str, Any]) -> Order:
        """Get the single order matching ``filter``."""
        try:
            document = await self.collection.find_one(filter)
        except (PyMongoError, OverflowError) as e:
            logger.error("Error getting order %s: %s", filter, e)
            raise StoreError(f"Failed to get order: {e}") from e

        if document is None:
            raise NotFoundError(f"Order not found: {filter}")
        return Order.from_document(document)

    async def update(self, filter: dict[str, Any], partial: OrderUpdate) -> int:
        """Merge the fields set on ``partial`` into every order matching ``filter``.

        Returns the number of matched orders. Raises ``NoMatchError`` when
        nothing matches, even if there was nothing to change.
        """
        fields = partial.merge_fields()

        try:
            if not fields:
                matched = await self.collection.count_documents(filter)
            else:
                result = await self.collection.update_many(filter, {"$set": fields})
                matched = result.matched_count
        except (PyMongoError, OverflowError) as e:
            logger.error("Error updating orders %s: %s", filter, e)
            raise StoreError(f"Failed to update order: {e}") from e

        if matched == 0:
            raise NoMatchError("no data updated")

        logger.info("Updated %d order(s) matching %s: %s", matched, filter, sorted(fields))
        return matched

    async def delete(self, filter: dict[str, Any]) -> int:
        """Delete every order matching ``filter``.

        Returns the number of deleted orders; zero is not an error.
        """
        try:
            result = await self.collection.delete_many(filter)
        except (PyMongoError, OverflowError) as e:
            logger.error("Error deleting orders %s: %s", filter, e)
            raise StoreError(f"Failed to delete order: {e}") from e

        logger.info("Deleted %d order(s) matching %s", result.deleted_count, filter)
        return result.deleted_count

    async def list(self, filter: dict[str, Any]) -> list[Order]:
        """List all orders matching ``filter``, in no particular order."""
        try:
            cursor = self.collection.find(filter)
            documents = await cursor.to_list(length=None)
        except (PyMongoError, OverflowError) as e:
            logger.error("Error listing orders %s: %s", filter, e)
            raise StoreError(f"Failed to list orders: {e}") from e

        return [Order.from_document(document) for document in documents]
