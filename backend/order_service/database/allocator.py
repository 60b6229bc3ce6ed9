"""Order number allocation."""

import asyncio
import logging
from typing import Any, Callable

from pymongo.errors import PyMongoError

from order_service.exceptions import StoreError
from order_service.utils.helpers import generate_order_number

logger = logging.getLogger(__name__)

FALLBACK_ORDER_NUMBER_LENGTH = 24


class OrderNumberAllocator:
    """Allocates order numbers that are not yet used in the orders collection.

    Collisions are retried with exponential backoff up to ``max_attempts``.
    After that a longer fallback number is returned unchecked; the unique
    index on ``order_number`` still rejects it if it happens to exist.
    """

    def __init__(
        self,
        collection: Any,
        max_attempts: int = 10,
        backoff_base: float = 0.01,
        generate: Callable[[], str] = generate_order_number,
    ) -> None:
        self.collection = collection
        self.max_attempts = max_attempts
        self.backoff_base = backoff_base
        self.generate = generate

    async def exists(self, order_number: str) -> bool:
        """Check whether an order number is already taken."""
        try:
            document = await self.collection.find_one(
                {"order_number": order_number}, {"_id": 1}
            )
        except PyMongoError as e:
            raise StoreError(f"Failed to check order number: {e}") from e
        return document is not None

    async def allocate(self) -> str:
        """Return an order number that no stored order uses."""
        for attempt in range(self.max_attempts):
            candidate = self.generate()
            if not await self.exists(candidate):
                return candidate
            if attempt + 1 == self.max_attempts:
                break

            delay = self.backoff_base * (2 ** attempt)
            logger.warning(
                "Order number collision on attempt %d/%d, retrying in %.3fs",
                attempt + 1,
                self.max_attempts,
                delay,
            )
            await asyncio.sleep(delay)

        logger.error(
            "Order number allocation exhausted after %d attempts, using fallback",
            self.max_attempts,
        )
        return generate_order_number(FALLBACK_ORDER_NUMBER_LENGTH)
