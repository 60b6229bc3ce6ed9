"""Order service for business logic."""

import logging
from typing import Mapping

from order_service.database.order_store import OrderStore
from order_service.models.order import Order, OrderCreate, OrderUpdate
from order_service.models.user import AuthorizedUser
from order_service.services.query_filter import build_order_filter, order_number_filter
from order_service.services.validator import validate_order

logger = logging.getLogger(__name__)


class OrderService:
    """Order service for handling order-related operations."""

    def __init__(self, store: OrderStore) -> None:
        self.store = store

    async def create_order(self, order: OrderCreate, buyer: AuthorizedUser) -> Order:
        """Validate and store a new order placed by ``buyer``."""
        order = order.model_copy(update={"buyer_id": buyer.id})
        validate_order(order)
        return await self.store.insert(order)

    async def get_order(self, order_number: str) -> Order:
        """Get an order by its order number."""
        return await self.store.get(order_number_filter(order_number))

    async def list_orders(self, params: Mapping[str, str]) -> list[Order]:
        """List orders matching the recognized query parameters."""
        filter = build_order_filter(params)
        orders = await self.store.list(filter)
        logger.debug("Listed %d order(s) for filter %s", len(orders), filter)
        return orders

    async def update_order(self, order_number: str, update: OrderUpdate) -> int:
        """Apply a partial update to an order."""
        return await self.store.update(order_number_filter(order_number), update)

    async def delete_order(self, order_number: str) -> int:
        """Delete an order, returning how many orders were removed."""
        return await self.store.delete(order_number_filter(order_number))
