"""Database package."""

from order_service.database.allocator import OrderNumberAllocator
from order_service.database.mongodb import MongoDB, create_order_indexes
from order_service.database.order_store import OrderStore

__all__ = [
    "MongoDB",
    "create_order_indexes",
    "OrderNumberAllocator",
    "OrderStore",
]
