"""Services package."""

from order_service.services.account_service import AccountClient
from order_service.services.order_service import OrderService
from order_service.services.query_filter import build_order_filter, order_number_filter
from order_service.services.validator import validate_order

__all__ = [
    "AccountClient",
    "OrderService",
    "build_order_filter",
    "order_number_filter",
    "validate_order",
]
