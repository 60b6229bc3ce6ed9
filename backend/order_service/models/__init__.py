"""Data models package."""

from order_service.models.order import (
    MessageResponse,
    Order,
    OrderBase,
    OrderCreate,
    OrderUpdate,
)
from order_service.models.request import ErrorResponse, HealthResponse
from order_service.models.user import BUYER_ROLE, AuthorizedUser

__all__ = [
    # Order models
    "Order",
    "OrderBase",
    "OrderCreate",
    "OrderUpdate",
    "MessageResponse",
    # User models
    "AuthorizedUser",
    "BUYER_ROLE",
    # Response models
    "ErrorResponse",
    "HealthResponse",
]
