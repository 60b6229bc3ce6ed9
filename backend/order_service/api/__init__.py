"""API package."""

from order_service.api.middleware import LoggingMiddleware
from order_service.api.routes import health_router, router

__all__ = [
    "router",
    "health_router",
    "LoggingMiddleware",
]
