"""Order service exceptions.

Raised by the store, validator and authorization client. The API layer
translates them into HTTP responses in ``order_service.main``.
"""

from __future__ import annotations


class OrderServiceError(Exception):
    """Base class for all order service errors."""


class ValidationError(OrderServiceError):
    """Order data is incomplete or invalid."""


class MissingFieldError(ValidationError):
    """A mandatory order field is absent, blank or zero."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} empty/not found")


class NotFoundError(OrderServiceError):
    """A single-order read matched no document."""


class NoMatchError(OrderServiceError):
    """An update matched no document."""


class StoreError(OrderServiceError):
    """The backing collection failed to complete an operation."""


class UpstreamAuthError(OrderServiceError):
    """The account service was unreachable or answered with unusable data."""
