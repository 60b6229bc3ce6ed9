"""Utilities package."""

from order_service.utils.helpers import (
    ORDER_NUMBER_ALPHABET,
    ORDER_NUMBER_LENGTH,
    generate_order_number,
    get_bearer_token,
)
from order_service.utils.logger import setup_logging

__all__ = [
    "setup_logging",
    "generate_order_number",
    "get_bearer_token",
    "ORDER_NUMBER_ALPHABET",
    "ORDER_NUMBER_LENGTH",
]
