"""Translate request parameters into order collection filters."""

import re
from typing import Any, Mapping, Optional

from order_service.models.order import INT64_MAX, INT64_MIN

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(value: Optional[str]) -> Optional[int]:
    """Parse a plain ASCII decimal that fits a 64-bit signed integer."""
    if value is None or not _INTEGER.fullmatch(value):
        return None
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        return None
    return number


def build_order_filter(params: Mapping[str, str]) -> dict[str, Any]:
    """Build a filter from ``buyer_id``, ``status`` and ``product_user_id``.

    Unparseable ids and an empty status are left out rather than rejected,
    and every other parameter is ignored. An empty result matches all orders.
    """
    filter: dict[str, Any] = {}

    buyer_id = _parse_int(params.get("buyer_id"))
    if buyer_id is not None:
        filter["buyer_id"] = buyer_id

    status = params.get("status")
    if status:
        filter["status"] = status

    product_user_id = _parse_int(params.get("product_user_id"))
    if product_user_id is not None:
        filter["product_user_id"] = product_user_id

    return filter


def order_number_filter(order_number: str) -> dict[str, Any]:
    """Filter selecting a single order by its order number."""
    return {"order_number": order_number}
