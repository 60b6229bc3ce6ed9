"""Order validation before creation."""

from order_service.exceptions import MissingFieldError, ValidationError
from order_service.models.order import OrderBase

NON_NEGATIVE_FIELDS = ("qty", "total_price", "product_price", "product_weight", "product_stock")


def validate_order(order: OrderBase) -> None:
    """Check that the mandatory business fields of an order are present.

    Raises ``MissingFieldError`` for the first failing field, checked in
    this order: status, qty, total_price, product_name, product_price,
    product_weight. Blank strings and zero numbers count as missing.
    Negative quantities, prices, weights and stock raise ``ValidationError``.
    """
    if not order.status.strip():
        raise MissingFieldError("status")

    if order.qty == 0:
        raise MissingFieldError("qty")

    if order.total_price == 0:
        raise MissingFieldError("total_price")

    if not order.product_name.strip():
        raise MissingFieldError("product_name")

    if order.product_price == 0:
        raise MissingFieldError("product_price")

    if order.product_weight == 0:
        raise MissingFieldError("product_weight")

    for field in NON_NEGATIVE_FIELDS:
        if getattr(order, field) < 0:
            raise ValidationError(f"{field} must not be negative")
