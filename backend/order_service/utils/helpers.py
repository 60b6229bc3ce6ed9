"""Utility helper functions."""

import secrets
import string

ORDER_NUMBER_ALPHABET = string.digits + string.ascii_lowercase + string.ascii_uppercase
ORDER_NUMBER_LENGTH = 15


def generate_order_number(length: int = ORDER_NUMBER_LENGTH) -> str:
    """Generate a random alphanumeric order number."""
    return "".join(secrets.choice(ORDER_NUMBER_ALPHABET) for _ in range(length))


def get_bearer_token(authorization: str | None) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` header.

    Returns an empty string when the header is missing or not a bearer token.
    """
    if not authorization:
        return ""

    _, sep, token = authorization.partition("Bearer ")
    if not sep:
        return ""
    return token.strip()
