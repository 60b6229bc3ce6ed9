"""FastAPI dependencies for services and request authorization."""

import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, Request, status

from order_service.models.user import AuthorizedUser
from order_service.services.account_service import AccountClient
from order_service.services.order_service import OrderService
from order_service.utils.helpers import get_bearer_token

logger = logging.getLogger(__name__)


def get_order_service(request: Request) -> OrderService:
    """Order service created during application startup."""
    return request.app.state.order_service


def get_account_client(request: Request) -> AccountClient:
    """Account service client created during application startup."""
    return request.app.state.account_client


async def get_current_user(
    authorization: Optional[str] = Header(None),
    account_client: AccountClient = Depends(get_account_client),
) -> AuthorizedUser:
    """Authorize the request's bearer token against the account service."""
    token = get_bearer_token(authorization)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Token authorization empty/not found",
        )

    user = await account_client.authorize(token)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Token authorization invalid",
        )
    return user


async def require_buyer(user: AuthorizedUser = Depends(get_current_user)) -> AuthorizedUser:
    """Restrict a route to users with the buyer role."""
    if not user.is_buyer:
        logger.warning("User %s with role %r attempted a buyer-only action", user.id, user.role)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="user doesn't have authority to access this API",
        )
    return user
