"""Account service client used for request authorization."""

import logging
from typing import Optional

import httpx

from order_service.config import Settings
from order_service.exceptions import UpstreamAuthError
from order_service.models.user import AuthorizedUser

logger = logging.getLogger(__name__)

AUTHORIZE_PATH = "/api/authorize/"


class AccountClient:
    """Delegates bearer token checks to the account service."""

    def __init__(self, base_url: str, timeout: float, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        """Initialize the HTTP client.

        Args:
            base_url: Account service root URL
            timeout: Seconds before an authorization call is abandoned
            transport: Optional httpx transport override
        """
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(base_url=self.base_url, timeout=timeout, transport=transport)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AccountClient":
        return cls(settings.account_service_url, settings.authorization_timeout)

    async def close(self) -> None:
        await self.client.aclose()

    async def authorize(self, token: str) -> Optional[AuthorizedUser]:
        """Authorize a bearer token.

        Returns:
            The token's user, or None when the account service rejects it

        Raises:
            UpstreamAuthError: The account service could not be reached, timed
                out, or returned a body that is not a user
        """
        try:
            response = await self.client.post(AUTHORIZE_PATH, data={"token": token})
        except httpx.TimeoutException as e:
            logger.error("Account service timed out: %s", e)
            raise UpstreamAuthError("Account service timed out") from e
        except httpx.HTTPError as e:
            logger.error("Account service unreachable: %s", e)
            raise UpstreamAuthError(f"Account service unreachable: {e}") from e

        if response.status_code != httpx.codes.OK:
            logger.info("Authorization rejected with status %s", response.status_code)
            return None

        try:
            return AuthorizedUser.model_validate(response.json())
        except ValueError as e:
            logger.error("Invalid authorization response: %s", e)
            raise UpstreamAuthError(f"Invalid user data from account service: {e}") from e
