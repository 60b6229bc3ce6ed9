"""
Unit tests for the account service authorization client.
"""

from urllib.parse import parse_qs

import httpx
import pytest

from order_service.config import Settings
from order_service.exceptions import UpstreamAuthError
from order_service.services.account_service import AccountClient

BUYER = {
    "id": 1,
    "email": "george.marcus@example.com",
    "password": "",
    "full_name": "George Marcus",
    "address": "Buyer Street",
    "phone_number": "+6281234567890",
    "role": "buyer",
}


def account_client(handler) -> AccountClient:
    return AccountClient("http://account.test/", timeout=1.0, transport=httpx.MockTransport(handler))


class TestAuthorize:
    """Tests for AccountClient.authorize."""

    @pytest.mark.asyncio
    async def test_authorized_user(self):
        """Should post the token as form data and decode the user."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["method"] = request.method
            seen["form"] = parse_qs(request.content.decode())
            return httpx.Response(200, json=BUYER)

        client = account_client(handler)
        user = await client.authorize("good-token")
        await client.close()

        assert seen["method"] == "POST"
        assert seen["url"] == "http://account.test/api/authorize/"
        assert seen["form"] == {"token": ["good-token"]}
        assert user.id == 1
        assert user.full_name == "George Marcus"
        assert user.is_buyer

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [401, 403, 500])
    async def test_rejected_token(self, status_code):
        """Should treat any non-200 answer as unauthorized."""
        client = account_client(lambda request: httpx.Response(status_code, json={"message": "nope"}))

        assert await client.authorize("bad-token") is None

    @pytest.mark.asyncio
    async def test_unreachable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(UpstreamAuthError):
            await account_client(handler).authorize("token")

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(UpstreamAuthError, match="timed out"):
            await account_client(handler).authorize("token")

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        client = account_client(lambda request: httpx.Response(200, content=b"not json"))

        with pytest.raises(UpstreamAuthError):
            await client.authorize("token")

    @pytest.mark.asyncio
    async def test_body_is_not_a_user(self):
        client = account_client(lambda request: httpx.Response(200, json={"email": "x@example.com"}))

        with pytest.raises(UpstreamAuthError):
            await client.authorize("token")


class TestFromSettings:
    """Tests for building the client from settings."""

    @pytest.mark.asyncio
    async def test_from_settings(self):
        settings = Settings(
            _env_file=None,
            account_service_url="http://accounts.internal:8010/",
            authorization_timeout=2.5,
        )

        client = AccountClient.from_settings(settings)

        assert client.base_url == "http://accounts.internal:8010"
        assert client.client.timeout.read == 2.5
        await client.close()
