"""
Tests for OrderService, including the end-to-end create/list/delete flow.
"""

import pytest

from order_service.exceptions import MissingFieldError, NoMatchError, NotFoundError
from order_service.models.order import OrderUpdate
from order_service.models.user import AuthorizedUser
from order_service.services.order_service import OrderService
from tests.factories import make_order


@pytest.fixture
def service(store):
    return OrderService(store)


def buyer(user_id: int) -> AuthorizedUser:
    return AuthorizedUser(id=user_id, full_name=f"Buyer {user_id}", role="buyer")


class TestOrderService:
    """Tests for OrderService."""

    @pytest.mark.asyncio
    async def test_create_stamps_buyer(self, service):
        """Should record the authorized user as buyer."""
        order = await service.create_order(make_order(buyer_id=99), buyer(7))

        assert order.buyer_id == 7
        assert (await service.get_order(order.order_number)).buyer_id == 7

    @pytest.mark.asyncio
    async def test_create_validates(self, service, store):
        with pytest.raises(MissingFieldError) as exc_info:
            await service.create_order(make_order(product_weight=0), buyer(1))

        assert exc_info.value.field == "product_weight"
        assert await store.list({}) == []

    @pytest.mark.asyncio
    async def test_end_to_end(self, service):
        """Should list by buyer and product owner, then delete by order number."""
        a = await service.create_order(make_order(status="in-cart", product_user_id=10), buyer(1))
        b = await service.create_order(make_order(status="done", product_user_id=10), buyer(1))
        c = await service.create_order(make_order(status="in-cart", product_user_id=20), buyer(2))

        by_buyer = await service.list_orders({"buyer_id": "1"})
        assert {o.order_number for o in by_buyer} == {a.order_number, b.order_number}

        by_buyer_status = await service.list_orders({"buyer_id": "1", "status": "in-cart"})
        assert by_buyer_status == [a]

        by_owner = await service.list_orders({"product_user_id": str(c.product_user_id)})
        assert by_owner == [c]

        assert await service.delete_order(a.order_number) == 1
        with pytest.raises(NotFoundError):
            await service.get_order(a.order_number)

    @pytest.mark.asyncio
    async def test_update_and_delete_asymmetry(self, service):
        """Should fail updates but not deletes on unknown order numbers."""
        with pytest.raises(NoMatchError):
            await service.update_order("doesnotexist123", OrderUpdate(status="done"))

        assert await service.delete_order("doesnotexist123") == 0

    @pytest.mark.asyncio
    async def test_update_order(self, service):
        order = await service.create_order(make_order(), buyer(1))

        assert await service.update_order(order.order_number, OrderUpdate(status="paid")) == 1
        assert (await service.get_order(order.order_number)).status == "paid"
