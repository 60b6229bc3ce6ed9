"""API routes for orders."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from order_service.api.dependencies import get_current_user, get_order_service, require_buyer
from order_service.models.order import MessageResponse, Order, OrderCreate, OrderUpdate
from order_service.models.request import ErrorResponse, HealthResponse
from order_service.models.user import AuthorizedUser
from order_service.services.order_service import OrderService

logger = logging.getLogger(__name__)

router = APIRouter(
    dependencies=[Depends(get_current_user)],
    tags=["orders"],
    responses={
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
health_router = APIRouter(tags=["health"])


def _require_order_number(order_number: str) -> str:
    if not order_number:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="order_number empty/not found",
        )
    return order_number


@health_router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Health check endpoint."""
    mongodb = getattr(request.app.state, "mongodb", None)
    mongodb_status = "connected" if mongodb is not None and mongodb.is_connected else "disconnected"
    settings = request.app.state.settings

    return HealthResponse(
        status="healthy" if mongodb_status == "connected" else "degraded",
        version=settings.app_version,
        services={
            "mongodb": mongodb_status,
            "account_service": settings.account_service_url,
        },
    )


@router.post(
    "/order/",
    response_model=Order,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def create_order(
    order: OrderCreate,
    user: AuthorizedUser = Depends(require_buyer),
    order_service: OrderService = Depends(get_order_service),
) -> Order:
    """Create an order for the authorized buyer.

    The buyer id is taken from the token; ``_id`` and ``order_number`` in the
    body are ignored.
    """
    return await order_service.create_order(order, user)


@router.get("/orders/", response_model=list[Order])
async def list_orders(
    request: Request,
    order_service: OrderService = Depends(get_order_service),
) -> list[Order]:
    """List orders, optionally filtered by buyer_id, status and product_user_id."""
    return await order_service.list_orders(request.query_params)


@router.get(
    "/order/",
    response_model=Order,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def get_order(
    order_number: str = Query(""),
    order_service: OrderService = Depends(get_order_service),
) -> Order:
    """Get a single order by order number."""
    return await order_service.get_order(_require_order_number(order_number))


@router.put("/order/", response_model=MessageResponse)
async def update_order(
    update: OrderUpdate,
    order_number: str = Query(""),
    order_service: OrderService = Depends(get_order_service),
) -> MessageResponse:
    """Partially update an order.

    Only fields present in the body are changed; null and blank string
    values leave the stored field as it is.
    """
    count = await order_service.update_order(_require_order_number(order_number), update)
    return MessageResponse(message="Update order success!", count=count)


@router.delete("/order/", response_model=MessageResponse)
async def delete_order(
    order_number: str = Query(""),
    order_service: OrderService = Depends(get_order_service),
) -> MessageResponse:
    """Delete an order. Deleting an unknown order number still succeeds."""
    count = await order_service.delete_order(_require_order_number(order_number))
    return MessageResponse(message="Delete order success!", count=count)
