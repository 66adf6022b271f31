"""FastAPI routes for the Ordering domain: checkout and admin order management."""

import json

from fastapi import APIRouter, Depends, HTTPException
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from identity.api.dependencies import SessionUser, require_admin, require_user
from ordering.api.schemas import (
    CreateOrderRequest,
    OrderDetailResponse,
    OrderItemResponse,
    OrderResponse,
    UpdateOrderStatusRequest,
)
from ordering.order.order import Order
from ordering.order.placement import PlaceOrder
from ordering.order.status import UpdateOrderStatus


def _order_response(order) -> OrderResponse:
    return OrderResponse(
        id=str(order.id),
        user_id=str(order.user_id),
        total_amount=order.total_amount,
        customer_name=order.customer_name,
        customer_email=order.customer_email,
        shipping_address=order.shipping_address,
        payment_method=order.payment_method,
        status=order.status,
        created_at=order.created_at,
        updated_at=order.updated_at,
    )


def _order_detail_response(order) -> OrderDetailResponse:
    return OrderDetailResponse(
        **_order_response(order).model_dump(),
        items=[
            OrderItemResponse(
                id=str(item.id),
                product_id=str(item.product_id),
                product_name=item.product_name,
                quantity=item.quantity,
                price=item.price,
                supplier_id=item.supplier_id,
                created_at=item.created_at,
            )
            for item in order.items
        ],
    )


def _get_order(order_id: str):
    try:
        return current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise HTTPException(status_code=404, detail="Order not found") from None


# ---------------------------------------------------------------------------
# Customer Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/api/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderDetailResponse)
async def create_order(body: CreateOrderRequest, user: SessionUser = Depends(require_user)) -> OrderDetailResponse:
    command = PlaceOrder(
        user_id=user.id,
        total_amount=body.total_amount,
        customer_name=body.customer_name,
        customer_email=body.customer_email,
        shipping_address=body.shipping_address,
        payment_method=body.payment_method,
        items=json.dumps([item.model_dump() for item in body.items]),
    )
    order_id = current_domain.process(command, asynchronous=False)
    return _order_detail_response(_get_order(order_id))


@order_router.get("/my-orders", response_model=list[OrderResponse])
async def my_orders(user: SessionUser = Depends(require_user)) -> list[OrderResponse]:
    orders = current_domain.repository_for(Order).for_user(user.id)
    return [_order_response(o) for o in orders]


# ---------------------------------------------------------------------------
# Admin Router
# ---------------------------------------------------------------------------
admin_order_router = APIRouter(
    prefix="/api/admin/orders",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@admin_order_router.get("", response_model=list[OrderResponse])
async def list_orders() -> list[OrderResponse]:
    orders = current_domain.repository_for(Order).all_orders()
    return [_order_response(o) for o in orders]


@admin_order_router.get("/{order_id}", response_model=OrderDetailResponse)
async def get_order(order_id: str) -> OrderDetailResponse:
    return _order_detail_response(_get_order(order_id))


@admin_order_router.patch("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest) -> OrderResponse:
    _get_order(order_id)
    command = UpdateOrderStatus(order_id=order_id, status=body.status)
    current_domain.process(command, asynchronous=False)
    return _order_response(_get_order(order_id))
