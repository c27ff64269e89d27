"""Order API endpoints."""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from app.core.dependencies import get_restaurant_session
from app.services.ordering.checkout import CheckoutError, checkout
from app.services.ordering.models import CustomerDetails, Order, OrderStatus, PaymentStatus
from app.services.ordering.status import InvalidStatusTransition, next_status
from app.services.session.models import RestaurantSession

router = APIRouter()
logger = logging.getLogger(__name__)


class StatusUpdateRequest(BaseModel):
    """Order status update request model."""
    status: OrderStatus


class PaymentUpdateRequest(BaseModel):
    """Payment status update request model."""
    payment_status: PaymentStatus


class OrderResponse(Order):
    """Order response model, with the status the pipeline would move to next."""
    next_status: Optional[OrderStatus] = None

    @classmethod
    def from_order(cls, order: Order) -> "OrderResponse":
        return cls(**order.model_dump(), next_status=next_status(order.status))


def _to_responses(orders: List[Order]) -> List[OrderResponse]:
    return [OrderResponse.from_order(order) for order in orders]


def _not_found(order_id: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Order '{order_id}' not found")


@router.post("/api/orders/checkout", response_model=OrderResponse)
async def place_order(
    request: Request,
    details: CustomerDetails,
    session: RestaurantSession = Depends(get_restaurant_session),
):
    """Place an order for the cart contents."""
    logger.info(
        f"[ORDERS CHECKOUT] Request received - {session.cart.total_items} items, "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )
    try:
        order = checkout(session.cart, session.orders, details)
    except CheckoutError as e:
        logger.info(f"[ORDERS CHECKOUT] Rejected - {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return OrderResponse.from_order(order)


@router.get("/api/orders", response_model=List[OrderResponse])
async def list_orders(
    status: Optional[OrderStatus] = None,
    session: RestaurantSession = Depends(get_restaurant_session),
):
    """List orders, most recent first, optionally filtered by status."""
    if status is not None:
        return _to_responses(session.orders.get_orders_by_status(status))
    return _to_responses(session.orders.orders)


@router.get("/api/orders/today", response_model=List[OrderResponse])
async def list_today_orders(session: RestaurantSession = Depends(get_restaurant_session)):
    """List orders placed today."""
    return _to_responses(session.orders.get_today_orders())


@router.get("/api/orders/pending", response_model=List[OrderResponse])
async def list_pending_orders(session: RestaurantSession = Depends(get_restaurant_session)):
    """List orders still pending or being prepared."""
    return _to_responses(session.orders.get_pending_orders())


@router.get("/api/orders/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: str,
    session: RestaurantSession = Depends(get_restaurant_session),
):
    """Get a single order."""
    order = session.orders.get_order_by_id(order_id)
    if not order:
        raise _not_found(order_id)
    return OrderResponse.from_order(order)


@router.put("/api/orders/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: str,
    body: StatusUpdateRequest,
    session: RestaurantSession = Depends(get_restaurant_session),
):
    """Move an order to a new status."""
    try:
        order = session.orders.update_order_status(order_id, body.status)
    except InvalidStatusTransition as e:
        raise HTTPException(status_code=409, detail=str(e))
    if not order:
        raise _not_found(order_id)
    return OrderResponse.from_order(order)


@router.post("/api/orders/{order_id}/advance", response_model=OrderResponse)
async def advance_order(
    order_id: str,
    session: RestaurantSession = Depends(get_restaurant_session),
):
    """Move an order to the next status in the pipeline."""
    try:
        order = session.orders.advance_order(order_id)
    except InvalidStatusTransition as e:
        raise HTTPException(status_code=409, detail=str(e))
    if not order:
        raise _not_found(order_id)
    return OrderResponse.from_order(order)


@router.put("/api/orders/{order_id}/payment", response_model=OrderResponse)
async def update_payment_status(
    order_id: str,
    body: PaymentUpdateRequest,
    session: RestaurantSession = Depends(get_restaurant_session),
):
    """Set an order's payment status."""
    order = session.orders.update_payment_status(order_id, body.payment_status)
    if not order:
        raise _not_found(order_id)
    return OrderResponse.from_order(order)


@router.post("/api/orders/{order_id}/cancel", response_model=OrderResponse)
async def cancel_order(
    order_id: str,
    session: RestaurantSession = Depends(get_restaurant_session),
):
    """Cancel an order that is not yet completed."""
    try:
        order = session.orders.cancel_order(order_id)
    except InvalidStatusTransition as e:
        raise HTTPException(status_code=409, detail=str(e))
    if not order:
        raise _not_found(order_id)
    return OrderResponse.from_order(order)
