"""Cart API endpoints."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from app.core.dependencies import get_restaurant_session
from app.services.cart.models import CartError, CartState
from app.services.session.models import RestaurantSession

router = APIRouter()
logger = logging.getLogger(__name__)


class AddItemRequest(BaseModel):
    """Add-to-cart request model."""
    item_id: str
    quantity: int = Field(default=1, ge=1)


class QuantityRequest(BaseModel):
    quantity: int


class CartResponse(BaseModel):
    """Cart mutation response: outcome plus the resulting cart."""
    success: bool
    message: str
    error: Optional[CartError] = None
    cart: CartState


@router.get("/api/cart", response_model=CartState)
async def get_cart(session: RestaurantSession = Depends(get_restaurant_session)):
    """Get the session's cart."""
    return session.cart.state


@router.post("/api/cart/items", response_model=CartResponse)
async def add_to_cart(
    body: AddItemRequest,
    session: RestaurantSession = Depends(get_restaurant_session),
):
    """Add a menu item to the cart."""
    item = session.catalog.get_item_by_id(body.item_id)
    if not item:
        raise HTTPException(status_code=404, detail=f"Menu item '{body.item_id}' not found")

    result = session.cart.add_to_cart(item, body.quantity)
    if not result.success:
        logger.info(f"[CART] Add refused - {item.name}: {result.message}")
    return CartResponse(**result.model_dump(), cart=session.cart.state)


@router.put("/api/cart/items/{item_id}", response_model=CartResponse)
async def update_quantity(
    item_id: str,
    body: QuantityRequest,
    session: RestaurantSession = Depends(get_restaurant_session),
):
    """Set the quantity of a cart line. Zero or less removes it."""
    result = session.cart.update_quantity(item_id, body.quantity)
    return CartResponse(**result.model_dump(), cart=session.cart.state)


@router.delete("/api/cart/items/{item_id}", response_model=CartState)
async def remove_from_cart(
    item_id: str,
    session: RestaurantSession = Depends(get_restaurant_session),
):
    """Remove a line from the cart."""
    session.cart.remove_from_cart(item_id)
    return session.cart.state


@router.delete("/api/cart", response_model=CartState)
async def clear_cart(session: RestaurantSession = Depends(get_restaurant_session)):
    """Empty the cart."""
    session.cart.clear_cart()
    return session.cart.state
