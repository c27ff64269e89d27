"""Menu API endpoints."""
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field

from app.core.dependencies import get_restaurant_session
from app.services.menu.base import MenuItem
from app.services.menu.catalog import ALL_CATEGORIES
from app.services.session.models import RestaurantSession

router = APIRouter()
logger = logging.getLogger(__name__)


class MenuResponse(BaseModel):
    """Menu response model."""
    items: List[MenuItem]
    categories: List[str] = []


class StockUpdateRequest(BaseModel):
    """Menu item stock update."""
    stock: int


class DecrementRequest(BaseModel):
    amount: int = Field(default=1, ge=1)


@router.get("/api/menu", response_model=MenuResponse)
async def get_menu(
    request: Request,
    category: str = ALL_CATEGORIES,
    q: str = "",
    session: RestaurantSession = Depends(get_restaurant_session),
):
    """Get menu items, optionally filtered by category and search text."""
    logger.info(
        f"[MENU] Request received - category: {category}, q: '{q}', "
        f"Client: {request.client.host if request.client else 'unknown'}"
    )

    try:
        items = session.catalog.filter_items(category=category, query=q)
        logger.info(f"[MENU] Returning {len(items)} items")
        return MenuResponse(items=items, categories=session.catalog.categories)

    except Exception as e:
        logger.error(
            f"[MENU] Error fetching menu - Error: {type(e).__name__}: {str(e)}",
            exc_info=True
        )
        raise HTTPException(status_code=500, detail=f"Error fetching menu: {str(e)}")


@router.get("/api/menu/categories", response_model=List[str])
async def get_categories(session: RestaurantSession = Depends(get_restaurant_session)):
    """Get menu categories, starting with "all"."""
    return session.catalog.categories


@router.get("/api/menu/featured", response_model=List[MenuItem])
async def get_featured_items(session: RestaurantSession = Depends(get_restaurant_session)):
    """Get featured menu items."""
    return session.catalog.featured_items


@router.get("/api/menu/items/{item_id}", response_model=MenuItem)
async def get_menu_item(
    item_id: str,
    session: RestaurantSession = Depends(get_restaurant_session),
):
    """Get a single menu item."""
    item = session.catalog.get_item_by_id(item_id)
    if not item:
        raise HTTPException(status_code=404, detail=f"Menu item '{item_id}' not found")
    return item


@router.put("/api/menu/items/{item_id}/stock", response_model=MenuItem)
async def update_item_stock(
    item_id: str,
    body: StockUpdateRequest,
    session: RestaurantSession = Depends(get_restaurant_session),
):
    """Set a menu item's stock. Availability follows the new stock."""
    item = session.catalog.update_item_stock(item_id, body.stock)
    if not item:
        raise HTTPException(status_code=404, detail=f"Menu item '{item_id}' not found")
    return item


@router.post("/api/menu/items/{item_id}/decrement", response_model=MenuItem)
async def decrement_item_stock(
    item_id: str,
    body: DecrementRequest,
    session: RestaurantSession = Depends(get_restaurant_session),
):
    """Reduce a menu item's stock."""
    item = session.catalog.decrement_stock(item_id, body.amount)
    if not item:
        raise HTTPException(status_code=404, detail=f"Menu item '{item_id}' not found")
    return item
