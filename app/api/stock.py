"""Stock ledger API endpoints."""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field, ValidationError

from app.core.dependencies import get_restaurant_session
from app.services.session.models import RestaurantSession
from app.services.stock.base import StockAlert, StockItem, StockItemData, StockItemUpdate

router = APIRouter()
logger = logging.getLogger(__name__)


class QuantityRequest(BaseModel):
    quantity: int


class RestockRequest(BaseModel):
    amount: int = Field(ge=1)


def _not_found(item_id: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Stock item '{item_id}' not found")


@router.get("/api/stock", response_model=List[StockItem])
async def list_stock(
    category: Optional[str] = None,
    session: RestaurantSession = Depends(get_restaurant_session),
):
    """List stock entries, optionally for a single category."""
    if category:
        return session.stock.get_stock_by_category(category)
    return session.stock.items


@router.get("/api/stock/low", response_model=List[StockItem])
async def list_low_stock(session: RestaurantSession = Depends(get_restaurant_session)):
    """Entries below their minimum threshold but not empty."""
    return session.stock.get_low_stock_items()


@router.get("/api/stock/out", response_model=List[StockItem])
async def list_out_of_stock(session: RestaurantSession = Depends(get_restaurant_session)):
    """Entries with nothing left."""
    return session.stock.get_out_of_stock_items()


@router.post("/api/stock", response_model=StockItem)
async def add_stock(
    body: StockItemData,
    session: RestaurantSession = Depends(get_restaurant_session),
):
    """Add a stock entry."""
    return session.stock.add_stock(body)


@router.patch("/api/stock/{item_id}", response_model=StockItem)
async def update_stock_item(
    item_id: str,
    body: StockItemUpdate,
    session: RestaurantSession = Depends(get_restaurant_session),
):
    """Update fields of a stock entry. Fields sent as null are cleared."""
    try:
        item = session.stock.update_stock_item(item_id, body)
    except ValidationError as e:
        logger.info(f"[STOCK] Rejected update for {item_id} - {e.error_count()} errors")
        raise HTTPException(status_code=422, detail=str(e))
    if not item:
        raise _not_found(item_id)
    return item


@router.put("/api/stock/{item_id}/quantity", response_model=StockItem)
async def update_stock(
    item_id: str,
    body: QuantityRequest,
    session: RestaurantSession = Depends(get_restaurant_session),
):
    """Set a stock entry's quantity (floored at zero)."""
    item = session.stock.update_stock(item_id, body.quantity)
    if not item:
        raise _not_found(item_id)
    return item


@router.post("/api/stock/{item_id}/restock", response_model=StockItem)
async def restock_item(
    item_id: str,
    body: RestockRequest,
    session: RestaurantSession = Depends(get_restaurant_session),
):
    """Restock an entry up to its maximum threshold."""
    item = session.stock.restock_item(item_id, body.amount)
    if not item:
        raise _not_found(item_id)
    return item


@router.get("/api/stock/alerts", response_model=List[StockAlert])
async def list_alerts(
    unread_only: bool = False,
    session: RestaurantSession = Depends(get_restaurant_session),
):
    """List stock alerts."""
    if unread_only:
        return session.stock.get_unread_alerts()
    return session.stock.alerts


@router.post("/api/stock/alerts/refresh", response_model=List[StockAlert])
async def refresh_alerts(session: RestaurantSession = Depends(get_restaurant_session)):
    """Rebuild alerts from current quantities."""
    alerts = session.stock.refresh_alerts()
    logger.info(f"[STOCK] Alerts refreshed - {len(alerts)} active")
    return alerts


@router.post("/api/stock/alerts/{alert_id}/read", response_model=StockAlert)
async def mark_alert_as_read(
    alert_id: str,
    session: RestaurantSession = Depends(get_restaurant_session),
):
    """Mark an alert as read."""
    alert = session.stock.mark_alert_as_read(alert_id)
    if not alert:
        raise HTTPException(status_code=404, detail=f"Alert '{alert_id}' not found")
    return alert


@router.delete("/api/stock/alerts")
async def clear_alerts(session: RestaurantSession = Depends(get_restaurant_session)):
    """Dismiss every alert."""
    session.stock.clear_all_alerts()
    return {"success": True, "message": "All alerts cleared"}


@router.delete("/api/stock/{item_id}")
async def delete_stock_item(
    item_id: str,
    session: RestaurantSession = Depends(get_restaurant_session),
):
    """Delete a stock entry and its alerts."""
    if not session.stock.delete_stock_item(item_id):
        raise _not_found(item_id)
    return {"success": True, "message": f"Stock item '{item_id}' deleted"}
