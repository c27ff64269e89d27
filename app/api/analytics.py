"""Analytics API endpoints."""
import logging
from fastapi import APIRouter, Depends

from app.core.dependencies import get_restaurant_session
from app.services.analytics import AnalyticsSummary, compute_analytics
from app.services.session.models import RestaurantSession

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/api/analytics", response_model=AnalyticsSummary)
async def get_analytics(session: RestaurantSession = Depends(get_restaurant_session)):
    """Sales figures over the session's orders."""
    summary = compute_analytics(session.orders.orders, session.catalog.items)
    logger.debug(
        f"[ANALYTICS] {summary.total_orders} orders, revenue {summary.total_revenue:.2f}"
    )
    return summary
