"""Health check endpoint."""
import logging
from fastapi import APIRouter, Depends, Request

from app.core.config import settings
from app.core.dependencies import get_session_manager
from app.services.session.manager import SessionManager

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check(
    request: Request,
    manager: SessionManager = Depends(get_session_manager),
):
    """Health check endpoint."""
    logger.debug(
        f"[HEALTH] Health check requested - Client: {request.client.host if request.client else 'unknown'}"
    )
    return {
        "status": "healthy",
        "restaurant": settings.restaurant_name,
        "active_sessions": manager.active_session_count(),
    }
