"""Session endpoints."""
import logging
from fastapi import APIRouter, Depends, Request, Response

from app.core.dependencies import SESSION_COOKIE, get_session_manager
from app.services.session.manager import SessionManager

router = APIRouter()
logger = logging.getLogger(__name__)


@router.delete("/api/session")
async def end_session(
    request: Request,
    response: Response,
    manager: SessionManager = Depends(get_session_manager),
):
    """Discard the caller's session and all of its state."""
    session_token = request.cookies.get(SESSION_COOKIE)
    if session_token:
        await manager.end_session(session_token)

    # Clear cookie
    response.delete_cookie(SESSION_COOKIE)

    return {"success": True, "message": "Session ended"}
