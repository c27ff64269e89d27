"""FastAPI dependencies."""
from functools import lru_cache

from fastapi import Depends, Request, Response

from app.core.config import settings
from app.services.menu.in_memory_menu import InMemoryMenuProvider
from app.services.session.manager import SessionManager
from app.services.session.models import RestaurantSession
from app.services.stock.in_memory_stock import InMemoryStockProvider

SESSION_COOKIE = "session_token"


@lru_cache
def get_session_manager() -> SessionManager:
    """Get session manager instance."""
    return SessionManager(
        menu_provider=InMemoryMenuProvider(menu_file=settings.menu_file),
        stock_provider=InMemoryStockProvider(stock_file=settings.stock_file),
    )


async def get_restaurant_session(
    request: Request,
    response: Response,
    manager: SessionManager = Depends(get_session_manager),
) -> RestaurantSession:
    """Get the caller's session, starting a new one if needed."""
    session_token = request.cookies.get(SESSION_COOKIE)
    session = await manager.get_session(session_token)
    if session is None:
        session = await manager.create_session()
        # Set HTTP-only cookie
        response.set_cookie(
            key=SESSION_COOKIE,
            value=session.session_id,
            httponly=True,
            max_age=int(manager.ttl.total_seconds()),
            samesite="lax",
        )
    return session
