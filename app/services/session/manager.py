"""Restaurant session manager."""
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from app.core.config import settings
from app.services.menu.base import MenuProvider
from app.services.menu.catalog import MenuCatalog
from app.services.session.models import RestaurantSession
from app.services.stock.base import StockProvider
from app.services.stock.ledger import StockLedger

logger = logging.getLogger(__name__)

# Module-level session storage (persists across requests)
# Sessions are independent: nothing is shared between them
_sessions: Dict[str, RestaurantSession] = {}


def create_session_token() -> str:
    """Generate a secure session token."""
    return secrets.token_urlsafe(32)


def _is_expired(session: RestaurantSession, now: datetime) -> bool:
    return now >= session.expires_at


class SessionManager:
    """Creates and looks up per-browser restaurant sessions."""

    def __init__(
        self,
        menu_provider: MenuProvider,
        stock_provider: StockProvider,
        ttl_hours: Optional[int] = None,
    ):
        self.menu_provider = menu_provider
        self.stock_provider = stock_provider
        self.ttl = timedelta(
            hours=settings.session_ttl_hours if ttl_hours is None else ttl_hours
        )

    async def create_session(self) -> RestaurantSession:
        """Create a new session with fresh copies of the menu and stock ledger."""
        session_id = create_session_token()
        session = RestaurantSession(
            session_id=session_id,
            catalog=await MenuCatalog.load(self.menu_provider),
            stock=await StockLedger.load(self.stock_provider),
            expires_at=datetime.now(timezone.utc) + self.ttl,
        )
        # Clients that drop their cookie never come back for their old session
        self.purge_expired()
        _sessions[session_id] = session
        logger.info(f"[SESSION] Created session ({len(_sessions)} active)")
        return session

    async def get_session(self, session_id: Optional[str]) -> Optional[RestaurantSession]:
        """Get an existing, unexpired session."""
        if not session_id:
            return None

        session = _sessions.get(session_id)
        if not session:
            return None

        if _is_expired(session, datetime.now(timezone.utc)):
            del _sessions[session_id]
            logger.info("[SESSION] Session expired")
            return None

        return session

    def purge_expired(self) -> int:
        """Drop every expired session. Returns how many were removed."""
        now = datetime.now(timezone.utc)
        expired = [sid for sid, session in _sessions.items() if _is_expired(session, now)]
        for session_id in expired:
            del _sessions[session_id]
        if expired:
            logger.info(f"[SESSION] Purged {len(expired)} expired sessions")
        return len(expired)

    async def end_session(self, session_id: str) -> None:
        _sessions.pop(session_id, None)

    def active_session_count(self) -> int:
        return len(_sessions)
