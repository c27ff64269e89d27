"""Unit tests for menu, session and health API endpoints."""
import pytest

from app.core.dependencies import SESSION_COOKIE


class TestMenuAPI:
    """Test menu API endpoints."""

    def test_get_menu_success(self, test_client):
        """Test GET /api/menu returns full menu."""
        response = test_client.get("/api/menu")

        assert response.status_code == 200
        data = response.json()
        assert [item["id"] for item in data["items"]] == ["burger", "fries", "soda", "cake"]
        assert data["categories"] == ["all", "mains", "starters", "drinks", "desserts"]

    def test_menu_items_report_availability(self, test_client):
        data = test_client.get("/api/menu").json()
        availability = {item["id"]: item["is_available"] for item in data["items"]}

        assert availability["burger"] is True
        assert availability["soda"] is False

    def test_filter_by_category_and_search(self, test_client):
        response = test_client.get("/api/menu", params={"category": "starters"})
        assert [item["id"] for item in response.json()["items"]] == ["fries"]

        response = test_client.get("/api/menu", params={"q": "molten"})
        assert [item["id"] for item in response.json()["items"]] == ["cake"]

    def test_get_categories(self, test_client):
        response = test_client.get("/api/menu/categories")

        assert response.status_code == 200
        assert response.json()[0] == "all"

    def test_get_featured_items(self, test_client):
        response = test_client.get("/api/menu/featured")
        assert [item["id"] for item in response.json()] == ["burger"]

    def test_get_item(self, test_client):
        response = test_client.get("/api/menu/items/fries")

        assert response.status_code == 200
        assert response.json()["name"] == "Fries"

    def test_get_item_not_found(self, test_client):
        response = test_client.get("/api/menu/items/nonexistent")

        assert response.status_code == 404
        assert "not found" in response.json()["detail"].lower()

    def test_update_item_stock(self, test_client):
        """Test setting stock to a negative value clamps to zero."""
        response = test_client.put("/api/menu/items/burger/stock", json={"stock": -2})

        assert response.status_code == 200
        assert response.json()["stock"] == 0
        assert response.json()["is_available"] is False

    def test_decrement_item_stock(self, test_client):
        response = test_client.post("/api/menu/items/fries/decrement", json={"amount": 3})

        assert response.status_code == 200
        assert response.json()["stock"] == 7

    def test_decrement_requires_positive_amount(self, test_client):
        response = test_client.post("/api/menu/items/fries/decrement", json={"amount": 0})
        assert response.status_code == 422

    def test_stock_updates_unknown_item(self, test_client):
        assert test_client.put("/api/menu/items/nope/stock", json={"stock": 1}).status_code == 404
        assert test_client.post("/api/menu/items/nope/decrement", json={}).status_code == 404


class TestSessions:
    """Test per-browser session handling."""

    def test_first_request_sets_cookie(self, test_client):
        response = test_client.get("/api/menu")

        assert SESSION_COOKIE in response.cookies

    def test_state_persists_within_session(self, test_client):
        test_client.put("/api/menu/items/burger/stock", json={"stock": 1})

        response = test_client.get("/api/menu/items/burger")

        assert response.json()["stock"] == 1

    def test_sessions_are_independent(self, test_client, session_manager):
        """Test a second browser sees untouched menu and stock."""
        from fastapi.testclient import TestClient
        from app.main import app

        test_client.put("/api/menu/items/burger/stock", json={"stock": 1})

        other_client = TestClient(app)
        response = other_client.get("/api/menu/items/burger")

        assert response.json()["stock"] == 5
        assert session_manager.active_session_count() == 2

    def test_end_session(self, test_client, session_manager):
        test_client.put("/api/menu/items/burger/stock", json={"stock": 1})

        response = test_client.delete("/api/session")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert session_manager.active_session_count() == 0

    @pytest.mark.asyncio
    async def test_expired_session_is_dropped(self, session_manager):
        from datetime import datetime, timedelta, timezone

        session = await session_manager.create_session()
        session.expires_at = datetime.now(timezone.utc) - timedelta(seconds=1)

        assert await session_manager.get_session(session.session_id) is None
        assert session_manager.active_session_count() == 0

    @pytest.mark.asyncio
    async def test_abandoned_sessions_are_purged(self, menu_provider, stock_provider, clean_sessions):
        """Test expired sessions whose cookie never returns do not pile up."""
        from app.services.session import manager
        from app.services.session.manager import SessionManager

        short_lived = SessionManager(menu_provider, stock_provider, ttl_hours=0)
        for _ in range(6):
            latest = await short_lived.create_session()

        assert list(manager._sessions) == [latest.session_id]

    @pytest.mark.asyncio
    async def test_purge_keeps_live_sessions(self, session_manager):
        from datetime import datetime, timedelta, timezone

        live = await session_manager.create_session()
        stale = await session_manager.create_session()
        stale.expires_at = datetime.now(timezone.utc) - timedelta(seconds=1)

        assert session_manager.purge_expired() == 1
        assert await session_manager.get_session(live.session_id) is live

    @pytest.mark.asyncio
    async def test_unknown_token(self, session_manager):
        assert await session_manager.get_session("not-a-token") is None
        assert await session_manager.get_session(None) is None


class TestHealthAPI:
    """Test service info endpoints."""

    def test_health(self, test_client):
        response = test_client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["active_sessions"] == 0

    def test_app_startup(self, test_client):
        """Test the lifespan hook runs and the app serves requests."""
        from fastapi.testclient import TestClient
        from app.main import app

        with TestClient(app) as client:
            assert client.get("/health").status_code == 200

    def test_root(self, test_client):
        response = test_client.get("/")

        assert response.status_code == 200
        assert "version" in response.json()
