"""Shared test fixtures and configuration."""
import pytest
from pathlib import Path
from fastapi.testclient import TestClient

from app.main import app
from app.core.dependencies import get_session_manager
from app.services.cart.cart import Cart
from app.services.menu.catalog import MenuCatalog
from app.services.menu.in_memory_menu import InMemoryMenuProvider
from app.services.ordering.models import CreateOrderData, OrderType, PaymentMethod
from app.services.ordering.order_book import OrderBook
from app.services.session.manager import SessionManager
from app.services.stock.in_memory_stock import InMemoryStockProvider
from app.services.stock.ledger import StockLedger


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def test_menu_path():
    """Return path to test menu YAML file."""
    return FIXTURES_DIR / "test_menu.yaml"


@pytest.fixture
def test_stock_path():
    """Return path to test stock YAML file."""
    return FIXTURES_DIR / "test_stock.yaml"


@pytest.fixture
def menu_provider(test_menu_path):
    return InMemoryMenuProvider(menu_file=str(test_menu_path))


@pytest.fixture
def stock_provider(test_stock_path):
    return InMemoryStockProvider(stock_file=str(test_stock_path))


@pytest.fixture
async def catalog(menu_provider):
    """Menu catalog loaded from the test menu."""
    return await MenuCatalog.load(menu_provider)


@pytest.fixture
async def stock_ledger(stock_provider):
    """Stock ledger loaded from the test stock file."""
    return await StockLedger.load(stock_provider)


@pytest.fixture
def cart():
    return Cart()


@pytest.fixture
def order_book():
    """Order book with a fixed 10% tax rate."""
    return OrderBook(tax_rate=0.10, min_estimated_time=15, default_prep_time=20)


@pytest.fixture
def make_order_data():
    """Build CreateOrderData from cart items with sensible customer defaults."""
    def _make(items, **overrides):
        fields = {
            "customer_name": "John Smith",
            "customer_phone": "+1 234-567-8901",
            "order_type": OrderType.DINE_IN,
            "payment_method": PaymentMethod.CARD,
            "table_number": "A5",
        }
        fields.update(overrides)
        return CreateOrderData(items=items, **fields)
    return _make


@pytest.fixture
def clean_sessions():
    """Clean up restaurant sessions before and after tests."""
    from app.services.session import manager
    manager._sessions.clear()
    yield
    manager._sessions.clear()


@pytest.fixture
def session_manager(menu_provider, stock_provider, clean_sessions):
    return SessionManager(menu_provider=menu_provider, stock_provider=stock_provider)


@pytest.fixture
def test_client(session_manager):
    """Create FastAPI test client backed by the test menu and stock files."""
    app.dependency_overrides[get_session_manager] = lambda: session_manager

    client = TestClient(app)

    yield client

    # Clear overrides
    app.dependency_overrides.clear()


# Pytest configuration
def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line(
        "markers", "asyncio: mark test as an asyncio test"
    )
