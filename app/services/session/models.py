"""Restaurant session models."""
from datetime import datetime

from app.services.cart.cart import Cart
from app.services.chatbot.bot import Chatbot
from app.services.menu.catalog import MenuCatalog
from app.services.ordering.order_book import OrderBook
from app.services.stock.ledger import StockLedger


class RestaurantSession:
    """All state held by one browser session."""

    def __init__(
        self,
        session_id: str,
        catalog: MenuCatalog,
        stock: StockLedger,
        expires_at: datetime,
    ):
        self.session_id = session_id
        self.catalog = catalog
        self.stock = stock
        self.cart = Cart()
        self.orders = OrderBook()
        self.chatbot = Chatbot()
        self.expires_at = expires_at
