"""In-memory stock provider."""
import logging
import yaml
from pathlib import Path
from typing import List, Optional
from app.services.stock.base import StockItem, StockProvider

logger = logging.getLogger(__name__)


class InMemoryStockProvider(StockProvider):
    """In-memory stock provider using YAML configuration."""

    def __init__(self, stock_file: Optional[str] = None):
        """Initialize with optional stock file path."""
        if stock_file is None:
            stock_file = Path(__file__).parent / "data" / "stock.yaml"
        self.stock_file = Path(stock_file)
        self._stock: Optional[List[StockItem]] = None

    async def _load_stock(self) -> List[StockItem]:
        """Load stock entries from YAML file."""
        if self._stock is None:
            if not self.stock_file.exists():
                logger.warning(
                    f"[STOCK] Stock file {self.stock_file} not found, starting with an empty ledger"
                )
                self._stock = []
            else:
                with open(self.stock_file, "r") as f:
                    data = yaml.safe_load(f) or {}
                    self._stock = [
                        StockItem(**item) for item in data.get("items", [])
                    ]
            logger.info(f"[STOCK] Loaded {len(self._stock)} stock entries")
        return self._stock

    async def get_stock(self) -> List[StockItem]:
        """Get all stock entries."""
        return await self._load_stock()
