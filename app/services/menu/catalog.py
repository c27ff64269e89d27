"""Menu catalog."""
import logging
from typing import List, Optional
from app.services.menu.base import MenuItem, MenuProvider

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"


class MenuCatalog:
    """Per-session catalog of orderable items and their stock counters.

    Item stock here is the customer-facing availability count. It is a
    separate counter from the ingredient quantities kept by the stock ledger.
    """

    def __init__(self, items: Optional[List[MenuItem]] = None):
        self._items: List[MenuItem] = list(items or [])

    @classmethod
    async def load(cls, provider: MenuProvider) -> "MenuCatalog":
        """Build a catalog from a provider, copying items so sessions never share them."""
        menu = await provider.get_menu()
        return cls([item.model_copy(deep=True) for item in menu.items])

    @property
    def items(self) -> List[MenuItem]:
        """All menu items in menu order."""
        return list(self._items)

    @property
    def categories(self) -> List[str]:
        """Distinct categories in menu order, prefixed with the wildcard."""
        categories = [ALL_CATEGORIES]
        for item in self._items:
            if item.category.value not in categories:
                categories.append(item.category.value)
        return categories

    @property
    def featured_items(self) -> List[MenuItem]:
        return [item for item in self._items if item.is_featured]

    def get_item_by_id(self, item_id: str) -> Optional[MenuItem]:
        """Get a menu item by id."""
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def get_items_by_category(self, category: str) -> List[MenuItem]:
        return [item for item in self._items if item.category.value == category]

    def filter_items(self, category: str = ALL_CATEGORIES, query: str = "") -> List[MenuItem]:
        """
        Filter items by category and search text.

        Args:
            category: Category value, or "all" to match every category
            query: Case-insensitive substring matched against name or description

        Returns:
            Matching items in menu order
        """
        query_lower = query.lower().strip()
        results = []
        for item in self._items:
            matches_category = category == ALL_CATEGORIES or item.category.value == category
            matches_search = (
                query_lower in item.name.lower()
                or query_lower in item.description.lower()
            )
            if matches_category and matches_search:
                results.append(item)
        return results

    def update_item_stock(self, item_id: str, new_stock: int) -> Optional[MenuItem]:
        """Set an item's stock, clamped at zero. Returns None for unknown ids."""
        item = self.get_item_by_id(item_id)
        if item:
            item.stock = max(0, new_stock)
            logger.info(
                f"[MENU] Stock for {item.name} set to {item.stock} "
                f"(available: {item.is_available})"
            )
        return item

    def decrement_stock(self, item_id: str, amount: int = 1) -> Optional[MenuItem]:
        """Reduce an item's stock by amount, clamped at zero."""
        item = self.get_item_by_id(item_id)
        if item:
            return self.update_item_stock(item_id, item.stock - amount)
        return None
