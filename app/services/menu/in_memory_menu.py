"""In-memory menu provider."""
import logging
import yaml
from pathlib import Path
from typing import Optional
from app.services.menu.base import Menu, MenuCategory, MenuItem, MenuProvider

logger = logging.getLogger(__name__)


class InMemoryMenuProvider(MenuProvider):
    """In-memory menu provider using YAML configuration."""

    def __init__(self, menu_file: Optional[str] = None):
        """Initialize with optional menu file path."""
        if menu_file is None:
            menu_file = Path(__file__).parent / "data" / "menu.yaml"
        self.menu_file = Path(menu_file)
        self._menu: Optional[Menu] = None

    async def _load_menu(self) -> Menu:
        """Load menu from YAML file."""
        if self._menu is None:
            if not self.menu_file.exists():
                logger.warning(
                    f"[MENU] Menu file {self.menu_file} not found, using default menu"
                )
                # Default menu if file doesn't exist
                self._menu = Menu(
                    items=[
                        MenuItem(
                            id="1",
                            name="Truffle Arancini",
                            description="Crispy risotto balls with black truffle",
                            price=12,
                            category=MenuCategory.STARTERS,
                            stock=15,
                            prep_time=15,
                        ),
                        MenuItem(
                            id="2",
                            name="Wagyu Beef Burger",
                            description="Premium wagyu patty with aged cheddar",
                            price=28,
                            category=MenuCategory.MAINS,
                            stock=10,
                            prep_time=20,
                        ),
                        MenuItem(
                            id="3",
                            name="Fresh Lemonade",
                            description="House-made lemonade with fresh mint",
                            price=8,
                            category=MenuCategory.DRINKS,
                            stock=30,
                            prep_time=3,
                        ),
                    ],
                )
            else:
                with open(self.menu_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
                    items = [
                        MenuItem(**item) for item in data.get("items", [])
                    ]
                    self._menu = Menu(items=items)
            # Categories follow first appearance in the item list
            categories = []
            for item in self._menu.items:
                if item.category.value not in categories:
                    categories.append(item.category.value)
            self._menu.categories = categories
            logger.info(
                f"[MENU] Loaded {len(self._menu.items)} items from {self.menu_file.name}"
            )
        return self._menu

    async def get_menu(self) -> Menu:
        """Get the full menu."""
        return await self._load_menu()
