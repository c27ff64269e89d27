"""Menu provider interface."""
from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, computed_field


class MenuCategory(str, Enum):
    """Fixed menu categories."""

    STARTERS = "starters"
    MAINS = "mains"
    DESSERTS = "desserts"
    DRINKS = "drinks"

    def __str__(self) -> str:
        """Return the string value of the category."""
        return self.value


class MenuItem(BaseModel):
    """Menu item model."""

    id: str
    name: str
    description: str = ""
    price: float = Field(gt=0)
    category: MenuCategory
    stock: int = Field(default=0, ge=0)
    image: Optional[str] = None
    is_featured: bool = False
    prep_time: Optional[int] = None  # minutes
    calories: Optional[int] = None
    allergens: List[str] = []

    @computed_field
    @property
    def is_available(self) -> bool:
        """An item is orderable exactly while it has stock."""
        return self.stock > 0


class Menu(BaseModel):
    """Menu model."""

    items: List[MenuItem]
    categories: List[str] = []


class MenuProvider(ABC):
    """Abstract base class for menu providers."""

    @abstractmethod
    async def get_menu(self) -> Menu:
        """Get the full menu."""
        pass
