"""Cart models."""
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, computed_field

from app.services.menu.base import MenuItem


class CartError(str, Enum):
    """Reasons a cart mutation can be refused."""

    UNAVAILABLE = "unavailable"
    INSUFFICIENT_STOCK = "insufficient_stock"
    NOT_FOUND = "not_found"

    def __str__(self) -> str:
        """Return the string value of the error."""
        return self.value


class CartItem(MenuItem):
    """A menu item with the quantity staged in the cart."""

    quantity: int = Field(ge=1)

    @classmethod
    def from_menu_item(cls, item: MenuItem, quantity: int) -> "CartItem":
        return cls(**item.model_dump(exclude={"is_available"}), quantity=quantity)


class CartState(BaseModel):
    """Cart contents with totals derived from the items."""

    items: List[CartItem] = []

    @computed_field
    @property
    def total_amount(self) -> float:
        return sum(item.price * item.quantity for item in self.items)

    @computed_field
    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self.items)


class CartResult(BaseModel):
    """Outcome of a cart mutation, surfaced to the customer verbatim."""

    success: bool
    message: str
    error: Optional[CartError] = None
