"""Cart service."""
import logging
from typing import List, Optional

from app.services.cart.models import CartError, CartItem, CartResult, CartState
from app.services.menu.base import MenuItem

logger = logging.getLogger(__name__)


class Cart:
    """A customer's in-progress selection.

    Every quantity change is checked against the item's stock before it is
    committed. The cart never changes catalog stock.
    """

    def __init__(self):
        self.state = CartState()

    @property
    def items(self) -> List[CartItem]:
        return self.state.items

    @property
    def total_amount(self) -> float:
        return self.state.total_amount

    @property
    def total_items(self) -> int:
        return self.state.total_items

    def _find(self, item_id: str) -> Optional[CartItem]:
        for cart_item in self.state.items:
            if cart_item.id == item_id:
                return cart_item
        return None

    def add_to_cart(self, item: MenuItem, quantity: int = 1) -> CartResult:
        """
        Add an item to the cart, merging with an existing line.

        Args:
            item: Menu item as currently shown to the customer
            quantity: Number of units to add

        Returns:
            CartResult describing the outcome
        """
        if quantity < 1:
            raise ValueError(f"Quantity must be at least 1, got {quantity}")

        if not item.is_available:
            return CartResult(
                success=False,
                message=f"{item.name} is currently unavailable",
                error=CartError.UNAVAILABLE,
            )

        if item.stock < quantity:
            return CartResult(
                success=False,
                message=f"Only {item.stock} {item.name} available in stock",
                error=CartError.INSUFFICIENT_STOCK,
            )

        existing = self._find(item.id)
        if existing:
            new_quantity = existing.quantity + quantity
            if new_quantity > item.stock:
                logger.info(
                    f"[CART] Refused {item.name}: {new_quantity} requested, {item.stock} in stock"
                )
                return CartResult(
                    success=False,
                    message=(
                        f"Only {item.stock} {item.name} available in stock "
                        f"({existing.quantity} already in cart)"
                    ),
                    error=CartError.INSUFFICIENT_STOCK,
                )
            existing.quantity = new_quantity
            existing.stock = item.stock
        else:
            self.state.items.append(CartItem.from_menu_item(item, quantity))

        logger.debug(f"[CART] Added {quantity}x {item.name}, total items: {self.total_items}")
        return CartResult(success=True, message=f"{item.name} added to cart")

    def update_quantity(self, item_id: str, quantity: int) -> CartResult:
        """Set a line's quantity. Anything below 1 removes the line."""
        if quantity < 1:
            self.remove_from_cart(item_id)
            return CartResult(success=True, message="Item removed from cart")

        cart_item = self._find(item_id)
        if not cart_item:
            return CartResult(
                success=False,
                message="Item not found in cart",
                error=CartError.NOT_FOUND,
            )

        if quantity > cart_item.stock:
            return CartResult(
                success=False,
                message=f"Only {cart_item.stock} items available in stock",
                error=CartError.INSUFFICIENT_STOCK,
            )

        cart_item.quantity = quantity
        return CartResult(success=True, message="Quantity updated")

    def remove_from_cart(self, item_id: str) -> None:
        self.state.items = [i for i in self.state.items if i.id != item_id]

    def clear_cart(self) -> None:
        self.state = CartState()

    def is_in_cart(self, item_id: str) -> bool:
        return self._find(item_id) is not None

    def get_item_quantity(self, item_id: str) -> int:
        cart_item = self._find(item_id)
        return cart_item.quantity if cart_item else 0

    def snapshot(self) -> List[CartItem]:
        """Deep copy of the current lines, detached from the cart."""
        return [item.model_copy(deep=True) for item in self.state.items]
