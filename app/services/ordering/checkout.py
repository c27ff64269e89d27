"""Checkout: turns the cart into an order."""
import logging

from app.services.cart.cart import Cart
from app.services.ordering.models import CreateOrderData, CustomerDetails, Order, OrderType
from app.services.ordering.order_book import OrderBook

logger = logging.getLogger(__name__)


class CheckoutError(ValueError):
    """Raised when the cart or customer details cannot be checked out."""


def validate_details(details: CustomerDetails) -> None:
    """Check the customer fields required to place an order."""
    if not details.customer_name.strip():
        raise CheckoutError("Please enter your name")
    if not details.customer_phone.strip():
        raise CheckoutError("Please enter your phone number")
    if details.order_type == OrderType.DINE_IN and not (details.table_number or "").strip():
        raise CheckoutError("Please enter table number")


def checkout(cart: Cart, order_book: OrderBook, details: CustomerDetails) -> Order:
    """
    Place an order for the cart contents and empty the cart.

    Args:
        cart: The customer's cart
        order_book: Order book receiving the new order
        details: Customer, order type and payment fields

    Returns:
        The created order

    Raises:
        CheckoutError: if the cart is empty or details are incomplete
    """
    if not cart.items:
        raise CheckoutError("Your cart is empty")
    validate_details(details)

    order = order_book.create_order(
        CreateOrderData(items=cart.snapshot(), **details.model_dump())
    )
    cart.clear_cart()
    logger.info(f"[CHECKOUT] Order {order.id} placed by {details.customer_name}")
    return order
