"""Order models."""
from datetime import datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel

from app.services.cart.models import CartItem


class OrderStatus(str, Enum):
    """Order statuses. The normal path is pending through completed."""

    PENDING = "pending"
    PREPARING = "preparing"
    READY = "ready"
    SERVED = "served"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    def __str__(self) -> str:
        """Return the string value of the status."""
        return self.value


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"


class PaymentMethod(str, Enum):
    CASH = "cash"
    CARD = "card"
    UPI = "upi"
    WALLET = "wallet"


class OrderType(str, Enum):
    DINE_IN = "dine-in"
    TAKEAWAY = "takeaway"
    DELIVERY = "delivery"


class CustomerDetails(BaseModel):
    """Customer fields collected at checkout."""

    customer_name: str
    customer_phone: str
    order_type: OrderType = OrderType.DINE_IN
    payment_method: PaymentMethod = PaymentMethod.CARD
    table_number: Optional[str] = None
    notes: Optional[str] = None


class CreateOrderData(CustomerDetails):
    """Input for creating an order."""

    items: List[CartItem]


class Order(BaseModel):
    """Placed order. Items are a snapshot taken at checkout."""

    id: str
    items: List[CartItem]
    total_amount: float
    tax: float
    discount: float = 0.0
    final_amount: float
    status: OrderStatus = OrderStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    payment_method: PaymentMethod
    customer_name: str
    customer_phone: str
    order_type: OrderType
    table_number: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    estimated_time: int  # minutes
