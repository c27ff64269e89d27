"""Order book service."""
import itertools
import logging
from datetime import date, datetime, timezone
from typing import List, Optional

from app.core.config import settings
from app.services.ordering.models import (
    CreateOrderData,
    Order,
    OrderStatus,
    PaymentMethod,
    PaymentStatus,
)
from app.services.ordering.status import (
    ACTIVE_STATUSES,
    InvalidStatusTransition,
    can_transition,
    next_status,
)

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class OrderBook:
    """In-memory record of placed orders, most recent first."""

    def __init__(
        self,
        tax_rate: Optional[float] = None,
        min_estimated_time: Optional[int] = None,
        default_prep_time: Optional[int] = None,
    ):
        self.tax_rate = settings.tax_rate if tax_rate is None else tax_rate
        self.min_estimated_time = (
            settings.min_estimated_time if min_estimated_time is None else min_estimated_time
        )
        self.default_prep_time = (
            settings.default_prep_time if default_prep_time is None else default_prep_time
        )
        self._orders: List[Order] = []
        # Ids never repeat, even if the list shrinks
        self._sequence = itertools.count(1)

    @property
    def orders(self) -> List[Order]:
        return list(self._orders)

    def _next_order_id(self) -> str:
        return f"ORD-{next(self._sequence):03d}"

    def create_order(self, data: CreateOrderData) -> Order:
        """
        Create an order from a snapshot of cart items.

        Args:
            data: Items plus customer, order type and payment fields

        Returns:
            The created order
        """
        items = [item.model_copy(deep=True) for item in data.items]

        total_amount = round(sum(item.price * item.quantity for item in items), 2)
        tax = round(total_amount * self.tax_rate, 2)
        discount = 0.0
        final_amount = round(total_amount + tax - discount, 2)

        estimated_time = max(
            [item.prep_time or self.default_prep_time for item in items]
            + [self.min_estimated_time]
        )

        # Cash is collected on delivery or pickup, everything else is taken up front
        payment_status = (
            PaymentStatus.PENDING
            if data.payment_method == PaymentMethod.CASH
            else PaymentStatus.PAID
        )

        now = _now()
        order = Order(
            id=self._next_order_id(),
            items=items,
            total_amount=total_amount,
            tax=tax,
            discount=discount,
            final_amount=final_amount,
            status=OrderStatus.PENDING,
            payment_status=payment_status,
            payment_method=data.payment_method,
            customer_name=data.customer_name,
            customer_phone=data.customer_phone,
            order_type=data.order_type,
            table_number=data.table_number,
            notes=data.notes,
            created_at=now,
            updated_at=now,
            estimated_time=estimated_time,
        )
        self._orders.insert(0, order)
        logger.info(
            f"[ORDERS] Created {order.id} - {len(items)} lines, "
            f"final amount {order.final_amount:.2f}, payment {payment_status.value}"
        )
        return order

    def get_order_by_id(self, order_id: str) -> Optional[Order]:
        for order in self._orders:
            if order.id == order_id:
                return order
        return None

    def get_orders_by_status(self, status: OrderStatus) -> List[Order]:
        return [order for order in self._orders if order.status == status]

    def get_today_orders(self, today: Optional[date] = None) -> List[Order]:
        """Orders created on the current local calendar date."""
        today = today or date.today()
        return [
            order for order in self._orders
            if order.created_at.astimezone().date() == today
        ]

    def get_pending_orders(self) -> List[Order]:
        """Orders still waiting on the kitchen."""
        return [order for order in self._orders if order.status in ACTIVE_STATUSES]

    def update_order_status(self, order_id: str, status: OrderStatus) -> Optional[Order]:
        """
        Move an order to a new status.

        Raises:
            InvalidStatusTransition: if the move is not a single pipeline step
                or a cancellation of a non-terminal order
        """
        order = self.get_order_by_id(order_id)
        if order:
            if not can_transition(order.status, status):
                logger.warning(
                    f"[ORDERS] Rejected status change for {order_id}: "
                    f"{order.status.value} -> {status.value}"
                )
                raise InvalidStatusTransition(order_id, order.status, status)
            old_status = order.status
            order.status = status
            order.updated_at = _now()
            logger.info(f"[ORDERS] {order_id} status: {old_status.value} -> {status.value}")
        return order

    def advance_order(self, order_id: str) -> Optional[Order]:
        """Move an order one step along the pipeline."""
        order = self.get_order_by_id(order_id)
        if order:
            following = next_status(order.status)
            if following is None:
                raise InvalidStatusTransition(order_id, order.status, order.status)
            return self.update_order_status(order_id, following)
        return None

    def update_payment_status(self, order_id: str, status: PaymentStatus) -> Optional[Order]:
        """Overwrite the payment status. Any value may follow any other."""
        order = self.get_order_by_id(order_id)
        if order:
            order.payment_status = status
            order.updated_at = _now()
            logger.info(f"[ORDERS] {order_id} payment: {status.value}")
        return order

    def cancel_order(self, order_id: str) -> Optional[Order]:
        return self.update_order_status(order_id, OrderStatus.CANCELLED)
