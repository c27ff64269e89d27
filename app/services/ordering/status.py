"""Order status pipeline and transition rules."""
from typing import Optional

from app.services.ordering.models import OrderStatus

# Normal path of an order through the kitchen
STATUS_PIPELINE = [
    OrderStatus.PENDING,
    OrderStatus.PREPARING,
    OrderStatus.READY,
    OrderStatus.SERVED,
    OrderStatus.COMPLETED,
]

TERMINAL_STATUSES = {OrderStatus.COMPLETED, OrderStatus.CANCELLED}

# Statuses the kitchen still has to work on
ACTIVE_STATUSES = {OrderStatus.PENDING, OrderStatus.PREPARING}


class InvalidStatusTransition(ValueError):
    """Raised when an order is moved to a status it cannot reach."""

    def __init__(self, order_id: str, current: OrderStatus, requested: OrderStatus):
        self.order_id = order_id
        self.current = current
        self.requested = requested
        super().__init__(
            f"Order {order_id} cannot move from {current.value} to {requested.value}"
        )


def is_terminal(status: OrderStatus) -> bool:
    """Completed and cancelled orders never change status again."""
    return status in TERMINAL_STATUSES


def next_status(status: OrderStatus) -> Optional[OrderStatus]:
    """Return the next status along the pipeline, or None at the end or off it."""
    if status not in STATUS_PIPELINE:
        return None
    index = STATUS_PIPELINE.index(status)
    if index < len(STATUS_PIPELINE) - 1:
        return STATUS_PIPELINE[index + 1]
    return None


def can_transition(current: OrderStatus, requested: OrderStatus) -> bool:
    """
    Check whether an order may move from one status to another.

    Orders advance exactly one step along the pipeline. Any non-terminal
    order may be cancelled.
    """
    if is_terminal(current):
        return False
    if requested == OrderStatus.CANCELLED:
        return True
    return next_status(current) == requested
