"""Sales analytics over the order book and menu catalog."""
from collections import Counter
from datetime import date
from typing import Dict, List, Optional
from pydantic import BaseModel

from app.services.menu.base import MenuItem
from app.services.ordering.models import Order, PaymentStatus

TOP_SELLING_LIMIT = 5


class TopSellingItem(BaseModel):
    item_id: str
    item_name: str
    total_sold: int
    total_revenue: float


class CategorySales(BaseModel):
    category: str
    total_sales: float
    item_count: int


class AnalyticsSummary(BaseModel):
    """Aggregates shown on the admin analytics dashboard."""

    today_revenue: float
    today_order_count: int
    today_avg_order_value: float
    total_revenue: float
    total_orders: int
    avg_order_value: float
    status_breakdown: Dict[str, int]
    type_breakdown: Dict[str, int]
    payment_breakdown: Dict[str, int]
    top_selling_items: List[TopSellingItem]
    category_sales: List[CategorySales]


def _paid_revenue(orders: List[Order]) -> float:
    return round(
        sum(o.final_amount for o in orders if o.payment_status == PaymentStatus.PAID), 2
    )


def _average(total: float, count: int) -> float:
    return round(total / count, 2) if count > 0 else 0.0


def compute_analytics(
    orders: List[Order],
    menu_items: List[MenuItem],
    today: Optional[date] = None,
) -> AnalyticsSummary:
    """
    Aggregate orders into dashboard figures.

    Revenue counts only paid orders, while averages divide by every order,
    unpaid ones included. Category sales only cover items still on the menu.

    Args:
        orders: Orders to aggregate
        menu_items: Current menu, used to map items to categories
        today: Date treated as today (defaults to the local date)

    Returns:
        AnalyticsSummary with totals, breakdowns and rankings
    """
    today = today or date.today()
    today_orders = [o for o in orders if o.created_at.astimezone().date() == today]

    today_revenue = _paid_revenue(today_orders)
    total_revenue = _paid_revenue(orders)

    status_breakdown = Counter(o.status.value for o in orders)
    type_breakdown = Counter(o.order_type.value for o in orders)
    payment_breakdown = Counter(o.payment_method.value for o in orders)

    # item id -> running totals, in first-seen order
    item_sales: Dict[str, TopSellingItem] = {}
    for order in orders:
        for item in order.items:
            sales = item_sales.setdefault(
                item.id,
                TopSellingItem(item_id=item.id, item_name=item.name, total_sold=0, total_revenue=0.0),
            )
            sales.total_sold += item.quantity
            sales.total_revenue += item.price * item.quantity

    top_selling = sorted(item_sales.values(), key=lambda s: s.total_revenue, reverse=True)
    top_selling = top_selling[:TOP_SELLING_LIMIT]

    category_sales: Dict[str, CategorySales] = {}
    for menu_item in menu_items:
        sales = item_sales.get(menu_item.id)
        if sales:
            category = menu_item.category.value
            entry = category_sales.setdefault(
                category, CategorySales(category=category, total_sales=0.0, item_count=0)
            )
            entry.total_sales += sales.total_revenue
            entry.item_count += sales.total_sold

    return AnalyticsSummary(
        today_revenue=today_revenue,
        today_order_count=len(today_orders),
        today_avg_order_value=_average(today_revenue, len(today_orders)),
        total_revenue=total_revenue,
        total_orders=len(orders),
        avg_order_value=_average(total_revenue, len(orders)),
        status_breakdown=dict(status_breakdown),
        type_breakdown=dict(type_breakdown),
        payment_breakdown=dict(payment_breakdown),
        top_selling_items=top_selling,
        category_sales=list(category_sales.values()),
    )
