"""Unit tests for sales analytics."""
import pytest
from datetime import date, datetime, timedelta, timezone

from app.services.analytics import compute_analytics
from app.services.cart.models import CartItem
from app.services.menu.base import MenuItem
from app.services.ordering.models import OrderType, PaymentMethod


def line(item_id, price, quantity, category="mains"):
    return CartItem(
        id=item_id, name=f"Item {item_id}", price=price, category=category, stock=50, quantity=quantity
    )


@pytest.fixture
def menu_items():
    return [
        MenuItem(id="a", name="Item a", price=10, category="mains", stock=5),
        MenuItem(id="b", name="Item b", price=4, category="starters", stock=5),
    ]


class TestAnalytics:
    """Test dashboard aggregates."""

    def test_empty_order_book(self, menu_items):
        summary = compute_analytics([], menu_items)

        assert summary.total_orders == 0
        assert summary.total_revenue == 0
        assert summary.avg_order_value == 0
        assert summary.today_avg_order_value == 0
        assert summary.top_selling_items == []
        assert summary.category_sales == []

    def test_revenue_counts_only_paid_orders(self, order_book, make_order_data, menu_items):
        """Test unpaid cash orders add to counts but not to revenue."""
        order_book.create_order(make_order_data([line("a", 10, 2)]))
        order_book.create_order(
            make_order_data([line("a", 10, 1)], payment_method=PaymentMethod.CASH)
        )

        summary = compute_analytics(order_book.orders, menu_items)

        assert summary.total_orders == 2
        assert summary.total_revenue == pytest.approx(22.0)
        # Averages divide by every order, paid or not
        assert summary.avg_order_value == pytest.approx(11.0)
        assert summary.payment_breakdown == {"card": 1, "cash": 1}

    def test_today_figures(self, order_book, make_order_data, menu_items):
        order_book.create_order(make_order_data([line("a", 10, 1)]))
        old = order_book.create_order(make_order_data([line("a", 10, 3)]))
        old.created_at = datetime.now(timezone.utc) - timedelta(days=3)

        summary = compute_analytics(order_book.orders, menu_items)

        assert summary.today_order_count == 1
        assert summary.today_revenue == pytest.approx(11.0)
        assert summary.total_revenue == pytest.approx(44.0)

        summary = compute_analytics(order_book.orders, menu_items, today=date(2000, 1, 1))
        assert summary.today_order_count == 0

    def test_breakdowns(self, order_book, make_order_data, menu_items):
        first = order_book.create_order(make_order_data([line("a", 10, 1)]))
        order_book.create_order(
            make_order_data([line("b", 4, 1)], order_type=OrderType.TAKEAWAY, table_number=None)
        )
        order_book.advance_order(first.id)

        summary = compute_analytics(order_book.orders, menu_items)

        assert summary.status_breakdown == {"pending": 1, "preparing": 1}
        assert summary.type_breakdown == {"dine-in": 1, "takeaway": 1}

    def test_top_selling_by_revenue(self, order_book, make_order_data, menu_items):
        """Test ranking uses revenue, not units sold."""
        order_book.create_order(make_order_data([line("a", 10, 1), line("b", 4, 6)]))
        order_book.create_order(make_order_data([line("a", 10, 1)]))

        top = compute_analytics(order_book.orders, menu_items).top_selling_items

        assert [(t.item_id, t.total_sold, t.total_revenue) for t in top] == [
            ("b", 6, 24.0),
            ("a", 2, 20.0),
        ]

    def test_top_selling_limited_to_five(self, order_book, make_order_data, menu_items):
        lines = [line(str(n), n + 1, 1) for n in range(7)]
        order_book.create_order(make_order_data(lines))

        top = compute_analytics(order_book.orders, menu_items).top_selling_items

        assert [t.item_id for t in top] == ["6", "5", "4", "3", "2"]

    def test_category_sales_only_for_menu_items(self, order_book, make_order_data, menu_items):
        """Test items no longer on the menu are left out of category sales."""
        order_book.create_order(
            make_order_data([line("a", 10, 2), line("b", 4, 1), line("gone", 99, 1)])
        )

        sales = {c.category: c for c in compute_analytics(order_book.orders, menu_items).category_sales}

        assert set(sales) == {"mains", "starters"}
        assert sales["mains"].total_sales == pytest.approx(20.0)
        assert sales["mains"].item_count == 2
        assert sales["starters"].item_count == 1
