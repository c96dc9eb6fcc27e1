"""
Tests for console analytics (bakehouse.analytics).
"""

from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from bakehouse import bakery
from bakehouse.models import Order

pytestmark = pytest.mark.django_db


class TestDashboardStats:
    def test_counts_today(self, order, order_data, flour):
        bakery.place_order(order_data)
        bakery.set_order_status(order, "approved")

        stats = bakery.dashboard_stats()

        assert stats["today_orders"] == 2
        assert stats["pending_orders"] == 1
        assert stats["today_revenue"] == Decimal("11.25")
        assert stats["low_stock_count"] == 0

    def test_yesterdays_orders_excluded(self, order):
        Order.objects.filter(pk=order.pk).update(
            created_at=timezone.now() - timedelta(days=2)
        )

        stats = bakery.dashboard_stats()

        assert stats["today_orders"] == 0
        assert stats["pending_orders"] == 1

    def test_empty(self):
        assert bakery.dashboard_stats() == {
            "today_orders": 0,
            "pending_orders": 0,
            "today_revenue": Decimal("0"),
            "low_stock_count": 0,
        }


class TestOrderStats:
    def test_status_counts_and_revenue(self, order, order_data):
        second = bakery.place_order(order_data).order
        third = bakery.place_order(order_data).order
        bakery.set_order_status(order, "approved")
        bakery.set_order_status(second, "completed")
        bakery.set_order_status(third, "cancelled")

        stats = bakery.order_stats()

        assert stats["status_counts"] == {
            "new": 0,
            "approved": 1,
            "baking": 0,
            "ready": 0,
            "completed": 1,
            "cancelled": 1,
        }
        assert stats["total_orders"] == 3
        assert stats["total_revenue"] == Decimal("22.50")
        assert stats["recent_orders_count"] == 3

    def test_old_orders_not_recent(self, order):
        Order.objects.filter(pk=order.pk).update(
            created_at=timezone.now() - timedelta(days=45)
        )

        stats = bakery.order_stats()

        assert stats["total_orders"] == 1
        assert stats["recent_orders_count"] == 0


class TestInventoryStats:
    def test_low_stock_and_value(self, flour, salt, sesame):
        sesame.adjust(Decimal("-4.5"), "waste")

        stats = bakery.inventory_stats()

        assert stats["total_ingredients"] == 3
        assert stats["low_stock_count"] == 1
        assert stats["low_stock_items"] == [sesame]
        # 100 * 1.50 + 10 * 0.80 + 0.5 * 0
        assert stats["total_inventory_value"] == Decimal("158")
