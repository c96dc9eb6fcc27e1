"""
Bakehouse Analytics.

Console dashboard numbers.
Uses aggregate()/annotate() so every figure is one SQL query.
"""

from datetime import timedelta
from decimal import Decimal
from typing import Any

from django.db.models import Count, DecimalField, ExpressionWrapper, F, Sum, Value
from django.db.models.functions import Coalesce
from django.utils import timezone

from bakehouse.conf import get_setting
from bakehouse.models import Ingredient, Order, OrderStatus

ZERO = Value(Decimal("0"), output_field=DecimalField(max_digits=14, decimal_places=4))


class BakehouseStats:
    """Analytics for orders and the pantry."""

    @classmethod
    def dashboard_stats(cls) -> dict[str, Any]:
        """
        Returns:
            {
                'today_orders': 4,
                'pending_orders': 2,      # status NEW
                'today_revenue': Decimal('86.00'),  # today's APPROVED orders
                'low_stock_count': 1
            }
        """
        today = timezone.localdate()
        todays = Order.objects.filter(created_at__date=today)

        revenue = todays.filter(status=OrderStatus.APPROVED).aggregate(
            total=Coalesce(Sum("total"), ZERO)
        )["total"]

        return {
            "today_orders": todays.count(),
            "pending_orders": Order.objects.filter(status=OrderStatus.NEW).count(),
            "today_revenue": revenue,
            "low_stock_count": Ingredient.objects.filter(
                on_hand__lte=F("reorder_threshold")
            ).count(),
        }

    @classmethod
    def order_stats(cls) -> dict[str, Any]:
        """Status counts, revenue (approved + completed) and recent volume."""
        status_counts = {status: 0 for status in OrderStatus.values}
        for row in Order.objects.values("status").annotate(count=Count("id")).order_by():
            status_counts[row["status"]] = row["count"]

        revenue = Order.objects.filter(
            status__in=[OrderStatus.APPROVED, OrderStatus.COMPLETED]
        ).aggregate(total=Coalesce(Sum("total"), ZERO))["total"]

        since = timezone.now() - timedelta(days=get_setting("RECENT_ORDERS_DAYS"))

        return {
            "status_counts": status_counts,
            "total_revenue": revenue,
            "total_orders": sum(status_counts.values()),
            "recent_orders_count": Order.objects.filter(created_at__gte=since).count(),
        }

    @classmethod
    def inventory_stats(cls) -> dict[str, Any]:
        low_stock = Ingredient.objects.filter(on_hand__lte=F("reorder_threshold"))

        value = Ingredient.objects.aggregate(
            total=Coalesce(
                Sum(
                    ExpressionWrapper(
                        F("on_hand") * F("cost_per_unit"),
                        output_field=DecimalField(max_digits=14, decimal_places=4),
                    )
                ),
                ZERO,
            )
        )["total"]

        return {
            "total_ingredients": Ingredient.objects.count(),
            "low_stock_count": low_stock.count(),
            "low_stock_items": list(low_stock.order_by("name")),
            "total_inventory_value": value,
        }
