"""
Freezer service -- manual stock entry, corrections and stats.
"""

import logging

from django.db.models import Count, Sum

from bakehouse.exceptions import BakehouseError
from bakehouse.models import FreezerStock, Product

logger = logging.getLogger(__name__)


class BakehouseFreezer:
    """Finished goods in the freezer."""

    @classmethod
    def stock_freezer(
        cls,
        product: Product,
        quantity: int,
        notes: str = "",
        expires_at=None,
        batch=None,
        actor: str = "",
    ) -> FreezerStock:
        """Enter stock by hand (leftovers, recounts). Emits 'freezer_stocked'."""
        if int(quantity) < 1:
            raise BakehouseError(
                "INVALID_QUANTITY", message="Quantity must be at least 1", quantity=quantity
            )

        stock = FreezerStock.objects.create(
            product=product,
            quantity=int(quantity),
            notes=notes or "",
            expires_at=expires_at,
            batch=batch,
        )

        from bakehouse.signals import freezer_stocked

        freezer_stocked.send(sender=FreezerStock, stock=stock, actor=actor)

        logger.info(
            f"Freezer stocked: {product} x{quantity}",
            extra={"product": product.pk, "quantity": int(quantity)},
        )
        return stock

    @classmethod
    def set_freezer_quantity(cls, stock: FreezerStock, quantity: int) -> FreezerStock:
        if int(quantity) < 0:
            raise BakehouseError(
                "INVALID_QUANTITY", message="Quantity must not be negative", quantity=quantity
            )
        stock.quantity = int(quantity)
        stock.save(update_fields=["quantity", "updated_at"])
        return stock

    @classmethod
    def freezer_stats(cls) -> dict:
        """
        Totals across the freezer.

        Returns:
            {
                'total_items': 240,
                'unique_products': 3,
                'product_breakdown': [
                    {'product_id': 1, 'product_name': 'Plain',
                     'total_quantity': 96, 'batches': 2},
                    ...
                ]
            }
        """
        rows = (
            FreezerStock.objects.values("product_id", "product__name")
            .annotate(total_quantity=Sum("quantity"), batches=Count("id"))
            .order_by("product__name")
        )
        breakdown = [
            {
                "product_id": row["product_id"],
                "product_name": row["product__name"],
                "total_quantity": row["total_quantity"] or 0,
                "batches": row["batches"],
            }
            for row in rows
        ]
        return {
            "total_items": sum(row["total_quantity"] for row in breakdown),
            "unique_products": len(breakdown),
            "product_breakdown": breakdown,
        }
