"""
Production service -- batches and the bake sheet.

All methods are @classmethod so the mixin can be composed into Bakehouse
without instantiation.
"""

import logging
import math
from datetime import date

from django.db import transaction

from bakehouse.conf import get_setting
from bakehouse.exceptions import BakehouseError
from bakehouse.models import Batch, BatchItem, BatchStatus, Product, Shift
from bakehouse.services.ingredients import calculate_daily_requirements

logger = logging.getLogger(__name__)


class BakehouseProduction:
    """Batch creation, listing and status changes."""

    @classmethod
    def create_batch(
        cls,
        batch_date: date,
        shift: str,
        notes: str = "",
        items: list[dict] | None = None,
    ) -> Batch:
        """
        Create a planned batch.

        Args:
            items: [{"product": <Product or id>, "quantity": 48}, ...]
                   Lines with quantity 0 are skipped.

        Example:
            bakery.create_batch(date(2026, 3, 2), "morning",
                                items=[{"product": plain, "quantity": 48}])
        """
        if shift not in Shift.values:
            raise BakehouseError(
                "INVALID_STATUS",
                message=f"Invalid shift: {shift}",
                requested=shift,
                allowed=list(Shift.values),
            )

        lines = []
        for line in items or []:
            quantity = int(line.get("quantity") or 0)
            if quantity < 0:
                raise BakehouseError(
                    "INVALID_QUANTITY", message="Quantity must not be negative", quantity=quantity
                )
            if quantity == 0:
                continue
            product = line.get("product")
            if not isinstance(product, Product):
                product = Product.objects.filter(pk=product or line.get("product_id")).first()
            if product is None:
                raise BakehouseError(
                    "PRODUCT_NOT_AVAILABLE",
                    message="Product not found",
                    product_id=line.get("product_id") or line.get("product"),
                )
            lines.append((product, quantity))

        with transaction.atomic():
            batch = Batch.objects.create(batch_date=batch_date, shift=shift, notes=notes or "")
            BatchItem.objects.bulk_create(
                [
                    BatchItem(batch=batch, product=product, quantity=quantity)
                    for product, quantity in lines
                ]
            )

        logger.info(
            f"Batch {batch.pk} planned for {batch_date} ({shift}): {len(lines)} items",
            extra={"batch": batch.pk, "date": str(batch_date), "items": len(lines)},
        )
        return batch

    @classmethod
    def list_batches(
        cls, page: int = 1, limit: int | None = None, status: str | None = None
    ) -> dict:
        """
        Paginated batch list, newest batch_date first.

        status None or "all" disables filtering.

        Returns:
            {"batches": [...], "pagination": {page, limit, total, total_pages}}
        """
        page = max(int(page or 1), 1)
        limit = max(int(limit or get_setting("BATCH_PAGE_SIZE")), 1)

        qs = Batch.objects.prefetch_related("items__product").order_by("-batch_date", "-id")
        if status and status != "all":
            qs = qs.filter(status=status)

        total = qs.count()
        offset = (page - 1) * limit

        return {
            "batches": list(qs[offset : offset + limit]),
            "pagination": {
                "page": page,
                "limit": limit,
                "total": total,
                "total_pages": math.ceil(total / limit),
            },
        }

    @classmethod
    def set_batch_status(cls, batch: Batch, status: str, actor: str = "") -> Batch:
        """Delegates to Batch.set_status()."""
        batch.set_status(status, actor)
        batch.refresh_from_db()
        return batch

    @classmethod
    def batch_requirements(cls, batch: Batch):
        return batch.calculate_requirements()

    @classmethod
    def bake_sheet(cls, target_date: date) -> dict:
        """Batches of a day plus the ingredients they need."""
        batches = (
            Batch.objects.filter(batch_date=target_date)
            .exclude(status=BatchStatus.CANCELLED)
            .prefetch_related("items__product")
            .order_by("id")
        )
        return {
            "date": target_date,
            "batches": list(batches),
            "requirements": calculate_daily_requirements(target_date),
        }
