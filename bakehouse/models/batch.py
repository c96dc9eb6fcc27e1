"""
Batch and BatchItem models.

Batch = one real production run (a shift in the bakehouse).
BatchItem = how many units of one product the batch bakes.

Business logic lives on the model: completing a batch consumes the
pantry and fills the freezer in a single transaction.
"""

import logging

from django.core.exceptions import ValidationError
from django.db import models, transaction
from django.db.models import F
from django.utils import timezone
from django.utils.translation import gettext_lazy as _
from simple_history.models import HistoricalRecords

from bakehouse.exceptions import BakehouseError

logger = logging.getLogger(__name__)


class BatchStatus(models.TextChoices):
    """Batch lifecycle status."""

    PLANNED = "planned", _("Planned")
    IN_PROGRESS = "in_progress", _("In progress")
    COMPLETED = "completed", _("Completed")
    CANCELLED = "cancelled", _("Cancelled")


class Shift(models.TextChoices):
    MORNING = "morning", _("Morning")
    AFTERNOON = "afternoon", _("Afternoon")
    EVENING = "evening", _("Evening")


TERMINAL_BATCH_STATUSES = (BatchStatus.COMPLETED, BatchStatus.CANCELLED)


class Batch(models.Model):
    """
    Production run.

    Status: PLANNED → IN_PROGRESS → COMPLETED
                                  ↘ CANCELLED

    Metadata structure (filled on completion):
        {
            'deductions': [{'ingredient_id': 3, 'quantity': '1.500'}, ...],
            'completed_by': 'admin'
        }
    """

    batch_date = models.DateField(
        db_index=True,
        verbose_name=_("Batch date"),
    )
    shift = models.CharField(
        max_length=20,
        choices=Shift.choices,
        verbose_name=_("Shift"),
    )
    notes = models.TextField(
        blank=True,
        verbose_name=_("Notes"),
    )
    status = models.CharField(
        max_length=20,
        choices=BatchStatus.choices,
        default=BatchStatus.PLANNED,
        db_index=True,
        verbose_name=_("Status"),
    )

    started_at = models.DateTimeField(null=True, blank=True, verbose_name=_("started at"))
    completed_at = models.DateTimeField(null=True, blank=True, verbose_name=_("completed at"))

    metadata = models.JSONField(
        default=dict,
        blank=True,
        verbose_name=_("Metadata"),
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    # History
    history = HistoricalRecords()

    class Meta:
        db_table = "bakehouse_batch"
        verbose_name = _("Batch")
        verbose_name_plural = _("Batches")
        ordering = ["-batch_date", "-id"]

    def __str__(self) -> str:
        return f"Batch {self.batch_date:%m/%d/%y} {self.shift}"

    # ══════════════════════════════════════════════════════════════
    # BUSINESS LOGIC
    # ══════════════════════════════════════════════════════════════

    def set_status(self, status: str, actor: str = ""):
        """
        Move the batch to a new status.

        Dispatches to start(), complete() or cancel(); "planned" is only
        accepted while the batch is still planned or in progress.
        """
        if status not in BatchStatus.values:
            raise BakehouseError(
                "INVALID_STATUS",
                message=f"Invalid status: {status}",
                requested=status,
                allowed=list(BatchStatus.values),
            )

        if status == BatchStatus.IN_PROGRESS:
            return self.start(actor)
        if status == BatchStatus.COMPLETED:
            return self.complete(actor)
        if status == BatchStatus.CANCELLED:
            return self.cancel(actor)

        self._check_not_terminal(status)
        self.status = BatchStatus.PLANNED
        self.save(update_fields=["status", "updated_at"])

    def _check_not_terminal(self, requested: str):
        if self.is_terminal:
            raise ValidationError(
                _(f"Batch is already {self.status} and cannot become {requested}")
            )

    def start(self, actor: str = ""):
        """Mark the batch as being baked."""
        self._check_not_terminal(BatchStatus.IN_PROGRESS)

        self.status = BatchStatus.IN_PROGRESS
        if self.started_at is None:
            self.started_at = timezone.now()
        self.save(update_fields=["status", "started_at", "updated_at"])

        from bakehouse.signals import batch_started

        batch_started.send(sender=self.__class__, batch=self, actor=actor)

        logger.info(
            f"Batch {self.pk} started ({self.shift})",
            extra={"batch": self.pk, "shift": self.shift},
        )

    def calculate_requirements(self, lock: bool = False):
        """
        Ingredient consumption for this batch, one entry per ingredient.

        Returns:
            list[IngredientRequirement] ordered by ingredient name
        """
        from bakehouse.services.ingredients import aggregate_requirements

        items = self.items.select_related("product").prefetch_related(
            "product__recipe_items"
        )
        return aggregate_requirements(items, lock=lock)

    def complete(self, actor: str = ""):
        """
        Finish the batch.

        Behavior:
            - Computes BOM consumption for every item
            - Refuses (and changes nothing) if any ingredient is short
            - Deducts ingredients and records 'production' adjustments
            - Credits one FreezerStock row per item
            - Emits 'batch_completed' (which writes the activity log)

        Completing an already completed batch is a no-op.
        """
        from bakehouse.models.freezer import FreezerStock
        from bakehouse.models.inventory import (
            AdjustmentType,
            Ingredient,
            InventoryAdjustment,
        )

        with transaction.atomic():
            current = Batch.objects.select_for_update().get(pk=self.pk)
            if current.status == BatchStatus.COMPLETED:
                logger.warning(f"Batch {self.pk} already completed")
                self.status = current.status
                return
            if current.status == BatchStatus.CANCELLED:
                raise ValidationError(_("Cancelled batches cannot be completed"))

            requirements = self.calculate_requirements(lock=True)
            shortages = [req for req in requirements if not req.sufficient]

            if shortages:
                first = shortages[0]
                logger.warning(
                    f"Batch {self.pk} not completed: insufficient ingredients",
                    extra={
                        "batch": self.pk,
                        "shortages": [req.as_dict() for req in shortages],
                    },
                )
                raise BakehouseError(
                    "INSUFFICIENT_INGREDIENTS",
                    message=(
                        f"Insufficient {first.name}: need {first.required:.2f}, "
                        f"have {first.available}"
                    ),
                    shortages=[req.as_dict() for req in shortages],
                )

            now = timezone.now()
            adjusted_by = f"batch:{self.pk}"
            deductions = []

            for req in requirements:
                Ingredient.objects.filter(pk=req.ingredient_id).update(
                    on_hand=F("on_hand") - req.required, updated_at=now
                )
                InventoryAdjustment.objects.create(
                    ingredient_id=req.ingredient_id,
                    adjustment_type=AdjustmentType.PRODUCTION,
                    quantity=-req.required,
                    previous_quantity=req.available,
                    new_quantity=req.available - req.required,
                    reason=f"Batch {self.pk} completed",
                    adjusted_by=adjusted_by,
                )
                deductions.append(
                    {"ingredient_id": req.ingredient_id, "quantity": str(req.required)}
                )

            items = []
            for item in self.items.select_related("product"):
                FreezerStock.objects.create(
                    product=item.product,
                    quantity=item.quantity,
                    batch=self,
                    notes=f"From batch {self.batch_date:%Y-%m-%d} {self.shift}",
                )
                items.append({"product_id": item.product_id, "quantity": item.quantity})

            self.status = BatchStatus.COMPLETED
            self.completed_at = now
            self.metadata["deductions"] = deductions
            self.metadata["completed_by"] = actor or None
            self.save(update_fields=["status", "completed_at", "metadata", "updated_at"])

            from bakehouse.signals import batch_completed

            batch_completed.send(
                sender=self.__class__,
                batch=self,
                items=items,
                deductions=deductions,
                actor=actor,
            )

        logger.info(
            f"Batch {self.pk} completed: {len(items)} items to freezer, "
            f"{len(deductions)} ingredients deducted",
            extra={
                "batch": self.pk,
                "items": len(items),
                "deductions": len(deductions),
            },
        )

    def cancel(self, actor: str = ""):
        """Cancel a batch that has not been completed."""
        self._check_not_terminal(BatchStatus.CANCELLED)

        self.status = BatchStatus.CANCELLED
        self.save(update_fields=["status", "updated_at"])
        logger.info(f"Batch {self.pk} cancelled", extra={"batch": self.pk})

    # ══════════════════════════════════════════════════════════════
    # PROPERTIES
    # ══════════════════════════════════════════════════════════════

    @property
    def total_units(self) -> int:
        return sum(item.quantity for item in self.items.all())

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_BATCH_STATUSES


class BatchItem(models.Model):
    """Units of one product baked in a batch."""

    batch = models.ForeignKey(
        Batch,
        on_delete=models.CASCADE,
        related_name="items",
        verbose_name=_("Batch"),
    )
    product = models.ForeignKey(
        "bakehouse.Product",
        on_delete=models.PROTECT,
        related_name="batch_items",
        verbose_name=_("Product"),
    )
    quantity = models.PositiveIntegerField(
        verbose_name=_("Quantity"),
    )

    class Meta:
        db_table = "bakehouse_batch_item"
        verbose_name = _("Batch item")
        verbose_name_plural = _("Batch items")
        ordering = ["batch", "id"]

    def __str__(self) -> str:
        return f"{self.product} x{self.quantity}"
