"""
Ingredient and InventoryAdjustment models.

Ingredient = the truth layer: what is physically in the pantry.
InventoryAdjustment = append-only record of every change to on_hand.
"""

import logging
from decimal import Decimal

from django.db import models, transaction
from django.utils import timezone
from django.utils.translation import gettext_lazy as _
from simple_history.models import HistoricalRecords

logger = logging.getLogger(__name__)


class AdjustmentType(models.TextChoices):
    """Why the pantry changed."""

    RECEIVE = "receive", _("Receive")
    WASTE = "waste", _("Waste")
    CORRECTION = "correction", _("Correction")
    PRODUCTION = "production", _("Production")


class Ingredient(models.Model):
    """
    Pantry stock item (flour, salt, bags...).

    on_hand is only changed through adjust() or batch completion,
    both of which leave an InventoryAdjustment behind.
    """

    name = models.CharField(
        max_length=200,
        verbose_name=_("Name"),
    )
    unit = models.CharField(
        max_length=20,
        verbose_name=_("Unit"),
        help_text=_("oz, lb, gallon, count..."),
    )
    on_hand = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        default=Decimal("0"),
        verbose_name=_("On hand"),
    )
    reorder_threshold = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        default=Decimal("0"),
        verbose_name=_("Reorder threshold"),
        help_text=_("Low stock alert at or below this quantity"),
    )
    cost_per_unit = models.DecimalField(
        max_digits=10,
        decimal_places=4,
        default=Decimal("0"),
        verbose_name=_("Cost per unit"),
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    # History
    history = HistoricalRecords()

    class Meta:
        db_table = "bakehouse_ingredient"
        verbose_name = _("Ingredient")
        verbose_name_plural = _("Ingredients")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name

    @property
    def is_low_stock(self) -> bool:
        return self.on_hand <= self.reorder_threshold

    @property
    def stock_value(self) -> Decimal:
        return self.on_hand * (self.cost_per_unit or Decimal("0"))

    def adjust(
        self,
        quantity: Decimal | int | float,
        adjustment_type: str,
        reason: str = "",
        adjusted_by: str = "",
    ) -> "InventoryAdjustment":
        """
        Change on_hand by a signed quantity and record the adjustment.

        Positive quantity adds stock, negative removes it.

        Example:
            flour.adjust(50, AdjustmentType.RECEIVE, reason="Weekly delivery")
            flour.adjust(-2, AdjustmentType.WASTE, reason="Wet bag")
        """
        if not isinstance(quantity, Decimal):
            quantity = Decimal(str(quantity))

        with transaction.atomic():
            locked = Ingredient.objects.select_for_update().get(pk=self.pk)
            previous = locked.on_hand
            new = previous + quantity

            Ingredient.objects.filter(pk=self.pk).update(
                on_hand=new, updated_at=timezone.now()
            )
            adjustment = InventoryAdjustment.objects.create(
                ingredient=self,
                adjustment_type=adjustment_type,
                quantity=quantity,
                previous_quantity=previous,
                new_quantity=new,
                reason=reason or "",
                adjusted_by=adjusted_by or "",
            )

        self.on_hand = new

        logger.info(
            f"Ingredient {self.name}: {adjustment_type} {quantity} ({previous} -> {new})",
            extra={
                "ingredient": self.pk,
                "adjustment_type": adjustment_type,
                "quantity": float(quantity),
            },
        )

        return adjustment


class InventoryAdjustment(models.Model):
    """One change to an ingredient's on_hand."""

    ingredient = models.ForeignKey(
        Ingredient,
        on_delete=models.CASCADE,
        related_name="adjustments",
        verbose_name=_("Ingredient"),
    )
    adjustment_type = models.CharField(
        max_length=20,
        choices=AdjustmentType.choices,
        verbose_name=_("Type"),
    )
    # Positive = add, negative = subtract
    quantity = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        verbose_name=_("Quantity"),
    )
    previous_quantity = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        verbose_name=_("Previous quantity"),
    )
    new_quantity = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        verbose_name=_("New quantity"),
    )
    reason = models.TextField(
        blank=True,
        verbose_name=_("Reason"),
    )
    adjusted_by = models.CharField(
        max_length=255,
        blank=True,
        verbose_name=_("Adjusted by"),
        help_text=_("Ex: 'admin', 'batch:12'"),
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))

    class Meta:
        db_table = "bakehouse_inventory_adjustment"
        verbose_name = _("Inventory adjustment")
        verbose_name_plural = _("Inventory adjustments")
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["ingredient", "created_at"], name="bh_adjustment_ingredient_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.ingredient} {self.adjustment_type} {self.quantity}"
