"""
FreezerStock model.

Frozen finished goods waiting to be sold. Rows are created when a batch
completes (one per batch item) or by hand from the console.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class FreezerStock(models.Model):
    product = models.ForeignKey(
        "bakehouse.Product",
        on_delete=models.CASCADE,
        related_name="freezer_stock",
        verbose_name=_("Product"),
    )
    quantity = models.PositiveIntegerField(
        verbose_name=_("Quantity"),
    )
    batch = models.ForeignKey(
        "bakehouse.Batch",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="freezer_stock",
        verbose_name=_("Batch"),
        help_text=_("Batch that produced this stock, if any"),
    )
    notes = models.TextField(blank=True, verbose_name=_("Notes"))
    expires_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name=_("Expires at"),
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    class Meta:
        db_table = "bakehouse_freezer_stock"
        verbose_name = _("Freezer stock")
        verbose_name_plural = _("Freezer stock")
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["product"], name="bh_freezer_product_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.product} x{self.quantity}"
