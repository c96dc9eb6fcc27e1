"""
Location models.

Location = where bagels go (basement shop, pop-up, wholesale account, delivery hub).
LocationInventory = finished goods counted at a location.
"""

from django.db import models, transaction
from django.db.models import F
from django.utils.translation import gettext_lazy as _


class LocationType(models.TextChoices):
    BASEMENT = "basement", _("Basement")
    POPUP = "popup", _("Pop-up")
    WHOLESALE = "wholesale", _("Wholesale")
    DELIVERY = "delivery", _("Delivery")


class Location(models.Model):
    """
    Physical place where products are sold or handed off.

    Orders may be routed to a location for fulfillment.
    """

    name = models.CharField(
        max_length=200,
        verbose_name=_("Name"),
    )
    type = models.CharField(
        max_length=20,
        choices=LocationType.choices,
        verbose_name=_("Type"),
    )
    address = models.TextField(
        blank=True,
        verbose_name=_("Address"),
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name=_("Active"),
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    class Meta:
        db_table = "bakehouse_location"
        verbose_name = _("Location")
        verbose_name_plural = _("Locations")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class LocationInventory(models.Model):
    """Finished goods on hand at a location."""

    location = models.ForeignKey(
        Location,
        on_delete=models.CASCADE,
        related_name="inventory",
        verbose_name=_("Location"),
    )
    product = models.ForeignKey(
        "bakehouse.Product",
        on_delete=models.CASCADE,
        related_name="location_inventory",
        verbose_name=_("Product"),
    )
    quantity = models.IntegerField(
        default=0,
        verbose_name=_("Quantity"),
    )
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    class Meta:
        db_table = "bakehouse_location_inventory"
        verbose_name = _("Location inventory")
        verbose_name_plural = _("Location inventory")
        unique_together = [["location", "product"]]

    def __str__(self) -> str:
        return f"{self.location} - {self.product}: {self.quantity}"

    @classmethod
    def adjust(cls, location, product, delta: int) -> "LocationInventory":
        """Add delta to the row for (location, product), creating it if missing."""
        with transaction.atomic():
            row, created = cls.objects.select_for_update().get_or_create(
                location=location, product=product, defaults={"quantity": delta}
            )
            if not created:
                row.quantity = F("quantity") + delta
                row.save(update_fields=["quantity", "updated_at"])
                row.refresh_from_db()
        return row
