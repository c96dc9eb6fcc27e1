"""
Product and RecipeItem models.

Product = Something the bakery sells (a bagel SKU).
RecipeItem = Bill of Materials line: how much of an ingredient ONE unit of
the product consumes.
"""

import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models, transaction
from django.utils.translation import gettext_lazy as _


class Product(models.Model):
    """
    Something the storefront sells.

    Only active products are listed on the storefront and accepted at checkout.
    """

    # UUID for external references
    uuid = models.UUIDField(
        default=uuid.uuid4,
        editable=False,
        unique=True,
        verbose_name=_("UUID"),
    )

    name = models.CharField(
        max_length=200,
        verbose_name=_("Name"),
    )
    description = models.TextField(
        blank=True,
        verbose_name=_("Description"),
    )
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        verbose_name=_("Price"),
        help_text=_("Unit price charged at checkout"),
    )
    image_url = models.URLField(
        max_length=500,
        blank=True,
        verbose_name=_("Image URL"),
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name=_("Active"),
        help_text=_("Product can be ordered on the storefront"),
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    class Meta:
        db_table = "bakehouse_product"
        verbose_name = _("Product")
        verbose_name_plural = _("Products")
        ordering = ["name"]
        indexes = [
            models.Index(fields=["is_active"], name="bh_product_active_idx"),
        ]

    def clean(self):
        super().clean()
        if self.price is not None and self.price < 0:
            raise ValidationError({"price": _("Must not be negative.")})

    def __str__(self) -> str:
        return self.name

    def replace_bom(self, lines: list[dict]) -> list["RecipeItem"]:
        """
        Replace the whole bill of materials.

        Lines without an ingredient or with a non-positive quantity are skipped.
        Repeated ingredients are merged into one line with the summed quantity.
        """
        merged: dict = {}
        for line in lines:
            ingredient = line.get("ingredient")
            quantity = Decimal(str(line.get("quantity") or 0))
            if ingredient is None or quantity <= 0:
                continue
            merged[ingredient] = merged.get(ingredient, Decimal("0")) + quantity

        with transaction.atomic():
            self.recipe_items.all().delete()
            return [
                RecipeItem.objects.create(
                    product=self, ingredient=ingredient, quantity=quantity
                )
                for ingredient, quantity in merged.items()
            ]


class RecipeItem(models.Model):
    """
    Bill of materials line.

    Stores the quantity of ingredient consumed by ONE unit of product.
    Consumption for a batch is quantity × units baked.
    """

    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name="recipe_items",
        verbose_name=_("Product"),
    )
    ingredient = models.ForeignKey(
        "bakehouse.Ingredient",
        on_delete=models.PROTECT,
        related_name="recipe_items",
        verbose_name=_("Ingredient"),
    )
    quantity = models.DecimalField(
        max_digits=10,
        decimal_places=4,
        verbose_name=_("Quantity"),
        help_text=_("Ingredient consumed per unit of product"),
    )

    class Meta:
        db_table = "bakehouse_recipe_item"
        verbose_name = _("BOM line")
        verbose_name_plural = _("Bill of materials")
        ordering = ["product", "id"]
        unique_together = [["product", "ingredient"]]

    def __str__(self) -> str:
        return f"{self.ingredient} ({self.quantity} {self.ingredient.unit})"
