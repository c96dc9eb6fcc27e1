"""
Pantry service -- ingredient adjustments and first-run seeding.
"""

import logging
from decimal import Decimal

from django.db import transaction

from bakehouse.exceptions import BakehouseError
from bakehouse.models import AdjustmentType, Ingredient, InventoryAdjustment

logger = logging.getLogger(__name__)


# (name, unit, on_hand, reorder_threshold)
BASIC_INGREDIENTS = [
    ("Spelt Flour", "lb", "100", "20"),
    ("Sea Salt", "lb", "10", "2"),
    ("Olive Oil", "gallon", "5", "1"),
    ("Honey", "gallon", "3", "0.5"),
    ("Yeast", "lb", "2", "0.5"),
    ("Sesame Seeds", "lb", "5", "1"),
    ("Poppy Seeds", "lb", "3", "0.5"),
    ("Everything Seasoning", "lb", "4", "1"),
    ("Cornmeal", "lb", "10", "2"),
    ("Bagel Bags", "count", "500", "100"),
]


class BakehousePantry:
    """Ingredient stock operations."""

    @classmethod
    def adjust_ingredient(
        cls,
        ingredient: Ingredient,
        quantity,
        adjustment_type: str,
        reason: str = "",
        adjusted_by: str = "",
    ) -> InventoryAdjustment:
        """Delegates to Ingredient.adjust()."""
        if adjustment_type not in AdjustmentType.values:
            raise BakehouseError(
                "INVALID_STATUS",
                message=f"Invalid adjustment type: {adjustment_type}",
                requested=adjustment_type,
                allowed=list(AdjustmentType.values),
            )
        quantity = Decimal(str(quantity))
        if quantity == 0:
            raise BakehouseError("INVALID_QUANTITY", message="Quantity must not be zero")

        return ingredient.adjust(quantity, adjustment_type, reason, adjusted_by)

    @classmethod
    def seed_pantry(cls) -> list[Ingredient]:
        """
        Stock the basic bakery ingredients.

        Only runs on an empty pantry.

        Raises:
            BakehouseError('PANTRY_NOT_EMPTY') when ingredients already exist
        """
        with transaction.atomic():
            existing = Ingredient.objects.count()
            if existing:
                raise BakehouseError(
                    "PANTRY_NOT_EMPTY",
                    message="Ingredients already exist. Seed is only for empty databases.",
                    count=existing,
                )
            created = [
                Ingredient.objects.create(
                    name=name,
                    unit=unit,
                    on_hand=Decimal(on_hand),
                    reorder_threshold=Decimal(threshold),
                )
                for name, unit, on_hand, threshold in BASIC_INGREDIENTS
            ]

        logger.info(f"Pantry seeded with {len(created)} ingredients")
        return created
