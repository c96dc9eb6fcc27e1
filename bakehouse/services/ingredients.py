"""
Ingredient requirement calculation.

Consumption of a batch item is BOM quantity (per unit) times units baked,
summed per ingredient across every item. The bake sheet applies the same
aggregation to all batches planned for a day.

Usage:
    from bakehouse.services import calculate_daily_requirements

    for req in calculate_daily_requirements(date(2026, 2, 23)):
        print(f"{req.name}: {req.required} {req.unit} (have {req.available})")
"""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable

from bakehouse.models import BatchItem, BatchStatus, Ingredient
from bakehouse.results import IngredientRequirement

logger = logging.getLogger(__name__)

QUANTUM = Decimal("0.001")


def aggregate_requirements(
    items: Iterable[BatchItem], *, lock: bool = False
) -> list[IngredientRequirement]:
    """
    Sum BOM consumption per ingredient over batch items.

    Args:
        items: Batch items (quantity 0 contributes nothing)
        lock:  Read on_hand with SELECT FOR UPDATE (must run inside a transaction)

    Returns:
        Requirements sorted by ingredient name
    """
    totals: dict[int, Decimal] = defaultdict(Decimal)
    used_in: dict[int, list[str]] = defaultdict(list)

    for item in items:
        if item.quantity <= 0:
            continue
        for line in item.product.recipe_items.all():
            totals[line.ingredient_id] += line.quantity * item.quantity
            if item.product.name not in used_in[line.ingredient_id]:
                used_in[line.ingredient_id].append(item.product.name)

    if not totals:
        return []

    ingredients = Ingredient.objects.filter(pk__in=totals.keys())
    if lock:
        ingredients = ingredients.select_for_update()

    return [
        IngredientRequirement(
            ingredient_id=ingredient.pk,
            name=ingredient.name,
            unit=ingredient.unit,
            required=totals[ingredient.pk].quantize(QUANTUM),
            available=ingredient.on_hand,
            used_in=used_in[ingredient.pk],
        )
        for ingredient in ingredients.order_by("name", "pk")
    ]


def calculate_daily_requirements(target_date: date) -> list[IngredientRequirement]:
    """Requirements for every batch on a date that was not cancelled."""
    items = (
        BatchItem.objects.filter(batch__batch_date=target_date, quantity__gt=0)
        .exclude(batch__status=BatchStatus.CANCELLED)
        .select_related("product")
        .prefetch_related("product__recipe_items")
    )
    requirements = aggregate_requirements(items)

    short = [req.name for req in requirements if not req.sufficient]
    if short:
        logger.warning(
            f"Bake sheet for {target_date}: short on {', '.join(short)}",
            extra={"date": str(target_date), "shortages": short},
        )

    return requirements
