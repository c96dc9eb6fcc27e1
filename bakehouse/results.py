"""
Bakehouse Result Types.

Structured results for production and checkout operations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bakehouse.models import Order


@dataclass
class IngredientRequirement:
    """How much of one ingredient a batch (or a day) needs, against the pantry."""

    ingredient_id: int
    name: str
    unit: str
    required: Decimal
    available: Decimal
    used_in: list[str] = field(default_factory=list)

    @property
    def sufficient(self) -> bool:
        return self.available >= self.required

    @property
    def shortage(self) -> Decimal:
        return max(self.required - self.available, Decimal("0"))

    def as_dict(self) -> dict:
        return {
            "ingredient_id": self.ingredient_id,
            "name": self.name,
            "unit": self.unit,
            "required": str(self.required),
            "available": str(self.available),
            "shortage": str(self.shortage),
            "sufficient": self.sufficient,
            "used_in": list(self.used_in),
        }


@dataclass
class OrderPlacement:
    """
    Result of a storefront checkout.

    client_secret is handed to the browser to confirm the card payment.
    """

    order_id: str
    client_secret: str
    order: Order | None = None
