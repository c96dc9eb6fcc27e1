"""
Bakehouse Services.

Business logic that doesn't belong in models:
- orders: Checkout, status changes, payment webhooks
- production: Batch creation, listing, status, bake sheet
- pantry: Ingredient adjustments, seeding
- freezer: Manual stock, corrections, stats
- invoicing: Issue invoices, status
- ingredients: BOM requirement aggregation
"""

from bakehouse.services.freezer import BakehouseFreezer
from bakehouse.services.ingredients import aggregate_requirements, calculate_daily_requirements
from bakehouse.services.invoicing import BakehouseInvoicing
from bakehouse.services.orders import BakehouseOrders
from bakehouse.services.pantry import BASIC_INGREDIENTS, BakehousePantry
from bakehouse.services.production import BakehouseProduction

__all__ = [
    "BakehouseOrders",
    "BakehouseProduction",
    "BakehousePantry",
    "BakehouseFreezer",
    "BakehouseInvoicing",
    "BASIC_INGREDIENTS",
    "aggregate_requirements",
    "calculate_daily_requirements",
]
