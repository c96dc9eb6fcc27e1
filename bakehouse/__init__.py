"""
Django Bakehouse - Orders, payments and light production planning for a bakery.

Usage:
    from bakehouse import bakery, BakehouseError

    # Storefront
    placement = bakery.place_order({"customer_name": "Ada", ..., "items": [...]})
    print(placement.order_id, placement.client_secret)

    # Bakehouse console
    bakery.set_order_status(order, "approved")       # captures payment, issues invoice
    batch = bakery.create_batch(date(2025, 3, 7), "morning", items=[...])
    bakery.set_batch_status(batch, "completed")      # deducts pantry, fills freezer

    try:
        bakery.set_batch_status(batch, "completed")
    except BakehouseError as e:
        for shortage in e.details.get("shortages", []):
            print(f"Short: {shortage['name']} - need {shortage['required']}")
"""

from bakehouse.exceptions import BakehouseError


def __getattr__(name):
    """Lazy import to avoid AppRegistryNotReady errors."""
    if name in ("bakery", "Bakehouse"):
        from bakehouse.service import Bakehouse

        return Bakehouse
    if name == "IngredientRequirement":
        from bakehouse.results import IngredientRequirement

        return IngredientRequirement
    if name == "OrderPlacement":
        from bakehouse.results import OrderPlacement

        return OrderPlacement
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "bakery",
    "Bakehouse",
    "BakehouseError",
    "IngredientRequirement",
    "OrderPlacement",
]
__version__ = "0.1.0"
