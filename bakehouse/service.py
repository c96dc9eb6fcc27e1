"""
Bakehouse Service - Thin wrapper over models.

Business logic lives in the models; this class composes the service
mixins into a single entry point.

Usage:
    from bakehouse import bakery

    # Storefront
    placement = bakery.place_order({...})
    bakery.set_order_status(order, "approved")   # captures + invoices

    # Production
    batch = bakery.create_batch(date(2026, 3, 2), "morning", items=[...])
    bakery.set_batch_status(batch, "completed")  # pantry -> freezer

    # Reports
    bakery.dashboard_stats()
"""

import logging

from bakehouse.analytics import BakehouseStats
from bakehouse.services import (
    BakehouseFreezer,
    BakehouseInvoicing,
    BakehouseOrders,
    BakehousePantry,
    BakehouseProduction,
)

logger = logging.getLogger(__name__)


class Bakehouse(
    BakehouseOrders,
    BakehouseProduction,
    BakehousePantry,
    BakehouseFreezer,
    BakehouseInvoicing,
    BakehouseStats,
):
    """
    Main API for the bakehouse (thin wrapper).

    All methods are classmethods inherited from the service mixins.
    """


bakery = Bakehouse
