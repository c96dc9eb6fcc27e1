"""
Bakehouse Models.

Core models for the bakery:
- Product / RecipeItem: what we sell and its bill of materials
- Ingredient / InventoryAdjustment: pantry stock and its audit trail
- Location / LocationInventory: where bagels are sold
- Batch / BatchItem: production runs that consume the pantry
- FreezerStock: finished goods produced by batches
- Order / OrderItem: storefront orders with manual-capture payments
- Invoice / InvoiceItem: issued on order approval
- ActivityLog: console audit trail
- MarketingAsset: photos and artwork
"""

from bakehouse.models.activity import ActivityLog
from bakehouse.models.batch import Batch, BatchItem, BatchStatus, Shift
from bakehouse.models.catalog import Product, RecipeItem
from bakehouse.models.freezer import FreezerStock
from bakehouse.models.inventory import AdjustmentType, Ingredient, InventoryAdjustment
from bakehouse.models.invoice import Invoice, InvoiceItem, InvoiceStatus
from bakehouse.models.location import Location, LocationInventory, LocationType
from bakehouse.models.marketing import AssetType, MarketingAsset, UsageContext
from bakehouse.models.order import (
    FulfillmentWindow,
    Order,
    OrderItem,
    OrderStatus,
    PaymentStatus,
)
from bakehouse.models.sequence import CodeSequence

__all__ = [
    "ActivityLog",
    "AdjustmentType",
    "AssetType",
    "Batch",
    "BatchItem",
    "BatchStatus",
    "CodeSequence",
    "FreezerStock",
    "FulfillmentWindow",
    "Ingredient",
    "InventoryAdjustment",
    "Invoice",
    "InvoiceItem",
    "InvoiceStatus",
    "Location",
    "LocationInventory",
    "LocationType",
    "MarketingAsset",
    "Order",
    "OrderItem",
    "OrderStatus",
    "PaymentStatus",
    "Product",
    "RecipeItem",
    "Shift",
    "UsageContext",
]
