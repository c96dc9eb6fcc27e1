"""
Bakehouse Admin: Django admin for the catalog, pantry, production and orders.

Models with history (Ingredient, Batch, Order) use SimpleHistoryAdmin so the
change log is browsable from each object page.
"""

from django.contrib import admin
from simple_history.admin import SimpleHistoryAdmin

from bakehouse.models import (
    ActivityLog,
    Batch,
    BatchItem,
    FreezerStock,
    Ingredient,
    InventoryAdjustment,
    Invoice,
    InvoiceItem,
    Location,
    LocationInventory,
    MarketingAsset,
    Order,
    OrderItem,
    Product,
    RecipeItem,
)

# ── Catalog ──


class RecipeItemInline(admin.TabularInline):
    """Inline for the bill of materials."""

    model = RecipeItem
    extra = 1
    fields = ("ingredient", "quantity")


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("name", "price", "is_active")
    list_filter = ("is_active",)
    search_fields = ("name",)
    inlines = [RecipeItemInline]
    readonly_fields = ("uuid", "created_at", "updated_at")


# ── Pantry ──


@admin.register(Ingredient)
class IngredientAdmin(SimpleHistoryAdmin):
    list_display = ("name", "on_hand", "unit", "reorder_threshold", "is_low_stock")
    search_fields = ("name",)
    # on_hand only changes through adjustments
    readonly_fields = ("on_hand", "created_at", "updated_at")

    @admin.display(boolean=True, description="Low stock")
    def is_low_stock(self, obj):
        return obj.is_low_stock


@admin.register(InventoryAdjustment)
class InventoryAdjustmentAdmin(admin.ModelAdmin):
    list_display = ("ingredient", "adjustment_type", "quantity", "new_quantity", "adjusted_by", "created_at")
    list_filter = ("adjustment_type",)
    raw_id_fields = ("ingredient",)

    def has_change_permission(self, request, obj=None):
        return False


# ── Locations ──


class LocationInventoryInline(admin.TabularInline):
    model = LocationInventory
    extra = 0
    fields = ("product", "quantity")


@admin.register(Location)
class LocationAdmin(admin.ModelAdmin):
    list_display = ("name", "type", "is_active")
    list_filter = ("type", "is_active")
    inlines = [LocationInventoryInline]


# ── Production ──


class BatchItemInline(admin.TabularInline):
    model = BatchItem
    extra = 1
    fields = ("product", "quantity")


@admin.register(Batch)
class BatchAdmin(SimpleHistoryAdmin):
    """Status is changed through the console so completion runs its side effects."""

    list_display = ("batch_date", "shift", "status", "completed_at")
    list_filter = ("status", "shift")
    date_hierarchy = "batch_date"
    inlines = [BatchItemInline]
    readonly_fields = ("status", "started_at", "completed_at", "metadata", "created_at", "updated_at")


@admin.register(FreezerStock)
class FreezerStockAdmin(admin.ModelAdmin):
    list_display = ("product", "quantity", "batch", "expires_at", "created_at")
    raw_id_fields = ("batch",)


# ── Orders ──


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    fields = ("product", "quantity", "unit_price", "total")
    readonly_fields = fields


@admin.register(Order)
class OrderAdmin(SimpleHistoryAdmin):
    list_display = ("id", "customer_name", "fulfillment_date", "item_count", "status", "payment_status", "total")
    list_filter = ("status", "payment_status", "fulfillment_window")
    search_fields = ("customer_name", "customer_email")
    date_hierarchy = "fulfillment_date"
    inlines = [OrderItemInline]
    readonly_fields = (
        "uuid",
        "status",
        "subtotal",
        "total",
        "payment_intent_id",
        "payment_status",
        "created_at",
        "updated_at",
    )


class InvoiceItemInline(admin.TabularInline):
    model = InvoiceItem
    extra = 0
    readonly_fields = ("product", "product_name", "quantity", "unit_price", "total")


@admin.register(Invoice)
class InvoiceAdmin(admin.ModelAdmin):
    list_display = ("invoice_number", "customer_name", "total", "status", "issued_at", "paid_at")
    list_filter = ("status",)
    search_fields = ("invoice_number", "customer_name")
    inlines = [InvoiceItemInline]
    readonly_fields = ("invoice_number", "order", "subtotal", "tax", "total", "issued_at", "paid_at")


# ── Marketing & activity ──


@admin.register(MarketingAsset)
class MarketingAssetAdmin(admin.ModelAdmin):
    list_display = ("name", "asset_type", "usage_context", "product")
    list_filter = ("asset_type", "usage_context")


@admin.register(ActivityLog)
class ActivityLogAdmin(admin.ModelAdmin):
    list_display = ("action", "entity_type", "entity_id", "actor", "created_at")
    list_filter = ("action", "entity_type")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
