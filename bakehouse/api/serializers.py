"""
Bakehouse API Serializers.
"""

from rest_framework import serializers

from bakehouse.models import (
    ActivityLog,
    AdjustmentType,
    Batch,
    BatchItem,
    FreezerStock,
    FulfillmentWindow,
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
    Shift,
)
from bakehouse.models.order import EDITABLE_ORDER_FIELDS


# ══════════════════════════════════════════════════════════════
# CATALOG
# ══════════════════════════════════════════════════════════════


class RecipeItemSerializer(serializers.ModelSerializer):
    """BOM line as shown to the console."""

    ingredient_name = serializers.CharField(source="ingredient.name", read_only=True)
    unit = serializers.CharField(source="ingredient.unit", read_only=True)

    class Meta:
        model = RecipeItem
        fields = ["id", "ingredient", "ingredient_name", "unit", "quantity"]
        read_only_fields = ["id", "ingredient_name", "unit"]


class BomLineSerializer(serializers.Serializer):
    """One line of a BOM replacement. Non-positive quantities are skipped."""

    ingredient = serializers.PrimaryKeyRelatedField(
        queryset=Ingredient.objects.all(), required=False, allow_null=True
    )
    quantity = serializers.DecimalField(max_digits=10, decimal_places=4)


class ProductSerializer(serializers.ModelSerializer):
    """Serializer for Product. Create accepts an optional ``bom`` list."""

    bom = BomLineSerializer(many=True, write_only=True, required=False)

    class Meta:
        model = Product
        fields = [
            "id",
            "uuid",
            "name",
            "description",
            "price",
            "image_url",
            "is_active",
            "bom",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["uuid", "created_at", "updated_at"]

    def validate_price(self, value):
        if value < 0:
            raise serializers.ValidationError("Must not be negative.")
        return value

    def create(self, validated_data):
        bom = validated_data.pop("bom", None)
        product = super().create(validated_data)
        if bom:
            product.replace_bom(bom)
        return product

    def update(self, instance, validated_data):
        bom = validated_data.pop("bom", None)
        product = super().update(instance, validated_data)
        if bom is not None:
            product.replace_bom(bom)
        return product


# ══════════════════════════════════════════════════════════════
# INVENTORY
# ══════════════════════════════════════════════════════════════


class IngredientSerializer(serializers.ModelSerializer):
    is_low_stock = serializers.BooleanField(read_only=True)

    class Meta:
        model = Ingredient
        fields = [
            "id",
            "name",
            "unit",
            "on_hand",
            "reorder_threshold",
            "cost_per_unit",
            "is_low_stock",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["created_at", "updated_at"]


class InventoryAdjustmentSerializer(serializers.ModelSerializer):
    ingredient_name = serializers.CharField(source="ingredient.name", read_only=True)

    class Meta:
        model = InventoryAdjustment
        fields = [
            "id",
            "ingredient",
            "ingredient_name",
            "adjustment_type",
            "quantity",
            "previous_quantity",
            "new_quantity",
            "reason",
            "adjusted_by",
            "created_at",
        ]
        read_only_fields = fields


class AdjustIngredientSerializer(serializers.Serializer):
    """Input for an ingredient adjustment."""

    quantity = serializers.DecimalField(
        max_digits=12, decimal_places=3, help_text="Signed: positive adds stock"
    )
    adjustment_type = serializers.ChoiceField(choices=AdjustmentType.choices)
    reason = serializers.CharField(required=False, allow_blank=True, default="")
    adjusted_by = serializers.CharField(required=False, allow_blank=True, default="")


class CreateAdjustmentSerializer(AdjustIngredientSerializer):
    ingredient = serializers.PrimaryKeyRelatedField(queryset=Ingredient.objects.all())


# ══════════════════════════════════════════════════════════════
# LOCATIONS
# ══════════════════════════════════════════════════════════════


class LocationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Location
        fields = ["id", "name", "type", "address", "is_active", "created_at", "updated_at"]
        read_only_fields = ["created_at", "updated_at"]


class LocationInventorySerializer(serializers.ModelSerializer):
    product_name = serializers.CharField(source="product.name", read_only=True)

    class Meta:
        model = LocationInventory
        fields = ["id", "product", "product_name", "quantity", "updated_at"]
        read_only_fields = fields


# ══════════════════════════════════════════════════════════════
# PRODUCTION
# ══════════════════════════════════════════════════════════════


class BatchItemSerializer(serializers.ModelSerializer):
    product_name = serializers.CharField(source="product.name", read_only=True)

    class Meta:
        model = BatchItem
        fields = ["id", "product", "product_name", "quantity"]
        read_only_fields = ["id", "product_name"]


class BatchSerializer(serializers.ModelSerializer):
    """Serializer for Batch with its items."""

    items = BatchItemSerializer(many=True, read_only=True)

    class Meta:
        model = Batch
        fields = [
            "id",
            "batch_date",
            "shift",
            "notes",
            "status",
            "items",
            "started_at",
            "completed_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class BatchLineSerializer(serializers.Serializer):
    product = serializers.PrimaryKeyRelatedField(queryset=Product.objects.all())
    quantity = serializers.IntegerField(min_value=0)


class CreateBatchSerializer(serializers.Serializer):
    batch_date = serializers.DateField()
    shift = serializers.ChoiceField(choices=Shift.choices)
    notes = serializers.CharField(required=False, allow_blank=True, default="")
    items = BatchLineSerializer(many=True, required=False, default=list)


class StatusSerializer(serializers.Serializer):
    """Input for status changes. Validation of the value is left to the model."""

    status = serializers.CharField()


# ══════════════════════════════════════════════════════════════
# FREEZER
# ══════════════════════════════════════════════════════════════


class FreezerStockSerializer(serializers.ModelSerializer):
    product_name = serializers.CharField(source="product.name", read_only=True)

    class Meta:
        model = FreezerStock
        fields = [
            "id",
            "product",
            "product_name",
            "quantity",
            "batch",
            "notes",
            "expires_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["batch", "created_at", "updated_at"]


class StockFreezerSerializer(serializers.Serializer):
    product = serializers.PrimaryKeyRelatedField(queryset=Product.objects.all())
    quantity = serializers.IntegerField(min_value=1)
    notes = serializers.CharField(required=False, allow_blank=True, default="")
    expires_at = serializers.DateTimeField(required=False, allow_null=True, default=None)
    batch = serializers.PrimaryKeyRelatedField(
        queryset=Batch.objects.all(), required=False, allow_null=True, default=None
    )


class FreezerQuantitySerializer(serializers.Serializer):
    quantity = serializers.IntegerField(min_value=0)


# ══════════════════════════════════════════════════════════════
# ORDERS
# ══════════════════════════════════════════════════════════════


class OrderItemSerializer(serializers.ModelSerializer):
    product_name = serializers.CharField(source="product.name", read_only=True)

    class Meta:
        model = OrderItem
        fields = ["id", "product", "product_name", "quantity", "unit_price", "total"]
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """Full order, for the console."""

    items = OrderItemSerializer(many=True, read_only=True)
    invoice_number = serializers.CharField(
        source="invoice.invoice_number", read_only=True, default=None
    )

    class Meta:
        model = Order
        fields = [
            "id",
            "uuid",
            "customer_name",
            "customer_email",
            "customer_phone",
            "delivery_address",
            "delivery_city",
            "delivery_state",
            "delivery_zip",
            "delivery_instructions",
            "location",
            "fulfillment_date",
            "fulfillment_window",
            "status",
            "subtotal",
            "total",
            "payment_intent_id",
            "payment_status",
            "invoice_number",
            "notes",
            "items",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class UpdateOrderSerializer(serializers.ModelSerializer):
    class Meta:
        model = Order
        fields = list(EDITABLE_ORDER_FIELDS)


class PublicOrderItemSerializer(serializers.ModelSerializer):
    product_name = serializers.CharField(source="product.name", read_only=True)

    class Meta:
        model = OrderItem
        fields = ["quantity", "total", "product_name"]
        read_only_fields = fields


class PublicOrderSerializer(serializers.ModelSerializer):
    """What a customer may see about their order."""

    id = serializers.UUIDField(source="uuid", read_only=True)
    items = PublicOrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            "id",
            "status",
            "total",
            "fulfillment_date",
            "fulfillment_window",
            "delivery_address",
            "delivery_city",
            "delivery_state",
            "delivery_zip",
            "items",
            "created_at",
        ]
        read_only_fields = fields


class OrderLineSerializer(serializers.Serializer):
    product_id = serializers.IntegerField()
    quantity = serializers.IntegerField(min_value=1)


class PlaceOrderSerializer(serializers.Serializer):
    """Storefront checkout payload."""

    customer_name = serializers.CharField(max_length=200)
    customer_email = serializers.EmailField()
    customer_phone = serializers.CharField(max_length=50, required=False, allow_blank=True)
    delivery_address = serializers.CharField(max_length=255)
    delivery_city = serializers.CharField(max_length=100)
    delivery_state = serializers.CharField(max_length=50)
    delivery_zip = serializers.CharField(max_length=20)
    delivery_instructions = serializers.CharField(required=False, allow_blank=True)
    location = serializers.IntegerField(required=False, allow_null=True)
    fulfillment_date = serializers.DateField()
    fulfillment_window = serializers.ChoiceField(choices=FulfillmentWindow.choices)
    notes = serializers.CharField(required=False, allow_blank=True)
    items = OrderLineSerializer(many=True, allow_empty=False)


# ══════════════════════════════════════════════════════════════
# INVOICES, MARKETING, ACTIVITY
# ══════════════════════════════════════════════════════════════


class InvoiceItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = InvoiceItem
        fields = ["id", "product", "product_name", "quantity", "unit_price", "total"]
        read_only_fields = fields


class InvoiceSerializer(serializers.ModelSerializer):
    items = InvoiceItemSerializer(many=True, read_only=True)

    class Meta:
        model = Invoice
        fields = [
            "id",
            "invoice_number",
            "order",
            "customer_name",
            "customer_email",
            "customer_phone",
            "delivery_address",
            "delivery_city",
            "delivery_state",
            "delivery_zip",
            "subtotal",
            "tax",
            "total",
            "status",
            "issued_at",
            "paid_at",
            "items",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class MarketingAssetSerializer(serializers.ModelSerializer):
    class Meta:
        model = MarketingAsset
        fields = [
            "id",
            "name",
            "asset_type",
            "usage_context",
            "image_url",
            "notes",
            "product",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["created_at", "updated_at"]


class ActivityLogSerializer(serializers.ModelSerializer):
    class Meta:
        model = ActivityLog
        fields = ["id", "action", "entity_type", "entity_id", "details", "actor", "created_at"]
        read_only_fields = fields


# ══════════════════════════════════════════════════════════════
# AUTH
# ══════════════════════════════════════════════════════════════


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(style={"input_type": "password"})
