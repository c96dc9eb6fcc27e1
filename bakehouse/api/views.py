"""
Bakehouse API Views.

Public storefront endpoints (products, locations, checkout, order lookup,
payment webhook, health, session auth) and the admin console ViewSets.
"""

import logging
from datetime import date

from django.contrib.auth import authenticate, login, logout
from django.core.exceptions import ValidationError
from django.db import DatabaseError, connection
from django.db.models import ProtectedError
from django.shortcuts import get_object_or_404
from django.utils import timezone
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from bakehouse.conf import get_setting
from bakehouse.exceptions import BakehouseError
from bakehouse.models import (
    ActivityLog,
    Batch,
    FreezerStock,
    Ingredient,
    InventoryAdjustment,
    Invoice,
    Location,
    MarketingAsset,
    Order,
    Product,
)
from bakehouse.service import bakery

from .serializers import (
    ActivityLogSerializer,
    AdjustIngredientSerializer,
    BatchSerializer,
    BomLineSerializer,
    CreateAdjustmentSerializer,
    CreateBatchSerializer,
    FreezerQuantitySerializer,
    FreezerStockSerializer,
    IngredientSerializer,
    InventoryAdjustmentSerializer,
    InvoiceSerializer,
    LocationInventorySerializer,
    LocationSerializer,
    LoginSerializer,
    MarketingAssetSerializer,
    OrderSerializer,
    PlaceOrderSerializer,
    ProductSerializer,
    PublicOrderSerializer,
    RecipeItemSerializer,
    StatusSerializer,
    StockFreezerSerializer,
    UpdateOrderSerializer,
)

logger = logging.getLogger(__name__)


def error_response(exc: Exception) -> Response:
    """Translate a business error into a 400 response."""
    if isinstance(exc, BakehouseError):
        return Response(exc.as_dict(), status=status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, ValidationError):
        return Response(
            {"code": "VALIDATION_ERROR", "message": " ".join(exc.messages)},
            status=status.HTTP_400_BAD_REQUEST,
        )
    raise exc


def actor_for(request) -> str:
    if request.user and request.user.is_authenticated:
        return request.user.get_username()
    return get_setting("DEFAULT_ACTOR")


# ══════════════════════════════════════════════════════════════
# PUBLIC
# ══════════════════════════════════════════════════════════════


class PublicProductViewSet(viewsets.ReadOnlyModelViewSet):
    """Active products on the storefront."""

    permission_classes = [AllowAny]
    queryset = Product.objects.filter(is_active=True)
    serializer_class = ProductSerializer


class PublicLocationViewSet(viewsets.ReadOnlyModelViewSet):
    permission_classes = [AllowAny]
    queryset = Location.objects.filter(is_active=True)
    serializer_class = LocationSerializer


class PublicOrderViewSet(viewsets.GenericViewSet):
    """
    Checkout and order lookup.

    create: Place an order, returns order_id and the payment client_secret
    retrieve: Limited view of an order by UUID
    """

    permission_classes = [AllowAny]
    queryset = Order.objects.prefetch_related("items__product")
    serializer_class = PublicOrderSerializer
    lookup_field = "uuid"

    def create(self, request):
        """
        POST /api/orders/
        {
            "customer_name": "Ada", ..., "fulfillment_window": "morning",
            "items": [{"product_id": 1, "quantity": 6}]
        }
        """
        serializer = PlaceOrderSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            placement = bakery.place_order(serializer.validated_data)
        except BakehouseError as e:
            return error_response(e)

        return Response(
            {"order_id": placement.order_id, "client_secret": placement.client_secret},
            status=status.HTTP_201_CREATED,
        )

    def retrieve(self, request, uuid=None):
        return Response(self.get_serializer(self.get_object()).data)


class HealthView(APIView):
    """GET /api/health/"""

    permission_classes = [AllowAny]

    def get(self, request):
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
        except DatabaseError as e:
            logger.error(f"Health check failed: {e}")
            return Response(
                {
                    "status": "error",
                    "database": "disconnected",
                    "timestamp": timezone.now(),
                },
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        return Response(
            {"status": "ok", "database": "connected", "timestamp": timezone.now()}
        )


class StripeWebhookView(APIView):
    """POST /api/webhooks/stripe/ (raw body, Stripe-Signature header)"""

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        signature = request.META.get("HTTP_STRIPE_SIGNATURE", "")
        try:
            result = bakery.handle_payment_event(request.body, signature)
        except BakehouseError as e:
            return error_response(e)
        return Response(result)


class LoginView(APIView):
    """POST /api/auth/login/ {"username", "password"}"""

    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        user = authenticate(
            request,
            username=serializer.validated_data["username"],
            password=serializer.validated_data["password"],
        )
        if user is None:
            logger.warning(
                f"Failed login for {serializer.validated_data['username']}",
            )
            return Response(
                {"code": "INVALID_CREDENTIALS", "message": "Invalid credentials"},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        login(request, user)
        return Response({"user": {"id": user.pk, "username": user.get_username()}})


class CurrentUserView(APIView):
    """GET /api/auth/user/"""

    permission_classes = [IsAuthenticated]

    def get(self, request):
        user = request.user
        return Response(
            {"user": {"id": user.pk, "username": user.get_username(), "is_staff": user.is_staff}}
        )


class LogoutView(APIView):
    """POST /api/auth/logout/"""

    permission_classes = [AllowAny]

    def post(self, request):
        logout(request)
        return Response({"message": "Logged out"})


# ══════════════════════════════════════════════════════════════
# ADMIN CONSOLE
# ══════════════════════════════════════════════════════════════


class OrderViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """
    Orders in the console.

    list / retrieve / partial_update (customer & delivery fields)
    set_status: PATCH {id}/status/ {"status": "approved"}
    """

    permission_classes = [IsAuthenticated]
    queryset = Order.objects.prefetch_related("items__product").select_related("invoice")
    serializer_class = OrderSerializer

    def get_queryset(self):
        qs = super().get_queryset()
        order_status = self.request.query_params.get("status")
        if order_status:
            qs = qs.filter(status=order_status)
        return qs

    def partial_update(self, request, pk=None):
        order = self.get_object()
        serializer = UpdateOrderSerializer(order, data=request.data, partial=True)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            bakery.update_order(order, **serializer.validated_data)
        except ValidationError as e:
            return error_response(e)
        return Response(OrderSerializer(order).data)

    @action(detail=True, methods=["patch"], url_path="status")
    def set_status(self, request, pk=None):
        """
        PATCH /api/admin/orders/{pk}/status/ {"status": "approved"}

        Approving captures the payment and issues the invoice.
        """
        order = self.get_object()
        serializer = StatusSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            order = bakery.set_order_status(
                order, serializer.validated_data["status"], actor=actor_for(request)
            )
        except (BakehouseError, ValidationError) as e:
            return error_response(e)
        return Response(OrderSerializer(order).data)


class ProductViewSet(viewsets.ModelViewSet):
    """Catalog management. bom: GET|PUT {id}/bom/"""

    permission_classes = [IsAuthenticated]
    queryset = Product.objects.all()
    serializer_class = ProductSerializer

    def destroy(self, request, *args, **kwargs):
        """Products already ordered or baked are kept; deactivate them instead."""
        product = self.get_object()
        try:
            product.delete()
        except ProtectedError:
            logger.warning(f"Refused to delete product {product.pk}: still referenced")
            return error_response(
                BakehouseError(
                    "PRODUCT_IN_USE",
                    message=f"{product.name} is referenced by orders or batches",
                    product_id=product.pk,
                )
            )
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["get", "put"])
    def bom(self, request, pk=None):
        """
        GET  /api/admin/products/{pk}/bom/
        PUT  /api/admin/products/{pk}/bom/ [{"ingredient": 1, "quantity": "0.25"}, ...]
        """
        product = self.get_object()

        if request.method == "PUT":
            lines = request.data.get("items") if isinstance(request.data, dict) else request.data
            serializer = BomLineSerializer(data=lines or [], many=True)
            if not serializer.is_valid():
                return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
            product.replace_bom(serializer.validated_data)

        items = product.recipe_items.select_related("ingredient")
        return Response(RecipeItemSerializer(items, many=True).data)


class IngredientViewSet(
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    viewsets.GenericViewSet,
):
    """
    Pantry.

    adjust: POST {id}/adjust/ {"quantity": "-2", "adjustment_type": "waste"}
    seed: POST seed/ (empty pantry only)
    """

    permission_classes = [IsAuthenticated]
    queryset = Ingredient.objects.all()
    serializer_class = IngredientSerializer

    @action(detail=True, methods=["post"])
    def adjust(self, request, pk=None):
        ingredient = self.get_object()
        serializer = AdjustIngredientSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        data = serializer.validated_data
        try:
            adjustment = bakery.adjust_ingredient(
                ingredient,
                data["quantity"],
                data["adjustment_type"],
                reason=data["reason"],
                adjusted_by=data["adjusted_by"] or actor_for(request),
            )
        except BakehouseError as e:
            return error_response(e)

        ingredient.refresh_from_db()
        return Response(
            {
                "ingredient": IngredientSerializer(ingredient).data,
                "adjustment": InventoryAdjustmentSerializer(adjustment).data,
            }
        )

    @action(detail=False, methods=["post"])
    def seed(self, request):
        try:
            created = bakery.seed_pantry()
        except BakehouseError as e:
            return error_response(e)
        return Response(
            {
                "message": f"Seeded {len(created)} ingredients",
                "ingredients": IngredientSerializer(created, many=True).data,
            },
            status=status.HTTP_201_CREATED,
        )


class InventoryAdjustmentViewSet(
    mixins.ListModelMixin,
    viewsets.GenericViewSet,
):
    """Adjustment history; ?ingredient=<id> filters. create adjusts the pantry."""

    permission_classes = [IsAuthenticated]
    queryset = InventoryAdjustment.objects.select_related("ingredient")
    serializer_class = InventoryAdjustmentSerializer

    def get_queryset(self):
        qs = super().get_queryset()
        ingredient = self.request.query_params.get("ingredient")
        if ingredient:
            qs = qs.filter(ingredient_id=ingredient)
        return qs

    def create(self, request):
        serializer = CreateAdjustmentSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        data = serializer.validated_data
        try:
            adjustment = bakery.adjust_ingredient(
                data["ingredient"],
                data["quantity"],
                data["adjustment_type"],
                reason=data["reason"],
                adjusted_by=data["adjusted_by"] or actor_for(request),
            )
        except BakehouseError as e:
            return error_response(e)
        return Response(
            InventoryAdjustmentSerializer(adjustment).data, status=status.HTTP_201_CREATED
        )


class LocationViewSet(
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    viewsets.GenericViewSet,
):
    """Locations. inventory: GET {id}/inventory/"""

    permission_classes = [IsAuthenticated]
    queryset = Location.objects.all()
    serializer_class = LocationSerializer

    @action(detail=True, methods=["get"])
    def inventory(self, request, pk=None):
        location = self.get_object()
        rows = location.inventory.select_related("product").order_by("product__name")
        return Response(LocationInventorySerializer(rows, many=True).data)


class BatchViewSet(
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """
    Production batches.

    list: ?page=&limit=&status= (paginated)
    create: {"batch_date", "shift", "notes", "items": [{"product", "quantity"}]}
    set_status: PATCH {id}/status/ {"status": "completed"}
    requirements: GET {id}/requirements/
    """

    permission_classes = [IsAuthenticated]
    queryset = Batch.objects.prefetch_related("items__product")
    serializer_class = BatchSerializer

    def list(self, request):
        params = request.query_params
        try:
            page = int(params.get("page", 1))
            limit = int(params["limit"]) if params.get("limit") else None
        except ValueError:
            return Response(
                {"code": "INVALID_QUANTITY", "message": "page and limit must be integers"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        result = bakery.list_batches(page=page, limit=limit, status=params.get("status"))
        return Response(
            {
                "batches": BatchSerializer(result["batches"], many=True).data,
                "pagination": result["pagination"],
            }
        )

    def create(self, request):
        serializer = CreateBatchSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            batch = bakery.create_batch(**serializer.validated_data)
        except BakehouseError as e:
            return error_response(e)
        return Response(BatchSerializer(batch).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["patch"], url_path="status")
    def set_status(self, request, pk=None):
        """
        PATCH /api/admin/batches/{pk}/status/ {"status": "completed"}

        Completing deducts the pantry and stocks the freezer, or fails with
        INSUFFICIENT_INGREDIENTS and changes nothing.
        """
        batch = self.get_object()
        serializer = StatusSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            batch = bakery.set_batch_status(
                batch, serializer.validated_data["status"], actor=actor_for(request)
            )
        except (BakehouseError, ValidationError) as e:
            return error_response(e)
        return Response(BatchSerializer(batch).data)

    @action(detail=True, methods=["get"])
    def requirements(self, request, pk=None):
        batch = self.get_object()
        requirements = bakery.batch_requirements(batch)
        return Response(
            {
                "batch": batch.pk,
                "requirements": [req.as_dict() for req in requirements],
                "can_complete": all(req.sufficient for req in requirements),
            }
        )


class FreezerViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """
    Freezer stock.

    create: manual entry {"product", "quantity"}
    partial_update: {"quantity": 10}
    stats: GET stats/
    by_product: GET product/{product_id}/
    """

    permission_classes = [IsAuthenticated]
    queryset = FreezerStock.objects.select_related("product")
    serializer_class = FreezerStockSerializer

    def create(self, request):
        serializer = StockFreezerSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            stock = bakery.stock_freezer(**serializer.validated_data, actor=actor_for(request))
        except BakehouseError as e:
            return error_response(e)
        return Response(FreezerStockSerializer(stock).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, pk=None):
        stock = self.get_object()
        serializer = FreezerQuantitySerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            bakery.set_freezer_quantity(stock, serializer.validated_data["quantity"])
        except BakehouseError as e:
            return error_response(e)
        return Response(FreezerStockSerializer(stock).data)

    @action(detail=False, methods=["get"])
    def stats(self, request):
        return Response(bakery.freezer_stats())

    @action(detail=False, methods=["get"], url_path=r"product/(?P<product_id>\d+)")
    def by_product(self, request, product_id=None):
        product = get_object_or_404(Product, pk=product_id)
        rows = self.get_queryset().filter(product=product)
        return Response(FreezerStockSerializer(rows, many=True).data)


class InvoiceViewSet(viewsets.ReadOnlyModelViewSet):
    """Invoices. set_status: PATCH {id}/status/ {"status": "paid"}"""

    permission_classes = [IsAuthenticated]
    queryset = Invoice.objects.prefetch_related("items")
    serializer_class = InvoiceSerializer

    @action(detail=True, methods=["patch"], url_path="status")
    def set_status(self, request, pk=None):
        invoice = self.get_object()
        serializer = StatusSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            invoice = bakery.set_invoice_status(invoice, serializer.validated_data["status"])
        except BakehouseError as e:
            return error_response(e)
        return Response(InvoiceSerializer(invoice).data)


class MarketingAssetViewSet(
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    viewsets.GenericViewSet,
):
    permission_classes = [IsAuthenticated]
    queryset = MarketingAsset.objects.all()
    serializer_class = MarketingAssetSerializer


class ActivityLogViewSet(
    mixins.ListModelMixin,
    viewsets.GenericViewSet,
):
    """
    Audit trail.

    list: ?entity_type=&entity_id=&limit=
    recent: GET recent/
    """

    permission_classes = [IsAuthenticated]
    queryset = ActivityLog.objects.all()
    serializer_class = ActivityLogSerializer

    def list(self, request):
        qs = self.get_queryset()
        params = request.query_params
        if params.get("entity_type"):
            qs = qs.filter(entity_type=params["entity_type"])
        if params.get("entity_id"):
            qs = qs.filter(entity_id=params["entity_id"])

        try:
            limit = int(params.get("limit") or get_setting("ACTIVITY_LOG_LIMIT"))
        except ValueError:
            limit = get_setting("ACTIVITY_LOG_LIMIT")

        return Response(self.get_serializer(qs[: max(limit, 1)], many=True).data)

    @action(detail=False, methods=["get"])
    def recent(self, request):
        qs = self.get_queryset()[: get_setting("RECENT_ACTIVITY_LIMIT")]
        return Response(self.get_serializer(qs, many=True).data)


class StatsViewSet(viewsets.ViewSet):
    """GET stats/dashboard/, stats/orders/, stats/inventory/"""

    permission_classes = [IsAuthenticated]

    @action(detail=False, methods=["get"])
    def dashboard(self, request):
        return Response(bakery.dashboard_stats())

    @action(detail=False, methods=["get"])
    def orders(self, request):
        return Response(bakery.order_stats())

    @action(detail=False, methods=["get"])
    def inventory(self, request):
        stats = bakery.inventory_stats()
        stats["low_stock_items"] = IngredientSerializer(
            stats["low_stock_items"], many=True
        ).data
        return Response(stats)


class BakeSheetView(APIView):
    """GET /api/admin/bake-sheet/?date=YYYY-MM-DD (defaults to today)"""

    permission_classes = [IsAuthenticated]

    def get(self, request):
        raw = request.query_params.get("date")
        try:
            target_date = date.fromisoformat(raw) if raw else timezone.localdate()
        except ValueError:
            return Response(
                {"code": "INVALID_DATE", "message": f"Invalid date: {raw}"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        sheet = bakery.bake_sheet(target_date)
        return Response(
            {
                "date": target_date,
                "batches": BatchSerializer(sheet["batches"], many=True).data,
                "requirements": [req.as_dict() for req in sheet["requirements"]],
            }
        )
