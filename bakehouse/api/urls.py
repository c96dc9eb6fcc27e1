"""
Bakehouse API URLs.

Include this in your project's urlpatterns:

    path('api/', include('bakehouse.api.urls')),
"""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from .views import (
    ActivityLogViewSet,
    BakeSheetView,
    BatchViewSet,
    CurrentUserView,
    FreezerViewSet,
    HealthView,
    IngredientViewSet,
    InventoryAdjustmentViewSet,
    InvoiceViewSet,
    LocationViewSet,
    LoginView,
    LogoutView,
    MarketingAssetViewSet,
    OrderViewSet,
    ProductViewSet,
    PublicLocationViewSet,
    PublicOrderViewSet,
    PublicProductViewSet,
    StatsViewSet,
    StripeWebhookView,
)

router = DefaultRouter()
router.register("products", PublicProductViewSet, basename="public-product")
router.register("locations", PublicLocationViewSet, basename="public-location")
router.register("orders", PublicOrderViewSet, basename="public-order")

admin_router = DefaultRouter()
admin_router.register("orders", OrderViewSet)
admin_router.register("products", ProductViewSet)
admin_router.register("ingredients", IngredientViewSet)
admin_router.register("inventory-adjustments", InventoryAdjustmentViewSet)
admin_router.register("locations", LocationViewSet)
admin_router.register("batches", BatchViewSet)
admin_router.register("freezer", FreezerViewSet)
admin_router.register("invoices", InvoiceViewSet)
admin_router.register("marketing-assets", MarketingAssetViewSet)
admin_router.register("activity", ActivityLogViewSet)
admin_router.register("stats", StatsViewSet, basename="stats")

urlpatterns = [
    path("health/", HealthView.as_view(), name="health"),
    path("webhooks/stripe/", StripeWebhookView.as_view(), name="stripe-webhook"),
    path("auth/login/", LoginView.as_view(), name="login"),
    path("auth/user/", CurrentUserView.as_view(), name="current-user"),
    path("auth/logout/", LogoutView.as_view(), name="logout"),
    path("admin/bake-sheet/", BakeSheetView.as_view(), name="bake-sheet"),
    path("admin/", include(admin_router.urls)),
    path("", include(router.urls)),
]
