"""
Tests for the Bakehouse REST API (bakehouse.api).
"""

import json
from decimal import Decimal

import pytest
from rest_framework import status

from bakehouse import bakery
from bakehouse.models import (
    ActivityLog,
    Batch,
    FreezerStock,
    Ingredient,
    Invoice,
    Location,
    LocationInventory,
    LocationType,
    Order,
    OrderStatus,
    PaymentStatus,
    Product,
    RecipeItem,
)

pytestmark = pytest.mark.django_db


def checkout_payload(plain, sesame_bagel, batch_date):
    return {
        "customer_name": "Ada Baker",
        "customer_email": "ada@example.com",
        "delivery_address": "12 Mill Street",
        "delivery_city": "Portland",
        "delivery_state": "ME",
        "delivery_zip": "04101",
        "fulfillment_date": batch_date.isoformat(),
        "fulfillment_window": "morning",
        "items": [
            {"product_id": plain.pk, "quantity": 2},
            {"product_id": sesame_bagel.pk, "quantity": 1},
        ],
    }


# ═══════════════════════════════════════════════════════════════════
# Public storefront
# ═══════════════════════════════════════════════════════════════════


class TestPublicCatalog:
    def test_lists_active_products(self, anon_client, plain, sesame_bagel):
        sesame_bagel.is_active = False
        sesame_bagel.save()

        response = anon_client.get("/api/products/")

        assert response.status_code == status.HTTP_200_OK
        assert [p["name"] for p in response.data] == ["Plain Bagel"]
        assert response.data[0]["price"] == "3.50"

    def test_lists_active_locations(self, anon_client):
        Location.objects.create(name="Basement Shop", type=LocationType.BASEMENT)
        Location.objects.create(name="Old Popup", type=LocationType.POPUP, is_active=False)

        response = anon_client.get("/api/locations/")

        assert [loc["name"] for loc in response.data] == ["Basement Shop"]


class TestCheckout:
    def test_places_order(self, anon_client, plain, sesame_bagel, batch_date, payment_backend):
        response = anon_client.post(
            "/api/orders/", checkout_payload(plain, sesame_bagel, batch_date), format="json"
        )

        assert response.status_code == status.HTTP_201_CREATED
        order = Order.objects.get(uuid=response.data["order_id"])
        assert response.data["client_secret"] == f"{order.payment_intent_id}_secret"
        assert order.total == Decimal("11.25")
        assert payment_backend.intents[order.payment_intent_id]["amount"] == 1125

    def test_inactive_product(self, anon_client, plain, sesame_bagel, batch_date):
        plain.is_active = False
        plain.save()

        response = anon_client.post(
            "/api/orders/", checkout_payload(plain, sesame_bagel, batch_date), format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["code"] == "PRODUCT_NOT_AVAILABLE"
        assert response.data["message"]

    def test_missing_fields(self, anon_client, plain, sesame_bagel, batch_date):
        payload = checkout_payload(plain, sesame_bagel, batch_date)
        del payload["customer_email"]

        response = anon_client.post("/api/orders/", payload, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "customer_email" in response.data
        assert Order.objects.count() == 0

    def test_zero_quantity(self, anon_client, plain, sesame_bagel, batch_date):
        payload = checkout_payload(plain, sesame_bagel, batch_date)
        payload["items"][0]["quantity"] = 0

        response = anon_client.post("/api/orders/", payload, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_order_lookup_by_uuid(self, anon_client, order):
        response = anon_client.get(f"/api/orders/{order.uuid}/")

        assert response.status_code == status.HTTP_200_OK
        assert response.data["id"] == str(order.uuid)
        assert response.data["status"] == "new"
        assert response.data["total"] == "11.25"
        assert "customer_email" not in response.data
        assert "payment_intent_id" not in response.data
        assert len(response.data["items"]) == 2

    def test_order_lookup_unknown(self, anon_client):
        response = anon_client.get("/api/orders/00000000-0000-0000-0000-000000000000/")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestWebhook:
    def test_payment_failed(self, anon_client, order):
        body = json.dumps(
            {
                "type": "payment_intent.payment_failed",
                "data": {"object": {"id": order.payment_intent_id}},
            }
        )

        response = anon_client.post(
            "/api/webhooks/stripe/",
            data=body,
            content_type="application/json",
            HTTP_STRIPE_SIGNATURE="whsec_test",
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {"received": True, "processed": True}
        order.refresh_from_db()
        assert order.payment_status == PaymentStatus.FAILED

    def test_bad_signature(self, anon_client, order):
        response = anon_client.post(
            "/api/webhooks/stripe/",
            data="{}",
            content_type="application/json",
            HTTP_STRIPE_SIGNATURE="nope",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["code"] == "WEBHOOK_INVALID"


class TestHealth:
    def test_ok(self, anon_client):
        response = anon_client.get("/api/health/")

        assert response.status_code == status.HTTP_200_OK
        assert response.data["status"] == "ok"
        assert response.data["database"] == "connected"


# ═══════════════════════════════════════════════════════════════════
# Auth
# ═══════════════════════════════════════════════════════════════════


class TestAuth:
    def test_login_user_logout(self, anon_client, staff_user):
        response = anon_client.post(
            "/api/auth/login/", {"username": "baker", "password": "test123"}, format="json"
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.data["user"]["username"] == "baker"

        response = anon_client.get("/api/auth/user/")
        assert response.status_code == status.HTTP_200_OK
        assert response.data["user"]["is_staff"] is True

        anon_client.post("/api/auth/logout/")
        response = anon_client.get("/api/auth/user/")
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_bad_credentials(self, anon_client, staff_user):
        response = anon_client.post(
            "/api/auth/login/", {"username": "baker", "password": "wrong"}, format="json"
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data["code"] == "INVALID_CREDENTIALS"

    def test_admin_requires_login(self, anon_client):
        response = anon_client.get("/api/admin/orders/")

        assert response.status_code == status.HTTP_403_FORBIDDEN


# ═══════════════════════════════════════════════════════════════════
# Console: orders & invoices
# ═══════════════════════════════════════════════════════════════════


class TestAdminOrders:
    def test_list_and_filter(self, api_client, order, order_data):
        other = bakery.place_order(order_data).order
        bakery.set_order_status(other, "cancelled")

        response = api_client.get("/api/admin/orders/", {"status": "new"})

        assert response.status_code == status.HTTP_200_OK
        assert [o["id"] for o in response.data] == [order.pk]
        assert response.data[0]["invoice_number"] is None

    def test_approve(self, api_client, order):
        response = api_client.patch(
            f"/api/admin/orders/{order.pk}/status/", {"status": "approved"}, format="json"
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data["status"] == "approved"
        assert response.data["payment_status"] == "captured"
        assert response.data["invoice_number"] == Invoice.objects.get().invoice_number
        assert ActivityLog.objects.get(action="order.approved").actor == "baker"

    def test_approve_capture_failure(self, api_client, order, payment_backend):
        payment_backend.fail_on.add(order.payment_intent_id)

        response = api_client.patch(
            f"/api/admin/orders/{order.pk}/status/", {"status": "approved"}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["code"] == "CAPTURE_FAILED"
        order.refresh_from_db()
        assert order.status == OrderStatus.NEW

    def test_invalid_status(self, api_client, order):
        response = api_client.patch(
            f"/api/admin/orders/{order.pk}/status/", {"status": "eaten"}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {
            "code": "INVALID_STATUS",
            "message": "Invalid status: eaten",
            "requested": "eaten",
            "allowed": list(OrderStatus.values),
        }

    def test_approve_cancelled_order(self, api_client, order):
        bakery.set_order_status(order, "cancelled")

        response = api_client.patch(
            f"/api/admin/orders/{order.pk}/status/", {"status": "approved"}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["code"] == "VALIDATION_ERROR"

    def test_edit_delivery(self, api_client, order):
        response = api_client.patch(
            f"/api/admin/orders/{order.pk}/",
            {"delivery_instructions": "Ring twice"},
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data["delivery_instructions"] == "Ring twice"

    def test_edit_ignores_status(self, api_client, order):
        api_client.patch(f"/api/admin/orders/{order.pk}/", {"status": "ready"}, format="json")

        order.refresh_from_db()
        assert order.status == OrderStatus.NEW


class TestAdminInvoices:
    def test_mark_paid(self, api_client, order):
        bakery.set_order_status(order, "approved")
        invoice = Invoice.objects.get()

        response = api_client.patch(
            f"/api/admin/invoices/{invoice.pk}/status/", {"status": "paid"}, format="json"
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data["status"] == "paid"
        assert response.data["paid_at"] is not None

    def test_list(self, api_client, order):
        bakery.set_order_status(order, "approved")

        response = api_client.get("/api/admin/invoices/")

        assert len(response.data) == 1
        assert len(response.data[0]["items"]) == 2


# ═══════════════════════════════════════════════════════════════════
# Console: catalog & pantry
# ═══════════════════════════════════════════════════════════════════


class TestAdminProducts:
    def test_create_with_bom(self, api_client, flour, salt):
        response = api_client.post(
            "/api/admin/products/",
            {
                "name": "Salt Bagel",
                "price": "3.75",
                "bom": [
                    {"ingredient": flour.pk, "quantity": "0.25"},
                    {"ingredient": salt.pk, "quantity": "0.03"},
                ],
            },
            format="json",
        )

        assert response.status_code == status.HTTP_201_CREATED
        bom = api_client.get(f"/api/admin/products/{response.data['id']}/bom/")
        assert [line["ingredient_name"] for line in bom.data] == ["Spelt Flour", "Sea Salt"]

    def test_negative_price(self, api_client):
        response = api_client.post(
            "/api/admin/products/", {"name": "Free Bagel", "price": "-1.00"}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_replace_bom(self, api_client, plain, sesame):
        response = api_client.put(
            f"/api/admin/products/{plain.pk}/bom/",
            [{"ingredient": sesame.pk, "quantity": "0.04"}],
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]["ingredient"] == sesame.pk
        assert plain.recipe_items.count() == 1

    def test_replace_bom_merges_repeated_ingredient(self, api_client, plain, flour):
        response = api_client.put(
            f"/api/admin/products/{plain.pk}/bom/",
            {
                "items": [
                    {"ingredient": flour.pk, "quantity": "0.2"},
                    {"ingredient": flour.pk, "quantity": "0.1"},
                ]
            },
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]["ingredient"] == flour.pk
        assert response.data[0]["quantity"] == "0.3000"
        assert plain.recipe_items.get().quantity == Decimal("0.3")

    def test_delete_removes_bom(self, api_client, plain):
        response = api_client.delete(f"/api/admin/products/{plain.pk}/")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Product.objects.filter(pk=plain.pk).exists()
        assert not RecipeItem.objects.filter(product_id=plain.pk).exists()

    def test_delete_ordered_product(self, api_client, order, plain):
        response = api_client.delete(f"/api/admin/products/{plain.pk}/")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["code"] == "PRODUCT_IN_USE"
        assert response.data["product_id"] == plain.pk
        assert Product.objects.filter(pk=plain.pk).exists()
        assert plain.recipe_items.count() == 2

    def test_delete_baked_product(self, api_client, plain, batch_date):
        bakery.create_batch(batch_date, "morning", items=[{"product": plain, "quantity": 48}])

        response = api_client.delete(f"/api/admin/products/{plain.pk}/")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["code"] == "PRODUCT_IN_USE"

    def test_admin_sees_inactive(self, api_client, plain):
        plain.is_active = False
        plain.save()

        response = api_client.get("/api/admin/products/")

        assert len(response.data) == 1


class TestAdminIngredients:
    def test_adjust(self, api_client, flour):
        response = api_client.post(
            f"/api/admin/ingredients/{flour.pk}/adjust/",
            {"quantity": "25", "adjustment_type": "receive", "reason": "Delivery"},
            format="json",
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data["ingredient"]["on_hand"] == "125.000"
        assert response.data["adjustment"]["adjusted_by"] == "baker"

    def test_adjust_zero(self, api_client, flour):
        response = api_client.post(
            f"/api/admin/ingredients/{flour.pk}/adjust/",
            {"quantity": "0", "adjustment_type": "receive"},
            format="json",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["code"] == "INVALID_QUANTITY"

    def test_seed(self, api_client):
        response = api_client.post("/api/admin/ingredients/seed/")

        assert response.status_code == status.HTTP_201_CREATED
        assert len(response.data["ingredients"]) == 10

    def test_seed_not_empty(self, api_client, flour):
        response = api_client.post("/api/admin/ingredients/seed/")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["code"] == "PANTRY_NOT_EMPTY"
        assert response.data["count"] == 1

    def test_adjustment_history(self, api_client, flour, salt):
        bakery.adjust_ingredient(flour, 5, "receive")
        bakery.adjust_ingredient(salt, 1, "receive")

        response = api_client.get("/api/admin/inventory-adjustments/", {"ingredient": flour.pk})

        assert [row["ingredient_name"] for row in response.data] == ["Spelt Flour"]

    def test_create_adjustment(self, api_client, salt):
        response = api_client.post(
            "/api/admin/inventory-adjustments/",
            {"ingredient": salt.pk, "quantity": "-1.5", "adjustment_type": "waste"},
            format="json",
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert Ingredient.objects.get(pk=salt.pk).on_hand == Decimal("8.5")


class TestAdminLocations:
    def test_inventory(self, api_client, plain):
        shop = Location.objects.create(name="Basement Shop", type=LocationType.BASEMENT)
        LocationInventory.adjust(shop, plain, 18)

        response = api_client.get(f"/api/admin/locations/{shop.pk}/inventory/")

        assert response.data == [
            {
                "id": LocationInventory.objects.get().pk,
                "product": plain.pk,
                "product_name": "Plain Bagel",
                "quantity": 18,
                "updated_at": response.data[0]["updated_at"],
            }
        ]


# ═══════════════════════════════════════════════════════════════════
# Console: production
# ═══════════════════════════════════════════════════════════════════


class TestAdminBatches:
    def test_create(self, api_client, plain, batch_date):
        response = api_client.post(
            "/api/admin/batches/",
            {
                "batch_date": batch_date.isoformat(),
                "shift": "morning",
                "items": [{"product": plain.pk, "quantity": 48}],
            },
            format="json",
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["status"] == "planned"
        assert response.data["items"][0]["product_name"] == "Plain Bagel"

    def test_list_paginated(self, api_client, batch_date):
        for shift in ("morning", "afternoon", "evening"):
            bakery.create_batch(batch_date, shift)

        response = api_client.get("/api/admin/batches/", {"page": 1, "limit": 2})

        assert len(response.data["batches"]) == 2
        assert response.data["pagination"] == {
            "page": 1,
            "limit": 2,
            "total": 3,
            "total_pages": 2,
        }

    def test_complete(self, api_client, plain, batch_date, flour):
        batch = bakery.create_batch(batch_date, "morning", items=[{"product": plain, "quantity": 48}])

        response = api_client.patch(
            f"/api/admin/batches/{batch.pk}/status/", {"status": "completed"}, format="json"
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data["status"] == "completed"
        assert FreezerStock.objects.get().quantity == 48
        assert ActivityLog.objects.get(action="batch.completed").actor == "baker"

    def test_complete_short(self, api_client, plain, batch_date):
        batch = bakery.create_batch(batch_date, "morning", items=[{"product": plain, "quantity": 800}])

        response = api_client.patch(
            f"/api/admin/batches/{batch.pk}/status/", {"status": "completed"}, format="json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["code"] == "INSUFFICIENT_INGREDIENTS"
        assert response.data["message"].startswith("Insufficient Spelt Flour: need 200.00")
        assert Batch.objects.get().status == "planned"

    def test_requirements(self, api_client, plain, batch_date):
        batch = bakery.create_batch(batch_date, "morning", items=[{"product": plain, "quantity": 48}])

        response = api_client.get(f"/api/admin/batches/{batch.pk}/requirements/")

        assert response.data["can_complete"] is True
        flour_line = next(r for r in response.data["requirements"] if r["name"] == "Spelt Flour")
        assert flour_line["required"] == "12.000"
        assert flour_line["used_in"] == ["Plain Bagel"]

    def test_bake_sheet(self, api_client, plain, batch_date):
        bakery.create_batch(batch_date, "morning", items=[{"product": plain, "quantity": 48}])

        response = api_client.get("/api/admin/bake-sheet/", {"date": batch_date.isoformat()})

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data["batches"]) == 1
        assert {r["name"] for r in response.data["requirements"]} == {"Spelt Flour", "Sea Salt"}

    def test_bake_sheet_bad_date(self, api_client):
        response = api_client.get("/api/admin/bake-sheet/", {"date": "tomorrow"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data["code"] == "INVALID_DATE"


class TestAdminFreezer:
    def test_stock_and_stats(self, api_client, plain):
        response = api_client.post(
            "/api/admin/freezer/", {"product": plain.pk, "quantity": 24}, format="json"
        )
        assert response.status_code == status.HTTP_201_CREATED

        stats = api_client.get("/api/admin/freezer/stats/")
        assert stats.data["total_items"] == 24
        assert stats.data["product_breakdown"][0]["product_name"] == "Plain Bagel"

    def test_stock_from_batch(self, api_client, plain, batch_date):
        batch = bakery.create_batch(batch_date, "morning")

        response = api_client.post(
            "/api/admin/freezer/",
            {"product": plain.pk, "quantity": 12, "batch": batch.pk},
            format="json",
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data["batch"] == batch.pk
        assert FreezerStock.objects.get().batch == batch

    def test_stock_unknown_batch(self, api_client, plain):
        response = api_client.post(
            "/api/admin/freezer/",
            {"product": plain.pk, "quantity": 12, "batch": 9999},
            format="json",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_correct_quantity(self, api_client, plain):
        stock = bakery.stock_freezer(plain, 24)

        response = api_client.patch(
            f"/api/admin/freezer/{stock.pk}/", {"quantity": 20}, format="json"
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data["quantity"] == 20

    def test_by_product(self, api_client, plain, sesame_bagel):
        bakery.stock_freezer(plain, 24)
        bakery.stock_freezer(sesame_bagel, 12)

        response = api_client.get(f"/api/admin/freezer/product/{plain.pk}/")

        assert [row["quantity"] for row in response.data] == [24]


# ═══════════════════════════════════════════════════════════════════
# Console: activity & stats
# ═══════════════════════════════════════════════════════════════════


class TestAdminActivity:
    def test_filter_by_entity(self, api_client, order, plain):
        bakery.set_order_status(order, "approved")
        bakery.stock_freezer(plain, 6)

        response = api_client.get(
            "/api/admin/activity/", {"entity_type": "order", "entity_id": order.pk}
        )

        assert [row["action"] for row in response.data] == ["order.approved"]

    def test_recent(self, api_client, plain):
        for _ in range(3):
            bakery.stock_freezer(plain, 1)

        response = api_client.get("/api/admin/activity/recent/")

        assert len(response.data) == 3


class TestAdminStats:
    def test_dashboard(self, api_client, order):
        response = api_client.get("/api/admin/stats/dashboard/")

        assert response.data["today_orders"] == 1
        assert response.data["pending_orders"] == 1

    def test_inventory(self, api_client, flour, sesame):
        sesame.adjust(Decimal("-4.5"), "waste")

        response = api_client.get("/api/admin/stats/inventory/")

        assert response.data["low_stock_count"] == 1
        assert response.data["low_stock_items"][0]["name"] == "Sesame Seeds"


class TestAdminMarketing:
    def test_create_and_list(self, api_client, plain):
        response = api_client.post(
            "/api/admin/marketing-assets/",
            {
                "name": "Morning rack",
                "asset_type": "hero",
                "usage_context": "homepage",
                "product": plain.pk,
            },
            format="json",
        )
        assert response.status_code == status.HTTP_201_CREATED

        response = api_client.get("/api/admin/marketing-assets/")
        assert [asset["name"] for asset in response.data] == ["Morning rack"]

    def test_rejects_unknown_type(self, api_client):
        response = api_client.post(
            "/api/admin/marketing-assets/",
            {"name": "Flyer", "asset_type": "billboard", "usage_context": "social"},
            format="json",
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "asset_type" in response.data
