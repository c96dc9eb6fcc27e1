"""
Shared fixtures for the Bakehouse test suite.
"""

from datetime import date, timedelta
from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from bakehouse.conf import get_payment_backend, reset_payment_backend
from bakehouse.models import Ingredient, Product, RecipeItem

User = get_user_model()


@pytest.fixture(autouse=True)
def payment_backend():
    """Fresh in-memory payment backend for every test."""
    reset_payment_backend()
    yield get_payment_backend()
    reset_payment_backend()


# ═══════════════════════════════════════════════════════════════════
# Pantry & catalog
# ═══════════════════════════════════════════════════════════════════


@pytest.fixture
def flour(db):
    return Ingredient.objects.create(
        name="Spelt Flour",
        unit="lb",
        on_hand=Decimal("100"),
        reorder_threshold=Decimal("20"),
        cost_per_unit=Decimal("1.50"),
    )


@pytest.fixture
def salt(db):
    return Ingredient.objects.create(
        name="Sea Salt",
        unit="lb",
        on_hand=Decimal("10"),
        reorder_threshold=Decimal("2"),
        cost_per_unit=Decimal("0.80"),
    )


@pytest.fixture
def sesame(db):
    return Ingredient.objects.create(
        name="Sesame Seeds",
        unit="lb",
        on_hand=Decimal("5"),
        reorder_threshold=Decimal("1"),
    )


@pytest.fixture
def plain(db, flour, salt):
    """Plain bagel: 0.25 lb flour + 0.01 lb salt per unit."""
    product = Product.objects.create(name="Plain Bagel", price=Decimal("3.50"))
    RecipeItem.objects.create(product=product, ingredient=flour, quantity=Decimal("0.25"))
    RecipeItem.objects.create(product=product, ingredient=salt, quantity=Decimal("0.01"))
    return product


@pytest.fixture
def sesame_bagel(db, flour, sesame):
    """Sesame bagel: 0.25 lb flour + 0.05 lb sesame per unit."""
    product = Product.objects.create(name="Sesame Bagel", price=Decimal("4.25"))
    RecipeItem.objects.create(product=product, ingredient=flour, quantity=Decimal("0.25"))
    RecipeItem.objects.create(product=product, ingredient=sesame, quantity=Decimal("0.05"))
    return product


@pytest.fixture
def batch_date():
    return date.today() + timedelta(days=1)


# ═══════════════════════════════════════════════════════════════════
# Orders
# ═══════════════════════════════════════════════════════════════════


@pytest.fixture
def order_data(plain, sesame_bagel, batch_date):
    return {
        "customer_name": "Ada Baker",
        "customer_email": "ada@example.com",
        "customer_phone": "555-0100",
        "delivery_address": "12 Mill Street",
        "delivery_city": "Portland",
        "delivery_state": "ME",
        "delivery_zip": "04101",
        "fulfillment_date": batch_date,
        "fulfillment_window": "morning",
        "items": [
            {"product_id": plain.pk, "quantity": 2},
            {"product_id": sesame_bagel.pk, "quantity": 1},
        ],
    }


@pytest.fixture
def order(order_data):
    from bakehouse.service import bakery

    return bakery.place_order(order_data).order


# ═══════════════════════════════════════════════════════════════════
# Users
# ═══════════════════════════════════════════════════════════════════


@pytest.fixture
def staff_user(db):
    return User.objects.create_user(
        username="baker", password="test123", is_staff=True
    )


@pytest.fixture
def api_client(staff_user):
    client = APIClient()
    client.force_authenticate(user=staff_user)
    return client


@pytest.fixture
def anon_client(db):
    return APIClient()
