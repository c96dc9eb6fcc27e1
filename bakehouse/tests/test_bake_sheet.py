"""
Tests for the printable bake sheet page and its template filter.
"""

from decimal import Decimal

import pytest
from django.test import Client

from bakehouse import bakery
from bakehouse.templatetags.bakehouse_filters import quantity


class TestQuantityFilter:
    def test_formats_two_decimals(self):
        assert quantity(Decimal("12")) == "12.00"

    def test_thousands_separator(self):
        assert quantity(Decimal("1234.5")) == "1,234.50"

    def test_none(self):
        assert quantity(None) == "0.00"

    def test_not_a_number(self):
        assert quantity("lots") == "lots"


@pytest.mark.django_db
class TestBakeSheetPage:
    @pytest.fixture
    def client(self, staff_user):
        client = Client()
        client.force_login(staff_user)
        return client

    def test_lists_batches_and_requirements(self, client, plain, batch_date):
        bakery.create_batch(batch_date, "morning", items=[{"product": plain, "quantity": 48}])

        response = client.get("/bakehouse/bake-sheet/", {"date": batch_date.isoformat()})

        assert response.status_code == 200
        content = response.content.decode()
        assert "Plain Bagel" in content
        assert "Spelt Flour" in content
        assert "12.00 lb" in content
        assert "Some ingredients are short." not in content

    def test_flags_shortages(self, client, plain, batch_date):
        bakery.create_batch(batch_date, "morning", items=[{"product": plain, "quantity": 800}])

        response = client.get("/bakehouse/bake-sheet/", {"date": batch_date.isoformat()})

        assert response.context["has_shortages"] is True
        assert "Some ingredients are short." in response.content.decode()

    def test_empty_day(self, client):
        response = client.get("/bakehouse/bake-sheet/", {"date": "2020-01-01"})

        assert "No batches planned for this day." in response.content.decode()

    def test_requires_staff(self, db):
        response = Client().get("/bakehouse/bake-sheet/")

        assert response.status_code == 302
