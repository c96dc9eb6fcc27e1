"""
Tests for freezer stock (bakehouse.services.freezer).
"""

import pytest

from bakehouse import BakehouseError, bakery
from bakehouse.models import ActivityLog, FreezerStock

pytestmark = pytest.mark.django_db


class TestStockFreezer:
    def test_manual_entry(self, plain):
        stock = bakery.stock_freezer(plain, 30, notes="Recount", actor="baker")

        assert stock.quantity == 30
        assert stock.batch is None
        assert stock.notes == "Recount"

    def test_linked_to_batch(self, plain, batch_date):
        batch = bakery.create_batch(batch_date, "morning")

        stock = bakery.stock_freezer(plain, 12, batch=batch)

        assert stock.batch == batch
        assert list(batch.freezer_stock.all()) == [stock]

    def test_logs_entry(self, plain):
        stock = bakery.stock_freezer(plain, 12)

        entry = ActivityLog.objects.get(action="freezer.stocked")
        assert entry.entity_type == "freezer_stock"
        assert entry.entity_id == str(stock.pk)
        assert entry.details == {"product_id": plain.pk, "quantity": 12}
        assert entry.actor == "admin"

    def test_zero_rejected(self, plain):
        with pytest.raises(BakehouseError) as exc:
            bakery.stock_freezer(plain, 0)

        assert exc.value.code == "INVALID_QUANTITY"
        assert not FreezerStock.objects.exists()


class TestSetQuantity:
    def test_correction(self, plain):
        stock = bakery.stock_freezer(plain, 30)

        bakery.set_freezer_quantity(stock, 25)

        stock.refresh_from_db()
        assert stock.quantity == 25

    def test_zero_is_allowed(self, plain):
        stock = bakery.stock_freezer(plain, 30)

        bakery.set_freezer_quantity(stock, 0)

        stock.refresh_from_db()
        assert stock.quantity == 0

    def test_negative_rejected(self, plain):
        stock = bakery.stock_freezer(plain, 30)

        with pytest.raises(BakehouseError) as exc:
            bakery.set_freezer_quantity(stock, -1)

        assert exc.value.code == "INVALID_QUANTITY"


class TestFreezerStats:
    def test_breakdown_by_product(self, plain, sesame_bagel):
        bakery.stock_freezer(plain, 48)
        bakery.stock_freezer(plain, 24)
        bakery.stock_freezer(sesame_bagel, 12)

        stats = bakery.freezer_stats()

        assert stats["total_items"] == 84
        assert stats["unique_products"] == 2
        assert stats["product_breakdown"] == [
            {
                "product_id": plain.pk,
                "product_name": "Plain Bagel",
                "total_quantity": 72,
                "batches": 2,
            },
            {
                "product_id": sesame_bagel.pk,
                "product_name": "Sesame Bagel",
                "total_quantity": 12,
                "batches": 1,
            },
        ]

    def test_empty_freezer(self):
        assert bakery.freezer_stats() == {
            "total_items": 0,
            "unique_products": 0,
            "product_breakdown": [],
        }
