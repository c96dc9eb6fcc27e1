"""
Tests for the pantry, bill of materials and location inventory.
"""

from decimal import Decimal
from io import StringIO

import pytest
from django.core.management import CommandError, call_command

from bakehouse import BakehouseError, bakery
from bakehouse.models import (
    AdjustmentType,
    Ingredient,
    InventoryAdjustment,
    Location,
    LocationInventory,
    LocationType,
)
from bakehouse.services import BASIC_INGREDIENTS

pytestmark = pytest.mark.django_db


class TestAdjustIngredient:
    def test_receive_adds_stock(self, flour):
        adjustment = bakery.adjust_ingredient(
            flour, 50, AdjustmentType.RECEIVE, reason="Weekly delivery", adjusted_by="baker"
        )

        flour.refresh_from_db()
        assert flour.on_hand == Decimal("150")
        assert adjustment.previous_quantity == Decimal("100")
        assert adjustment.new_quantity == Decimal("150")
        assert adjustment.reason == "Weekly delivery"
        assert adjustment.adjusted_by == "baker"

    def test_waste_removes_stock(self, flour):
        bakery.adjust_ingredient(flour, "-2.5", AdjustmentType.WASTE, reason="Wet bag")

        flour.refresh_from_db()
        assert flour.on_hand == Decimal("97.5")
        assert InventoryAdjustment.objects.get().quantity == Decimal("-2.5")

    def test_updates_instance_in_place(self, salt):
        salt.adjust(Decimal("1"), AdjustmentType.CORRECTION)

        assert salt.on_hand == Decimal("11")

    def test_every_change_is_recorded(self, flour):
        bakery.adjust_ingredient(flour, 10, "receive")
        bakery.adjust_ingredient(flour, -4, "waste")

        assert flour.adjustments.count() == 2
        latest = flour.adjustments.first()
        assert latest.adjustment_type == AdjustmentType.WASTE
        assert latest.new_quantity == Decimal("106")

    def test_unknown_type_rejected(self, flour):
        with pytest.raises(BakehouseError) as exc:
            bakery.adjust_ingredient(flour, 1, "theft")

        assert exc.value.code == "INVALID_STATUS"
        assert not InventoryAdjustment.objects.exists()

    def test_zero_rejected(self, flour):
        with pytest.raises(BakehouseError) as exc:
            bakery.adjust_ingredient(flour, 0, "receive")

        assert exc.value.code == "INVALID_QUANTITY"

    def test_history_is_kept(self, flour):
        flour.cost_per_unit = Decimal("1.75")
        flour.save()

        assert flour.history.count() == 2


class TestLowStock:
    def test_at_threshold_is_low(self, flour):
        flour.on_hand = Decimal("20")

        assert flour.is_low_stock

    def test_above_threshold_is_not_low(self, flour):
        assert not flour.is_low_stock

    def test_stock_value(self, flour):
        assert flour.stock_value == Decimal("150")


class TestSeedPantry:
    def test_seeds_empty_pantry(self):
        created = bakery.seed_pantry()

        assert len(created) == len(BASIC_INGREDIENTS) == 10
        assert Ingredient.objects.get(name="Spelt Flour").on_hand == Decimal("100")
        assert Ingredient.objects.get(name="Bagel Bags").unit == "count"

    def test_refuses_when_not_empty(self, flour):
        with pytest.raises(BakehouseError) as exc:
            bakery.seed_pantry()

        assert exc.value.code == "PANTRY_NOT_EMPTY"
        assert exc.value.details["count"] == 1
        assert Ingredient.objects.count() == 1

    def test_management_command(self):
        out = StringIO()
        call_command("seed_pantry", stdout=out)

        assert "Seeded 10 ingredients" in out.getvalue()
        assert Ingredient.objects.count() == 10

    def test_management_command_on_stocked_pantry(self, flour):
        with pytest.raises(CommandError):
            call_command("seed_pantry")


class TestBillOfMaterials:
    def test_replace_bom(self, plain, flour, sesame):
        lines = plain.replace_bom(
            [
                {"ingredient": flour, "quantity": "0.30"},
                {"ingredient": sesame, "quantity": "0.02"},
            ]
        )

        assert len(lines) == 2
        bom = {item.ingredient.name: item.quantity for item in plain.recipe_items.all()}
        assert bom == {"Spelt Flour": Decimal("0.3"), "Sesame Seeds": Decimal("0.02")}

    def test_skips_empty_lines(self, plain, flour):
        plain.replace_bom(
            [
                {"ingredient": flour, "quantity": "0.25"},
                {"ingredient": None, "quantity": "1"},
                {"ingredient": flour, "quantity": "0"},
            ]
        )

        assert plain.recipe_items.count() == 1

    def test_repeated_ingredient_is_summed(self, plain, flour, salt):
        lines = plain.replace_bom(
            [
                {"ingredient": flour, "quantity": "0.20"},
                {"ingredient": salt, "quantity": "0.01"},
                {"ingredient": flour, "quantity": "0.05"},
            ]
        )

        assert [line.ingredient for line in lines] == [flour, salt]
        assert plain.recipe_items.get(ingredient=flour).quantity == Decimal("0.25")

    def test_empty_list_clears_bom(self, plain):
        plain.replace_bom([])

        assert not plain.recipe_items.exists()


class TestLocationInventory:
    @pytest.fixture
    def shop(self, db):
        return Location.objects.create(name="Basement Shop", type=LocationType.BASEMENT)

    def test_creates_row(self, shop, plain):
        row = LocationInventory.adjust(shop, plain, 24)

        assert row.quantity == 24

    def test_adds_to_existing_row(self, shop, plain):
        LocationInventory.adjust(shop, plain, 24)
        row = LocationInventory.adjust(shop, plain, -6)

        assert row.quantity == 18
        assert LocationInventory.objects.count() == 1
