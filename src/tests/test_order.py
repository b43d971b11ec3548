"""Tests for the order bill builder."""

import pytest

from errors import RecordError
from services.order import LineItem, apply_coupon, build_order, delivery_fee_for


def biryani(qty=1, addons=None):
    return {"name": "Biryani", "price": 300, "qty": qty, "addons": addons or ["Raita:30"]}


class TestBuildOrder:
    """Tests for build_order()."""

    def test_flat100(self):
        bill = build_order([biryani()], "FLAT100")

        assert bill.items == [
            LineItem(name="Biryani", qty=1, base_price=300, addon_total=30, item_total=330)
        ]
        assert bill.subtotal == 330
        assert bill.delivery_fee == 30
        assert bill.gst == 16.5
        assert bill.discount == 100
        assert bill.grand_total == 276.5
        assert bill.coupon == "FLAT100"

    def test_first50_is_capped(self):
        bill = build_order([{"name": "Pizza", "price": 500, "qty": 2, "addons": []}], "FIRST50")

        assert bill.subtotal == 1000
        assert bill.delivery_fee == 0
        assert bill.gst == 50
        assert bill.discount == 150
        assert bill.grand_total == 900

    def test_first50_below_cap(self):
        bill = build_order([{"name": "Chai", "price": 100, "qty": 2}], "first50")

        assert bill.discount == 100
        assert bill.coupon == "FIRST50"
        assert bill.grand_total == 140

    def test_freeship_moves_fee_into_discount(self):
        bill = build_order([{"name": "Dosa", "price": 120, "qty": 5}], "FreeShip")

        assert bill.subtotal == 600
        assert bill.discount == 15
        assert bill.delivery_fee == 0
        assert bill.grand_total == 615

    @pytest.mark.parametrize("coupon", [None, "", "BOGO", 50, ["FLAT100"]])
    def test_unknown_coupon_gives_no_discount(self, coupon):
        bill = build_order([biryani()], coupon)

        assert bill.discount == 0
        assert bill.coupon is None
        assert bill.grand_total == 376.5

    def test_drops_zero_and_negative_quantities(self):
        bill = build_order(
            [
                biryani(),
                {"name": "Naan", "price": 40, "qty": 0},
                {"name": "Lassi", "price": 80, "qty": -2},
            ]
        )

        assert [item.name for item in bill.items] == ["Biryani"]
        assert bill.subtotal == 330

    def test_negative_addon_sum_is_reported_but_not_applied(self):
        """addon_total keeps the raw sum; item_total ignores a negative one."""
        bill = build_order([biryani(qty=2, addons=["Raita:30", "No onion:-50"])])

        line = bill.items[0]
        assert line.addon_total == -20
        assert line.item_total == 600
        assert bill.subtotal == 600

    def test_multiple_addons_and_quantities(self):
        bill = build_order(
            [{"name": "Butter Paneer", "price": 350, "qty": 2, "addons": ["Extra Butter:50", "Naan:40"]}]
        )

        assert bill.items[0].addon_total == 90
        assert bill.items[0].item_total == 880
        assert bill.delivery_fee == 15
        assert bill.gst == 44
        assert bill.grand_total == 939

    def test_all_items_dropped_still_bills_delivery(self):
        bill = build_order([{"name": "Naan", "price": 40, "qty": 0}])

        assert bill.items == []
        assert bill.subtotal == 0
        assert bill.delivery_fee == 30
        assert bill.grand_total == 30

    def test_grand_total_never_negative(self):
        bill = build_order([{"name": "Toffee", "price": 10, "qty": 1}], "FLAT100")

        assert bill.discount == 100
        assert bill.grand_total == 0

    @pytest.mark.parametrize("cart", [None, [], "Biryani", {"name": "Biryani"}])
    def test_invalid_cart_returns_none(self, cart):
        assert build_order(cart, "FLAT100") is None

    def test_addon_without_price_is_free(self):
        bill = build_order([biryani(addons=["Raita:", "Salan:20"])])

        assert bill.items[0].addon_total == 20
        assert bill.subtotal == 320

    def test_deterministic(self):
        """The same cart and coupon always give an equal bill."""
        cart = [biryani(qty=2), {"name": "Naan", "price": 40, "qty": 3, "addons": ["Butter:10"]}]

        assert build_order(cart, "FIRST50") == build_order(cart, "FIRST50")

    def test_malformed_addon_raises(self):
        with pytest.raises(RecordError):
            build_order([biryani(addons=["Raita"])])


class TestDeliveryFee:
    @pytest.mark.parametrize(
        "subtotal,fee", [(0, 30), (499.99, 30), (500, 15), (999, 15), (1000, 0), (5000, 0)]
    )
    def test_tiers(self, subtotal, fee):
        assert delivery_fee_for(subtotal) == fee


class TestApplyCoupon:
    def test_freeship_with_free_delivery_gives_zero_discount(self):
        assert apply_coupon("FREESHIP", 1200, 0) == ("FREESHIP", 0, 0)

    def test_flat100(self):
        assert apply_coupon("flat100", 250, 30) == ("FLAT100", 100, 30)
