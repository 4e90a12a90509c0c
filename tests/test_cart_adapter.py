from decimal import Decimal

import pytest
from fastapi import HTTPException

from storefront.api.cart.adapters.cart_adapter import CartAdapter


def test_statistics_with_optional_delivery_services(db, shop, make_cart):
    make_cart(items=[(shop.table, shop.table_variant, 2)], assembly=True)
    cart = CartAdapter(db, "cart-token", shop.czk)

    stats = cart.calculate_statistics()

    assert stats.products_price == Decimal("20000.00")
    assert stats.delivery_price == Decimal("500.00")
    # Always quoted, only charged when requested
    assert stats.assembly_price == Decimal("300.00")
    assert stats.full_delivery_price == Decimal("200.00")
    assert stats.total_price == Decimal("20800.00")
    assert stats.deposit == Decimal("0.00")


def test_gifts_are_free(db, shop, make_cart):
    make_cart(items=[
        (shop.table, shop.table_variant, 1),
        {"product": shop.chair, "variant": shop.chair_variant, "quantity": 1, "is_gift": True},
    ])
    stats = CartAdapter(db, "cart-token", shop.czk).calculate_statistics()

    assert stats.products_price == Decimal("10000.00")


def test_rules_are_applied_one_after_another(db, shop, make_cart):
    make_cart(rules=[shop.sale, shop.ten_percent])
    stats = CartAdapter(db, "cart-token", shop.czk).calculate_statistics()

    # 1000 fixed, then 10 % of the remaining 9000
    assert [r.discount for r in stats.rules] == [Decimal("1000.00"), Decimal("900.00")]
    assert stats.total_discount == Decimal("1900.00")
    assert stats.total_price == Decimal("8600.00")


def test_exhausted_rule_is_dropped_from_saved_cart(db, shop, make_cart):
    shop.sale.max_uses = 1
    shop.sale.use_counter = 1
    cart_record = make_cart(rules=[shop.sale])

    stats = CartAdapter(db, "cart-token", shop.czk).calculate_statistics(save=True)

    assert stats.rules == []
    assert stats.total_discount == Decimal("0.00")
    assert cart_record.rules == []


def test_total_never_goes_below_zero(db, shop, make_cart):
    shop.sale.value = Decimal("50000")
    make_cart(rules=[shop.sale], delivery_method="pickup")

    stats = CartAdapter(db, "cart-token", shop.czk).calculate_statistics()

    assert stats.total_discount == Decimal("10000.00")
    assert stats.total_price == Decimal("0.00")


def test_deposit_is_share_of_total(db, shop, make_cart):
    make_cart(payment_method="card_deposit")

    stats = CartAdapter(db, "cart-token", shop.czk).calculate_statistics()

    assert stats.total_price == Decimal("10500.00")
    assert stats.deposit == Decimal("3150.00")


def test_items_carry_price_in_requested_currency(db, shop, make_cart):
    make_cart(items=[(shop.chair, shop.chair_variant, 3)])

    items = CartAdapter(db, "cart-token", shop.eur).get_items()

    assert len(items) == 1
    assert items[0].quantity == 3
    assert items[0].get_price(shop.eur) == Decimal("80.00")
    with pytest.raises(ValueError):
        items[0].get_price(shop.czk)


def test_unknown_token_is_404(db, shop):
    with pytest.raises(HTTPException) as exc:
        CartAdapter(db, "nope", shop.czk).init()
    assert exc.value.status_code == 404
