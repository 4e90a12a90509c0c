import asyncio
from datetime import timedelta
from decimal import Decimal

import pytest
from fastapi import HTTPException

from storefront.main import app
from storefront.api.cart.adapters.cart_adapter import CartAdapter
from storefront.api.orders.models import OrderModel
from storefront.api.orders.services.service_order import OrderService
from storefront.core.event_bus import Event, EventBus, EventHandler, EventType
from storefront.core.link_generator import LinkGenerator
from storefront.utils.database_utils import first_day_of_month, now_trimmed


class RecordingHandler(EventHandler):
    def __init__(self):
        self.events = []

    def can_handle(self, event_type: EventType) -> bool:
        return True

    async def handle(self, event: Event) -> None:
        self.events.append(event)


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest.fixture
def svc(db, shop, handler):
    bus = EventBus()
    bus.subscribe(EventType.ORDER_UPDATED, handler)
    return OrderService(db, event_bus=bus, link_generator=LinkGenerator(app, "https://shop.example.com"), locale=shop.cs)


def place(svc, db, shop, token="cart-token"):
    return asyncio.run(svc.place_order(CartAdapter(db, token, shop.cs.currency)))


def test_order_snapshots_cart_prices_with_delivery_services(db, shop, make_cart, svc):
    make_cart(items=[(shop.table, shop.table_variant, 2)], assembly=True, full_delivery=True)

    order = place(svc, db, shop)

    assert order.id is not None
    assert order.products_price == Decimal("20000")
    assert order.delivery_price == Decimal("500")
    assert order.assembly_price == Decimal("300")
    assert order.full_delivery_price == Decimal("200")
    assert order.total_delivery_price == Decimal("1000")
    assert order.total_price == Decimal("21000")
    assert order.deposit == Decimal("0")
    assert order.assembly is True and order.full_delivery is True


def test_delivery_services_not_requested_are_not_charged(db, shop, make_cart, svc):
    make_cart(items=[(shop.table, shop.table_variant, 1)])

    order = place(svc, db, shop)

    assert order.assembly_price == Decimal("0")
    assert order.full_delivery_price == Decimal("0")
    assert order.total_delivery_price == Decimal("500")
    assert order.total_price == Decimal("10500")


def test_order_header_fields(db, shop, make_cart, svc):
    make_cart()

    order = place(svc, db, shop)

    assert order.index == now_trimmed().strftime("%y%m") + "001"
    assert len(order.hash) == 32
    assert order.locale_id == shop.cs.id
    assert order.status_id == shop.status.id
    assert order.delivery_method_id == shop.courier.id
    assert order.payment_method_id == shop.transfer.id
    assert order.note == "Please call before delivery"
    assert order.email == "jana@example.com"


def test_second_order_gets_next_index(db, shop, make_cart, svc):
    make_cart(token="first")
    make_cart(token="second")

    first = place(svc, db, shop, token="first")
    second = place(svc, db, shop, token="second")

    assert int(second.index) == int(first.index) + 1
    assert first.hash != second.hash


def test_items_are_copied_and_gifts_cost_nothing(db, shop, make_cart, svc):
    make_cart(items=[
        {"product": shop.table, "variant": shop.table_variant, "quantity": 2, "surface_finish": shop.matte},
        {"product": shop.chair, "variant": shop.chair_variant, "quantity": 1, "is_gift": True},
    ])

    order = place(svc, db, shop)

    table, chair = order.items
    assert table.quantity == 2
    assert table.surface_finish_id == shop.matte.id
    assert table.single_price == Decimal("10000")
    assert table.total_price == Decimal("20000")
    assert chair.is_gift is True
    assert chair.single_price == Decimal("0")
    assert chair.total_price == Decimal("0")
    assert order.products_price == Decimal("20000")


def test_vouchers_are_recorded_and_counted(db, shop, make_cart, svc):
    make_cart(rules=[shop.sale])

    order = place(svc, db, shop)

    assert len(order.vouchers) == 1
    assert order.vouchers[0].cart_rule_id == shop.sale.id
    assert order.vouchers[0].discount == Decimal("1000")
    assert order.total_discount == Decimal("1000")
    assert order.total_price == Decimal("9500")
    assert shop.sale.use_counter == 1


def test_deposit_is_taken_from_statistics(db, shop, make_cart, svc):
    make_cart(payment_method="card_deposit")

    order = place(svc, db, shop)

    assert order.deposit == Decimal("3150")
    assert order.amount_to_pay == Decimal("3150")


def test_customer_order_stores_billing_and_delivery_address(db, shop, make_cart, svc):
    make_cart(customer=shop.customer, delivery_address=True)

    order = place(svc, db, shop)

    assert order.customer_id == shop.customer.id
    assert order.street == "Karlova 1"
    assert order.city == "Praha"
    assert order.delivery_street == "Dlouhá 5"
    assert order.delivery_city == "Brno"


def test_personal_pickup_skips_delivery_address(db, shop, make_cart, svc):
    make_cart(customer=shop.customer, delivery_address=True, delivery_method="pickup")

    order = place(svc, db, shop)

    assert order.street == "Karlova 1"
    assert order.delivery_street is None
    assert order.total_delivery_price == Decimal("0")


def test_guest_order_keeps_contact_but_no_addresses(db, shop, make_cart, svc):
    make_cart(delivery_address=True)

    order = place(svc, db, shop)

    assert order.customer_id is None
    assert order.email == "jana@example.com"
    assert order.street is None
    assert order.delivery_street is None


def test_order_updated_event_is_dispatched(db, shop, make_cart, svc, handler):
    make_cart()

    order = place(svc, db, shop)

    assert len(handler.events) == 1
    event = handler.events[0]
    assert event.event_type == EventType.ORDER_UPDATED
    assert event.order is order
    assert event.data["index"] == order.index


@pytest.mark.parametrize(
    "cart_kwargs",
    [
        {"items": []},
        {"delivery_method": None},
        {"payment_method": None},
    ],
)
def test_incomplete_cart_is_rejected(db, shop, make_cart, svc, cart_kwargs):
    make_cart(**cart_kwargs)

    with pytest.raises(HTTPException) as exc:
        place(svc, db, shop)

    assert exc.value.status_code == 400
    assert db.query(OrderModel).count() == 0


def test_update_order_of_unknown_order_is_404(svc):
    with pytest.raises(HTTPException) as exc:
        asyncio.run(svc.update_order(999))
    assert exc.value.status_code == 404


def test_index_collision_is_409_and_nothing_is_stored(db, shop, make_cart, svc, handler, make_order):
    # Same index left over from last month, so the monthly lookup does not see it
    last_month = first_day_of_month(now_trimmed()) - timedelta(days=1)
    make_order(svc.generate_index(), last_month)
    make_cart(rules=[shop.sale])

    with pytest.raises(HTTPException) as exc:
        place(svc, db, shop)

    assert exc.value.status_code == 409
    assert db.query(OrderModel).count() == 1
    db.refresh(shop.sale)
    assert not shop.sale.use_counter
    assert handler.events == []
