from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from storefront.api.orders.services import service_order
from storefront.api.orders.services.service_order import OrderService
from storefront.core.event_bus import EventBus

PRAGUE = ZoneInfo("Europe/Prague")
NOW = datetime(2026, 10, 15, 10, 30, tzinfo=PRAGUE)


@pytest.fixture
def svc(db, shop, monkeypatch):
    monkeypatch.setattr(service_order, "now_trimmed", lambda: NOW)
    return OrderService(db, event_bus=EventBus(), link_generator=None, locale=shop.cs)


def test_first_order_of_the_month_starts_at_001(svc):
    assert svc.generate_index() == "2610001"


def test_index_follows_highest_index_of_the_month(svc, make_order):
    make_order("2610001", datetime(2026, 10, 2, 8, 0, tzinfo=PRAGUE))
    make_order("2610007", datetime(2026, 10, 3, 8, 0, tzinfo=PRAGUE))
    make_order("2610004", datetime(2026, 10, 14, 8, 0, tzinfo=PRAGUE))

    assert svc.generate_index() == "2610008"


def test_orders_from_previous_month_are_ignored(svc, make_order):
    make_order("2609042", datetime(2026, 9, 30, 23, 59, 59, tzinfo=PRAGUE))

    assert svc.generate_index() == "2610001"


def test_order_created_at_midnight_of_the_first_counts(svc, make_order):
    make_order("2610001", datetime(2026, 10, 1, 0, 0, 0, tzinfo=PRAGUE))

    assert svc.generate_index() == "2610002"


def test_sequence_keeps_growing_past_999(svc, make_order):
    make_order("2610999", datetime(2026, 10, 10, 8, 0, tzinfo=PRAGUE))
    assert svc.generate_index() == "26101000"

    make_order("26101000", datetime(2026, 10, 11, 8, 0, tzinfo=PRAGUE))
    assert svc.generate_index() == "26101001"
