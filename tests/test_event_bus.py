import asyncio

from storefront.core.event_bus import Event, EventBus, EventHandler, EventType
from storefront.api.orders.events.order_events import OrderUpdatedEvent


class RecordingHandler(EventHandler):
    def __init__(self):
        self.events = []

    def can_handle(self, event_type: EventType) -> bool:
        return event_type == EventType.ORDER_UPDATED

    async def handle(self, event: Event) -> None:
        self.events.append(event)


class FailingHandler(RecordingHandler):
    async def handle(self, event: Event) -> None:
        raise RuntimeError("mail server down")


def test_publish_reaches_subscribed_handlers():
    bus = EventBus()
    handler = RecordingHandler()
    bus.subscribe(EventType.ORDER_UPDATED, handler)

    event = OrderUpdatedEvent(data={"order_id": 1})
    asyncio.run(bus.publish(event))

    assert handler.events == [event]
    assert event.event_type == EventType.ORDER_UPDATED


def test_failing_handler_does_not_stop_the_others():
    bus = EventBus()
    ok = RecordingHandler()
    bus.subscribe(EventType.ORDER_UPDATED, FailingHandler())
    bus.subscribe(EventType.ORDER_UPDATED, ok)

    asyncio.run(bus.publish(OrderUpdatedEvent()))

    assert len(ok.events) == 1


def test_unsubscribed_handler_is_not_called():
    bus = EventBus()
    handler = RecordingHandler()
    bus.subscribe(EventType.ORDER_UPDATED, handler)
    bus.unsubscribe(EventType.ORDER_UPDATED, handler)

    asyncio.run(bus.publish(OrderUpdatedEvent()))

    assert handler.events == []
    assert bus.handlers_for(EventType.ORDER_UPDATED) == []
