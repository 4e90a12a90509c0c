from dataclasses import dataclass, field
from typing import Any, Optional

from storefront.core.event_bus import Event, EventType, EventHandler
from storefront.utils.logger import logger


@dataclass
class OrderUpdatedEvent(Event):
    """Dispatched whenever an order was created or changed."""

    event_type: EventType = EventType.ORDER_UPDATED
    order: Optional[Any] = field(default=None, repr=False)  # OrderModel

    @classmethod
    def for_order(cls, order) -> "OrderUpdatedEvent":
        return cls(
            order=order,
            data={
                "order_id": order.id,
                "index": order.index,
                "total_price": str(order.total_price),
            },
        )


class OrderLogHandler(EventHandler):
    """Writes every order update to the application log."""

    def can_handle(self, event_type: EventType) -> bool:
        return event_type == EventType.ORDER_UPDATED

    async def handle(self, event: Event) -> None:
        logger.info(
            f"[Orders] updated order_id={event.data.get('order_id')} "
            f"index={event.data.get('index')} total={event.data.get('total_price')}"
        )
