from abc import ABC, abstractmethod
from typing import Dict, Any, List, Optional
from datetime import datetime
import asyncio
import logging
import uuid
from dataclasses import dataclass, field
from enum import Enum

from storefront.utils.database_utils import now_trimmed

logger = logging.getLogger(__name__)


class EventType(str, Enum):
    ORDER_UPDATED = "order_updated"


@dataclass
class Event:
    event_type: EventType
    data: Dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=now_trimmed)


class EventHandler(ABC):
    """Interface for event handlers"""

    @abstractmethod
    async def handle(self, event: Event) -> None:
        pass

    @abstractmethod
    def can_handle(self, event_type: EventType) -> bool:
        pass


class EventBus:
    """In-process event dispatcher"""

    def __init__(self):
        self._handlers: Dict[EventType, List[EventHandler]] = {}

    def subscribe(self, event_type: EventType, handler: EventHandler):
        self._handlers.setdefault(event_type, []).append(handler)
        logger.info(f"Handler registered for event: {event_type.value}")

    def unsubscribe(self, event_type: EventType, handler: EventHandler):
        if event_type in self._handlers:
            try:
                self._handlers[event_type].remove(handler)
                logger.info(f"Handler removed for event: {event_type.value}")
            except ValueError:
                logger.warning(f"Handler not found for event: {event_type.value}")

    def handlers_for(self, event_type: EventType) -> List[EventHandler]:
        return list(self._handlers.get(event_type, []))

    async def publish(self, event: Event):
        """Runs the registered handlers; handler errors are logged, never raised."""
        logger.info(f"Publishing event: {event.event_type.value} - {event.id}")
        await self._process_event(event)

    async def _process_event(self, event: Event):
        handlers = [h for h in self.handlers_for(event.event_type) if h.can_handle(event.event_type)]
        if not handlers:
            logger.debug(f"No handler registered for event: {event.event_type.value}")
            return

        await asyncio.gather(*(self._execute_handler(h, event) for h in handlers))

    async def _execute_handler(self, handler: EventHandler, event: Event):
        try:
            await handler.handle(event)
        except Exception as e:
            logger.error(f"Handler {handler.__class__.__name__} failed for event {event.id}: {e}")


# Global EventBus instance
event_bus = EventBus()


def get_event_bus() -> EventBus:
    return event_bus
