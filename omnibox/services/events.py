"""Notification event bus."""

import inspect
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Union

from ..utils.logger import get_app_logger
from ..utils.timestamps import format_timestamp, utc_now


@dataclass
class Event:
    """A notification published on the bus."""

    type: str
    payload: Dict[str, Any] = field(default_factory=dict)
    created_at: str = field(default_factory=lambda: format_timestamp(utc_now()))

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "payload": self.payload, "createdAt": self.created_at}


Subscriber = Callable[[Event], Union[None, Awaitable[None]]]


class EventBus:
    """
    Explicit publish/subscribe registry.

    Components receive the bus instance they publish to; there is no
    module-level bus. Subscribers may be plain or async callables.
    """

    def __init__(self):
        self._subscribers: List[Subscriber] = []
        self.logger = get_app_logger("events")

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Add a subscriber.

        Args:
            callback: Called with every published Event

        Returns:
            A function that removes the subscriber again
        """
        self._subscribers.append(callback)
        return lambda: self.unsubscribe(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        """Remove a subscriber; unknown callbacks are ignored."""
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    async def publish(self, event_type: str, payload: Dict[str, Any] = None) -> Event:
        """
        Deliver an event to every current subscriber.

        A failing subscriber is logged and skipped so it cannot affect the
        publisher or the other subscribers.

        Args:
            event_type: Event name, e.g. "message.sent"
            payload: JSON-serializable event data

        Returns:
            The published Event
        """
        event = Event(type=event_type, payload=payload or {})
        for callback in list(self._subscribers):
            try:
                result = callback(event)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                self.logger.warning(f"Event subscriber failed on {event_type}: {e}")
        return event
