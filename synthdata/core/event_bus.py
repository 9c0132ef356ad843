#!/usr/bin/env python3
"""
Event Bus - queue-backed event dispatcher for the page's main thread.

Components emit events as they change state; handlers run when the owner
drains the queue with process_events(). Nothing here is thread-safe, all
emission and processing happens on one thread.
"""

import time
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from synthdata.core.events import EventType
from synthdata.core.logging_utils import setup_logger

__all__ = ["EventBus", "EventType", "Event"]

logger = setup_logger("event_bus")

# Only the latest event of these types matters
COALESCED_EVENTS = {
    EventType.HASH_CHANGED,
}


@dataclass
class Event:
    """Event with type, payload, and metadata."""

    type: EventType
    payload: dict[str, Any]
    timestamp: float
    source: str = "unknown"

    def __post_init__(self):
        if self.timestamp == 0:
            self.timestamp = time.time()


class EventBus:
    """Bounded event queue with per-type subscribers.

    Features:
    - Bounded queue, oldest events dropped on overflow
    - Event coalescing for hash changes
    - Drop counter for overload detection
    """

    def __init__(self, max_queue_size: int = 1000):
        """Initialize event bus.

        Args:
            max_queue_size: Maximum events held before dropping
        """
        self._max_queue_size = max_queue_size
        self._queue: deque[Event] = deque()
        self._subscribers: dict[EventType, list[Callable[[Event], None]]] = {}
        self._running = True

        self._coalesced_events: dict[EventType, Event] = {}

        # Metrics
        self._events_emitted = 0
        self._events_processed = 0
        self._events_dropped = 0
        self._events_coalesced = 0

    def emit(
        self,
        event_type: EventType,
        payload: dict[str, Any] | None = None,
        source: str = "unknown",
    ):
        """Emit an event.

        Args:
            event_type: Type of event
            payload: Event data
            source: Source identifier (e.g., 'route_state', 'binder')
        """
        if not self._running:
            return

        event = Event(type=event_type, payload=payload or {}, timestamp=time.time(), source=source)

        if event_type in COALESCED_EVENTS:
            self._coalesced_events[event_type] = event
            self._events_coalesced += 1
            return

        if len(self._queue) >= self._max_queue_size:
            dropped = self._queue.popleft()
            self._events_dropped += 1
            logger.warning(f"Event queue full, dropped {dropped.type}. Total drops: {self._events_dropped}")

        self._queue.append(event)
        self._events_emitted += 1

    def subscribe(
        self, event_type: EventType, handler: Callable[[Event], None]
    ) -> tuple[EventType, Callable]:
        """Subscribe to an event type.

        Args:
            event_type: Type of event to listen for
            handler: Callback function(event)

        Returns:
            Subscription token (event_type, handler) for unsubscription
        """
        self._subscribers.setdefault(event_type, []).append(handler)
        return (event_type, handler)

    def unsubscribe(self, event_type: EventType, handler: Callable[[Event], None]):
        """Unsubscribe from an event type.

        Args:
            event_type: Type of event
            handler: Handler to remove
        """
        handlers = self._subscribers.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def unsubscribe_token(self, token: tuple[EventType, Callable]):
        """Unsubscribe using a subscription token.

        Args:
            token: Subscription token returned from subscribe()
        """
        event_type, handler = token
        self.unsubscribe(event_type, handler)

    def process_events(self, max_events: int = 100) -> int:
        """Dispatch pending events.

        Args:
            max_events: Maximum queued events to process per call

        Returns:
            Number of events processed
        """
        processed = 0

        coalesced = list(self._coalesced_events.values())
        self._coalesced_events.clear()

        for event in coalesced:
            self._dispatch(event)
            processed += 1
            self._events_processed += 1

        while processed < max_events and self._queue:
            event = self._queue.popleft()
            self._dispatch(event)
            processed += 1
            self._events_processed += 1

        return processed

    def _dispatch(self, event: Event):
        """Dispatch event to subscribers.

        Args:
            event: Event to dispatch
        """
        for handler in list(self._subscribers.get(event.type, [])):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in event handler for {event.type}: {e}")

    def get_metrics(self) -> dict[str, int]:
        """Get event bus metrics.

        Returns:
            Dictionary of metrics
        """
        return {
            "events_emitted": self._events_emitted,
            "events_processed": self._events_processed,
            "events_dropped": self._events_dropped,
            "events_coalesced": self._events_coalesced,
            "queue_size": len(self._queue),
            "coalesced_pending": len(self._coalesced_events),
        }

    def shutdown(self):
        """Shutdown event bus."""
        self._running = False
        self._queue.clear()
        self._coalesced_events.clear()
