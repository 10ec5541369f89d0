"""Event system for decoupled game event handling.

This module provides a publish/subscribe event system that lets systems announce
what happened (a doorway opened, a scene started) without knowing who listens.

The event system consists of:
- Event: Base class for all game events
- EventBus: Central hub for subscribing to and publishing events

Concrete events live next to the system that publishes them, for example
passage.systems.doorway.events and passage.systems.scene.events.

Example usage:
    event_bus = EventBus()

    def handle_opened(event: DoorwayOpenedEvent):
        print(f"Door {event.doorway_id} opened in {event.scene_id}")

    event_bus.subscribe(DoorwayOpenedEvent, handle_opened)
    event_bus.publish(DoorwayOpenedEvent("startRoom", "startRoom_0", "north"))
    event_bus.clear()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class Event:
    """Base event class."""


class EventBus:
    """Central event bus for publish/subscribe event handling.

    Publishers emit events without knowing who (if anyone) will handle them, and
    subscribers listen for event types without knowing who publishes them.

    Thread safety: This implementation is NOT thread-safe. All subscribe, publish, and
    unsubscribe calls should happen on the main game thread.
    """

    def __init__(self) -> None:
        """Initialize the event bus with no registered listeners."""
        self.listeners: dict[type[Event], list[Callable[[Event], None]]] = {}

    def subscribe(self, event_type: type[Event], handler: Callable[[Event], None]) -> None:
        """Subscribe a handler to an event type.

        Handlers for the same event type are called in the order they were registered.
        The same handler can be subscribed multiple times and will be called once per
        subscription.

        Args:
            event_type: The type of event to listen for (e.g., DoorwayOpenedEvent).
            handler: Callback function that takes the event as parameter.
        """
        if event_type not in self.listeners:
            self.listeners[event_type] = []
        self.listeners[event_type].append(handler)

    def unsubscribe(self, event_type: type[Event], handler: Callable[[Event], None]) -> None:
        """Unsubscribe a handler from an event type.

        Removes ALL subscriptions of the handler. Unknown handlers are ignored.

        Args:
            event_type: The type of event to stop listening for.
            handler: The handler function to remove.
        """
        if event_type in self.listeners:
            self.listeners[event_type] = [h for h in self.listeners[event_type] if h != handler]

    def publish(self, event: Event) -> None:
        """Publish an event to all subscribed handlers.

        Handlers are called synchronously in registration order. Events with no
        subscribers are silently ignored. Exceptions raised by a handler propagate
        and prevent later handlers from running.

        Args:
            event: The event instance to publish.
        """
        event_type = type(event)
        if event_type in self.listeners:
            for handler in list(self.listeners[event_type]):
                handler(event)

    def clear(self) -> None:
        """Clear all event listeners for all event types."""
        self.listeners.clear()

    def unregister_all(self, subscriber: object) -> None:
        """Unregister all bound-method handlers belonging to a subscriber.

        Args:
            subscriber: The instance (e.g., a system) whose handlers should be removed.
        """
        for event_type in self.listeners:
            self.listeners[event_type] = [
                h for h in self.listeners[event_type] if not (hasattr(h, "__self__") and h.__self__ == subscriber)
            ]
