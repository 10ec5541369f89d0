"""Module for events."""

from passage.events.base import Event, EventBus

__all__ = ["Event", "EventBus"]
