"""Module for events."""

from roomwalk.events.base import Event, EventBus

__all__ = ["Event", "EventBus"]
