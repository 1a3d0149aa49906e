"""Event system for decoupled game event handling.

This module provides a publish/subscribe event system that lets systems
communicate without importing each other. The asset system publishes events
when the background load finishes or reports a problem, and the notice system
subscribes to them to show messages on screen.

Example usage:
    event_bus = EventBus()

    def handle_warning(event: AssetWarningEvent):
        print(event.message)

    event_bus.subscribe(AssetWarningEvent, handle_warning)
    event_bus.publish(AssetWarningEvent("Folder not found: sprites/left"))

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

    Thread safety: This implementation is NOT thread-safe. All subscribe, publish, and
    unsubscribe calls should happen on the main game thread. Work done on other threads
    must be handed back to the game thread before publishing.
    """

    def __init__(self) -> None:
        """Initialize the event bus with no registered listeners."""
        self.listeners: dict[type[Event], list[Callable[[Event], None]]] = {}

    def subscribe(self, event_type: type[Event], handler: Callable[[Event], None]) -> None:
        """Subscribe a handler to an event type.

        Handlers for the same event type are called in the order they were registered.

        Args:
            event_type: The type of event to listen for.
            handler: Callback function that takes the event as parameter.
        """
        if event_type not in self.listeners:
            self.listeners[event_type] = []
        self.listeners[event_type].append(handler)

    def unsubscribe(self, event_type: type[Event], handler: Callable[[Event], None]) -> None:
        """Unsubscribe a handler from an event type.

        Removes every registration of the handler. Unknown handlers are ignored.
        """
        if event_type in self.listeners:
            self.listeners[event_type] = [h for h in self.listeners[event_type] if h != handler]

    def publish(self, event: Event) -> None:
        """Publish an event to all subscribed handlers.

        Handlers are called synchronously. Events without subscribers are silently
        dropped. A handler exception propagates to the publisher.
        """
        event_type = type(event)
        if event_type in self.listeners:
            for handler in list(self.listeners[event_type]):
                handler(event)

    def clear(self) -> None:
        """Clear all event listeners."""
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
