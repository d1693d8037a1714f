"""
Event Bus System

Provides publish/subscribe pattern for domain events.
Allows UI and other components to react to domain state changes.

Everything runs on the Qt main thread: publish() calls handlers
synchronously, in subscription order.
"""
from typing import Dict, List, Callable, Union, Type

from src.application.events.events import DomainEvent
from src.utils.message import Log


EventHandler = Callable[[DomainEvent], None]


class EventBus:
    """
    Event bus for publishing and subscribing to domain events.

    Usage:
        bus = EventBus()
        bus.subscribe("ProjectCreated", handle_project_created)
        # Or with class:
        bus.subscribe(ProjectCreated, handle_project_created)
        bus.publish(ProjectCreated(project_id="...", data={...}))
    """

    def __init__(self):
        """Initialize event bus"""
        self._subscribers: Dict[str, List[EventHandler]] = {}
        Log.info("EventBus: Initialized")

    def _normalize_event_name(self, event_name_or_class: Union[str, Type[DomainEvent]]) -> str:
        """Convert event class or string to normalized string name."""
        if isinstance(event_name_or_class, str):
            return event_name_or_class
        elif hasattr(event_name_or_class, 'name'):
            return event_name_or_class.name
        elif hasattr(event_name_or_class, '__name__'):
            return event_name_or_class.__name__
        else:
            return str(event_name_or_class)

    def subscribe(self, event_name: Union[str, Type[DomainEvent]], handler: EventHandler) -> None:
        """
        Subscribe to events of a specific type.

        Args:
            event_name: Name of the event type (e.g., "ProjectCreated") or event class
            handler: Function to call when event is published
                Must accept DomainEvent as parameter
        """
        event_name = self._normalize_event_name(event_name)
        handlers = self._subscribers.setdefault(event_name, [])
        if handler not in handlers:
            handlers.append(handler)

    def unsubscribe(self, event_name: Union[str, Type[DomainEvent]], handler: EventHandler) -> None:
        """
        Unsubscribe from events of a specific type.

        Args:
            event_name: Name of the event type or event class
            handler: Handler function to remove
        """
        event_name = self._normalize_event_name(event_name)
        handlers = self._subscribers.get(event_name)
        if handlers and handler in handlers:
            handlers.remove(handler)
            if not handlers:
                del self._subscribers[event_name]

    def publish(self, event: DomainEvent) -> None:
        """
        Publish a domain event to all subscribers.

        A failing handler is logged and does not stop the others.

        Args:
            event: DomainEvent instance to publish
        """
        event_name = event.name if hasattr(event, 'name') else type(event).__name__

        # Copy so handlers may (un)subscribe while we iterate
        handlers = list(self._subscribers.get(event_name, []))
        if not handlers:
            return

        Log.debug(f"EventBus: Publishing '{event_name}' to {len(handlers)} subscribers")
        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                Log.error(f"EventBus: Error in handler for '{event_name}': {e}")

    def get_subscriber_count(self, event_name: Union[str, Type[DomainEvent]]) -> int:
        """
        Get number of subscribers for an event type.

        Args:
            event_name: Name of the event type or event class

        Returns:
            Number of subscribers
        """
        return len(self._subscribers.get(self._normalize_event_name(event_name), []))

    def clear(self) -> None:
        """Clear all subscribers"""
        self._subscribers.clear()
        Log.info("EventBus: Cleared all subscribers")
