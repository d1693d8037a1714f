"""Event system for application layer"""

from src.application.events.events import (
    DomainEvent,
    ProjectCreated,
    ProjectStatusChanged,
)
from src.application.events.event_bus import EventBus, EventHandler

__all__ = [
    'DomainEvent',
    'ProjectCreated',
    'ProjectStatusChanged',
    'EventBus',
    'EventHandler',
]
