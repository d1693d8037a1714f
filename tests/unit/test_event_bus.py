"""
Tests for the EventBus.
"""
from unittest.mock import MagicMock

from src.application.events import EventBus, ProjectCreated, ProjectStatusChanged


class TestEventBus:
    """Tests for EventBus publish/subscribe."""

    def test_publish_to_subscriber(self, event_bus):
        """Test a subscriber receives the published event."""
        handler = MagicMock()
        event_bus.subscribe("ProjectCreated", handler)

        event = ProjectCreated(project_id="p1", data={"project": {"title": "A"}})
        event_bus.publish(event)

        handler.assert_called_once_with(event)

    def test_subscribe_by_class(self, event_bus):
        """Test subscribing with the event class."""
        handler = MagicMock()
        event_bus.subscribe(ProjectStatusChanged, handler)
        event_bus.publish(ProjectStatusChanged(project_id="p1"))
        handler.assert_called_once()

    def test_only_matching_events_delivered(self, event_bus):
        """Test handlers only see their event type."""
        handler = MagicMock()
        event_bus.subscribe(ProjectCreated, handler)
        event_bus.publish(ProjectStatusChanged(project_id="p1"))
        handler.assert_not_called()

    def test_no_duplicate_subscriptions(self, event_bus):
        """Test the same handler is registered once."""
        handler = MagicMock()
        event_bus.subscribe(ProjectCreated, handler)
        event_bus.subscribe(ProjectCreated, handler)
        assert event_bus.get_subscriber_count(ProjectCreated) == 1

    def test_unsubscribe(self, event_bus):
        """Test unsubscribed handlers are not called."""
        handler = MagicMock()
        event_bus.subscribe(ProjectCreated, handler)
        event_bus.unsubscribe(ProjectCreated, handler)
        event_bus.publish(ProjectCreated(project_id="p1"))
        handler.assert_not_called()
        assert event_bus.get_subscriber_count(ProjectCreated) == 0

    def test_unsubscribe_unknown_is_harmless(self, event_bus):
        """Test unsubscribing an unknown handler does not raise."""
        event_bus.unsubscribe("Nothing", MagicMock())

    def test_failing_handler_does_not_stop_others(self, event_bus):
        """Test handler errors are isolated."""
        broken = MagicMock(side_effect=RuntimeError("boom"))
        healthy = MagicMock()
        event_bus.subscribe(ProjectCreated, broken)
        event_bus.subscribe(ProjectCreated, healthy)

        event_bus.publish(ProjectCreated(project_id="p1"))

        healthy.assert_called_once()

    def test_clear(self):
        """Test clear removes all subscribers."""
        bus = EventBus()
        bus.subscribe(ProjectCreated, MagicMock())
        bus.clear()
        assert bus.get_subscriber_count(ProjectCreated) == 0
