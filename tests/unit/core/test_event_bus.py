"""
Unit tests for the in-memory event bus.
"""
import uuid

import pytest

from core.domain.events import DomainEvent, EventHandler
from core.infrastructure.events import InMemoryEventBus


class SomethingHappened(DomainEvent):
    """Event used by the tests."""


class OtherThingHappened(DomainEvent):
    """Event nobody listens to."""


class RecordingHandler(EventHandler):
    """Handler remembering the events it saw."""

    def __init__(self):
        self.events = []

    async def handle(self, event):
        self.events.append(event)


class FailingHandler(EventHandler):
    """Handler that always fails."""

    async def handle(self, event):
        raise RuntimeError("boom")


class TestDomainEvent:
    """Tests for DomainEvent."""

    def test_event_type_is_class_name(self):
        """Test subclasses get their own event type."""
        event = SomethingHappened(aggregate_id="abc")
        assert event.event_type == "SomethingHappened"
        assert isinstance(event.event_id, uuid.UUID)

    def test_to_dict(self):
        """Test serialization."""
        data = SomethingHappened(aggregate_id="abc").to_dict()
        assert data["aggregate_id"] == "abc"
        assert data["event_type"] == "SomethingHappened"
        assert "occurred_at" in data


@pytest.mark.asyncio
class TestInMemoryEventBus:
    """Tests for InMemoryEventBus."""

    async def test_publish_reaches_subscribers_of_the_type(self):
        """Test dispatch by exact event type."""
        bus = InMemoryEventBus()
        handler = RecordingHandler()
        bus.subscribe(SomethingHappened, handler)

        await bus.publish(SomethingHappened(aggregate_id="1"))
        await bus.publish(OtherThingHappened(aggregate_id="2"))

        assert [event.aggregate_id for event in handler.events] == ["1"]

    async def test_failing_handler_does_not_break_others(self):
        """Test handler failures are isolated."""
        bus = InMemoryEventBus()
        handler = RecordingHandler()
        bus.subscribe(SomethingHappened, FailingHandler())
        bus.subscribe(SomethingHappened, handler)

        await bus.publish(SomethingHappened(aggregate_id="1"))

        assert len(handler.events) == 1

    async def test_same_handler_type_subscribed_once(self):
        """Test repeated registration is ignored."""
        bus = InMemoryEventBus()
        first = RecordingHandler()
        bus.subscribe(SomethingHappened, first)
        bus.subscribe(SomethingHappened, RecordingHandler())

        await bus.publish(SomethingHappened(aggregate_id="1"))

        assert len(first.events) == 1

    async def test_clear_removes_subscriptions(self):
        """Test clear."""
        bus = InMemoryEventBus()
        handler = RecordingHandler()
        bus.subscribe(SomethingHappened, handler)
        bus.clear()

        await bus.publish(SomethingHappened(aggregate_id="1"))

        assert handler.events == []
