"""Tests for the EventBus and GameContext plumbing."""

from unittest.mock import MagicMock

from passage.events import EventBus
from passage.systems import GameContext, SpatialGrid
from passage.systems.doorway import DoorwayClosedEvent, DoorwayOpenedEvent


class TestEventBus:
    """Test publish/subscribe behaviour."""

    def test_publish_reaches_subscribers_in_order(self) -> None:
        """Test that handlers run in registration order."""
        bus = EventBus()
        calls: list[str] = []
        bus.subscribe(DoorwayOpenedEvent, lambda event: calls.append("first"))
        bus.subscribe(DoorwayOpenedEvent, lambda event: calls.append("second"))

        bus.publish(DoorwayOpenedEvent("room1", "room1_0", "room2"))

        assert calls == ["first", "second"]

    def test_publish_only_matching_type(self) -> None:
        """Test that handlers only see their own event type."""
        bus = EventBus()
        handler = MagicMock()
        bus.subscribe(DoorwayClosedEvent, handler)

        bus.publish(DoorwayOpenedEvent("room1", "room1_0", "room2"))

        handler.assert_not_called()

    def test_unsubscribe(self) -> None:
        """Test that an unsubscribed handler is no longer called."""
        bus = EventBus()
        handler = MagicMock()
        bus.subscribe(DoorwayOpenedEvent, handler)
        bus.unsubscribe(DoorwayOpenedEvent, handler)

        bus.publish(DoorwayOpenedEvent("room1", "room1_0", "room2"))

        handler.assert_not_called()

    def test_handler_may_unsubscribe_while_publishing(self) -> None:
        """Test that removing a handler during publish does not skip others."""
        bus = EventBus()
        later = MagicMock()

        def once(event: DoorwayOpenedEvent) -> None:
            bus.unsubscribe(DoorwayOpenedEvent, once)

        bus.subscribe(DoorwayOpenedEvent, once)
        bus.subscribe(DoorwayOpenedEvent, later)

        bus.publish(DoorwayOpenedEvent("room1", "room1_0", "room2"))

        later.assert_called_once()

    def test_unregister_all(self) -> None:
        """Test removing every bound handler of one subscriber."""

        class Listener:
            def __init__(self) -> None:
                self.seen: list[object] = []

            def on_open(self, event: DoorwayOpenedEvent) -> None:
                self.seen.append(event)

        bus = EventBus()
        listener = Listener()
        bus.subscribe(DoorwayOpenedEvent, listener.on_open)

        bus.unregister_all(listener)
        bus.publish(DoorwayOpenedEvent("room1", "room1_0", "room2"))

        assert listener.seen == []


class TestGameContext:
    """Test system registration and per-frame state."""

    def test_register_system_exposes_role(self) -> None:
        """Test that systems with a role become context attributes."""
        context = GameContext(event_bus=EventBus())
        spatial = SpatialGrid()

        context.register_system("spatial", spatial)

        assert context.get_system("spatial") is spatial
        assert context.spatial_index is spatial
        assert context.get_systems() == {"spatial": spatial}

    def test_player_position_and_scene(self) -> None:
        """Test the per-frame setters."""
        context = GameContext(event_bus=EventBus())
        assert context.player_grid_position is None

        context.update_player_position(5.1, 3.1)
        context.update_scene("room2")

        assert context.player_grid_position == (5.1, 3.1)
        assert context.current_scene == "room2"
        assert context.scene_catalog == {}
