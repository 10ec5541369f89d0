"""Unit tests for the Doorway state machine and proximity test."""

import math
import unittest
from unittest.mock import MagicMock

import pytest

from passage.conf import settings
from passage.scenes import KIND_PORTAL, KIND_WALL, ExitDescriptor
from passage.systems.doorway.base import Direction, Doorway, DoorwayKind, DoorwayState, WallSide


def make_doorway(
    kind: DoorwayKind = DoorwayKind.PORTAL,
    direction: Direction = Direction.EAST,
    grid_x: float = 5.0,
    grid_y: float = 3.0,
) -> Doorway:
    """Build a doorway the way the registry does."""
    return Doorway(
        doorway_id="room1_0",
        scene_id="room1",
        direction=direction,
        target_scene_id="room2",
        kind=kind,
        grid_x=grid_x,
        grid_y=grid_y,
        wall_side=WallSide.from_direction(direction),
    )


class TestDoorwayStateMachine(unittest.TestCase):
    """Test opening and delayed closing."""

    def setUp(self) -> None:
        """Create a closed doorway."""
        self.doorway = make_doorway()

    def test_starts_closed(self) -> None:
        """Test that new doorways are closed with no pending close."""
        assert self.doorway.state is DoorwayState.CLOSED
        assert self.doorway.close_deadline is None

    def test_opens_on_first_near_frame(self) -> None:
        """Test that proximity opens the doorway without delay."""
        changed = self.doorway.update_state(0.016, is_player_near=True)

        assert changed is DoorwayState.OPEN
        assert self.doorway.state is DoorwayState.OPEN
        assert self.doorway.is_open is True

    def test_staying_near_reports_no_change(self) -> None:
        """Test that an already open doorway does not report another change."""
        self.doorway.update_state(0.25, is_player_near=True)

        assert self.doorway.update_state(0.25, is_player_near=True) is None
        assert self.doorway.state is DoorwayState.OPEN

    def test_leaving_sets_deadline_and_stays_open(self) -> None:
        """Test that leaving schedules a close instead of closing."""
        self.doorway.update_state(0.25, is_player_near=True)
        changed = self.doorway.update_state(0.25, is_player_near=False)

        assert changed is None
        assert self.doorway.state is DoorwayState.OPEN
        assert self.doorway.close_deadline == pytest.approx(0.5 + 0.8)

    def test_closes_once_delay_elapsed(self) -> None:
        """Test that the doorway closes after the close delay."""
        self.doorway.update_state(0.25, is_player_near=True)  # clock 0.25, open
        self.doorway.update_state(0.25, is_player_near=False)  # clock 0.5, deadline 1.3

        assert self.doorway.update_state(0.5, is_player_near=False) is None  # clock 1.0
        assert self.doorway.update_state(0.25, is_player_near=False) is None  # clock 1.25
        assert self.doorway.state is DoorwayState.OPEN

        changed = self.doorway.update_state(0.25, is_player_near=False)  # clock 1.5

        assert changed is DoorwayState.CLOSED
        assert self.doorway.state is DoorwayState.CLOSED
        assert self.doorway.close_deadline is None

    def test_returning_cancels_pending_close(self) -> None:
        """Test that re-entering proximity clears the deadline."""
        self.doorway.update_state(0.25, is_player_near=True)
        self.doorway.update_state(0.25, is_player_near=False)
        assert self.doorway.close_deadline is not None

        changed = self.doorway.update_state(0.25, is_player_near=True)

        assert changed is None
        assert self.doorway.close_deadline is None
        assert self.doorway.state is DoorwayState.OPEN

    def test_cancelled_close_restarts_full_delay(self) -> None:
        """Test that leaving again after a cancel waits the whole delay again."""
        self.doorway.update_state(0.25, is_player_near=True)
        self.doorway.update_state(0.5, is_player_near=False)  # deadline 1.55
        self.doorway.update_state(0.5, is_player_near=True)  # cancel at 1.25
        self.doorway.update_state(0.25, is_player_near=False)  # clock 1.5, deadline 2.3

        assert self.doorway.update_state(0.5, is_player_near=False) is None  # clock 2.0
        assert self.doorway.state is DoorwayState.OPEN

    def test_away_while_closed_does_nothing(self) -> None:
        """Test that a closed doorway never gets a deadline."""
        for _ in range(5):
            assert self.doorway.update_state(0.5, is_player_near=False) is None

        assert self.doorway.state is DoorwayState.CLOSED
        assert self.doorway.close_deadline is None

    def test_respects_configured_close_delay(self) -> None:
        """Test that DOORWAY_CLOSE_DELAY controls the close deadline."""
        settings.configure(DOORWAY_CLOSE_DELAY=2.0)
        self.doorway.update_state(0.5, is_player_near=True)
        self.doorway.update_state(0.5, is_player_near=False)

        assert self.doorway.close_deadline == pytest.approx(3.0)

    def test_wall_doorway_tracks_state_too(self) -> None:
        """Test that wall doorways use the same state machine."""
        doorway = make_doorway(kind=DoorwayKind.WALL, direction=Direction.NORTH, grid_x=8, grid_y=0)

        assert doorway.update_state(0.1, is_player_near=True) is DoorwayState.OPEN

    def test_force_state_drops_pending_close(self) -> None:
        """Test that forcing a state clears any deadline."""
        self.doorway.update_state(0.25, is_player_near=True)
        self.doorway.update_state(0.25, is_player_near=False)

        self.doorway.force_state(is_open=False)

        assert self.doorway.state is DoorwayState.CLOSED
        assert self.doorway.close_deadline is None


def test_player_bouncing_within_close_window_never_closes() -> None:
    """Test that (5,3) -> (10,10) -> (5,3) within 500ms never shows CLOSED."""
    doorway = make_doorway()
    observed = []

    for player_position in [(5.0, 3.0), (10.0, 10.0), (10.0, 10.0), (5.0, 3.0)]:
        near = doorway.is_player_colliding(*player_position)
        doorway.update_state(0.125, near)
        observed.append(doorway.state)

    assert DoorwayState.CLOSED not in observed


class TestDoorwayProximity(unittest.TestCase):
    """Test the distance predicate."""

    def test_close_player_collides(self) -> None:
        """Test that a player about 0.14 units away collides."""
        doorway = make_doorway(grid_x=5, grid_y=3)

        assert math.hypot(0.1, 0.1) < 0.5
        assert doorway.is_player_colliding(5.1, 3.1) is True

    def test_distance_boundary_is_exclusive(self) -> None:
        """Test that exactly the threshold distance does not collide."""
        doorway = make_doorway(grid_x=5, grid_y=3)

        assert doorway.is_player_colliding(5.5, 3.0) is False
        assert doorway.is_player_colliding(5.49, 3.0) is True

    def test_far_player_does_not_collide(self) -> None:
        """Test that a distant player does not collide."""
        doorway = make_doorway(grid_x=5, grid_y=3)

        assert doorway.is_player_colliding(10, 10) is False

    def test_threshold_is_configurable(self) -> None:
        """Test that DOORWAY_PROXIMITY_THRESHOLD widens the trigger."""
        settings.configure(DOORWAY_PROXIMITY_THRESHOLD=2.0)
        doorway = make_doorway(grid_x=5, grid_y=3)

        assert doorway.is_player_colliding(6.5, 3.0) is True

    def test_north_wall_doorway_requires_corridor(self) -> None:
        """Test that a north-wall doorway ignores players deeper than the corridor."""
        doorway = make_doorway(kind=DoorwayKind.WALL, direction=Direction.SOUTH, grid_x=3, grid_y=5.2)

        assert doorway.wall_side is WallSide.NORTH
        assert doorway.is_player_colliding(3.0, 5.2) is False
        assert doorway.is_player_colliding(3.0, 4.9) is True

    def test_west_wall_doorway_requires_corridor(self) -> None:
        """Test that a west-wall doorway ignores players beyond the corridor."""
        doorway = make_doorway(kind=DoorwayKind.WALL, direction=Direction.EAST, grid_x=6, grid_y=6)

        assert doorway.wall_side is WallSide.WEST
        assert doorway.is_player_colliding(6.0, 6.0) is False

    def test_portal_has_no_corridor(self) -> None:
        """Test that floor portals only use the distance check."""
        doorway = make_doorway(kind=DoorwayKind.PORTAL, direction=Direction.EAST, grid_x=6, grid_y=6)

        assert doorway.is_player_colliding(6.0, 6.0) is True


class TestDoorwayIndexing(unittest.TestCase):
    """Test world positions and spatial index registration."""

    def test_north_wall_pinned_to_top(self) -> None:
        """Test that north-wall doorways sit at world y=0."""
        doorway = make_doorway(kind=DoorwayKind.WALL, direction=Direction.NORTH, grid_x=8, grid_y=0.5)

        assert doorway.world_position(32) == (256.0, 0.0)

    def test_west_wall_pinned_to_left(self) -> None:
        """Test that west-wall doorways sit at world x=0."""
        doorway = make_doorway(kind=DoorwayKind.WALL, direction=Direction.WEST, grid_x=0.5, grid_y=5.5)

        assert doorway.world_position(32) == (0.0, 176.0)

    def test_portal_uses_grid_position(self) -> None:
        """Test that floor portals scale their grid position."""
        doorway = make_doorway(grid_x=5, grid_y=3)

        assert doorway.world_position(32) == (160.0, 96.0)

    def test_register_in_index_adds_once(self) -> None:
        """Test that registration calls add_entity with the world position."""
        doorway = make_doorway(grid_x=5, grid_y=3)
        spatial_index = MagicMock()
        spatial_index.cell_size = 32

        doorway.register_in_index(spatial_index)

        spatial_index.add_entity.assert_called_once_with(doorway, 160.0, 96.0)

    def test_register_without_index_is_ignored(self) -> None:
        """Test that a missing index is not an error."""
        make_doorway().register_in_index(None)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("north", Direction.NORTH),
        ("South", Direction.SOUTH),
        ("E", Direction.EAST),
        ("w", Direction.WEST),
        ("up", None),
        ("", None),
        (None, None),
    ],
)
def test_direction_parse(value: str | None, expected: Direction | None) -> None:
    """Test parsing of direction names and abbreviations."""
    assert Direction.parse(value) is expected


def test_doorway_kinds_match_catalog_kinds() -> None:
    """Test that every catalog kind string maps onto a DoorwayKind."""
    assert {kind.value for kind in DoorwayKind} == {KIND_WALL, KIND_PORTAL}
    assert DoorwayKind(KIND_WALL) is DoorwayKind.WALL
    assert DoorwayKind(ExitDescriptor(direction="east", target_scene_id="room2").kind) is DoorwayKind.PORTAL


@pytest.mark.parametrize(
    ("direction", "wall_side"),
    [
        (Direction.NORTH, WallSide.NORTH),
        (Direction.SOUTH, WallSide.NORTH),
        (Direction.EAST, WallSide.WEST),
        (Direction.WEST, WallSide.WEST),
    ],
)
def test_wall_side_from_direction(direction: Direction, wall_side: WallSide) -> None:
    """Test that directions collapse onto the two doorway-bearing walls."""
    assert WallSide.from_direction(direction) is wall_side
