"""Tests for KeyStateTracker - held pan directions."""
from unittest.mock import MagicMock

import pytest

from keypan.core.dataclasses import Direction, KeyState
from keypan.core.KeyStateTracker import KeyStateTracker


def make_settings(keys=None):
    bindings = keys or {
        Direction.NORTH: "w",
        Direction.WEST: "a",
        Direction.SOUTH: "s",
        Direction.EAST: "d",
    }
    settings = MagicMock()
    settings.get_bindings.side_effect = lambda: dict(bindings)
    return settings


@pytest.fixture
def tracker():
    tracker = KeyStateTracker(make_settings())
    tracker.on_pan_start = MagicMock()
    tracker.on_pan_update = MagicMock()
    return tracker


class TestKeyDown:
    def test_bound_key_sets_flag_and_starts(self, tracker):
        tracker.on_key_down("w")

        assert tracker.state.north is True
        tracker.on_pan_start.assert_called_once()

    def test_unbound_key_is_ignored(self, tracker):
        tracker.on_key_down("q")

        assert tracker.state == KeyState()
        tracker.on_pan_start.assert_not_called()

    def test_opposite_key_is_released(self, tracker):
        tracker.on_key_down("w")
        tracker.on_key_down("s")

        assert tracker.state.south is True
        assert tracker.state.north is False

        tracker.on_key_down("w")
        assert tracker.state.north is True
        assert tracker.state.south is False

    def test_horizontal_pair_exclusion(self, tracker):
        tracker.on_key_down("a")
        tracker.on_key_down("d")

        assert tracker.state.east is True
        assert tracker.state.west is False

    def test_repeat_key_down_restarts_each_time(self, tracker):
        tracker.on_key_down("w")
        tracker.on_key_down("w")

        assert tracker.on_pan_start.call_count == 2

    def test_without_callbacks(self):
        tracker = KeyStateTracker(make_settings())
        tracker.on_key_down("w")
        tracker.on_key_up("w")

        assert tracker.state == KeyState()

    def test_first_direction_wins_for_shared_key(self):
        tracker = KeyStateTracker(make_settings({
            Direction.NORTH: "x",
            Direction.WEST: "x",
            Direction.SOUTH: "s",
            Direction.EAST: "d",
        }))
        tracker.on_key_down("x")

        assert tracker.state == KeyState(north=True)

    def test_bindings_read_on_every_event(self):
        bindings = {
            Direction.NORTH: "w",
            Direction.WEST: "a",
            Direction.SOUTH: "s",
            Direction.EAST: "d",
        }
        settings = MagicMock()
        settings.get_bindings.side_effect = lambda: dict(bindings)
        tracker = KeyStateTracker(settings)

        bindings[Direction.NORTH] = "up"
        tracker.on_key_down("w")
        assert tracker.state.north is False

        tracker.on_key_down("up")
        assert tracker.state.north is True


class TestKeyUp:
    def test_bound_key_clears_flag_and_updates(self, tracker):
        tracker.on_key_down("w")
        tracker.on_key_up("w")

        assert tracker.state.north is False
        tracker.on_pan_update.assert_called_once()

    def test_unbound_key_is_ignored(self, tracker):
        tracker.on_key_down("w")
        tracker.on_key_up("q")

        assert tracker.state.north is True
        tracker.on_pan_update.assert_not_called()

    def test_released_pair_both_false(self, tracker):
        tracker.on_key_down("w")
        tracker.on_key_down("s")
        tracker.on_key_up("s")
        tracker.on_key_up("w")

        assert tracker.state.north is False
        assert tracker.state.south is False


class TestIsPanning:
    @pytest.mark.parametrize("flags, expected", [
        (dict(), False),
        (dict(north=True), True),
        (dict(south=True), True),
        (dict(west=True), True),
        (dict(east=True), True),
        (dict(north=True, west=True), True),
        (dict(north=True, south=True), False),
        (dict(west=True, east=True), False),
        (dict(north=True, south=True, west=True), True),
        (dict(north=True, south=True, west=True, east=True), False),
    ])
    def test_truth_table(self, tracker, flags, expected):
        tracker.state = KeyState(**flags)
        assert tracker.is_panning() is expected


def test_force_reset_clears_everything(tracker):
    tracker.state = KeyState(True, True, True, True)
    tracker.force_reset()

    assert tracker.state == KeyState()
    assert tracker.is_panning() is False
    tracker.on_pan_update.assert_not_called()
