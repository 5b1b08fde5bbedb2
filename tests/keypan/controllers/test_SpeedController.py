"""Tests for SpeedController - bounded max pan speed."""
from unittest.mock import MagicMock

import pytest

from keypan.controllers.SpeedController import SpeedController


@pytest.fixture
def settings():
    values = {"max_speed": 250}
    settings = MagicMock()
    settings.get_max_speed.side_effect = lambda: values["max_speed"]
    settings.set.side_effect = lambda key, value: values.__setitem__(key, value)
    return settings


class TestSet:
    def test_set_persists(self, settings):
        speed = SpeedController(settings)

        assert speed.set(300) == 300
        settings.set.assert_called_once_with("max_speed", 300)
        settings.save.assert_called_once()

    @pytest.mark.parametrize("requested, stored", [
        (10, 50),
        (50, 50),
        (499, 500),
        (900, 500),
        (123, 120),
        (126, 130),
    ])
    def test_set_clamps_and_snaps(self, settings, requested, stored):
        assert SpeedController(settings).set(requested) == stored
        assert settings.get_max_speed() == stored


class TestSteps:
    def test_increase(self, settings):
        speed = SpeedController(settings)
        assert speed.increase() == 260
        assert speed.value == 260

    def test_decrease(self, settings):
        speed = SpeedController(settings)
        assert speed.decrease() == 240

    def test_increase_stops_at_max(self, settings):
        speed = SpeedController(settings)
        speed.set(500)
        assert speed.increase() == 500

    def test_decrease_stops_at_min(self, settings):
        speed = SpeedController(settings)
        speed.set(50)
        assert speed.decrease() == 50

    def test_every_change_saves(self, settings):
        speed = SpeedController(settings)
        speed.increase()
        speed.decrease()
        speed.restore_default()

        assert settings.save.call_count == 3


def test_restore_default(settings):
    speed = SpeedController(settings)
    speed.set(400)

    assert speed.restore_default() == 250
    assert speed.value == 250
