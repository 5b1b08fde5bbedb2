import logging
from typing import Callable, Optional

from keypan.core.dataclasses import DIRECTION_ORDER, Direction, KeyState
from keypan.core.Settings import Settings


class KeyStateTracker:
    """Tracks which pan directions are held, based on the configured bindings."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.state = KeyState()

        self.on_pan_start: Optional[Callable[[], None]] = None
        self.on_pan_update: Optional[Callable[[], None]] = None

    def direction_for(self, key: str) -> Optional[Direction]:
        bindings = self.settings.get_bindings()
        for direction in DIRECTION_ORDER:
            if bindings[direction] == key:
                return direction

        return None

    def on_key_down(self, key: str) -> None:
        direction = self.direction_for(key)
        if direction is None:
            return

        self.state.set(direction)
        logging.debug(f"Pan key down: {key} ({direction.value})")

        if self.on_pan_start:
            self.on_pan_start()

    def on_key_up(self, key: str) -> None:
        direction = self.direction_for(key)
        if direction is None:
            return

        self.state.clear(direction)
        logging.debug(f"Pan key up: {key} ({direction.value})")

        if self.on_pan_update:
            self.on_pan_update()

    def is_panning(self) -> bool:
        vertical = self.state.north != self.state.south
        horizontal = self.state.west != self.state.east

        return vertical or horizontal

    def force_reset(self) -> None:
        self.state.clear_all()

    def __repr__(self) -> str:
        return f"<KeyStateTracker(state={self.state}, panning={self.is_panning()})>"
