import logging
import math
from typing import Callable, Optional, Tuple

import pygame

from keypan.core.CanvasHostAdapter import CanvasHostAdapter
from keypan.core.dataclasses import Direction, LoopState
from keypan.core.KeyStateTracker import KeyStateTracker
from keypan.core.RepeatingTimer import RepeatingTimer
from keypan.core.Settings import Settings

TICK_INTERVAL_MS = 10

# Hard cap, independent of the configured max speed
MAX_PAN_DISTANCE = 250


def pan_distance(elapsed_ms: float = 0, max_speed: float = 250) -> float:
    """
    Distance to pan in a single tick after holding a key for elapsed_ms.

    Grows with log10 of the hold time and is capped at MAX_PAN_DISTANCE.
    """
    if elapsed_ms < 1:
        return 0

    return min(math.log10(elapsed_ms) * max_speed / 3, MAX_PAN_DISTANCE)


class PanLoopScheduler:
    """Owns the repeating pan tick and turns held keys into canvas movement."""

    def __init__(self,
                 tracker: KeyStateTracker,
                 adapter: CanvasHostAdapter,
                 settings: Settings,
                 clock: Callable[[], int] = pygame.time.get_ticks,
                 timer_factory: Callable[[int], RepeatingTimer] = RepeatingTimer.start) -> None:
        self.tracker = tracker
        self.adapter = adapter
        self.settings = settings
        self.clock = clock
        self.timer_factory = timer_factory

        self.loop = LoopState()

    @property
    def running(self) -> bool:
        return self.loop.timer is not None

    def start(self) -> None:
        if self.loop.timer is not None:
            return

        self.loop.pan_start = None
        self.loop.timer = self.timer_factory(TICK_INTERVAL_MS)
        logging.debug("Pan loop started")

    def stop(self, force: bool = False) -> None:
        if force or not self.tracker.is_panning():
            self.cancel()

        if force:
            self.tracker.force_reset()
            self.loop.pan_start = None

    def cancel(self) -> None:
        if self.loop.timer is None:
            return

        self.loop.timer.cancel()
        self.loop.timer = None
        logging.debug("Pan loop stopped")

    def tick(self) -> Optional[Tuple[float, float]]:
        surface = self.adapter.get_active_surface()
        if surface is None:
            return None

        now = self.clock()
        if self.loop.pan_start is None:
            self.loop.pan_start = now
        elapsed = now - self.loop.pan_start

        state = self.tracker.state
        dx = self._axis_delta(state.is_set(Direction.EAST), state.is_set(Direction.WEST), elapsed)
        dy = self._axis_delta(state.is_set(Direction.SOUTH), state.is_set(Direction.NORTH), elapsed)

        self.adapter.apply_pan(surface, dx, dy)

        return dx, dy

    def _axis_delta(self, positive: bool, negative: bool, elapsed: float) -> float:
        direction = 0
        if positive and not negative:
            direction = 1
        elif negative and not positive:
            direction = -1

        if direction == 0:
            return 0.0

        return direction * pan_distance(elapsed, self.settings.get_max_speed())

    def __repr__(self) -> str:
        return (f"<PanLoopScheduler(running={self.running}, "
                f"pan_start={self.loop.pan_start})>")
