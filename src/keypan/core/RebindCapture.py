import logging
from typing import Callable, Dict, List, Optional

from keypan.core.dataclasses import CaptureState, Direction
from keypan.core.Settings import Settings


class RebindCapture:
    """
    Captures four key presses, one per direction, and stores them as the new
    pan bindings once all of them are known.
    """

    STEP_STATES: Dict[Direction, CaptureState] = {
        Direction.NORTH: CaptureState.AWAITING_NORTH,
        Direction.WEST: CaptureState.AWAITING_WEST,
        Direction.SOUTH: CaptureState.AWAITING_SOUTH,
        Direction.EAST: CaptureState.AWAITING_EAST,
    }

    STEP_ORDER: List[Direction] = list(STEP_STATES.keys())

    def __init__(self,
                 settings: Settings,
                 on_start: Optional[Callable[[], None]] = None,
                 on_done: Optional[Callable[[], None]] = None):
        self.settings = settings
        self.on_start = on_start
        self.on_done = on_done

        self.direction: Optional[Direction] = None
        self.buffer: Dict[Direction, str] = {}

    @property
    def state(self) -> CaptureState:
        if self.direction is None:
            return CaptureState.IDLE

        return self.STEP_STATES[self.direction]

    @property
    def active(self) -> bool:
        return self.direction is not None

    def start(self) -> None:
        self.buffer = {}
        self.direction = Direction.NORTH
        logging.debug("Key capture started")

        if self.on_start:
            self.on_start()

    def handle_key(self, key: str) -> None:
        if self.direction is None:
            return

        self.buffer[self.direction] = key

        index = self.STEP_ORDER.index(self.direction)
        if index + 1 < len(self.STEP_ORDER):
            self.direction = self.STEP_ORDER[index + 1]
            logging.debug(f"Key capture awaiting {self.direction.value}")
        else:
            self.direction = None
            self.commit()

    def commit(self) -> bool:
        if not all(self.buffer.get(direction) for direction in self.STEP_ORDER):
            logging.debug("Incomplete key capture discarded")
            return False

        self.settings.set_bindings(dict(self.buffer))
        self.settings.save()
        logging.info(f"Pan keys updated: {self.describe(self.buffer)}")

        if self.on_done:
            self.on_done()

        return True

    @classmethod
    def describe(cls, keys: Dict[Direction, str]) -> str:
        return ", ".join(
            f"{direction.value}={keys.get(direction) or '?'}" for direction in cls.STEP_ORDER
        )
