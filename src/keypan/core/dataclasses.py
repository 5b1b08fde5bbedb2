"""Core dataclasses for keypan."""
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional

if TYPE_CHECKING:
    from keypan.core.RepeatingTimer import RepeatingTimer


class Direction(Enum):
    NORTH = "north"
    WEST = "west"
    SOUTH = "south"
    EAST = "east"

    @property
    def opposite(self) -> 'Direction':
        return _OPPOSITES[self]


_OPPOSITES: Dict[Direction, Direction] = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
    Direction.EAST: Direction.WEST,
}

# Key matching and rebinding both walk directions in this order
DIRECTION_ORDER: List[Direction] = [
    Direction.NORTH,
    Direction.WEST,
    Direction.SOUTH,
    Direction.EAST,
]


class CaptureState(Enum):
    IDLE = "idle"
    AWAITING_NORTH = "awaiting_north"
    AWAITING_WEST = "awaiting_west"
    AWAITING_SOUTH = "awaiting_south"
    AWAITING_EAST = "awaiting_east"


@dataclass
class KeyState:
    """Pressed state of the four pan directions."""
    north: bool = False
    west: bool = False
    south: bool = False
    east: bool = False

    def is_set(self, direction: Direction) -> bool:
        return getattr(self, direction.value)

    def set(self, direction: Direction) -> None:
        """Mark direction as held and release its opposite in one step."""
        setattr(self, direction.value, True)
        setattr(self, direction.opposite.value, False)

    def clear(self, direction: Direction) -> None:
        setattr(self, direction.value, False)

    def clear_all(self) -> None:
        self.north = False
        self.west = False
        self.south = False
        self.east = False


@dataclass
class LoopState:
    """Timing state of the pan loop."""
    pan_start: Optional[int] = None
    timer: Optional['RepeatingTimer'] = None


@dataclass
class ApplicationModel:
    """Application state model."""
    # Lifecycle
    running: bool = True

    # Workspace
    canvas_active: bool = False

    # Timing
    fps: int = 60
