"""Speed controller for the configured maximum pan speed."""
import logging

from keypan.core.Settings import Settings
from keypan.utils import clamp, snap


class SpeedController:
    """Adjusts and persists the maximum pan speed within the slider limits."""
    MIN_SPEED = 50
    MAX_SPEED = 500
    STEP = 10

    def __init__(self, settings: Settings):
        """Initialize speed controller.

        Args:
            settings: Application settings holding max_speed
        """
        self.settings = settings

    @property
    def value(self) -> float:
        return self.settings.get_max_speed()

    def set(self, value: float) -> float:
        """Store a new maximum speed.

        Args:
            value: Requested speed, clamped and snapped to the slider steps

        Returns:
            The speed that was stored
        """
        speed = int(snap(clamp(value, self.MIN_SPEED, self.MAX_SPEED), self.STEP, self.MIN_SPEED))
        self.settings.set("max_speed", speed)
        self.settings.save()
        logging.debug(f"Max pan speed set to {speed}")

        return speed

    def increase(self) -> float:
        return self.set(self.value + self.STEP)

    def decrease(self) -> float:
        return self.set(self.value - self.STEP)

    def restore_default(self) -> float:
        return self.set(Settings.DEFAULTS["max_speed"])
