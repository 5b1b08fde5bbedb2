import pygame

# Posted on the main event queue for every pan loop tick
PAN_TICK_EVENT = pygame.USEREVENT + 1


class RepeatingTimer:
    """
    Cancellable handle for a repeating pygame timer event.

    pygame keeps at most one timer per event type, so a handle owns its
    event type until cancelled.
    """

    def __init__(self, interval_ms: int, event_type: int = PAN_TICK_EVENT) -> None:
        self.interval_ms = interval_ms
        self.event_type = event_type
        self._active = False

    @classmethod
    def start(cls, interval_ms: int, event_type: int = PAN_TICK_EVENT) -> 'RepeatingTimer':
        timer = cls(interval_ms, event_type)
        pygame.time.set_timer(event_type, interval_ms)
        timer._active = True

        return timer

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if not self._active:
            return

        pygame.time.set_timer(self.event_type, 0)
        self._active = False

    def __repr__(self) -> str:
        return (f"<RepeatingTimer(interval_ms={self.interval_ms}, "
                f"event_type={self.event_type}, active={self._active})>")
