import logging
import math
from typing import Any, Callable, Optional, Protocol


class CanvasSurface(Protocol):
    tx: float
    ty: float
    zoom: Optional[float]

    def mark_viewport_changed(self) -> None: ...

    def pan_to(self, x: float, y: float) -> None: ...


class CanvasHost(Protocol):
    def get_active_view(self) -> Optional[Any]: ...


class CanvasHostAdapter:
    """Finds the focused canvas surface and moves its viewport."""

    # Canvas zoom ranges from -4 (zoomed out) to 1, fall back to fully zoomed out
    ZOOM_FALLBACK = -4
    ZOOM_OFFSET = 5

    def __init__(self, host: CanvasHost) -> None:
        self.host = host

        self.on_surface_missing: Optional[Callable[[], None]] = None

    def get_active_surface(self) -> Optional[CanvasSurface]:
        view = self.host.get_active_view()
        surface = getattr(view, "canvas", None) if view is not None else None

        if surface is None:
            logging.debug("No active canvas surface")
            if self.on_surface_missing:
                self.on_surface_missing()

        return surface

    def apply_pan(self, surface: CanvasSurface, dx: float, dy: float) -> None:
        zoom = getattr(surface, "zoom", None)
        if zoom is None:
            zoom = self.ZOOM_FALLBACK
        divisor = zoom + self.ZOOM_OFFSET
        if divisor == 0:
            logging.debug(f"Ignoring pan at out of range zoom {zoom}")
            return

        surface.tx += dx / divisor
        surface.ty += dy / divisor

        if math.isnan(surface.tx):
            surface.tx = 0
        if math.isnan(surface.ty):
            surface.ty = 0

        surface.mark_viewport_changed()

    def reset_origin(self) -> None:
        surface = self.get_active_surface()
        if surface is not None:
            surface.pan_to(0, 0)
