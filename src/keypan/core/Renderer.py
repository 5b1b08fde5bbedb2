import math
from typing import Optional, Tuple

import pygame
from pygame.freetype import Font

from keypan.core.dataclasses import DIRECTION_ORDER
from keypan.core.RebindCapture import RebindCapture
from keypan.core.Settings import Settings
from keypan.host.views import GridCanvas, NoteView, View
from keypan.utils.colors import AXIS, BACKGROUND, DARK_GREY, GREY, GRID, WHITE, YELLOW
from keypan.utils.fonts import get_font


class Renderer:
    GRID_SPACING = 100
    HUD_HEIGHT = 30
    PADDING = 10

    def __init__(self, settings: Settings, font: Optional[Font] = None) -> None:
        self.settings = settings
        self.font = font if font is not None else get_font()

    def render_all(self,
                   screen: pygame.Surface,
                   view: Optional[View],
                   capture: RebindCapture) -> None:
        screen.fill(BACKGROUND)

        if view is None:
            self._render_message(screen, "No view focused")
        elif isinstance(view, NoteView):
            self._render_note(screen, view)
        elif getattr(view, "canvas", None) is not None:
            self._render_canvas(screen, view.canvas)
        else:
            self._render_message(screen, view.title)

        self._render_hud(screen, view, capture)

        pygame.display.flip()

    def _render_canvas(self, screen: pygame.Surface, canvas: GridCanvas) -> None:
        width, height = screen.get_size()
        scale = canvas.scale
        spacing = self.GRID_SPACING * scale

        # Canvas point (tx, ty) is drawn at the screen centre
        origin_x = width / 2 - canvas.tx * scale
        origin_y = height / 2 - canvas.ty * scale

        start_x = origin_x - math.ceil(origin_x / spacing) * spacing
        x = start_x
        while x < width:
            color = AXIS if abs(x - origin_x) < 0.5 else GRID
            pygame.draw.line(screen, color, (int(x), 0), (int(x), height))
            x += spacing

        start_y = origin_y - math.ceil(origin_y / spacing) * spacing
        y = start_y
        while y < height:
            color = AXIS if abs(y - origin_y) < 0.5 else GRID
            pygame.draw.line(screen, color, (0, int(y)), (width, int(y)))
            y += spacing

        label = f"x {canvas.tx:.0f}  y {canvas.ty:.0f}  zoom {canvas.zoom}"
        self.font.render_to(screen, (self.PADDING, self.PADDING), label, GREY)

    def _render_note(self, screen: pygame.Surface, view: NoteView) -> None:
        line_height = self.font.get_sized_height() + 4
        y = self.PADDING
        for line in view.buffer.lines:
            self.font.render_to(screen, (self.PADDING, y), line or " ", WHITE)
            y += line_height

    def _render_message(self, screen: pygame.Surface, text: str) -> None:
        surface, rect = self.font.render(text, GREY)
        rect.center = (screen.get_width() // 2, screen.get_height() // 2)
        screen.blit(surface, rect)

    def _render_hud(self,
                    screen: pygame.Surface,
                    view: Optional[View],
                    capture: RebindCapture) -> None:
        width, height = screen.get_size()
        top = height - self.HUD_HEIGHT
        pygame.draw.rect(screen, DARK_GREY, (0, top, width, self.HUD_HEIGHT))

        title = view.title if view is not None else "-"
        if capture.active:
            text = f"Press key for {capture.direction.value}: {RebindCapture.describe(capture.buffer)}"
            color = YELLOW
        else:
            keys = " ".join(self.settings.get_bindings()[d] for d in DIRECTION_ORDER)
            text = f"{title}  |  keys {keys}  |  speed {self.settings.get_max_speed()}"
            color = WHITE

        surface, rect = self.font.render(text, color)
        rect.midleft = (self.PADDING, top + self.HUD_HEIGHT // 2)
        screen.blit(surface, rect)

    @staticmethod
    def window_size(settings: Settings) -> Tuple[int, int]:
        video = settings.get("video", {})
        return video.get("width", 1280), video.get("height", 720)
