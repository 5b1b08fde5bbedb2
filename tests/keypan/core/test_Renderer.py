import os
os.environ["SDL_VIDEODRIVER"] = "dummy"

import unittest
from unittest.mock import MagicMock

import pygame
import pygame.freetype

from keypan.core.dataclasses import Direction
from keypan.core.RebindCapture import RebindCapture
from keypan.core.Renderer import Renderer
from keypan.host.views import CanvasView, GridCanvas, NoteView


class TestRenderer(unittest.TestCase):
    def setUp(self):
        pygame.init()
        self.screen = pygame.display.set_mode((320, 240))
        self.font = pygame.freetype.SysFont("freesansbold", 14)

        self.settings = MagicMock()
        self.settings.get_bindings.return_value = {
            Direction.NORTH: "w",
            Direction.WEST: "a",
            Direction.SOUTH: "s",
            Direction.EAST: "d",
        }
        self.settings.get_max_speed.return_value = 250

        self.renderer = Renderer(self.settings, font=self.font)
        self.capture = RebindCapture(self.settings)

    def tearDown(self):
        pygame.quit()

    def test_draw_canvas_does_not_crash(self):
        for zoom in (-4, 0, 1, None):
            view = CanvasView("Board.canvas", GridCanvas(tx=-1234.5, ty=987, zoom=zoom))
            self.renderer.render_all(self.screen, view, self.capture)

    def test_draw_note_does_not_crash(self):
        self.renderer.render_all(self.screen, NoteView("Notes.md", "first\nsecond"), self.capture)

    def test_draw_without_view_does_not_crash(self):
        self.renderer.render_all(self.screen, None, self.capture)

    def test_draw_during_capture_does_not_crash(self):
        self.capture.start()
        self.capture.handle_key("i")
        self.renderer.render_all(self.screen, CanvasView("Board.canvas"), self.capture)

    def test_hud_background_is_drawn(self):
        self.renderer.render_all(self.screen, None, self.capture)

        color = self.screen.get_at((self.screen.get_width() - 1, self.screen.get_height() - 1))
        self.assertEqual(tuple(color)[:3], (40, 40, 40))

    def test_window_size(self):
        settings = MagicMock()
        settings.get.return_value = {"width": 640, "height": 480}
        self.assertEqual(Renderer.window_size(settings), (640, 480))


if __name__ == "__main__":
    unittest.main()
