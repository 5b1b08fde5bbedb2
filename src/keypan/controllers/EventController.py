"""Event handling controller for pygame events."""
import logging
from typing import Callable

import pygame

from keypan.controllers.SpeedController import SpeedController
from keypan.core.CanvasHostAdapter import CanvasHostAdapter
from keypan.core.KeyStateTracker import KeyStateTracker
from keypan.core.PanLoopScheduler import PanLoopScheduler
from keypan.core.RebindCapture import RebindCapture
from keypan.core.RepeatingTimer import PAN_TICK_EVENT
from keypan.host.Workspace import Workspace


class EventController:
    NEW_FILE_TITLE = "Untitled.canvas"

    def __init__(
        self,
        on_quit: Callable[[], None],
        workspace: Workspace,
        tracker: KeyStateTracker,
        scheduler: PanLoopScheduler,
        adapter: CanvasHostAdapter,
        capture: RebindCapture,
        speed: SpeedController
    ):
        self.on_quit = on_quit
        self.workspace = workspace
        self.tracker = tracker
        self.scheduler = scheduler
        self.adapter = adapter
        self.capture = capture
        self.speed = speed

    def handle_events(self) -> bool:
        """Returns False if application should quit."""
        for event in pygame.event.get():
            if not self.handle_event(event):
                return False

        return True

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.QUIT:
            self.on_quit()
            return False

        elif event.type == PAN_TICK_EVENT:
            self.scheduler.tick()

        elif event.type == pygame.KEYDOWN:
            if self.capture.active:
                self.capture.handle_key(pygame.key.name(event.key))
                return True

            match event.key:
                case pygame.K_ESCAPE:
                    self.on_quit()
                    return False

                case pygame.K_F1:
                    self.scheduler.stop(force=True)
                    self.capture.start()

                case pygame.K_TAB:
                    self.workspace.focus_next()

                case pygame.K_HOME:
                    self.adapter.reset_origin()

                case pygame.K_PAGEUP:
                    self.speed.increase()

                case pygame.K_PAGEDOWN:
                    self.speed.decrease()

                case pygame.K_F5:
                    self.speed.restore_default()

                case pygame.K_o if event.mod & pygame.KMOD_CTRL:
                    self.workspace.open_file(self.NEW_FILE_TITLE)

                case _ if self.workspace.active_editor:
                    self._edit_note(event)

                case _:
                    self.tracker.on_key_down(pygame.key.name(event.key))

        elif event.type == pygame.KEYUP:
            self.tracker.on_key_up(pygame.key.name(event.key))

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 3:
            self.workspace.open_file_menu()

        elif event.type == pygame.WINDOWFOCUSLOST:
            logging.debug("Window focus lost, stopping pan")
            self.scheduler.stop(force=True)

        return True

    def _edit_note(self, event: pygame.event.Event) -> None:
        view = self.workspace.get_active_view()
        if event.key == pygame.K_BACKSPACE:
            view.buffer.backspace()
        elif event.key == pygame.K_RETURN:
            view.buffer.insert("\n")
        else:
            view.buffer.insert(getattr(event, "unicode", ""))
