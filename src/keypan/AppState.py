import logging
import signal
from typing import Any, Optional

import pygame

from keypan.Init import Init
from keypan.controllers.EventController import EventController
from keypan.controllers.SpeedController import SpeedController
from keypan.core.CanvasHostAdapter import CanvasHostAdapter
from keypan.core.dataclasses import ApplicationModel
from keypan.core.KeyStateTracker import KeyStateTracker
from keypan.core.PanLoopScheduler import PanLoopScheduler
from keypan.core.RebindCapture import RebindCapture
from keypan.core.Renderer import Renderer
from keypan.core.Settings import Settings
from keypan.host.Workspace import Workspace, WorkspaceEvent

# Host signals after which held keys must not carry over
FORCE_STOP_EVENTS = [
    WorkspaceEvent.ACTIVE_VIEW_CHANGE,
    WorkspaceEvent.FILE_OPEN,
    WorkspaceEvent.FILE_MENU,
    WorkspaceEvent.FILES_MENU,
]


class AppState:
    def __init__(self, settings: Settings, workspace: Optional[Workspace] = None) -> None:
        self.settings = settings
        self.workspace = workspace if workspace is not None else Workspace.default()

        self.model = ApplicationModel(
            fps=settings.get("timing", {}).get("main_loop_fps", 60)
        )

        video = settings.get("video", {})
        self.size = Renderer.window_size(settings)
        self.title = settings.get("settings", {}).get("title", "keypan")
        self.screen, self.clock = Init.ui(self.size, self.title, video.get("fullscreen", False))

        # Panning core
        self.adapter = CanvasHostAdapter(self.workspace)
        self.tracker = KeyStateTracker(settings)
        self.scheduler = PanLoopScheduler(self.tracker, self.adapter, settings)

        self.tracker.on_pan_start = self.scheduler.start
        self.tracker.on_pan_update = self.scheduler.stop
        self.adapter.on_surface_missing = self.scheduler.cancel

        self.capture = RebindCapture(settings)
        self.speed = SpeedController(settings)

        self.renderer = Renderer(settings)

        self.event_controller = EventController(
            on_quit=self._on_quit,
            workspace=self.workspace,
            tracker=self.tracker,
            scheduler=self.scheduler,
            adapter=self.adapter,
            capture=self.capture,
            speed=self.speed
        )

        self._subscribe_workspace()
        self._on_layout_change()
        self._setup_signal_handling()

    @property
    def running(self) -> bool:
        return self.model.running

    def handle_events(self) -> bool:
        """
        Handle pygame events. Returns False if application should quit.
        """
        return self.event_controller.handle_events()

    def render(self) -> None:
        self.renderer.render_all(
            self.screen,
            self.workspace.get_active_view(),
            self.capture
        )

    def tick(self) -> None:
        self.clock.tick(self.model.fps)

    def shutdown(self) -> None:
        logging.info("Shutting down...")
        self.scheduler.stop(force=True)
        pygame.quit()

    def _subscribe_workspace(self) -> None:
        for event in FORCE_STOP_EVENTS:
            self.workspace.subscribe(event, self._force_stop)

        self.workspace.subscribe(WorkspaceEvent.LAYOUT_CHANGE, self._on_layout_change)

    def _force_stop(self) -> None:
        self.scheduler.stop(force=True)

    def _on_layout_change(self) -> None:
        # Reset state just in case
        self.scheduler.stop(force=True)

        view = self.workspace.get_active_view()
        self.model.canvas_active = getattr(view, "canvas", None) is not None

    def _on_quit(self) -> None:
        self.model.running = False

    def _setup_signal_handling(self) -> None:
        signal.signal(signal.SIGINT, self._signal_handler)

    def _signal_handler(
        self,
        sig: Optional[int] = None,
        frame: Optional[Any] = None
    ) -> None:
        """Handle shutdown signals gracefully."""
        if self.model.running:
            self.model.running = False
