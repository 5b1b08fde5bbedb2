from collections import defaultdict
from enum import Enum
import logging
from typing import Callable, Dict, List, Optional

from keypan.host.views import CanvasView, NoteView, View


class WorkspaceEvent(Enum):
    ACTIVE_VIEW_CHANGE = "active-view-change"
    LAYOUT_CHANGE = "layout-change"
    FILE_OPEN = "file-open"
    FILE_MENU = "file-menu"
    FILES_MENU = "files-menu"


class Workspace:
    """Set of open views with a single focused one."""

    def __init__(self, views: Optional[List[View]] = None) -> None:
        self.views: List[View] = list(views) if views else []
        self.active_index: Optional[int] = 0 if self.views else None
        self.handlers: Dict[WorkspaceEvent, List[Callable[[], None]]] = defaultdict(list)

    @classmethod
    def default(cls) -> 'Workspace':
        return cls([
            CanvasView("Board.canvas"),
            NoteView("Notes.md", "Press Tab to switch views."),
            CanvasView("Sketches.canvas"),
        ])

    def subscribe(self, event: WorkspaceEvent, handler: Callable[[], None]) -> None:
        self.handlers[event].append(handler)

    def emit(self, event: WorkspaceEvent) -> None:
        logging.debug(f"Workspace event: {event.value}")
        for fn in self.handlers[event]:
            fn()

    def get_active_view(self) -> Optional[View]:
        if self.active_index is None:
            return None

        return self.views[self.active_index]

    @property
    def active_editor(self) -> bool:
        view = self.get_active_view()
        return view is not None and view.editable

    def focus(self, index: Optional[int]) -> None:
        if index is not None and not 0 <= index < len(self.views):
            raise IndexError(f"No view at index {index}")

        if index == self.active_index:
            return

        self.active_index = index
        self.emit(WorkspaceEvent.ACTIVE_VIEW_CHANGE)
        self.emit(WorkspaceEvent.LAYOUT_CHANGE)

    def focus_next(self) -> None:
        if not self.views:
            return

        current = self.active_index if self.active_index is not None else -1
        self.focus((current + 1) % len(self.views))

    def open_file(self, title: str) -> View:
        for index, view in enumerate(self.views):
            if view.title == title:
                break
        else:
            view = CanvasView(title) if title.endswith(".canvas") else NoteView(title)
            self.views.append(view)
            index = len(self.views) - 1

        self.emit(WorkspaceEvent.FILE_OPEN)
        self.focus(index)

        return view

    def close_active(self) -> None:
        if self.active_index is None:
            return

        del self.views[self.active_index]
        self.active_index = None
        self.emit(WorkspaceEvent.ACTIVE_VIEW_CHANGE)
        self.emit(WorkspaceEvent.LAYOUT_CHANGE)

    def open_file_menu(self) -> None:
        self.emit(WorkspaceEvent.FILE_MENU)

    def open_files_menu(self) -> None:
        self.emit(WorkspaceEvent.FILES_MENU)
