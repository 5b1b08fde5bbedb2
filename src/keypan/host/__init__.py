from .views import CanvasView, GridCanvas, NoteBuffer, NoteView, View
from .Workspace import Workspace, WorkspaceEvent

__all__ = [
  "CanvasView",
  "GridCanvas",
  "NoteBuffer",
  "NoteView",
  "View",
  "Workspace",
  "WorkspaceEvent",
]
