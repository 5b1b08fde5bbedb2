from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class GridCanvas:
    """
    Infinite canvas viewport. tx/ty is the canvas point shown at the centre
    of the view, zoom is a log2 scale factor between -4 and 1.
    """
    tx: float = 0.0
    ty: float = 0.0
    zoom: Optional[float] = 0.0
    viewport_changes: int = 0

    @property
    def scale(self) -> float:
        return 2 ** (self.zoom if self.zoom is not None else -4)

    def mark_viewport_changed(self) -> None:
        self.viewport_changes += 1

    def pan_to(self, x: float, y: float) -> None:
        self.tx = x
        self.ty = y
        self.mark_viewport_changed()


class View:
    editable = False

    def __init__(self, title: str) -> None:
        self.title = title

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(title={self.title!r})>"


class CanvasView(View):
    def __init__(self, title: str, canvas: Optional[GridCanvas] = None) -> None:
        super().__init__(title)
        self.canvas = canvas if canvas is not None else GridCanvas()


@dataclass
class NoteBuffer:
    lines: List[str] = field(default_factory=lambda: [""])

    def insert(self, text: str) -> None:
        for char in text:
            if char in ("\r", "\n"):
                self.lines.append("")
            elif char.isprintable():
                self.lines[-1] += char

    def backspace(self) -> None:
        if self.lines[-1]:
            self.lines[-1] = self.lines[-1][:-1]
        elif len(self.lines) > 1:
            self.lines.pop()


class NoteView(View):
    """Plain text editor, has no canvas and swallows key presses."""
    editable = True

    def __init__(self, title: str, text: str = "") -> None:
        super().__init__(title)
        self.buffer = NoteBuffer(text.split("\n") if text else [""])
