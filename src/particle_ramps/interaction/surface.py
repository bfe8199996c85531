"""
Contracts between the interaction layer and the host UI.

The controllers never talk to a window system directly. They consume:
- PointerEvent: a pointer position in surface pixels plus the button
- Rect: the surface bounds, used to normalize pointer positions
- RenderSurface: something that can redraw on demand and show a cursor
- InputSurface: a release hub spanning every editor, so a drag ends on
  pointer release no matter where the pointer is
"""

from dataclasses import dataclass
from typing import Callable, Protocol

from ..core.types import Cursor, PointerButton


@dataclass(frozen=True)
class Rect:
    """Surface bounds in host pixels."""
    left: float = 0.0
    top: float = 0.0
    width: float = 1.0
    height: float = 1.0

    def normalize(self, x: float, y: float, flip_y: bool = False) -> tuple[float, float]:
        """
        Map a pixel position to normalized [0, 1] coordinates.

        Positions outside the bounds map outside [0, 1]; callers clamp.
        With flip_y, y grows upward (0 at the bottom edge).
        """
        nx = (x - self.left) / self.width if self.width else 0.0
        ny = (y - self.top) / self.height if self.height else 0.0
        if flip_y:
            ny = 1.0 - ny
        return nx, ny


@dataclass(frozen=True)
class PointerEvent:
    """A pointer event in surface pixels."""
    x: float
    y: float
    button: PointerButton = PointerButton.PRIMARY


class RenderSurface(Protocol):
    """Drawing target for an editor."""

    def request_redraw(self) -> None: ...

    def set_cursor(self, cursor: Cursor) -> None: ...


class NullSurface:
    """Render surface that draws nothing (headless use and tests)."""

    def __init__(self):
        self.redraws = 0
        self.cursor = Cursor.CROSSHAIR

    def request_redraw(self) -> None:
        self.redraws += 1

    def set_cursor(self, cursor: Cursor) -> None:
        self.cursor = cursor


ReleaseListener = Callable[[], None]


class InputSurface:
    """
    Pointer-release hub shared by every editor on one input surface.

    Pointer down/move/secondary events go to the editor under the pointer,
    but a release is broadcast to all subscribers: the pointer may have
    left the editor it was dragging in.
    """

    def __init__(self):
        self._listeners: list[ReleaseListener] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: ReleaseListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: ReleaseListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def release(self) -> None:
        """Deliver a pointer release to every subscriber."""
        for listener in list(self._listeners):
            listener()
