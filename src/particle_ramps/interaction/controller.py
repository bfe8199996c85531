"""
Pointer-driven editing of curves and gradients.

One state machine serves both editors. What differs between them (how a
pointer hits an element, how an element is inserted, moved, deleted) lives
in a small target adapter:
- CurveTarget: 2-D hit test in normalized (x, y), y grows upward
- GradientTarget: 1-D hit test along x only, stops are handles on one axis

States:
- IDLE: no drag. Pointer movement only updates the hover index and cursor.
- DRAGGING: every pointer move repositions the dragged element.
"""

import logging
import math
from enum import Enum, auto
from typing import Protocol

from ..core.curve import CurveModel
from ..core.gradient import GradientModel
from ..core.types import Cursor, PointerButton
from .surface import InputSurface, NullSurface, PointerEvent, Rect, RenderSurface

logger = logging.getLogger(__name__)

NO_INDEX = -1


class DragState(Enum):
    IDLE = auto()
    DRAGGING = auto()


class HitTarget(Protocol):
    """What the controller needs from a model."""

    flip_y: bool

    def __len__(self) -> int: ...

    def hit_test(self, x: float, y: float) -> int: ...

    def can_insert(self, x: float, y: float) -> bool: ...

    def insert_at(self, x: float, y: float) -> int: ...

    def drag_to(self, index: int, x: float, y: float) -> int: ...

    def delete(self, index: int) -> bool: ...


class CurveTarget:
    """Adapts a CurveModel for the controller."""

    HIT_RADIUS = 0.04
    flip_y = True

    def __init__(self, model: CurveModel):
        self.model = model

    def __len__(self) -> int:
        return len(self.model)

    def hit_test(self, x: float, y: float) -> int:
        for i, p in enumerate(self.model.points):
            if math.hypot(p.x - x, p.y - y) < self.HIT_RADIUS:
                return i
        return NO_INDEX

    def can_insert(self, x: float, y: float) -> bool:
        return True

    def insert_at(self, x: float, y: float) -> int:
        return self.model.insert_point(x, y)

    def drag_to(self, index: int, x: float, y: float) -> int:
        return self.model.move_point(index, x, y)

    def delete(self, index: int) -> bool:
        return self.model.delete_point(index)


class GradientTarget:
    """
    Adapts a GradientModel for the controller.

    insert_band is the share of the surface height, from the top, where a
    click that misses every stop adds a new one. Below it sit the stop
    handles; 1.0 accepts clicks anywhere.
    """

    HIT_RADIUS = 0.03
    flip_y = False

    def __init__(self, model: GradientModel, insert_band: float = 1.0):
        self.model = model
        self.insert_band = insert_band

    def __len__(self) -> int:
        return len(self.model)

    def hit_test(self, x: float, y: float) -> int:
        for i, stop in enumerate(self.model.stops):
            if abs(stop.pos - x) < self.HIT_RADIUS:
                return i
        return NO_INDEX

    def can_insert(self, x: float, y: float) -> bool:
        return y <= self.insert_band

    def insert_at(self, x: float, y: float) -> int:
        return self.model.insert_stop(x)

    def drag_to(self, index: int, x: float, y: float) -> int:
        return self.model.move_stop(index, x)

    def delete(self, index: int) -> bool:
        return self.model.delete_stop(index)

    def recolor(self, index: int, color: str) -> None:
        self.model.set_stop_color(index, color)


class InteractionController:
    """
    Translates pointer events into model mutations.

    The controller only keeps transient indices into the model's own
    sequence; it never copies the elements. Pointer releases arrive through
    the InputSurface so a drag ends even when the pointer is released
    outside this editor.
    """

    def __init__(
        self,
        target: HitTarget,
        surface: RenderSurface | None = None,
        input_surface: InputSurface | None = None,
        bounds: Rect | None = None,
    ):
        self.target = target
        self.surface = surface or NullSurface()
        self.bounds = bounds or Rect()
        self.dragging_index = NO_INDEX
        self.hover_index = NO_INDEX
        self.selected_index = NO_INDEX
        self.cursor = Cursor.CROSSHAIR

        self.input_surface = input_surface
        if input_surface is not None:
            input_surface.subscribe(self.pointer_up)

    @property
    def state(self) -> DragState:
        return DragState.DRAGGING if self.dragging_index >= 0 else DragState.IDLE

    @property
    def is_dragging(self) -> bool:
        return self.state is DragState.DRAGGING

    def normalize(self, event: PointerEvent) -> tuple[float, float]:
        return self.bounds.normalize(event.x, event.y, flip_y=self.target.flip_y)

    # ----- Pointer events -----

    def pointer_down(self, event: PointerEvent) -> None:
        """
        Start a drag.

        A press on an element drags it; a press that misses every element
        inserts one at the pointer and drags that. Secondary presses are
        routed to context_action.
        """
        if event.button is PointerButton.SECONDARY:
            self.context_action(event)
            return

        x, y = self.normalize(event)
        hit = self.target.hit_test(x, y)

        if hit >= 0:
            self.dragging_index = hit
        elif self.target.can_insert(x, y):
            self.dragging_index = self.target.insert_at(x, y)
        else:
            return

        self.selected_index = self.dragging_index
        self.hover_index = self.dragging_index
        self._set_cursor(Cursor.GRABBING)
        self.surface.request_redraw()

    def pointer_move(self, event: PointerEvent) -> None:
        """Drag the active element, or update the hover state when idle."""
        x, y = self.normalize(event)

        if self.is_dragging:
            self.dragging_index = self.target.drag_to(self.dragging_index, x, y)
            self.selected_index = self.dragging_index
            self.hover_index = self.dragging_index
            self.surface.request_redraw()
            return

        hover = self.target.hit_test(x, y)
        if hover != self.hover_index:
            self.hover_index = hover
            self._set_cursor(Cursor.GRAB if hover >= 0 else Cursor.CROSSHAIR)
            self.surface.request_redraw()

    def pointer_up(self) -> None:
        """End the drag, wherever the pointer was released."""
        if not self.is_dragging:
            return
        self.dragging_index = NO_INDEX
        self._set_cursor(Cursor.CROSSHAIR)
        self.surface.request_redraw()

    def context_action(self, event: PointerEvent) -> bool:
        """
        Delete the element under the pointer.

        Only acts when idle; endpoint and minimum-count rules are enforced
        by the model. Returns True if an element was removed.
        """
        if self.is_dragging:
            return False

        x, y = self.normalize(event)
        hit = self.target.hit_test(x, y)
        if hit < 0 or not self.target.delete(hit):
            return False

        self.selected_index = NO_INDEX
        self.hover_index = NO_INDEX
        self._set_cursor(Cursor.CROSSHAIR)
        self.surface.request_redraw()
        return True

    def double_click(self, event: PointerEvent) -> int:
        """Select the element under the pointer (for color picking). Returns its index."""
        x, y = self.normalize(event)
        hit = self.target.hit_test(x, y)
        if hit >= 0:
            self.selected_index = hit
            self.surface.request_redraw()
        return hit

    def set_selected_color(self, color: str) -> bool:
        """
        Recolor the selected element, when the target supports colors.

        Raises:
            ValueError: If color is not a valid hex color
        """
        recolor = getattr(self.target, "recolor", None)
        if recolor is None or not 0 <= self.selected_index < len(self.target):
            return False
        recolor(self.selected_index, color)
        self.surface.request_redraw()
        return True

    # ----- Lifecycle -----

    def reset(self) -> None:
        """Forget all transient indices (after the model was replaced)."""
        self.dragging_index = NO_INDEX
        self.hover_index = NO_INDEX
        self.selected_index = NO_INDEX
        self._set_cursor(Cursor.CROSSHAIR)

    def close(self) -> None:
        """Stop listening for pointer releases."""
        if self.input_surface is not None:
            self.input_surface.unsubscribe(self.pointer_up)
            self.input_surface = None

    def _set_cursor(self, cursor: Cursor) -> None:
        if cursor is not self.cursor:
            self.cursor = cursor
            self.surface.set_cursor(cursor)
