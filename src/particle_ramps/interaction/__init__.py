"""Pointer interaction for the ramp editors."""

from .surface import InputSurface, NullSurface, PointerEvent, Rect, RenderSurface
from .controller import (
    NO_INDEX,
    CurveTarget,
    DragState,
    GradientTarget,
    HitTarget,
    InteractionController,
)

__all__ = [
    "InputSurface",
    "NullSurface",
    "PointerEvent",
    "Rect",
    "RenderSurface",
    "NO_INDEX",
    "CurveTarget",
    "DragState",
    "GradientTarget",
    "HitTarget",
    "InteractionController",
]
