"""
Core data structures for the ramp editors.

This module contains the fundamental types shared by the models and the
interaction layer:
- ControlPoint: a (x, y) pair of the value-over-time curve
- ColorStop: a (pos, color) pair of the color gradient
- RGB: 8-bit color channels
- PointerButton / Cursor: pointer input and cursor hints for the host UI
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple


class RGB(NamedTuple):
    """
    8-bit RGB color.

    All channels are integers in the range 0-255.
    """
    r: int
    g: int
    b: int


@dataclass
class ControlPoint:
    """
    A control point of a curve.

    Both coordinates are normalized: x is the time along the curve,
    y the value at that time. Points are mutated in place while dragged,
    so they are looked up by identity rather than by value.
    """
    x: float
    y: float

    def copy(self) -> "ControlPoint":
        return ControlPoint(self.x, self.y)

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_value(cls, value: Any) -> "ControlPoint":
        """Build a point from a ControlPoint, a {"x", "y"} mapping or a pair."""
        if isinstance(value, ControlPoint):
            return value.copy()
        if isinstance(value, dict):
            return cls(float(value["x"]), float(value["y"]))
        x, y = value
        return cls(float(x), float(y))


@dataclass
class ColorStop:
    """
    A color stop of a gradient.

    pos is normalized to 0.0-1.0, color is a "#rrggbb" hex string.
    """
    pos: float
    color: str

    def copy(self) -> "ColorStop":
        return ColorStop(self.pos, self.color)

    def to_dict(self) -> dict[str, Any]:
        return {"pos": self.pos, "color": self.color}

    @classmethod
    def from_value(cls, value: Any) -> "ColorStop":
        """Build a stop from a ColorStop, a {"pos", "color"} mapping or a pair."""
        from .color import normalize_hex

        if isinstance(value, ColorStop):
            return cls(value.pos, normalize_hex(value.color))
        if isinstance(value, dict):
            return cls(float(value["pos"]), normalize_hex(value["color"]))
        pos, color = value
        return cls(float(pos), normalize_hex(color))


class PointerButton(Enum):
    """Which pointer action produced an event."""

    PRIMARY = "primary"
    SECONDARY = "secondary"  # Right-click / long-press context action


class Cursor(Enum):
    """Cursor hint published to the render surface."""

    CROSSHAIR = "crosshair"
    GRAB = "grab"
    GRABBING = "grabbing"
