"""
Multi-stop color gradient.

Colors between two stops are blended linearly per RGB channel. Unlike the
curve there is no easing: ramps change at a steady, predictable rate.
"""

import logging
from typing import Callable, Iterable

from .color import DEFAULT_COLOR, lerp_hex, normalize_hex
from .sequence import INTERIOR_MAX, INTERIOR_MIN, PositionedSequence, clamp
from .types import ColorStop

logger = logging.getLogger(__name__)

GradientListener = Callable[[list[ColorStop]], None]


def default_stops() -> list[ColorStop]:
    """White to orange to black, the fire ramp a new editor starts with."""
    return [
        ColorStop(0.0, "#ffffff"),
        ColorStop(0.5, "#ff6600"),
        ColorStop(1.0, "#000000"),
    ]


class GradientModel:
    """
    Ordered color stops evaluated as a 1-D color ramp.

    The listener receives the sorted stop list (not a sampled array); the
    consumer picks its own sampling resolution.
    """

    def __init__(
        self,
        stops: Iterable | None = None,
        on_change: GradientListener | None = None,
    ):
        self.on_change = on_change
        source = default_stops() if stops is None else stops
        self._stops: PositionedSequence[ColorStop] = PositionedSequence(
            (ColorStop.from_value(s) for s in source), key="pos"
        )

    @property
    def stops(self) -> list[ColorStop]:
        """The owned, sorted stop list."""
        return self._stops.items

    def __len__(self) -> int:
        return len(self._stops)

    # ----- Evaluation -----

    def evaluate_color_at(self, t: float) -> str:
        """
        Gradient color at normalized position t as "#rrggbb".

        Holds the end colors outside the first/last stop and returns
        DEFAULT_COLOR when there are fewer than two stops.
        """
        stops = self._stops.items
        if len(stops) < 2:
            return DEFAULT_COLOR

        if t <= stops[0].pos:
            return stops[0].color
        if t >= stops[-1].pos:
            return stops[-1].color

        for s0, s1 in zip(stops, stops[1:]):
            if s0.pos <= t <= s1.pos:
                span = s1.pos - s0.pos
                if span <= 0:
                    return s0.color
                return lerp_hex(s0.color, s1.color, (t - s0.pos) / span)

        return DEFAULT_COLOR

    def get_stops(self) -> list[ColorStop]:
        """Sorted copies of the stops."""
        return [s.copy() for s in self._stops]

    # ----- Interactive mutations -----

    def insert_stop(self, pos: float) -> int:
        """
        Add a stop and return its index in the sorted sequence.

        The new stop takes the color the gradient already has at pos, so
        inserting never changes how the ramp looks.
        """
        pos = clamp(pos, INTERIOR_MIN, INTERIOR_MAX)
        stop = ColorStop(pos, self.evaluate_color_at(pos))
        index = self._stops.insert(stop)
        logger.debug("Inserted stop %s at index %d", stop, index)
        self._emit_change()
        return index

    def move_stop(self, index: int, pos: float) -> int:
        """
        Move the stop at index and return its index after re-sorting.

        Raises:
            IndexError: If index is out of range
        """
        new_index = self._stops.move(index, pos)
        self._emit_change()
        return new_index

    def delete_stop(self, index: int) -> bool:
        """Remove an interior stop, keeping at least two. Returns False if refused."""
        if not self._stops.delete(index):
            return False
        logger.debug("Deleted stop at index %d", index)
        self._emit_change()
        return True

    def set_stop_color(self, index: int, color: str) -> None:
        """
        Recolor the stop at index without moving it.

        Raises:
            IndexError: If index is out of range
            ValueError: If color is not a valid hex color
        """
        self._stops[index].color = normalize_hex(color)
        self._emit_change()

    # ----- Programmatic replacement -----

    def set_stops(self, stops: Iterable) -> None:
        """Replace all stops wholesale. Does not notify."""
        self._stops.replace(ColorStop.from_value(s) for s in stops)

    def to_list(self) -> list[dict]:
        return [s.to_dict() for s in self._stops]

    def _emit_change(self) -> None:
        if self.on_change is not None:
            self.on_change(self.get_stops())
