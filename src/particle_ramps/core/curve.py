"""
Value-over-time curve made of control points.

Between two neighbouring points the curve follows a smoothstep ease
(3s^2 - 2s^3), so it has zero slope at every control point and never
overshoots, whatever the point placement.
"""

import logging
from typing import Callable, Iterable, Sequence

from .sampler import DEFAULT_SAMPLES, reconstruct_points, sample
from .sequence import INTERIOR_MAX, INTERIOR_MIN, PositionedSequence, clamp
from .types import ControlPoint

logger = logging.getLogger(__name__)

CurveListener = Callable[[list[float]], None]


def default_points() -> list[ControlPoint]:
    """The rise-and-fall curve a new editor starts with."""
    return [
        ControlPoint(0.0, 0.0),
        ControlPoint(0.2, 0.8),
        ControlPoint(0.5, 1.0),
        ControlPoint(0.8, 0.6),
        ControlPoint(1.0, 0.0),
    ]


def smoothstep(s: float) -> float:
    return s * s * (3 - 2 * s)


class CurveModel:
    """
    Ordered control points evaluated as a smooth 1-D function of time.

    Interactive mutations (insert, move, delete) re-sample the curve and
    notify the listener once each. Programmatic replacement (set_points,
    from_sampled_array) never notifies, so a preset system can push state
    in without hearing it echoed back.
    """

    def __init__(
        self,
        points: Iterable | None = None,
        samples: int = DEFAULT_SAMPLES,
        on_change: CurveListener | None = None,
    ):
        if samples < 2:
            raise ValueError(f"Sample count must be at least 2, got {samples}")
        self.samples = samples
        self.on_change = on_change
        source = default_points() if points is None else points
        self._points: PositionedSequence[ControlPoint] = PositionedSequence(
            (ControlPoint.from_value(p) for p in source), key="x"
        )

    @property
    def points(self) -> list[ControlPoint]:
        """The owned, sorted point list."""
        return self._points.items

    def __len__(self) -> int:
        return len(self._points)

    # ----- Evaluation -----

    def evaluate_at(self, t: float) -> float:
        """
        Curve value at normalized time t.

        Holds the end values outside the first/last point and returns 0.0
        when there are fewer than two points.
        """
        points = self._points.items
        if len(points) < 2:
            return 0.0

        if t <= points[0].x:
            return points[0].y
        if t >= points[-1].x:
            return points[-1].y

        for p0, p1 in zip(points, points[1:]):
            if p0.x <= t <= p1.x:
                span = p1.x - p0.x
                if span <= 0:
                    return p0.y
                s = smoothstep((t - p0.x) / span)
                return p0.y + (p1.y - p0.y) * s

        return 0.0

    def get_sampled_values(self, count: int | None = None) -> list[float]:
        """Sample the curve at `count` evenly spaced times (default: self.samples)."""
        return sample(self.evaluate_at, self.samples if count is None else count)

    # ----- Interactive mutations -----

    def insert_point(self, x: float, y: float) -> int:
        """
        Add a point and return its index in the sorted sequence.

        x is kept strictly between the endpoints, y within [0, 1].
        """
        point = ControlPoint(clamp(x, INTERIOR_MIN, INTERIOR_MAX), clamp(y))
        index = self._points.insert(point)
        logger.debug("Inserted point %s at index %d", point, index)
        self._emit_change()
        return index

    def move_point(self, index: int, x: float, y: float) -> int:
        """
        Move the point at index and return its index after re-sorting.

        The first point stays at x=0 and the last at x=1.

        Raises:
            IndexError: If index is out of range
        """
        point = self._points[index]
        new_index = self._points.move(index, x)
        point.y = clamp(y)
        self._emit_change()
        return new_index

    def delete_point(self, index: int) -> bool:
        """Remove an interior point. Endpoints are left alone (returns False)."""
        if not self._points.delete(index):
            return False
        logger.debug("Deleted point at index %d", index)
        self._emit_change()
        return True

    # ----- Programmatic replacement -----

    def set_points(self, points: Iterable) -> None:
        """Replace all points wholesale. Does not notify."""
        self._points.replace(ControlPoint.from_value(p) for p in points)

    def from_sampled_array(self, values: Sequence[float]) -> None:
        """
        Rebuild the points from a sampled array. Lossy; does not notify.

        Raises:
            ValueError: If values is empty
        """
        self._points.replace(reconstruct_points(values))
        logger.debug("Rebuilt %d points from %d samples", len(self._points), len(values))

    def to_list(self) -> list[dict[str, float]]:
        return [p.to_dict() for p in self._points]

    def _emit_change(self) -> None:
        if self.on_change is not None:
            self.on_change(self.get_sampled_values())
