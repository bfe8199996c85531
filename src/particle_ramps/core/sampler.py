"""
Sampling between curves and fixed-length arrays.

The renderer consumes curves as lookup tables: `samples` values taken at
evenly spaced times from 0.0 to 1.0 inclusive. Presets store those same
tables, so a curve can also be rebuilt (approximately) from one.
"""

import math
from typing import Callable, Sequence

from .types import ControlPoint

DEFAULT_SAMPLES = 32

# A reconstructed curve keeps roughly this many points
RECONSTRUCT_DIVISOR = 6


def sample_times(count: int) -> list[float]:
    """
    Evenly spaced times covering [0, 1] with both ends included.

    Raises:
        ValueError: If count < 2
    """
    if count < 2:
        raise ValueError(f"Sample count must be at least 2, got {count}")
    return [i / (count - 1) for i in range(count)]


def sample(evaluate: Callable[[float], float], count: int = DEFAULT_SAMPLES) -> list[float]:
    """Evaluate a function of normalized time at `count` evenly spaced times."""
    return [evaluate(t) for t in sample_times(count)]


def reconstruct_points(values: Sequence[float]) -> list[ControlPoint]:
    """
    Rebuild a small set of control points from a sampled array.

    Every ceil(len/6)-th sample becomes a point at x = i / (len - 1); points
    at x = 0 and x = 1 are added from the first and last samples when the
    stride skipped them. The result approximates the sampled curve, it does
    not recover the points that produced it.

    Raises:
        ValueError: If values is empty
    """
    n = len(values)
    if n == 0:
        raise ValueError("Cannot rebuild a curve from an empty array")
    if n == 1:
        v = float(values[0])
        return [ControlPoint(0.0, v), ControlPoint(1.0, v)]

    step = max(1, math.ceil(n / RECONSTRUCT_DIVISOR))
    points = [ControlPoint(i / (n - 1), float(values[i])) for i in range(0, n, step)]

    # Always include first and last
    if points[0].x != 0:
        points.insert(0, ControlPoint(0.0, float(values[0])))
    if points[-1].x != 1:
        points.append(ControlPoint(1.0, float(values[-1])))

    points.sort(key=lambda p: p.x)
    return points
