"""
Core models for curve and gradient authoring.

Exports the data types, the two models and the sampling helpers.
"""

from .types import RGB, ControlPoint, ColorStop, PointerButton, Cursor
from .color import normalize_hex, hex_to_rgb, rgb_to_hex, lerp_rgb, lerp_hex
from .sequence import PositionedSequence
from .sampler import DEFAULT_SAMPLES, sample, reconstruct_points
from .curve import CurveModel, default_points, smoothstep
from .gradient import GradientModel, default_stops

__all__ = [
    # Types
    "RGB",
    "ControlPoint",
    "ColorStop",
    "PointerButton",
    "Cursor",
    # Color
    "normalize_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "lerp_rgb",
    "lerp_hex",
    # Models
    "PositionedSequence",
    "CurveModel",
    "GradientModel",
    "default_points",
    "default_stops",
    "smoothstep",
    # Sampling
    "DEFAULT_SAMPLES",
    "sample",
    "reconstruct_points",
]
