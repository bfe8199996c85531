"""
Particle ramps: curve and gradient authoring for particle renderers.

Usage:
    from particle_ramps import CurveModel, GradientModel

    size = CurveModel(on_change=renderer.set_size_curve)
    size.insert_point(0.3, 0.7)       # Notifies with 32 samples
    size.from_sampled_array(preset)   # Does not notify

    color = GradientModel(on_change=renderer.set_gradient)
    color.evaluate_color_at(0.25)     # "#ffb27f"
"""

from .core import (
    RGB,
    ControlPoint,
    ColorStop,
    PointerButton,
    Cursor,
    CurveModel,
    GradientModel,
    DEFAULT_SAMPLES,
    reconstruct_points,
)
from .interaction import (
    InputSurface,
    NullSurface,
    PointerEvent,
    Rect,
    RenderSurface,
    CurveTarget,
    GradientTarget,
    DragState,
    InteractionController,
)
from .editors import CurveEditor, GradientEditor
from .config import (
    RampEditorConfig,
    CurveEditorConfig,
    GradientEditorConfig,
    load_config,
    save_config,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "RGB",
    "ControlPoint",
    "ColorStop",
    "PointerButton",
    "Cursor",
    "CurveModel",
    "GradientModel",
    "DEFAULT_SAMPLES",
    "reconstruct_points",
    # Interaction
    "InputSurface",
    "NullSurface",
    "PointerEvent",
    "Rect",
    "RenderSurface",
    "CurveTarget",
    "GradientTarget",
    "DragState",
    "InteractionController",
    # Editors
    "CurveEditor",
    "GradientEditor",
    # Config
    "RampEditorConfig",
    "CurveEditorConfig",
    "GradientEditorConfig",
    "load_config",
    "save_config",
]
