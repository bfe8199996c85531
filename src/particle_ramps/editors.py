"""
Curve and gradient editors.

An editor wires one model to one interaction controller and one render
surface, built from its configuration entry. The host feeds pointer events
to `editor.controller` and reads `editor.describe()` when redrawing.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Sequence

from .config.schema import CurveEditorConfig, GradientEditorConfig
from .core.curve import CurveListener, CurveModel
from .core.gradient import GradientListener, GradientModel
from .core.types import ColorStop
from .interaction.controller import CurveTarget, GradientTarget, InteractionController
from .interaction.surface import InputSurface, NullSurface, Rect, RenderSurface

logger = logging.getLogger(__name__)

# Resolution of the curve polyline handed to the render surface
PREVIEW_STEPS = 100


class Editor(ABC):
    """Shared plumbing of both editors."""

    kind = "editor"

    def __init__(self, name: str, label: str, surface: RenderSurface | None):
        self.name = name
        self.label = label
        self.surface = surface or NullSurface()
        self.controller: InteractionController

    def resize(self, width: float, height: float, left: float = 0.0, top: float = 0.0) -> None:
        """Update the surface bounds used to normalize pointer positions."""
        self.controller.bounds = Rect(left, top, width, height)

    def close(self) -> None:
        self.controller.close()

    @abstractmethod
    def output(self) -> Any:
        """What the editor hands to the particle system."""

    def describe(self) -> dict[str, Any]:
        """Everything a render surface needs to draw this editor."""
        controller = self.controller
        return {
            "editor": self.name,
            "kind": self.kind,
            "label": self.label,
            "hover_index": controller.hover_index,
            "dragging_index": controller.dragging_index,
            "selected_index": controller.selected_index,
            "cursor": controller.cursor.value,
        }

    def _replaced(self) -> None:
        # Indices into the old sequence are meaningless now
        self.controller.reset()
        logger.debug("Replaced contents of %s editor %r", self.kind, self.name)
        self.surface.request_redraw()


class CurveEditor(Editor):
    """Edits a value-over-time curve; outputs `samples` floats."""

    kind = "curve"

    def __init__(
        self,
        config: CurveEditorConfig,
        on_change: CurveListener | None = None,
        surface: RenderSurface | None = None,
        input_surface: InputSurface | None = None,
    ):
        super().__init__(config.name, config.label, surface)
        self.color = config.color
        self.model = CurveModel(config.default_points, samples=config.samples, on_change=on_change)
        self.controller = InteractionController(
            CurveTarget(self.model),
            surface=self.surface,
            input_surface=input_surface,
            bounds=Rect(0, 0, config.width, config.height),
        )

    def get_sampled_values(self, count: int | None = None) -> list[float]:
        return self.model.get_sampled_values(count)

    def output(self) -> list[float]:
        return self.get_sampled_values()

    def set_points(self, points: Iterable) -> None:
        """Replace the points and redraw. Does not notify."""
        self.model.set_points(points)
        self._replaced()

    def from_sampled_array(self, values: Sequence[float]) -> None:
        """Rebuild the points from a sampled array and redraw. Does not notify."""
        self.model.from_sampled_array(values)
        self._replaced()

    def describe(self) -> dict[str, Any]:
        state = super().describe()
        state["color"] = self.color
        state["points"] = self.model.to_list()
        state["preview"] = self.model.get_sampled_values(PREVIEW_STEPS + 1)
        return state


class GradientEditor(Editor):
    """Edits a color gradient; outputs the sorted stop list."""

    kind = "gradient"

    def __init__(
        self,
        config: GradientEditorConfig,
        on_change: GradientListener | None = None,
        surface: RenderSurface | None = None,
        input_surface: InputSurface | None = None,
    ):
        super().__init__(config.name, config.label, surface)
        self.model = GradientModel(config.default_stops, on_change=on_change)
        self.controller = InteractionController(
            GradientTarget(self.model, insert_band=config.insert_band),
            surface=self.surface,
            input_surface=input_surface,
            bounds=Rect(0, 0, config.width, config.height),
        )

    def get_stops(self) -> list[ColorStop]:
        return self.model.get_stops()

    def output(self) -> list[ColorStop]:
        return self.get_stops()

    def set_stops(self, stops: Iterable) -> None:
        """Replace the stops and redraw. Does not notify."""
        self.model.set_stops(stops)
        self._replaced()

    def selected_color(self) -> str | None:
        index = self.controller.selected_index
        if 0 <= index < len(self.model):
            return self.model.stops[index].color
        return None

    def describe(self) -> dict[str, Any]:
        state = super().describe()
        state["stops"] = self.model.to_list()
        return state
