"""Configuration dataclasses."""

from dataclasses import dataclass, field

from ..core.curve import default_points
from ..core.gradient import default_stops
from ..core.sampler import DEFAULT_SAMPLES
from ..core.types import ColorStop, ControlPoint


@dataclass
class CurveEditorConfig:
    """A value-over-time curve editor."""
    name: str
    label: str = "Curve"
    color: str = "#7c6cf0"  # Accent color, cosmetic only
    width: int = 296
    height: int = 100
    samples: int = DEFAULT_SAMPLES
    default_points: list[ControlPoint] = field(default_factory=default_points)


@dataclass
class GradientEditorConfig:
    """A color gradient editor."""
    name: str
    label: str = "Gradient"
    width: int = 296
    height: int = 50
    insert_band: float = 1.0  # Share of the height (from top) where clicks add stops
    default_stops: list[ColorStop] = field(default_factory=default_stops)


@dataclass
class ServerConfig:
    """WebSocket host configuration."""
    host: str = "localhost"
    port: int = 8765


@dataclass
class RampEditorConfig:
    """Main application configuration."""
    server: ServerConfig = field(default_factory=ServerConfig)
    curves: list[CurveEditorConfig] = field(default_factory=list)
    gradients: list[GradientEditorConfig] = field(default_factory=list)
    log_level: str = "INFO"

    def editor_names(self) -> list[str]:
        """Names of all configured editors, curves first."""
        return [c.name for c in self.curves] + [g.name for g in self.gradients]

    @classmethod
    def with_defaults(cls) -> "RampEditorConfig":
        """Size and opacity curves plus a fire color ramp."""
        return cls(
            curves=[
                CurveEditorConfig(
                    name="size",
                    label="Size",
                    color="#4ecdc4",
                    default_points=[
                        ControlPoint(0.0, 0.2),
                        ControlPoint(0.2, 0.9),
                        ControlPoint(0.5, 1.0),
                        ControlPoint(0.8, 0.6),
                        ControlPoint(1.0, 0.0),
                    ],
                ),
                CurveEditorConfig(
                    name="opacity",
                    label="Opacity",
                    color="#ffe66d",
                    default_points=[
                        ControlPoint(0.0, 0.0),
                        ControlPoint(0.1, 1.0),
                        ControlPoint(0.5, 0.9),
                        ControlPoint(0.8, 0.4),
                        ControlPoint(1.0, 0.0),
                    ],
                ),
            ],
            gradients=[
                GradientEditorConfig(
                    name="color",
                    label="Color",
                    default_stops=[
                        ColorStop(0.0, "#ffffff"),
                        ColorStop(0.3, "#ffaa33"),
                        ColorStop(0.6, "#ff4400"),
                        ColorStop(1.0, "#110000"),
                    ],
                ),
            ],
        )
