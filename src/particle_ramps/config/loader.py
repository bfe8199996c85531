"""Configuration file loading and saving."""

from pathlib import Path
from typing import Any
import yaml

from ..core.color import normalize_hex
from ..core.types import ColorStop, ControlPoint
from .schema import (
    RampEditorConfig,
    ServerConfig,
    CurveEditorConfig,
    GradientEditorConfig,
)


def load_config(config_path: Path) -> RampEditorConfig:
    """
    Load configuration from YAML file.

    Raises:
        ValueError: If an editor entry is invalid (missing name, bad color)
    """
    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    # Parse server config
    server_data = data.get("server") or {}
    server = ServerConfig(
        host=server_data.get("host", "localhost"),
        port=server_data.get("port", 8765),
    )

    # Parse curve editors
    curves = []
    for curve_data in data.get("curves", []):
        curve = CurveEditorConfig(
            name=_require_name(curve_data, "curve"),
            label=curve_data.get("label", "Curve"),
            color=normalize_hex(curve_data.get("color", "#7c6cf0")),
            width=curve_data.get("width", 296),
            height=curve_data.get("height", 100),
            samples=curve_data.get("samples", 32),
        )
        if "points" in curve_data:
            curve.default_points = [ControlPoint.from_value(p) for p in curve_data["points"]]
        curves.append(curve)

    # Parse gradient editors
    gradients = []
    for gradient_data in data.get("gradients", []):
        gradient = GradientEditorConfig(
            name=_require_name(gradient_data, "gradient"),
            label=gradient_data.get("label", "Gradient"),
            width=gradient_data.get("width", 296),
            height=gradient_data.get("height", 50),
            insert_band=gradient_data.get("insert_band", 1.0),
        )
        if "stops" in gradient_data:
            gradient.default_stops = [ColorStop.from_value(s) for s in gradient_data["stops"]]
        gradients.append(gradient)

    # Use defaults if no editors specified
    if not curves and not gradients:
        defaults = RampEditorConfig.with_defaults()
        curves, gradients = defaults.curves, defaults.gradients

    return RampEditorConfig(
        server=server,
        curves=curves,
        gradients=gradients,
        log_level=data.get("log_level", "INFO"),
    )


def _require_name(entry: dict, kind: str) -> str:
    name = entry.get("name")
    if not name:
        raise ValueError(f"Every {kind} editor needs a 'name'")
    return str(name)


def save_config(config: RampEditorConfig, config_path: Path) -> None:
    """Save configuration to YAML file."""
    data: dict[str, Any] = {
        "server": {
            "host": config.server.host,
            "port": config.server.port,
        },
        "curves": [
            {
                "name": c.name,
                "label": c.label,
                "color": c.color,
                "width": c.width,
                "height": c.height,
                "samples": c.samples,
                "points": [p.to_dict() for p in c.default_points],
            }
            for c in config.curves
        ],
        "gradients": [
            {
                "name": g.name,
                "label": g.label,
                "width": g.width,
                "height": g.height,
                "insert_band": g.insert_band,
                "stops": [s.to_dict() for s in g.default_stops],
            }
            for g in config.gradients
        ],
        "log_level": config.log_level,
    }

    with open(config_path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
