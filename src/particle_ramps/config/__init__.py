"""Configuration schema and loading."""

from .schema import (
    RampEditorConfig,
    ServerConfig,
    CurveEditorConfig,
    GradientEditorConfig,
)
from .loader import load_config, save_config

__all__ = [
    "RampEditorConfig",
    "ServerConfig",
    "CurveEditorConfig",
    "GradientEditorConfig",
    "load_config",
    "save_config",
]
