"""
CLI entry points for particle-ramps.

Contains the main executable scripts:
- serve: WebSocket host for the curve and gradient editors
"""

from .serve import main as serve_main

__all__ = [
    "serve_main",
]
