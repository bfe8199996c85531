"""WebSocket host for browser-based editing."""

from .session import EditorSession, SessionSurface, encode_output
from .server import DEFAULT_PORT, EditorServer

__all__ = [
    "EditorSession",
    "SessionSurface",
    "encode_output",
    "DEFAULT_PORT",
    "EditorServer",
]
