"""WebSocket host for the ramp editors.

A browser canvas sends pointer events over /ws; the server feeds them to an
EditorSession and broadcasts the resulting change/render messages to every
connected client. Pointer releases are sent without an editor, so a drag
ends wherever the pointer is released.
"""

import json
import logging
from pathlib import Path
from typing import Any

from aiohttp import web, WSMsgType

from ..config.schema import RampEditorConfig
from .session import PRIVATE_TYPES, EditorSession

logger = logging.getLogger(__name__)

# Default port for the editor server
DEFAULT_PORT = 8765


class EditorServer:
    """Serves the editor session over WebSocket, plus an optional static UI."""

    def __init__(
        self,
        config: RampEditorConfig,
        host: str | None = None,
        port: int | None = None,
        static_dir: Path | None = None,
    ):
        self.config = config
        self.host = host or config.server.host
        self.port = port or config.server.port
        self.static_dir = static_dir
        self.session = EditorSession(config)

        self._app: web.Application | None = None
        self._runner: web.AppRunner | None = None
        self._clients: set[web.WebSocketResponse] = set()

    def create_app(self) -> web.Application:
        """Build the aiohttp application (routes only, not started)."""
        app = web.Application()

        # WebSocket endpoint
        app.router.add_get("/ws", self._handle_websocket)

        # Static files (if available)
        if self.static_dir and self.static_dir.exists():
            assets = self.static_dir / "assets"
            if assets.exists():
                app.router.add_static("/assets", assets)
            logger.info("Serving static files from %s", self.static_dir)
        else:
            logger.info("No static files found - WebSocket only")
        app.router.add_get("/", self._handle_index)

        return app

    async def _handle_websocket(self, request: web.Request) -> web.WebSocketResponse:
        """Handle incoming WebSocket connection."""
        ws = web.WebSocketResponse()
        await ws.prepare(request)

        self._clients.add(ws)
        logger.info("Client connected (%d total)", len(self._clients))

        try:
            # Send initial state
            await ws.send_json(self.session.get_state())

            async for msg in ws:
                if msg.type == WSMsgType.TEXT:
                    await self._handle_text(msg.data, ws)
                elif msg.type == WSMsgType.ERROR:
                    logger.warning("WebSocket error: %s", ws.exception())
        finally:
            self._clients.discard(ws)
            logger.info("Client disconnected (%d total)", len(self._clients))

        return ws

    async def _handle_text(self, text: str, ws: web.WebSocketResponse) -> None:
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            await ws.send_json({"type": "error", "message": "Invalid JSON"})
            return
        if not isinstance(data, dict):
            await ws.send_json({"type": "error", "message": "Expected a JSON object"})
            return

        for message in self.session.dispatch(data):
            if message["type"] in PRIVATE_TYPES:
                await ws.send_json(message)
            else:
                await self._broadcast(message)

    async def _broadcast(self, message: dict[str, Any]) -> None:
        """Send a message to all connected clients."""
        for client in list(self._clients):
            if client.closed:
                self._clients.discard(client)
                continue
            try:
                await client.send_json(message)
            except ConnectionResetError:
                self._clients.discard(client)

    async def _handle_index(self, request: web.Request) -> web.StreamResponse:
        """Serve index.html."""
        if self.static_dir is None:
            return web.Response(
                text="Editor UI not configured. Start with --static-dir",
                status=503,
            )
        index_path = self.static_dir / "index.html"
        if not index_path.exists():
            return web.Response(
                text=f"index.html not found in {self.static_dir}",
                status=503,
            )
        return web.FileResponse(index_path)

    async def start(self) -> None:
        """Start the editor server."""
        self._app = self.create_app()
        self._runner = web.AppRunner(self._app)
        await self._runner.setup()

        site = web.TCPSite(self._runner, self.host, self.port)
        await site.start()

        logger.info("Editor server running on http://%s:%d", self.host, self.port)

    async def stop(self) -> None:
        """Stop the server."""
        for client in list(self._clients):
            await client.close()
        self._clients.clear()
        if self._runner:
            await self._runner.cleanup()
        self.session.close()
