"""Editor server command.

Serves the curve and gradient editors to a browser over WebSocket.
Run as: particle-ramps --config ramps.yaml
"""

import argparse
import asyncio
from pathlib import Path

from ..config import RampEditorConfig, load_config
from ..logging_config import setup_logging
from ..server import EditorServer


def build_config(args: argparse.Namespace) -> RampEditorConfig:
    """Load the config file if given, otherwise use the built-in editors."""
    if args.config is not None:
        return load_config(args.config)
    return RampEditorConfig.with_defaults()


async def run_server(server: EditorServer) -> None:
    """Run the editor server until cancelled."""
    await server.start()

    # Keep running until interrupted
    try:
        while True:
            await asyncio.sleep(1)
    except asyncio.CancelledError:
        pass
    finally:
        await server.stop()


def main():
    """Entry point for particle-ramps command."""
    parser = argparse.ArgumentParser(
        description="Curve and gradient editors for particle ramps"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config file (default: built-in size/opacity/color editors)",
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Host to bind to (default: from config, localhost)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: from config, 8765)",
    )
    parser.add_argument(
        "--static-dir",
        type=Path,
        default=None,
        help="Directory with the browser UI (index.html)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: from config, INFO)",
    )

    args = parser.parse_args()

    config = build_config(args)
    setup_logging(args.log_level or config.log_level)

    server = EditorServer(
        config,
        host=args.host,
        port=args.port,
        static_dir=args.static_dir,
    )

    print("=" * 60)
    print("  Particle Ramps Editor")
    print("=" * 60)
    print()
    print(f"  WebSocket:  ws://{server.host}:{server.port}/ws")
    print(f"  Editors:    {', '.join(config.editor_names())}")
    print()
    print("=" * 60)

    try:
        asyncio.run(run_server(server))
    except KeyboardInterrupt:
        print("\nShutting down...")


if __name__ == "__main__":
    main()
