"""Editor session shared by all WebSocket clients.

Turns JSON messages from the browser into editor calls and collects the
messages to send back. Everything runs synchronously: one message is
handled to completion before the next one is looked at.

Incoming messages (all carry "type"):
    pointer_down    editor, x, y, [button: "primary" | "secondary"], [bounds]
    pointer_move    editor, x, y, [bounds]
    pointer_up      (no editor: the release reaches every editor)
    context_menu    editor, x, y, [bounds]
    double_click    editor, x, y, [bounds]
    set_stop_color  editor, color
    set_points      editor, points
    set_stops       editor, stops
    from_sampled_array  editor, values
    resize          editor, width, height, [left, top]
    get_state

Outgoing messages:
    change      editor, output       (after every mutation)
    render      editor, state        (after anything that needs a redraw)
    pick_color  editor, index, color (after a double click on a stop)
    state       editors, outputs     (reply to get_state)
    error       message
"""

import logging
from typing import Any

from ..config.schema import RampEditorConfig
from ..core.color import normalize_hex
from ..core.types import ColorStop, Cursor, PointerButton
from ..editors import CurveEditor, Editor, GradientEditor
from ..interaction.surface import InputSurface, PointerEvent

logger = logging.getLogger(__name__)

# Replies that only concern the client that asked
PRIVATE_TYPES = frozenset({"error", "state", "pick_color"})


def encode_output(output: Any) -> Any:
    """Make an editor output JSON-friendly."""
    if isinstance(output, list):
        return [item.to_dict() if isinstance(item, ColorStop) else item for item in output]
    return output


class SessionSurface:
    """Render surface that marks its editor for a render message."""

    def __init__(self, session: "EditorSession", name: str):
        self.session = session
        self.name = name

    def request_redraw(self) -> None:
        self.session.mark_dirty(self.name)

    def set_cursor(self, cursor: Cursor) -> None:
        self.session.mark_dirty(self.name)


class EditorSession:
    """All editors of one application plus their shared input surface."""

    def __init__(self, config: RampEditorConfig):
        self.config = config
        self.input_surface = InputSurface()
        self.editors: dict[str, Editor] = {}
        self._outbox: list[dict[str, Any]] = []
        self._dirty: dict[str, None] = {}  # Ordered set

        for curve_config in config.curves:
            self._add(CurveEditor(
                curve_config,
                on_change=self._change_listener(curve_config.name),
                surface=SessionSurface(self, curve_config.name),
                input_surface=self.input_surface,
            ))
        for gradient_config in config.gradients:
            self._add(GradientEditor(
                gradient_config,
                on_change=self._change_listener(gradient_config.name),
                surface=SessionSurface(self, gradient_config.name),
                input_surface=self.input_surface,
            ))

    def _add(self, editor: Editor) -> None:
        if editor.name in self.editors:
            raise ValueError(f"Duplicate editor name: {editor.name}")
        self.editors[editor.name] = editor

    def _change_listener(self, name: str):
        def listener(output: Any) -> None:
            self._outbox.append({
                "type": "change",
                "editor": name,
                "output": encode_output(output),
            })
        return listener

    def mark_dirty(self, name: str) -> None:
        self._dirty[name] = None

    def close(self) -> None:
        for editor in self.editors.values():
            editor.close()

    # ----- Dispatch -----

    def dispatch(self, data: dict[str, Any]) -> list[dict[str, Any]]:
        """Handle one message and return the messages it produced."""
        try:
            self._handle_command(data)
        except (KeyError, ValueError, IndexError, TypeError) as e:
            logger.warning("Rejected %r message: %s", data.get("type"), e)
            self._outbox.append({"type": "error", "message": str(e)})
        return self._flush()

    def _flush(self) -> list[dict[str, Any]]:
        messages = self._outbox
        for name in self._dirty:
            messages.append({
                "type": "render",
                "editor": name,
                "state": self.editors[name].describe(),
            })
        self._outbox = []
        self._dirty = {}
        return messages

    def _editor(self, data: dict[str, Any]) -> Editor:
        name = data.get("editor")
        if name not in self.editors:
            raise KeyError(f"Unknown editor: {name}")
        return self.editors[name]

    def _pointer(self, editor: Editor, data: dict[str, Any]) -> PointerEvent:
        bounds = data.get("bounds")
        if bounds:
            editor.resize(
                float(bounds["width"]),
                float(bounds["height"]),
                float(bounds.get("left", 0.0)),
                float(bounds.get("top", 0.0)),
            )
        button = PointerButton(data.get("button", PointerButton.PRIMARY.value))
        return PointerEvent(float(data["x"]), float(data["y"]), button)

    def _handle_command(self, data: dict[str, Any]) -> None:
        cmd_type = data.get("type")

        if cmd_type == "pointer_down":
            editor = self._editor(data)
            editor.controller.pointer_down(self._pointer(editor, data))

        elif cmd_type == "pointer_move":
            editor = self._editor(data)
            editor.controller.pointer_move(self._pointer(editor, data))

        elif cmd_type == "pointer_up":
            self.input_surface.release()

        elif cmd_type == "context_menu":
            editor = self._editor(data)
            editor.controller.context_action(self._pointer(editor, data))

        elif cmd_type == "double_click":
            editor = self._editor(data)
            index = editor.controller.double_click(self._pointer(editor, data))
            if index >= 0 and isinstance(editor, GradientEditor):
                self._outbox.append({
                    "type": "pick_color",
                    "editor": editor.name,
                    "index": index,
                    "color": editor.selected_color(),
                })

        elif cmd_type == "set_stop_color":
            editor = self._editor(data)
            editor.controller.set_selected_color(normalize_hex(data["color"]))

        elif cmd_type == "set_points":
            editor = self._editor(data)
            if not isinstance(editor, CurveEditor):
                raise ValueError(f"{editor.name} is not a curve editor")
            editor.set_points(data["points"])

        elif cmd_type == "from_sampled_array":
            editor = self._editor(data)
            if not isinstance(editor, CurveEditor):
                raise ValueError(f"{editor.name} is not a curve editor")
            editor.from_sampled_array(data["values"])

        elif cmd_type == "set_stops":
            editor = self._editor(data)
            if not isinstance(editor, GradientEditor):
                raise ValueError(f"{editor.name} is not a gradient editor")
            editor.set_stops(data["stops"])

        elif cmd_type == "resize":
            editor = self._editor(data)
            editor.resize(
                float(data["width"]),
                float(data["height"]),
                float(data.get("left", 0.0)),
                float(data.get("top", 0.0)),
            )

        elif cmd_type == "get_state":
            self._outbox.append(self.get_state())

        else:
            raise ValueError(f"Unknown message type: {cmd_type}")

    def get_state(self) -> dict[str, Any]:
        """Full snapshot for a newly connected client."""
        return {
            "type": "state",
            "editors": [editor.describe() for editor in self.editors.values()],
            "outputs": {
                name: encode_output(editor.output())
                for name, editor in self.editors.items()
            },
        }
