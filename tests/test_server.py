import asyncio
import json

import pytest

from particle_ramps.config.schema import RampEditorConfig
from particle_ramps.server.server import EditorServer
from particle_ramps.server.session import EditorSession


@pytest.fixture
def session():
    s = EditorSession(RampEditorConfig.with_defaults())
    yield s
    s.close()


def _types(messages):
    return [m["type"] for m in messages]


def test_session_builds_editors(session):
    assert list(session.editors) == ["size", "opacity", "color"]
    assert len(session.input_surface) == 3


def test_duplicate_editor_names_rejected():
    config = RampEditorConfig.with_defaults()
    config.curves[1].name = "size"
    with pytest.raises(ValueError):
        EditorSession(config)


def test_pointer_down_on_empty_space_emits_change_and_render(session):
    messages = session.dispatch({"type": "pointer_down", "editor": "size", "x": 89, "y": 70})

    assert _types(messages) == ["change", "render"]
    change = messages[0]
    assert change["editor"] == "size"
    assert len(change["output"]) == 32
    assert messages[1]["state"]["dragging_index"] >= 0


def test_drag_and_global_release(session):
    # Size curve point (0.2, 0.9) on the default 296x100 surface
    session.dispatch({"type": "pointer_down", "editor": "size", "x": 59.2, "y": 10})
    moved = session.dispatch({"type": "pointer_move", "editor": "size", "x": 100, "y": 50})
    assert _types(moved) == ["change", "render"]

    released = session.dispatch({"type": "pointer_up"})
    assert _types(released) == ["render"]
    assert released[0]["state"]["dragging_index"] == -1

    hover = session.dispatch({"type": "pointer_move", "editor": "size", "x": 200, "y": 90})
    assert "change" not in _types(hover)


def test_bounds_in_pointer_message(session):
    messages = session.dispatch({
        "type": "pointer_down",
        "editor": "color",
        "x": 20,
        "y": 5,
        "bounds": {"width": 100, "height": 40},
    })
    stops = messages[0]["output"]
    assert [s["pos"] for s in stops] == [0.0, 0.2, 0.3, 0.6, 1.0]


def test_context_menu_deletes(session):
    messages = session.dispatch({"type": "context_menu", "editor": "color", "x": 88.8, "y": 5})
    assert _types(messages) == ["change", "render"]
    assert len(messages[0]["output"]) == 3

    refused = session.dispatch({"type": "context_menu", "editor": "color", "x": 0, "y": 5})
    assert refused == []


def test_secondary_button_pointer_down_deletes(session):
    messages = session.dispatch({
        "type": "pointer_down", "editor": "color", "x": 88.8, "y": 5, "button": "secondary",
    })
    assert len(messages[0]["output"]) == 3


def test_double_click_and_recolor(session):
    picked = session.dispatch({"type": "double_click", "editor": "color", "x": 88.8, "y": 5})
    assert picked[0] == {"type": "pick_color", "editor": "color", "index": 1, "color": "#ffaa33"}

    recolored = session.dispatch({"type": "set_stop_color", "editor": "color", "color": "#00ff00"})
    assert recolored[0]["output"][1] == {"pos": 0.3, "color": "#00ff00"}


def test_programmatic_messages_do_not_emit_change(session):
    messages = session.dispatch({"type": "from_sampled_array", "editor": "size", "values": [0.5] * 32})
    messages += session.dispatch({"type": "set_points", "editor": "opacity", "points": [[0, 0], [1, 1]]})
    messages += session.dispatch({
        "type": "set_stops", "editor": "color", "stops": [{"pos": 0, "color": "#000"}, {"pos": 1, "color": "#fff"}],
    })
    assert _types(messages) == ["render", "render", "render"]
    assert session.editors["size"].output() == pytest.approx([0.5] * 32)


@pytest.mark.parametrize("data, fragment", [
    ({"type": "explode"}, "Unknown message type"),
    ({"type": "pointer_down", "editor": "nope", "x": 0, "y": 0}, "Unknown editor"),
    ({"type": "pointer_down", "editor": "size", "x": 0}, "y"),
    ({"type": "set_stops", "editor": "size", "stops": []}, "not a gradient"),
    ({"type": "set_points", "editor": "color", "points": []}, "not a curve"),
    ({"type": "set_stop_color", "editor": "color", "color": "#zzz"}, "Invalid hex"),
    ({"type": "pointer_down", "editor": "size", "x": 0, "y": 0, "button": "middle"}, "middle"),
])
def test_errors_are_reported(session, data, fragment):
    messages = session.dispatch(data)
    assert _types(messages) == ["error"]
    assert fragment in messages[0]["message"]


def test_get_state(session):
    state = session.dispatch({"type": "get_state"})[0]
    assert state["type"] == "state"
    assert [e["editor"] for e in state["editors"]] == ["size", "opacity", "color"]
    assert len(state["outputs"]["opacity"]) == 32
    assert state["outputs"]["color"][0] == {"pos": 0.0, "color": "#ffffff"}
    json.dumps(state)


def test_resize(session):
    session.dispatch({"type": "resize", "editor": "color", "width": 10, "height": 10})
    messages = session.dispatch({"type": "pointer_down", "editor": "color", "x": 2, "y": 1})
    assert [s["pos"] for s in messages[0]["output"]][1] == pytest.approx(0.2)


class FakeSocket:
    def __init__(self):
        self.sent = []
        self.closed = False

    async def send_json(self, data):
        self.sent.append(data)


def test_server_routes_private_and_broadcast_messages():
    server = EditorServer(RampEditorConfig.with_defaults())
    sender, other = FakeSocket(), FakeSocket()
    server._clients.update({sender, other})

    async def scenario():
        await server._handle_text("not json", sender)
        await server._handle_text(json.dumps({"type": "get_state"}), sender)
        await server._handle_text(
            json.dumps({"type": "pointer_down", "editor": "size", "x": 89, "y": 70}), sender
        )

    asyncio.run(scenario())

    assert _types(sender.sent) == ["error", "state", "change", "render"]
    assert _types(other.sent) == ["change", "render"]


def test_server_defaults_from_config():
    config = RampEditorConfig.with_defaults()
    config.server.port = 9999
    server = EditorServer(config, host="0.0.0.0")
    assert (server.host, server.port) == ("0.0.0.0", 9999)
    app = server.create_app()
    assert any(r.resource.canonical == "/ws" for r in app.router.routes())
