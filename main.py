"""
main.py — Algorithm Visualizer Flask App
=========================================
JSON API that lets a browser front end edit a graph, pick an algorithm
and fetch the full Step sequence to animate.  Rendering and animation
timing stay in the browser; the server paces nothing.

Routes:
  GET  /api/algorithms          – registry metadata (labels, pseudocode, …)
  GET  /api/graph               – current graph + editor state
  POST /api/graph/sample        – load a built-in sample graph
  POST /api/graph/clear         – remove every node and edge
  POST /api/graph/mode          – switch the interaction mode
  POST /api/graph/canvas        – click on empty canvas (ADD mode)
  POST /api/graph/node          – click on a node (LINK / DELETE / START)
  POST /api/speed               – choose a speed preset
  POST /api/run                 – produce every Step of one algorithm run
  POST /api/run/finish          – the front end finished or cancelled playback

State management:
  All state is stored in the Flask session.  Each user's session holds:
    • graph    – serialised GraphModel
    • editor   – interaction mode + pending LINK source
    • speed    – selected speed preset
    • running  – True between /api/run and /api/run/finish; the graph
                 refuses edits meanwhile

Configuration (environment):
  SECRET_KEY – session signing key (random per process when unset)
  LOG_LEVEL  – logging level name, default INFO
"""

import logging
import math
import os
import secrets

from flask import Flask, jsonify, request, session

from algorithms import GRAPH, get_algorithm, list_algorithms, produce
from engine import DEFAULT_SPEED, SPEED_PRESETS, Stepper
from graph import (
    SAMPLES,
    GraphEditor,
    GraphModel,
    InvalidInputError,
    VisualizerError,
)

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


app = Flask(__name__)
app.secret_key = os.environ.get("SECRET_KEY") or secrets.token_hex(32)


# ---------------------------------------------------------------------------
# Session helpers
# ---------------------------------------------------------------------------
class SessionRun:
    """Playback handle for the model lock: a run is live until the front end reports back."""

    @property
    def is_running(self) -> bool:
        return bool(session.get("running", False))


def get_graph() -> GraphModel:
    """Deserialise graph from session, or start with an empty one."""
    graph = GraphModel.from_dict(session["graph"]) if "graph" in session else GraphModel()
    graph.bind_playback(SessionRun())
    return graph


def get_editor(graph: GraphModel) -> GraphEditor:
    editor = GraphEditor(graph)
    if "editor" in session:
        editor.restore(session["editor"])
    return editor


def save(graph: GraphModel, editor: GraphEditor = None) -> None:
    session["graph"] = graph.to_dict()
    if editor is not None:
        session["editor"] = editor.to_dict()


def graph_payload(graph: GraphModel, editor: GraphEditor) -> dict:
    return {
        "graph":   graph.to_dict(),
        "editor":  editor.to_dict(),
        "locked":  graph.is_locked,
        "speed":   session.get("speed", DEFAULT_SPEED),
    }


def body() -> dict:
    return request.get_json(silent=True) or {}


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------
@app.errorhandler(VisualizerError)
def handle_visualizer_error(err: VisualizerError):
    logger.debug("request rejected: %s", err)
    return jsonify({"error": str(err)}), 400


# ---------------------------------------------------------------------------
# API: Algorithms
# ---------------------------------------------------------------------------
@app.route("/api/algorithms", methods=["GET"])
def api_algorithms():
    return jsonify({
        "algorithms": [info.to_dict() for info in list_algorithms()],
        "speeds":     SPEED_PRESETS,
        "default_speed": DEFAULT_SPEED,
    })


# ---------------------------------------------------------------------------
# API: Graph editing
# ---------------------------------------------------------------------------
@app.route("/api/graph", methods=["GET"])
def api_graph():
    graph = get_graph()
    return jsonify(graph_payload(graph, get_editor(graph)))


@app.route("/api/graph/sample", methods=["POST"])
def api_graph_sample():
    name = body().get("name", "mst")
    if name not in SAMPLES:
        raise InvalidInputError(f"Unknown sample graph: {name}")
    graph  = get_graph()
    editor = get_editor(graph)
    nodes, edges = SAMPLES[name]
    graph.load(nodes, edges)
    editor.link_source = None
    save(graph, editor)
    return jsonify(graph_payload(graph, editor))


@app.route("/api/graph/clear", methods=["POST"])
def api_graph_clear():
    graph  = get_graph()
    editor = get_editor(graph)
    graph.clear()
    editor.link_source = None
    save(graph, editor)
    return jsonify(graph_payload(graph, editor))


@app.route("/api/graph/mode", methods=["POST"])
def api_graph_mode():
    graph  = get_graph()
    editor = get_editor(graph)
    editor.set_mode(body().get("mode", ""))
    save(graph, editor)
    return jsonify(graph_payload(graph, editor))


@app.route("/api/graph/canvas", methods=["POST"])
def api_graph_canvas():
    data = body()
    try:
        x, y = float(data["x"]), float(data["y"])
    except (KeyError, TypeError, ValueError):
        raise InvalidInputError("Canvas click needs numeric 'x' and 'y'") from None
    if not (math.isfinite(x) and math.isfinite(y)):
        raise InvalidInputError("Canvas click needs finite 'x' and 'y'")
    graph  = get_graph()
    editor = get_editor(graph)
    editor.canvas_click(x, y)
    save(graph, editor)
    return jsonify(graph_payload(graph, editor))


@app.route("/api/graph/node", methods=["POST"])
def api_graph_node():
    node_id = body().get("node_id")
    if node_id is None:
        raise InvalidInputError("Node click needs a 'node_id'")
    graph  = get_graph()
    editor = get_editor(graph)
    editor.node_click(str(node_id))
    save(graph, editor)
    return jsonify(graph_payload(graph, editor))


# ---------------------------------------------------------------------------
# API: Speed
# ---------------------------------------------------------------------------
@app.route("/api/speed", methods=["POST"])
def api_speed():
    speed = body().get("speed")
    if not isinstance(speed, str) or speed not in SPEED_PRESETS:
        raise InvalidInputError(f"Unknown speed preset: {speed!r}")
    session["speed"] = speed
    return jsonify({"speed": speed, "delay_ms": SPEED_PRESETS[speed]})


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    if SessionRun().is_running:
        logger.debug("run request ignored: playback already running")
        return jsonify({"ignored": True, "state": "running"})

    data = body()
    key  = data.get("algorithm", "")
    info = get_algorithm(key)
    if info is None:
        raise InvalidInputError(f"Unknown algorithm: {key}")

    kwargs = {}
    if info.input_kind == GRAPH:
        source = get_graph().snapshot()
        if data.get("start") is not None:
            kwargs["start"] = str(data["start"])
    else:
        source = data.get("array")
        if "target" in data:
            kwargs["target"] = data["target"]

    stepper = Stepper()
    stepper.start(produce(key, source, **kwargs))
    stepper.jump_to_end()
    steps = [step.to_dict() for step in stepper.steps]

    speed = session.get("speed", DEFAULT_SPEED)
    session["running"] = True
    logger.info("run %s produced %d step(s)", key, len(steps))

    return jsonify({
        "algorithm":   key,
        "steps":       steps,
        "total_steps": len(steps),
        "speed":       speed,
        "delay_ms":    SPEED_PRESETS[speed],
    })


@app.route("/api/run/finish", methods=["POST"])
def api_run_finish():
    outcome = body().get("outcome", "completed")
    if outcome not in ("completed", "cancelled"):
        raise InvalidInputError(f"Unknown run outcome: {outcome}")
    was_running = SessionRun().is_running
    session["running"] = False
    if was_running:
        logger.info("playback %s", outcome)
    return jsonify({"state": "idle", "outcome": outcome if was_running else None})


if __name__ == "__main__":
    print("=" * 60)
    print("  Algorithm Visualizer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=True, host="0.0.0.0", port=5000)
