"""
main.py — Dijkstra Visualizer Flask App
========================================
The web server that powers the visualizer, plus a console runner.

Routes:
  GET  /                 – main UI
  POST /api/run          – start a run for {start, end} (first step taken)
  POST /api/step/next    – advance one step
  POST /api/run/finish   – run to completion
  POST /api/reset        – back to IDLE, discarding the run
  GET  /api/state        – current state (for polling)

Every state response carries:
    snapshot, svg, controls, status, terminal, interval_ms

State management:
  The graph is built once at import and shared read-only by every
  request.  The Flask session only holds (start, end, steps); each request
  rebuilds its run with VisualizerSession.restore(), which is exact
  because the stepper is deterministic.

Console:
  python main.py console --start a --end z   – timed run, logged per step
  python main.py serve                       – Flask dev server (default)
"""

import argparse
import sys
from typing import Optional

from flask import Flask, jsonify, render_template_string, request, session

from config import Settings, get_settings
from graph import UnknownNodeError, WeightedGraph, sample_graph
from engine import NoActiveRunError, StepDriver, VisualizerSession
from ui import command_buttons, endpoint_picker, render_canvas, status_panel
from log_config import get_logger, set_global_log_level

logger = get_logger(__name__)


def build_graph(settings: Settings) -> WeightedGraph:
    """Graph from configured adjacency-list text, else the sample graph."""
    if settings.graph_text:
        return WeightedGraph.from_adjacency_list(settings.graph_text)
    return sample_graph()


settings = get_settings()
set_global_log_level(settings.log_level)

GRAPH = build_graph(settings)

app = Flask(__name__)
app.secret_key = settings.secret_key


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def load_session() -> VisualizerSession:
    """Rebuild the visualizer session from the cookie (start, end, steps)."""
    viz = VisualizerSession(GRAPH)
    if "start" in session:
        viz.restore(session["start"], session["end"], session.get("steps", 0))
    return viz


def save_run(viz: VisualizerSession) -> None:
    stepper = viz.stepper
    session["start"] = stepper.start
    session["end"]   = stepper.end
    session["steps"] = len(viz.recorder.snapshots) - 1


def state_response(viz: VisualizerSession):
    snap = viz.snapshot()
    return jsonify({
        "snapshot":    snap.to_dict(),
        "svg":         render_canvas(viz.graph, viz.layout, snap),
        "controls":    command_buttons(snap.run_state),
        "status":      status_panel(snap, viz.metrics()),
        "terminal":    snap.is_terminal,
        "interval_ms": settings.step_interval_ms,
    })


@app.errorhandler(NoActiveRunError)
def handle_no_run(exc: NoActiveRunError):
    logger.warning("Rejected %s: no active run", request.path)
    return jsonify({"error": "No active run; POST /api/run first"}), 409


@app.errorhandler(UnknownNodeError)
def handle_unknown_node(exc: UnknownNodeError):
    logger.warning("Rejected %s: %s", request.path, exc)
    return jsonify({"error": str(exc)}), 400


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    viz  = load_session()
    snap = viz.snapshot()

    start = snap.start if snap.start is not None else settings.default_start
    end   = snap.end if snap.end is not None else settings.default_end

    return render_template_string(
        INDEX_TEMPLATE,
        svg=render_canvas(viz.graph, viz.layout, snap),
        controls=command_buttons(snap.run_state),
        picker=endpoint_picker(viz.graph.sorted_nodes(), start, end),
        status=status_panel(snap, viz.metrics()),
        run_state=snap.run_state.value,
        interval_ms=settings.step_interval_ms,
    )


# ---------------------------------------------------------------------------
# API: Commands
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    data  = request.get_json(silent=True) or {}
    start = data.get("start")
    end   = data.get("end")
    # only a missing id falls back; 0 and "" are ids like any other
    if start is None:
        start = settings.default_start
    if end is None:
        end = settings.default_end

    viz = VisualizerSession(GRAPH)
    viz.start(start, end)
    viz.advance()
    save_run(viz)
    return state_response(viz)


@app.route("/api/reset", methods=["POST"])
def api_reset():
    viz = load_session()
    viz.reset()
    if viz.has_run:
        save_run(viz)
    return state_response(viz)


# ---------------------------------------------------------------------------
# API: Stepping
# ---------------------------------------------------------------------------
@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    viz = load_session()
    viz.advance()
    save_run(viz)
    return state_response(viz)


@app.route("/api/run/finish", methods=["POST"])
def api_run_finish():
    viz = load_session()
    viz.finish()
    save_run(viz)
    return state_response(viz)


@app.route("/api/state")
def api_state():
    return state_response(load_session())


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Dijkstra Visualizer</title>
  <style>
    body { font-family: Arial, sans-serif; margin: 24px; display: flex; gap: 24px; }
    #canvas-svg { border: 1px solid #ccc; }
    .panel { margin-bottom: 16px; }
    .panel button { margin-right: 8px; padding: 6px 14px; }
    .distances td, .distances th, .metrics td { padding: 2px 10px; }
    .finalized td { font-weight: bold; }
    .run-state-completed { color: green; }
    .run-state-unreachable { color: #b91c1c; }
    #error { color: #b91c1c; }
  </style>
</head>
<body data-run-state="{{ run_state }}" data-interval-ms="{{ interval_ms }}">
  <div id="canvas-svg">{{ svg|safe }}</div>
  <div id="sidebar">
    <div id="picker">{{ picker|safe }}</div>
    <div id="controls">{{ controls|safe }}</div>
    <div id="status">{{ status|safe }}</div>
    <p id="error"></p>
  </div>

  <script>
    let timer = null;

    async function post(url, body) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(body || {}),
      });
      return res.json();
    }

    function stop() {
      if (timer !== null) { clearInterval(timer); timer = null; }
    }

    function apply(data) {
      document.getElementById('error').textContent = data.error || '';
      if (data.error) { stop(); return; }
      document.getElementById('canvas-svg').innerHTML = data.svg;
      document.getElementById('controls').innerHTML = data.controls;
      document.getElementById('status').innerHTML = data.status;
      if (data.terminal) stop();
    }

    async function nextStep() {
      apply(await post('/api/step/next'));
    }

    async function visualize() {
      stop();
      const data = await post('/api/run', {
        start: document.getElementById('start-selector').value,
        end: document.getElementById('end-selector').value,
      });
      apply(data);
      if (!data.error && !data.terminal) {
        timer = setInterval(nextStep, data.interval_ms);
      }
    }

    async function reset() {
      stop();
      apply(await post('/api/reset'));
    }

    // buttons are re-rendered on every step, so delegate
    document.addEventListener('click', (e) => {
      if (e.target.id === 'btn-visualize') visualize();
      if (e.target.id === 'btn-reset') reset();
    });

    // a reload mid-run picks the stored run back up
    if (document.body.dataset.runState === 'running') {
      timer = setInterval(nextStep, Number(document.body.dataset.intervalMs));
    }
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Console runner
# ---------------------------------------------------------------------------
def run_console(start: str, end: str, interval: Optional[float] = None) -> int:
    """Drive one run with the timed driver, logging every frame."""
    viz = VisualizerSession(GRAPH)
    try:
        viz.start(start, end)
    except UnknownNodeError as exc:
        logger.error("%s", exc)
        return 2

    def on_step(snap):
        logger.info(
            "step %d: finalized %s, state=%s, visited edges=%d",
            snap.step, snap.current, snap.run_state.value, len(snap.visited_edges),
        )

    def on_complete(report):
        logger.info("Shortest path: %s (%s)", list(report.final_path), report.run_state.value)

    driver = StepDriver(
        viz.stepper,
        interval=settings.step_interval if interval is None else interval,
        on_step=on_step,
        on_complete=on_complete,
    )
    report = driver.run()
    return 0 if report.final_path else 1


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Step-by-step Dijkstra visualizer")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("serve", help="run the web UI (default)")

    console = sub.add_parser("console", help="run one animated search in the terminal")
    console.add_argument("--start", default=settings.default_start)
    console.add_argument("--end", default=settings.default_end)
    console.add_argument("--interval-ms", type=int, default=None)

    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    if args.command == "console":
        interval = None if args.interval_ms is None else args.interval_ms / 1000.0
        return run_console(args.start, args.end, interval)

    logger.info("Starting Flask server on http://%s:%d", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)
    return 0


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    sys.exit(main())
