"""
controls.py — UI Control Panels
=================================
Every panel is a pure function that takes state and returns HTML.

Panels:
  • command_buttons   – Visualize / Reset, enabled according to run state
  • endpoint_picker   – start / end dropdowns
  • status_panel      – run state, distance table, metrics, final path

Design:
  - All panels are stateless render functions.
  - Output is raw HTML strings (no templating engine); main.py stitches
    them into the page and returns them from the JSON API.
"""

import math
from html import escape
from typing import Hashable, Iterable, Optional

from algorithms import RunState, Snapshot
from engine import RunMetrics


# ---------------------------------------------------------------------------
# Command Buttons
# ---------------------------------------------------------------------------
def command_buttons(run_state: RunState = RunState.IDLE) -> str:
    """Visualize is only usable from IDLE; Reset appears once the run is over."""
    visualize_disabled = "" if run_state is RunState.IDLE else "disabled"
    reset_style        = "" if run_state.is_terminal else 'style="display:none"'

    return f"""
    <div class="panel command-buttons">
      <button id="btn-visualize" {visualize_disabled}>Visualize Dijkstra</button>
      <button id="btn-reset" {reset_style}>Reset</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Start / End Picker
# ---------------------------------------------------------------------------
def endpoint_picker(
    node_ids: Iterable[Hashable],
    start: Optional[Hashable] = None,
    end: Optional[Hashable] = None,
) -> str:
    start_options = []
    end_options   = []

    for nid in node_ids:
        label = escape(str(nid))
        start_sel = "selected" if nid == start else ""
        end_sel   = "selected" if nid == end else ""
        start_options.append(f'<option value="{label}" {start_sel}>{label}</option>')
        end_options.append(f'<option value="{label}" {end_sel}>{label}</option>')

    return f"""
    <div class="panel endpoint-picker">
      <label>Start:
        <select id="start-selector">
          {''.join(start_options)}
        </select>
      </label>
      <label>End:
        <select id="end-selector">
          {''.join(end_options)}
        </select>
      </label>
    </div>
    """


# ---------------------------------------------------------------------------
# Status Panel
# ---------------------------------------------------------------------------
def status_panel(snapshot: Snapshot, metrics: Optional[RunMetrics] = None) -> str:
    if snapshot.start is None:
        return """
        <div class="panel status-panel">
          <p class="placeholder">Pick a start and end node, then press Visualize.</p>
        </div>
        """

    rows = []
    for node, dist in sorted(snapshot.distances.items(), key=lambda kv: (kv[1], kv[0])):
        d_str = "∞" if math.isinf(dist) else f"{dist:g}"
        done  = ' class="finalized"' if node in snapshot.visited_nodes else ""
        rows.append(f"<tr{done}><td>{escape(str(node))}</td><td>{d_str}</td></tr>")

    if snapshot.run_state is RunState.COMPLETED:
        path_html = " → ".join(escape(str(n)) for n in snapshot.final_path)
    elif snapshot.run_state is RunState.UNREACHABLE:
        path_html = "No path found"
    else:
        path_html = "…"

    metrics_html = ""
    if metrics is not None and snapshot.is_terminal:
        metrics_html = f"""
      <table class="metrics">
        <tr><td>Nodes Visited:</td><td><strong>{metrics.nodes_visited}</strong></td></tr>
        <tr><td>Edges Examined:</td><td><strong>{metrics.edges_examined}</strong></td></tr>
        <tr><td>Path Length:</td><td><strong>{metrics.path_length} edges</strong></td></tr>
        <tr><td>Path Cost:</td><td><strong>{metrics.path_cost:g}</strong></td></tr>
      </table>"""

    return f"""
    <div class="panel status-panel">
      <h3>{escape(str(snapshot.start))} → {escape(str(snapshot.end))}:
        <span class="run-state run-state-{snapshot.run_state.value}">{snapshot.run_state.value}</span>
        (step {snapshot.step})</h3>
      <table class="distances">
        <tr><th>Node</th><th>Distance</th></tr>
        {''.join(rows)}
      </table>
      <p class="final-path">Path: {path_html}</p>{metrics_html}
    </div>
    """
