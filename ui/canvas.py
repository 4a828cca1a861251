"""
canvas.py — SVG Graph Renderer
================================
Pure rendering function: graph + layout + Snapshot → SVG string.

The renderer consumes:
  • graph      – the WeightedGraph (edges, weights)
  • layout     – {node: Position}
  • snapshot   – the stepper's Snapshot (visited edges, final path, …)
  • config     – visual config (canvas size, colors, fonts, …)

Encoding:
  - Edge on the final path     → blue, thick
  - Edge in the visited history → red
  - Any other edge             → black, thin
  - Node on the final path     → green fill, otherwise white
  - Node finalized last        → highlight ring

No mutation and no algorithm logic: the same inputs always give the
same SVG.
"""

import math
from html import escape
from typing import Dict, Hashable, Optional

from graph import Layout, WeightedGraph
from algorithms import Snapshot, is_edge_on_path


# ---------------------------------------------------------------------------
# Visual Config: color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 600
    height: int = 400
    bg:     str = "#ffffff"

    node_colors: Dict[str, str] = {
        "default": "white",
        "path":    "green",
        "current": "#f59e0b",   # amber ring
    }

    # (color, width) per edge state
    edge_styles: Dict[str, tuple] = {
        "default": ("black", 1),
        "visited": ("red",   2),
        "path":    ("blue",  3),
    }

    # node
    node_radius:        int = 20
    node_stroke:        str = "black"
    node_label_color:   str = "black"
    node_label_size:    int = 16

    # edge weight label
    edge_weight_color:  str = "black"
    edge_weight_size:   int = 14
    edge_weight_bg:     str = "#ffffff"


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_canvas(
    graph: WeightedGraph,
    layout: Layout,
    snapshot: Optional[Snapshot] = None,
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Returns an SVG string.

    Args:
        graph    : The graph to render.
        layout   : Node positions; nodes missing from it are skipped.
        snapshot : Current stepper snapshot (or None for the bare graph).
        config   : Visual config.
    """
    svg_parts = [
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
    ]

    # -- edges (draw first so nodes sit on top) --
    for u, v, w in graph.edges():
        svg_parts.append(_render_edge(u, v, w, layout, snapshot, config))

    # -- nodes --
    for node in graph.sorted_nodes():
        svg_parts.append(_render_node(node, layout, snapshot, config))

    svg_parts.append("</svg>")
    return "\n".join(p for p in svg_parts if p)


def edge_state(snapshot: Optional[Snapshot], u: Hashable, v: Hashable) -> str:
    """'path' beats 'visited' beats 'default'."""
    if snapshot is None:
        return "default"
    if is_edge_on_path(snapshot.final_path, u, v):
        return "path"
    if snapshot.has_visited_edge(u, v):
        return "visited"
    return "default"


def node_state(snapshot: Optional[Snapshot], node: Hashable) -> str:
    if snapshot is not None and node in snapshot.final_path:
        return "path"
    return "default"


# ---------------------------------------------------------------------------
# Node Rendering
# ---------------------------------------------------------------------------
def _render_node(node: Hashable, layout: Layout, snapshot: Optional[Snapshot], config: CanvasConfig) -> str:
    pos = layout.get(node)
    if pos is None:
        return ""

    state = node_state(snapshot, node)
    fill  = config.node_colors[state]
    cx, cy, r = pos.x, pos.y, config.node_radius
    label = escape(str(node))

    ring = ""
    if snapshot is not None and snapshot.current == node and not snapshot.final_path:
        ring = (
            f'  <circle cx="{cx}" cy="{cy}" r="{r + 6}" fill="none" '
            f'stroke="{config.node_colors["current"]}" stroke-width="3"/>'
        )

    parts = [
        f'<g class="node node-{state}" data-id="{label}">',
        ring,
        f'  <circle cx="{cx}" cy="{cy}" r="{r}" fill="{fill}" stroke="{config.node_stroke}" stroke-width="1"/>',
        f'  <text x="{cx}" y="{cy}" text-anchor="middle" dominant-baseline="middle" '
        f'font-size="{config.node_label_size}" font-family="Arial, sans-serif" '
        f'fill="{config.node_label_color}">{label}</text>',
        '</g>',
    ]
    return "\n".join(p for p in parts if p)


# ---------------------------------------------------------------------------
# Edge Rendering
# ---------------------------------------------------------------------------
def _render_edge(
    u: Hashable,
    v: Hashable,
    weight: float,
    layout: Layout,
    snapshot: Optional[Snapshot],
    config: CanvasConfig,
) -> str:
    p1, p2 = layout.get(u), layout.get(v)
    if p1 is None or p2 is None:
        return ""

    dx, dy = p2.x - p1.x, p2.y - p1.y
    if math.hypot(dx, dy) < 0.001:
        return ""  # degenerate edge

    state = edge_state(snapshot, u, v)
    stroke, stroke_width = config.edge_styles[state]
    mx, my = (p1.x + p2.x) / 2, (p1.y + p2.y) / 2
    label  = _format_weight(weight)

    return "\n".join([
        f'<g class="edge edge-{state}" data-u="{escape(str(u))}" data-v="{escape(str(v))}">',
        f'  <line x1="{p1.x}" y1="{p1.y}" x2="{p2.x}" y2="{p2.y}" '
        f'stroke="{stroke}" stroke-width="{stroke_width}"/>',
        f'  <rect x="{mx - 11}" y="{my - 9}" width="22" height="18" '
        f'fill="{config.edge_weight_bg}" opacity="0.85"/>',
        f'  <text x="{mx}" y="{my}" text-anchor="middle" dominant-baseline="middle" '
        f'font-size="{config.edge_weight_size}" font-family="Arial, sans-serif" '
        f'fill="{config.edge_weight_color}">{label}</text>',
        '</g>',
    ])


def _format_weight(weight: float) -> str:
    if float(weight).is_integer():
        return str(int(weight))
    return f"{weight:g}"
