"""
layout.py — Node Positions
===========================
Where each node sits on the canvas.  Layout is a rendering concern only:
the stepper never reads it.

    SAMPLE_ADJACENCY / SAMPLE_POSITIONS  – the built-in demo graph
    sample_graph()                       – WeightedGraph for the demo
    circular_layout(nodes, w, h)         – fallback for imported graphs
    layout_for(graph)                    – pick the right one
"""

import math
from dataclasses import dataclass
from typing import Dict, Hashable, Iterable

from graph.graph import WeightedGraph


@dataclass(frozen=True)
class Position:
    x: float
    y: float


Layout = Dict[Hashable, Position]


# ---------------------------------------------------------------------------
# Built-in demo graph
# ---------------------------------------------------------------------------
SAMPLE_ADJACENCY = {
    "a": {"b": 22, "d": 8},
    "b": {"a": 22, "c": 20, "e": 2},
    "c": {"b": 20, "d": 10, "e": 4, "f": 7},
    "d": {"a": 8, "c": 10, "f": 6},
    "e": {"b": 2, "c": 4, "z": 4},
    "f": {"c": 7, "d": 6, "z": 9},
    "z": {"e": 4, "f": 9},
}

SAMPLE_POSITIONS: Layout = {
    "a": Position(50, 200),
    "b": Position(150, 100),
    "c": Position(300, 200),
    "d": Position(150, 300),
    "e": Position(450, 100),
    "f": Position(450, 300),
    "z": Position(550, 200),
}


def sample_graph() -> WeightedGraph:
    return WeightedGraph(SAMPLE_ADJACENCY)


# ---------------------------------------------------------------------------
# Generated layouts
# ---------------------------------------------------------------------------
def circular_layout(
    nodes: Iterable[Hashable],
    width: float = 600,
    height: float = 400,
) -> Layout:
    """Nodes evenly spaced on a circle, in ascending id order."""
    ordered = sorted(nodes)
    n = len(ordered)
    if n == 0:
        return {}
    cx, cy = width / 2, height / 2
    radius = min(width, height) * 0.35
    layout: Layout = {}
    for i, node in enumerate(ordered):
        angle = 2 * math.pi * i / n
        layout[node] = Position(
            round(cx + radius * math.cos(angle), 2),
            round(cy + radius * math.sin(angle), 2),
        )
    return layout


def layout_for(graph: WeightedGraph, width: float = 600, height: float = 400) -> Layout:
    """Demo coordinates if they cover every node, else a circle."""
    if graph.nodes().issubset(SAMPLE_POSITIONS):
        return {n: SAMPLE_POSITIONS[n] for n in graph.sorted_nodes()}
    return circular_layout(graph.sorted_nodes(), width, height)
