"""
graph/
-----
Core data layer.  Public API:

    from graph import WeightedGraph
    from graph import UnknownNodeError, MalformedGraphError, NoPathError
    from graph import Position, layout_for, sample_graph
"""

from graph.errors import GraphError, UnknownNodeError, MalformedGraphError, NoPathError
from graph.graph  import WeightedGraph
from graph.layout import (
    Position, Layout, SAMPLE_ADJACENCY, SAMPLE_POSITIONS,
    sample_graph, circular_layout, layout_for,
)

__all__ = [
    "WeightedGraph",
    "GraphError",       "UnknownNodeError",
    "MalformedGraphError", "NoPathError",
    "Position",         "Layout",
    "SAMPLE_ADJACENCY", "SAMPLE_POSITIONS",
    "sample_graph",     "circular_layout",   "layout_for",
]
