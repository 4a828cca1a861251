"""
algorithms/ — Shortest-Path Stepper
====================================
    from algorithms import DijkstraStepper, RunState, Snapshot
    from algorithms import reconstruct, path_cost, is_edge_on_path
"""

from algorithms.state    import RunState, Snapshot, TERMINAL_STATES
from algorithms.path     import reconstruct, path_edges, is_edge_on_path, path_cost
from algorithms.dijkstra import DijkstraStepper

__all__ = [
    "DijkstraStepper",
    "RunState",
    "Snapshot",
    "TERMINAL_STATES",
    "reconstruct",
    "path_edges",
    "is_edge_on_path",
    "path_cost",
]
