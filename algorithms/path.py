"""
path.py — Path Reconstruction & Path Helpers
=============================================
Backtracks the predecessor chain once a run has finalized its end node,
plus the small path queries the renderer and recorder share.
"""

from typing import FrozenSet, Hashable, List, Mapping, Optional, Sequence, Set

from graph import NoPathError, WeightedGraph


def reconstruct(
    predecessors: Mapping[Hashable, Hashable],
    start: Hashable,
    end: Hashable,
) -> List[Hashable]:
    """
    Walk backwards from `end` through `predecessors` until `start`, then
    reverse.  Raises NoPathError if the walk hits a node with no
    predecessor first.
    """
    path, cur = [end], end
    seen = {end}
    while cur != start:
        prev: Optional[Hashable] = predecessors.get(cur)
        if prev is None or prev in seen:
            raise NoPathError(start, end)
        path.append(prev)
        seen.add(prev)
        cur = prev
    path.reverse()
    return path


def path_edges(path: Sequence[Hashable]) -> Set[FrozenSet[Hashable]]:
    """Undirected edges along the path, as frozensets."""
    return {frozenset((path[i], path[i + 1])) for i in range(len(path) - 1)}


def is_edge_on_path(path: Sequence[Hashable], u: Hashable, v: Hashable) -> bool:
    """True if u–v (either direction) is a consecutive pair of the path."""
    for i in range(len(path) - 1):
        a, b = path[i], path[i + 1]
        if (a == u and b == v) or (a == v and b == u):
            return True
    return False


def path_cost(graph: WeightedGraph, path: Sequence[Hashable]) -> float:
    """Sum of edge weights along the path.  0 for empty / single-node paths."""
    total = 0.0
    for i in range(len(path) - 1):
        w = graph.weight(path[i], path[i + 1])
        if w is None:
            raise ValueError(f"{path[i]!r}-{path[i + 1]!r} is not an edge of the graph")
        total += w
    return total
