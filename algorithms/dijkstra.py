"""
dijkstra.py — Dijkstra's Shortest-Path Stepper
===============================================
Pull-based Dijkstra: every call to advance() finalizes at most one node
and records what it looked at, so a renderer can show the algorithm's
progress frame by frame.

State machine:
    IDLE     →  advance()  →  RUNNING
    RUNNING  →  advance()  →  RUNNING | COMPLETED | UNREACHABLE
    COMPLETED / UNREACHABLE  →  advance()  →  (no-op)
    any      →  reset()    →  IDLE

One advance():
  1. Unvisited set empty                   →  UNREACHABLE
  2. Pick the unvisited node with the smallest distance (ties → smallest id).
     If that distance is ∞ the rest of the graph is cut off → UNREACHABLE.
  3. Finalize it (remove from unvisited, append to visited history)
  4. It is the end node                    →  COMPLETED, reconstruct path
  5. Examine every still-unvisited neighbour (ascending id): record the
     edge, relax if current + w beats the neighbour's distance.

Selection is a linear scan; graphs here have a handful of nodes.

Thread safety:
  Not thread-safe.  One stepper models one run; drive it from a single
  thread.  The bound graph is read-only and may be shared freely.
"""

import math
from types import MappingProxyType
from typing import Dict, FrozenSet, Hashable, List, Mapping, Optional, Set, Tuple

from graph import NoPathError, UnknownNodeError, WeightedGraph
from algorithms.path import reconstruct
from algorithms.state import RunState, Snapshot
from log_config import get_logger

logger = get_logger(__name__)

INF = math.inf

Node = Hashable
Edge = Tuple[Node, Node]


class DijkstraStepper:
    """
    Attributes:
        graph : The bound WeightedGraph (never mutated).
        start : Source node.
        end   : Target node.

    Everything else is private run state, exposed through read-only
    properties and snapshot().
    """

    def __init__(self, graph: WeightedGraph, start: Node, end: Node):
        if start not in graph:
            raise UnknownNodeError(start, f"Start node {start!r} is not in the graph")
        if end not in graph:
            raise UnknownNodeError(end, f"End node {end!r} is not in the graph")

        self.graph: WeightedGraph = graph
        self.start: Node          = start
        self.end:   Node          = end
        self.reset()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Discard all run state and rebuild the IDLE defaults."""
        self._dist:          Dict[Node, float] = {n: INF for n in self.graph.sorted_nodes()}
        self._dist[self.start] = 0
        self._prev:          Dict[Node, Node]  = {}
        self._unvisited:     Set[Node]         = set(self.graph.nodes())
        self._visited_nodes: List[Node]        = []
        self._visited_edges: List[Edge]        = []
        self._final_path:    Tuple[Node, ...]  = ()
        self._current:       Optional[Node]    = None
        self._state:         RunState          = RunState.IDLE

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------
    def advance(self) -> RunState:
        """Perform one step of the algorithm and return the new RunState."""
        if self._state.is_terminal:
            return self._state

        if self._state is RunState.IDLE:
            self._state = RunState.RUNNING
            logger.info("Run started: %r -> %r", self.start, self.end)

        if not self._unvisited:
            return self._finish_unreachable("unvisited set exhausted")

        current = min(self._unvisited, key=lambda n: (self._dist[n], n))
        if math.isinf(self._dist[current]):
            return self._finish_unreachable(
                f"{len(self._unvisited)} remaining node(s) cut off from {self.start!r}"
            )

        self._unvisited.remove(current)
        self._visited_nodes.append(current)
        self._current = current
        logger.debug("Finalize %r at distance %s", current, self._dist[current])

        if current == self.end:
            return self._finish_completed()

        for nbr in sorted(self.graph.neighbors(current)):
            if nbr not in self._unvisited:
                continue
            self._visited_edges.append((current, nbr))
            alt = self._dist[current] + self.graph.neighbors(current)[nbr]
            if alt < self._dist[nbr]:
                logger.debug("Relax %r-%r: %s -> %s", current, nbr, self._dist[nbr], alt)
                self._dist[nbr] = alt
                self._prev[nbr] = current

        if not self._unvisited and self.end not in self._visited_nodes:
            return self._finish_unreachable("unvisited set exhausted")
        return self._state

    def run_to_completion(self) -> RunState:
        """Advance until the run is COMPLETED or UNREACHABLE."""
        # each advance finalizes a node or terminates, so this bound is never hit
        for _ in range(len(self.graph) + 1):
            if self.advance().is_terminal:
                break
        return self._state

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def state(self) -> RunState:
        return self._state

    @property
    def is_terminal(self) -> bool:
        return self._state.is_terminal

    @property
    def distances(self) -> Mapping[Node, float]:
        return MappingProxyType(self._dist)

    @property
    def predecessors(self) -> Mapping[Node, Node]:
        return MappingProxyType(self._prev)

    @property
    def unvisited(self) -> FrozenSet[Node]:
        return frozenset(self._unvisited)

    @property
    def visited_nodes(self) -> Tuple[Node, ...]:
        return tuple(self._visited_nodes)

    @property
    def visited_edges(self) -> Tuple[Edge, ...]:
        return tuple(self._visited_edges)

    @property
    def final_path(self) -> Tuple[Node, ...]:
        return self._final_path

    @property
    def current(self) -> Optional[Node]:
        return self._current

    @property
    def steps_taken(self) -> int:
        return len(self._visited_nodes)

    def distance_to(self, node: Node) -> float:
        if node not in self._dist:
            raise UnknownNodeError(node)
        return self._dist[node]

    def snapshot(self) -> Snapshot:
        return Snapshot(
            visited_nodes=tuple(self._visited_nodes),
            visited_edges=tuple(self._visited_edges),
            final_path=self._final_path,
            run_state=self._state,
            current=self._current,
            distances=dict(self._dist),
            step=len(self._visited_nodes),
            start=self.start,
            end=self.end,
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _finish_completed(self) -> RunState:
        try:
            path = reconstruct(self._prev, self.start, self.end)
        except NoPathError as exc:
            return self._finish_unreachable(str(exc))
        self._final_path = tuple(path)
        self._state = RunState.COMPLETED
        logger.info(
            "Visualization complete: shortest path %s (distance %s)",
            " -> ".join(map(str, path)), self._dist[self.end],
        )
        return self._state

    def _finish_unreachable(self, reason: str) -> RunState:
        self._final_path = ()
        self._state = RunState.UNREACHABLE
        logger.info("No path found from %r to %r: %s", self.start, self.end, reason)
        return self._state

    def __repr__(self) -> str:
        return (
            f"DijkstraStepper({self.start!r} -> {self.end!r}, "
            f"state={self._state.value}, step={self.steps_taken})"
        )
