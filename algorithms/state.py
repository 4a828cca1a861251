"""
state.py — Run State & Snapshot
================================
A Snapshot is a frozen-in-time picture of everything a renderer needs
to draw one frame of a shortest-path run:

    • Which nodes have been finalized (in order)
    • Which edges were examined (in order, directed as examined)
    • The final path (empty until the run completes)
    • The run state
    • The current tentative distances

Design decisions:
  - Snapshot is a frozen dataclass built from tuples and a copied dict.
    The stepper is the only writer; renderers, drivers and recorders are
    pure readers.
  - `to_dict()` is the JSON form sent to the browser.  Infinity is not
    valid JSON, so unreached distances become None.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Hashable, Optional, Tuple


class RunState(Enum):
    IDLE        = "idle"          # constructed or reset, no advance yet
    RUNNING     = "running"       # at least one advance, end not finalized
    COMPLETED   = "completed"     # end finalized, final path available
    UNREACHABLE = "unreachable"   # end can never be reached from start

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATES


TERMINAL_STATES: FrozenSet[RunState] = frozenset({RunState.COMPLETED, RunState.UNREACHABLE})


@dataclass(frozen=True)
class Snapshot:
    """
    Attributes:
        visited_nodes : Nodes finalized so far, in finalization order.
        visited_edges : (current, neighbour) pairs examined so far, in order.
        final_path    : start … end once COMPLETED, otherwise empty.
        run_state     : RunState at the time of the snapshot.
        current       : Node finalized by the most recent advance (or None).
        distances     : {node: tentative distance} copy.
        step          : Number of nodes finalized so far.
        start, end    : Endpoints of the run (None before any run).
    """

    visited_nodes: Tuple[Hashable, ...]                    = ()
    visited_edges: Tuple[Tuple[Hashable, Hashable], ...]   = ()
    final_path:    Tuple[Hashable, ...]                    = ()
    run_state:     RunState                                = RunState.IDLE
    current:       Optional[Hashable]                      = None
    distances:     Dict[Hashable, float]                   = field(default_factory=dict)
    step:          int                                     = 0
    start:         Optional[Hashable]                      = None
    end:           Optional[Hashable]                      = None

    @property
    def is_terminal(self) -> bool:
        return self.run_state.is_terminal

    def has_visited_edge(self, u: Hashable, v: Hashable) -> bool:
        """Undirected match against the visited-edge history."""
        return (u, v) in self.visited_edges or (v, u) in self.visited_edges

    def to_dict(self) -> Dict[str, Any]:
        return {
            "visited_nodes": list(self.visited_nodes),
            "visited_edges": [list(e) for e in self.visited_edges],
            "final_path":    list(self.final_path),
            "run_state":     self.run_state.value,
            "current":       self.current,
            "distances":     {
                str(n): (None if math.isinf(d) else d) for n, d in self.distances.items()
            },
            "step":          self.step,
            "start":         self.start,
            "end":           self.end,
        }
