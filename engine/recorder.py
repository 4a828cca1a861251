"""
recorder.py — Run Recorder & Analytics
========================================
Keeps every Snapshot of a run and computes the numbers the status panel
shows once the run is over.

Usage:
    rec = Recorder(DijkstraStepper(graph, "a", "z"))
    metrics = rec.run_to_completion()   # advances + records every frame
    rec.export()                        # serialisable snapshot list + metrics
"""

import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from algorithms import DijkstraStepper, RunState, Snapshot, path_cost


# ---------------------------------------------------------------------------
# Metrics dataclass: what the status panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    start:           str   = ""
    end:             str   = ""
    nodes_visited:   int   = 0
    edges_examined:  int   = 0
    path_length:     int   = 0          # number of edges on the final path
    path_cost:       float = 0.0        # total weight of the final path
    total_steps:     int   = 0          # number of recorded snapshots after the initial one
    wall_time_ms:    float = 0.0
    path_found:      bool  = False
    run_state:       str   = RunState.IDLE.value


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        stepper   : The DijkstraStepper being recorded.
        snapshots : Every Snapshot captured so far; [0] is the pre-run state.
        metrics   : RunMetrics, available once the run is terminal.
    """

    def __init__(self, stepper: DijkstraStepper):
        self.stepper:   DijkstraStepper      = stepper
        self.snapshots: List[Snapshot]       = []
        self.metrics:   Optional[RunMetrics] = None
        self._elapsed:  float                = 0.0
        self.record()

    def record(self) -> Snapshot:
        snap = self.stepper.snapshot()
        self.snapshots.append(snap)
        return snap

    def advance(self) -> Snapshot:
        """Advance the stepper once and record the result."""
        t0 = time.perf_counter()
        self.stepper.advance()
        self._elapsed += time.perf_counter() - t0
        snap = self.record()
        if self.stepper.is_terminal and self.metrics is None:
            self.metrics = self._compute_metrics()
        return snap

    def run_to_completion(self) -> RunMetrics:
        while not self.stepper.is_terminal:
            self.advance()
        if self.metrics is None:
            self.metrics = self._compute_metrics()
        return self.metrics

    def get_metrics(self) -> RunMetrics:
        """Metrics so far (final once the run is terminal)."""
        return self.metrics or self._compute_metrics()

    def clear(self) -> None:
        """Forget everything and re-record the stepper's current state."""
        self.snapshots = []
        self.metrics   = None
        self._elapsed  = 0.0
        self.record()

    # ------------------------------------------------------------------
    # Export (serialisable)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "graph":     self.stepper.graph.to_dict(),
            "start":     self.stepper.start,
            "end":       self.stepper.end,
            "metrics":   asdict(self.get_metrics()),
            "snapshots": [s.to_dict() for s in self.snapshots],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self) -> RunMetrics:
        s    = self.stepper
        path = s.final_path
        return RunMetrics(
            start=str(s.start),
            end=str(s.end),
            nodes_visited=len(s.visited_nodes),
            edges_examined=len(s.visited_edges),
            path_length=len(path) - 1 if len(path) > 1 else 0,
            path_cost=path_cost(s.graph, path),
            total_steps=len(self.snapshots) - 1,
            wall_time_ms=round(self._elapsed * 1000, 3),
            path_found=bool(path),
            run_state=s.state.value,
        )
