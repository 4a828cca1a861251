"""
session.py — Visualizer Session (command surface)
==================================================
The one object the web app and the console talk to.  It owns a graph,
its layout and at most one run.

Commands:
    start(start, end)   – begin a fresh run (UnknownNodeError if bad endpoint)
    reset()             – discard the run's state, back to IDLE defaults

Plus the per-frame operations the UI needs: advance(), finish(),
snapshot(), metrics().

Stateless callers (HTTP requests) rebuild a run with
restore(start, end, steps): Dijkstra with a fixed tie-break is
deterministic, so replaying `steps` advances reproduces the run exactly.
"""

from typing import Hashable, Optional

from graph import Layout, WeightedGraph, layout_for
from algorithms import DijkstraStepper, Snapshot
from engine.recorder import Recorder, RunMetrics
from log_config import get_logger

logger = get_logger(__name__)


class NoActiveRunError(RuntimeError):
    """A frame operation was requested before start()."""


class VisualizerSession:
    """
    Attributes:
        graph    : WeightedGraph shared read-only with the stepper.
        layout   : {node: Position} for the renderer.
        stepper  : Current DijkstraStepper, or None before the first start().
        recorder : Recorder wrapping `stepper`.
    """

    def __init__(self, graph: WeightedGraph, layout: Optional[Layout] = None):
        self.graph:    WeightedGraph             = graph
        self.layout:   Layout                    = layout if layout is not None else layout_for(graph)
        self.stepper:  Optional[DijkstraStepper] = None
        self.recorder: Optional[Recorder]        = None

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def start(self, start: Hashable, end: Hashable) -> Snapshot:
        """Begin a new run.  On a bad endpoint the previous run is untouched."""
        stepper       = DijkstraStepper(self.graph, start, end)
        self.stepper  = stepper
        self.recorder = Recorder(stepper)
        logger.info("Session run prepared: %r -> %r", start, end)
        return stepper.snapshot()

    def reset(self) -> Snapshot:
        """Back to IDLE: histories, distances and path rebuilt from scratch."""
        if self.stepper is not None:
            self.stepper.reset()
            self.recorder.clear()
            logger.info("Session reset: %r -> %r", self.stepper.start, self.stepper.end)
        return self.snapshot()

    # ------------------------------------------------------------------
    # Frames
    # ------------------------------------------------------------------
    def advance(self) -> Snapshot:
        return self._require_recorder().advance()

    def finish(self) -> Snapshot:
        recorder = self._require_recorder()
        recorder.run_to_completion()
        return recorder.stepper.snapshot()

    def restore(self, start: Hashable, end: Hashable, steps: int) -> Snapshot:
        """Recreate the run (start, end) as it was after `steps` advances."""
        self.start(start, end)
        for _ in range(max(0, steps)):
            if self.stepper.is_terminal:
                break
            self.recorder.advance()
        return self.stepper.snapshot()

    def snapshot(self) -> Snapshot:
        if self.stepper is None:
            return Snapshot()
        return self.stepper.snapshot()

    def metrics(self) -> Optional[RunMetrics]:
        return self.recorder.get_metrics() if self.recorder else None

    @property
    def has_run(self) -> bool:
        return self.stepper is not None

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _require_recorder(self) -> Recorder:
        if self.recorder is None:
            raise NoActiveRunError("No active run; call start() first")
        return self.recorder
