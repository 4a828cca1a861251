import math

import pytest

from algorithms import RunState, Snapshot
from engine import NoActiveRunError, VisualizerSession
from graph import UnknownNodeError


def test_snapshot_before_any_run_is_idle(sample):
    viz = VisualizerSession(sample)
    assert viz.snapshot() == Snapshot()
    assert viz.metrics() is None
    assert not viz.has_run
    assert set(viz.layout) == set(sample.nodes())


def test_advance_without_run_raises(sample):
    viz = VisualizerSession(sample)
    with pytest.raises(NoActiveRunError):
        viz.advance()
    with pytest.raises(RuntimeError):
        viz.finish()


def test_start_and_step(sample):
    viz = VisualizerSession(sample)
    snap = viz.start("a", "z")
    assert snap.run_state is RunState.IDLE
    assert (snap.start, snap.end) == ("a", "z")

    snap = viz.advance()
    assert snap.run_state is RunState.RUNNING
    assert snap.visited_nodes == ("a",)

    snap = viz.finish()
    assert snap.run_state is RunState.COMPLETED
    assert viz.metrics().path_cost == 23


def test_bad_endpoint_keeps_previous_run(sample):
    viz = VisualizerSession(sample)
    viz.start("a", "z")
    viz.advance()

    with pytest.raises(UnknownNodeError):
        viz.start("a", "nowhere")

    assert viz.snapshot().visited_nodes == ("a",)


def test_reset_discards_run_state(sample):
    viz = VisualizerSession(sample)
    viz.start("a", "z")
    viz.finish()

    snap = viz.reset()

    assert snap.run_state is RunState.IDLE
    assert snap.visited_nodes == ()
    assert snap.visited_edges == ()
    assert snap.final_path == ()
    assert snap.distances["a"] == 0
    assert all(math.isinf(snap.distances[n]) for n in "bcdefz")
    assert viz.metrics().total_steps == 0


def test_reset_without_run_is_harmless(sample):
    assert VisualizerSession(sample).reset() == Snapshot()


@pytest.mark.parametrize("steps", range(0, 9))
def test_restore_replays_exactly(sample, steps):
    live = VisualizerSession(sample)
    live.start("a", "z")
    for _ in range(steps):
        live.advance()

    replayed = VisualizerSession(sample)
    assert replayed.restore("a", "z", steps) == live.snapshot()
