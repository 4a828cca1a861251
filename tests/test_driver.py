import pytest

from algorithms import DijkstraStepper, RunState
from engine import SPEED_PRESETS, CompletionReport, DriverState, StepDriver


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


def test_default_interval_is_one_second(sample):
    driver = StepDriver(DijkstraStepper(sample, "a", "z"))
    assert driver.interval == SPEED_PRESETS["slow"] == 1.0
    assert driver.state is DriverState.IDLE


def test_tick_waits_for_interval(sample, clock):
    driver = StepDriver(DijkstraStepper(sample, "a", "z"), interval=1.0, clock=clock)

    assert driver.tick() is False          # not playing yet

    driver.play()
    clock.now = 0.5
    assert driver.tick() is False
    clock.now = 1.0
    assert driver.tick() is True
    assert driver.stepper.steps_taken == 1

    clock.now = 1.5
    assert driver.tick() is False
    assert driver.tick(now=2.0) is True
    assert driver.stepper.steps_taken == 2


def test_pause_stops_ticks(sample, clock):
    driver = StepDriver(DijkstraStepper(sample, "a", "z"), clock=clock)
    driver.play()
    driver.pause()
    clock.now = 10
    assert driver.tick() is False
    assert driver.state is DriverState.PAUSED

    driver.toggle_play()
    assert driver.state is DriverState.PLAYING


def test_callbacks_fire_until_completion(sample, clock):
    seen, reports = [], []
    driver = StepDriver(
        DijkstraStepper(sample, "a", "z"),
        interval=1.0,
        on_step=seen.append,
        on_complete=reports.append,
        clock=clock,
    )
    driver.play()
    for t in range(1, 20):
        clock.now = t
        driver.tick()

    assert [s.step for s in seen] == [1, 2, 3, 4, 5, 6, 7]
    assert seen[-1].run_state is RunState.COMPLETED
    assert reports == [CompletionReport(("a", "d", "f", "z"), RunState.COMPLETED)]
    assert driver.is_finished

    # finished drivers cannot be restarted
    driver.play()
    assert driver.state is DriverState.FINISHED


def test_run_sleeps_between_steps(sample):
    sleeps = []
    driver = StepDriver(DijkstraStepper(sample, "a", "z"), interval=0.5)

    report = driver.run(sleep=sleeps.append)

    assert report.run_state is RunState.COMPLETED
    assert report.final_path == ("a", "d", "f", "z")
    assert sleeps == [0.5] * 6


def test_run_reports_unreachable(split_graph):
    reports = []
    driver = StepDriver(
        DijkstraStepper(split_graph, "a", "c"),
        on_complete=reports.append,
    )
    report = driver.run(sleep=lambda _: None)

    assert report == CompletionReport((), RunState.UNREACHABLE)
    assert reports == [report]


def test_stepping_a_finished_run_reports_once(sample):
    reports = []
    stepper = DijkstraStepper(sample, "a", "a")
    driver = StepDriver(stepper, on_complete=reports.append)

    assert driver.step() is True
    assert driver.step() is False
    assert len(reports) == 1


def test_speed_controls(sample):
    driver = StepDriver(DijkstraStepper(sample, "a", "z"))
    driver.set_speed("turbo")
    assert driver.interval == 0.05
    driver.set_interval(0.0)
    assert driver.interval == 0.02
    with pytest.raises(ValueError):
        driver.set_speed("warp")
