"""
driver.py — Timed Step Driver
==============================
Schedules DijkstraStepper.advance() at a fixed interval for animation.
The stepper holds the whole algorithm state between calls, so the driver
can pause for any length of time, or simply stop calling, without
affecting correctness.

State machine:
    IDLE     →  play()   →  PLAYING
    PLAYING  →  pause()  →  PAUSED
    PAUSED   →  play()   →  PLAYING
    PLAYING  →  (stepper terminal) → FINISHED

Two ways to drive it:
  • tick(now)   – call from an existing event loop / timer; advances when
                  `interval` seconds have elapsed since the last advance.
  • run(sleep)  – blocking loop for console use; sleeps between advances.

Thread safety:
  Not thread-safe, same as the stepper it drives.
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Hashable, Optional, Tuple

from algorithms import DijkstraStepper, RunState, Snapshot
from log_config import get_logger

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class DriverState(Enum):
    IDLE     = "idle"
    PLAYING  = "playing"
    PAUSED   = "paused"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed presets (seconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   1.0,    # one node per second
    "medium": 0.4,
    "fast":   0.15,
    "turbo":  0.05,
}

MIN_INTERVAL = 0.02


@dataclass(frozen=True)
class CompletionReport:
    final_path: Tuple[Hashable, ...]
    run_state:  RunState


# ---------------------------------------------------------------------------
# StepDriver
# ---------------------------------------------------------------------------
class StepDriver:
    """
    Attributes:
        stepper     : The DijkstraStepper being driven.
        state       : Current DriverState.
        interval    : Seconds between advances.
        on_step     : Optional callback(Snapshot) after every advance.
        on_complete : Optional callback(CompletionReport), fired once when
                      the stepper reaches a terminal state.
    """

    def __init__(
        self,
        stepper: DijkstraStepper,
        interval: float = SPEED_PRESETS["slow"],
        on_step: Optional[Callable[[Snapshot], None]] = None,
        on_complete: Optional[Callable[[CompletionReport], None]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.stepper:     DijkstraStepper = stepper
        self.state:       DriverState     = DriverState.IDLE
        self.interval:    float           = max(MIN_INTERVAL, interval)
        self.on_step      = on_step
        self.on_complete  = on_complete
        self._clock       = clock
        self._last_tick:  float           = 0.0
        self._reported:   bool            = False

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state == DriverState.FINISHED:
            return
        self.state      = DriverState.PLAYING
        self._last_tick = self._clock()

    def pause(self) -> None:
        if self.state == DriverState.PLAYING:
            self.state = DriverState.PAUSED

    def toggle_play(self) -> None:
        if self.state == DriverState.PLAYING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Advancing
    # ------------------------------------------------------------------
    def step(self) -> bool:
        """Advance once right now.  Returns False if the run was already over."""
        if self.stepper.is_terminal:
            self._complete()
            return False
        self.stepper.advance()
        if self.on_step:
            self.on_step(self.stepper.snapshot())
        if self.stepper.is_terminal:
            self._complete()
        return True

    def tick(self, now: Optional[float] = None) -> bool:
        """
        Call periodically.  If playing and `interval` has elapsed since the
        last advance, advances once.  Returns True if a step was taken.
        """
        if self.state != DriverState.PLAYING:
            return False
        now = self._clock() if now is None else now
        if now - self._last_tick < self.interval:
            return False
        self._last_tick = now
        return self.step()

    def run(self, sleep: Callable[[float], None] = time.sleep) -> CompletionReport:
        """Blocking: advance every `interval` seconds until the run is over."""
        self.play()
        while self.state == DriverState.PLAYING:
            self.step()
            if self.state == DriverState.PLAYING:
                sleep(self.interval)
        return self.report()

    def report(self) -> CompletionReport:
        return CompletionReport(
            final_path=self.stepper.final_path,
            run_state=self.stepper.state,
        )

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        if preset not in SPEED_PRESETS:
            raise ValueError(
                f"Unknown speed preset {preset!r}; expected one of {sorted(SPEED_PRESETS)}"
            )
        self.interval = SPEED_PRESETS[preset]

    def set_interval(self, seconds: float) -> None:
        self.interval = max(MIN_INTERVAL, seconds)

    @property
    def is_finished(self) -> bool:
        return self.state == DriverState.FINISHED

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _complete(self) -> None:
        self.state = DriverState.FINISHED
        if self._reported:
            return
        self._reported = True
        report = self.report()
        logger.info("Driver finished: %s, path=%s", report.run_state.value, list(report.final_path))
        if self.on_complete:
            self.on_complete(report)
