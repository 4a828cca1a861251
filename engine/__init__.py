"""
engine/
-------
Playback, recording and session layer.

    from engine import StepDriver, Recorder, VisualizerSession
"""

from engine.driver   import StepDriver, DriverState, CompletionReport, SPEED_PRESETS
from engine.recorder import Recorder, RunMetrics
from engine.session  import VisualizerSession, NoActiveRunError

__all__ = [
    "StepDriver",
    "DriverState",
    "CompletionReport",
    "SPEED_PRESETS",
    "Recorder",
    "RunMetrics",
    "VisualizerSession",
    "NoActiveRunError",
]
