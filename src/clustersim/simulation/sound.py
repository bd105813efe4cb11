"""
Sound cues - Audible feedback described as data.

Synthesis belongs to the audio adapter; the simulator only announces
which cue to play.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Beep:
    """A short square-wave beep."""
    name: str
    frequency_hz: float = 880.0
    duration_ms: int = 100
    volume: float = 0.07


ENGINE_START = Beep("engine_start", 420.0, 120, 0.09)
ENGINE_STOP = Beep("engine_stop", 280.0, 140, 0.08)
INDICATOR_TICK = Beep("indicator_tick", 940.0, 70, 0.06)
