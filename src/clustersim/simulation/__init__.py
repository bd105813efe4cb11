"""
Simulation module - Tick loop and rendering interface.

This module contains:
- Simulator: command API and fixed-order tick
- Scheduler: simulation and blink timers
- Snapshot: read-only gauge values
- Beep: sound cues for the audio adapter
"""

from clustersim.simulation.simulator import Simulator, SimulatorConfig
from clustersim.simulation.scheduler import Scheduler, FixedRateTimer
from clustersim.simulation.snapshot import Snapshot
from clustersim.simulation.sound import Beep

__all__ = [
    "Simulator",
    "SimulatorConfig",
    "Scheduler",
    "FixedRateTimer",
    "Snapshot",
    "Beep",
]
