"""
clustersim - A vehicle instrument cluster simulation.

This package provides a discrete-time dashboard simulation with:
- Engine on/off state machine that freezes motion when off
- Pedal-driven acceleration, speed and tachometer
- Fuel consumption with smoothed L/100km or km/L readout
- Turn indicators and hazard lights with a blink timer
- Odometer and resettable trip distance
- Telemetry recording of gauge values
"""

__version__ = "0.1.0"

from clustersim.simulation.simulator import Simulator, SimulatorConfig
from clustersim.simulation.scheduler import Scheduler
from clustersim.simulation.snapshot import Snapshot
from clustersim.vehicle.state import VehicleState, VehicleConfig, Units

__all__ = [
    "Simulator",
    "SimulatorConfig",
    "Scheduler",
    "Snapshot",
    "VehicleState",
    "VehicleConfig",
    "Units",
    "__version__",
]
