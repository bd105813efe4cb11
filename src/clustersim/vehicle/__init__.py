"""
Vehicle module - Instrument cluster vehicle models.

This module contains the state record and the components that act on it:
- VehicleState / VehicleConfig: simulated fields and constants
- EngineController: ignition and motion freeze
- PedalInputs: accelerator and brake
- SignalController: indicators and hazard lights
- MotionModel: acceleration, speed and distance
- ConsumptionModel: fuel rate and tank
- TachometerModel: engine rpm
- TripOdometer: odometer and trip
"""

from clustersim.vehicle.state import VehicleState, VehicleConfig, Units
from clustersim.vehicle.engine import EngineController
from clustersim.vehicle.pedals import PedalInputs
from clustersim.vehicle.signals import SignalController, BlinkState
from clustersim.vehicle.motion import MotionModel
from clustersim.vehicle.consumption import ConsumptionModel
from clustersim.vehicle.tachometer import TachometerModel
from clustersim.vehicle.trip import TripOdometer

__all__ = [
    "VehicleState",
    "VehicleConfig",
    "Units",
    "EngineController",
    "PedalInputs",
    "SignalController",
    "BlinkState",
    "MotionModel",
    "ConsumptionModel",
    "TachometerModel",
    "TripOdometer",
]
