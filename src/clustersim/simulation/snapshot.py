"""
Snapshot - Read-only gauge values for rendering adapters.

Provides:
- Snapshot: projection of the vehicle state after a tick
- Formatting helpers for odometer, trip and acceleration readouts
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict

from clustersim.utils import clamp
from clustersim.vehicle.consumption import ConsumptionModel
from clustersim.vehicle.signals import SignalController
from clustersim.vehicle.state import Units, VehicleState
from clustersim.vehicle.tachometer import TachometerModel

UNAVAILABLE = "—"


def format_odometer(km: float) -> str:
    """Format odometer distance, e.g. ``123,456.7``."""
    return f"{km:,.1f}"


def format_trip(km: float) -> str:
    """Format trip distance with three zero-padded integer digits, e.g. ``012.3``."""
    tenths = int(round(max(km, 0.0) * 10))
    whole, frac = divmod(tenths, 10)
    return f"{whole:03d}.{frac}"


def format_accel(accel_mps2: float) -> str:
    """Format signed acceleration, e.g. ``+1.23``."""
    return f"{accel_mps2:+.2f}"


def accel_angle(accel_g: float, max_g: float) -> float:
    """Accelerometer needle angle in degrees (+-60 at full scale)."""
    return (accel_g / max_g) * 60.0


def speed_angle(kmh: float, max_kmh: float) -> float:
    """Speedometer needle angle in degrees (-60 at rest, +60 at full scale)."""
    return (clamp(kmh, 0.0, max_kmh) / max_kmh) * 120.0 - 60.0


@dataclass(frozen=True)
class Snapshot:
    """Gauge values consumed by rendering adapters."""
    engine_on: bool

    # Accelerometer
    accel_mps2: float
    accel_text: str
    accel_angle_deg: float

    # Speedometer
    speed_kmh: int
    speed_angle_deg: float

    # Consumption (None / UNAVAILABLE while stationary)
    consumption: float | None
    consumption_text: str
    consumption_unit: str
    consumption_l100: float | None

    # Tachometer
    rpm: int
    rpm_fraction: float

    # Distance
    odo_km: float
    odo_text: str
    trip_km: float
    trip_text: str

    # Fuel
    fuel_l: float
    fuel_fraction: float
    fuel_percent: int
    low_fuel: bool

    # Indicators
    left_visible: bool
    right_visible: bool
    hazard_on: bool

    @classmethod
    def capture(
        cls,
        state: VehicleState,
        consumption: ConsumptionModel,
        tachometer: TachometerModel,
        signals: SignalController,
    ) -> "Snapshot":
        """Project the vehicle state into gauge values.

        Args:
            state: Current vehicle state
            consumption: Consumption model (display conversion)
            tachometer: Tachometer model (rpm bar scale)
            signals: Signal controller (lamp visibility)

        Returns:
            Immutable snapshot
        """
        cfg = consumption.config

        # Engine off renders zeroed motion regardless of residual values
        accel_g = state.accel_g if state.engine_on else 0.0
        kmh = state.speed_kmh if state.engine_on else 0.0
        accel_mps2 = round(accel_g * cfg.gravity, 2)

        cons = consumption.display_value(state)
        cons_l100 = None
        if cons is not None:
            cons = round(cons, 1)
            cons_l100 = state.cons_ema

        fuel_fraction = clamp(state.fuel_l / cfg.fuel_capacity_l, 0.0, 1.0)
        left, right = signals.visible(state)

        return cls(
            engine_on=state.engine_on,
            accel_mps2=accel_mps2,
            accel_text=format_accel(accel_mps2),
            accel_angle_deg=accel_angle(accel_g, cfg.max_g),
            speed_kmh=int(round(kmh)),
            speed_angle_deg=speed_angle(kmh, cfg.speedometer_max_kmh),
            consumption=cons,
            consumption_text=UNAVAILABLE if cons is None else f"{cons:.1f}",
            consumption_unit=state.units.label,
            consumption_l100=cons_l100,
            rpm=int(round(state.rpm)),
            rpm_fraction=tachometer.fraction(state),
            odo_km=state.odo_km,
            odo_text=format_odometer(state.odo_km),
            trip_km=state.trip_km,
            trip_text=format_trip(state.trip_km),
            fuel_l=state.fuel_l,
            fuel_fraction=fuel_fraction,
            fuel_percent=int(round(fuel_fraction * 100)),
            low_fuel=fuel_fraction < cfg.low_fuel_fraction,
            left_visible=left,
            right_visible=right,
            hazard_on=state.hazard_on,
        )

    @property
    def consumption_available(self) -> bool:
        """Check if a numeric consumption reading is shown."""
        return self.consumption is not None

    @property
    def units(self) -> Units:
        """Consumption display unit."""
        return Units(self.consumption_unit)

    def to_dict(self) -> Dict[str, Any]:
        """Get snapshot as a plain dictionary."""
        return asdict(self)
