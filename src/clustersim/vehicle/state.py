"""
Vehicle state - The single mutable record behind the instrument cluster.

Contains:
- VehicleConfig: simulation constants (rates, limits, gauge scales)
- VehicleState: every simulated field, owned by the Simulator
- Units: consumption display unit
"""

from dataclasses import dataclass
from enum import Enum


class Units(Enum):
    """Consumption display units."""
    L_PER_100KM = "L/100 km"
    KM_PER_L = "km/L"

    @property
    def label(self) -> str:
        """Unit label shown next to the consumption value."""
        return self.value


@dataclass
class VehicleConfig:
    """Configuration for the simulated vehicle.

    Default values describe a small passenger car with a 50 L tank
    and a 5000 rpm tachometer scale.
    """
    # Tick rate
    hz: float = 20.0

    # Physics
    gravity: float = 9.81
    max_g: float = 2.0
    max_speed_mps: float = 55.0        # ~198 km/h
    speedometer_max_kmh: float = 200.0

    # Pedal targets (g)
    accel_target_g: float = 0.6
    brake_target_g: float = -0.9

    # Smoothing factors (per tick)
    accel_smoothing: float = 0.06
    rpm_smoothing: float = 0.08
    rpm_off_decay: float = 0.2

    # Fuel
    fuel_capacity_l: float = 50.0
    base_l100: float = 6.0             # Idle/base consumption in L/100km
    consumption_k_a: float = 2.5       # Per g of acceleration
    consumption_k_v: float = 1.2       # Per unit of relative speed
    consumption_alpha: float = 0.15
    moving_threshold_mps: float = 0.5
    low_fuel_fraction: float = 0.15

    # Tachometer
    rpm_idle: float = 800.0
    rpm_brake: float = 900.0
    rpm_cruise: float = 1200.0
    rpm_accel: float = 3500.0
    rpm_max: float = 5000.0
    speed_rpm_gain: float = 20.0       # rpm per m/s
    speed_rpm_bonus_max: float = 900.0

    # Initial readings
    initial_odo_km: float = 123456.7
    initial_trip_km: float = 12.3
    initial_fuel_fraction: float = 0.6

    @property
    def dt(self) -> float:
        """Fixed tick length in seconds."""
        return 1.0 / self.hz


@dataclass
class VehicleState:
    """All simulated vehicle fields.

    Invariants kept by the components:
    - at most one of left_on/right_on, and neither while hazard_on
    - |accel_g| <= max_g, 0 <= speed_mps <= max_speed_mps
    - 0 <= rpm <= rpm_max, 0 <= fuel_l <= fuel_capacity_l
    - engine off: accel_g = target_g = speed_mps = 0, odometer/trip/fuel frozen
    """
    # Switches
    engine_on: bool = False
    accel_held: bool = False
    brake_held: bool = False

    # Indicators
    left_on: bool = False
    right_on: bool = False
    hazard_on: bool = False
    blink_on: bool = False

    # Motion
    accel_g: float = 0.0
    target_g: float = 0.0
    speed_mps: float = 0.0

    # Engine speed
    rpm: float = 0.0
    rpm_target: float = 0.0

    # Distance and fuel
    odo_km: float = 0.0
    trip_km: float = 0.0
    fuel_l: float = 0.0
    cons_ema: float = 0.0

    # Presentation toggles
    use_km_per_l: bool = False
    sound_on: bool = False

    @classmethod
    def initial(cls, config: VehicleConfig | None = None) -> "VehicleState":
        """Create the process-start state.

        Args:
            config: Vehicle configuration. Uses defaults if None.

        Returns:
            Fresh state with the configured odometer, trip and fuel readings
        """
        config = config or VehicleConfig()
        return cls(
            odo_km=config.initial_odo_km,
            trip_km=config.initial_trip_km,
            fuel_l=config.fuel_capacity_l * config.initial_fuel_fraction,
            cons_ema=config.base_l100,
        )

    @property
    def units(self) -> Units:
        """Current consumption display unit."""
        return Units.KM_PER_L if self.use_km_per_l else Units.L_PER_100KM

    @property
    def speed_kmh(self) -> float:
        """Current speed in km/h."""
        return self.speed_mps * 3.6
