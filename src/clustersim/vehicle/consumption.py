"""
Consumption model - Fuel rate and tank depletion.

Simulates:
- Instantaneous consumption from acceleration and relative speed
- Smoothed (EMA) consumption for display
- Fuel burn proportional to distance
- L/100km <-> km/L presentation
"""

from clustersim.utils import ema
from clustersim.vehicle.state import Units, VehicleConfig, VehicleState


class ConsumptionModel:
    """Derives fuel consumption and depletes the tank.

    While the vehicle is not moving the instantaneous rate is the base
    rate exactly, the EMA keeps running, and no fuel is burnt.
    """

    def __init__(self, config: VehicleConfig | None = None):
        """Initialize consumption model.

        Args:
            config: Vehicle configuration. Uses defaults if None.
        """
        self.config = config or VehicleConfig()

    def is_moving(self, state: VehicleState) -> bool:
        """Check if the vehicle counts as moving for consumption purposes."""
        return state.speed_mps > self.config.moving_threshold_mps

    def instantaneous(self, state: VehicleState) -> float:
        """Get instantaneous consumption in L/100km.

        Args:
            state: Current vehicle state

        Returns:
            Consumption rate; the base rate when not moving
        """
        cfg = self.config
        if not self.is_moving(state):
            return cfg.base_l100

        v_rel = state.speed_mps / cfg.max_speed_mps
        return (
            cfg.base_l100
            + cfg.consumption_k_a * abs(state.accel_g)
            + cfg.consumption_k_v * v_rel
        )

    def update(self, state: VehicleState, d_km: float) -> float:
        """Update smoothed consumption and burn fuel for one tick.

        Args:
            state: Vehicle state to mutate
            d_km: Distance travelled this tick in km

        Returns:
            Fuel used this tick in liters
        """
        inst_l100 = self.instantaneous(state)
        state.cons_ema = ema(inst_l100, state.cons_ema, self.config.consumption_alpha)

        if not self.is_moving(state):
            return 0.0

        used_l = inst_l100 * d_km / 100.0
        remaining = max(0.0, state.fuel_l - used_l)
        used_l = state.fuel_l - remaining
        state.fuel_l = remaining
        return used_l

    @staticmethod
    def convert(cons_l100: float, units: Units) -> float:
        """Convert a L/100km rate to the given display unit.

        A non-positive rate converts to 0 km/L.
        """
        if units is Units.KM_PER_L:
            return 100.0 / cons_l100 if cons_l100 > 0 else 0.0
        return cons_l100

    def display_value(self, state: VehicleState) -> float | None:
        """Get the consumption value to display.

        Returns:
            Smoothed rate in the selected unit, or None when unavailable
            (engine off or not moving)
        """
        if not state.engine_on or not self.is_moving(state):
            return None
        return self.convert(state.cons_ema, state.units)
