"""
Tachometer model - Engine rpm smoothing.
"""

from clustersim.utils import clamp, lerp
from clustersim.vehicle.state import VehicleConfig, VehicleState


class TachometerModel:
    """Smooths engine rpm towards a pedal and speed derived target.

    With the engine off rpm decays quickly towards zero regardless of
    pedal state.
    """

    def __init__(self, config: VehicleConfig | None = None):
        """Initialize tachometer.

        Args:
            config: Vehicle configuration. Uses defaults if None.
        """
        self.config = config or VehicleConfig()

    def target(self, state: VehicleState) -> float:
        """Get the rpm the needle is moving towards."""
        cfg = self.config
        if not state.engine_on:
            return 0.0

        speed_bonus = min(cfg.speed_rpm_bonus_max, state.speed_mps * cfg.speed_rpm_gain)
        if state.accel_held:
            base = cfg.rpm_accel
        elif state.brake_held:
            base = cfg.rpm_brake
        else:
            base = cfg.rpm_cruise
        return clamp(base + speed_bonus, 0.0, cfg.rpm_max)

    def update(self, state: VehicleState) -> float:
        """Advance rpm by one tick.

        Args:
            state: Vehicle state to mutate

        Returns:
            New engine rpm
        """
        cfg = self.config
        if state.engine_on:
            rpm = lerp(state.rpm, self.target(state), cfg.rpm_smoothing)
        else:
            rpm = lerp(state.rpm, 0.0, cfg.rpm_off_decay)

        state.rpm = clamp(rpm, 0.0, cfg.rpm_max)
        return state.rpm

    def fraction(self, state: VehicleState) -> float:
        """Get rpm as a fraction of the tachometer scale (0-1)."""
        return clamp(state.rpm / self.config.rpm_max, 0.0, 1.0)
