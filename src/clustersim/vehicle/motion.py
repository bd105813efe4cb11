"""
Motion model - Longitudinal acceleration, speed and distance.

Simulates:
- Lagged response of acceleration towards the pedal target
- Speed integration, floored at zero (no reverse gear)
- Distance travelled per tick
"""

from clustersim.utils import clamp, lerp
from clustersim.vehicle.state import VehicleConfig, VehicleState


class MotionModel:
    """Integrates target acceleration into speed and distance."""

    def __init__(self, config: VehicleConfig | None = None):
        """Initialize motion model.

        Args:
            config: Vehicle configuration. Uses defaults if None.
        """
        self.config = config or VehicleConfig()

    def freeze(self, state: VehicleState) -> None:
        """Hold the vehicle still (engine off)."""
        state.accel_g = 0.0
        state.target_g = 0.0
        state.speed_mps = 0.0

    def update(self, state: VehicleState, dt: float) -> float:
        """Advance motion by one tick.

        Args:
            state: Vehicle state to mutate
            dt: Time step in seconds

        Returns:
            Distance travelled this tick in km (0 with the engine off)
        """
        if not state.engine_on:
            self.freeze(state)
            return 0.0

        cfg = self.config

        # Smooth towards target (engine/suspension lag)
        accel_g = lerp(state.accel_g, state.target_g, cfg.accel_smoothing)
        state.accel_g = clamp(accel_g, -cfg.max_g, cfg.max_g)

        a_mps2 = state.accel_g * cfg.gravity
        state.speed_mps = clamp(state.speed_mps + a_mps2 * dt, 0.0, cfg.max_speed_mps)

        return state.speed_mps * dt / 1000.0
