"""
Engine controller - Ignition state machine.

Handles:
- Engine start (idle rpm target)
- Engine stop (pedals released, motion zeroed immediately)
"""

from clustersim.vehicle.state import VehicleConfig, VehicleState


class EngineController:
    """Governs the engine on/off state and the motion-freeze policy.

    Turning the engine off is a hard reset of motion: acceleration,
    target and speed drop to zero at once instead of decaying. Engine
    rpm is left to the tachometer, which decays it over later ticks.
    """

    def __init__(self, config: VehicleConfig | None = None):
        """Initialize controller.

        Args:
            config: Vehicle configuration. Uses defaults if None.
        """
        self.config = config or VehicleConfig()

    def set_engine(self, state: VehicleState, on: bool) -> None:
        """Switch the engine on or off.

        Re-applying the current value is safe and repeats the same
        transition.

        Args:
            state: Vehicle state to mutate
            on: True to start, False to stop
        """
        state.engine_on = on

        if on:
            state.rpm_target = self.config.rpm_idle
            state.target_g = 0.0
        else:
            state.accel_held = False
            state.brake_held = False
            state.rpm_target = 0.0
            state.accel_g = 0.0
            state.target_g = 0.0
            state.speed_mps = 0.0

    def is_engine_on(self, state: VehicleState) -> bool:
        """Check if the engine is running."""
        return state.engine_on
