"""
Pedal inputs - Accelerator and brake hold events.

Translates pedal presses into acceleration and rpm targets. Pedals are
ignored while the engine is off.
"""

from clustersim.vehicle.engine import EngineController
from clustersim.vehicle.state import VehicleConfig, VehicleState


class PedalInputs:
    """Accelerator/brake handling.

    Precedence when both pedals are held:
    - target_g follows the most recent press or release (last command wins)
    - rpm_target prefers the accelerator; brake rpm only applies while
      the accelerator is up

    Releasing the accelerator always selects cruise rpm, even with the
    brake still held. Brake rpm returns on the next brake event.
    """

    def __init__(
        self,
        config: VehicleConfig | None = None,
        engine: EngineController | None = None,
    ):
        """Initialize pedal handling.

        Args:
            config: Vehicle configuration. Uses defaults if None.
            engine: Engine controller used to gate input
        """
        self.config = config or VehicleConfig()
        self.engine = engine or EngineController(self.config)

    def press_accel(self, state: VehicleState, held: bool) -> None:
        """Press or release the accelerator.

        Args:
            state: Vehicle state to mutate
            held: True while the pedal is held down
        """
        if not self.engine.is_engine_on(state):
            return

        state.accel_held = held
        if held:
            state.target_g = self.config.accel_target_g
        elif not state.brake_held:
            state.target_g = 0.0

        if held:
            state.rpm_target = self.config.rpm_accel
        else:
            state.rpm_target = self.config.rpm_cruise if state.engine_on else 0.0

    def press_brake(self, state: VehicleState, held: bool) -> None:
        """Press or release the brake.

        Args:
            state: Vehicle state to mutate
            held: True while the pedal is held down
        """
        if not self.engine.is_engine_on(state):
            return

        state.brake_held = held
        if held:
            state.target_g = self.config.brake_target_g
        elif not state.accel_held:
            state.target_g = 0.0

        if not state.accel_held:
            state.rpm_target = self.config.rpm_brake if state.engine_on else 0.0
