"""
Signal controller - Turn indicators and hazard lights.

Handles:
- Mutually exclusive left / right / hazard selection
- Blink phase, flipped by a fixed-rate timer
- Audible tick on the rising edge of the blink phase
"""

from dataclasses import dataclass

from clustersim.vehicle.state import VehicleState


@dataclass(frozen=True)
class BlinkState:
    """Result of one blink timer step."""
    blink_on: bool = False
    left_visible: bool = False
    right_visible: bool = False
    any_active: bool = False
    rising_edge: bool = False
    tick_audible: bool = False


class SignalController:
    """Indicator state machine over {off, left, right, hazard}.

    Switching any indicator on clears the other two. Switching one off
    only clears its own flag.
    """

    def set_left(self, state: VehicleState, on: bool) -> None:
        """Switch the left indicator."""
        state.left_on = on
        if on:
            state.right_on = False
            state.hazard_on = False

    def set_right(self, state: VehicleState, on: bool) -> None:
        """Switch the right indicator."""
        state.right_on = on
        if on:
            state.left_on = False
            state.hazard_on = False

    def set_hazard(self, state: VehicleState, on: bool) -> None:
        """Switch the hazard lights."""
        state.hazard_on = on
        if on:
            state.left_on = False
            state.right_on = False

    def is_active(self, state: VehicleState) -> bool:
        """Check if any indicator is switched on."""
        return state.left_on or state.right_on or state.hazard_on

    def visible(self, state: VehicleState) -> tuple[bool, bool]:
        """Get lamp visibility for the current blink phase.

        Returns:
            Tuple of (left_visible, right_visible)
        """
        if state.hazard_on:
            return state.blink_on, state.blink_on
        return state.left_on and state.blink_on, state.right_on and state.blink_on

    def blink(self, state: VehicleState) -> BlinkState:
        """Flip the blink phase.

        Args:
            state: Vehicle state to mutate

        Returns:
            Lamp visibility and whether this step should tick audibly
        """
        previous = state.blink_on
        state.blink_on = not previous

        left, right = self.visible(state)
        active = self.is_active(state)
        rising = state.blink_on and not previous

        return BlinkState(
            blink_on=state.blink_on,
            left_visible=left,
            right_visible=right,
            any_active=active,
            rising_edge=rising,
            tick_audible=rising and active and state.sound_on,
        )
