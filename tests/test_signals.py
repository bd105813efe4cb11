"""Tests for turn indicators and hazard lights."""

import pytest

from clustersim.vehicle.signals import SignalController, BlinkState
from clustersim.vehicle.state import VehicleState


@pytest.fixture
def signals():
    return SignalController()


@pytest.fixture
def state():
    return VehicleState.initial()


class TestSignalSelection:
    """Test mutual exclusion of indicators."""

    def test_left_clears_others(self, signals, state):
        """Test left indicator clears right and hazard."""
        signals.set_right(state, True)
        signals.set_hazard(state, True)
        signals.set_left(state, True)

        assert state.left_on
        assert not state.right_on
        assert not state.hazard_on

    def test_right_clears_others(self, signals, state):
        """Test right indicator clears left and hazard."""
        signals.set_hazard(state, True)
        signals.set_right(state, True)

        assert state.right_on
        assert not state.left_on
        assert not state.hazard_on

    def test_hazard_clears_directionals(self, signals, state):
        """Test hazard clears both directional indicators."""
        signals.set_left(state, True)
        signals.set_hazard(state, True)

        assert state.hazard_on
        assert not state.left_on
        assert not state.right_on

    def test_switch_off_only_clears_own_flag(self, signals, state):
        """Test switching off leaves other flags alone."""
        signals.set_left(state, True)
        signals.set_right(state, False)
        signals.set_hazard(state, False)

        assert state.left_on

        signals.set_left(state, False)
        assert not signals.is_active(state)

    @pytest.mark.parametrize("command", ["set_left", "set_right", "set_hazard"])
    def test_idempotent(self, signals, state, command):
        """Test switching on twice equals switching on once."""
        getattr(signals, command)(state, True)
        once = VehicleState(**vars(state))
        getattr(signals, command)(state, True)

        assert state == once


class TestBlink:
    """Test the blink phase."""

    def test_blink_flips_phase(self, signals, state):
        """Test each blink toggles the phase."""
        assert signals.blink(state).blink_on is True
        assert signals.blink(state).blink_on is False
        assert signals.blink(state).blink_on is True

    def test_left_visibility(self, signals, state):
        """Test only the left lamp lights for the left indicator."""
        signals.set_left(state, True)

        lit = signals.blink(state)
        assert lit == BlinkState(
            blink_on=True, left_visible=True, right_visible=False,
            any_active=True, rising_edge=True, tick_audible=False,
        )

        dark = signals.blink(state)
        assert not dark.left_visible
        assert not dark.right_visible

    def test_hazard_lights_both(self, signals, state):
        """Test hazard lights both lamps together."""
        signals.set_hazard(state, True)

        blink = signals.blink(state)

        assert blink.left_visible
        assert blink.right_visible

    def test_nothing_visible_when_off(self, signals, state):
        """Test lamps stay dark with no indicator selected."""
        blink = signals.blink(state)

        assert blink.blink_on
        assert not blink.left_visible
        assert not blink.right_visible
        assert not blink.any_active

    def test_tick_audible_on_rising_edge_with_sound(self, signals, state):
        """Test audible tick requires rising edge, active indicator and sound."""
        state.sound_on = True
        signals.set_right(state, True)

        assert signals.blink(state).tick_audible
        assert not signals.blink(state).tick_audible

    def test_no_tick_without_indicator(self, signals, state):
        """Test no audible tick while indicators are off."""
        state.sound_on = True

        blink = signals.blink(state)

        assert blink.rising_edge
        assert not blink.tick_audible
