"""
Simulator - Instrument cluster command and tick interface.

Provides:
- Command API used by input adapters (engine, pedals, indicators, trip,
  units, sound)
- Fixed order per-tick update of the vehicle models
- Snapshot projection for rendering adapters
- Callback hooks for post-tick consumers and sound cues
"""

from dataclasses import dataclass, field
from typing import Callable, List
import logging

from clustersim.simulation.snapshot import Snapshot
from clustersim.simulation.sound import Beep, ENGINE_START, ENGINE_STOP, INDICATOR_TICK
from clustersim.vehicle.consumption import ConsumptionModel
from clustersim.vehicle.engine import EngineController
from clustersim.vehicle.motion import MotionModel
from clustersim.vehicle.pedals import PedalInputs
from clustersim.vehicle.signals import BlinkState, SignalController
from clustersim.vehicle.state import Units, VehicleConfig, VehicleState
from clustersim.vehicle.tachometer import TachometerModel
from clustersim.vehicle.trip import TripOdometer

logger = logging.getLogger(__name__)


@dataclass
class SimulatorConfig:
    """Simulator configuration."""
    vehicle: VehicleConfig = field(default_factory=VehicleConfig)

    # Indicator blink timer
    blink_period_s: float = 0.5

    def __post_init__(self):
        """Validate timer rates."""
        if self.vehicle.hz <= 0:
            raise ValueError(f"Tick rate must be positive, got {self.vehicle.hz}")
        if self.blink_period_s <= 0:
            raise ValueError(f"Blink period must be positive, got {self.blink_period_s}")

    @property
    def hz(self) -> float:
        """Simulation tick rate."""
        return self.vehicle.hz

    @property
    def fixed_dt(self) -> float:
        """Simulation time step in seconds."""
        return self.vehicle.dt


class Simulator:
    """Instrument cluster simulator.

    Owns the VehicleState and is the only path that mutates it. Commands
    apply immediately and are visible to the next tick. Every command
    is total: invalid input (e.g. a pedal with the engine off) is ignored.

    Tick order: MotionModel -> ConsumptionModel -> TachometerModel ->
    TripOdometer. With the engine off motion is frozen, rpm decays and
    odometer, trip, fuel and consumption are left untouched.

    Usage:
        sim = Simulator()
        sim.set_engine(True)
        sim.press_accel(True)
        for _ in range(20):
            snapshot = sim.tick()
    """

    def __init__(
        self,
        config: SimulatorConfig | None = None,
        state: VehicleState | None = None,
    ):
        """Initialize simulator.

        Args:
            config: Simulator configuration. Uses defaults if None.
            state: Initial vehicle state. Uses process-start defaults if None.
        """
        self.config = config or SimulatorConfig()
        vehicle = self.config.vehicle

        # Components
        self.engine = EngineController(vehicle)
        self.pedals = PedalInputs(vehicle, self.engine)
        self.signals = SignalController()
        self.motion = MotionModel(vehicle)
        self.consumption = ConsumptionModel(vehicle)
        self.tachometer = TachometerModel(vehicle)
        self.trip = TripOdometer()

        self._state = state or VehicleState.initial(vehicle)

        # Timing
        self._time: float = 0.0
        self._frame: int = 0

        # Callbacks
        self._post_tick_callbacks: List[Callable[["Simulator", Snapshot], None]] = []
        self._sound_listeners: List[Callable[[Beep], None]] = []
        self._trip_reset_callbacks: List[Callable[["Simulator"], None]] = []

    @property
    def state(self) -> VehicleState:
        """The owned vehicle state."""
        return self._state

    @property
    def time(self) -> float:
        """Simulated time in seconds."""
        return self._time

    @property
    def frame(self) -> int:
        """Number of ticks run."""
        return self._frame

    # Callbacks

    def add_post_tick_callback(self, callback: Callable[["Simulator", Snapshot], None]) -> None:
        """Add callback called after each tick.

        Args:
            callback: Function taking (simulator, snapshot) arguments
        """
        self._post_tick_callbacks.append(callback)

    def add_sound_listener(self, callback: Callable[[Beep], None]) -> None:
        """Add listener for sound cues (only emitted while sound is on).

        Args:
            callback: Function taking a Beep
        """
        self._sound_listeners.append(callback)

    def add_trip_reset_callback(self, callback: Callable[["Simulator"], None]) -> None:
        """Add callback called after the trip is reset.

        Args:
            callback: Function taking the simulator
        """
        self._trip_reset_callbacks.append(callback)

    def _emit(self, beep: Beep) -> None:
        if not self._state.sound_on:
            return
        for listener in self._sound_listeners:
            listener(beep)

    # Commands

    def set_engine(self, on: bool) -> None:
        """Start or stop the engine."""
        self.engine.set_engine(self._state, on)
        logger.info("Engine %s", "started" if on else "stopped")
        self._emit(ENGINE_START if on else ENGINE_STOP)

    def press_accel(self, held: bool) -> None:
        """Press or release the accelerator."""
        self.pedals.press_accel(self._state, held)

    def press_brake(self, held: bool) -> None:
        """Press or release the brake."""
        self.pedals.press_brake(self._state, held)

    def set_left(self, on: bool) -> None:
        """Switch the left indicator."""
        self.signals.set_left(self._state, on)

    def set_right(self, on: bool) -> None:
        """Switch the right indicator."""
        self.signals.set_right(self._state, on)

    def set_hazard(self, on: bool) -> None:
        """Switch the hazard lights."""
        self.signals.set_hazard(self._state, on)

    def reset_trip(self) -> None:
        """Reset the trip distance to zero."""
        self.trip.reset_trip(self._state)
        logger.info("Trip reset at odometer %.1f km", self._state.odo_km)
        for callback in self._trip_reset_callbacks:
            callback(self)

    def set_units(self, units: Units) -> None:
        """Select the consumption display unit."""
        self._state.use_km_per_l = units is Units.KM_PER_L

    def set_sound(self, on: bool) -> None:
        """Enable or disable sound cues."""
        self._state.sound_on = on

    # Ticks

    def tick(self, dt: float | None = None) -> Snapshot:
        """Advance the simulation by one tick.

        Args:
            dt: Time step (uses the fixed step if None). A non-positive
                step integrates nothing and leaves the state untouched.

        Returns:
            Snapshot of the updated state
        """
        dt = self.config.fixed_dt if dt is None else dt
        if dt <= 0:
            return self.snapshot()

        state = self._state

        if state.engine_on:
            d_km = self.motion.update(state, dt)
            self.consumption.update(state, d_km)
            self.tachometer.update(state)
            self.trip.accumulate(state, d_km)
        else:
            self.motion.freeze(state)
            self.tachometer.update(state)

        self._time += dt
        self._frame += 1

        snapshot = self.snapshot()
        for callback in self._post_tick_callbacks:
            callback(self, snapshot)
        return snapshot

    def blink_tick(self) -> BlinkState:
        """Advance the indicator blink phase.

        Returns:
            Lamp visibility for the new phase
        """
        blink = self.signals.blink(self._state)
        if blink.tick_audible:
            self._emit(INDICATOR_TICK)
        return blink

    def snapshot(self) -> Snapshot:
        """Get gauge values for the current state."""
        return Snapshot.capture(
            self._state,
            self.consumption,
            self.tachometer,
            self.signals,
        )
