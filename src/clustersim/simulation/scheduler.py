"""
Scheduler - Fixed-rate timers driving the simulator.

Provides:
- FixedRateTimer: fires a callback once per elapsed period
- Scheduler: simulation tick (20 Hz) and blink tick (2 Hz) timers,
  driven synchronously or in real time
"""

from typing import Callable
import logging
import time

from clustersim.simulation.simulator import Simulator

logger = logging.getLogger(__name__)

# Tolerance for accumulated float time
_EPSILON = 1e-9


class FixedRateTimer:
    """Accumulates elapsed time and fires once per whole period."""

    def __init__(self, period_s: float, callback: Callable[[], object]):
        """Initialize timer.

        Args:
            period_s: Period in seconds
            callback: Function called on every period boundary
        """
        if period_s <= 0:
            raise ValueError(f"Timer period must be positive, got {period_s}")
        self.period_s = period_s
        self.callback = callback

        self._accumulated: float = 0.0
        self._fired: int = 0

    @property
    def fired(self) -> int:
        """Total number of times the timer fired."""
        return self._fired

    def advance(self, elapsed_s: float) -> int:
        """Advance the timer.

        Args:
            elapsed_s: Time passed since the last call

        Returns:
            Number of callbacks fired
        """
        self._accumulated += max(elapsed_s, 0.0)

        count = 0
        while self._accumulated + _EPSILON >= self.period_s:
            self._accumulated -= self.period_s
            self.callback()
            count += 1

        self._accumulated = max(self._accumulated, 0.0)
        self._fired += count
        return count

    def reset(self) -> None:
        """Discard accumulated time."""
        self._accumulated = 0.0


class Scheduler:
    """Drives a Simulator with its two independent timers.

    Usage:
        scheduler = Scheduler(sim)
        scheduler.advance(1.0)           # 20 ticks, 2 blinks, no waiting
        scheduler.run(10.0)              # wall-clock run
    """

    def __init__(self, simulator: Simulator):
        """Initialize scheduler.

        Args:
            simulator: Simulator to drive
        """
        self.simulator = simulator
        config = simulator.config

        self.tick_timer = FixedRateTimer(config.fixed_dt, self._on_tick)
        self.blink_timer = FixedRateTimer(config.blink_period_s, self._on_blink)

        self._running: bool = False

    @property
    def is_running(self) -> bool:
        """Check if a real-time run is in progress."""
        return self._running

    def _on_tick(self) -> None:
        self.simulator.tick(self.tick_timer.period_s)

    def _on_blink(self) -> None:
        self.simulator.blink_tick()

    def advance(self, elapsed_s: float) -> tuple[int, int]:
        """Advance both timers synchronously.

        Args:
            elapsed_s: Time to advance in seconds

        Returns:
            Tuple of (ticks fired, blinks fired)
        """
        return (
            self.tick_timer.advance(elapsed_s),
            self.blink_timer.advance(elapsed_s),
        )

    def run(self, duration_s: float, real_time: bool = True) -> tuple[int, int]:
        """Run the timers for a duration.

        Args:
            duration_s: Simulated duration in seconds
            real_time: Sleep between ticks to match wall-clock time

        Returns:
            Tuple of (ticks fired, blinks fired)
        """
        step = self.tick_timer.period_s
        ticks = blinks = 0
        elapsed = 0.0

        self._running = True
        logger.debug("Scheduler started for %.2f s (real_time=%s)", duration_s, real_time)
        last_real_time = time.monotonic()

        while self._running and elapsed + _EPSILON < duration_s:
            if real_time:
                current = time.monotonic()
                wait = step - (current - last_real_time)
                if wait > 0:
                    time.sleep(wait)
                last_real_time = time.monotonic()

            fired_ticks, fired_blinks = self.advance(step)
            ticks += fired_ticks
            blinks += fired_blinks
            elapsed += step

        self._running = False
        logger.debug("Scheduler stopped after %d ticks, %d blinks", ticks, blinks)
        return ticks, blinks

    def stop(self) -> None:
        """Stop a running loop after the current step."""
        self._running = False
