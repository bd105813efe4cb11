"""
Telemetry recorder - Records gauge readings over time.

Provides:
- Multi-channel recording of snapshots, scaled to the recorded vehicle
- Trip-based organization (a new trip starts on every trip reset)
- Attachment to a running Simulator through its callbacks
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional
import logging
import numpy as np

from clustersim.simulation.simulator import Simulator
from clustersim.simulation.snapshot import Snapshot
from clustersim.telemetry.channel import TelemetryChannel, ChannelConfig, cluster_channels
from clustersim.vehicle.state import VehicleConfig

logger = logging.getLogger(__name__)


@dataclass
class RecorderConfig:
    """Recorder configuration."""
    sample_rate_hz: float = 20.0
    channels: List[str] | None = None  # Channels to record (None = all)
    buffer_size: int = 100000


class TelemetryRecorder:
    """Records cluster readings over time.

    Channel scales follow the vehicle being recorded: the fuel channel
    spans the tank, the rpm channel the tachometer. A snapshot without a
    consumption reading is recorded as an unavailable sample.

    Usage:
        recorder = TelemetryRecorder()
        recorder.attach(sim)
        ...
        stats = recorder.get_statistics()
    """

    def __init__(
        self,
        config: RecorderConfig | None = None,
        vehicle: VehicleConfig | None = None,
    ):
        """Initialize recorder.

        Args:
            config: Recorder configuration
            vehicle: Vehicle whose gauge scales the channels use.
                Uses defaults if None; replaced on attach().
        """
        self.config = config or RecorderConfig()
        self.vehicle = vehicle or VehicleConfig()

        self._channels: Dict[str, TelemetryChannel] = {}
        self._setup_channels()

        self._last_sample_time: float | None = None
        self._sample_interval: float = 1.0 / self.config.sample_rate_hz

        self._current_trip: int = 0
        self._trip_start_times: List[float] = [0.0]

    def _setup_channels(self) -> None:
        """Set up telemetry channels for the current vehicle."""
        standard = cluster_channels(self.vehicle)
        channel_names = self.config.channels or list(standard.keys())

        self._channels = {}
        for name in channel_names:
            if name in standard:
                cfg = replace(standard[name], buffer_size=self.config.buffer_size)
            else:
                cfg = ChannelConfig(name=name, buffer_size=self.config.buffer_size)

            self._channels[name] = TelemetryChannel(cfg)

    @property
    def channels(self) -> Dict[str, TelemetryChannel]:
        """Get all channels."""
        return self._channels

    @property
    def current_trip(self) -> int:
        """Current trip number."""
        return self._current_trip

    def get_channel(self, name: str) -> Optional[TelemetryChannel]:
        """Get channel by name."""
        return self._channels.get(name)

    def attach(self, simulator: Simulator) -> None:
        """Record every tick of a simulator and follow its trip resets.

        Channels are rebuilt for the simulator's vehicle, so attach
        before recording.

        Args:
            simulator: Simulator to record
        """
        self.vehicle = simulator.config.vehicle
        self._setup_channels()
        logger.debug(
            "Recorder attached: fuel 0-%.1f L, rpm 0-%.0f",
            self.vehicle.fuel_capacity_l,
            self.vehicle.rpm_max,
        )

        simulator.add_post_tick_callback(
            lambda sim, snapshot: self.record(sim.time, snapshot)
        )
        simulator.add_trip_reset_callback(lambda sim: self.new_trip(sim.time))

    def record(self, time: float, snapshot: Snapshot) -> bool:
        """Record a snapshot.

        Args:
            time: Current simulation time
            snapshot: Gauge values to record

        Returns:
            True if the sample was recorded
        """
        if (
            self._last_sample_time is not None
            and time - self._last_sample_time < self._sample_interval - 1e-9
        ):
            return False

        self._last_sample_time = time

        channel_values = {
            "speed_kmh": snapshot.speed_kmh,
            "accel_mps2": snapshot.accel_mps2,
            "rpm": snapshot.rpm,
            "fuel_l": snapshot.fuel_l,
            "consumption_l100": snapshot.consumption_l100,
            "odo_km": snapshot.odo_km,
            "trip_km": snapshot.trip_km,
        }

        for name, value in channel_values.items():
            if name in self._channels:
                self._channels[name].record(time, value)

        return True

    def new_trip(self, time: float) -> int:
        """Mark the start of a new trip.

        Args:
            time: Trip start time

        Returns:
            New trip number
        """
        self._current_trip += 1
        self._trip_start_times.append(time)
        return self._current_trip

    def get_trip_data(self, trip: int, channel: str) -> tuple[np.ndarray, np.ndarray]:
        """Get data for a specific trip.

        Args:
            trip: Trip number
            channel: Channel name

        Returns:
            Tuple of (times, values) for that trip
        """
        if channel not in self._channels:
            return np.array([]), np.array([])

        if trip < 0 or trip >= len(self._trip_start_times):
            return np.array([]), np.array([])

        start = self._trip_start_times[trip]
        end = (
            self._trip_start_times[trip + 1]
            if trip + 1 < len(self._trip_start_times)
            else float('inf')
        )
        return self._channels[channel].get_range(start, end)

    def get_current_values(self) -> Dict[str, float]:
        """Get most recent value from each channel."""
        return {name: ch.last_value for name, ch in self._channels.items()}

    def get_statistics(self) -> Dict[str, Dict[str, Any]]:
        """Get statistics for all channels."""
        return {name: ch.get_state() for name, ch in self._channels.items()}

    def clear(self) -> None:
        """Clear all recorded data."""
        for channel in self._channels.values():
            channel.clear()

        self._last_sample_time = None
        self._current_trip = 0
        self._trip_start_times = [0.0]

    def get_state(self) -> dict:
        """Get recorder state.

        Returns:
            Dictionary containing recorder state
        """
        return {
            "sample_rate_hz": self.config.sample_rate_hz,
            "current_trip": self._current_trip,
            "total_samples": sum(ch.count for ch in self._channels.values()),
            "channels": self.get_statistics(),
        }
