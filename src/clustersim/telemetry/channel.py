"""
Telemetry channel - Time series of a single cluster gauge.

Provides:
- Gauge kinds with their own summary semantics (level, counter,
  reserve, readout)
- Gauge scale limits taken from the vehicle configuration
- Buffered samples with time-range queries
"""

from dataclasses import dataclass
from enum import Enum
from typing import List
import numpy as np

from clustersim.vehicle.state import VehicleConfig


class GaugeKind(Enum):
    """How a gauge reading behaves over time."""
    LEVEL = "level"        # Instantaneous reading (speed, rpm, acceleration)
    COUNTER = "counter"    # Accumulating distance, only grows within a trip
    RESERVE = "reserve"    # Depleting quantity (fuel)
    READOUT = "readout"    # May be unavailable (consumption while stationary)


@dataclass
class ChannelConfig:
    """Configuration for a gauge channel."""
    name: str = "unnamed"
    unit: str = ""
    low: float = 0.0
    high: float = float('inf')
    precision: int = 3
    kind: GaugeKind = GaugeKind.LEVEL
    buffer_size: int = 10000

    @property
    def span(self) -> float:
        """Width of the gauge scale."""
        return self.high - self.low


def cluster_channels(vehicle: VehicleConfig | None = None) -> dict[str, ChannelConfig]:
    """Build the standard cluster channels for a vehicle.

    Scales follow the vehicle limits so recordings are never clipped
    below what the simulation can produce.

    Args:
        vehicle: Vehicle configuration. Uses defaults if None.

    Returns:
        Dictionary of channel name to configuration
    """
    v = vehicle or VehicleConfig()
    max_accel = v.max_g * v.gravity
    max_kmh = max(v.max_speed_mps * 3.6, v.speedometer_max_kmh)
    max_l100 = v.base_l100 + v.consumption_k_a * v.max_g + v.consumption_k_v

    return {
        # Motion
        "speed_kmh": ChannelConfig("speed_kmh", "km/h", 0.0, max_kmh, 0),
        "accel_mps2": ChannelConfig("accel_mps2", "m/s²", -max_accel, max_accel, 2),

        # Engine
        "rpm": ChannelConfig("rpm", "rpm", 0.0, v.rpm_max, 0),

        # Fuel
        "fuel_l": ChannelConfig("fuel_l", "L", 0.0, v.fuel_capacity_l, 3, GaugeKind.RESERVE),
        "consumption_l100": ChannelConfig(
            "consumption_l100", "L/100 km", 0.0, max_l100, 1, GaugeKind.READOUT
        ),

        # Distance
        "odo_km": ChannelConfig("odo_km", "km", 0.0, float('inf'), 1, GaugeKind.COUNTER),
        "trip_km": ChannelConfig("trip_km", "km", 0.0, float('inf'), 1, GaugeKind.COUNTER),
    }


class TelemetryChannel:
    """Recorded history of one gauge.

    A ``None`` sample marks the gauge as unavailable at that time: it is
    counted but stores no value. Statistics cover every available
    sample; the buffer only keeps the most recent ``buffer_size``.
    """

    def __init__(self, config: ChannelConfig | None = None, name: str = "channel"):
        """Initialize channel.

        Args:
            config: Channel configuration
            name: Channel name (used if config not provided)
        """
        self.config = config or ChannelConfig(name=name)

        self._times: List[float] = []
        self._values: List[float] = []

        self._first: float | None = None
        self._min: float = float('inf')
        self._max: float = float('-inf')
        self._sum: float = 0.0
        self._count: int = 0
        self._unavailable: int = 0

    @property
    def name(self) -> str:
        """Channel name."""
        return self.config.name

    @property
    def kind(self) -> GaugeKind:
        """Gauge kind."""
        return self.config.kind

    @property
    def count(self) -> int:
        """Number of available samples."""
        return self._count

    @property
    def unavailable_count(self) -> int:
        """Number of samples where the gauge showed no reading."""
        return self._unavailable

    @property
    def availability(self) -> float:
        """Fraction of samples with a reading (1.0 with no samples)."""
        total = self._count + self._unavailable
        return self._count / total if total > 0 else 1.0

    @property
    def min_value(self) -> float:
        """Minimum recorded value."""
        return self._min if self._count > 0 else 0.0

    @property
    def max_value(self) -> float:
        """Maximum recorded value."""
        return self._max if self._count > 0 else 0.0

    @property
    def mean(self) -> float:
        """Mean of recorded values."""
        return self._sum / self._count if self._count > 0 else 0.0

    @property
    def last_value(self) -> float:
        """Most recent value."""
        return self._values[-1] if self._values else 0.0

    @property
    def change(self) -> float:
        """Last minus first recorded value.

        Distance covered for a counter, negative of the amount used for
        a reserve.
        """
        if self._first is None:
            return 0.0
        return self.last_value - self._first

    @property
    def peak_fraction(self) -> float:
        """Largest reading as a fraction of the gauge scale (0-1)."""
        if self._count == 0 or not np.isfinite(self.config.span) or self.config.span <= 0:
            return 0.0
        peak = max(abs(self._max), abs(self._min)) if self.config.low < 0 else self._max
        scale = max(abs(self.config.low), abs(self.config.high)) if self.config.low < 0 else self.config.high
        return float(np.clip(peak / scale, 0.0, 1.0))

    def record(self, time: float, value: float | None) -> None:
        """Record a gauge reading, clamped to the gauge scale.

        Args:
            time: Timestamp
            value: Reading, or None when the gauge shows no reading
        """
        if value is None:
            self._unavailable += 1
            return

        value = float(np.clip(value, self.config.low, self.config.high))
        if self._first is None:
            self._first = value

        self._times.append(time)
        self._values.append(value)

        self._min = min(self._min, value)
        self._max = max(self._max, value)
        self._sum += value
        self._count += 1

        if len(self._values) > self.config.buffer_size:
            self._values.pop(0)
            self._times.pop(0)

    def get_values(self) -> np.ndarray:
        """Get all buffered values."""
        return np.array(self._values)

    def get_times(self) -> np.ndarray:
        """Get all buffered timestamps."""
        return np.array(self._times)

    def get_range(self, start_time: float, end_time: float) -> tuple[np.ndarray, np.ndarray]:
        """Get readings stamped after start and up to end.

        Ticks are stamped with their end time, so ``(start, end]`` holds
        exactly the ticks run between two moments.
        """
        times = np.array(self._times)
        values = np.array(self._values)

        mask = (times > start_time) & (times <= end_time)
        return times[mask], values[mask]

    def clear(self) -> None:
        """Clear all recorded data."""
        self._times.clear()
        self._values.clear()
        self._first = None
        self._min = float('inf')
        self._max = float('-inf')
        self._sum = 0.0
        self._count = 0
        self._unavailable = 0

    def get_state(self) -> dict:
        """Get a summary suited to the gauge kind.

        Returns:
            Dictionary with channel statistics
        """
        has_data = self._count > 0
        precision = self.config.precision
        state = {
            "name": self.config.name,
            "unit": self.config.unit,
            "kind": self.config.kind.value,
            "count": self._count,
            "min": round(self._min, precision) if has_data else None,
            "max": round(self._max, precision) if has_data else None,
            "mean": round(self.mean, precision) if has_data else None,
            "last": round(self.last_value, precision) if has_data else None,
        }

        if self.config.kind is GaugeKind.COUNTER:
            state["covered"] = round(self.change, precision)
        elif self.config.kind is GaugeKind.RESERVE:
            state["used"] = round(-self.change, precision)
        elif self.config.kind is GaugeKind.READOUT:
            state["unavailable"] = self._unavailable
            state["availability"] = round(self.availability, 3)
        else:
            state["peak_fraction"] = round(self.peak_fraction, 3)
        return state
