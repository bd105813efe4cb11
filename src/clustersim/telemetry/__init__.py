"""
Telemetry module - Recording of cluster readings.

This module contains:
- TelemetryRecorder: Records snapshots over time, split by trip
- TelemetryChannel: History of one gauge
- cluster_channels: Gauge scales for a vehicle configuration
"""

from clustersim.telemetry.recorder import TelemetryRecorder, RecorderConfig
from clustersim.telemetry.channel import (
    ChannelConfig,
    GaugeKind,
    TelemetryChannel,
    cluster_channels,
)

__all__ = [
    "TelemetryRecorder",
    "RecorderConfig",
    "TelemetryChannel",
    "ChannelConfig",
    "GaugeKind",
    "cluster_channels",
]
