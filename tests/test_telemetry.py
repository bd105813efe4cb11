"""Tests for telemetry recording."""

import numpy as np
import pytest

from clustersim.simulation.simulator import Simulator, SimulatorConfig
from clustersim.telemetry.channel import (
    ChannelConfig,
    GaugeKind,
    TelemetryChannel,
    cluster_channels,
)
from clustersim.telemetry.recorder import TelemetryRecorder, RecorderConfig
from clustersim.vehicle.state import VehicleConfig


class TestClusterChannels:
    """Test gauge scales built from the vehicle configuration."""

    def test_default_scales(self):
        """Test default vehicle gives the cluster's gauge scales."""
        channels = cluster_channels()

        assert channels["rpm"].high == 5000
        assert channels["fuel_l"].high == 50
        assert channels["speed_kmh"].high == pytest.approx(200.0)
        assert channels["accel_mps2"].low == pytest.approx(-19.62)
        assert channels["accel_mps2"].high == pytest.approx(19.62)

    def test_scales_follow_vehicle(self):
        """Test a bigger tank and tachometer widen the channels."""
        channels = cluster_channels(VehicleConfig(fuel_capacity_l=80.0, rpm_max=8000.0))

        assert channels["fuel_l"].high == 80.0
        assert channels["rpm"].high == 8000.0

    def test_consumption_scale_covers_worst_case(self):
        """Test consumption scale reaches full throttle at top speed."""
        channels = cluster_channels()
        # 6 + 2.5 * 2 g + 1.2 * 1.0
        assert channels["consumption_l100"].high == pytest.approx(12.2)

    def test_gauge_kinds(self):
        """Test each channel carries its gauge kind."""
        channels = cluster_channels()

        assert channels["speed_kmh"].kind is GaugeKind.LEVEL
        assert channels["rpm"].kind is GaugeKind.LEVEL
        assert channels["fuel_l"].kind is GaugeKind.RESERVE
        assert channels["consumption_l100"].kind is GaugeKind.READOUT
        assert channels["odo_km"].kind is GaugeKind.COUNTER
        assert channels["trip_km"].kind is GaugeKind.COUNTER

    def test_fresh_configs(self):
        """Test each call builds new configs."""
        first = cluster_channels()
        first["rpm"].buffer_size = 5

        assert cluster_channels()["rpm"].buffer_size == 10000


class TestTelemetryChannel:
    """Test single data channel."""

    def test_statistics(self):
        """Test running statistics."""
        channel = TelemetryChannel(name="rpm")
        for i, value in enumerate([800.0, 1200.0, 1000.0]):
            channel.record(i * 0.05, value)

        assert channel.count == 3
        assert channel.min_value == 800.0
        assert channel.max_value == 1200.0
        assert channel.mean == pytest.approx(1000.0)
        assert channel.last_value == 1000.0

    def test_clamps_to_scale(self):
        """Test values are clamped to the gauge scale."""
        channel = TelemetryChannel(ChannelConfig("fuel_l", "L", 0.0, 50.0, 3))
        channel.record(0.0, -1.0)
        channel.record(0.1, 75.0)

        assert np.array_equal(channel.get_values(), [0.0, 50.0])

    def test_buffer_limit(self):
        """Test buffer keeps the most recent samples."""
        channel = TelemetryChannel(ChannelConfig("speed", buffer_size=3))
        for i in range(5):
            channel.record(float(i), float(i))

        assert np.array_equal(channel.get_values(), [2.0, 3.0, 4.0])
        assert channel.count == 5

    def test_range(self):
        """Test time-range query excludes the start and includes the end."""
        channel = TelemetryChannel(name="speed")
        for i in range(5):
            channel.record(float(i), float(i) * 10)

        times, values = channel.get_range(1.0, 3.0)

        assert np.array_equal(times, [2.0, 3.0])
        assert np.array_equal(values, [20.0, 30.0])

    def test_empty_state(self):
        """Test summary with no data."""
        state = TelemetryChannel(name="rpm").get_state()
        assert state["count"] == 0
        assert state["mean"] is None
        assert state["peak_fraction"] == 0.0

    def test_level_peak_fraction(self):
        """Test level gauges report their peak against the scale."""
        speed = TelemetryChannel(cluster_channels()["speed_kmh"])
        speed.record(0.05, 40.0)
        speed.record(0.10, 100.0)
        speed.record(0.15, 80.0)

        assert speed.peak_fraction == pytest.approx(0.5)
        assert speed.get_state()["peak_fraction"] == pytest.approx(0.5)

    def test_signed_peak_fraction(self):
        """Test a braking peak counts on a centred acceleration gauge."""
        accel = TelemetryChannel(cluster_channels()["accel_mps2"])
        accel.record(0.05, 2.0)
        accel.record(0.10, -9.81)

        assert accel.peak_fraction == pytest.approx(0.5)

    def test_counter_covered(self):
        """Test counters report the distance covered."""
        odo = TelemetryChannel(cluster_channels()["odo_km"])
        for i, km in enumerate([123456.7, 123457.2, 123458.0]):
            odo.record(i * 0.05, km)

        state = odo.get_state()
        assert state["kind"] == "counter"
        assert state["covered"] == pytest.approx(1.3)
        assert "peak_fraction" not in state

    def test_reserve_used(self):
        """Test the fuel reserve reports the amount used."""
        fuel = TelemetryChannel(cluster_channels()["fuel_l"])
        fuel.record(0.05, 30.0)
        fuel.record(0.10, 29.75)
        fuel.record(0.15, 29.5)

        assert fuel.change == pytest.approx(-0.5)
        assert fuel.get_state()["used"] == pytest.approx(0.5)

    def test_readout_unavailable(self):
        """Test missing readings are counted but not stored."""
        consumption = TelemetryChannel(cluster_channels()["consumption_l100"])
        consumption.record(0.05, None)
        consumption.record(0.10, 6.5)
        consumption.record(0.15, None)
        consumption.record(0.20, 6.9)

        assert consumption.count == 2
        assert consumption.unavailable_count == 2
        assert consumption.availability == pytest.approx(0.5)
        assert np.array_equal(consumption.get_times(), [0.10, 0.20])

        state = consumption.get_state()
        assert state["unavailable"] == 2
        assert state["availability"] == pytest.approx(0.5)

    def test_clear_resets_gauge_summary(self):
        """Test clearing forgets the first reading and unavailable count."""
        fuel = TelemetryChannel(cluster_channels()["fuel_l"])
        fuel.record(0.05, 30.0)
        fuel.record(0.10, None)
        fuel.clear()
        fuel.record(0.15, 20.0)

        assert fuel.change == 0.0
        assert fuel.unavailable_count == 0


class TestTelemetryRecorder:
    """Test recorder attached to a simulator."""

    def test_standard_channels(self):
        """Test all standard channels are created."""
        recorder = TelemetryRecorder()
        assert set(recorder.channels) == set(cluster_channels())

    def test_selected_channels(self):
        """Test only requested channels are created."""
        recorder = TelemetryRecorder(RecorderConfig(channels=["rpm", "speed_kmh"]))
        assert set(recorder.channels) == {"rpm", "speed_kmh"}

    def test_buffer_size_applied(self):
        """Test recorder buffer size reaches every channel."""
        recorder = TelemetryRecorder(RecorderConfig(buffer_size=5))
        assert all(ch.config.buffer_size == 5 for ch in recorder.channels.values())

    def test_vehicle_argument(self):
        """Test scales can be given without a simulator."""
        recorder = TelemetryRecorder(vehicle=VehicleConfig(rpm_max=8000.0))
        assert recorder.get_channel("rpm").config.high == 8000.0

    def test_large_tank_not_clipped(self):
        """Test attaching adopts the simulator's tank size."""
        vehicle = VehicleConfig(fuel_capacity_l=80.0, initial_fuel_fraction=0.9)
        sim = Simulator(SimulatorConfig(vehicle=vehicle))
        recorder = TelemetryRecorder()
        recorder.attach(sim)

        sim.tick()

        fuel = recorder.get_channel("fuel_l")
        assert fuel.config.high == 80.0
        assert fuel.last_value == pytest.approx(72.0)

    def test_high_revving_engine_not_clipped(self):
        """Test attaching adopts the simulator's tachometer scale."""
        vehicle = VehicleConfig(rpm_accel=6500.0, rpm_max=8000.0)
        sim = Simulator(SimulatorConfig(vehicle=vehicle))
        recorder = TelemetryRecorder()
        recorder.attach(sim)

        sim.set_engine(True)
        sim.press_accel(True)
        for _ in range(100):
            sim.tick()

        rpm = recorder.get_channel("rpm")
        assert rpm.config.high == 8000.0
        assert rpm.max_value > 5000.0
        assert rpm.last_value == sim.snapshot().rpm

    def test_records_every_tick(self):
        """Test an attached recorder samples each tick."""
        sim = Simulator()
        recorder = TelemetryRecorder()
        recorder.attach(sim)

        sim.set_engine(True)
        sim.press_accel(True)
        for _ in range(40):
            sim.tick()

        speed = recorder.get_channel("speed_kmh")
        assert speed.count == 40
        assert speed.last_value == sim.snapshot().speed_kmh
        assert recorder.get_current_values()["rpm"] == sim.snapshot().rpm

    def test_consumption_unavailable_when_stationary(self):
        """Test stationary ticks count as unavailable consumption."""
        sim = Simulator()
        recorder = TelemetryRecorder()
        recorder.attach(sim)

        sim.set_engine(True)
        for _ in range(10):
            sim.tick()

        consumption = recorder.get_channel("consumption_l100")
        assert consumption.count == 0
        assert consumption.unavailable_count == 10
        assert consumption.availability == 0.0
        assert recorder.get_channel("rpm").count == 10

    def test_drive_summary(self):
        """Test a short drive shows fuel used and distance covered."""
        sim = Simulator()
        recorder = TelemetryRecorder()
        recorder.attach(sim)

        sim.set_engine(True)
        sim.press_accel(True)
        for _ in range(200):
            sim.tick()

        stats = recorder.get_statistics()
        assert stats["fuel_l"]["used"] > 0.0
        assert stats["odo_km"]["covered"] > 0.0
        assert stats["trip_km"]["covered"] == pytest.approx(stats["odo_km"]["covered"], abs=0.1)
        assert 0.0 < stats["consumption_l100"]["availability"] < 1.0
        assert 0.0 < stats["speed_kmh"]["peak_fraction"] <= 1.0

    def test_sample_rate(self):
        """Test samples closer than the interval are dropped."""
        sim = Simulator()
        recorder = TelemetryRecorder(RecorderConfig(sample_rate_hz=10.0))
        recorder.attach(sim)

        for _ in range(20):
            sim.tick()

        assert recorder.get_channel("rpm").count == 10

    def test_trips(self):
        """Test trip resets split recorded data."""
        sim = Simulator()
        recorder = TelemetryRecorder()
        recorder.attach(sim)

        sim.set_engine(True)
        sim.press_accel(True)
        for _ in range(30):
            sim.tick()
        sim.reset_trip()
        for _ in range(10):
            sim.tick()

        assert recorder.current_trip == 1

        _, first = recorder.get_trip_data(0, "trip_km")
        _, second = recorder.get_trip_data(1, "trip_km")
        assert len(first) == 30
        assert len(second) == 10
        assert first.min() > 12.0
        assert second.max() < 1.0

        times, values = recorder.get_trip_data(5, "trip_km")
        assert len(times) == 0

    def test_clear(self):
        """Test clearing resets data and trips."""
        sim = Simulator()
        recorder = TelemetryRecorder()
        recorder.attach(sim)
        sim.tick()
        sim.reset_trip()

        recorder.clear()

        state = recorder.get_state()
        assert state["total_samples"] == 0
        assert state["current_trip"] == 0
