#!/usr/bin/env python3
"""
Basic Cluster Example

This example demonstrates how to:
1. Create a simulator and its scheduler
2. Start the engine and drive with scripted pedal commands
3. Use the indicators and trip reset
4. Read gauge snapshots and recorded telemetry

Run with: python run_cluster.py
"""

import logging
import sys

from clustersim import Simulator, Scheduler, Units
from clustersim.telemetry import TelemetryRecorder


def print_snapshot(label, snap):
    print(
        f"   {label:<14} {snap.speed_kmh:>4} km/h  {snap.accel_text:>6} m/s²  "
        f"{snap.rpm:>5} rpm  {snap.consumption_text:>5} {snap.consumption_unit:<9} "
        f"fuel {snap.fuel_percent:>3}%  odo {snap.odo_text}  trip {snap.trip_text}"
    )


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    print("=" * 60)
    print("clustersim Basic Cluster Example")
    print("=" * 60)

    # Step 1: Set up
    print("\n1. Setting up simulator...")
    sim = Simulator()
    scheduler = Scheduler(sim)
    recorder = TelemetryRecorder()
    recorder.attach(sim)
    sim.add_sound_listener(lambda beep: print(f"   ♪ {beep.name} ({beep.frequency_hz:.0f} Hz)"))
    sim.set_sound(True)
    print_snapshot("parked", sim.snapshot())

    # Step 2: Drive
    print("\n2. Driving (scripted, no real-time waits)...")
    sim.set_engine(True)
    scheduler.advance(1.0)
    print_snapshot("idle", sim.snapshot())

    sim.press_accel(True)
    scheduler.advance(8.0)
    print_snapshot("accelerating", sim.snapshot())

    sim.press_accel(False)
    sim.set_units(Units.KM_PER_L)
    scheduler.advance(5.0)
    print_snapshot("cruising", sim.snapshot())

    sim.set_left(True)
    sim.press_brake(True)
    scheduler.advance(3.0)
    sim.press_brake(False)
    sim.set_left(False)
    print_snapshot("braking", sim.snapshot())

    # Step 3: Trip and engine stop
    print("\n3. Resetting trip and stopping engine...")
    sim.reset_trip()
    sim.set_hazard(True)
    scheduler.advance(2.0)
    sim.set_engine(False)
    print_snapshot("engine off", sim.snapshot())
    scheduler.advance(1.0)
    print_snapshot("after 1 s", sim.snapshot())

    # Step 4: Telemetry
    print("\n4. Telemetry summary...")
    for name, stats in recorder.get_statistics().items():
        print(f"   {name:<18} n={stats['count']:<5} min={stats['min']}  max={stats['max']}")

    print("\n" + "=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
