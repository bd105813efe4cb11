"""
Trip odometer - Total and resettable distance.
"""

from clustersim.vehicle.state import VehicleState


class TripOdometer:
    """Accumulates odometer and trip distance.

    Resetting the trip is unconditional and idempotent; any debouncing
    of a held reset button is up to the input adapter.
    """

    def accumulate(self, state: VehicleState, d_km: float) -> None:
        """Add a tick's distance to odometer and trip.

        Args:
            state: Vehicle state to mutate
            d_km: Distance travelled in km (negative values are ignored)
        """
        if not state.engine_on or d_km <= 0.0:
            return
        state.odo_km += d_km
        state.trip_km += d_km

    def reset_trip(self, state: VehicleState) -> None:
        """Set the trip distance to zero."""
        state.trip_km = 0.0
