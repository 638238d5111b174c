"""Per-file flight and battery bookkeeping."""

from __future__ import annotations

import dataclasses
import logging

import pandas as pd

from .errors import SegmentClosedError
from .flight_state import TransitionEvent, TransitionKind

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class FlightSegment:
    """One takeoff-to-landing interval."""

    index: int
    peak_altitude: float
    start: pd.Timestamp
    end: pd.Timestamp | None = None
    battery: int = 0
    closed: bool = False

    def observe(self, altitude: float) -> None:
        if self.closed:
            raise SegmentClosedError(f"flight {self.index} is closed")
        if altitude > self.peak_altitude:
            self.peak_altitude = altitude

    def close(self, end: pd.Timestamp) -> None:
        if self.closed:
            raise SegmentClosedError(f"flight {self.index} is already closed")
        self.end = end
        self.closed = True


@dataclasses.dataclass
class BatteryLife:
    """Accumulated flight time for one physical battery."""

    index: int
    takeoff_voltage: float
    total_duration_seconds: float = 0.0
    flights: list[int] = dataclasses.field(default_factory=list)

    def add_flight(self, flight: int, duration_seconds: float) -> None:
        self.flights.append(flight)
        self.total_duration_seconds += duration_seconds


class SessionAggregator:
    """Flights and batteries detected in one log, in creation order."""

    def __init__(self) -> None:
        self._flights: list[FlightSegment] = []
        self._batteries: list[BatteryLife] = []

    @property
    def flights(self) -> tuple[FlightSegment, ...]:
        return tuple(self._flights)

    @property
    def batteries(self) -> tuple[BatteryLife, ...]:
        return tuple(self._batteries)

    @property
    def open_flight(self) -> FlightSegment | None:
        if self._flights and not self._flights[-1].closed:
            return self._flights[-1]
        return None

    @property
    def current_battery(self) -> BatteryLife | None:
        return self._batteries[-1] if self._batteries else None

    def on_sample(self, altitude: float) -> None:
        flight = self.open_flight
        if flight is not None:
            flight.observe(altitude)

    def on_transition(self, event: TransitionEvent, altitude: float = 0.0) -> None:
        """Apply a takeoff or landing. ``altitude`` seeds a new flight's peak."""
        if event.kind is TransitionKind.TAKEOFF:
            self._open(event, altitude)
        else:
            self._close(event)

    def _open(self, event: TransitionEvent, altitude: float) -> None:
        if event.new_battery or not self._batteries:
            battery = BatteryLife(index=len(self._batteries), takeoff_voltage=event.sample.cell_voltage)
            self._batteries.append(battery)
            logger.info("battery %d fitted (%.2f V)", battery.index, battery.takeoff_voltage)

        flight = FlightSegment(
            index=len(self._flights),
            peak_altitude=altitude,
            start=event.sample.timestamp,
            battery=self._batteries[-1].index,
        )
        self._flights.append(flight)
        logger.info("flight %d took off at %s", flight.index, flight.start)

    def _close(self, event: TransitionEvent) -> None:
        flight = self.open_flight
        if flight is None:
            logger.warning("landing at row %d without an open flight", event.sample.index)
            return
        flight.close(event.sample.timestamp)
        self._batteries[flight.battery].add_flight(flight.index, event.duration_seconds)
        logger.info(
            "flight %d landed at %s after %.1f s, peak %.2f m",
            flight.index,
            flight.end,
            event.duration_seconds,
            flight.peak_altitude,
        )
