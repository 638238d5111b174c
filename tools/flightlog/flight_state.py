"""Grounded/airborne classification from decimated current readings."""

from __future__ import annotations

import dataclasses
import enum
import logging

import pandas as pd

from .config import AnalysisConfig
from .errors import NegativeDurationWarning
from .log_reader import Sample

logger = logging.getLogger(__name__)


class FlightStatus(enum.Enum):
    GROUNDED = "grounded"
    AIRBORNE = "airborne"


class TransitionKind(enum.Enum):
    TAKEOFF = "takeoff"
    LANDING = "landing"


@dataclasses.dataclass(frozen=True)
class TransitionEvent:
    kind: TransitionKind
    sample: Sample
    new_battery: bool = False
    duration_seconds: float = 0.0


def crossed_above(current: float, previous: float, threshold: float) -> bool:
    return current >= threshold and previous < threshold


def crossed_below(current: float, previous: float, threshold: float) -> bool:
    return current <= threshold and previous > threshold


class FlightStateMachine:
    """Detect takeoffs and landings on every ``smooth_units``-th row.

    Ticks sample the stream rather than average it: each tick compares its
    current draw against the previous tick's, not against the previous row.
    Takeoffs also decide whether a fresh battery was fitted, based on the
    voltage rise since the last landing.
    """

    def __init__(self, config: AnalysisConfig) -> None:
        self.config = config
        self.status = FlightStatus.GROUNDED
        self.reference: Sample | None = None
        self.last_landing_voltage: float | None = None
        self.flight_start: pd.Timestamp | None = None

    def is_tick(self, sample: Sample) -> bool:
        return (sample.index - 1) % self.config.smooth_units == 0

    def update(self, sample: Sample) -> TransitionEvent | None:
        """Feed one row; return the transition it triggers, if any."""
        if not self.is_tick(sample):
            return None

        previous = self.reference.current if self.reference is not None else 0.0
        event = None
        if self.status is FlightStatus.GROUNDED:
            if crossed_above(sample.current, previous, self.config.min_current):
                event = self._takeoff(sample)
        elif crossed_below(sample.current, previous, self.config.min_current):
            event = self._landing(sample)

        self.reference = sample
        return event

    def _takeoff(self, sample: Sample) -> TransitionEvent:
        self.status = FlightStatus.AIRBORNE
        self.flight_start = sample.timestamp
        new_battery = (
            self.last_landing_voltage is None
            or sample.cell_voltage - self.last_landing_voltage > self.config.max_voltage_diff
        )
        logger.debug("takeoff at row %d (%s), new battery: %s", sample.index, sample.timestamp, new_battery)
        return TransitionEvent(TransitionKind.TAKEOFF, sample, new_battery=new_battery)

    def _landing(self, sample: Sample) -> TransitionEvent:
        duration = (sample.timestamp - self.flight_start).total_seconds()
        if duration <= 0:
            logger.warning(
                "%s: landing at row %d (%s) does not follow takeoff at %s; keeping %.3f s",
                NegativeDurationWarning.__name__,
                sample.index,
                sample.timestamp,
                self.flight_start,
                duration,
            )
        self.status = FlightStatus.GROUNDED
        self.flight_start = None
        self.last_landing_voltage = sample.cell_voltage
        logger.debug("landing at row %d after %.3f s", sample.index, duration)
        return TransitionEvent(TransitionKind.LANDING, sample, duration_seconds=duration)
