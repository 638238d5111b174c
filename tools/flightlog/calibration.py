"""Barometric altitude zeroing and spike rejection."""

from __future__ import annotations

import dataclasses
import logging
import math

from .config import AnalysisConfig

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class CalibrationState:
    offset: float | None = None
    last_calibrated: float = 0.0
    rejected: int = 0


class AltitudeCalibrator:
    """Report altitude relative to the current ground reference.

    The first reading of a file fixes the offset. Any later reading that moves
    more than ``max_altitude_diff`` from the last accepted value is treated as
    a barometer spike and replaced by that value, as is any non-finite
    reading.
    """

    def __init__(self, config: AnalysisConfig, state: CalibrationState | None = None) -> None:
        self.config = config
        self.state = state if state is not None else CalibrationState()

    def calibrate(self, raw_altitude: float) -> float:
        state = self.state
        if state.offset is None:
            if math.isfinite(raw_altitude):
                self.recalibrate(raw_altitude)
            else:
                state.rejected += 1
            return 0.0

        candidate = round(raw_altitude - state.offset, 2)
        if not math.isfinite(candidate) or abs(candidate - state.last_calibrated) > self.config.max_altitude_diff:
            state.rejected += 1
            logger.debug("rejected altitude %.2f m (last accepted %.2f m)", candidate, state.last_calibrated)
            return state.last_calibrated

        state.last_calibrated = candidate
        return candidate

    def recalibrate(self, raw_altitude: float) -> None:
        """Use ``raw_altitude`` as the new ground level."""
        self.state.offset = raw_altitude
        self.state.last_calibrated = 0.0
