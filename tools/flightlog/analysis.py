"""Single-pass analysis of one flight log."""

from __future__ import annotations

from .calibration import AltitudeCalibrator
from .config import AnalysisConfig
from .flight_state import FlightStateMachine, TransitionKind
from .log_reader import Sample
from .session import SessionAggregator


class FlightLogAnalyzer:
    """Thread every sample of one file through calibration, state and stats.

    Samples must be fed in file order; each row depends on the state left by
    the previous one. Use one analyzer per file.
    """

    def __init__(self, config: AnalysisConfig | None = None) -> None:
        self.config = config or AnalysisConfig()
        self.calibrator = AltitudeCalibrator(self.config)
        self.state_machine = FlightStateMachine(self.config)
        self.aggregator = SessionAggregator()
        self.rows = 0

    def process(self, sample: Sample) -> float:
        """Analyze one row and return its calibrated altitude."""
        altitude = self.calibrator.calibrate(sample.raw_altitude)

        event = self.state_machine.update(sample)
        if event is not None:
            self.aggregator.on_transition(event, altitude)
            if event.kind is TransitionKind.LANDING:
                self.calibrator.recalibrate(sample.raw_altitude)

        self.aggregator.on_sample(altitude)
        self.rows += 1
        return altitude
