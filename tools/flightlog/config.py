"""Analysis thresholds shared by the calibrator, state machine and aggregator."""

from __future__ import annotations

import argparse
import dataclasses

from .errors import ConfigError

DEFAULT_MAX_VOLTAGE_DIFF = 1.0
DEFAULT_MAX_ALTITUDE_DIFF = 2.0
DEFAULT_MIN_CURRENT = 2.0
DEFAULT_SMOOTH_UNITS = 10


@dataclasses.dataclass(frozen=True)
class AnalysisConfig:
    """Tunables for a single file's analysis run.

    ``max_voltage_diff`` (V) is the takeoff voltage rise over the last landing
    voltage that marks a battery swap. ``max_altitude_diff`` (m) bounds the
    change between accepted altitude readings. ``min_current`` (A) is the
    airborne threshold and ``smooth_units`` the number of rows per decimation
    tick.
    """

    max_voltage_diff: float = DEFAULT_MAX_VOLTAGE_DIFF
    max_altitude_diff: float = DEFAULT_MAX_ALTITUDE_DIFF
    min_current: float = DEFAULT_MIN_CURRENT
    smooth_units: int = DEFAULT_SMOOTH_UNITS

    def __post_init__(self) -> None:
        if self.smooth_units < 1:
            raise ConfigError(f"smooth_units must be >= 1, got {self.smooth_units}")
        for name in ("max_voltage_diff", "max_altitude_diff", "min_current"):
            value = getattr(self, name)
            if value < 0:
                raise ConfigError(f"{name} must be non-negative, got {value}")

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> "AnalysisConfig":
        """Build a config from parsed command line arguments."""
        return cls(
            max_voltage_diff=args.max_voltage_diff,
            max_altitude_diff=args.max_altitude_diff,
            min_current=args.min_current,
            smooth_units=args.smooth_units,
        )
