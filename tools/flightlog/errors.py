"""Exception types raised while processing flight logs."""

from __future__ import annotations


class FlightLogError(Exception):
    """Base class for all flight log processing errors."""


class FileOpenError(FlightLogError):
    """The input log could not be opened for reading."""


class FileCreateError(FlightLogError):
    """The processed output could not be created or written."""


class SchemaMismatchError(FlightLogError):
    """The header line does not match the logger's column layout."""


class RowDecodeError(FlightLogError):
    """A data row could not be decoded into a :class:`Sample`."""

    def __init__(self, index: int, reason: str) -> None:
        super().__init__(f"row {index}: {reason}")
        self.index = index
        self.reason = reason


class SegmentClosedError(FlightLogError):
    """A closed flight segment was mutated."""


class ConfigError(FlightLogError, ValueError):
    """Invalid analysis configuration."""


class NegativeDurationWarning(UserWarning):
    """A landing timestamp did not come after its takeoff timestamp."""
