"""Flight log processing: altitude calibration, flight and battery statistics."""

from .analysis import FlightLogAnalyzer
from .config import AnalysisConfig
from .log_reader import Sample, decode_file, iter_samples
from .runner import FileResult, process_file, process_paths

__all__ = [
    "AnalysisConfig",
    "FileResult",
    "FlightLogAnalyzer",
    "Sample",
    "decode_file",
    "iter_samples",
    "process_file",
    "process_paths",
]
