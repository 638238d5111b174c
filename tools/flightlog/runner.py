"""File-level processing: open, analyze, export and summarize each log."""

from __future__ import annotations

import concurrent.futures
import dataclasses
import logging
from pathlib import Path
from typing import Iterable, Iterator

from .analysis import FlightLogAnalyzer
from .config import AnalysisConfig
from .errors import FileCreateError, FileOpenError, SchemaMismatchError
from .export import ProcessedExport
from .log_reader import iter_samples, read_header
from .report import render_markdown, render_summary

logger = logging.getLogger(__name__)

OUTPUT_SUFFIX = "_processed.csv"
REPORT_SUFFIX = "_summary.md"

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclasses.dataclass
class FileResult:
    """Outcome of processing one input log."""

    path: Path
    output_path: Path | None = None
    report_path: Path | None = None
    summary: str = ""
    rows: int = 0
    flights: int = 0
    batteries: int = 0
    rejected_altitudes: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def output_path_for(path: Path) -> Path:
    return path.with_name(path.stem + OUTPUT_SUFFIX)


def report_path_for(path: Path) -> Path:
    return path.with_name(path.stem + REPORT_SUFFIX)


def analyze_file(path: Path, config: AnalysisConfig, *, report: bool = False) -> FileResult:
    """Process one log, raising on file-level failure."""
    path = Path(path)
    result = FileResult(path=path)
    analyzer = FlightLogAnalyzer(config)

    try:
        stream = path.open("r", newline="", errors="replace")
    except OSError as exc:
        raise FileOpenError(f"Cannot open {path} for reading: {exc}") from exc

    with stream:
        read_header(stream, str(path))
        output_path = output_path_for(path)
        try:
            output = output_path.open("w", newline="")
        except OSError as exc:
            raise FileCreateError(f"Cannot open {output_path} for writing: {exc}") from exc

        with output:
            export = ProcessedExport(output, str(output_path))
            for sample in iter_samples(stream, str(path)):
                altitude = analyzer.process(sample)
                export.add(sample, altitude)
            export.close()

    aggregator = analyzer.aggregator
    result.output_path = output_path
    result.rows = len(export)
    result.flights = len(aggregator.flights)
    result.batteries = len(aggregator.batteries)
    result.rejected_altitudes = analyzer.calibrator.state.rejected
    result.summary = render_summary(str(path), aggregator)
    logger.info(
        "%s: %d rows, %d flights, %d batteries, %d altitude spikes rejected",
        path,
        result.rows,
        result.flights,
        result.batteries,
        result.rejected_altitudes,
    )

    if report:
        report_path = report_path_for(path)
        try:
            report_path.write_text(render_markdown(path.name, aggregator))
        except OSError as exc:
            raise FileCreateError(f"Cannot write {report_path}: {exc}") from exc
        result.report_path = report_path

    return result


def process_file(path: Path, config: AnalysisConfig, *, report: bool = False) -> FileResult:
    """Process one log; file-level failures are logged and returned, not raised."""
    try:
        return analyze_file(path, config, report=report)
    except (FileOpenError, FileCreateError, SchemaMismatchError) as exc:
        logger.error("Skipping %s: %s", path, exc)
        return FileResult(path=Path(path), error=str(exc))


def process_paths(
    paths: Iterable[Path],
    config: AnalysisConfig,
    *,
    jobs: int = 1,
    report: bool = False,
    log_level: str = "WARNING",
) -> Iterator[FileResult]:
    """Process logs independently, yielding results in input order.

    With ``jobs > 1`` each file is handled by its own worker process.
    Workers configure logging with ``log_level`` before taking any work.
    """
    paths = [Path(p) for p in paths]
    if jobs <= 1 or len(paths) <= 1:
        for path in paths:
            yield process_file(path, config, report=report)
        return

    with worker_pool(jobs, log_level) as pool:
        futures = [pool.submit(process_file, path, config, report=report) for path in paths]
        for future in futures:
            yield future.result()


def configure_logging(level: str = "WARNING") -> None:
    """Install the console log format and set the root level."""
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())


def worker_pool(jobs: int, log_level: str = "WARNING") -> concurrent.futures.ProcessPoolExecutor:
    return concurrent.futures.ProcessPoolExecutor(
        max_workers=jobs,
        initializer=configure_logging,
        initargs=(log_level,),
    )
