#!/usr/bin/env python3
"""Clean logger CSVs and report flight time per battery and peak altitude per flight."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent))

from flightlog.config import (  # noqa: E402
    DEFAULT_MAX_ALTITUDE_DIFF,
    DEFAULT_MAX_VOLTAGE_DIFF,
    DEFAULT_MIN_CURRENT,
    DEFAULT_SMOOTH_UNITS,
    AnalysisConfig,
)
from flightlog.errors import ConfigError  # noqa: E402
from flightlog.runner import LOG_LEVELS, configure_logging, process_paths  # noqa: E402


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("logs", type=Path, nargs="+", help="Logger CSV files to process")
    parser.add_argument("--max-voltage-diff", type=float, default=DEFAULT_MAX_VOLTAGE_DIFF, help="Voltage rise since last landing that marks a new battery (V)")
    parser.add_argument("--max-altitude-diff", type=float, default=DEFAULT_MAX_ALTITUDE_DIFF, help="Largest accepted change between altitude readings (m)")
    parser.add_argument("--min-current", type=float, default=DEFAULT_MIN_CURRENT, help="Current draw that counts as airborne (A)")
    parser.add_argument("--smooth-units", type=int, default=DEFAULT_SMOOTH_UNITS, help="Rows between takeoff/landing checks")
    parser.add_argument("--jobs", type=int, default=1, help="Process up to N files in parallel")
    parser.add_argument("--report", action="store_true", help="Also write a Markdown summary next to each log")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="WARNING", help="Logging verbosity")
    parser.add_argument("--pause", action="store_true", help="Wait for Enter before exiting")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    try:
        config = AnalysisConfig.from_namespace(args)
    except ConfigError as exc:
        parser.error(str(exc))

    failures = 0
    try:
        for result in process_paths(args.logs, config, jobs=args.jobs, report=args.report, log_level=args.log_level):
            if not result.ok:
                failures += 1
                print(f"[skipped] {result.path}: {result.error}")
                continue
            print(result.summary)
            print(f"[export] wrote {result.output_path}")
            if result.report_path is not None:
                print(f"[report] wrote {result.report_path}")
    finally:
        if args.pause:
            input("Finished, press Enter to close.")

    if failures:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
