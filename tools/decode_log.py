#!/usr/bin/env python3
"""Decode logger CSV rows into typed samples for inspection."""

from __future__ import annotations

import argparse
import dataclasses
import sys
from pathlib import Path

# Ensure the sibling flightlog package is importable when running from the repo root
sys.path.append(str(Path(__file__).parent))

from flightlog.errors import FlightLogError  # noqa: E402
from flightlog.log_reader import decode_file, iter_samples, read_header  # noqa: E402


def summarize(path: Path) -> None:
    """Print a quick summary for a logger CSV."""
    samples = decode_file(path)

    if not samples:
        print("[empty log]")
        return

    duration = (samples[-1].timestamp - samples[0].timestamp).total_seconds()
    print(f"samples      : {len(samples)}")
    print(f"duration     : {duration:.3f} s")
    print(f"first row    : {samples[0].index} ({samples[0].timestamp})")
    print(f"last row     : {samples[-1].index} ({samples[-1].timestamp})")
    print(f"voltage range: {min(s.cell_voltage for s in samples):.2f}-{max(s.cell_voltage for s in samples):.2f} V")
    print(f"current range: {min(s.current for s in samples):.1f}-{max(s.current for s in samples):.1f} A")
    print(f"raw altitude : {min(s.raw_altitude for s in samples):.2f}-{max(s.raw_altitude for s in samples):.2f} m")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", type=Path, help="logger CSV file to decode")
    parser.add_argument("--summary", action="store_true", help="only display aggregate statistics")
    parser.add_argument("--limit", type=int, default=0, help="print at most N samples")
    args = parser.parse_args(argv)

    try:
        if args.summary:
            summarize(args.path)
        else:
            dump(args.path, args.limit)
    except FlightLogError as exc:
        raise SystemExit(str(exc)) from exc


def dump(path: Path, limit: int = 0) -> None:
    """Print decoded samples, at most ``limit`` of them when non-zero."""
    remaining = limit if limit else None
    with path.open("r", newline="") as f:
        read_header(f, str(path))
        for sample in iter_samples(f, str(path)):
            record = dataclasses.asdict(sample)
            record.pop("fields")
            print(record)
            if remaining is not None:
                remaining -= 1
                if remaining <= 0:
                    break


if __name__ == "__main__":
    main()
