"""Text log reader turning logger CSV rows into typed samples."""

from __future__ import annotations

import dataclasses
import logging
import math
from typing import Iterator, TextIO

import pandas as pd

from . import schema
from .errors import RowDecodeError

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Sample:
    """In-memory representation of a single telemetry row."""

    index: int
    timestamp: pd.Timestamp
    display_time: str
    current: float
    cell_voltage: float
    raw_altitude: float
    fields: dict[str, str] = dataclasses.field(repr=False, compare=False)


def _number(fields: dict[str, str], name: str) -> float:
    value = fields[name]
    try:
        number = float(value)
    except ValueError:
        raise ValueError(f"{name} is not numeric: {value!r}") from None
    if not math.isfinite(number):
        raise ValueError(f"{name} is not finite: {value!r}")
    return number


def parse_sample(line: str, index: int) -> Sample:
    """Decode one data row, raising :class:`RowDecodeError` when it is malformed."""
    values = schema.split_row(line)
    if len(values) != len(schema.EXPECTED_HEADERS):
        raise RowDecodeError(index, f"expected {len(schema.EXPECTED_HEADERS)} fields, found {len(values)}")

    fields = dict(zip(schema.EXPECTED_HEADERS, values))
    date = fields[schema.DATE_FIELD]
    time = fields[schema.TIME_FIELD]
    try:
        # Full precision time; the truncated copy is only for display.
        timestamp = pd.Timestamp(f"{date} {time}")
        if pd.isna(timestamp):
            raise ValueError(f"empty timestamp {date!r} {time!r}")
        return Sample(
            index=index,
            timestamp=timestamp,
            display_time=schema.display_time(time),
            current=_number(fields, schema.CURRENT_FIELD),
            cell_voltage=_number(fields, schema.VOLTAGE_FIELD),
            raw_altitude=_number(fields, schema.ALTITUDE_FIELD),
            fields=fields,
        )
    except ValueError as exc:
        raise RowDecodeError(index, str(exc)) from exc


def read_header(stream: TextIO, source: str = "<stream>") -> None:
    """Consume and validate the header line of ``stream``."""
    schema.validate_header(stream.readline(), source)


def iter_samples(stream: TextIO, source: str = "<stream>") -> Iterator[Sample]:
    """Yield :class:`Sample` objects for the data rows left in ``stream``.

    Malformed rows are logged and skipped. Row indices count file lines with
    the header at 0, so skipped rows keep their slot.
    """
    for index, line in enumerate(stream, start=1):
        if not line.strip():
            continue
        try:
            yield parse_sample(line, index)
        except RowDecodeError as exc:
            logger.warning("%s: skipping malformed %s", source, exc)


def decode_file(path, source: str | None = None) -> list[Sample]:
    """Convenience wrapper returning a list of samples from a file path."""
    name = source or str(path)
    with open(path, "r", newline="") as stream:
        read_header(stream, name)
        return list(iter_samples(stream, name))
