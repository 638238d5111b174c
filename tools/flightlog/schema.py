"""Column layout of the logger CSV and of the processed export."""

from __future__ import annotations

from typing import Sequence

from .errors import SchemaMismatchError

DELIMITER = ","

EXPECTED_HEADERS: tuple[str, ...] = (
    "Date",
    "Time",
    "SWR",
    "RSSI",
    "A1",
    "A2",
    "GPS Date",
    "GPS Time",
    "Long",
    "Lat",
    "Course",
    "GPS Speed",
    "GPS Alt",
    "Baro Alt",
    "Vertical Speed",
    "Temp1",
    "Temp2",
    "RPM",
    "Fuel",
    "Cell volts",
    "Cell 1",
    "Cell 2",
    "Cell 3",
    "Cell 4",
    "Cell 5",
    "Cell 6",
    "Current",
    "Consumption",
    "Vfas",
    "AccelX",
    "AccelY",
    "AccelZ",
    "Rud",
    "Ele",
    "Thr",
    "Ail",
    "S1",
    "S2",
    "LS",
    "RS",
    "SA",
    "SB",
    "SC",
    "SD",
    "SE",
    "SF",
    "SG",
    "SH",
)

EXPORT_COLUMNS: tuple[str, ...] = (
    "Date",
    "Time",
    "Baro Alt",
    "Cell volts",
    "Cell 1",
    "Cell 2",
    "Cell 3",
    "Current",
    "Consumption",
    "Rud",
    "Ele",
    "Thr",
    "Ail",
)

DATE_FIELD = "Date"
TIME_FIELD = "Time"
ALTITUDE_FIELD = "Baro Alt"
VOLTAGE_FIELD = "Cell volts"
CURRENT_FIELD = "Current"

# Trailing characters of the Time field (".mmm" fraction) dropped on export.
TIME_SUFFIX_LENGTH = 4

HEADER_LINE = DELIMITER.join(EXPECTED_HEADERS)


def split_row(line: str) -> list[str]:
    return line.rstrip("\r\n").split(DELIMITER)


def validate_header(line: str, source: str = "<stream>") -> None:
    """Raise :class:`SchemaMismatchError` unless ``line`` is the expected header."""
    header = line.rstrip("\r\n")
    if header == HEADER_LINE:
        return

    columns = header.split(DELIMITER)
    if len(columns) != len(EXPECTED_HEADERS):
        detail = f"expected {len(EXPECTED_HEADERS)} columns, found {len(columns)}"
    else:
        position = next(i for i, (a, b) in enumerate(zip(columns, EXPECTED_HEADERS)) if a != b)
        detail = f"column {position} is {columns[position]!r}, expected {EXPECTED_HEADERS[position]!r}"
    raise SchemaMismatchError(f"the headers of {source} do not match the logger layout ({detail})")


def display_time(value: str) -> str:
    """Drop the fractional-second suffix so spreadsheets parse the time."""
    return value[:-TIME_SUFFIX_LENGTH] if len(value) > TIME_SUFFIX_LENGTH else value


def project(fields: dict[str, str], columns: Sequence[str] = EXPORT_COLUMNS) -> list[str]:
    return [fields[name] for name in columns]
