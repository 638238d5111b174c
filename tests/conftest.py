from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from flightlog.log_reader import parse_sample
from flightlog.schema import EXPECTED_HEADERS, HEADER_LINE

START = datetime(2024, 5, 1, 12, 0, 0)


def make_line(seconds: float = 0.0, current: float = 0.0, voltage: float = 12.6, altitude: float = 100.0) -> str:
    stamp = START + timedelta(seconds=seconds)
    fields = {name: "0" for name in EXPECTED_HEADERS}
    fields.update(
        {
            "Date": stamp.strftime("%Y-%m-%d"),
            "Time": stamp.strftime("%H:%M:%S.%f")[:-3],
            "Baro Alt": f"{altitude}",
            "Cell volts": f"{voltage}",
            "Cell 1": "4.20",
            "Cell 2": "4.19",
            "Cell 3": "4.21",
            "Current": f"{current}",
            "Consumption": "120",
            "Rud": "-3",
            "Ele": "12",
            "Thr": "-1024",
            "Ail": "7",
        }
    )
    return ",".join(fields[name] for name in EXPECTED_HEADERS)


@pytest.fixture
def line_factory():
    return make_line


@pytest.fixture
def sample_factory():
    """Build a sample for data row ``index``; by default one row per second."""

    def make(index: int, current: float = 0.0, voltage: float = 12.6, altitude: float = 100.0, seconds: float | None = None):
        return parse_sample(make_line(index if seconds is None else seconds, current, voltage, altitude), index)

    return make


@pytest.fixture
def write_log(tmp_path):
    """Write a logger CSV with the expected header and return its path."""

    def write(lines, name: str = "flight.csv", header: str = HEADER_LINE):
        path = tmp_path / name
        path.write_text("\n".join([header, *lines]) + "\n")
        return path

    return write
