"""Reduced CSV export of an analyzed log."""

from __future__ import annotations

from typing import TextIO

import pandas as pd

from . import schema
from .errors import FileCreateError
from .log_reader import Sample

DEFAULT_CHUNK_SIZE = 200


class ProcessedExport:
    """Write projected rows to the processed CSV while the log is read.

    Rows are buffered ``chunk_size`` at a time; call :meth:`close` after the
    last row so the remainder (and the header of an empty log) is written.
    """

    def __init__(self, stream: TextIO, name: str = "<stream>", chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        self.stream = stream
        self.name = name
        self.chunk_size = max(1, chunk_size)
        self.rows = 0
        self._pending: list[list] = []
        self._header_written = False

    def __len__(self) -> int:
        return self.rows

    def add(self, sample: Sample, altitude: float) -> None:
        fields = dict(sample.fields)
        fields[schema.TIME_FIELD] = sample.display_time
        row = schema.project(fields)
        row[schema.EXPORT_COLUMNS.index(schema.ALTITUDE_FIELD)] = altitude
        self._pending.append(row)
        self.rows += 1
        if len(self._pending) >= self.chunk_size:
            self.flush()

    def flush(self) -> None:
        if not self._pending and self._header_written:
            return
        frame = pd.DataFrame(self._pending, columns=list(schema.EXPORT_COLUMNS), dtype=object)
        frame[schema.ALTITUDE_FIELD] = frame[schema.ALTITUDE_FIELD].astype(float)
        try:
            frame.to_csv(
                self.stream,
                index=False,
                header=not self._header_written,
                float_format="%.2f",
                lineterminator="\n",
            )
            self.stream.flush()
        except OSError as exc:
            raise FileCreateError(f"Cannot write {self.name}: {exc}") from exc
        self._header_written = True
        self._pending.clear()

    def close(self) -> None:
        self.flush()
