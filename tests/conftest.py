"""Shared fixtures and import path setup for the test-suite."""

from __future__ import annotations

import sys
import threading
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]

root_path = str(ROOT)
if root_path not in sys.path:
    sys.path.insert(0, root_path)


def sheet_row(n: int, output: str | None = None) -> list[str]:
    """Return a well-formed tape-log row for ``n``."""
    return [
        str(n),
        "1997.06.07",
        "beac",
        "BEAC 97",
        "0:01:09",
        "4:55:08",
        f"apu/Kicsi_{n}.mpg",
        "0:01.09",
        "4:55.08",
        output or f"out_{n}.mpg",
    ]


class FakeStore:
    """In-memory stand-in for :class:`SheetRowStore`."""

    def __init__(self, rows: dict[int, list] | None = None) -> None:
        self.rows = rows or {}
        self.writes: list[tuple[int, str]] = []
        self.fail_writes: set[int] = set()
        self._lock = threading.Lock()

    def read_row(self, row_index: int) -> list:
        if row_index in self.rows:
            return self.rows[row_index]
        return sheet_row(row_index)

    def write_cell(self, row_index: int, value: str) -> None:
        from sheet_uploader.exceptions import RemoteWriteError

        if row_index in self.fail_writes:
            raise RemoteWriteError(f"Unable to set result for row {row_index}: 503")
        with self._lock:
            self.writes.append((row_index, value))


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()
