from __future__ import annotations

import os
from typing import Any, Sequence

from ..config import ROW_WIDTH, YOUTUBE_CATEGORY_ID
from ..exceptions import MalformedRowError
from ..integrations.sheets.rows import SheetRowStore
from ..interfaces.job import JobDescriptor

# Column layout of the tape log sheet:
# 0 tape no | 1 date | 2 category | 3 title | 4 start | 5 end |
# 6 source file | 7 ss | 8 to | 9 output file
# e.g. 40 | 1997.06.07 | beac | BEAC 97 | 0:01:09 | 4:55:08 |
#      apu/Kicsi_40.mpg | 0:01.09 | 4:55.08 | out_2.mpg
_USED_COLUMNS = (1, 2, 3, 6, 7, 8, 9)


def _cell(row: Sequence[Any], index: int) -> str:
    value = row[index]
    if not isinstance(value, str):
        raise MalformedRowError(
            f"column {index} must be text, got {type(value).__name__}"
        )
    return value


def job_from_row(row: Sequence[Any], base_dir: str) -> JobDescriptor:
    """Map the raw cells of one sheet row onto a :class:`JobDescriptor`."""
    if len(row) < ROW_WIDTH:
        raise MalformedRowError(
            f"expected at least {ROW_WIDTH} columns, got {len(row)}"
        )
    cells = {i: _cell(row, i) for i in _USED_COLUMNS}
    return JobDescriptor(
        file_path=os.path.join(base_dir, cells[9]),
        title=f"{cells[1]} {cells[3]}",
        description=f"{cells[6]}: {cells[7]}-{cells[8]}",
        category_id=YOUTUBE_CATEGORY_ID,
        keywords=cells[2],
    )


def resolve_row(store: SheetRowStore, row_index: int, base_dir: str) -> JobDescriptor:
    """Read ``row_index`` from ``store`` and return its job description."""
    row = store.read_row(row_index)
    try:
        return job_from_row(row, base_dir)
    except MalformedRowError as exc:
        raise MalformedRowError(f"row {row_index}: {exc}") from exc


__all__ = ["job_from_row", "resolve_row"]
