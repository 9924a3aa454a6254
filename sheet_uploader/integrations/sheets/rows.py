"""Google Sheets access for job rows and result cells."""

from __future__ import annotations

from typing import Any, List

import httplib2
from google.auth.exceptions import GoogleAuthError
from googleapiclient.errors import HttpError

from ...config import (
    READ_FIRST_COLUMN,
    READ_LAST_COLUMN,
    RESULT_COLUMN,
    SHEET_NAME,
)
from ...exceptions import RemoteReadError, RemoteWriteError
from ...interfaces.outcome import UploadOutcome

# Transport failures: API errors, socket errors, httplib2 errors such as
# ServerNotFoundError, and token refresh errors raised mid-run
REMOTE_ERRORS = (HttpError, OSError, httplib2.HttpLib2Error, GoogleAuthError)


def row_range(row_index: int) -> str:
    """Return the A1 range covering the job columns of ``row_index``."""
    return f"{SHEET_NAME}!{READ_FIRST_COLUMN}{row_index}:{READ_LAST_COLUMN}{row_index}"


def result_range(row_index: int) -> str:
    """Return the A1 range of the result cell of ``row_index``."""
    return f"{SHEET_NAME}!{RESULT_COLUMN}{row_index}:{RESULT_COLUMN}{row_index}"


class SheetRowStore:
    """Reads job rows from and writes results into one spreadsheet.

    ``sheets_factory`` returns a Sheets v4 resource; it is called on every
    request so each worker thread gets its own resource.
    """

    def __init__(self, sheets_factory, sheet_id: str) -> None:
        self._sheets = sheets_factory
        self.sheet_id = sheet_id

    def read_row(self, row_index: int) -> List[Any]:
        """Return the raw cells of ``row_index``.

        Raises :class:`RemoteReadError` unless exactly one row comes back.
        """
        try:
            values = self._sheets().spreadsheets().values()
            resp = values.get(
                spreadsheetId=self.sheet_id, range=row_range(row_index)
            ).execute()
        except REMOTE_ERRORS as exc:
            raise RemoteReadError(
                f"Unable to retrieve row {row_index} from sheet: {exc}"
            ) from exc

        rows = resp.get("values") or []
        if len(rows) != 1:
            raise RemoteReadError(
                f"1 row expected for row {row_index}, got {len(rows)}"
            )
        return rows[0]

    def write_cell(self, row_index: int, value: str) -> None:
        """Write ``value`` into the result cell of ``row_index``."""
        body = {"values": [[value]]}
        try:
            values = self._sheets().spreadsheets().values()
            values.update(
                spreadsheetId=self.sheet_id,
                range=result_range(row_index),
                valueInputOption="RAW",
                body=body,
            ).execute()
        except REMOTE_ERRORS as exc:
            raise RemoteWriteError(
                f"Unable to set result for row {row_index}: {exc}"
            ) from exc


def write_outcome(store: SheetRowStore, row_index: int, outcome: UploadOutcome) -> str:
    """Persist ``outcome`` for ``row_index`` and return the written text.

    Success writes the public video URL, failure writes the reason verbatim;
    both share the same result cell.
    """
    value = outcome.cell_value()
    store.write_cell(row_index, value)
    return value


__all__ = ["REMOTE_ERRORS", "SheetRowStore", "result_range", "row_range", "write_outcome"]
