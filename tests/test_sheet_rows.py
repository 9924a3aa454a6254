from unittest.mock import MagicMock

import httplib2
import pytest
from google.auth.exceptions import RefreshError, TransportError
from googleapiclient.errors import HttpError

from sheet_uploader.exceptions import FatalSetupError, RemoteReadError, RemoteWriteError
from sheet_uploader.integrations.sheets.rows import (
    SheetRowStore,
    result_range,
    row_range,
    write_outcome,
)
from sheet_uploader.interfaces.outcome import Failure, Success

from conftest import FakeStore, sheet_row


def _sheets(get_response=None, update_side_effect=None):
    service = MagicMock()
    values = service.spreadsheets.return_value.values.return_value
    values.get.return_value.execute.return_value = get_response or {}
    if update_side_effect is not None:
        values.update.return_value.execute.side_effect = update_side_effect
    return service, values


def _http_error(status=500):
    resp = MagicMock(status=status, reason="boom")
    return HttpError(resp, b"{}")


def test_ranges():
    assert row_range(12) == "Sheet1!A12:J12"
    assert result_range(12) == "Sheet1!L12:L12"


def test_read_row_returns_single_row():
    service, values = _sheets({"values": [sheet_row(5)]})
    store = SheetRowStore(lambda: service, "sheet-id")
    assert store.read_row(5) == sheet_row(5)
    values.get.assert_called_once_with(spreadsheetId="sheet-id", range="Sheet1!A5:J5")


@pytest.mark.parametrize("rows", [[], [sheet_row(1), sheet_row(2)]])
def test_read_row_requires_exactly_one_row(rows):
    service, _ = _sheets({"values": rows})
    store = SheetRowStore(lambda: service, "sheet-id")
    with pytest.raises(RemoteReadError, match="1 row expected"):
        store.read_row(1)


def test_read_row_wraps_http_errors():
    service, values = _sheets()
    values.get.return_value.execute.side_effect = _http_error()
    store = SheetRowStore(lambda: service, "sheet-id")
    with pytest.raises(RemoteReadError):
        store.read_row(1)


def test_write_cell_uses_raw_update():
    service, values = _sheets()
    store = SheetRowStore(lambda: service, "sheet-id")
    store.write_cell(9, "https://youtu.be/abc")
    values.update.assert_called_once_with(
        spreadsheetId="sheet-id",
        range="Sheet1!L9:L9",
        valueInputOption="RAW",
        body={"values": [["https://youtu.be/abc"]]},
    )


def test_write_cell_raises_remote_write_error():
    service, _ = _sheets(update_side_effect=_http_error(403))
    store = SheetRowStore(lambda: service, "sheet-id")
    with pytest.raises(RemoteWriteError, match="row 4"):
        store.write_cell(4, "x")


def test_write_outcome_success_writes_url():
    store = FakeStore()
    assert write_outcome(store, 3, Success("abc123")) == "https://youtu.be/abc123"
    assert store.writes == [(3, "https://youtu.be/abc123")]


def test_write_outcome_failure_writes_reason_verbatim():
    store = FakeStore()
    write_outcome(store, 3, Failure("file too small, likely export error"))
    assert store.writes == [(3, "file too small, likely export error")]


TRANSPORT_ERRORS = [
    httplib2.ServerNotFoundError("Unable to find the server at sheets.googleapis.com"),
    RefreshError("invalid_grant: Token has been expired or revoked."),
    TransportError("connection reset"),
]


@pytest.mark.parametrize("error", TRANSPORT_ERRORS, ids=lambda e: type(e).__name__)
def test_read_row_wraps_transport_errors(error):
    service, values = _sheets()
    values.get.return_value.execute.side_effect = error
    store = SheetRowStore(lambda: service, "sheet-id")
    with pytest.raises(RemoteReadError) as exc:
        store.read_row(2)
    assert isinstance(exc.value, FatalSetupError)
    assert exc.value.__cause__ is error


@pytest.mark.parametrize("error", TRANSPORT_ERRORS, ids=lambda e: type(e).__name__)
def test_write_cell_wraps_transport_errors(error):
    service, _ = _sheets(update_side_effect=error)
    store = SheetRowStore(lambda: service, "sheet-id")
    with pytest.raises(RemoteWriteError, match="row 7"):
        store.write_cell(7, "https://youtu.be/abc")


def test_resource_build_failure_is_a_write_error():
    def sheets():
        raise httplib2.ServerNotFoundError("discovery unreachable")

    store = SheetRowStore(sheets, "sheet-id")
    with pytest.raises(RemoteWriteError):
        store.write_cell(1, "x")
