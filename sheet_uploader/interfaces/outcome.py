"""Result of processing one sheet row."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..config import YOUTUBE_URL_PREFIX
from ..helpers.formatting import youtube_url


class OutcomeStatus(str, Enum):
    """Whether a row ended with a published video or an error."""

    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True, slots=True)
class Success:
    """The upload succeeded and YouTube assigned ``locator``."""

    locator: str

    @property
    def status(self) -> OutcomeStatus:
        return OutcomeStatus.SUCCESS

    @property
    def message(self) -> str:
        return self.locator

    def cell_value(self) -> str:
        """Return the public URL written into the result cell."""

        return youtube_url(YOUTUBE_URL_PREFIX, self.locator)


@dataclass(frozen=True, slots=True)
class Failure:
    """The row could not be uploaded; ``reason`` is human readable."""

    reason: str

    @property
    def status(self) -> OutcomeStatus:
        return OutcomeStatus.FAILURE

    @property
    def message(self) -> str:
        return self.reason

    def cell_value(self) -> str:
        return self.reason


UploadOutcome = Union[Success, Failure]


@dataclass(frozen=True, slots=True)
class RowResult:
    """What happened to one row: its outcome and whether it reached the sheet."""

    row_index: int
    outcome: UploadOutcome
    write_error: str | None = None

    @property
    def ok(self) -> bool:
        return self.write_error is None and self.outcome.status is OutcomeStatus.SUCCESS


__all__ = ["OutcomeStatus", "Success", "Failure", "UploadOutcome", "RowResult"]
