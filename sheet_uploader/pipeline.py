"""Per-row unit of work: resolve, size-gate, upload, write back."""

from __future__ import annotations

import logging

from .config import TOO_SMALL_MESSAGE, YOUTUBE_PRIVACY
from .exceptions import RemoteWriteError
from .helpers.formatting import row_prefix
from .helpers.logging import run_step
from .integrations.sheets.rows import SheetRowStore, write_outcome
from .integrations.youtube.upload import upload_job
from .interfaces.job import JobDescriptor
from .interfaces.outcome import Failure, RowResult, UploadOutcome
from .steps.resolve import resolve_row
from .steps.size_gate import check_file_size

logger = logging.getLogger(__name__)


class RowPipeline:
    """Process single sheet rows against one spreadsheet and channel.

    ``run`` is safe to call from several threads at once; the client builds
    its API resources per thread and nothing else is shared.
    """

    def __init__(
        self,
        client,
        sheet_id: str,
        base_dir: str,
        *,
        privacy: str = YOUTUBE_PRIVACY,
        store: SheetRowStore | None = None,
    ) -> None:
        self.client = client
        self.base_dir = base_dir
        self.privacy = privacy
        self.store = store or SheetRowStore(client.sheets, sheet_id)

    def compute_outcome(self, job: JobDescriptor) -> UploadOutcome:
        """Gate ``job`` on file size, then upload it."""
        ok, err = check_file_size(job.file_path)
        if not ok:
            if err is not None:
                return Failure(str(err))
            return Failure(TOO_SMALL_MESSAGE)
        return upload_job(self.client, job, self.privacy)

    def run(self, row_index: int) -> RowResult:
        """Process ``row_index`` end to end.

        Row resolution errors propagate: they mean the sheet or credentials
        are wrong and the whole batch should stop. Every other failure is
        written to the result cell, and a failed write is only logged.
        """
        prefix = row_prefix(row_index)
        job = resolve_row(self.store, row_index, self.base_dir)
        outcome = run_step(f"Upload {job.file_path}", self.compute_outcome, job, prefix=prefix)

        write_error = None
        try:
            run_step("Write result", write_outcome, self.store, row_index, outcome, prefix=prefix)
        except RemoteWriteError as exc:
            logger.warning("Row %d: %s", row_index, exc)
            write_error = str(exc)

        print(f"{prefix} done with {row_index}: {outcome.status.value}")
        return RowResult(row_index, outcome, write_error)


def run_row(client, sheet_id: str, base_dir: str, row_index: int, **kwargs) -> RowResult:
    """Convenience wrapper running a single row through a fresh pipeline."""
    return RowPipeline(client, sheet_id, base_dir, **kwargs).run(row_index)


__all__ = ["RowPipeline", "run_row"]
