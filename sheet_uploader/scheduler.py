"""Drive a range of sheet rows through the upload pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List

from .common.worker_pool import process_with_worker_pool
from .config import DEFAULT_WORKERS
from .helpers.formatting import Fore, Style
from .interfaces.outcome import RowResult
from .pipeline import RowPipeline


@dataclass
class RunSummary:
    """Per-row results of one :func:`run_range` call."""

    results: List[RowResult] = field(default_factory=list)

    @property
    def processed(self) -> List[int]:
        return sorted(r.row_index for r in self.results)

    @property
    def succeeded(self) -> List[int]:
        return sorted(r.row_index for r in self.results if r.ok)

    @property
    def failed(self) -> List[int]:
        return sorted(r.row_index for r in self.results if not r.ok)


def _print_progress(completed: int, total: int) -> None:
    print(f"{Fore.MAGENTA}{completed}/{total} rows finished{Style.RESET_ALL}")


def run_rows(
    process: Callable[[int], RowResult],
    first: int,
    last: int,
    *,
    concurrency: int = DEFAULT_WORKERS,
) -> RunSummary:
    """Run ``process`` for every row in ``[first, last]`` and wait for all.

    Blocks until exactly ``last - first + 1`` rows have completed. A fatal
    error raised by ``process`` stops the run and propagates.
    """
    if first < 1 or last < first:
        raise ValueError(f"invalid row range {first}..{last}")

    rows = list(range(first, last + 1))
    results = process_with_worker_pool(
        rows,
        process,
        max_workers=concurrency,
        on_progress=_print_progress,
        thread_name="row-worker",
    )
    return RunSummary(results)


def run_range(
    client,
    sheet_id: str,
    base_dir: str,
    first: int,
    last: int,
    concurrency: int = DEFAULT_WORKERS,
    **pipeline_kwargs,
) -> RunSummary:
    """Upload every row in ``[first, last]`` using ``concurrency`` workers."""
    pipeline = RowPipeline(client, sheet_id, base_dir, **pipeline_kwargs)
    return run_rows(pipeline.run, first, last, concurrency=concurrency)


__all__ = ["RunSummary", "run_range", "run_rows"]
