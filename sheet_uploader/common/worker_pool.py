from __future__ import annotations

import queue
import threading
from typing import Callable, List, Sequence, Tuple, TypeVar

T = TypeVar("T")
R = TypeVar("R")

# Close marker; one is queued per worker after the last real item
_STOP = object()


def _worker(
    jobs: "queue.Queue[object]",
    done: "queue.Queue[Tuple[object, object, Exception | None]]",
    func: Callable[[T], R],
    cancelled: threading.Event,
) -> None:
    while True:
        item = jobs.get()
        if item is _STOP:
            return
        if cancelled.is_set():
            continue
        try:
            res = func(item)  # type: ignore[arg-type]
        except Exception as exc:
            cancelled.set()
            done.put((item, None, exc))
        else:
            done.put((item, res, None))


def process_with_worker_pool(
    items: Sequence[T],
    func: Callable[[T], R],
    *,
    max_workers: int,
    on_progress: Callable[[int, int], None] | None = None,
    thread_name: str = "worker",
) -> List[R]:
    """Process ``items`` with a fixed pool of long-lived worker threads.

    Parameters
    ----------
    items:
        Work items. Each is queued exactly once, in order; completion order is
        not guaranteed.
    func:
        Callable invoked as ``func(item)`` inside a worker thread.
    max_workers:
        Number of worker threads to start.
    on_progress:
        Optional callback invoked as ``on_progress(completed, total)`` from the
        calling thread after each completion.

    Returns
    -------
    list
        Results in completion order, one per item.

    The first exception raised by ``func`` stops the run: items still queued
    are skipped, in-flight items are allowed to finish, and the exception is
    re-raised in the caller.
    """
    if max_workers < 1:
        raise ValueError("max_workers must be >= 1")

    total = len(items)
    jobs: "queue.Queue[object]" = queue.Queue(maxsize=total + max_workers)
    done: "queue.Queue[Tuple[object, object, Exception | None]]" = queue.Queue()
    cancelled = threading.Event()

    workers = [
        threading.Thread(
            target=_worker,
            args=(jobs, done, func, cancelled),
            name=f"{thread_name}-{n}",
            daemon=True,
        )
        for n in range(max_workers)
    ]
    for w in workers:
        w.start()

    for item in items:
        jobs.put(item)
    for _ in workers:
        jobs.put(_STOP)

    results: List[R] = []
    try:
        for completed in range(1, total + 1):
            _item, res, exc = done.get()
            if exc is not None:
                cancelled.set()
                for w in workers:
                    w.join()
                raise exc
            results.append(res)  # type: ignore[arg-type]
            if on_progress:
                on_progress(completed, total)
    except KeyboardInterrupt:  # pragma: no cover - user requested termination
        cancelled.set()
        raise
    for w in workers:
        w.join()
    return results


__all__ = ["process_with_worker_pool"]
