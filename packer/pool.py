"""Process-based worker pool over two bounded queues.

Workers pull Jobs from a shared job queue, solve them and push Results to a
shared result queue. Both queues are bounded: a full job queue stalls the
producer, a full result queue stalls the workers. A ``None`` sentinel per
worker closes the job queue.
"""
from __future__ import annotations

import logging
import os
import queue
import threading
from multiprocessing import get_context
from typing import Callable, Tuple

from packer.models import Job, Result
from packer.solver import min_boxes

logger = logging.getLogger("packer.pool")

SolveFn = Callable[[int], Tuple[int, bool]]

DEFAULT_QUEUE_SIZE = 4096
# Granularity of blocking queue operations; lets callers react to aborts.
POLL_INTERVAL = 0.1


def default_workers() -> int:
    return os.cpu_count() or 1


def _worker_loop(jobs, results, solve: SolveFn) -> None:
    while True:
        job = jobs.get()
        if job is None:
            break
        count, ok = solve(job.target)
        results.put(
            Result(line_no=job.line_no, target=job.target, min_boxes=count, feasible=ok)
        )


class WorkerPool:
    """Fixed-size pool of worker processes.

    Args:
        workers: Number of processes; defaults to ``os.cpu_count()``.
        queue_size: Capacity of both the job and the result queue.
        solve: Picklable function ``target -> (count, feasible)``.
        start_method: ``multiprocessing`` start method (platform default if None).
    """

    def __init__(
        self,
        workers: int | None = None,
        queue_size: int = DEFAULT_QUEUE_SIZE,
        solve: SolveFn = min_boxes,
        start_method: str | None = None,
    ) -> None:
        if workers is None:
            workers = default_workers()
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got {workers}")
        if queue_size < 1:
            raise ValueError(f"queue_size must be >= 1, got {queue_size}")
        self.workers = workers
        self.queue_size = queue_size
        self._solve = solve
        self._ctx = get_context(start_method)
        self._jobs = self._ctx.Queue(maxsize=queue_size)
        self._results = self._ctx.Queue(maxsize=queue_size)
        self._procs: list = []

    def start(self) -> None:
        for idx in range(self.workers):
            p = self._ctx.Process(
                target=_worker_loop,
                args=(self._jobs, self._results, self._solve),
                name=f"packer-worker-{idx}",
                daemon=True,
            )
            p.start()
            self._procs.append(p)
        logger.info("Started %d worker(s), queue size %d", self.workers, self.queue_size)

    def _put(self, item: Job | None, stop: threading.Event | None) -> bool:
        while True:
            if stop is not None and stop.is_set():
                return False
            try:
                self._jobs.put(item, timeout=POLL_INTERVAL)
                return True
            except queue.Full:
                continue

    def submit(self, job: Job, stop: threading.Event | None = None) -> bool:
        """Blocking put of ``job``; returns False if ``stop`` was set first."""
        return self._put(job, stop)

    def close(self, stop: threading.Event | None = None) -> None:
        """Signal end of input: one sentinel per worker."""
        for _ in self._procs:
            if not self._put(None, stop):
                return

    def get_result(self, timeout: float = POLL_INTERVAL) -> Result:
        """Next Result in arrival order; raises ``queue.Empty`` on timeout."""
        return self._results.get(timeout=timeout)

    def failed_workers(self) -> list:
        return [p for p in self._procs if p.exitcode not in (None, 0)]

    def alive(self) -> bool:
        return any(p.is_alive() for p in self._procs)

    def exitcodes(self) -> list[int | None]:
        return [p.exitcode for p in self._procs]

    def terminate(self) -> None:
        for p in self._procs:
            if p.is_alive():
                p.terminate()
        for p in self._procs:
            p.join()
        self._release()

    def join(self) -> None:
        for p in self._procs:
            p.join()
        self._release()

    def _release(self) -> None:
        for q in (self._jobs, self._results):
            q.cancel_join_thread()
            q.close()

    def __enter__(self) -> "WorkerPool":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.terminate()
        else:
            self.join()
