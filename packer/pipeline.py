"""Read -> dispatch -> solve -> aggregate pipeline.

The Reader runs on a feeder thread and pushes Jobs into the pool while the
main thread aggregates Results as they arrive. Running both sides at once
keeps the bounded queues from deadlocking when the input holds more lines
than the two queues can buffer together.

The Aggregator only knows how many Results to expect once the Reader has
finished, so it stops after the Reader is done and that many Results have
been consumed. Any error aborts the run: the pool is terminated and no total
is produced.
"""
from __future__ import annotations

import logging
import queue
import threading
import time
from dataclasses import dataclass, field
from typing import Iterable, Optional

from packer.errors import InfeasibleTarget, WorkerFailure
from packer.models import Job, PipelineSummary
from packer.parser import read_jobs
from packer.pool import DEFAULT_QUEUE_SIZE, POLL_INTERVAL, WorkerPool

logger = logging.getLogger("packer.pipeline")


@dataclass
class _ReaderState:
    """State shared between the feeder thread and the Aggregator."""

    submitted: int = 0
    error: Optional[BaseException] = None
    done: threading.Event = field(default_factory=threading.Event)
    stop: threading.Event = field(default_factory=threading.Event)


def _feed(jobs: Iterable[Job], pool: WorkerPool, state: _ReaderState) -> None:
    try:
        for job in jobs:
            if not pool.submit(job, stop=state.stop):
                return
            state.submitted += 1
        pool.close(stop=state.stop)
    except Exception as e:  # re-raised by the Aggregator
        state.error = e
    finally:
        state.done.set()


def aggregate(pool: WorkerPool, state: _ReaderState) -> int:
    """Sum Results until the Reader is done and every Job is accounted for.

    Raises:
        InfeasibleTarget: On the first infeasible Result.
        WorkerFailure: If a worker dies while Results are outstanding.
        Exception: Whatever the Reader raised (ParseError, RangeError, OSError).
    """
    total = 0
    received = 0
    while True:
        if state.error is not None:
            raise state.error
        if state.done.is_set() and received == state.submitted:
            return total
        try:
            result = pool.get_result(timeout=POLL_INTERVAL)
        except queue.Empty:
            if state.done.is_set() and (
                state.error is not None or received == state.submitted
            ):
                # Reader finished while we waited; the loop top settles the run.
                continue
            if pool.failed_workers():
                raise WorkerFailure(pool.exitcodes(), state.submitted - received) from None
            if pool.alive() or not state.done.is_set():
                continue
            # All workers exited cleanly; drain what they flushed on the way out.
            try:
                result = pool.get_result(timeout=POLL_INTERVAL)
            except queue.Empty:
                raise WorkerFailure(pool.exitcodes(), state.submitted - received) from None
        received += 1
        if not result.feasible:
            raise InfeasibleTarget(result.line_no, result.target)
        logger.debug(
            "Line %d: target=%d boxes=%d", result.line_no, result.target, result.min_boxes
        )
        total += result.min_boxes


def run_jobs(
    jobs: Iterable[Job],
    workers: int | None = None,
    queue_size: int = DEFAULT_QUEUE_SIZE,
    start_method: str | None = None,
    pool: WorkerPool | None = None,
) -> PipelineSummary:
    """Solve every Job on a worker pool and return the aggregated summary.

    Args:
        jobs: Job stream; consumed lazily on a feeder thread.
        workers: Pool size (defaults to the CPU count).
        queue_size: Capacity of the job and result queues.
        start_method: ``multiprocessing`` start method.
        pool: Pre-built, not yet started pool (overrides the three above).
    """
    if pool is None:
        pool = WorkerPool(workers=workers, queue_size=queue_size, start_method=start_method)
    state = _ReaderState()
    t0 = time.perf_counter()
    with pool:
        feeder = threading.Thread(
            target=_feed, args=(jobs, pool, state), name="packer-reader", daemon=True
        )
        feeder.start()
        try:
            total = aggregate(pool, state)
        except BaseException:
            state.stop.set()
            raise
        finally:
            feeder.join(timeout=1.0)
    elapsed = time.perf_counter() - t0
    summary = PipelineSummary(
        jobs=state.submitted, total_boxes=total, workers=pool.workers, elapsed=elapsed
    )
    logger.info(
        "Processed %d job(s) on %d worker(s) in %.3fs: total=%d",
        summary.jobs,
        summary.workers,
        summary.elapsed,
        summary.total_boxes,
    )
    return summary


def run_pipeline(
    file_path: str,
    workers: int | None = None,
    queue_size: int = DEFAULT_QUEUE_SIZE,
    start_method: str | None = None,
) -> PipelineSummary:
    """Pack every target in ``file_path`` and return the totals."""
    return run_jobs(
        read_jobs(file_path),
        workers=workers,
        queue_size=queue_size,
        start_method=start_method,
    )
