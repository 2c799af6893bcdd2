"""Core data structures for the box packing pipeline.

This module defines:
    DENOMINATIONS   -- fixed box sizes, largest first.
    Job             -- one parsed input line awaiting a solution.
    Result          -- the solved outcome of a Job.
    Decomposition   -- per-size box counts of an optimal packing.
    PipelineSummary -- outcome of a complete run.
"""

from dataclasses import dataclass

# Largest first: the solver enumerates 59s and 42s, then closes with 16s and 5s.
DENOMINATIONS: tuple[int, ...] = (59, 42, 16, 5)


@dataclass(frozen=True)
class Job:
    """Single target read from the input.

    Attributes:
        line_no: 1-based physical line number in the source file.
        target: Non-negative amount to pack exactly.
    """

    line_no: int
    target: int


@dataclass(frozen=True)
class Result:
    """Outcome of solving one Job.

    Attributes:
        line_no: Line number of the originating Job.
        target: Target of the originating Job (kept for diagnostics).
        min_boxes: Minimum number of boxes; meaningful only if ``feasible``.
        feasible: Whether an exact packing exists.
    """

    line_no: int
    target: int
    min_boxes: int
    feasible: bool


@dataclass(frozen=True)
class Decomposition:
    """Box counts of an optimal packing, keyed by box size."""

    counts: dict[int, int]

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    @property
    def amount(self) -> int:
        return sum(size * n for size, n in self.counts.items())


@dataclass(frozen=True)
class PipelineSummary:
    """Totals of a successful run.

    Fields:
        jobs: Number of Jobs submitted (non-blank input lines).
        total_boxes: Sum of minimum box counts over all Jobs.
        workers: Size of the worker pool that processed the run.
        elapsed: Wall time of the run in seconds.
    """
    jobs: int
    total_boxes: int
    workers: int
    elapsed: float
