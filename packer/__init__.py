"""Minimum box packing over a fixed set of box sizes.

Exports the solver, the data structures and the pipeline entry point.
"""

from packer.models import DENOMINATIONS, Job, PipelineSummary, Result  # noqa: F401
from packer.pipeline import run_pipeline  # noqa: F401
from packer.solver import decompose, min_boxes  # noqa: F401

__all__ = [
    "DENOMINATIONS",
    "Job",
    "PipelineSummary",
    "Result",
    "decompose",
    "min_boxes",
    "run_pipeline",
]
