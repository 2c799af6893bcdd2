"""Exceptions raised by the packing pipeline.

Every error is fatal for a run. They propagate up to the CLI, which logs the
message and exits with a non-zero status. Failures to read the input file are
left as the built-in ``OSError``.
"""
from __future__ import annotations


class PackingError(Exception):
    """Base class for all pipeline errors."""

    line_no: int | None = None


class ParseError(PackingError, ValueError):
    """Line is not a base-10 integer."""

    def __init__(self, line_no: int, text: str) -> None:
        super().__init__(f"Line {line_no}: invalid integer {text!r}")
        self.line_no = line_no
        self.text = text


class RangeError(PackingError, ValueError):
    """Value is negative or larger than the platform's native integer range."""

    def __init__(self, line_no: int, value: int) -> None:
        super().__init__(f"Line {line_no}: value out of range: {value}")
        self.line_no = line_no
        self.value = value


class InfeasibleTarget(PackingError):
    """No combination of box sizes sums exactly to the target."""

    def __init__(self, line_no: int, target: int) -> None:
        super().__init__(f"Line {line_no}: cannot pack {target} exactly")
        self.line_no = line_no
        self.target = target


class WorkerFailure(PackingError):
    """A worker process died before delivering all of its results."""

    def __init__(self, exitcodes: list[int | None], outstanding: int) -> None:
        super().__init__(
            f"Worker pool failed with {outstanding} result(s) outstanding "
            f"(exit codes: {exitcodes})"
        )
        self.exitcodes = exitcodes
        self.outstanding = outstanding
