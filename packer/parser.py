"""Reader: turns a line-oriented input file into Jobs.

Lines are numbered physically from 1. Blank lines are skipped but still
advance the numbering, so diagnostics always point at the real line.
"""
from __future__ import annotations

import re
import sys
from typing import Iterable, Iterator

from packer.errors import ParseError, RangeError
from packer.models import Job

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_target(text: str, line_no: int) -> int:
    """Parse one stripped line as a non-negative base-10 integer.

    Args:
        text: Line content with surrounding whitespace removed.
        line_no: Physical line number, used in error messages.

    Returns:
        The parsed value, ``0 <= value <= sys.maxsize``.

    Raises:
        ParseError: If ``text`` is not an optionally signed run of ASCII
            digits (``int()`` alone would also accept ``1_000`` or
            non-ASCII digits).
        RangeError: If the value is negative or exceeds ``sys.maxsize``.
    """
    if not _INTEGER.fullmatch(text):
        raise ParseError(line_no, text)
    value = int(text)
    if value < 0 or value > sys.maxsize:
        raise RangeError(line_no, value)
    return value


def iter_jobs(lines: Iterable[str]) -> Iterator[Job]:
    """Yield one Job per non-blank line; raise on the first bad line."""
    for line_no, raw in enumerate(lines, start=1):
        text = raw.strip()
        if not text:
            continue
        yield Job(line_no=line_no, target=parse_target(text, line_no))


def read_jobs(file_path: str) -> Iterator[Job]:
    """Stream Jobs from ``file_path``.

    Raises:
        OSError: If the file cannot be opened or read.
        ParseError, RangeError: On the first invalid line.
    """
    with open(file_path, "r", encoding="utf-8", newline="\n") as f:
        yield from iter_jobs(f)
