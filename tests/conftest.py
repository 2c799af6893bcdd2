"""Pytest configuration and shared fixtures.

Ensures the project root is on sys.path so ``import packer`` works from a
plain checkout.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))


@pytest.fixture
def input_file(tmp_path: Path) -> Callable[[str], Path]:
    """Factory writing ``content`` to a fresh input file under tmp_path."""
    counter = {"n": 0}

    def _write(content: str) -> Path:
        counter["n"] += 1
        path = tmp_path / f"input{counter['n']}.txt"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
