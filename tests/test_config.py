"""Tests for RunConfig loading and merging."""

from __future__ import annotations

import json

import pytest

from packer.config import RunConfig, load_config
from packer.pool import DEFAULT_QUEUE_SIZE


def test_defaults() -> None:
    cfg = RunConfig()
    assert cfg.workers is None
    assert cfg.queue_size == DEFAULT_QUEUE_SIZE
    assert cfg.log_level == "INFO"


def test_load_yaml(tmp_path) -> None:
    path = tmp_path / "cfg.yml"
    path.write_text("workers: 3\nqueue_size: 64\nlog_level: debug\n", encoding="utf-8")
    cfg = load_config(str(path))
    assert cfg == RunConfig(workers=3, queue_size=64, log_level="DEBUG")


def test_load_json(tmp_path) -> None:
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"workers": 1, "summary_json": "s.json"}), encoding="utf-8")
    cfg = load_config(str(path))
    assert cfg.workers == 1
    assert cfg.summary_json == "s.json"


def test_empty_yaml_gives_defaults(tmp_path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)) == RunConfig()


@pytest.mark.parametrize(
    "content",
    [
        "- 1\n- 2\n",  # not a mapping
        "threads: 4\n",  # unknown key
        "workers: 0\n",
        "queue_size: -1\n",
        "workers: [1\n",  # malformed YAML
    ],
)
def test_invalid_yaml(tmp_path, content: str) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "absent.yaml"))


def test_merged_ignores_none() -> None:
    base = RunConfig(workers=2, queue_size=10)
    merged = base.merged(workers=None, queue_size=20, log_level=None)
    assert merged == RunConfig(workers=2, queue_size=20)
