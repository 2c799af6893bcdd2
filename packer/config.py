"""Run configuration.

Settings come from an optional YAML/JSON file and are overridden by CLI
flags. Without a file, the defaults below apply.
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict

import yaml

from packer.pool import DEFAULT_QUEUE_SIZE


@dataclass(frozen=True)
class RunConfig:
    """Tunables of a single run.

    Attributes:
        workers: Worker pool size; None means one per CPU.
        queue_size: Capacity of the job and result queues.
        log_level: Name of the root logging level.
        start_method: ``multiprocessing`` start method; None uses the platform default.
        summary_json: Optional path for a JSON run summary.
    """

    workers: int | None = None
    queue_size: int = DEFAULT_QUEUE_SIZE
    log_level: str = "INFO"
    start_method: str | None = None
    summary_json: str | None = None

    def __post_init__(self) -> None:
        if self.workers is not None and int(self.workers) < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if int(self.queue_size) < 1:
            raise ValueError(f"queue_size must be >= 1, got {self.queue_size}")

    def merged(self, **overrides: Any) -> "RunConfig":
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def load_config(path: str) -> RunConfig:
    """Load a RunConfig from a ``.yml``/``.yaml`` or JSON file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: On non-mapping content, unknown keys or invalid values.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()

    if path.endswith((".yml", ".yaml")):
        try:
            cfg = yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
    else:
        cfg = json.loads(text)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config root must be a mapping: {path}")

    known = {f.name for f in fields(RunConfig)}
    unknown = sorted(set(cfg) - known)
    if unknown:
        raise ValueError(f"Unknown config key(s): {', '.join(unknown)}")

    values: Dict[str, Any] = dict(cfg)
    if values.get("workers") is not None:
        values["workers"] = int(values["workers"])
    if "queue_size" in values:
        values["queue_size"] = int(values["queue_size"])
    if "log_level" in values:
        values["log_level"] = str(values["log_level"]).upper()
    return RunConfig(**values)
