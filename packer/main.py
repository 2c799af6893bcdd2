"""Command-line entry point.

Reads one target per line from INPUT, packs every target on the worker pool
and prints ``Total boxes: <sum>``. Any invalid line, infeasible target or I/O
failure is logged and turns into exit status 1 with no total printed.
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from datetime import datetime
from typing import Optional, Sequence

from packer.config import RunConfig, load_config
from packer.errors import PackingError
from packer.models import PipelineSummary
from packer.pipeline import run_pipeline

logger = logging.getLogger("packer.cli")

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="box-packer",
        description="Minimum number of boxes (sizes 5, 16, 42, 59) for every target in a file",
    )
    parser.add_argument("input", help="Text file with one non-negative integer per line")
    parser.add_argument("--workers", type=int, default=None, help="Worker processes (default: CPU count)")
    parser.add_argument("--queue-size", type=int, default=None, help="Capacity of the job/result queues")
    parser.add_argument("--config", default=None, help="Optional YAML/JSON config file")
    parser.add_argument("--log-level", default=None, help="Logging level (default: INFO)")
    parser.add_argument("--summary-json", default=None, help="Write a JSON run summary to this path")
    return parser


def write_summary(path: str, input_path: str, summary: PipelineSummary) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    payload = {
        "input": input_path,
        "jobs": summary.jobs,
        "total_boxes": summary.total_boxes,
        "workers": summary.workers,
        "elapsed_seconds": summary.elapsed,
        "timestamp": datetime.now().strftime("%Y%m%d_%H%M%S"),
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = load_config(args.config) if args.config else RunConfig()
        cfg = cfg.merged(
            workers=args.workers,
            queue_size=args.queue_size,
            log_level=args.log_level.upper() if args.log_level else None,
            summary_json=args.summary_json,
        )
    except (OSError, ValueError) as e:
        logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
        logger.error("Invalid configuration: %s", e)
        return EXIT_FAILURE

    level = getattr(logging, cfg.log_level, logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("packer").setLevel(level)
    # Fatal diagnostics are always reported, whatever the configured level.
    logger.setLevel(min(level, logging.ERROR))

    try:
        summary = run_pipeline(
            args.input,
            workers=cfg.workers,
            queue_size=cfg.queue_size,
            start_method=cfg.start_method,
        )
    except PackingError as e:
        logger.error("%s", e)
        return EXIT_FAILURE
    except UnicodeDecodeError as e:
        logger.error("Cannot decode %s: %s", args.input, e)
        return EXIT_FAILURE
    except OSError as e:
        logger.error("Cannot read %s: %s", args.input, e)
        return EXIT_FAILURE

    print(f"Total boxes: {summary.total_boxes}")

    if cfg.summary_json:
        try:
            write_summary(cfg.summary_json, args.input, summary)
            logger.info("Saved run summary to %s", cfg.summary_json)
        except OSError as e:
            logger.warning("Failed to write run summary: %s", e)
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
