"""Render the minimum-box curve for targets 0..N.

Usage:
    python scripts/plot_min_boxes.py --max-target 600
    python scripts/plot_min_boxes.py --max-target 2000 --out figures/min_boxes_2000.png
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from packer.visualization import plot_min_boxes  # noqa: E402

logger = logging.getLogger("packer.scripts")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--max-target", type=int, default=600)
    parser.add_argument("--out", default="figures/min_boxes.png")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    feasible, infeasible = plot_min_boxes(args.max_target, args.out)
    logger.info(
        "Saved %s (%d feasible, %d infeasible targets)", args.out, feasible, infeasible
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
