"""Charts of the minimum-box curve."""

import os
from typing import Optional

import matplotlib

matplotlib.use("Agg")  # Must be set before importing pyplot
import matplotlib.pyplot as plt  # noqa: E402

from packer.models import DENOMINATIONS  # noqa: E402
from packer.solver import min_boxes  # noqa: E402


def plot_min_boxes(
    max_target: int,
    save_path: str,
    title: Optional[str] = None,
) -> tuple[int, int]:
    """Plot the minimum box count for every target in ``0..max_target``.

    Feasible targets are drawn as a step curve, infeasible ones as markers
    on the x axis. The figure is written to ``save_path`` (parent directories
    are created).

    Returns:
        ``(feasible, infeasible)`` target counts.
    """
    if max_target < 0:
        raise ValueError(f"max_target must be >= 0, got {max_target}")
    xs: list[int] = []
    ys: list[int] = []
    missing: list[int] = []
    for n in range(max_target + 1):
        count, ok = min_boxes(n)
        if ok:
            xs.append(n)
            ys.append(count)
        else:
            missing.append(n)

    fig, ax = plt.subplots(figsize=(10, 5), constrained_layout=True)
    ax.step(xs, ys, where="post", linewidth=1.0, label="minimum boxes")
    if missing:
        ax.scatter(missing, [0] * len(missing), marker="x", color="tab:red", s=14,
                   label=f"infeasible ({len(missing)})")
    ax.set_xlabel("Target", fontsize=12)
    ax.set_ylabel("Boxes", fontsize=12)
    sizes = ", ".join(str(s) for s in sorted(DENOMINATIONS))
    ax.set_title(title or f"Minimum boxes with sizes {{{sizes}}}", fontsize=14, fontweight="bold")
    ax.grid(True, alpha=0.25, linestyle="--", linewidth=0.7)
    ax.legend(loc="upper left", frameon=False)

    parent = os.path.dirname(save_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    fig.savefig(save_path, dpi=150)
    plt.close(fig)
    return len(xs), len(missing)
