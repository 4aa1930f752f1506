from __future__ import annotations

import math
from typing import Dict, Iterable, List, Tuple

import matplotlib.pyplot as plt

from somostools.numeric.exact import is_non_finite
from somostools.scan.driver import SomosRun


def growth_points(run: SomosRun) -> List[Tuple[int, float]]:
    """
    (n, log10|a_n|) for every finite, non-zero term of the run.
    """
    pts: List[Tuple[int, float]] = []
    for n, a in enumerate(run.terms):
        if a == 0.0 or is_non_finite(a):
            continue
        pts.append((n, math.log10(abs(a))))
    return pts


def plot_growth(
    runs: Iterable[SomosRun],
    *,
    figsize: Tuple[float, float] = (10, 6),
    linewidth: float = 1.0,
    save_path: str | None = None,
) -> Dict[int, List[Tuple[int, float]]]:
    """
    Plot log10|a_n| against n, one line per Somos order.

    The point where a line ends is where the run stopped
    (breakdown near log10 = 308, or a repeated fraction).

    If save_path is set, saves a PNG there and closes the figure,
    otherwise shows it.
    """
    data: Dict[int, List[Tuple[int, float]]] = {}

    fig, ax = plt.subplots(figsize=figsize)
    for run in runs:
        pts = growth_points(run)
        data[run.s] = pts
        if not pts:
            continue
        xs = [n for n, _ in pts]
        ys = [y for _, y in pts]
        ax.plot(xs, ys, linewidth=linewidth, label=f"s={run.s} ({run.stopped_reason})")

    ax.set_xlabel("n")
    ax.set_ylabel("log10 |a_n|")
    ax.set_title("Somos-s term growth in double precision")
    if data:
        ax.legend(fontsize="x-small", ncol=2)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()

    return data
