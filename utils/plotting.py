from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.axes import Axes  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402


def ensure_parent(pathlike) -> Path:
    """Create the parent directory of *pathlike* and return it as a Path."""
    target = Path(pathlike)
    target.parent.mkdir(parents=True, exist_ok=True)
    return target


def wide_grid(rows: int, cols: int) -> Tuple[Figure, list]:
    """Create a grid of subplots for dashboard-style layouts."""
    fig, axes = plt.subplots(rows, cols, figsize=(cols * 5.5, rows * 3.5), squeeze=False)
    return fig, axes


def nice_axes(
    ax: Axes,
    title: str,
    xlabel: Optional[str] = None,
    ylabel: Optional[str] = None,
) -> Axes:
    """Apply consistent styling to a matplotlib Axes object."""
    ax.set_title(title)
    if xlabel:
        ax.set_xlabel(xlabel)
    if ylabel:
        ax.set_ylabel(ylabel)
    ax.grid(True, alpha=0.3)
    return ax


def save(fig: Figure, path) -> Path:
    """Save the figure to *path* and release it."""
    target = ensure_parent(path)
    fig.savefig(str(target), bbox_inches="tight")
    plt.close(fig)
    return target


__all__ = ["ensure_parent", "wide_grid", "nice_axes", "save"]
