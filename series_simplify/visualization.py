from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes


@dataclass(frozen=True)
class PlotConfig:
    raw_color: str = "0.7"
    simplified_color: str = "tab:red"
    marker_size: float = 3.0
    show_markers: bool = True


def plot_simplification(
    times: np.ndarray,
    values: np.ndarray,
    times_s: np.ndarray,
    values_s: np.ndarray,
    ax: Optional[Axes] = None,
    cfg: PlotConfig = PlotConfig(),
) -> Axes:
    """
    Overlay the raw series and its simplified version on one axes.
    Creates a new figure when ax is None.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(10, 4))

    ax.plot(times, values, color=cfg.raw_color, lw=1.0, label=f"raw ({len(times)})")
    ax.plot(
        times_s,
        values_s,
        color=cfg.simplified_color,
        lw=1.0,
        marker="o" if cfg.show_markers else None,
        ms=cfg.marker_size,
        label=f"simplified ({len(times_s)})",
    )
    ax.set_xlabel("time")
    ax.set_ylabel("value")
    ax.legend(loc="best")
    return ax
