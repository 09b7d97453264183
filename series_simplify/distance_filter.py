from __future__ import annotations
import numpy as np


def sq_tolerance(epsilon: float) -> float:
    """
    Squared tolerance shared by both simplification stages.
    epsilon <= 0 disables simplification: -1.0 is below every squared distance.
    """
    eps = float(epsilon)
    if not np.isfinite(eps):
        raise ValueError("epsilon must be finite")
    if eps <= 0.0:
        return -1.0
    return eps * eps


def simplify_dist(xs: np.ndarray, ys: np.ndarray, epsilon: float) -> np.ndarray:
    """
    Radial distance filter in scaled coordinates.

    Keeps a point once it is more than epsilon away from the last kept point
    (the anchor). The first and last points are always kept.
    xs, ys: (N,) scaled coordinates
    Returns: (N,) uint8 keep mask
    """
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    if xs.ndim != 1 or xs.shape != ys.shape:
        raise ValueError("xs and ys must be 1D and have the same length")

    n = xs.shape[0]
    keep = np.zeros(n, dtype=np.uint8)
    if n == 0:
        return keep

    eps_sq = sq_tolerance(epsilon)
    keep[0] = 1

    # plain floats: this loop is the hot path
    px = float(xs[0])
    py = float(ys[0])
    xl = xs.tolist()
    yl = ys.tolist()
    for i in range(1, n):
        x, y = xl[i], yl[i]
        dx = px - x
        dy = py - y
        d = dy * dy + dx * dx
        # NaN distances fail "<=" and count as far
        if not d <= eps_sq:
            keep[i] = 1
            px, py = x, y

    keep[n - 1] = 1
    return keep
