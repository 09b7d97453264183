from __future__ import annotations
import numpy as np


def sq_segment_dist(x0: float, y0: float, x1: float, y1: float, x2: float, y2: float) -> float:
    """
    Squared distance from (x2, y2) to the closest point of the segment
    (x0, y0)-(x1, y1). A zero-length segment (including one whose squared
    length underflows to 0) collapses to (x0, y0).
    """
    x, y = x0, y0
    dx = x1 - x0
    dy = y1 - y0
    denom = dx * dx + dy * dy

    if denom != 0.0:
        t = ((x2 - x) * dx + (y2 - y) * dy) / denom
        if t > 1.0:
            x, y = x1, y1
        elif t > 0.0:
            x += dx * t
            y += dy * t

    dx = x2 - x
    dy = y2 - y
    return float(dx * dx + dy * dy)


def sq_segment_dist_many(
    x0: float, y0: float, x1: float, y1: float, xs: np.ndarray, ys: np.ndarray
) -> np.ndarray:
    """
    Vectorized sq_segment_dist for many query points against one segment.
    xs, ys: (K,) float
    Returns: (K,) float64
    """
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    dx = x1 - x0
    dy = y1 - y0
    denom = dx * dx + dy * dy

    if denom == 0.0:
        cx = np.full_like(xs, x0)
        cy = np.full_like(ys, y0)
    else:
        t = ((xs - x0) * dx + (ys - y0) * dy) / denom
        # t <= 0 -> P0, 0 < t <= 1 -> projection, t > 1 -> P1
        inner = t > 0.0
        past = t > 1.0
        cx = np.where(past, x1, np.where(inner, x0 + dx * t, x0))
        cy = np.where(past, y1, np.where(inner, y0 + dy * t, y0))

    ex = xs - cx
    ey = ys - cy
    return ex * ex + ey * ey
