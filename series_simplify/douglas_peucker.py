from __future__ import annotations
from typing import List, Tuple

import numpy as np

from series_simplify.distance_filter import sq_tolerance
from series_simplify.segment import sq_segment_dist_many


def finite_runs(xs: np.ndarray, ys: np.ndarray) -> List[Tuple[int, int]]:
    """
    Maximal runs of indices whose (x, y) are both finite.
    Returns inclusive (start, end) pairs in increasing order.
    """
    ok = np.isfinite(np.asarray(xs, dtype=np.float64)) & np.isfinite(np.asarray(ys, dtype=np.float64))
    edges = np.diff(np.concatenate([[0], ok.astype(np.int8), [0]]))
    starts = np.flatnonzero(edges == 1)
    ends = np.flatnonzero(edges == -1) - 1
    return [(int(a), int(b)) for a, b in zip(starts, ends)]


def simplify_douglas_peucker(xs: np.ndarray, ys: np.ndarray, epsilon: float) -> np.ndarray:
    """
    Ramer-Douglas-Peucker refinement over scaled coordinates.

    The recursion is unrolled onto an explicit (i0, i1) stack, so deep
    splits on long monotone series do not touch the interpreter stack.
    A split point is the first index reaching the maximum squared distance
    to the chord (i0, i1); it is kept when that distance exceeds epsilon^2.

    Points with non-finite coordinates are always kept and never used as
    chord endpoints: each finite run is refined on its own, ends included.

    xs, ys: (M,) scaled coordinates
    Returns: (M,) uint8 keep mask
    """
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    if xs.ndim != 1 or xs.shape != ys.shape:
        raise ValueError("xs and ys must be 1D and have the same length")

    m = xs.shape[0]
    keep = np.zeros(m, dtype=np.uint8)
    if m == 0:
        return keep

    eps_sq = sq_tolerance(epsilon)
    keep[0] = 1
    keep[m - 1] = 1

    runs = finite_runs(xs, ys)
    if len(runs) != 1 or runs[0] != (0, m - 1):
        keep[~(np.isfinite(xs) & np.isfinite(ys))] = 1

    stack = []
    for i0, i1 in runs:
        keep[i0] = 1
        keep[i1] = 1
        if i1 - i0 > 1:
            stack.append((i0, i1))

    while stack:
        i0, i1 = stack.pop()

        d = sq_segment_dist_many(
            xs[i0], ys[i0], xs[i1], ys[i1], xs[i0 + 1:i1], ys[i0 + 1:i1]
        )
        k = int(np.argmax(d))  # first occurrence wins ties
        max_d = float(d[k])

        # overflowed (NaN) distances are treated as significant
        if not max_d <= eps_sq:
            kmax = i0 + 1 + k
            keep[kmax] = 1
            if kmax - i0 > 1:
                stack.append((i0, kmax))
            if i1 - kmax > 1:
                stack.append((kmax, i1))

    return keep
