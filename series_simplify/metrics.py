from __future__ import annotations
import numpy as np

from series_simplify.scales import Scale, apply_scale
from series_simplify.segment import sq_segment_dist_many


def reduction_ratio(n_input: int, n_output: int) -> float:
    """
    Fraction of points that survived (1.0 = nothing removed).
    """
    if n_input <= 0:
        return 1.0
    return float(n_output) / float(n_input)


def max_sq_deviation(
    times: np.ndarray,
    values: np.ndarray,
    times_s: np.ndarray,
    values_s: np.ndarray,
    time_scale: Scale,
    value_scale: Scale,
) -> float:
    """
    Largest squared screen distance from an original sample to the simplified
    polyline segment spanning its time. Non-finite samples are ignored.
    """
    t = np.asarray(times, dtype=np.float64)
    ts = np.asarray(times_s, dtype=np.float64)
    if t.shape[0] == 0 or ts.shape[0] < 2:
        return 0.0

    xs = apply_scale(time_scale, t)
    ys = apply_scale(value_scale, values)
    sx = apply_scale(time_scale, ts)
    sy = apply_scale(value_scale, values_s)

    seg = np.searchsorted(ts, t, side="right") - 1
    seg = np.clip(seg, 0, ts.shape[0] - 2)

    # one sort groups samples by segment
    order = np.argsort(seg, kind="stable")
    seg = seg[order]
    xs = xs[order]
    ys = ys[order]
    bounds = np.flatnonzero(np.diff(seg)) + 1
    starts = np.concatenate([[0], bounds])
    ends = np.concatenate([bounds, [seg.shape[0]]])

    worst = 0.0
    for a, b in zip(starts.tolist(), ends.tolist()):
        j = int(seg[a])
        d = sq_segment_dist_many(sx[j], sy[j], sx[j + 1], sy[j + 1], xs[a:b], ys[a:b])
        d = d[np.isfinite(d)]
        if d.size:
            worst = max(worst, float(d.max()))
    return worst
