from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from series_simplify.compact import TIME_DTYPE, VALUE_DTYPE, collect
from series_simplify.distance_filter import simplify_dist, sq_tolerance
from series_simplify.douglas_peucker import simplify_douglas_peucker
from series_simplify.scales import Scale, apply_scale

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimplifyConfig:
    epsilon: float = 1.0   # tolerance in screen units (pixels)


@dataclass(frozen=True)
class SimplifyInfo:
    n_input: int
    n_after_distance: int
    n_output: int


def _as_series(times, values) -> Tuple[np.ndarray, np.ndarray]:
    t = np.asarray(times, dtype=TIME_DTYPE)
    v = np.asarray(values, dtype=VALUE_DTYPE)
    if t.ndim != 1 or v.ndim != 1:
        raise ValueError("times and values must be 1D")
    if t.shape[0] != v.shape[0]:
        raise ValueError(f"times and values must have the same length, got {t.shape[0]} and {v.shape[0]}")
    return t, v


def simplify_with_info(
    times: np.ndarray,
    values: np.ndarray,
    epsilon: float,
    time_scale: Scale,
    value_scale: Scale,
) -> Tuple[np.ndarray, np.ndarray, SimplifyInfo]:
    """
    Two-pass simplification of a timeseries for display.

    1) distance filter on scaled coordinates, compact the raw series
    2) re-scale the survivors, Douglas-Peucker, compact the survivors

    Scales only decide which points survive; returned times/values are
    copies of input samples (float64 / float32).

    Returns: (times', values', info)
    """
    t, v = _as_series(times, values)
    sq_tolerance(epsilon)  # rejects non-finite epsilon
    n = t.shape[0]

    if n <= 1:
        return t.copy(), v.copy(), SimplifyInfo(n, n, n)

    xs = apply_scale(time_scale, t)
    ys = apply_scale(value_scale, v)
    keep = simplify_dist(xs, ys, epsilon)
    mid_t, mid_v = collect(t, v, keep)

    # indices moved and scales may be non-linear: recompute, don't re-index
    xs = apply_scale(time_scale, mid_t)
    ys = apply_scale(value_scale, mid_v)
    keep = simplify_douglas_peucker(xs, ys, epsilon)
    out_t, out_v = collect(mid_t, mid_v, keep)

    info = SimplifyInfo(n_input=n, n_after_distance=int(mid_t.shape[0]), n_output=int(out_t.shape[0]))
    log.debug(
        "simplify: %d -> %d (distance) -> %d (douglas-peucker), epsilon=%g",
        info.n_input, info.n_after_distance, info.n_output, epsilon,
    )
    return out_t, out_v, info


def simplify(
    times: np.ndarray,
    values: np.ndarray,
    epsilon: float,
    time_scale: Scale,
    value_scale: Scale,
) -> Tuple[np.ndarray, np.ndarray]:
    out_t, out_v, _ = simplify_with_info(times, values, epsilon, time_scale, value_scale)
    return out_t, out_v


def simplify_with_config(
    times: np.ndarray,
    values: np.ndarray,
    cfg: SimplifyConfig,
    time_scale: Scale,
    value_scale: Scale,
) -> Tuple[np.ndarray, np.ndarray, SimplifyInfo]:
    return simplify_with_info(times, values, cfg.epsilon, time_scale, value_scale)
