from __future__ import annotations
from typing import Callable, Tuple

import numpy as np

Scale = Callable[[float], float]


def apply_scale(scale: Scale, arr: np.ndarray) -> np.ndarray:
    """
    Evaluate a scalar domain->screen scale on every element.
    Returns: (N,) float64
    """
    a = np.asarray(arr)
    return np.fromiter((scale(x) for x in a.tolist()), dtype=np.float64, count=a.shape[0])


def linear_scale(domain: Tuple[float, float], range_: Tuple[float, float]) -> Scale:
    """
    d3-style linear scale: domain[0] -> range_[0], domain[1] -> range_[1].
    A zero-width domain maps everything to the middle of the range.
    """
    d0, d1 = map(float, domain)
    r0, r1 = map(float, range_)
    span = d1 - d0

    if span == 0.0:
        mid = 0.5 * (r0 + r1)
        return lambda x: mid

    k = (r1 - r0) / span

    def scale(x: float) -> float:
        return r0 + (float(x) - d0) * k

    return scale


def log_scale(domain: Tuple[float, float], range_: Tuple[float, float]) -> Scale:
    """
    Base-10 log scale. domain must be strictly positive.
    Non-positive inputs map to NaN (and are kept by the simplifiers).
    """
    d0, d1 = map(float, domain)
    if d0 <= 0.0 or d1 <= 0.0:
        raise ValueError("log_scale domain must be > 0")
    inner = linear_scale((np.log10(d0), np.log10(d1)), range_)

    def scale(x: float) -> float:
        x = float(x)
        if x <= 0.0:
            return float("nan")
        return inner(np.log10(x))

    return scale
