from __future__ import annotations
from typing import Tuple

import numpy as np

TIME_DTYPE = np.float64
VALUE_DTYPE = np.float32


def collect(times: np.ndarray, values: np.ndarray, keep: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Order-preserving compaction of an aligned (times, values) pair.
    keep: (N,) mask, entries equal to 1 survive.
    Returns newly allocated (times', values'); inputs are left untouched.
    """
    t = np.asarray(times, dtype=TIME_DTYPE)
    v = np.asarray(values, dtype=VALUE_DTYPE)
    mask = np.asarray(keep)

    if t.ndim != 1 or t.shape != v.shape:
        raise ValueError("times and values must be 1D and have the same length")
    if mask.shape != t.shape:
        raise ValueError(f"keep mask length {mask.shape[0] if mask.ndim else 0} does not match series length {t.shape[0]}")

    sel = mask == 1
    count = int(np.count_nonzero(sel))

    out_t = np.empty(count, dtype=TIME_DTYPE)
    out_v = np.empty(count, dtype=VALUE_DTYPE)
    np.compress(sel, t, out=out_t)
    np.compress(sel, v, out=out_v)
    return out_t, out_v
