import numpy as np
import pytest

from series_simplify.metrics import max_sq_deviation, reduction_ratio
from series_simplify.pipeline import simplify
from series_simplify.segment import sq_segment_dist


def ident(x):
    return x


def test_reduction_ratio():
    assert reduction_ratio(100, 25) == 0.25
    assert reduction_ratio(0, 0) == 1.0


def test_deviation_is_zero_when_nothing_removed():
    times = np.arange(5, dtype=float)
    values = np.array([0, 3, -2, 5, 1], dtype=np.float32)
    assert max_sq_deviation(times, values, times, values, ident, ident) == 0.0


def test_deviation_of_dropped_point():
    times = np.array([0.0, 1.0, 2.0])
    values = np.array([0.0, 0.5, 0.0], dtype=np.float32)
    t_s = np.array([0.0, 2.0])
    v_s = np.array([0.0, 0.0], dtype=np.float32)
    assert max_sq_deviation(times, values, t_s, v_s, ident, ident) == 0.25


def test_deviation_of_simplified_line_is_small():
    times = np.arange(200, dtype=float)
    values = np.zeros(200, dtype=np.float32)
    values[::2] = 0.1
    t, v = simplify(times, values, 1.0, ident, ident)
    # the distance filter is coarse, so only a loose bound holds
    assert max_sq_deviation(times, values, t, v, ident, ident) <= 1.0


def test_degenerate_inputs():
    assert max_sq_deviation(np.array([]), np.array([]), np.array([]), np.array([]), ident, ident) == 0.0
    assert max_sq_deviation(np.arange(3.0), np.zeros(3), np.array([0.0]), np.array([0.0]), ident, ident) == 0.0


def test_deviation_matches_per_point_check():
    rng = np.random.default_rng(5)
    times = np.arange(3000, dtype=float)
    values = np.cumsum(rng.normal(0, 1.0, size=3000)).astype(np.float32)
    t, v = simplify(times, values, 2.0, ident, ident)

    expected = 0.0
    for i in range(times.shape[0]):
        j = min(max(int(np.searchsorted(t, times[i], side="right")) - 1, 0), t.shape[0] - 2)
        expected = max(expected, sq_segment_dist(t[j], float(v[j]), t[j + 1], float(v[j + 1]), times[i], float(values[i])))

    assert max_sq_deviation(times, values, t, v, ident, ident) == pytest.approx(expected, rel=1e-9)


def test_deviation_with_unsorted_samples():
    times = np.array([2.0, 0.0, 1.0])
    values = np.array([0.0, 0.0, 0.5], dtype=np.float32)
    t_s = np.array([0.0, 2.0])
    v_s = np.array([0.0, 0.0], dtype=np.float32)
    assert max_sq_deviation(times, values, t_s, v_s, ident, ident) == 0.25
