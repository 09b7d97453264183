import numpy as np
import pytest

from series_simplify.distance_filter import simplify_dist, sq_tolerance


def test_spike_series_mask():
    xs = np.array([0, 1, 2, 3, 4], dtype=float)
    ys = np.array([0, 0, 0, 10, 0], dtype=float)
    keep = simplify_dist(xs, ys, 1.0)
    # index 1 is exactly epsilon away (not greater), index 2 is 2 away
    assert keep.dtype == np.uint8
    assert keep.tolist() == [1, 0, 1, 1, 1]


def test_last_point_is_forced():
    keep = simplify_dist(np.array([0.0, 0.1, 0.2]), np.zeros(3), 1.0)
    assert keep.tolist() == [1, 0, 1]


def test_single_point():
    assert simplify_dist(np.array([3.0]), np.array([4.0]), 1.0).tolist() == [1]


def test_empty():
    assert simplify_dist(np.array([]), np.array([]), 1.0).shape == (0,)


def test_anchor_only_moves_on_kept_points():
    # creeping points: each step is small but they drift away from the anchor
    xs = np.arange(10, dtype=float) * 0.4
    keep = simplify_dist(xs, np.zeros(10), 1.0)
    assert keep.tolist() == [1, 0, 0, 1, 0, 0, 1, 0, 0, 1]


def test_non_positive_epsilon_keeps_everything():
    xs = np.array([0.0, 0.0, 0.0, 1.0])
    ys = np.array([0.0, 0.0, 0.0, 0.0])
    assert simplify_dist(xs, ys, 0.0).tolist() == [1, 1, 1, 1]
    assert simplify_dist(xs, ys, -5.0).tolist() == [1, 1, 1, 1]


def test_non_finite_points_are_kept():
    xs = np.array([0.0, np.nan, 0.1, 0.2, 5.0])
    ys = np.zeros(5)
    keep = simplify_dist(xs, ys, 1.0)
    # NaN is kept, and so is the first point measured against it
    assert keep.tolist() == [1, 1, 1, 0, 1]

    keep = simplify_dist(np.array([0.0, np.inf, 0.5]), np.zeros(3), 1.0)
    assert keep.tolist() == [1, 1, 1]


def test_consecutive_kept_points_are_far_apart():
    rng = np.random.default_rng(3)
    xs = np.arange(2000, dtype=float) * 0.05
    ys = np.cumsum(rng.normal(0, 0.3, size=2000))
    eps = 1.5
    kept = np.flatnonzero(simplify_dist(xs, ys, eps))
    assert kept[0] == 0 and kept[-1] == 1999
    # the forced last index is exempt
    for a, b in zip(kept[:-2], kept[1:-1]):
        d2 = (xs[b] - xs[a]) ** 2 + (ys[b] - ys[a]) ** 2
        assert d2 > eps * eps


def test_shape_mismatch_raises():
    with pytest.raises(ValueError):
        simplify_dist(np.zeros(3), np.zeros(4), 1.0)


def test_sq_tolerance():
    assert sq_tolerance(2.0) == 4.0
    assert sq_tolerance(0.0) == -1.0
    with pytest.raises(ValueError):
        sq_tolerance(float("nan"))
    with pytest.raises(ValueError):
        sq_tolerance(float("inf"))


def test_first_point_is_never_compared_against_itself():
    # a duplicate of the first point right after it is still dropped
    keep = simplify_dist(np.array([0.0, 0.0, 3.0]), np.array([0.0, 0.0, 0.0]), 1.0)
    assert keep.tolist() == [1, 0, 1]
