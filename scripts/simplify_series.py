from __future__ import annotations

import argparse
import logging
import os
from typing import Optional, Sequence

import numpy as np

from series_simplify.io_utils import load_series_npz, save_series_npz
from series_simplify.metrics import max_sq_deviation, reduction_ratio
from series_simplify.pipeline import SimplifyConfig, simplify_with_config
from series_simplify.scales import linear_scale, log_scale


def random_walk(n: int, seed: int = 0) -> tuple[np.ndarray, np.ndarray]:
    rng = np.random.default_rng(seed)
    times = np.arange(n, dtype=np.float64) * 1e-3
    values = np.cumsum(rng.normal(0.0, 1.0, size=n)).astype(np.float32)
    return times, values


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Reduce a timeseries for display at a given pixel tolerance")
    p.add_argument("--in", dest="inp", type=str, default=None, help="Input npz with 'times' and 'values' (default: synthetic random walk)")
    p.add_argument("--n", type=int, default=100_000, help="Synthetic series length")
    p.add_argument("--seed", type=int, default=0)

    p.add_argument("--epsilon", type=float, default=1.0, help="Tolerance in pixels")
    p.add_argument("--width", type=float, default=1200.0, help="Viewport width in pixels")
    p.add_argument("--height", type=float, default=300.0, help="Viewport height in pixels")
    p.add_argument("--log-y", action="store_true", help="Log scale on the value axis")

    p.add_argument("--out", type=str, default="results/simplified.npz", help="Output npz path")
    p.add_argument("--plot", action="store_true", help="Show raw vs simplified plot")
    p.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    args = p.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.inp:
        data = load_series_npz(args.inp)
        times, values = data["times"], data["values"]
    else:
        times, values = random_walk(args.n, seed=args.seed)

    if times.shape[0] == 0:
        print("Empty input, nothing to do")
        return 1

    t_dom = (float(times.min()), float(times.max()))
    v_dom = (float(np.nanmin(values)), float(np.nanmax(values)))

    x_scale = linear_scale(t_dom, (0.0, args.width))
    # screen y grows downward
    if args.log_y:
        # non-positive samples have no log; they map to NaN and are kept
        pos = values[values > 0]
        if pos.size == 0:
            print("--log-y needs at least one positive value")
            return 1
        y_scale = log_scale((float(pos.min()), float(pos.max())), (args.height, 0.0))
    else:
        y_scale = linear_scale(v_dom, (args.height, 0.0))

    cfg = SimplifyConfig(epsilon=args.epsilon)
    times_s, values_s, info = simplify_with_config(times, values, cfg, x_scale, y_scale)

    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    save_series_npz(args.out, times_s, values_s, info=info)

    print("Saved:", args.out)
    print(f"points: {info.n_input} -> {info.n_after_distance} -> {info.n_output}")
    print(f"kept fraction: {reduction_ratio(info.n_input, info.n_output):.4f}")
    dev = max_sq_deviation(times, values, times_s, values_s, x_scale, y_scale)
    print(f"max deviation (px): {np.sqrt(dev):.3f}")

    if args.plot:
        import matplotlib.pyplot as plt
        from series_simplify.visualization import plot_simplification

        plot_simplification(times, values, times_s, values_s)
        plt.tight_layout()
        plt.show()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
