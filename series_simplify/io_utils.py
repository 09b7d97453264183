from __future__ import annotations
from dataclasses import asdict
from typing import Any, Dict, Optional

import numpy as np

from series_simplify.compact import TIME_DTYPE, VALUE_DTYPE
from series_simplify.pipeline import SimplifyInfo


def save_series_npz(
    path: str,
    times: np.ndarray,
    values: np.ndarray,
    info: Optional[SimplifyInfo] = None,
) -> None:
    payload: Dict[str, Any] = {
        "times": np.asarray(times, dtype=TIME_DTYPE),
        "values": np.asarray(values, dtype=VALUE_DTYPE),
    }
    # store info dict in an object array so np.savez can preserve it
    if info is not None:
        payload["info"] = np.array([asdict(info)], dtype=object)

    np.savez_compressed(path, **payload)


def load_series_npz(path: str) -> Dict[str, Any]:
    """
    Load a series written by save_series_npz (or any npz with
    'times' and 'values' arrays). 'info' comes back as a plain dict.
    """
    with np.load(path, allow_pickle=True) as data:
        out = {k: data[k] for k in data.files}

    if "times" not in out or "values" not in out:
        raise ValueError(f"{path}: npz must contain 'times' and 'values'")

    out["times"] = np.asarray(out["times"], dtype=TIME_DTYPE)
    out["values"] = np.asarray(out["values"], dtype=VALUE_DTYPE)
    if "info" in out and out["info"].dtype == object:
        out["info"] = out["info"].item(0) if out["info"].shape else out["info"].item()
    return out
