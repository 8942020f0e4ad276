from __future__ import annotations

from typing import Union

import numpy as np


def to_percent(count, total: Union[int, float]):
    """
    count / total as a percentage, rounded half-up to one decimal place.

    Scales by 1000 in a single division before rounding, so exact halves such
    as 55 / 10000 (0.55%) round up to 0.6 instead of drifting below .5.
    Accepts a scalar count (returns float) or an array of counts.
    """
    if total <= 0:
        raise ValueError(f"total must be positive. Got {total}")
    scaled = np.asarray(count, dtype=float) * 1000.0 / total
    out = np.floor(scaled + 0.5) / 10.0
    if out.ndim == 0:
        return float(out)
    return out


def benchmark_label(threshold: float) -> str:
    """Column key for a benchmark threshold: 1 -> '1x', 2.5 -> '2.5x'."""
    return f"{float(threshold):g}x"


def bin_label(lower_bound: float) -> str:
    return f"{lower_bound:.1f}x"
