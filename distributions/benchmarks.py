"""
Named outcome distributions and the standard grids used for benchmark analysis.

The default preset is Jerry Neumann's estimate from "Power Laws in Venture
Portfolio Construction" (2017): alpha ~ 1.98, with roughly a third of
investments lost outright and a third returning only capital.

Grids:
  - CURVE_*: dense size grid for probability-vs-portfolio-size curves
  - TABLE_*: coarser size grid, more thresholds, for the full probability table
"""

from __future__ import annotations

from typing import Dict, Tuple

from .sampler import DistributionParams


NAMED_DISTRIBUTIONS: Dict[str, DistributionParams] = {
    "neumann": DistributionParams(alpha=1.98, p_zero=0.333, p_one=0.333),
}

CURVE_PORTFOLIO_SIZES: Tuple[int, ...] = (
    tuple(range(1, 11))
    + tuple(range(15, 51, 5))
    + tuple(range(60, 101, 10))
    + (150, 200)
)
CURVE_BENCHMARKS: Tuple[float, ...] = (1, 2, 3, 5)

TABLE_PORTFOLIO_SIZES: Tuple[int, ...] = (1, 5, 10, 20, 30, 40, 50, 60, 70, 80, 90, 100, 150, 200)
TABLE_BENCHMARKS: Tuple[float, ...] = (1, 2, 3, 4, 5, 8, 10)


def get_named_distribution(name: str) -> DistributionParams:
    """
    Return a named outcome distribution.

    Parameters
    ----------
    name : str
        One of the keys of NAMED_DISTRIBUTIONS (currently only "neumann").
    """
    key = name.lower()
    if key not in NAMED_DISTRIBUTIONS:
        raise KeyError(
            f"Unknown distribution '{name}'. "
            f"Available: {list(NAMED_DISTRIBUTIONS.keys())}"
        )
    return NAMED_DISTRIBUTIONS[key]
