"""
Distributions package — the venture outcome model and its sampling.

  1. sampler.py     — three-way mixture (0x / 1x / power-law tail) draws
  2. benchmarks.py  — named parameter presets and standard size/threshold grids
"""

from .sampler import (
    DistributionParams,
    draw_power_law_tail,
    draw_mixture,
    sample_power_law_tail,
    sample_mixture,
    get_rng,
)
from .benchmarks import (
    CURVE_BENCHMARKS,
    CURVE_PORTFOLIO_SIZES,
    TABLE_BENCHMARKS,
    TABLE_PORTFOLIO_SIZES,
    get_named_distribution,
)

__all__ = [
    "DistributionParams",
    "draw_power_law_tail",
    "draw_mixture",
    "sample_power_law_tail",
    "sample_mixture",
    "get_rng",
    "CURVE_BENCHMARKS",
    "CURVE_PORTFOLIO_SIZES",
    "TABLE_BENCHMARKS",
    "TABLE_PORTFOLIO_SIZES",
    "get_named_distribution",
]
