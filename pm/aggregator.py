"""
Reduce raw trial outcomes into what an investor actually reads.

Two reductions:
  1. compute_histogram: how often does a portfolio of N land in each
     return-multiple band? Fixed-width bins from 0 up to max_bin, with the
     last bin acting as the catch-all for everything at or above it.
  2. compute_benchmark_probabilities: for each portfolio size, what share of
     portfolios returns at least 1x, 2x, 3x...? One fresh simulation per size,
     so rows are independent noisy estimates rather than one joint pool.

For a fixed size the benchmark probabilities never increase with the
threshold: outcomes >= b2 are a subset of outcomes >= b1 whenever b1 < b2.
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from core.config import SimulationConfig
from core.schema import BENCHMARK_SIZE_COLUMN, HISTOGRAM_COLUMNS
from core.utils import benchmark_label, bin_label, to_percent
from core.validators import (
    ValidationResult,
    require_valid,
    validate_count,
    validate_distribution,
)
from distributions.benchmarks import (
    CURVE_BENCHMARKS,
    CURVE_PORTFOLIO_SIZES,
    TABLE_BENCHMARKS,
    TABLE_PORTFOLIO_SIZES,
)
from distributions.sampler import DistributionParams, get_rng
from engine.runner import DEFAULT_BATCH_SIZE, simulate_portfolios

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistogramBin:
    """One band [lower_bound, lower_bound + width); the last band is open-ended."""
    lower_bound: float
    label: str
    count: int
    percent: float


@dataclass(frozen=True)
class BenchmarkRow:
    """Share of portfolios (in %) meeting or beating each threshold, for one size."""
    portfolio_size: int
    probabilities: Dict[float, float]

    def as_record(self) -> dict:
        """Flat dict keyed like the display table: {"size": 20, "1x": 71.3, ...}."""
        record = {BENCHMARK_SIZE_COLUMN: self.portfolio_size}
        for threshold, pct in self.probabilities.items():
            record[benchmark_label(threshold)] = pct
        return record


def compute_histogram(
    outcomes: Sequence[float],
    bin_width: float = 0.5,
    max_bin: float = 12,
) -> List[HistogramBin]:
    """
    Bucket trial outcomes into fixed-width return-multiple bins.

    Bins start at 0, w, 2w, ... up to and including max_bin. An outcome goes
    to bin floor(x / w), clamped to the last bin, so anything beyond max_bin
    lands in the last bin instead of being dropped. Negative or NaN outcomes
    (never produced by the sampler) are not counted.

    Parameters
    ----------
    outcomes : sequence of float
        Trial outcomes, e.g. from engine.runner.simulate_portfolios
    bin_width : float
        Width of each bin, > 0
    max_bin : float
        Lower bound of the last (overflow) bin, >= 0

    Returns
    -------
    List of HistogramBin; percent = count / len(outcomes) * 100, one decimal.
    """
    values = np.asarray(outcomes, dtype=float).ravel()

    result = ValidationResult()
    if not isinstance(bin_width, numbers.Real) or not math.isfinite(bin_width) or bin_width <= 0:
        result.errors.append(f"bin_width must be a positive finite number. Got {bin_width!r}")
    if not isinstance(max_bin, numbers.Real) or not math.isfinite(max_bin) or max_bin < 0:
        result.errors.append(f"max_bin must be a non-negative finite number. Got {max_bin!r}")
    if values.size == 0:
        result.errors.append("outcomes is empty.")
    require_valid(result)

    # small tolerance so e.g. 0.3 / 0.1 still yields the bin at 0.3
    n_bins = int(math.floor(max_bin / bin_width + 1e-9)) + 1
    lower_bounds = np.arange(n_bins) * bin_width

    idx = np.minimum(np.floor(values / bin_width), n_bins - 1)
    counted = idx >= 0
    counts = np.bincount(idx[counted].astype(np.int64), minlength=n_bins)

    total = values.size
    percents = to_percent(counts, total)

    return [
        HistogramBin(
            lower_bound=float(lower_bounds[i]),
            label=bin_label(lower_bounds[i]),
            count=int(counts[i]),
            percent=float(percents[i]),
        )
        for i in range(n_bins)
    ]


def probability_at_least(outcomes: np.ndarray, threshold: float) -> float:
    """Percentage of outcomes >= threshold, one decimal."""
    return to_percent(np.count_nonzero(outcomes >= threshold), outcomes.size)


def _validate_benchmarks(benchmarks: Sequence[float], result: ValidationResult) -> None:
    seen = set()
    for b in benchmarks:
        if not isinstance(b, numbers.Real) or isinstance(b, bool) or math.isnan(b):
            result.errors.append(f"benchmark thresholds must be numbers. Got {b!r}")
            continue
        if float(b) in seen:
            result.errors.append(f"benchmark thresholds must be unique. Got {b!r} twice")
        seen.add(float(b))


def compute_benchmark_probabilities(
    alpha: float,
    portfolio_sizes: Sequence[int],
    benchmarks: Sequence[float],
    trials: int,
    p_zero: float,
    p_one: float,
    *,
    rng: Optional[np.random.Generator] = None,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> List[BenchmarkRow]:
    """
    For each portfolio size, the percentage of trials meeting each benchmark.

    Every size gets its own independent simulate_portfolios call; nothing is
    shared between sizes except the random generator.

    Returns
    -------
    One BenchmarkRow per entry of portfolio_sizes, in the given order.
    """
    result = validate_distribution(alpha, p_zero, p_one)
    validate_count("trials", trials, result)
    for n in portfolio_sizes:
        validate_count("portfolio_size", n, result)
    _validate_benchmarks(benchmarks, result)
    require_valid(result)

    gen = get_rng(rng)
    logger.info(
        "Benchmark probabilities: %d sizes x %d thresholds, %d trials each",
        len(portfolio_sizes), len(benchmarks), trials,
    )

    rows = []
    for n in portfolio_sizes:
        outcomes = simulate_portfolios(
            alpha, n, trials, p_zero, p_one, rng=gen, batch_size=batch_size, log_warnings=False,
        )
        probabilities = {float(b): probability_at_least(outcomes, b) for b in benchmarks}
        logger.debug("size=%d -> %s", n, probabilities)
        rows.append(BenchmarkRow(portfolio_size=int(n), probabilities=probabilities))

    logger.info("Benchmark probabilities finished: %d rows", len(rows))
    return rows


def benchmark_curves(
    params: DistributionParams,
    config: SimulationConfig,
    *,
    portfolio_sizes: Sequence[int] = CURVE_PORTFOLIO_SIZES,
    benchmarks: Sequence[float] = CURVE_BENCHMARKS,
    rng: Optional[np.random.Generator] = None,
) -> List[BenchmarkRow]:
    """Dense size grid, few thresholds, full config.trials per size."""
    return compute_benchmark_probabilities(
        params.alpha, portfolio_sizes, benchmarks, config.trials,
        params.p_zero, params.p_one, rng=rng, batch_size=config.batch_size,
    )


def benchmark_table(
    params: DistributionParams,
    config: SimulationConfig,
    *,
    portfolio_sizes: Sequence[int] = TABLE_PORTFOLIO_SIZES,
    benchmarks: Sequence[float] = TABLE_BENCHMARKS,
    rng: Optional[np.random.Generator] = None,
) -> List[BenchmarkRow]:
    """Coarse size grid, more thresholds; trials capped at config.table_trial_cap."""
    return compute_benchmark_probabilities(
        params.alpha, portfolio_sizes, benchmarks, config.table_trials,
        params.p_zero, params.p_one, rng=rng, batch_size=config.batch_size,
    )


def histogram_to_dataframe(bins: Sequence[HistogramBin]) -> pd.DataFrame:
    return pd.DataFrame(
        [(b.lower_bound, b.label, b.count, b.percent) for b in bins],
        columns=list(HISTOGRAM_COLUMNS),
    )


def benchmarks_to_dataframe(rows: Sequence[BenchmarkRow]) -> pd.DataFrame:
    """Wide table: one row per size, one '<b>x' column per threshold."""
    if not rows:
        return pd.DataFrame(columns=[BENCHMARK_SIZE_COLUMN])
    return pd.DataFrame([r.as_record() for r in rows])


def benchmarks_to_long(rows: Sequence[BenchmarkRow]) -> pd.DataFrame:
    """Long table (size, benchmark, probability) for plotting one line per threshold."""
    records = [
        {
            BENCHMARK_SIZE_COLUMN: r.portfolio_size,
            "benchmark": benchmark_label(threshold),
            "probability": pct,
        }
        for r in rows
        for threshold, pct in r.probabilities.items()
    ]
    return pd.DataFrame(records, columns=[BENCHMARK_SIZE_COLUMN, "benchmark", "probability"])
