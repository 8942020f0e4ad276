"""
Portfolio runner — repeats "build a portfolio of N companies" across many trials.

Each trial draws N independent return multiples from the outcome mixture and
reduces them to one number, the portfolio's mean multiple. The collection of
trial means is the only thing handed to the aggregators in pm/.

Cost is O(trials x portfolio_size) draws. Trials are evaluated in row batches
so at most `batch_size` company draws are held in memory at once.

Everything here is synchronous and holds no state between calls; the only
shared resource is the random generator (see distributions.sampler.get_rng).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from core.config import SimulationConfig
from core.validators import require_valid, validate_distribution, validate_run
from distributions.sampler import DistributionParams, get_rng, sample_mixture

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = SimulationConfig.batch_size


def simulate_portfolios(
    alpha: float,
    portfolio_size: int,
    trials: int,
    p_zero: float,
    p_one: float,
    *,
    rng: Optional[np.random.Generator] = None,
    batch_size: int = DEFAULT_BATCH_SIZE,
    log_warnings: bool = True,
) -> np.ndarray:
    """
    Simulate `trials` portfolios of `portfolio_size` companies each.

    Parameters
    ----------
    alpha : float
        Power-law tail exponent, > 1
    portfolio_size : int
        Companies per portfolio, >= 1
    trials : int
        Number of independent portfolios, >= 1
    p_zero, p_one : float
        Probabilities of the 0x and 1x outcomes
    rng : np.random.Generator, optional
        Random source; the process-wide generator when omitted
    batch_size : int
        Upper bound on company draws materialised at once
    log_warnings : bool
        Log a degenerate p_zero + p_one > 1 at WARNING (once per call)

    Returns
    -------
    np.ndarray of shape (trials,) with each portfolio's mean return multiple.
    """
    require_valid(
        validate_distribution(alpha, p_zero, p_one).merge(validate_run(portfolio_size, trials)),
        log_warnings=log_warnings,
    )
    if batch_size < 1:
        raise ValueError(f"batch_size must be >= 1. Got {batch_size}")

    gen = get_rng(rng)
    rows_per_batch = max(1, batch_size // portfolio_size)

    means = np.empty(trials, dtype=np.float64)
    for start in range(0, trials, rows_per_batch):
        stop = min(start + rows_per_batch, trials)
        draws = sample_mixture(
            alpha, p_zero, p_one, (stop - start, portfolio_size), rng=gen, log_warnings=False,
        )
        means[start:stop] = draws.mean(axis=1)

    return means


@dataclass(frozen=True)
class SimulationResult:
    """
    Output of one simulation run: the trial means plus the inputs that made them.

    `outcomes` is what feeds pm.aggregator.compute_histogram and
    pm.metrics.compute_outcome_metrics.
    """
    params: DistributionParams
    portfolio_size: int
    trials: int
    outcomes: np.ndarray  # shape (trials,)

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame({
            "trial_id": np.arange(self.trials),
            "mean_multiple": self.outcomes,
        })


def run_simulation(
    params: DistributionParams,
    config: SimulationConfig,
    *,
    rng: Optional[np.random.Generator] = None,
) -> SimulationResult:
    """
    Run config.trials portfolios of config.portfolio_size companies under `params`.
    """
    logger.info(
        "Simulating %d portfolios of %d companies (alpha=%.2f, p_zero=%.3f, p_one=%.3f)",
        config.trials, config.portfolio_size, params.alpha, params.p_zero, params.p_one,
    )
    outcomes = simulate_portfolios(
        params.alpha,
        config.portfolio_size,
        config.trials,
        params.p_zero,
        params.p_one,
        rng=rng,
        batch_size=config.batch_size,
    )
    logger.info(
        "Simulation finished: mean %.3fx, %d of %d portfolios below 1x",
        float(outcomes.mean()), int(np.count_nonzero(outcomes < 1.0)), config.trials,
    )
    return SimulationResult(
        params=params,
        portfolio_size=config.portfolio_size,
        trials=config.trials,
        outcomes=outcomes,
    )
