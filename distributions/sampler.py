"""
Venture outcome sampler — draws return multiples from the three-way mixture.

Each investment ends in one of three buckets:
  P(0x)       = p_zero          total loss
  P(1x)       = p_one           money back
  P(tail)     = 1 - p_zero - p_one   power-law upside, x >= 1

The tail is a continuous Pareto-type law with exponent alpha, sampled by
inverse transform:  x = xmin * (1 - u) ** (-1 / (alpha - 1)),  u ~ U[0, 1).
For alpha <= 2 the tail has no finite mean. That is the point of the model,
so the tail is never truncated or resampled.

Branch selection uses ONE uniform per company compared against the cumulative
thresholds p_zero and p_zero + p_one, in that order. If p_zero + p_one > 1 the
tail is unreachable and the 1x branch absorbs the excess; this is accepted,
not rejected.

Random source: an unseeded process-wide numpy Generator unless the caller
passes `rng`. numpy Generators are not thread-safe, so concurrent callers
should each pass their own.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

import numpy as np
import pandas as pd

from core.schema import OUTCOME_BUCKET_COLUMNS
from core.validators import (
    ValidationResult,
    require_valid,
    validate_alpha,
    validate_distribution,
    validate_xmin,
)

_PROCESS_RNG = np.random.default_rng()


def get_rng(rng: Optional[np.random.Generator] = None) -> np.random.Generator:
    """Return `rng`, or the shared process-wide generator when None."""
    return _PROCESS_RNG if rng is None else rng


@dataclass(frozen=True)
class DistributionParams:
    """
    Mixture parameters for a single investment's return multiple.

    Defaults follow Neumann's venture estimate: alpha ~ 1.98 with a third of
    investments lost and a third returning capital.
    """
    alpha: float = 1.98
    p_zero: float = 0.333
    p_one: float = 0.333

    @property
    def p_tail(self) -> float:
        return max(0.0, 1.0 - self.p_zero - self.p_one)

    @property
    def has_finite_mean(self) -> bool:
        return self.alpha > 2.0

    def validate(self) -> ValidationResult:
        return validate_distribution(self.alpha, self.p_zero, self.p_one)

    def summary(self) -> pd.DataFrame:
        """Return the three outcome buckets with their probabilities."""
        return pd.DataFrame(
            [
                ("Total Loss", "0x", self.p_zero),
                ("Break Even", "1x", self.p_one),
                ("Power-Law Upside", ">1x (fat tail)", self.p_tail),
            ],
            columns=list(OUTCOME_BUCKET_COLUMNS),
        )


def draw_power_law_tail(
    alpha: float,
    xmin: float = 1.0,
    *,
    rng: Optional[np.random.Generator] = None,
) -> float:
    """Draw one sample >= xmin from the power-law tail with exponent alpha."""
    result = ValidationResult()
    validate_alpha(alpha, result)
    validate_xmin(xmin, result)
    require_valid(result)

    u = get_rng(rng).random()
    return xmin * (1.0 - u) ** (-1.0 / (alpha - 1.0))


def draw_mixture(
    alpha: float,
    p_zero: float,
    p_one: float,
    *,
    rng: Optional[np.random.Generator] = None,
) -> float:
    """Draw one return multiple: 0 with p_zero, else 1 with p_one, else the tail."""
    require_valid(validate_distribution(alpha, p_zero, p_one))

    gen = get_rng(rng)
    r = gen.random()
    if r < p_zero:
        return 0.0
    if r < p_zero + p_one:
        return 1.0
    return draw_power_law_tail(alpha, rng=gen)


def sample_power_law_tail(
    alpha: float,
    size: Union[int, Tuple[int, ...]],
    xmin: float = 1.0,
    *,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """Vectorized draw_power_law_tail."""
    result = ValidationResult()
    validate_alpha(alpha, result)
    validate_xmin(xmin, result)
    require_valid(result)

    u = get_rng(rng).random(size)
    return xmin * np.power(1.0 - u, -1.0 / (alpha - 1.0))


def sample_mixture(
    alpha: float,
    p_zero: float,
    p_one: float,
    size: Union[int, Tuple[int, ...]],
    *,
    rng: Optional[np.random.Generator] = None,
    log_warnings: bool = True,
) -> np.ndarray:
    """
    Vectorized draw_mixture.

    One branch uniform per company; a second uniform is drawn only for the
    companies that land in the tail.

    A degenerate p_zero + p_one > 1 is logged once per call; callers that
    sample in batches pass log_warnings=False after reporting it themselves.
    """
    require_valid(validate_distribution(alpha, p_zero, p_one), log_warnings=log_warnings)

    gen = get_rng(rng)
    r = gen.random(size)
    multiples = np.zeros(r.shape, dtype=np.float64)

    one_mask = (r >= p_zero) & (r < p_zero + p_one)
    tail_mask = r >= p_zero + p_one

    multiples[one_mask] = 1.0

    n_tail = int(tail_mask.sum())
    if n_tail > 0:
        u = gen.random(n_tail)
        multiples[tail_mask] = np.power(1.0 - u, -1.0 / (alpha - 1.0))

    return multiples
