"""
Headline numbers for one set of simulated portfolios.

Computes what the single-portfolio view reports next to its histogram:
share of portfolios that lost money (< 1x), mean and median multiple, plus a
percentile ladder.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Sequence, Tuple

import numpy as np
import pandas as pd

from core.utils import to_percent
from core.validators import InvalidParameterError


@dataclass(frozen=True)
class OutcomeMetrics:
    n_trials: int
    loss_count: int
    loss_pct: float        # % of portfolios returning < 1x
    p_total_loss: float    # % of portfolios returning exactly 0x
    mean: float
    median: float
    percentiles: Dict[str, float] = field(default_factory=dict)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a display-friendly table."""
        rows = [
            {"Metric": "Portfolios", "Value": f"{self.n_trials:,}"},
            {"Metric": "Lost Money", "Value": f"{self.loss_pct:.1f}%"},
            {"Metric": "Total Loss", "Value": f"{self.p_total_loss:.1f}%"},
            {"Metric": "Mean Return", "Value": f"{self.mean:.2f}x"},
            {"Metric": "Median Return", "Value": f"{self.median:.2f}x"},
        ]
        for label, val in self.percentiles.items():
            rows.append({"Metric": f"{label} Return", "Value": f"{val:.2f}x"})
        return pd.DataFrame(rows)


def compute_outcome_metrics(
    outcomes: Sequence[float],
    *,
    percentiles: Tuple[float, ...] = (0.05, 0.25, 0.75, 0.95),
) -> OutcomeMetrics:
    """
    Summarise trial outcomes.

    The median is the element at index n // 2 of the sorted outcomes (the
    upper median when n is even), matching how the explainer reports it.
    """
    values = np.asarray(outcomes, dtype=float).ravel()
    n = values.size
    if n == 0:
        raise InvalidParameterError("outcomes is empty.")

    ordered = np.sort(values)
    loss_count = int(np.count_nonzero(values < 1.0))

    return OutcomeMetrics(
        n_trials=n,
        loss_count=loss_count,
        loss_pct=to_percent(loss_count, n),
        p_total_loss=to_percent(int(np.count_nonzero(values == 0.0)), n),
        mean=float(np.mean(values)),
        median=float(ordered[n // 2]),
        percentiles={
            f"P{int(round(p * 100)):02d}": float(np.percentile(values, p * 100))
            for p in percentiles
        },
    )
