import numpy as np
import pytest

from core.validators import InvalidParameterError
from engine.runner import simulate_portfolios
from pm.metrics import OutcomeMetrics, compute_outcome_metrics


def test_headline_numbers():
    m = compute_outcome_metrics([0.0, 0.0, 1.0, 3.0])
    assert m.n_trials == 4
    assert m.loss_count == 2
    assert m.loss_pct == 50.0
    assert m.p_total_loss == 50.0
    assert m.mean == pytest.approx(1.0)


def test_median_is_upper_middle_element():
    """Even count -> sorted[n // 2], not the average of the two middle values."""
    assert compute_outcome_metrics([4.0, 1.0, 3.0, 2.0]).median == 3.0
    assert compute_outcome_metrics([5.0, 1.0, 2.0]).median == 2.0


def test_percentile_labels():
    m = compute_outcome_metrics(np.linspace(0.0, 10.0, 101))
    assert list(m.percentiles) == ["P05", "P25", "P75", "P95"]
    assert m.percentiles["P25"] == pytest.approx(2.5)


def test_custom_percentiles():
    m = compute_outcome_metrics([1.0, 2.0, 3.0], percentiles=(0.5,))
    assert m.percentiles == {"P50": 2.0}


def test_loss_share_falls_with_diversification(rng):
    """With alpha ~ 2 a bigger portfolio loses money less often."""
    small = compute_outcome_metrics(simulate_portfolios(1.98, 1, 5000, 0.333, 0.333, rng=rng))
    large = compute_outcome_metrics(simulate_portfolios(1.98, 100, 5000, 0.333, 0.333, rng=rng))
    assert large.loss_pct < small.loss_pct


def test_empty_outcomes_raise():
    with pytest.raises(InvalidParameterError):
        compute_outcome_metrics([])


def test_to_dataframe():
    m = OutcomeMetrics(
        n_trials=3000, loss_count=300, loss_pct=10.0, p_total_loss=0.0,
        mean=2.5, median=1.8, percentiles={"P95": 6.0},
    )
    df = m.to_dataframe()
    assert list(df.columns) == ["Metric", "Value"]
    assert df.loc[df["Metric"] == "Lost Money", "Value"].item() == "10.0%"
    assert df.loc[df["Metric"] == "P95 Return", "Value"].item() == "6.00x"
