import dataclasses

import numpy as np
import pytest

from core.config import SimulationConfig
from core.utils import benchmark_label, bin_label, to_percent
from distributions.benchmarks import (
    CURVE_BENCHMARKS,
    CURVE_PORTFOLIO_SIZES,
    TABLE_BENCHMARKS,
    TABLE_PORTFOLIO_SIZES,
    get_named_distribution,
)


class TestSimulationConfig:

    def test_defaults(self) -> None:
        cfg = SimulationConfig()
        assert cfg.trials == 3000
        assert cfg.portfolio_size == 20
        assert cfg.histogram_bin_width == 0.5
        assert cfg.histogram_max_bin == 10.0

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            SimulationConfig().trials = 10

    def test_with_overrides_returns_copy(self) -> None:
        base = SimulationConfig()
        cfg = base.with_overrides(trials=8000, portfolio_size=50)
        assert (cfg.trials, cfg.portfolio_size) == (8000, 50)
        assert base.trials == 3000

    def test_table_trials_capped(self) -> None:
        assert SimulationConfig(trials=10000).table_trials == 3000
        assert SimulationConfig(trials=1500).table_trials == 1500


class TestPresets:

    def test_neumann(self) -> None:
        params = get_named_distribution("Neumann")
        assert (params.alpha, params.p_zero, params.p_one) == (1.98, 0.333, 0.333)

    def test_unknown_name(self) -> None:
        with pytest.raises(KeyError, match="Available"):
            get_named_distribution("does-not-exist")

    def test_curve_grid(self) -> None:
        assert CURVE_PORTFOLIO_SIZES[:10] == tuple(range(1, 11))
        assert CURVE_PORTFOLIO_SIZES[-2:] == (150, 200)
        assert len(CURVE_PORTFOLIO_SIZES) == 25
        assert list(CURVE_PORTFOLIO_SIZES) == sorted(CURVE_PORTFOLIO_SIZES)
        assert CURVE_BENCHMARKS == (1, 2, 3, 5)

    def test_table_grid(self) -> None:
        assert TABLE_PORTFOLIO_SIZES[0] == 1
        assert TABLE_PORTFOLIO_SIZES[-1] == 200
        assert TABLE_BENCHMARKS == (1, 2, 3, 4, 5, 8, 10)


class TestUtils:

    @pytest.mark.parametrize(
        "count, total, expected",
        [(1, 16, 6.3), (55, 10000, 0.6), (295, 10000, 3.0), (1, 2000, 0.1), (4, 10000, 0.0)],
    )
    def test_to_percent_rounds_exact_halves_up(self, count, total, expected) -> None:
        assert to_percent(count, total) == expected

    def test_to_percent_vectorized(self) -> None:
        assert list(to_percent(np.array([55, 9945]), 10000)) == [0.6, 99.5]

    def test_to_percent(self) -> None:
        assert to_percent(1, 3) == 33.3
        assert to_percent(2, 3) == 66.7
        assert to_percent(0, 5) == 0.0

    def test_to_percent_requires_positive_total(self) -> None:
        with pytest.raises(ValueError):
            to_percent(1, 0)

    def test_labels(self) -> None:
        assert benchmark_label(1) == "1x"
        assert benchmark_label(2.5) == "2.5x"
        assert bin_label(0.5) == "0.5x"
        assert bin_label(12) == "12.0x"
