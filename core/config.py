"""
Simulation run configuration.
Distribution parameters live in distributions/sampler.py (DistributionParams).
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class SimulationConfig:
    trials: int = 3000
    portfolio_size: int = 20

    # single-portfolio histogram view
    histogram_bin_width: float = 0.5
    histogram_max_bin: float = 10.0

    # the full probability table runs many sizes, so its trial count is capped
    table_trial_cap: int = 3000

    # max company draws held in memory at once by the simulator
    batch_size: int = 1_000_000

    def with_overrides(self, **changes) -> "SimulationConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    @property
    def table_trials(self) -> int:
        return min(self.trials, self.table_trial_cap)
