"""
Portfolio simulation engine — Monte Carlo runner over the outcome mixture.
"""

from .runner import SimulationResult, run_simulation, simulate_portfolios

__all__ = ["SimulationResult", "run_simulation", "simulate_portfolios"]
