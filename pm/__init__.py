"""
PM (Portfolio Manager) outputs — histograms, benchmark probabilities, headline metrics.
"""

from .metrics import OutcomeMetrics, compute_outcome_metrics
from .aggregator import (
    BenchmarkRow,
    HistogramBin,
    benchmark_curves,
    benchmark_table,
    benchmarks_to_dataframe,
    benchmarks_to_long,
    compute_benchmark_probabilities,
    compute_histogram,
    histogram_to_dataframe,
)

__all__ = [
    "OutcomeMetrics",
    "compute_outcome_metrics",
    "BenchmarkRow",
    "HistogramBin",
    "benchmark_curves",
    "benchmark_table",
    "benchmarks_to_dataframe",
    "benchmarks_to_long",
    "compute_benchmark_probabilities",
    "compute_histogram",
    "histogram_to_dataframe",
]
