from __future__ import annotations

from typing import Tuple

# Column layout of the tables handed to the presentation layer.
HISTOGRAM_COLUMNS: Tuple[str, ...] = (
    "bin",
    "label",
    "count",
    "percent",
)

# Benchmark tables lead with this column, then one "<b>x" column per threshold.
BENCHMARK_SIZE_COLUMN: str = "size"

OUTCOME_BUCKET_COLUMNS: Tuple[str, ...] = (
    "Outcome",
    "Return",
    "Probability",
)
