"""
Core package — run configuration, validation, and shared utilities.
No simulation logic lives here.
"""

from .config import SimulationConfig
from .utils import to_percent, benchmark_label, bin_label
from .validators import (
    InvalidParameterError,
    ValidationResult,
    validate_distribution,
    validate_run,
    require_valid,
)

__all__ = [
    "SimulationConfig",
    "to_percent",
    "benchmark_label",
    "bin_label",
    "InvalidParameterError",
    "ValidationResult",
    "validate_distribution",
    "validate_run",
    "require_valid",
]
