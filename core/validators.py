"""
Parameter validation for simulation inputs before they reach the sampler.

Catches problems early:
- alpha at or below 1 (tail exponent not finite and negative)
- probabilities outside [0, 1]
- non-positive portfolio sizes or trial counts

pZero + pOne > 1 is reported as a warning only. The tail branch of the
mixture simply becomes unreachable and the 1x branch absorbs the excess.
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass, field
from typing import List

logger = logging.getLogger(__name__)


class InvalidParameterError(ValueError):
    """Raised when simulation inputs cannot produce a meaningful result."""


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for a set of inputs."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        return ValidationResult(
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings,
        )

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def _is_count(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_real(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def validate_alpha(alpha, result: ValidationResult) -> None:
    if not _is_real(alpha) or not math.isfinite(alpha):
        result.errors.append(f"alpha must be a finite number. Got {alpha!r}")
    elif alpha <= 1:
        result.errors.append(f"alpha must be > 1. Got {alpha}")


def validate_xmin(xmin, result: ValidationResult) -> None:
    if not _is_real(xmin) or not math.isfinite(xmin) or xmin <= 0:
        result.errors.append(f"xmin must be a positive finite number. Got {xmin!r}")


def validate_distribution(alpha, p_zero, p_one) -> ValidationResult:
    """
    Check mixture parameters.
    Returns a ValidationResult with errors (blocking) and warnings (informational).
    """
    result = ValidationResult()
    validate_alpha(alpha, result)

    probs_ok = True
    for name, p in (("p_zero", p_zero), ("p_one", p_one)):
        if not _is_real(p) or math.isnan(p):
            result.errors.append(f"{name} must be a number. Got {p!r}")
            probs_ok = False
        elif not 0.0 <= p <= 1.0:
            result.errors.append(f"{name} must be in [0, 1]. Got {p}")
            probs_ok = False

    if probs_ok and p_zero + p_one > 1.0:
        result.warnings.append(
            f"p_zero + p_one = {p_zero + p_one:.3f} > 1; the power-law tail is "
            f"unreachable and the 1x outcome absorbs the excess."
        )
    return result


def validate_count(name: str, n, result: ValidationResult) -> None:
    if not _is_count(n):
        result.errors.append(f"{name} must be an integer. Got {n!r}")
    elif n < 1:
        result.errors.append(f"{name} must be >= 1. Got {n}")


def validate_run(portfolio_size, trials) -> ValidationResult:
    """Check the sample-size inputs of a portfolio simulation."""
    result = ValidationResult()
    validate_count("portfolio_size", portfolio_size, result)
    validate_count("trials", trials, result)
    return result


def require_valid(result: ValidationResult, *, log_warnings: bool = True) -> None:
    """Raise InvalidParameterError on errors; log warnings and carry on."""
    if not result.is_valid:
        raise InvalidParameterError(result.summary())
    if log_warnings:
        for w in result.warnings:
            logger.warning(w)
