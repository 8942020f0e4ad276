import logging

import numpy as np
import pytest

from core.validators import (
    InvalidParameterError,
    ValidationResult,
    require_valid,
    validate_distribution,
    validate_run,
)


class TestValidateDistribution:

    def test_valid_defaults(self) -> None:
        result = validate_distribution(1.98, 0.333, 0.333)
        assert result.is_valid
        assert result.warnings == []

    def test_boundaries_allowed(self) -> None:
        assert validate_distribution(1.0001, 0.0, 1.0).is_valid
        assert validate_distribution(5.0, 1.0, 0.0).is_valid

    def test_alpha_at_one_rejected(self) -> None:
        result = validate_distribution(1.0, 0.3, 0.3)
        assert not result.is_valid
        assert "alpha must be > 1" in result.errors[0]

    def test_non_numeric_rejected(self) -> None:
        result = validate_distribution("2", None, 0.3)
        assert len(result.errors) == 2

    def test_degenerate_sum_is_warning(self) -> None:
        result = validate_distribution(1.98, 0.6, 0.6)
        assert result.is_valid
        assert "unreachable" in result.warnings[0]

    def test_no_sum_warning_when_probabilities_invalid(self) -> None:
        result = validate_distribution(1.98, 1.5, 0.6)
        assert not result.is_valid
        assert result.warnings == []


class TestValidateRun:

    def test_valid(self) -> None:
        assert validate_run(1, 1).is_valid
        assert validate_run(np.int64(50), 3000).is_valid

    @pytest.mark.parametrize("n", [0, -5, 1.0, False, None])
    def test_rejects_non_positive_or_non_integer(self, n) -> None:
        assert not validate_run(n, 100).is_valid
        assert not validate_run(10, n).is_valid


class TestRequireValid:

    def test_raises_with_summary(self) -> None:
        result = ValidationResult(errors=["alpha must be > 1. Got 0.5"])
        with pytest.raises(InvalidParameterError, match="alpha must be > 1"):
            require_valid(result)

    def test_logs_warnings(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="core.validators"):
            require_valid(ValidationResult(warnings=["heads up"]))
        assert "heads up" in caplog.text

    def test_quiet_mode(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="core.validators"):
            require_valid(ValidationResult(warnings=["heads up"]), log_warnings=False)
        assert caplog.text == ""

    def test_summary_formats(self) -> None:
        assert ValidationResult().summary() == "✓ All checks passed."
        merged = ValidationResult(errors=["e1"]).merge(ValidationResult(warnings=["w1"]))
        text = merged.summary()
        assert "ERRORS (1):" in text
        assert "WARNINGS (1):" in text
