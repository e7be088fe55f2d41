"""
Tests for the exception hierarchy and input guards.
"""

import numpy as np
import pytest

from knapsack_compare.utils.error_handler import (
    ConfigurationError,
    KnapsackCompareError,
    ValidationError,
    format_exception_info,
    require_non_negative_int,
    validate_knapsack_arrays,
)


class TestErrors:
    """Test suite for custom exceptions."""

    def test_format_with_suggestion(self):
        """Test that suggestions are appended to the message."""
        err = ValidationError("capacity must be non-negative", suggestion="Use 0 or more.")

        assert err.format_error() == (
            "Error: capacity must be non-negative\nSuggestion: Use 0 or more."
        )

    def test_hierarchy(self):
        """Test that all custom errors share the base class."""
        assert issubclass(ValidationError, KnapsackCompareError)
        assert issubclass(ConfigurationError, KnapsackCompareError)

    def test_format_exception_info_generic(self):
        """Test formatting of non-package exceptions."""
        assert format_exception_info(KeyError("x")) == "Error (KeyError): 'x'"


class TestGuards:
    """Test suite for validation helpers."""

    def test_non_negative_int(self):
        """Test accepted and rejected values."""
        assert require_non_negative_int(0, "capacity") == 0
        assert require_non_negative_int(np.int32(4), "capacity") == 4

        with pytest.raises(ValidationError):
            require_non_negative_int(-3, "capacity")
        with pytest.raises(ValidationError):
            require_non_negative_int(2.5, "capacity")
        with pytest.raises(ValidationError):
            require_non_negative_int(True, "capacity")

    def test_validate_arrays_normalises(self):
        """Test that lists come back as int64 arrays."""
        capacity, weights, profits = validate_knapsack_arrays(5, [1, 2], [3, 4])

        assert capacity == 5
        assert weights.dtype == np.int64
        assert profits.tolist() == [3, 4]

    def test_validate_arrays_reports_negative_position(self):
        """Test that the first negative weight is named."""
        with pytest.raises(ValidationError, match="position 1"):
            validate_knapsack_arrays(5, [1, -2, -3], [1, 1, 1])

    def test_validate_arrays_rejects_floats(self):
        """Test that float weights or profits are rejected instead of truncated."""
        with pytest.raises(ValidationError, match="weights must contain integers"):
            validate_knapsack_arrays(2, [2.9], [5])
        with pytest.raises(ValidationError, match="profits must contain integers"):
            validate_knapsack_arrays(2, [1], np.array([5.5]))

    def test_validate_arrays_rejects_multi_dimensional(self):
        """Test that nested input is rejected instead of flattened."""
        with pytest.raises(ValidationError, match="one-dimensional"):
            validate_knapsack_arrays(5, [[1, 2], [3, 4]], [1, 2, 3, 4])
        with pytest.raises(ValidationError, match="one-dimensional"):
            validate_knapsack_arrays(5, 3, [1])

    def test_validate_arrays_accepts_empty_and_integer_dtypes(self):
        """Test that empty lists and narrower integer arrays still pass."""
        _, weights, profits = validate_knapsack_arrays(0, [], [])
        assert weights.dtype == np.int64 and weights.size == 0
        assert profits.size == 0

        _, weights, _ = validate_knapsack_arrays(3, np.array([1, 2], dtype=np.int32), [1, 1])
        assert weights.dtype == np.int64
