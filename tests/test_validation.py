"""Tests for input validation module."""

import numpy as np
import pytest

from spring_embedder.validation import (
    DegenerateGeometryError,
    InvalidConfigurationError,
    MalformedGraphError,
    ValidationError,
    validate_adjacency,
    validate_iterations,
    validate_optimum_distance,
)


class TestAdjacencyValidation:
    """Tests for adjacency index validation."""

    def test_valid_adjacency(self):
        """Valid rows return empty issues list."""
        assert validate_adjacency([[1, 2], [2], []]) == []

    def test_empty_adjacency(self):
        assert validate_adjacency([]) == []

    def test_numpy_integers_accepted(self):
        assert validate_adjacency([[np.int64(1)], []]) == []

    def test_numpy_rows_accepted(self):
        assert validate_adjacency([np.array([1, 2]), np.array([2]), np.array([], dtype=int)]) == []

    def test_numpy_row_out_of_bounds(self):
        with pytest.raises(MalformedGraphError, match="target index 4"):
            validate_adjacency([np.array([4]), np.array([0])])

    def test_two_dimensional_row_rejected(self):
        with pytest.raises(MalformedGraphError, match="1-D array"):
            validate_adjacency([np.array([[1]]), np.array([0])])

    def test_out_of_bounds_raises(self):
        with pytest.raises(MalformedGraphError, match=r"target index 3 out of bounds \[0, 2\)"):
            validate_adjacency([[3], []])

    def test_negative_index_raises(self):
        with pytest.raises(MalformedGraphError, match="out of bounds"):
            validate_adjacency([[-1]])

    def test_bool_target_rejected(self):
        with pytest.raises(MalformedGraphError, match="not an integer"):
            validate_adjacency([[True], []])

    def test_string_row_rejected(self):
        with pytest.raises(MalformedGraphError, match="expected a sequence"):
            validate_adjacency(["01", []])

    def test_non_strict_returns_issues(self):
        """Non-strict mode collects every issue with its row index."""
        issues = validate_adjacency([[5], [0, 9], []], strict=False)
        assert [row for row, _ in issues] == [0, 1]
        assert "target index 5" in issues[0][1]
        assert "target index 9" in issues[1][1]

    def test_strict_message_lists_all_issues(self):
        with pytest.raises(MalformedGraphError) as exc_info:
            validate_adjacency([[5], [7]])
        message = str(exc_info.value)
        assert "Row 0" in message
        assert "Row 1" in message


class TestOptimumDistanceValidation:
    """Tests for optimum distance validation."""

    def test_valid(self):
        assert validate_optimum_distance(100) == 100.0
        assert validate_optimum_distance(0.5) == 0.5

    @pytest.mark.parametrize("value", [0, -10, float("nan"), float("inf")])
    def test_out_of_range(self, value):
        with pytest.raises(InvalidConfigurationError, match="must be positive"):
            validate_optimum_distance(value)

    def test_not_a_number(self):
        with pytest.raises(InvalidConfigurationError, match="must be a number"):
            validate_optimum_distance(None)


class TestIterationsValidation:
    """Tests for iteration count validation."""

    def test_valid(self):
        assert validate_iterations(0) == 0
        assert validate_iterations(1000) == 1000

    def test_numpy_integer(self):
        result = validate_iterations(np.int32(12))
        assert result == 12
        assert type(result) is int

    def test_negative(self):
        with pytest.raises(InvalidConfigurationError, match=">= 0"):
            validate_iterations(-1)

    @pytest.mark.parametrize("value", [2.0, "3", None, False])
    def test_not_integral(self, value):
        with pytest.raises(InvalidConfigurationError, match="must be an integer"):
            validate_iterations(value)


class TestExceptionHierarchy:
    """Tests for exception class hierarchy."""

    def test_validation_errors_are_value_errors(self):
        assert issubclass(ValidationError, ValueError)
        assert issubclass(InvalidConfigurationError, ValidationError)
        assert issubclass(MalformedGraphError, ValidationError)

    def test_degenerate_geometry_is_zero_division(self):
        assert issubclass(DegenerateGeometryError, ZeroDivisionError)
        assert not issubclass(DegenerateGeometryError, ValidationError)
