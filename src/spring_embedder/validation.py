"""
Input validation utilities for the spring embedder.

Provides centralized validation functions for adjacency data and layout
parameters, plus the error and warning types raised when geometry degenerates.
Raises descriptive exceptions on invalid input.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Sequence as SequenceABC
from typing import Any, Sequence

import numpy as np


class ValidationError(ValueError):
    """Base exception for layout validation errors."""

    pass


class InvalidConfigurationError(ValidationError):
    """Raised when a layout parameter is out of range."""

    pass


class MalformedGraphError(ValidationError):
    """Raised when adjacency data references vertices that do not exist."""

    pass


class DegenerateGeometryError(ZeroDivisionError):
    """Raised when a vector or force computation receives a zero distance."""

    pass


class DegenerateGeometryWarning(UserWarning):
    """Warning issued when coincident vertices are separated by the layout."""

    pass


def validate_adjacency(
    adjacency: Sequence[Sequence[int]],
    strict: bool = True,
) -> list[tuple[int, str]]:
    """
    Validate that every adjacency target is a vertex index in [0, N).

    Args:
        adjacency: One row of target indices per vertex (sequence or 1-D array)
        strict: If True, raises on invalid. If False, returns list of issues.

    Returns:
        List of (row_index, issue_description) tuples

    Raises:
        MalformedGraphError: If strict=True and invalid rows are found
    """
    issues: list[tuple[int, str]] = []
    vertex_count = len(adjacency)

    for i, row in enumerate(adjacency):
        if isinstance(row, np.ndarray):
            if row.ndim != 1:
                issues.append((i, f"Row {i}: expected a 1-D array of targets, got {row.ndim}-D"))
                continue
        elif isinstance(row, (str, bytes)) or not isinstance(row, SequenceABC):
            issues.append((i, f"Row {i}: expected a sequence of targets, got {type(row).__name__}"))
            continue
        for target in row:
            if isinstance(target, bool) or not isinstance(target, numbers.Integral):
                issues.append((i, f"Row {i}: target {target!r} is not an integer index"))
            elif target < 0 or target >= vertex_count:
                issues.append(
                    (i, f"Row {i}: target index {target} out of bounds [0, {vertex_count})")
                )

    if strict and issues:
        msg = "Malformed adjacency:\n" + "\n".join(issue[1] for issue in issues)
        raise MalformedGraphError(msg)

    return issues


def validate_optimum_distance(distance: Any) -> float:
    """
    Validate the optimum vertex distance is a positive finite number.

    Args:
        distance: Optimum distance

    Returns:
        Validated distance as float

    Raises:
        InvalidConfigurationError: If distance is not positive and finite
    """
    try:
        value = float(distance)
    except (TypeError, ValueError) as exc:
        raise InvalidConfigurationError(
            f"optimum_distance must be a number, got {distance!r}"
        ) from exc
    if not math.isfinite(value) or value <= 0:
        raise InvalidConfigurationError(f"optimum_distance must be positive, got {distance}")
    return value


def validate_iterations(iterations: Any) -> int:
    """
    Validate iteration count is a non-negative integer.

    Args:
        iterations: Number of relaxation steps

    Returns:
        Validated iteration count

    Raises:
        InvalidConfigurationError: If iterations < 0 or not integral
    """
    if isinstance(iterations, bool) or not isinstance(iterations, numbers.Integral):
        raise InvalidConfigurationError(
            f"iterations must be an integer, got {type(iterations).__name__}"
        )
    if iterations < 0:
        raise InvalidConfigurationError(f"iterations must be >= 0, got {iterations}")
    return int(iterations)


__all__ = [
    "ValidationError",
    "InvalidConfigurationError",
    "MalformedGraphError",
    "DegenerateGeometryError",
    "DegenerateGeometryWarning",
    "validate_adjacency",
    "validate_optimum_distance",
    "validate_iterations",
]
