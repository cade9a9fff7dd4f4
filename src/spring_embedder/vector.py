"""
Two dimensional vector math.

Vectors are immutable (x, y) pairs. Every operation is pure and returns a new
vector; nothing here clamps or snaps values, so callers that can produce
zero-length vectors must avoid normalizing them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from .validation import DegenerateGeometryError


@dataclass(frozen=True)
class Vector:
    """A 2D vector with double precision coordinates."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Vector(x={self.x:.4f}, y={self.y:.4f})"


ZERO = Vector(0.0, 0.0)


def add(u: Vector, v: Vector) -> Vector:
    """Component-wise sum."""
    return Vector(u.x + v.x, u.y + v.y)


def sub(u: Vector, v: Vector) -> Vector:
    """Component-wise difference ``u - v``."""
    return Vector(u.x - v.x, u.y - v.y)


def scalar_mult(a: float, v: Vector) -> Vector:
    """Scale both components of ``v`` by ``a``."""
    return Vector(a * v.x, a * v.y)


def length(v: Vector) -> float:
    """Euclidean norm of ``v``."""
    return math.hypot(v.x, v.y)


def norm(v: Vector) -> Vector:
    """
    Unit vector pointing in the direction of ``v``.

    Raises:
        DegenerateGeometryError: If ``v`` is the zero vector.
    """
    size = length(v)
    if size == 0:
        raise DegenerateGeometryError("cannot normalize the zero vector")
    return Vector(v.x / size, v.y / size)


def rotate(angle: float, v: Vector) -> Vector:
    """Rotate ``v`` counter-clockwise by ``angle`` radians."""
    cos = math.cos(angle)
    sin = math.sin(angle)
    return Vector(cos * v.x - sin * v.y, sin * v.x + cos * v.y)


__all__ = [
    "Vector",
    "ZERO",
    "add",
    "sub",
    "scalar_mult",
    "length",
    "norm",
    "rotate",
]
