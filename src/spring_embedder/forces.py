"""
Force model for the spring embedder.

Adjacent vertices are joined by logarithmic springs and every vertex pair
repels like electrostatic charges. Both forces are parameterized by the
optimum distance, the resting length of a spring:

- spring:    f = d * ln(|v - u| / d), directed from u toward v
- repulsion: f = d / |u - v|,         directed from v toward u

A spring longer than the optimum pulls, a shorter one pushes. At exactly the
optimum distance the spring force is zero.
"""

from __future__ import annotations

import math

from . import vector as V
from .validation import DegenerateGeometryError
from .vector import Vector


def spring_force(u: Vector, v: Vector, optimum_distance: float) -> Vector:
    """
    Calculate the spring force on ``u`` from its neighbor ``v``.

    Args:
        u: Position of the vertex the force acts on
        v: Position of the adjacent vertex
        optimum_distance: Resting length of the spring

    Returns:
        Force vector on ``u``

    Raises:
        DegenerateGeometryError: If ``u`` and ``v`` coincide.
    """
    u_to_v = V.sub(v, u)
    distance = V.length(u_to_v)
    if distance == 0:
        raise DegenerateGeometryError("spring force is undefined for coincident vertices")
    magnitude = optimum_distance * math.log(distance / optimum_distance)
    return V.scalar_mult(magnitude, V.norm(u_to_v))


def repulsion_force(u: Vector, v: Vector, optimum_distance: float) -> Vector:
    """
    Calculate the electrostatic repulsion on ``u`` from ``v``.

    Args:
        u: Position of the vertex the force acts on
        v: Position of the repelling vertex
        optimum_distance: Scale factor balancing repulsion against springs

    Returns:
        Force vector on ``u``

    Raises:
        DegenerateGeometryError: If ``u`` and ``v`` coincide.
    """
    v_to_u = V.sub(u, v)
    distance = V.length(v_to_u)
    if distance == 0:
        raise DegenerateGeometryError("repulsion is undefined for coincident vertices")
    magnitude = optimum_distance / distance
    return V.scalar_mult(magnitude, V.norm(v_to_u))


__all__ = ["spring_force", "repulsion_force"]
