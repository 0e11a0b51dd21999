"""
Value types for control geometry.

Points are plain numpy arrays of shape (D,), point sequences are (N, D)
arrays. The named tuples below group the few structured inputs/outputs.
"""

from typing import NamedTuple

import numpy as np


class CubicPolynomial(NamedTuple):
    """Coefficients of p(u) = a*u^3 + b*u^2 + c*u + d."""
    a: float
    b: float
    c: float
    d: float


class HermiteForm(NamedTuple):
    """Cubic Hermite data: endpoints P0, P1 and tangent vectors T0, T1."""
    P0: np.ndarray
    P1: np.ndarray
    T0: np.ndarray
    T1: np.ndarray

    @classmethod
    def from_points(cls, P0, P1, T0, T1) -> 'HermiteForm':
        return cls(as_point(P0), as_point(P1), as_point(T0), as_point(T1))


class TrimRange(NamedTuple):
    """Sub-domain [u1, u2] of a Bézier curve, 0 <= u1 < u2 <= 1."""
    u1: float
    u2: float

    @classmethod
    def validated(cls, u1, u2) -> 'TrimRange':
        u1, u2 = float(u1), float(u2)
        if not 0.0 <= u1 < u2 <= 1.0:
            raise ValueError(f"trim range must satisfy 0 <= u1 < u2 <= 1, got ({u1}, {u2})")
        return cls(u1, u2)


def as_point(p) -> np.ndarray:
    """Copy *p* into a new 1-D float array."""
    P = np.array(p, dtype=float)
    if P.ndim != 1:
        raise ValueError("point must be a 1-D sequence of coordinates")
    return P


def as_points(points, min_count=1) -> np.ndarray:
    """
    Copy a control polygon into a new (N, dim) float array.

    Args:
        points: Sequence of points, e.g. [(x0, y0), (x1, y1), ...]
        min_count: Minimum number of points required

    Returns:
        (N, dim) float array owned by the caller
    """
    P = np.array(points, dtype=float)
    if P.ndim != 2:
        raise ValueError("control_points must be (N+1, dim)")
    if P.shape[0] < min_count:
        raise ValueError(f"at least {min_count} control point(s) required, got {P.shape[0]}")
    return P


def as_knots(knots) -> np.ndarray:
    K = np.array(knots, dtype=float)
    if K.ndim != 1:
        raise ValueError("knot vector must be 1-D")
    return K


def check_sample_count(n):
    if n < 1:
        raise ValueError("n must be >= 1")
