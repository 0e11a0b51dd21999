"""
Bézier curves of arbitrary degree.

The module-level functions take a control polygon (any (N+1, dim)
array-like) and never modify it. :class:`BezierCurve` wraps the same
functions for callers that prefer an object holding its control points.
"""

from functools import lru_cache
from typing import Union, Tuple

import numpy as np

from .constants import DEFAULT_SAMPLES
from .de_casteljau import de_casteljau_split_matrices, segment_matrices_equal_params, trim_matrix
from .matrices import bezier_to_power_matrix, derivative_matrix, elevation_matrix, multiply_vector
from .types import TrimRange, as_point, as_points, check_sample_count


@lru_cache(maxsize=128)
def binomial(n: int, k: int) -> float:
    """
    Binomial coefficient C(n, k) by incremental product.

    Avoids factorials, so large n does not overflow. Returns 0 outside
    0 <= k <= n.
    """
    if k > n or k < 0:
        return 0.0
    if k == 0 or k == n:
        return 1.0

    result = 1.0
    for i in range(1, k + 1):
        result = result * (n + 1 - i) / i
    return result


def bernstein(i: int, n: int, u: float) -> float:
    """B_{i,n}(u) = C(n,i) * (1-u)^(n-i) * u^i, zero for i outside [0, n]."""
    if i < 0 or i > n:
        return 0.0
    return binomial(n, i) * (1 - u) ** (n - i) * u ** i


def evaluate(points, u: float) -> np.ndarray:
    """
    Evaluate a Bézier curve at u with the Bernstein basis.

    Args:
        points: Control points (N+1, dim)
        u: Parameter value (0 <= u <= 1)

    Returns:
        Point on the curve, shape (dim,)
    """
    P = as_points(points)
    n = P.shape[0] - 1
    out = np.zeros(P.shape[1])
    for i in range(n + 1):
        out += bernstein(i, n, u) * P[i]
    return out


def de_casteljau(points, u: float) -> np.ndarray:
    """
    Evaluate a Bézier curve at u by repeated linear interpolation.

    Each level is a new array one point shorter than the previous; the
    single point left at the last level is the result.
    """
    P = as_points(points)
    if P.shape[0] == 1:
        return P[0].copy()
    return de_casteljau((1 - u) * P[:-1] + u * P[1:], u)


def sample(points, n: int = DEFAULT_SAMPLES) -> np.ndarray:
    """n+1 curve points at u = i/n, i = 0..n."""
    check_sample_count(n)
    P = as_points(points)
    return np.array([evaluate(P, i / n) for i in range(n + 1)])


def split(points, u: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    Subdivide at u.

    Returns:
        (head, tail): control polygons of the [0, u] and [u, 1] pieces,
        each reparameterized to [0, 1]
    """
    P = as_points(points)
    S_left, S_right = de_casteljau_split_matrices(P.shape[0] - 1, u)
    return S_left @ P, S_right @ P


def trim(points, trim_range) -> np.ndarray:
    """
    Control polygon of the [u1, u2] piece of the curve.

    Evaluating the result at v in [0, 1] equals evaluating the original
    curve at u1 + v * (u2 - u1).

    Args:
        points: Control points (N+1, dim)
        trim_range: TrimRange or (u1, u2) with 0 <= u1 < u2 <= 1

    Returns:
        (N+1, dim) control points of the trimmed curve
    """
    u1, u2 = TrimRange.validated(*trim_range)
    P = as_points(points)
    return trim_matrix(P.shape[0] - 1, u1, u2) @ P


def segments(points, n_seg: int):
    """Split the curve into n_seg pieces of equal parameter length."""
    P = as_points(points)
    return [A @ P for A in segment_matrices_equal_params(P.shape[0] - 1, n_seg)]


def to_polynomial(points):
    """
    Power-basis coefficients of a quadratic or cubic curve.

    Returns:
        Tuple with one coefficient array per axis, highest power first

    Raises:
        DegreeNotImplemented: for degrees other than 2 and 3
    """
    P = as_points(points)
    M = bezier_to_power_matrix(P.shape[0] - 1)
    return tuple(multiply_vector(M, P[:, axis]) for axis in range(P.shape[1]))


def reconstruct_from_intersection(P0, PStar, P3):
    """
    Inner control points of a cubic from its endpoints and a tangent intersection.

    P1 = (P0 + 2*PStar)/3 and P2 = (2*PStar + P3)/3. Exact only when PStar
    is where the end tangents of the original curve meet; otherwise an
    approximation.
    """
    P0, PStar, P3 = as_point(P0), as_point(PStar), as_point(P3)
    return (P0 + 2 * PStar) / 3, (2 * PStar + P3) / 3


def derivative_points(points, order: int = 1) -> np.ndarray:
    """Hodograph control points after `order` differentiations."""
    current = as_points(points)
    for _ in range(order):
        degree = current.shape[0] - 1
        if degree == 0:
            return np.zeros((1, current.shape[1]))
        current = derivative_matrix(degree) @ current
    return current


def derivative(points, u: float) -> np.ndarray:
    """
    First derivative at u.

    B'(u) = n * sum_{i=0}^{n-1} (P_{i+1} - P_i) * B_{i,n-1}(u)
    """
    return evaluate(derivative_points(points, 1), u)


def elevate(points) -> np.ndarray:
    """Same curve expressed with one more control point."""
    P = as_points(points)
    return elevation_matrix(P.shape[0] - 1) @ P


class BezierCurve:
    """
    General n-th degree Bézier curve.

    Holds its own copy of the control points; every operation returns new
    arrays or a new BezierCurve.
    """

    def __init__(self, control_points, degree=None):
        self.control_points = as_points(control_points)

        if degree is None:
            self.degree = self.control_points.shape[0] - 1
        else:
            self.degree = degree
            if self.control_points.shape[0] != degree + 1:
                raise ValueError(
                    f"number of control points ({self.control_points.shape[0]}) "
                    f"does not match degree ({degree}) + 1"
                )

        self.dimension = self.control_points.shape[1]

    def point(self, tau: float) -> np.ndarray:
        """Evaluate curve at parameter tau using Bernstein basis."""
        return evaluate(self.control_points, tau)

    def evaluate(self, t: Union[float, np.ndarray]) -> np.ndarray:
        """
        Evaluate the curve at one or more parameter values.

        Args:
            t: Parameter(s) (0 <= t <= 1)

        Returns:
            (len(t), dim) array of curve points
        """
        t = np.atleast_1d(np.asarray(t, dtype=float))
        if np.any((t < 0) | (t > 1)):
            raise ValueError("parameter t must lie in [0, 1]")
        return np.array([evaluate(self.control_points, tau) for tau in t])

    def evaluate_basis(self, t: Union[float, np.ndarray]) -> np.ndarray:
        """Bernstein basis values, shape (len(t), degree+1)."""
        t = np.atleast_1d(np.asarray(t, dtype=float))
        N = self.degree
        return np.array([[bernstein(i, N, tau) for i in range(N + 1)] for tau in t])

    def derivative(self, t: Union[float, np.ndarray], order: int = 1) -> np.ndarray:
        if order == 0:
            return self.evaluate(t)
        hodograph = derivative_points(self.control_points, order)
        t = np.atleast_1d(np.asarray(t, dtype=float))
        return np.array([evaluate(hodograph, tau) for tau in t])

    def sample(self, n: int = DEFAULT_SAMPLES) -> np.ndarray:
        return sample(self.control_points, n)

    def split(self, tau: float) -> Tuple['BezierCurve', 'BezierCurve']:
        head, tail = split(self.control_points, tau)
        return BezierCurve(head), BezierCurve(tail)

    def trim(self, u1: float, u2: float) -> 'BezierCurve':
        return BezierCurve(trim(self.control_points, (u1, u2)))

    def elevate_degree(self) -> 'BezierCurve':
        """
        Degree elevation (N -> N+1)

        Returns:
            elevated Bézier curve
        """
        return BezierCurve(elevate(self.control_points), self.degree + 1)

    def elevate_degree_by(self, steps: int) -> 'BezierCurve':
        if steps < 0:
            raise ValueError("elevation steps cannot be negative")

        result = self
        for _ in range(steps):
            result = result.elevate_degree()

        return result

    def to_polynomial(self):
        return to_polynomial(self.control_points)

    def get_control_points(self) -> np.ndarray:
        """Return a copy of the control points"""
        return self.control_points.copy()

    def __repr__(self) -> str:
        return f"BezierCurve(degree={self.degree}, dimension={self.dimension}, control_points={self.control_points.shape})"
