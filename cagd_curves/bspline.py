"""
B-spline curves: Cox-de Boor basis, evaluation, derivative and knot vectors.

The curve is defined over [knots[degree], knots[-degree-1]]. Knot vectors
are never repaired here; call :func:`validate` (or :func:`knots_or_uniform`)
before evaluating user-edited knots.
"""

import warnings

import numpy as np

from .constants import DEFAULT_SAMPLES
from .errors import KnotVectorWarning
from .types import as_knots, as_points, check_sample_count


def _closing_span(k, knots):
    """
    Span that is closed on the right at the end of the domain, knots[-k-1].

    The last non-empty span not past the domain end, or -1 if there is none.
    """
    nonempty = np.nonzero(knots[:-1] < knots[1:])[0]
    nonempty = nonempty[nonempty <= len(knots) - k - 2]
    return int(nonempty[-1]) if nonempty.size else -1


def _degree_zero_row(k, u, knots):
    """Degree-0 basis values N_{j,0}(u), j = 0..len(knots)-2."""
    m = len(knots)
    N = np.zeros(m - 1)
    closing = _closing_span(k, knots)
    # Half-open spans would drop the domain end; evaluate it as a left limit.
    if u == knots[m - k - 1] and closing >= 0:
        N[closing] = 1.0
        return N
    for j in range(m - 1):
        if knots[j] <= u < knots[j + 1]:
            N[j] = 1.0
    return N


def _basis_table(k, u, knots):
    """
    All degree-k basis values N_{i,k}(u), i = 0..len(knots)-k-2.

    Built bottom-up: level 0 holds the indicator functions, each following
    level combines neighbouring entries of the previous one. Terms over a
    zero-length span are dropped.
    """
    m = len(knots)
    if k < 0 or m < k + 2:
        raise ValueError(f"knot vector of length {m} too short for degree {k}")
    N = _degree_zero_row(k, u, knots)

    for d in range(1, k + 1):
        nxt = np.zeros(m - 1 - d)
        for j in range(m - 1 - d):
            denom1 = knots[j + d] - knots[j]
            if denom1 != 0:
                nxt[j] += (u - knots[j]) / denom1 * N[j]
            denom2 = knots[j + d + 1] - knots[j + 1]
            if denom2 != 0:
                nxt[j] += (knots[j + d + 1] - u) / denom2 * N[j + 1]
        N = nxt
    return N


def basis(i, k, u, knots):
    """
    Cox-de Boor basis function N_{i,k}(u).

    Args:
        i: Control point index
        k: Degree
        u: Parameter value
        knots: Knot vector

    Returns:
        Basis value (float)
    """
    K = as_knots(knots)
    if i < 0 or i + k + 1 >= len(K):
        raise ValueError(f"basis index {i} out of range for degree {k} and {len(K)} knots")
    return float(_basis_table(k, u, K)[i])


def basis_recursive(i, k, u, knots):
    """Textbook recursive form of :func:`basis`; exponential in k, same results."""
    K = as_knots(knots)
    if i < 0 or i + k + 1 >= len(K):
        raise ValueError(f"basis index {i} out of range for degree {k} and {len(K)} knots")
    level_zero = _degree_zero_row(k, u, K)

    def N(j, d):
        if d == 0:
            return level_zero[j]
        term1 = 0.0
        term2 = 0.0
        denom1 = K[j + d] - K[j]
        if denom1 != 0:
            term1 = (u - K[j]) / denom1 * N(j, d - 1)
        denom2 = K[j + d + 1] - K[j + 1]
        if denom2 != 0:
            term2 = (K[j + d + 1] - u) / denom2 * N(j + 1, d - 1)
        return term1 + term2

    return float(N(i, k))


def domain(degree, knots):
    """Parameter interval (start, end) on which the curve is defined."""
    K = as_knots(knots)
    return float(K[degree]), float(K[len(K) - degree - 1])


def _evaluate(P, degree, u, K):
    N = _basis_table(degree, u, K)
    if N.shape[0] < P.shape[0]:
        raise ValueError(
            f"{len(K)} knots cannot support {P.shape[0]} control points of degree {degree}"
        )
    return N[:P.shape[0]] @ P


def evaluate(control_points, degree, u, knots):
    """Curve point sum_i N_{i,degree}(u) * P_i."""
    return _evaluate(as_points(control_points), degree, u, as_knots(knots))


def sample(control_points, degree, knots, n=DEFAULT_SAMPLES):
    """
    n+1 curve points linearly spaced over the valid domain.

    Returns:
        (n+1, dim) array
    """
    check_sample_count(n)
    P = as_points(control_points)
    K = as_knots(knots)
    start, end = domain(degree, K)
    return np.array([_evaluate(P, degree, u, K) for u in np.linspace(start, end, n + 1)])


def derivative_points(control_points, degree, knots):
    """
    Control points of the derivative curve (degree-1, knots[1:-1]).

    D_i = degree / (t_{i+degree+1} - t_{i+1}) * (P_{i+1} - P_i)
    """
    P = as_points(control_points, min_count=2)
    K = as_knots(knots)
    D = np.zeros((P.shape[0] - 1, P.shape[1]))
    for i in range(P.shape[0] - 1):
        denom = K[i + degree + 1] - K[i + 1]
        if denom != 0:
            D[i] = degree / denom * (P[i + 1] - P[i])
    return D


def derivative(control_points, degree, u, knots):
    """Tangent vector C'(u); identically zero for degree 0."""
    P = as_points(control_points)
    if degree == 0 or P.shape[0] < 2:
        return np.zeros(P.shape[1])
    K = as_knots(knots)
    return _evaluate(derivative_points(P, degree, K), degree - 1, u, K[1:-1])


def uniform_knots(n, k):
    """
    Clamped (open-uniform) knot vector for n control points of degree k.

    k+1 zeros, interior knots i/(n-k) for i = 1..n-k-1, k+1 ones.
    """
    if k < 0:
        raise ValueError("degree must be >= 0")
    if n < k + 1:
        raise ValueError(f"degree {k} needs at least {k + 1} control points, got {n}")
    interior = [i / (n - k) for i in range(1, n - k)]
    return np.array([0.0] * (k + 1) + interior + [1.0] * (k + 1))


def validate(knots, n, k):
    """
    Check a knot vector for n control points of degree k.

    Never raises: returns False for a wrong length, a decreasing adjacent
    pair, or input that is not a 1-D numeric sequence.
    """
    try:
        K = as_knots(knots)
    except (TypeError, ValueError):
        return False
    if len(K) != n + k + 1:
        return False
    return bool(np.all(K[:-1] <= K[1:]))


def knots_or_uniform(knots, n, k):
    """
    Return `knots` if valid for (n, k), otherwise a uniform knot vector.

    The fallback is reported with a KnotVectorWarning so interactive callers
    can surface it.
    """
    if validate(knots, n, k):
        return as_knots(knots)
    warnings.warn(
        f"invalid knot vector for {n} control points of degree {k}; using uniform knots",
        KnotVectorWarning,
        stacklevel=2,
    )
    return uniform_knots(n, k)


def basis_function_samples(num_control_points, degree, knots, n=DEFAULT_SAMPLES):
    """
    Sampled basis function of every control point across the domain.

    Returns:
        (num_control_points, n+1) array; row i holds N_{i,degree} at the
        same parameters :func:`sample` uses
    """
    check_sample_count(n)
    K = as_knots(knots)
    start, end = domain(degree, K)
    table = np.array([_basis_table(degree, u, K) for u in np.linspace(start, end, n + 1)])
    if table.shape[1] < num_control_points:
        raise ValueError(
            f"{len(K)} knots cannot support {num_control_points} control points of degree {degree}"
        )
    return table[:, :num_control_points].T.copy()
