"""
Linear-algebra helpers and fixed basis-change matrices.

All matrices are returned as fresh 2-D float arrays; nothing here is cached,
so callers may modify the results freely.
"""

import numpy as np

from .errors import DimensionMismatch, DegreeNotImplemented


def _as_matrix(A, name):
    M = np.array(A, dtype=float)
    if M.ndim != 2:
        raise DimensionMismatch(f"{name} must be a 2-D matrix, got {M.ndim}-D")
    return M


def multiply(A, B):
    """
    Matrix product C = A @ B.

    Raises:
        DimensionMismatch: if A.cols != B.rows
    """
    A = _as_matrix(A, "A")
    B = _as_matrix(B, "B")
    if A.shape[1] != B.shape[0]:
        raise DimensionMismatch(
            f"Cannot multiply {A.shape[0]}x{A.shape[1]} matrix with {B.shape[0]}x{B.shape[1]} matrix"
        )
    return A @ B


def multiply_vector(A, v):
    """Matrix-vector product A @ v; raises DimensionMismatch if A.cols != len(v)."""
    A = _as_matrix(A, "A")
    v = np.array(v, dtype=float)
    if v.ndim != 1 or A.shape[1] != v.shape[0]:
        raise DimensionMismatch(
            f"Cannot multiply {A.shape[0]}x{A.shape[1]} matrix with vector of length {v.size}"
        )
    return A @ v


def transpose(A):
    return _as_matrix(A, "A").T.copy()


def hermite_matrix():
    """
    Hermite basis-change matrix H.

    H @ [P0, P1, T0, T1] gives the power-basis coefficients [a, b, c, d]
    of p(u) = a*u^3 + b*u^2 + c*u + d.
    """
    return np.array([
        [2.0, -2.0, 1.0, 1.0],
        [-3.0, 3.0, -2.0, -1.0],
        [0.0, 0.0, 1.0, 0.0],
        [1.0, 0.0, 0.0, 0.0],
    ])


def bezier_to_power_matrix(n):
    """
    Bézier-to-power-basis conversion matrix for degree n.

    Coefficients come out highest power first. Only quadratic and cubic
    curves are tabulated.

    Args:
        n: Degree of the Bézier curve

    Returns:
        (n+1, n+1) matrix M with M @ P = [a_n, ..., a_1, a_0]

    Raises:
        DegreeNotImplemented: for n not in {2, 3}
    """
    if n == 2:
        return np.array([
            [1.0, -2.0, 1.0],
            [-2.0, 2.0, 0.0],
            [1.0, 0.0, 0.0],
        ])
    if n == 3:
        return np.array([
            [-1.0, 3.0, -3.0, 1.0],
            [3.0, -6.0, 3.0, 0.0],
            [-3.0, 3.0, 0.0, 0.0],
            [1.0, 0.0, 0.0, 0.0],
        ])
    raise DegreeNotImplemented("Bezier to power basis matrix", n)


def subdivision_matrix(n, u):
    """
    Cubic subdivision matrix S(u).

    S(u) @ P is the control polygon of the [0, u] piece of the cubic Bézier
    curve with control polygon P (rows are the de Casteljau left edge).
    """
    if n != 3:
        raise DegreeNotImplemented("Subdivision matrix", n)
    v = 1.0 - u
    return np.array([
        [1.0, 0.0, 0.0, 0.0],
        [v, u, 0.0, 0.0],
        [v * v, 2.0 * v * u, u * u, 0.0],
        [v ** 3, 3.0 * v * v * u, 3.0 * v * u * u, u ** 3],
    ])


def reparameterization_matrix(u1, u2):
    """
    Domain remapping matrix R for a cubic, u = u1 + (u2 - u1) * v.

    With ascending monomials U = [1, u, u^2, u^3] and V = [1, v, v^2, v^3],
    U = R @ V. Ascending power coefficients c of p(u) therefore map to
    R.T @ c for the same curve expressed in v over [0, 1].
    """
    delta = u2 - u1
    delta2 = delta * delta
    delta3 = delta2 * delta
    return np.array([
        [1.0, 0.0, 0.0, 0.0],
        [u1, delta, 0.0, 0.0],
        [u1 * u1, 2.0 * u1 * delta, delta2, 0.0],
        [u1 ** 3, 3.0 * u1 * u1 * delta, 3.0 * u1 * delta2, delta3],
    ])


def derivative_matrix(n):
    """
    Bézier differencing matrix D for degree n.

    [D]_i,j = n * { -1 if j=i, 1 if j=i+1, 0 otherwise }

    Args:
        n: Degree of Bézier curve

    Returns:
        D: (n, n+1) matrix, D @ P gives the hodograph control points
    """
    D = np.zeros((n, n + 1))
    for i in range(n):
        D[i, i] = -n
        D[i, i + 1] = n
    return D


def elevation_matrix(n):
    """
    Degree elevation matrix E (n -> n+1).

    Q_j = (j/(n+1)) * P_{j-1} + ((n+1-j)/(n+1)) * P_j

    Returns:
        (n+2, n+1) matrix
    """
    E = np.zeros((n + 2, n + 1))
    E[0, 0] = 1.0
    E[n + 1, n] = 1.0
    for j in range(1, n + 1):
        E[j, j - 1] = j / (n + 1)
        E[j, j] = (n + 1 - j) / (n + 1)
    return E
