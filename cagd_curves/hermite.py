"""
Cubic Hermite curves.

A Hermite segment is defined by its endpoints P0, P1 and the tangent
vectors T0, T1 at those endpoints (see :class:`~cagd_curves.types.HermiteForm`).
"""

import numpy as np

from .constants import DEFAULT_SAMPLES
from .matrices import hermite_matrix, multiply_vector, reparameterization_matrix
from .types import CubicPolynomial, HermiteForm, as_point, check_sample_count


def h0(u):
    """h0(u) = 2u^3 - 3u^2 + 1"""
    return 2 * u ** 3 - 3 * u ** 2 + 1


def h1(u):
    """h1(u) = -2u^3 + 3u^2"""
    return -2 * u ** 3 + 3 * u ** 2


def h2(u):
    """h2(u) = u^3 - 2u^2 + u"""
    return u ** 3 - 2 * u ** 2 + u


def h3(u):
    """h3(u) = u^3 - u^2"""
    return u ** 3 - u ** 2


def basis(u):
    """All four Hermite basis values at u, ordered like [P0, P1, T0, T1]."""
    return np.array([h0(u), h1(u), h2(u), h3(u)], dtype=float)


def basis_derivative(u):
    return np.array([
        6 * u ** 2 - 6 * u,
        -6 * u ** 2 + 6 * u,
        3 * u ** 2 - 4 * u + 1,
        3 * u ** 2 - 2 * u,
    ], dtype=float)


def _geometry(form):
    return np.vstack([as_point(form[0]), as_point(form[1]), as_point(form[2]), as_point(form[3])])


def evaluate(form, u):
    """
    Evaluate a Hermite curve at parameter u.

    Args:
        form: HermiteForm (P0, P1, T0, T1)
        u: Parameter value (0 <= u <= 1)

    Returns:
        Point on the curve, shape (dim,)
    """
    return basis(u) @ _geometry(form)


def derivative(form, u):
    """Tangent vector at u; equals T0 at u=0 and T1 at u=1."""
    return basis_derivative(u) @ _geometry(form)


def sample(form, n=DEFAULT_SAMPLES):
    """
    Sample n+1 points at u = i/n, i = 0..n.

    Returns:
        (n+1, dim) array
    """
    check_sample_count(n)
    G = _geometry(form)
    return np.array([basis(i / n) @ G for i in range(n + 1)])


def to_polynomial(form):
    """
    Convert a Hermite form to power-basis coefficients.

    Returns:
        (poly_x, poly_y) CubicPolynomial tuples satisfying p(0)=P0, p(1)=P1,
        p'(0)=T0 and p'(1)=T1 on each axis
    """
    G = _geometry(form)
    if G.shape[1] != 2:
        raise ValueError("to_polynomial expects 2-D points")
    H = hermite_matrix()
    cx = multiply_vector(H, G[:, 0])
    cy = multiply_vector(H, G[:, 1])
    return CubicPolynomial(*map(float, cx)), CubicPolynomial(*map(float, cy))


def from_polynomial(poly_x, poly_y):
    """Inverse of :func:`to_polynomial`."""
    ax, bx, cx, dx = poly_x
    ay, by, cy, dy = poly_y
    return HermiteForm(
        P0=np.array([dx, dy], dtype=float),
        P1=np.array([ax + bx + cx + dx, ay + by + cy + dy], dtype=float),
        T0=np.array([cx, cy], dtype=float),
        T1=np.array([3 * ax + 2 * bx + cx, 3 * ay + 2 * by + cy], dtype=float),
    )


def evaluate_polynomial(poly, u):
    a, b, c, d = poly
    return ((a * u + b) * u + c) * u + d


def reparameterize(poly, u1, u2):
    """
    Restrict a cubic polynomial to [u1, u2] and rescale that range to [0, 1].

    The returned polynomial q satisfies q(v) == p(u1 + v * (u2 - u1)).
    """
    a, b, c, d = poly
    R = reparameterization_matrix(u1, u2)
    d2, c2, b2, a2 = multiply_vector(R.T, [d, c, b, a])
    return CubicPolynomial(float(a2), float(b2), float(c2), float(d2))


def trim(form, u1, u2):
    """Hermite form of the [u1, u2] piece of a curve, rescaled to [0, 1]."""
    px, py = to_polynomial(form)
    return from_polynomial(reparameterize(px, u1, u2), reparameterize(py, u1, u2))
