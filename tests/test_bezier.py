import numpy as np
import pytest
from scipy.special import comb

from cagd_curves import bezier
from cagd_curves.bezier import BezierCurve
from cagd_curves.constants import DEFAULT_TOLERANCE
from cagd_curves.errors import DegreeNotImplemented
from cagd_curves.types import TrimRange


CUBIC = np.array([[0.0, 0.0], [1.0, 2.0], [3.0, 3.0], [4.0, 0.0]])


def _cross(a, b):
    return a[0] * b[1] - a[1] * b[0]


def _random_polygons(count=15, seed=3):
    rng = np.random.default_rng(seed)
    return [rng.uniform(-5, 5, size=(rng.integers(1, 9), 2)) for _ in range(count)]


def test_binomial_values():
    assert bezier.binomial(4, 2) == 6
    assert bezier.binomial(5, 0) == 1
    assert bezier.binomial(5, 5) == 1
    assert bezier.binomial(5, 6) == 0
    assert bezier.binomial(5, -1) == 0


def test_binomial_matches_scipy_for_large_n():
    for n in (20, 60, 120):
        for k in (1, n // 3, n // 2):
            assert bezier.binomial(n, k) == pytest.approx(comb(n, k), rel=1e-12)


def test_bernstein_out_of_range_is_zero():
    assert bezier.bernstein(-1, 3, 0.4) == 0
    assert bezier.bernstein(4, 3, 0.4) == 0


@pytest.mark.parametrize("n", [0, 1, 2, 3, 7])
def test_bernstein_partition_of_unity(n):
    for u in np.linspace(0, 1, 11):
        assert sum(bezier.bernstein(i, n, u) for i in range(n + 1)) == pytest.approx(1.0)


def test_endpoint_interpolation():
    np.testing.assert_allclose(bezier.evaluate(CUBIC, 0.0), CUBIC[0])
    np.testing.assert_allclose(bezier.evaluate(CUBIC, 1.0), CUBIC[-1])


def test_evaluate_cubic_midpoint():
    np.testing.assert_allclose(bezier.evaluate(CUBIC, 0.5), [2.0, 1.875])


def test_de_casteljau_matches_bernstein():
    for P in _random_polygons():
        for u in np.linspace(0, 1, 13):
            np.testing.assert_allclose(
                bezier.de_casteljau(P, u), bezier.evaluate(P, u), atol=DEFAULT_TOLERANCE
            )


def test_de_casteljau_single_point():
    np.testing.assert_allclose(bezier.de_casteljau([[2.0, -1.0]], 0.7), [2.0, -1.0])


def test_operations_leave_input_untouched():
    P = CUBIC.copy()
    bezier.de_casteljau(P, 0.3)
    bezier.trim(P, (0.1, 0.4))
    bezier.split(P, 0.5)
    bezier.derivative(P, 0.2)
    np.testing.assert_array_equal(P, CUBIC)


def test_sample_is_inclusive():
    pts = bezier.sample(CUBIC, 8)
    assert pts.shape == (9, 2)
    np.testing.assert_allclose(pts[0], CUBIC[0])
    np.testing.assert_allclose(pts[-1], CUBIC[-1])
    np.testing.assert_allclose(pts[4], bezier.evaluate(CUBIC, 0.5))


def test_trim_reference_case():
    trimmed = bezier.trim(CUBIC, TrimRange(0.25, 0.75))
    assert trimmed.shape == CUBIC.shape
    np.testing.assert_allclose(bezier.evaluate(trimmed, 0.0), bezier.evaluate(CUBIC, 0.25), atol=1e-12)
    np.testing.assert_allclose(bezier.evaluate(trimmed, 1.0), bezier.evaluate(CUBIC, 0.75), atol=1e-12)
    np.testing.assert_allclose(bezier.evaluate(trimmed, 0.5), bezier.evaluate(CUBIC, 0.5), atol=1e-12)


@pytest.mark.parametrize("u1, u2", [(0.0, 1.0), (0.0, 0.3), (0.6, 1.0), (0.1, 0.15), (0.4, 0.9)])
def test_trim_follows_original_curve(u1, u2):
    for P in _random_polygons(count=5, seed=11):
        trimmed = bezier.trim(P, (u1, u2))
        for v in np.linspace(0, 1, 7):
            np.testing.assert_allclose(
                bezier.evaluate(trimmed, v), bezier.evaluate(P, u1 + v * (u2 - u1)), atol=1e-9
            )


@pytest.mark.parametrize("u1, u2", [(0.5, 0.5), (0.7, 0.2), (-0.1, 0.5), (0.2, 1.1)])
def test_trim_rejects_invalid_range(u1, u2):
    with pytest.raises(ValueError):
        bezier.trim(CUBIC, (u1, u2))


def test_split_reproduces_both_halves():
    head, tail = bezier.split(CUBIC, 0.3)
    np.testing.assert_allclose(head[0], CUBIC[0])
    np.testing.assert_allclose(tail[-1], CUBIC[-1])
    np.testing.assert_allclose(head[-1], tail[0])
    for v in np.linspace(0, 1, 5):
        np.testing.assert_allclose(bezier.evaluate(head, v), bezier.evaluate(CUBIC, 0.3 * v), atol=1e-12)
        np.testing.assert_allclose(
            bezier.evaluate(tail, v), bezier.evaluate(CUBIC, 0.3 + 0.7 * v), atol=1e-12
        )


def test_segments_cover_curve():
    pieces = bezier.segments(CUBIC, 4)
    assert len(pieces) == 4
    for j, piece in enumerate(pieces):
        np.testing.assert_allclose(bezier.evaluate(piece, 0.5), bezier.evaluate(CUBIC, (j + 0.5) / 4), atol=1e-12)


@pytest.mark.parametrize("points", [CUBIC[:3], CUBIC])
def test_to_polynomial_matches_curve(points):
    coeffs_x, coeffs_y = bezier.to_polynomial(points)
    assert len(coeffs_x) == len(points)
    for u in np.linspace(0, 1, 6):
        x, y = bezier.evaluate(points, u)
        assert np.polyval(coeffs_x, u) == pytest.approx(x)
        assert np.polyval(coeffs_y, u) == pytest.approx(y)


def test_to_polynomial_unsupported_degree():
    with pytest.raises(DegreeNotImplemented):
        bezier.to_polynomial(np.vstack([CUBIC, [[5.0, 1.0]]]))


def test_reconstruct_from_intersection_recovers_cubic():
    P0, PStar, P3 = np.array([0.0, 0.0]), np.array([2.0, 3.0]), np.array([5.0, 0.0])
    P1, P2 = bezier.reconstruct_from_intersection(P0, PStar, P3)
    np.testing.assert_allclose(P1, [4.0 / 3.0, 2.0])
    np.testing.assert_allclose(P2, [3.0, 2.0])
    # end tangents of the reconstructed cubic point at PStar
    curve = np.array([P0, P1, P2, P3])
    d0 = bezier.derivative(curve, 0.0)
    d1 = bezier.derivative(curve, 1.0)
    assert _cross(d0, PStar - P0) == pytest.approx(0.0)
    assert _cross(d1, P3 - PStar) == pytest.approx(0.0)


def test_derivative_matches_finite_difference():
    h = 1e-6
    for P in _random_polygons(count=6, seed=5):
        for u in (0.1, 0.5, 0.9):
            fd = (bezier.evaluate(P, u + h) - bezier.evaluate(P, u - h)) / (2 * h)
            np.testing.assert_allclose(bezier.derivative(P, u), fd, atol=1e-5)


def test_derivative_of_constant_curve_is_zero():
    np.testing.assert_allclose(bezier.derivative([[3.0, 4.0]], 0.5), [0.0, 0.0])


def test_derivative_endpoints_follow_control_polygon():
    np.testing.assert_allclose(bezier.derivative(CUBIC, 0.0), 3 * (CUBIC[1] - CUBIC[0]))
    np.testing.assert_allclose(bezier.derivative(CUBIC, 1.0), 3 * (CUBIC[3] - CUBIC[2]))


def test_elevate_preserves_curve():
    elevated = bezier.elevate(CUBIC)
    assert elevated.shape == (5, 2)
    for u in np.linspace(0, 1, 9):
        np.testing.assert_allclose(bezier.evaluate(elevated, u), bezier.evaluate(CUBIC, u), atol=1e-12)


class TestBezierCurve:
    def test_rejects_flat_input(self):
        with pytest.raises(ValueError):
            BezierCurve([1.0, 2.0, 3.0])

    def test_rejects_wrong_degree(self):
        with pytest.raises(ValueError):
            BezierCurve(CUBIC, degree=2)

    def test_evaluate_many(self):
        curve = BezierCurve(CUBIC)
        t = np.linspace(0, 1, 5)
        pts = curve.evaluate(t)
        assert pts.shape == (5, 2)
        np.testing.assert_allclose(pts[2], curve.point(0.5))

    def test_evaluate_out_of_range(self):
        with pytest.raises(ValueError):
            BezierCurve(CUBIC).evaluate(1.5)

    def test_basis_rows_sum_to_one(self):
        basis = BezierCurve(CUBIC).evaluate_basis(np.linspace(0, 1, 4))
        np.testing.assert_allclose(basis.sum(axis=1), np.ones(4))

    def test_second_derivative(self):
        curve = BezierCurve(CUBIC)
        # cubic: B''(0) = 6 (P0 - 2 P1 + P2)
        np.testing.assert_allclose(curve.derivative(0.0, order=2)[0], 6 * (CUBIC[0] - 2 * CUBIC[1] + CUBIC[2]))
        np.testing.assert_allclose(curve.derivative(0.5, order=4)[0], [0.0, 0.0])

    def test_trim_split_and_elevate(self):
        curve = BezierCurve(CUBIC)
        left, right = curve.split(0.5)
        np.testing.assert_allclose(left.point(1.0), right.point(0.0))
        trimmed = curve.trim(0.25, 0.75)
        np.testing.assert_allclose(trimmed.point(0.5), curve.point(0.5))
        raised = curve.elevate_degree_by(2)
        assert raised.degree == 5
        np.testing.assert_allclose(raised.point(0.3), curve.point(0.3), atol=1e-12)

    def test_control_points_are_copied(self):
        P = CUBIC.copy()
        curve = BezierCurve(P)
        P[0] = [9.0, 9.0]
        np.testing.assert_allclose(curve.get_control_points()[0], [0.0, 0.0])
        assert "degree=3" in repr(curve)
