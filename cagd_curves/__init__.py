"""
Parametric curve mathematics for computer-aided geometric design.

Three independent curve families, each a module of pure functions:

- hermite: cubic Hermite segments (endpoints + tangent vectors)
- bezier: Bézier curves of any degree, de Casteljau subdivision and trimming
- bspline: B-splines with Cox-de Boor basis and clamped knot vectors

Example:
    >>> import numpy as np
    >>> from cagd_curves import bezier
    >>>
    >>> control_points = np.array([[0, 0], [1, 2], [3, 3], [4, 0]])
    >>> bezier.evaluate(control_points, 0.5)
    array([2.   , 1.875])
    >>> trimmed = bezier.trim(control_points, (0.25, 0.75))
"""

__version__ = "1.0.0"

from . import bezier, bspline, constants, hermite, matrices
from .bezier import BezierCurve
from .errors import DegreeNotImplemented, DimensionMismatch, KnotVectorWarning
from .types import CubicPolynomial, HermiteForm, TrimRange

__all__ = [
    # Curve modules
    'hermite',
    'bezier',
    'bspline',
    'matrices',
    'constants',

    # Core classes
    'BezierCurve',

    # Value types
    'CubicPolynomial',
    'HermiteForm',
    'TrimRange',

    # Errors
    'DimensionMismatch',
    'DegreeNotImplemented',
    'KnotVectorWarning',
]
